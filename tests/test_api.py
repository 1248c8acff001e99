from fastapi import status

from invoice_tracker.api.invoices import get_store
from invoice_tracker.config import get_settings
from invoice_tracker.db.engine import get_engine

PAYLOAD = {
    "invoice_number": "INV-001",
    "client_name": "Acme",
    "date_issued": "2024-01-01",
    "amount_due": 1250.75,
    "status": "Pending",
    "description": "Consulting",
}


def assert_error(response, status_code, error_code):
    assert response.status_code == status_code, response.text
    body = response.json()
    assert body["error_code"] == error_code
    assert body["message"]
    return body


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_then_mark_paid(client):
    created = client.post("/invoices", json=PAYLOAD)

    assert created.status_code == status.HTTP_201_CREATED
    invoice = created.json()
    assert invoice["id"] == 1
    assert invoice["amount_due"] == 1250.75
    assert invoice["status"] == "Pending"
    assert invoice["date_issued"] == "2024-01-01"

    updated = client.patch(f"/invoices/{invoice['id']}/status", json={"status": "Paid"})

    assert updated.status_code == 200
    assert updated.json() == {**invoice, "status": "Paid"}


def test_list_newest_first(client):
    assert client.get("/invoices").json() == []

    for number in ("INV-001", "INV-002"):
        client.post("/invoices", json={**PAYLOAD, "invoice_number": number})

    listed = client.get("/invoices").json()

    assert [i["invoice_number"] for i in listed] == ["INV-002", "INV-001"]
    assert all(isinstance(i["amount_due"], float) for i in listed)


def test_status_defaults_to_pending(client):
    payload = {k: v for k, v in PAYLOAD.items() if k != "status"}

    assert client.post("/invoices", json=payload).json()["status"] == "Pending"


def test_duplicate_number_conflicts(client):
    client.post("/invoices", json=PAYLOAD)

    response = client.post("/invoices", json={**PAYLOAD, "client_name": "Other"})

    body = assert_error(response, status.HTTP_409_CONFLICT, "DUPLICATE_INVOICE_NUMBER")
    assert body["details"] == {"invoice_number": "INV-001"}
    assert len(client.get("/invoices").json()) == 1


def test_validation_errors(client):
    response = client.post("/invoices", json={**PAYLOAD, "amount_due": 0})

    body = assert_error(response, 422, "VALIDATION_ERROR")
    assert body["details"]["errors"][0]["loc"] == ["body", "amount_due"]
    assert client.get("/invoices").json() == []


def test_invalid_status_value(client):
    created = client.post("/invoices", json=PAYLOAD).json()

    response = client.patch(f"/invoices/{created['id']}/status", json={"status": "Overdue"})

    assert_error(response, 422, "VALIDATION_ERROR")


def test_update_unknown_invoice(client):
    response = client.patch("/invoices/99999/status", json={"status": "Paid"})

    body = assert_error(response, status.HTTP_404_NOT_FOUND, "INVOICE_NOT_FOUND")
    assert body["message"] == "Invoice with id 99999 not found"


def test_default_store_uses_configured_database():
    store = get_store()

    assert store.engine is get_engine()
    assert str(store.engine.url) == get_settings().database_url


def test_update_id_beyond_integer_range(client):
    response = client.patch(f"/invoices/{2 ** 63}/status", json={"status": "Paid"})

    assert_error(response, status.HTTP_404_NOT_FOUND, "INVOICE_NOT_FOUND")
