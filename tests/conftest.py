"""
Shared fixtures: an isolated in-memory SQLite store per test, and a
FastAPI TestClient whose routes use that store.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from invoice_tracker.api.invoices import get_store
from invoice_tracker.db.schema import create_schema
from invoice_tracker.db.store import InvoiceStore
from invoice_tracker.main import app


@pytest.fixture
def engine():
    # StaticPool: TestClient calls routes from a worker thread, and every
    # thread must see the same in-memory database.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> InvoiceStore:
    return InvoiceStore(engine)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def invoice_input() -> dict:
    return {
        "invoice_number": "INV-2024-001",
        "client_name": "Test Client Corp",
        "date_issued": date(2024, 1, 15),
        "amount_due": 1250.75,
        "status": "Pending",
        "description": "Software development services for Q1 2024",
    }
