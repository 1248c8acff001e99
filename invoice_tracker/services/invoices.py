# invoice_tracker/services/invoices.py
"""
The three invoice operations: create, list, update status.

Input is validated before the store is touched. Amounts cross the
storage boundary only through money.to_storage / money.from_storage.
"""

import logging
from typing import Any, List, Mapping, Type, TypeVar, Union

import pydantic

from invoice_tracker import money
from invoice_tracker.db.store import DuplicateNumber, InvoiceStore, Missing
from invoice_tracker.errors import DuplicateInvoiceNumber, InvoiceNotFound, ValidationError
from invoice_tracker.models.invoices import InvoiceCreate, InvoiceOut, InvoiceStatusUpdate

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=pydantic.BaseModel)


def _parse(model: Type[M], data: Union[M, Mapping[str, Any]]) -> M:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        raise ValidationError(
            f"Invalid {model.__name__} request",
            details={"errors": errors},
        ) from exc


def _row_to_invoice(row) -> InvoiceOut:
    return InvoiceOut(
        id=row["id"],
        invoice_number=row["invoice_number"],
        client_name=row["client_name"],
        date_issued=row["date_issued"],
        amount_due=money.from_storage(row["amount_due"]),
        status=row["status"],
        description=row["description"],
        created_at=row["created_at"],
    )


def create_invoice(
    store: InvoiceStore, data: Union[InvoiceCreate, Mapping[str, Any]]
) -> InvoiceOut:
    payload = _parse(InvoiceCreate, data)

    result = store.insert(
        {
            "invoice_number": payload.invoice_number,
            "client_name": payload.client_name,
            "date_issued": payload.date_issued,
            "amount_due": money.to_storage(payload.amount_due),
            "status": payload.status,
            "description": payload.description,
        }
    )

    if isinstance(result, DuplicateNumber):
        logger.warning("Rejected duplicate invoice number %r", result.invoice_number)
        raise DuplicateInvoiceNumber(
            f"Invoice number {result.invoice_number!r} already exists",
            details={"invoice_number": result.invoice_number},
        )

    invoice = _row_to_invoice(result.row)
    logger.info("Created invoice %s (id=%s)", invoice.invoice_number, invoice.id)
    return invoice


def get_invoices(store: InvoiceStore) -> List[InvoiceOut]:
    return [_row_to_invoice(row) for row in store.select_all()]


def update_invoice_status(
    store: InvoiceStore, data: Union[InvoiceStatusUpdate, Mapping[str, Any]]
) -> InvoiceOut:
    payload = _parse(InvoiceStatusUpdate, data)

    result = store.update_status(payload.id, payload.status)

    if isinstance(result, Missing):
        logger.warning("Status update for unknown invoice id=%s", result.invoice_id)
        raise InvoiceNotFound(
            f"Invoice with id {result.invoice_id} not found",
            details={"id": result.invoice_id},
        )

    invoice = _row_to_invoice(result.row)
    logger.info("Invoice %s (id=%s) is now %s", invoice.invoice_number, invoice.id, invoice.status.value)
    return invoice
