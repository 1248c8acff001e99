# invoice_tracker/api/invoices.py

from typing import List

from fastapi import APIRouter, Depends, status

from invoice_tracker.db.engine import get_engine
from invoice_tracker.db.store import InvoiceStore
from invoice_tracker.models.invoices import (
    InvoiceCreate,
    InvoiceOut,
    InvoiceStatusUpdate,
    StatusChange,
)
from invoice_tracker.services import invoices as service

router = APIRouter(prefix="/invoices", tags=["invoices"])


def get_store() -> InvoiceStore:
    return InvoiceStore(get_engine())


@router.post("", response_model=InvoiceOut, status_code=status.HTTP_201_CREATED)
def create_invoice(
    payload: InvoiceCreate,
    store: InvoiceStore = Depends(get_store),
) -> InvoiceOut:
    """
    Record a new invoice. 409 if the invoice_number is already taken.
    """
    return service.create_invoice(store, payload)


@router.get("", response_model=List[InvoiceOut])
def list_invoices(store: InvoiceStore = Depends(get_store)) -> List[InvoiceOut]:
    """
    Return all invoices, newest first.
    """
    return service.get_invoices(store)


@router.patch("/{invoice_id}/status", response_model=InvoiceOut)
def update_invoice_status(
    invoice_id: int,
    change: StatusChange,
    store: InvoiceStore = Depends(get_store),
) -> InvoiceOut:
    """
    Set an invoice to Pending or Paid. 404 if no invoice has this id.
    """
    return service.update_invoice_status(
        store, InvoiceStatusUpdate(id=invoice_id, status=change.status)
    )
