# invoice_tracker/models/invoices.py

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field


class InvoiceStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"


class InvoiceCreate(BaseModel):
    invoice_number: str = Field(..., min_length=1, description="Unique, e.g. INV-2024-001")
    client_name: str = Field(..., min_length=1)
    date_issued: date
    amount_due: float = Field(..., ge=0.01, le=99999999.99)  # numeric(10, 2)
    status: InvoiceStatus = InvoiceStatus.PENDING
    description: str = Field(..., min_length=1)


class InvoiceStatusUpdate(BaseModel):
    id: int
    status: InvoiceStatus


class StatusChange(BaseModel):
    """Request body for PATCH /invoices/{id}/status."""

    status: InvoiceStatus


class InvoiceOut(BaseModel):
    id: int
    invoice_number: str
    client_name: str
    date_issued: date
    amount_due: float
    status: InvoiceStatus
    description: str
    created_at: datetime

    class Config:
        from_attributes = True
