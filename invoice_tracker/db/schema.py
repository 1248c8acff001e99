# invoice_tracker/db/schema.py

from datetime import datetime, timezone

from sqlalchemy import (
    MetaData, Table, Column, Integer, Text,
    Numeric, Date, DateTime, Enum, CheckConstraint
)
from sqlalchemy.engine import Engine

from invoice_tracker.models.invoices import InvoiceStatus

metadata = MetaData()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


invoices = Table(
    "invoices",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("invoice_number", Text, unique=True, nullable=False),
    Column("client_name", Text, nullable=False),
    Column("date_issued", Date, nullable=False),
    Column("amount_due", Numeric(10, 2), nullable=False),
    Column(
        "status",
        Enum(
            InvoiceStatus,
            name="invoice_status",
            values_callable=lambda statuses: [s.value for s in statuses],
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        default=InvoiceStatus.PENDING,
    ),
    Column("description", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, default=_utcnow),
    CheckConstraint("amount_due > 0", name="ck_invoices_amount_due_positive"),
)


def create_schema(engine: Engine, drop: bool = False) -> None:
    if drop:
        metadata.drop_all(engine)
    metadata.create_all(engine)
