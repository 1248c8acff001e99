# invoice_tracker/db/store.py
"""
Persistence for invoice rows.

Constraint outcomes the caller is expected to handle (a colliding
invoice_number, an update that matches no row) come back as result
variants rather than exceptions. Anything else the database raises is
reported as StoreUnavailable.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Union

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from invoice_tracker.db.schema import invoices
from invoice_tracker.errors import StoreUnavailable
from invoice_tracker.models.invoices import InvoiceStatus

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


@dataclass(frozen=True)
class Stored:
    row: Row


@dataclass(frozen=True)
class DuplicateNumber:
    invoice_number: str


@dataclass(frozen=True)
class Missing:
    invoice_id: int


InsertResult = Union[Stored, DuplicateNumber]
UpdateResult = Union[Stored, Missing]


# sqlite INTEGER is a signed 64-bit value
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def _is_duplicate_number(exc: IntegrityError) -> bool:
    # sqlite: "UNIQUE constraint failed: invoices.invoice_number"
    # postgres: "... violates unique constraint \"invoices_invoice_number_key\""
    message = str(exc.orig).lower()
    return "unique" in message and "invoice_number" in message


class InvoiceStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    def insert(self, row: Mapping[str, Any]) -> InsertResult:
        """
        Insert one invoice. The store assigns id and created_at.
        """
        try:
            with self.engine.begin() as conn:
                result = conn.execute(invoices.insert().values(**row))
                new_id = result.inserted_primary_key[0]
                stored = conn.execute(
                    select(invoices).where(invoices.c.id == new_id)
                ).mappings().one()
        except IntegrityError as exc:
            if _is_duplicate_number(exc):
                return DuplicateNumber(invoice_number=row["invoice_number"])
            raise StoreUnavailable(
                "Invoice insert rejected by the store",
                details={"reason": str(exc.orig)},
            ) from exc
        except SQLAlchemyError as exc:
            logger.error("Invoice insert failed: %s", exc)
            raise StoreUnavailable("Invoice store is unavailable") from exc

        return Stored(row=dict(stored))

    def select_all(self) -> List[Row]:
        """
        All invoices, most recently created first.
        """
        stmt = select(invoices).order_by(
            invoices.c.created_at.desc(),
            invoices.c.id.desc(),
        )
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            logger.error("Invoice listing failed: %s", exc)
            raise StoreUnavailable("Invoice store is unavailable") from exc

        return [dict(row) for row in rows]

    def update_status(self, invoice_id: int, status: InvoiceStatus) -> UpdateResult:
        if not MIN_ID <= invoice_id <= MAX_ID:
            return Missing(invoice_id=invoice_id)

        try:
            with self.engine.begin() as conn:
                result = conn.execute(
                    invoices.update()
                    .where(invoices.c.id == invoice_id)
                    .values(status=status)
                )
                if result.rowcount == 0:
                    return Missing(invoice_id=invoice_id)

                updated = conn.execute(
                    select(invoices).where(invoices.c.id == invoice_id)
                ).mappings().one()
        except SQLAlchemyError as exc:
            logger.error("Invoice status update failed: %s", exc)
            raise StoreUnavailable("Invoice store is unavailable") from exc

        return Stored(row=dict(updated))

    def count_by_number(self, invoice_number: str) -> int:
        stmt = (
            select(func.count())
            .select_from(invoices)
            .where(invoices.c.invoice_number == invoice_number)
        )
        try:
            with self.engine.connect() as conn:
                return conn.execute(stmt).scalar_one()
        except SQLAlchemyError as exc:
            raise StoreUnavailable("Invoice store is unavailable") from exc
