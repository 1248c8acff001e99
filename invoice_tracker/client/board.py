# invoice_tracker/client/board.py
"""
View-state for the invoice form and list.

``ViewState`` is immutable; every action computes a new one and swaps it in.
Failed actions only set ``error`` (the user-visible error channel) and
leave the invoice list and form as they were.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Callable, Dict, Optional, Tuple

from invoice_tracker.client.api import InvoiceApiClient
from invoice_tracker.errors import InvoiceError
from invoice_tracker.models.invoices import InvoiceOut, InvoiceStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvoiceForm:
    invoice_number: str = ""
    client_name: str = ""
    date_issued: date = field(default_factory=date.today)
    amount_due: float = 0.0
    status: InvoiceStatus = InvoiceStatus.PENDING
    description: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return {
            "invoice_number": self.invoice_number,
            "client_name": self.client_name,
            "date_issued": self.date_issued.isoformat(),
            "amount_due": self.amount_due,
            "status": self.status.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class ViewState:
    invoices: Tuple[InvoiceOut, ...] = ()
    form: InvoiceForm = field(default_factory=InvoiceForm)
    is_loading: bool = False
    is_creating: bool = False
    error: Optional[str] = None


class InvoiceBoard:
    def __init__(self, api: InvoiceApiClient, today: Callable[[], date] = date.today):
        self.api = api
        self.today = today
        self.state = ViewState(form=self._blank_form())

    def _blank_form(self) -> InvoiceForm:
        return InvoiceForm(date_issued=self.today())

    def _fail(self, action: str, exc: InvoiceError, **flags) -> ViewState:
        logger.error("Failed to %s: %s", action, exc.message)
        self.state = replace(self.state, error=exc.message, **flags)
        return self.state

    def load(self) -> ViewState:
        """
        Fetch the full list and replace the local one with it.
        """
        self.state = replace(self.state, is_loading=True)
        try:
            invoices = self.api.get_invoices()
        except InvoiceError as exc:
            return self._fail("load invoices", exc, is_loading=False)

        self.state = replace(
            self.state, invoices=tuple(invoices), is_loading=False, error=None
        )
        return self.state

    refresh = load

    def edit_form(self, **changes: Any) -> ViewState:
        if "status" in changes:
            changes["status"] = InvoiceStatus(changes["status"])
        self.state = replace(self.state, form=replace(self.state.form, **changes))
        return self.state

    def submit(self) -> ViewState:
        """
        Create an invoice from the form. On success the new invoice goes to
        the front of the list and the form is reset.
        """
        self.state = replace(self.state, is_creating=True)
        try:
            created = self.api.create_invoice(self.state.form.to_payload())
        except InvoiceError as exc:
            return self._fail("create invoice", exc, is_creating=False)

        self.state = replace(
            self.state,
            invoices=(created,) + self.state.invoices,
            form=self._blank_form(),
            is_creating=False,
            error=None,
        )
        return self.state

    def change_status(self, invoice_id: int, status: InvoiceStatus) -> ViewState:
        try:
            updated = self.api.update_invoice_status(invoice_id, status)
        except InvoiceError as exc:
            return self._fail("update invoice status", exc)

        self.state = replace(
            self.state,
            invoices=tuple(
                updated if invoice.id == invoice_id else invoice
                for invoice in self.state.invoices
            ),
            error=None,
        )
        return self.state

    def dismiss_error(self) -> ViewState:
        self.state = replace(self.state, error=None)
        return self.state
