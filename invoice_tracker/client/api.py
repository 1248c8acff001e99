# invoice_tracker/client/api.py
"""
HTTP client for the invoice API.

Error responses are turned back into the exception types the service
raised (looked up by ``error_code``), so callers handle the same failures
whether they talk to the service in-process or over HTTP.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx
import pydantic

from invoice_tracker.config import get_settings
from invoice_tracker.errors import ERRORS_BY_CODE, InvoiceError, StoreUnavailable
from invoice_tracker.models.invoices import InvoiceOut, InvoiceStatus

logger = logging.getLogger(__name__)


class InvoiceApiClient:
    def __init__(self, http: Optional[httpx.Client] = None, timeout: float = 10.0):
        self.http = http or httpx.Client(base_url=get_settings().api_base_url, timeout=timeout)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "InvoiceApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, url: str, json: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = self.http.request(method, url, json=json)
        except httpx.HTTPError as exc:
            raise StoreUnavailable(f"Invoice service unreachable: {exc}") from exc

        if not response.is_success:
            raise self._error_from(response)
        try:
            return response.json()
        except ValueError as exc:
            raise StoreUnavailable(f"Unreadable response from {method} {url}") from exc

    @staticmethod
    def _invoice(data: Any) -> InvoiceOut:
        try:
            return InvoiceOut.model_validate(data)
        except pydantic.ValidationError as exc:
            raise StoreUnavailable("Invoice service returned a malformed invoice") from exc

    @staticmethod
    def _error_from(response: httpx.Response) -> InvoiceError:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        error_cls = ERRORS_BY_CODE.get(body.get("error_code"), StoreUnavailable)
        message = body.get("message") or f"HTTP {response.status_code}: {response.text}"
        return error_cls(message, details=body.get("details"))

    def create_invoice(self, payload: Dict[str, Any]) -> InvoiceOut:
        data = self._request("POST", "/invoices", json=payload)
        return self._invoice(data)

    def get_invoices(self) -> List[InvoiceOut]:
        data = self._request("GET", "/invoices")
        if not isinstance(data, list):
            raise StoreUnavailable("Invoice service returned a malformed invoice list")
        return [self._invoice(item) for item in data]

    def update_invoice_status(self, invoice_id: int, status: InvoiceStatus) -> InvoiceOut:
        data = self._request(
            "PATCH",
            f"/invoices/{invoice_id}/status",
            json={"status": InvoiceStatus(status).value},
        )
        return self._invoice(data)
