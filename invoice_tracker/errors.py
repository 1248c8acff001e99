# invoice_tracker/errors.py
"""
Failures surfaced by the invoice service.

Each error carries a stable ``error_code`` and the HTTP status it maps to, so
the API layer can render it and the client can raise the same type again.
"""

from typing import Any, Dict, Optional


class InvoiceError(Exception):
    error_code = "INVOICE_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(InvoiceError):
    """Request shape or constraint violation, detected before touching the store."""

    error_code = "VALIDATION_ERROR"
    status_code = 422


class DuplicateInvoiceNumber(InvoiceError):
    error_code = "DUPLICATE_INVOICE_NUMBER"
    status_code = 409


class InvoiceNotFound(InvoiceError):
    error_code = "INVOICE_NOT_FOUND"
    status_code = 404


class StoreUnavailable(InvoiceError):
    error_code = "STORE_UNAVAILABLE"
    status_code = 503


ERRORS_BY_CODE = {
    cls.error_code: cls
    for cls in (ValidationError, DuplicateInvoiceNumber, InvoiceNotFound, StoreUnavailable)
}
