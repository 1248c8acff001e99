import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from invoice_tracker.api.invoices import router as invoices_router
from invoice_tracker.config import configure_logging, get_settings
from invoice_tracker.errors import InvoiceError, ValidationError

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Invoice Tracker API",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvoiceError)
def handle_invoice_error(request: Request, exc: InvoiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
    error = ValidationError("Invalid request", details={"errors": errors})
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.get("/health")
def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


app.include_router(invoices_router)
