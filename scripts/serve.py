# scripts/serve.py
"""
Run the API with uvicorn on the configured host/port.

Equivalent to:
    uvicorn invoice_tracker:app --port 2022
"""

import uvicorn

from invoice_tracker.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "invoice_tracker:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
