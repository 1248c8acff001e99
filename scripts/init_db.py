import argparse
import logging

from invoice_tracker.config import configure_logging
from invoice_tracker.db.engine import get_engine
from invoice_tracker.db.schema import create_schema

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Create the invoices table")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args()

    configure_logging()
    engine = get_engine()
    create_schema(engine, drop=args.drop)
    logger.info("DB schema created at %s", engine.url)

if __name__ == "__main__":
    main()
