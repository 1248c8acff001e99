# invoice_tracker/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from invoice_tracker.config import get_settings


def make_engine(url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # FastAPI runs sync routes in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args, future=True)


@lru_cache()
def get_engine() -> Engine:
    settings = get_settings()
    # echo=True if you want to see SQL printed in the terminal
    return make_engine(settings.database_url, echo=settings.db_echo)
