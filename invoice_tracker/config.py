# invoice_tracker/config.py

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Settings(BaseSettings):
    """
    Runtime configuration, read from INVOICE_* environment variables or .env.
    """

    database_url: str = "sqlite:///db.sqlite"  # file in project root
    db_echo: bool = False

    log_level: str = "INFO"

    server_host: str = "127.0.0.1"
    server_port: int = 2022
    api_base_url: str = "http://127.0.0.1:2022"
    cors_origins: List[str] = ["*"]

    class Config:
        env_prefix = "INVOICE_"
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
    )
