"""Centralized application configuration using Pydantic Settings (v2).

Values are read from real environment variables first, then from `.env`
files at the repository root (.env, .env.local, .env.dev/.env.test/.env.prod).

The STANDS4 credentials are optional. Without them the quote endpoint reports
a service error and curated words are served without screenplay context.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_QUOTES_URL = "https://www.stands4.com/services/v2/quotes.php"
DEFAULT_SCRIPTS_URL = "https://www.stands4.com/services/v2/scripts.php"
DEFAULT_DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class Settings(BaseSettings):
    """Sticky Words configuration.

    Every field is populated from the environment variable named in its
    alias (``STICKYWORDS_ENV``, ``STANDS4_UID`` ...). Keyword construction
    accepts either the alias or the field name.
    """

    environment: EnvName = Field(default="dev", alias="STICKYWORDS_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")

    # STANDS4 account, shared by the quotes and scripts APIs.
    stands4_uid: str | None = Field(default=None, alias="STANDS4_UID")
    stands4_token: str | None = Field(default=None, alias="STANDS4_API_KEY")
    quotes_url: str = Field(default=DEFAULT_QUOTES_URL, alias="STANDS4_QUOTES_URL")
    scripts_url: str = Field(default=DEFAULT_SCRIPTS_URL, alias="STANDS4_SCRIPTS_URL")
    scripts_enabled: bool = Field(default=True, alias="STANDS4_SCRIPTS_ENABLED")
    dictionary_url: str = Field(default=DEFAULT_DICTIONARY_URL, alias="DICTIONARY_API_URL")

    http_timeout_seconds: float = Field(default=10.0, gt=0, alias="HTTP_TIMEOUT_SECONDS")
    daily_request_limit: int = Field(
        default=100,
        ge=0,
        alias="DAILY_REQUEST_LIMIT",
        description="STANDS4 calls allowed per calendar day (quotes + scripts)",
    )

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("stands4_uid", "stands4_token", mode="before")
    @classmethod
    def _blank_credential_is_missing(cls, value: object) -> object:
        # `STANDS4_UID=` in a copied .env.example means "not set".
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def stands4_configured(self) -> bool:
        """Return True when both STANDS4 credentials are present."""
        return bool(self.stands4_uid and self.stands4_token)

    def log_level_numeric(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Build the process-wide `Settings` once.

    Tests call ``load_settings.cache_clear()`` after patching the environment.
    """
    os.environ.setdefault("STICKYWORDS_ENV", "dev")
    return Settings()


# Import-time snapshot for modules that only need to read configuration.
settings: Settings = load_settings()


def get_logger(name: str = "stickywords") -> logging.Logger:
    """Return a named logger writing to stderr at the configured level.

    A handler is attached only the first time a name is requested, so calling
    this at module import in many places never duplicates output.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
