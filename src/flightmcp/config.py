"""Server configuration — secrets and tunables read from the environment."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, field_validator

from flightmcp.providers.serpapi.client import DEFAULT_BASE_URL

ENV_API_KEY = "SERPAPI_KEY"
ENV_BASE_URL = "SERPAPI_BASE_URL"
ENV_REQUEST_TIMEOUT = "FLIGHTMCP_REQUEST_TIMEOUT"
ENV_LOG_FILE = "FLIGHTMCP_LOG_FILE"
ENV_LOG_LEVEL = "FLIGHTMCP_LOG_LEVEL"


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


class ServerSettings(BaseModel):
    """Process-wide settings, fixed at startup.

    The API key is passed explicitly to the provider; nothing reads it from
    ambient state afterwards.
    """

    serpapi_api_key: SecretStr
    serpapi_base_url: str = DEFAULT_BASE_URL
    request_timeout: float | None = Field(default=None, gt=0)
    log_file: str | None = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"unknown log level '{value}'"
            raise ValueError(msg)
        return level


def load_settings(*, dotenv: bool = True) -> ServerSettings:
    """Build :class:`ServerSettings` from the environment (and ``.env``).

    Raises
    ------
    ConfigurationError
        If ``SERPAPI_KEY`` is missing or a value fails validation.
    """
    if dotenv:
        load_dotenv()

    api_key = os.getenv(ENV_API_KEY, "").strip()
    if not api_key:
        msg = f"Missing {ENV_API_KEY} in environment."
        raise ConfigurationError(msg)

    timeout_raw = os.getenv(ENV_REQUEST_TIMEOUT, "").strip()
    try:
        return ServerSettings(
            serpapi_api_key=SecretStr(api_key),
            serpapi_base_url=os.getenv(ENV_BASE_URL) or DEFAULT_BASE_URL,
            request_timeout=float(timeout_raw) if timeout_raw else None,
            log_file=os.getenv(ENV_LOG_FILE) or None,
            log_level=os.getenv(ENV_LOG_LEVEL, "INFO"),
        )
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
