from os import environ as env
from typing import Any, Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from ._utils.constants import (
    DEFAULT_TIMEOUT,
    ENV_BASE_URL,
    ENV_DEBUG,
    ENV_TIMEOUT,
    ENV_VERIFY_SSL,
)

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str) -> Optional[bool]:
    value = env.get(name)
    if value is None or value == "":
        return None
    return value.strip().lower() in _TRUE_VALUES


class Config(BaseModel):
    base_url: str
    debug: bool = False
    timeout: Optional[float] = DEFAULT_TIMEOUT
    follow_redirects: bool = True
    verify_ssl: bool = True
    retries: int = 0
    loopback_fallback: bool = False
    raise_errors: bool = True

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: Any) -> str:
        if isinstance(value, httpx.URL):
            value = str(value)
        if not isinstance(value, str):
            raise ValueError("Invalid URL")

        try:
            url = httpx.URL(value.strip())
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid URL: {e}") from e

        assert url.scheme in ("http", "https"), "Invalid URL scheme"
        assert url.host, "Invalid URL host"
        return str(url)

    @field_validator("retries")
    @classmethod
    def validate_retries(cls, value: int) -> int:
        assert value >= 0, "retries must not be negative"
        return value

    @classmethod
    def from_env(cls, base_url: Optional[str] = None, **overrides: Any) -> "Config":
        """Build a config from arguments, falling back to environment variables.

        A ``.env`` file in the working directory is loaded first.
        """
        load_dotenv()

        values: dict[str, Any] = {"base_url": base_url or env.get(ENV_BASE_URL)}

        debug = _env_flag(ENV_DEBUG)
        if debug is not None:
            values["debug"] = debug

        verify_ssl = _env_flag(ENV_VERIFY_SSL)
        if verify_ssl is not None:
            values["verify_ssl"] = verify_ssl

        timeout = env.get(ENV_TIMEOUT)
        if timeout:
            values["timeout"] = float(timeout)

        values.update(overrides)
        return cls(**values)
