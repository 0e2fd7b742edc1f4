from typing import Generator

import pytest
from click.testing import CliRunner

from httpflex import HttpFlex, JsonCodec
from httpflex._utils import _json_codec


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset process-wide defaults and environment before each test."""
    for name in (
        "HTTPFLEX_BASE_URL",
        "HTTPFLEX_DEBUG",
        "HTTPFLEX_TIMEOUT",
        "HTTPFLEX_VERIFY_SSL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(_json_codec, "_default_codec", JsonCodec())
    monkeypatch.setattr(HttpFlex, "_default_debug", False)


@pytest.fixture
def base_url() -> str:
    return "https://test.example.com"


@pytest.fixture
def endpoint(base_url: str) -> str:
    return f"{base_url}/api/items"


@pytest.fixture
def flex(endpoint: str) -> Generator[HttpFlex, None, None]:
    with HttpFlex(endpoint) as client:
        yield client


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()
