from logging import getLogger
from typing import Any, Optional

import httpx
from httpx import Client, Response

from .._config import Config
from .._utils._request_spec import RequestSpec
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import LOGGER_NAME
from ..models.errors import TransportFailure
from ..models.response import ReceiveMode


class BaseService:
    """Owns the pooled ``httpx.Client`` and performs single exchanges.

    The client is created on first use and rebuilt whenever the proxy changes,
    since httpx fixes proxies at client construction.
    """

    def __init__(self, config: Config) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config
        self._proxy: Optional[httpx.Proxy] = None
        self._client: Optional[Client] = None

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = Client(**self._client_kwargs())
        return self._client

    def _client_kwargs(self) -> dict[str, Any]:
        return get_httpx_client_kwargs(
            timeout=self._config.timeout,
            verify_ssl=self._config.verify_ssl,
            follow_redirects=self._config.follow_redirects,
            retries=self._config.retries,
            proxy=self._proxy,
        )

    def _set_proxy(self, proxy: Optional[httpx.Proxy]) -> None:
        self._proxy = proxy
        self._reset_client()

    def _reset_client(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def send(self, spec: RequestSpec, mode: ReceiveMode) -> Response:
        """Send a request spec, receiving the body as ``mode`` requires.

        In stream mode the returned response is still open and must be closed
        by whoever drains it.

        Raises:
            TransportFailure: If httpx fails to complete the exchange.
        """
        request = spec.consume(self.client)

        try:
            return self.client.send(request, stream=mode is ReceiveMode.STREAM)
        except httpx.HTTPError as e:
            raise TransportFailure(f"{spec.method} {spec.url} failed", e) from e

    def close(self) -> None:
        self._reset_client()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
