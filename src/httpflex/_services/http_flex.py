from logging import getLogger
from typing import Any, Callable, ClassVar, List, Optional, Tuple, TypeVar, Union

import httpx
from httpx import URL
from pydantic import ValidationError

from .._config import Config
from .._encoding import decode_response, encode_body, receive_mode_for
from .._encoding._body_encoder import EncodedBody
from .._utils._json_codec import JsonCodec, get_default_codec, set_default_codec
from .._utils._logs import setup_logging
from .._utils._request_spec import RequestSpec
from .._utils.constants import (
    DEBUG_BODY_PREVIEW,
    HEADER_CONTENT_TYPE,
    LOGGER_NAME,
    LOOPBACK_URL,
)
from ..models.content_type import ContentTypeLike
from ..models.errors import (
    ConfigurationError,
    DecodeFailure,
    EncodingFailure,
    TransportFailure,
)
from ..models.response import FlexResponse, ReceiveMode
from ..models.result import Result
from ._base_service import BaseService

R = TypeVar("R")


def _build_config(url: Union[str, URL, None], config: Optional[Config]) -> Config:
    if url is None:
        if config is not None:
            return config
        try:
            return Config.from_env()
        except ValidationError as e:
            raise ConfigurationError(None, e) from e

    settings = config.model_dump(exclude={"base_url"}) if config is not None else {}
    try:
        return Config(base_url=url, **settings)
    except ValidationError as e:
        if not settings.get("loopback_fallback"):
            raise ConfigurationError(url, e) from e
        getLogger(LOGGER_NAME).warning(
            f"Invalid target address {str(url)!r}, falling back to {LOOPBACK_URL}"
        )
        return Config(base_url=LOOPBACK_URL, **settings)


def _preview(body: Any) -> str:
    text = body if isinstance(body, str) else repr(body)
    if len(text) > DEBUG_BODY_PREVIEW:
        return text[:DEBUG_BODY_PREVIEW] + "..."
    return text


class HttpFlex(BaseService):
    """Fluent client for a single target address.

    Headers, proxy and codec are set with chainable calls; each verb then
    encodes the body according to its shape, sends it and decodes the response
    into the requested shape.

    Examples:
        ```python
        from httpflex import HttpFlex, Multipart

        user = HttpFlex("https://api.example.com/users/1").get(User)

        with HttpFlex("https://api.example.com/upload") as flex:
            flex.header("Authorization", "Bearer ...").post(
                Multipart().put("file", Path("report.pdf"))
            )
        ```

    Verbs raise ``HttpFlexError`` subclasses on failure. Pass
    ``raise_errors=False`` to log failures and get ``None`` back instead, or
    use ``exchange`` to receive a ``Result``.
    """

    _default_debug: ClassVar[bool] = False

    def __init__(
        self,
        url: Union[str, URL, None] = None,
        *,
        config: Optional[Config] = None,
        raise_errors: Optional[bool] = None,
        codec: Optional[JsonCodec] = None,
    ) -> None:
        super().__init__(_build_config(url, config))

        self._url = URL(self._config.base_url)
        self._headers: List[Tuple[str, str]] = []
        self._codec = codec
        self._debug = self._config.debug or HttpFlex._default_debug
        self._raise_errors = (
            self._config.raise_errors if raise_errors is None else raise_errors
        )
        self._proxy_url: Optional[str] = None
        self._proxy_credentials: Optional[Tuple[str, str]] = None
        self._last_response: Optional[FlexResponse] = None

        if self._debug:
            setup_logging(should_debug=True)

    @classmethod
    def instance(cls, url: Union[str, URL]) -> "HttpFlex":
        return cls(url)

    @classmethod
    def default_debug(cls, allow_debug: bool) -> None:
        """Turn debug logging on or off for clients created afterwards."""
        cls._default_debug = allow_debug

    @staticmethod
    def set_default_codec(codec: JsonCodec) -> None:
        """Replace the JSON codec used by clients and forms without their own."""
        set_default_codec(codec)

    @property
    def url(self) -> URL:
        return self._url

    @property
    def codec(self) -> JsonCodec:
        return self._codec or get_default_codec()

    @property
    def request_headers(self) -> List[Tuple[str, str]]:
        return list(self._headers)

    def debug(self, allow_debug: bool) -> "HttpFlex":
        self._debug = allow_debug
        if allow_debug:
            setup_logging(should_debug=True)
        return self

    def set_codec(self, codec: JsonCodec) -> "HttpFlex":
        self._codec = codec
        return self

    def header(self, name: str, value: str) -> "HttpFlex":
        self._headers.append((name, value))
        return self

    def headers(self, *key_values: str) -> "HttpFlex":
        """Add headers given as alternating names and values."""
        if len(key_values) % 2 != 0:
            raise ValueError("headers() expects an even number of name/value arguments")
        for name, value in zip(key_values[::2], key_values[1::2], strict=True):
            self.header(name, value)
        return self

    def content_type(self, content_type: ContentTypeLike) -> "HttpFlex":
        self._headers = [
            (name, value)
            for name, value in self._headers
            if name.lower() != HEADER_CONTENT_TYPE.lower()
        ]
        return self.header(*content_type.header_values())

    def proxy(self, host: str, port: int) -> "HttpFlex":
        self._proxy_url = f"http://{host}:{port}"
        self._apply_proxy()
        return self

    def proxy_auth(self, username: str, password: str) -> "HttpFlex":
        """Set Basic credentials for the proxy set with ``proxy``."""
        self._proxy_credentials = (username, password)
        self._apply_proxy()
        return self

    def _apply_proxy(self) -> None:
        if self._proxy_url is None:
            return
        self._set_proxy(httpx.Proxy(self._proxy_url, auth=self._proxy_credentials))

    def execute(self, consumer: Callable[["HttpFlex"], Any]) -> "HttpFlex":
        consumer(self)
        return self

    def compute(self, function: Callable[["HttpFlex"], R]) -> R:
        return function(self)

    def read_response(self) -> Optional[FlexResponse]:
        """Return the response of the last exchange, if any."""
        return self._last_response

    def _request_spec(self, encoded: EncodedBody) -> RequestSpec:
        return RequestSpec(
            method=encoded.method,
            url=self._url,
            headers=list(self._headers),
            proxy=self._proxy_url,
            content=encoded.content,
            content_type=encoded.content_type,
        )

    def _log_request(self, spec: RequestSpec, body: Any) -> None:
        if not self._debug:
            return
        self._logger.debug(f"Request : {spec.method} {spec.url}")
        if spec.proxy is not None:
            self._logger.debug(f"Proxy : {spec.proxy}")
        if body is not None:
            self._logger.debug(f"Request Body : {_preview(body)}")

    def _log_response(self, response: FlexResponse) -> None:
        if not self._debug:
            return
        match response.mode:
            case ReceiveMode.STREAM:
                length = response.headers.get("Content-Length", "unknown")
                self._logger.debug(f"Response Body: stream, Content-Length {length}")
            case ReceiveMode.BYTES:
                self._logger.debug(
                    f"Response Body: Bytes {len(response.payload) // 1024}KB"
                )
            case _:
                self._logger.debug(
                    f"Response Body: {_preview(response.http_response.text)}"
                )

    def _exchange(self, method: str, body: Any, shape: Any) -> Any:
        mode = receive_mode_for(shape)
        encoded = encode_body(method, body, self.codec)
        spec = self._request_spec(encoded)
        self._log_request(spec, body)

        response = self.send(spec, mode)
        try:
            payload = decode_response(response, shape, mode, self.codec)
        except DecodeFailure:
            response.close()
            raise

        self._last_response = FlexResponse(
            mode=mode,
            status_code=response.status_code,
            headers=response.headers,
            payload=payload,
            http_response=response,
        )
        self._log_response(self._last_response)
        return payload

    def exchange(
        self, method: str, body: Any = None, shape: Any = str
    ) -> Result[Any]:
        """Send one request and report the outcome as a ``Result``.

        Encoding, transport and decode failures are logged and returned in
        ``Result.error``; they are never raised from here.

        Args:
            method (str): HTTP method, in any case.
            body (Any): Request body; see ``encode_body`` for accepted shapes.
            shape (Any): Requested result shape (``str``, ``bytes``,
                ``BinaryIO`` or any pydantic-compatible type).

        Raises:
            PreconditionViolation: If the body is an empty or closed form.
        """
        try:
            return Result.success(self._exchange(method, body, shape))
        except (EncodingFailure, TransportFailure, DecodeFailure) as e:
            self._logger.error(f"{method.upper()} {self._url} failed: {e}")
            return Result.failure(e)

    def _call(self, method: str, body: Any, shape: Any) -> Any:
        if self._raise_errors:
            return self._exchange(method, body, shape)
        return self.exchange(method, body, shape).value

    def get(self, shape: Any = str) -> Any:
        """Send a GET request and decode the response into ``shape``."""
        return self._call("GET", None, shape)

    def post(self, body: Any = None, shape: Any = str) -> Any:
        """Send a POST request.

        Args:
            body (Any): ``str``, bytes, an open stream, a ``pathlib.Path``, a
                ``Multipart`` or ``UrlEncoded`` form, or any other value, which
                is sent as JSON.
            shape (Any): Requested result shape. Defaults to ``str``.
        """
        return self._call("POST", body, shape)

    def delete(self, shape: Any = str) -> Any:
        return self._call("DELETE", None, shape)

    def method(self, method: str, body: Any = None, shape: Any = str) -> Any:
        """Send a request with any method (e.g. "put", "PATCH", "options")."""
        return self._call(method, body, shape)
