import io
from typing import IO, Any, BinaryIO, Callable, Iterator, List, Optional, get_origin

import httpx
from pydantic import PydanticUserError, ValidationError

from .._utils._json_codec import JsonCodec, get_default_codec
from .._utils.constants import CHUNK_SIZE
from ..models.errors import DecodeFailure, TransportFailure
from ..models.response import ReceiveMode


class ResponseStream(io.RawIOBase):
    """A readable binary stream over a response opened in stream mode.

    The caller owns it: read it to the end (or not) and close it, which
    releases the underlying connection.
    """

    def __init__(self, response: httpx.Response, chunk_size: int = CHUNK_SIZE):
        super().__init__()
        self._response = response
        self._chunks: Iterator[bytes] = response.iter_bytes(chunk_size)
        self._pending = b""
        self._close_callbacks: List[Callable[[], None]] = []

    @property
    def response(self) -> httpx.Response:
        return self._response

    def readable(self) -> bool:
        return True

    def _next_chunk(self) -> bytes:
        try:
            for chunk in self._chunks:
                if chunk:
                    return chunk
        except httpx.HTTPError as e:
            raise TransportFailure("Failed while reading response stream", e) from e
        return b""

    def readinto(self, buffer) -> int:  # type: ignore[override]
        if not self._pending:
            self._pending = self._next_chunk()
            if not self._pending:
                return 0

        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size

    def add_close_callback(self, callback: Callable[[], None]) -> None:
        self._close_callbacks.append(callback)

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._response.close()
            for callback in self._close_callbacks:
                callback()
        finally:
            super().close()


def is_stream_shape(shape: Any) -> bool:
    if shape in (BinaryIO, IO) or get_origin(shape) is IO:
        return True
    return isinstance(shape, type) and issubclass(shape, io.IOBase)


def receive_mode_for(shape: Any) -> ReceiveMode:
    """Pick how the transport should receive the body for a requested shape."""
    if is_stream_shape(shape):
        return ReceiveMode.STREAM
    if shape in (bytes, bytearray):
        return ReceiveMode.BYTES
    return ReceiveMode.TEXT


def decode_response(
    response: httpx.Response,
    shape: Any,
    mode: Optional[ReceiveMode] = None,
    codec: Optional[JsonCodec] = None,
) -> Any:
    """Convert a received response into the requested shape.

    Args:
        response (httpx.Response): A response received in ``mode``.
        shape (Any): ``str``, ``bytes``, a stream type such as ``BinaryIO``, or
            any type pydantic can validate JSON into.
        mode (Optional[ReceiveMode]): Receive mode used for the exchange.
            Derived from ``shape`` when omitted.
        codec (Optional[JsonCodec]): Codec for structured shapes.

    Raises:
        DecodeFailure: If the text is not valid JSON for ``shape``.
    """
    mode = mode or receive_mode_for(shape)

    match mode:
        case ReceiveMode.STREAM:
            return ResponseStream(response)
        case ReceiveMode.BYTES:
            content = response.content
            return bytearray(content) if shape is bytearray else content
        case _:
            text = response.text
            if shape is str:
                return text
            try:
                return (codec or get_default_codec()).deserialize(text, shape)
            except (ValidationError, PydanticUserError, ValueError, TypeError) as e:
                raise DecodeFailure(
                    f"Response body is not valid JSON for {shape!r}", e
                ) from e
