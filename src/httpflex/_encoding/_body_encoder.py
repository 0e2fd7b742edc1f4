from dataclasses import dataclass
from typing import Any, Optional

from pydantic_core import PydanticSerializationError

from .._utils._files import drain_stream, read_file_bytes
from .._utils._json_codec import JsonCodec, get_default_codec
from ..models.content_type import ContentType, ContentTypeLike
from ..models.errors import EncodingFailure, HttpFlexError
from ._value_kind import ValueKind, classify


@dataclass(frozen=True)
class EncodedBody:
    """Wire-ready request body.

    ``content_type`` is set only when the body shape forces one; otherwise the
    caller's own Content-Type header (if any) is kept.
    """

    method: str
    content: bytes
    content_type: Optional[ContentTypeLike] = None
    kind: ValueKind = ValueKind.NONE


def _drain_and_close(stream: Any) -> bytes:
    try:
        return drain_stream(stream)
    finally:
        stream.close()


def encode_body(
    method: str, body: Any, codec: Optional[JsonCodec] = None
) -> EncodedBody:
    """Turn a body value into bytes plus the content type its shape requires.

    Args:
        method (str): The HTTP method, in any case.
        body (Any): The body value. See ``ValueKind`` for the accepted shapes;
            anything unrecognized is sent as JSON.
        codec (Optional[JsonCodec]): Codec used for JSON bodies. Defaults to
            the process-wide default codec.

    Returns:
        EncodedBody: The upper-cased method, the payload and the forced
        content type, if any.

    Raises:
        EncodingFailure: If the body cannot be serialized, or its stream or
            file cannot be read.
        PreconditionViolation: If the body is an empty ``UrlEncoded`` form or
            a closed form.
    """
    method = method.upper()
    kind = classify(body)

    try:
        match kind:
            case ValueKind.NONE:
                return EncodedBody(method, b"", kind=kind)
            case ValueKind.TEXT:
                return EncodedBody(method, body.encode("utf-8"), kind=kind)
            case ValueKind.STREAM:
                # the encoder owns the stream from here on
                return EncodedBody(method, _drain_and_close(body), kind=kind)
            case ValueKind.BYTES:
                return EncodedBody(method, bytes(body), kind=kind)
            case ValueKind.MULTIPART:
                return EncodedBody(method, body.build(), body.content_type, kind)
            case ValueKind.URL_ENCODED:
                return EncodedBody(
                    method, body.build().encode("utf-8"), ContentType.URLENC, kind
                )
            case ValueKind.FILE_PATH:
                return EncodedBody(method, read_file_bytes(body), kind=kind)
            case _:
                payload = (codec or get_default_codec()).serialize(body)
                return EncodedBody(
                    method, payload.encode("utf-8"), ContentType.JSON, kind
                )
    except HttpFlexError:
        raise
    except (OSError, ValueError, TypeError, PydanticSerializationError) as e:
        raise EncodingFailure(f"Failed to encode {kind.value} request body", e) from e
