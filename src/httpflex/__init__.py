from ._config import Config
from ._encoding import (
    EncodedBody,
    Multipart,
    ResponseStream,
    UrlEncoded,
    ValueKind,
    decode_response,
    encode_body,
    receive_mode_for,
)
from ._services import (
    HttpFlex,
    get_file,
    get_file_bytes,
    get_file_stream,
    get_files,
    get_files_bytes,
    get_files_streams,
    get_json_string,
    get_query_params,
)
from ._utils import JsonCodec, get_default_codec, set_default_codec, setup_logging
from .models import (
    ConfigurationError,
    ContentType,
    CustomContentType,
    DecodeFailure,
    EncodingFailure,
    FlexResponse,
    HttpFlexError,
    PreconditionViolation,
    ReceiveMode,
    Result,
    TransportFailure,
)

__all__ = [
    "Config",
    "ConfigurationError",
    "ContentType",
    "CustomContentType",
    "DecodeFailure",
    "EncodedBody",
    "EncodingFailure",
    "FlexResponse",
    "HttpFlex",
    "HttpFlexError",
    "JsonCodec",
    "Multipart",
    "PreconditionViolation",
    "ReceiveMode",
    "ResponseStream",
    "Result",
    "TransportFailure",
    "UrlEncoded",
    "ValueKind",
    "decode_response",
    "encode_body",
    "get_default_codec",
    "get_file",
    "get_file_bytes",
    "get_file_stream",
    "get_files",
    "get_files_bytes",
    "get_files_streams",
    "get_json_string",
    "get_query_params",
    "receive_mode_for",
    "set_default_codec",
    "setup_logging",
]
