from .content_type import ContentType, ContentTypeLike, CustomContentType
from .errors import (
    ConfigurationError,
    DecodeFailure,
    EncodingFailure,
    HttpFlexError,
    PreconditionViolation,
    TransportFailure,
)
from .response import FlexResponse, ReceiveMode
from .result import Result

__all__ = [
    "ConfigurationError",
    "ContentType",
    "ContentTypeLike",
    "CustomContentType",
    "DecodeFailure",
    "EncodingFailure",
    "FlexResponse",
    "HttpFlexError",
    "PreconditionViolation",
    "ReceiveMode",
    "Result",
    "TransportFailure",
]
