from ._body_encoder import EncodedBody, encode_body
from ._form import FormBody
from ._multipart import Multipart, default_boundary
from ._response_decoder import (
    ResponseStream,
    decode_response,
    receive_mode_for,
)
from ._url_encoded import UrlEncoded
from ._value_kind import ValueKind, classify

__all__ = [
    "EncodedBody",
    "FormBody",
    "Multipart",
    "ResponseStream",
    "UrlEncoded",
    "ValueKind",
    "classify",
    "decode_response",
    "default_boundary",
    "encode_body",
    "receive_mode_for",
]
