from ._json_codec import JsonCodec, get_default_codec, set_default_codec
from ._logs import setup_logging
from ._request_spec import RequestSpec

__all__ = [
    "JsonCodec",
    "RequestSpec",
    "get_default_codec",
    "set_default_codec",
    "setup_logging",
]
