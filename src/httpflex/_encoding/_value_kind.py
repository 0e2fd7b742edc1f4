import io
import os
from decimal import Decimal
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """The closed set of shapes a body or form field value can take."""

    NONE = "none"
    TEXT = "text"
    STREAM = "stream"
    BYTES = "bytes"
    MULTIPART = "multipart"
    URL_ENCODED = "url_encoded"
    FILE_PATH = "file_path"
    BOOLEAN = "boolean"
    NUMBER = "number"
    OTHER = "other"


def is_stream(value: Any) -> bool:
    if isinstance(value, io.IOBase):
        return True
    if isinstance(value, (str, bytes, bytearray, memoryview, os.PathLike)):
        return False
    return callable(getattr(value, "read", None))


def classify(value: Any) -> ValueKind:
    """Map a runtime value onto its ``ValueKind``.

    Checks run in a fixed order so a value that could match several Python
    representations always lands in the same variant. Strings are never file
    paths; pass a ``pathlib.Path`` to send a file.
    """
    from ._form import FormBody

    if value is None:
        return ValueKind.NONE
    if isinstance(value, str):
        return ValueKind.TEXT
    if is_stream(value):
        return ValueKind.STREAM
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ValueKind.BYTES
    if isinstance(value, FormBody):
        return value.kind
    if isinstance(value, os.PathLike):
        return ValueKind.FILE_PATH
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return ValueKind.NUMBER
    return ValueKind.OTHER
