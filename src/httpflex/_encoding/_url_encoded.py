import base64
import io
from typing import IO, Any
from urllib.parse import quote_plus

from .._utils._files import drain_stream, read_file_text
from ..models.errors import PreconditionViolation
from ._form import FormBody
from ._value_kind import ValueKind, classify


class UrlEncoded(FormBody):
    """An ``application/x-www-form-urlencoded`` request body.

    Names and values are written as given; use ``put_encoded`` for values
    that need percent-encoding.
    """

    kind = ValueKind.URL_ENCODED

    @classmethod
    def instance(cls) -> "UrlEncoded":
        return cls()

    def _new_buffer(self) -> IO[Any]:
        return io.StringIO()

    def put_encoded(self, name: str, value: str) -> "UrlEncoded":
        """Add a field whose value is percent-encoded (spaces become ``+``)."""
        return self.put(name, quote_plus(value, safe="*"))

    def _stringify(self, value: Any) -> str:
        match classify(value):
            case ValueKind.TEXT:
                return value
            case ValueKind.BOOLEAN:
                return "true" if value else "false"
            case ValueKind.NUMBER:
                return str(value)
            case ValueKind.BYTES:
                return base64.b64encode(bytes(value)).decode("ascii")
            case ValueKind.FILE_PATH:
                return read_file_text(value)
            case ValueKind.STREAM:
                return drain_stream(value).decode("utf-8")
            case _:
                return self.codec.serialize(value)

    def build(self) -> str:
        """Join the fields as ``name=value`` pairs separated by ``&``.

        Raises:
            PreconditionViolation: If the form has no fields or was closed.
        """
        self._ensure_open()
        if not self._data:
            raise PreconditionViolation("Cannot build a URL-encoded form without fields")

        self._clear_buffer()
        for name, value in self._data.items():
            self._buffer.write(f"&{name}={self._stringify(value)}")

        # every pair is written with a leading "&"; drop the first one
        return self._buffer.getvalue()[1:]
