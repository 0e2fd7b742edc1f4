import io
import time
from typing import IO, Any, Mapping, Optional

from .._utils._files import copy_bytes, copy_file, copy_stream
from .._utils._json_codec import JsonCodec
from .._utils.constants import MULTIPART_BOUNDARY_PREFIX
from ..models.content_type import ContentType, CustomContentType
from ._form import FormBody
from ._value_kind import ValueKind, classify

_CRLF = "\r\n"
_FILE_KINDS = (ValueKind.FILE_PATH, ValueKind.STREAM, ValueKind.BYTES)


def default_boundary() -> str:
    return MULTIPART_BOUNDARY_PREFIX + format(int(time.time() * 1000), "x")


class Multipart(FormBody):
    """A ``multipart/form-data`` request body.

    Field values decide how each part is written:

    - ``pathlib.Path``, open binary streams and bytes become file parts with
      ``filename="<name>"`` and ``Content-Type: application/octet-stream``.
      Their content is copied in bounded chunks.
    - ``str`` values are written as UTF-8 text with no part headers.
    - Anything else is serialized to JSON with ``Content-Type: application/json``.

    Examples:
        ```python
        form = Multipart().put("file", Path("report.pdf")).put("meta", {"v": 1})
        HttpFlex("https://example.com/upload").post(form)
        ```
    """

    kind = ValueKind.MULTIPART

    def __init__(
        self,
        fields: Optional[Mapping[str, Any]] = None,
        *,
        boundary: Optional[str] = None,
        codec: Optional[JsonCodec] = None,
    ) -> None:
        self.boundary = boundary or default_boundary()
        super().__init__(fields, codec=codec)

    @classmethod
    def instance(
        cls,
        fields: Optional[Mapping[str, Any]] = None,
        boundary: Optional[str] = None,
    ) -> "Multipart":
        return cls(fields, boundary=boundary)

    def _new_buffer(self) -> IO[Any]:
        return io.BytesIO()

    @property
    def content_type(self) -> CustomContentType:
        return ContentType.multipart(self.boundary)

    def _write(self, text: str) -> None:
        self._buffer.write(text.encode("utf-8"))

    def _write_part_header(self, name: str, kind: ValueKind) -> None:
        self._write(
            f'--{self.boundary}{_CRLF}Content-Disposition: form-data; name="{name}"'
        )
        if kind in _FILE_KINDS:
            self._write(
                f'; filename="{name}"{_CRLF}{ContentType.OCTET.description()}{_CRLF}{_CRLF}'
            )
        elif kind is ValueKind.TEXT:
            self._write(f"{_CRLF}{_CRLF}")
        else:
            self._write(f"{_CRLF}{ContentType.JSON.description()}{_CRLF}{_CRLF}")

    def _write_part_body(self, value: Any, kind: ValueKind) -> None:
        match kind:
            case ValueKind.FILE_PATH:
                copy_file(value, self._buffer)
            case ValueKind.STREAM:
                copy_stream(value, self._buffer)
            case ValueKind.BYTES:
                copy_bytes(bytes(value), self._buffer)
            case ValueKind.TEXT:
                self._write(value)
            case _:
                self._write(self.codec.serialize(value))

    def build(self) -> bytes:
        """Serialize the current fields, in insertion order.

        Each call starts from an empty buffer, so building twice yields the
        same bytes (stream fields are drained by the first build).

        Raises:
            PreconditionViolation: If the form was closed.
            OSError: If a file or stream field cannot be read.
        """
        self._ensure_open()
        self._clear_buffer()

        for name, value in self._data.items():
            kind = classify(value)
            self._write_part_header(name, kind)
            self._write_part_body(value, kind)
            self._write(_CRLF)

        self._write(f"--{self.boundary}--{_CRLF}")
        return self._buffer.getvalue()
