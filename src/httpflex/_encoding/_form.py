from typing import (
    IO,
    Any,
    ClassVar,
    Dict,
    Iterator,
    Mapping,
    Optional,
    TypeVar,
)

from .._utils._json_codec import JsonCodec, get_default_codec
from ..models.errors import PreconditionViolation
from ._value_kind import ValueKind

F = TypeVar("F", bound="FormBody")


class FormBody:
    """Ordered, named fields that serialize into one request body.

    A form is meant for a single owner on a single thread: fill it, build it,
    then ``reset()`` it for reuse or ``close()`` it for good.
    """

    kind: ClassVar[ValueKind]

    def __init__(
        self,
        fields: Optional[Mapping[str, Any]] = None,
        *,
        codec: Optional[JsonCodec] = None,
    ) -> None:
        self._data: Dict[str, Any] = {}
        self._codec = codec
        self._buffer: IO[Any] = self._new_buffer()
        self._closed = False
        if fields:
            self.put_all(fields)

    def _new_buffer(self) -> IO[Any]:
        raise NotImplementedError

    def _ensure_open(self) -> None:
        if self._closed:
            raise PreconditionViolation(f"{type(self).__name__} is closed")

    def _clear_buffer(self) -> None:
        self._buffer.seek(0)
        self._buffer.truncate()

    @property
    def codec(self) -> JsonCodec:
        return self._codec or get_default_codec()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def fields(self) -> Mapping[str, Any]:
        return dict(self._data)

    def put(self: F, name: str, value: Any) -> F:
        """Add a field, replacing any earlier value with the same name."""
        self._ensure_open()
        self._data[name] = value
        return self

    def put_all(self: F, fields: Mapping[str, Any]) -> F:
        self._ensure_open()
        self._data.update(fields)
        return self

    def remove(self: F, name: str) -> F:
        self._ensure_open()
        self._data.pop(name, None)
        return self

    def reset(self) -> None:
        """Empty both the fields and the output buffer so the form can be reused."""
        self._ensure_open()
        self._clear_buffer()
        self._data.clear()

    def close(self) -> None:
        if self._closed:
            return
        self._buffer.close()
        self._data.clear()
        self._closed = True

    def __enter__(self: F) -> F:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={list(self._data)!r})"
