from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import HttpFlexError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an exchange: either a value or the error that prevented it.

    A successful exchange may legitimately carry ``None`` (for instance a JSON
    ``null`` body), so callers check ``ok`` rather than the value.
    """

    value: Optional[T] = None
    error: Optional[HttpFlexError] = None

    @classmethod
    def success(cls, value: Optional[T]) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: HttpFlexError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: T) -> T:
        if self.error is not None or self.value is None:
            return default
        return self.value
