from typing import Optional


class HttpFlexError(Exception):
    """Base class for every error raised by httpflex."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class EncodingFailure(HttpFlexError):
    """Raised when a request body cannot be serialized or its stream drained."""


class TransportFailure(HttpFlexError):
    """Raised when the HTTP exchange itself fails (connection, timeout, ...)."""


class DecodeFailure(HttpFlexError):
    """Raised when a response body cannot be parsed into the requested shape."""


class ConfigurationError(HttpFlexError, ValueError):
    """Raised when the target address given to a client is malformed."""

    def __init__(self, url: object, cause: Optional[BaseException] = None):
        self.url = url
        super().__init__(f"Invalid target address {url!r}", cause)


class PreconditionViolation(HttpFlexError):
    """Raised when an operation is called in a state that does not allow it.

    Examples are building a URL-encoded form without fields, touching a form
    after ``close()``, or sending the same request spec twice.
    """

    def __init__(self, message: str):
        super().__init__(message)
