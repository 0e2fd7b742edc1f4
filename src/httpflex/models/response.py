from dataclasses import dataclass
from enum import Enum
from typing import Any

from httpx import Headers, Response


class ReceiveMode(str, Enum):
    """How the transport receives a response body."""

    STREAM = "stream"
    BYTES = "bytes"
    TEXT = "text"


@dataclass
class FlexResponse:
    """The last response received by a client, kept for introspection."""

    mode: ReceiveMode
    status_code: int
    headers: Headers
    payload: Any
    http_response: Response

    @property
    def is_success(self) -> bool:
        return self.http_response.is_success
