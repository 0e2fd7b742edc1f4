from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .._utils.constants import HEADER_CONTENT_TYPE


@dataclass(frozen=True)
class CustomContentType:
    """A Content-Type header value that is not part of the fixed catalog.

    Instances are immutable and travel with the request that uses them, so two
    requests built at the same time never see each other's value.
    """

    value: str

    @property
    def header_name(self) -> str:
        return HEADER_CONTENT_TYPE

    @property
    def header_value(self) -> str:
        return self.value

    def header_values(self) -> Tuple[str, str]:
        return (HEADER_CONTENT_TYPE, self.value)

    def description(self) -> str:
        return f"{HEADER_CONTENT_TYPE}: {self.value}"


class ContentType(Enum):
    """Catalog of the Content-Type values used when sending request bodies."""

    TEXT = "text/plain"
    URLENC = "application/x-www-form-urlencoded"
    JSON = "application/json"
    XML = "application/xml"
    MP3 = "audio/mp3"
    MP4 = "video/mp4"
    OCTET = "application/octet-stream"

    @property
    def header_name(self) -> str:
        return HEADER_CONTENT_TYPE

    @property
    def header_value(self) -> str:
        return self.value

    def header_values(self) -> Tuple[str, str]:
        """Return the ``(name, value)`` pair for this content type."""
        return (HEADER_CONTENT_TYPE, self.value)

    def description(self) -> str:
        """Return the header line, e.g. ``Content-Type: application/json``."""
        return f"{HEADER_CONTENT_TYPE}: {self.value}"

    @staticmethod
    def custom(content_type: str) -> CustomContentType:
        """Build a content type that is missing from the catalog.

        Args:
            content_type (str): The full header value (e.g. "image/webp").

        Returns:
            CustomContentType: A value to pass to ``HttpFlex.content_type``.
        """
        if not content_type or not content_type.strip():
            raise ValueError("content_type must not be empty")
        return CustomContentType(content_type)

    @staticmethod
    def multipart(boundary: str) -> CustomContentType:
        """Build the ``multipart/form-data`` content type for a boundary."""
        return CustomContentType(f"multipart/form-data; boundary={boundary}")


ContentTypeLike = Union[ContentType, CustomContentType]
