import base64
import binascii
import io
from logging import getLogger
from pathlib import Path
from typing import IO, BinaryIO, Dict, List, Mapping, Optional, Sequence, Union
from urllib.parse import unquote_to_bytes

from httpx import URL

from .._utils.constants import LOGGER_NAME
from ..models.errors import ConfigurationError
from .http_flex import HttpFlex

logger = getLogger(LOGGER_NAME)

UrlLike = Union[str, URL]


def _decode_data_uri(url: str) -> Optional[bytes]:
    header, _, payload = url.partition(",")
    if ";base64" not in header:
        return unquote_to_bytes(payload)
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        logger.error(f"Invalid base64 payload in data URI: {e}")
        return None


def _is_data_uri(url: UrlLike) -> bool:
    return isinstance(url, str) and url.startswith("data:")


def _client_for(url: UrlLike) -> Optional[HttpFlex]:
    try:
        return HttpFlex(url, raise_errors=False)
    except ConfigurationError as e:
        logger.error(str(e))
        return None


def get_file_stream(url: UrlLike) -> Optional[IO[bytes]]:
    """Open a download as a binary stream.

    ``data:`` URIs are decoded locally. For remote files the caller must close
    the returned stream, which also closes the client used to fetch it.
    Returns ``None`` if the download fails.
    """
    if _is_data_uri(url):
        data = _decode_data_uri(str(url))
        return io.BytesIO(data) if data is not None else None

    flex = _client_for(url)
    if flex is None:
        return None
    stream = flex.get(BinaryIO)
    if stream is None:
        flex.close()
        return None
    stream.add_close_callback(flex.close)
    return stream


def get_file_bytes(url: UrlLike) -> Optional[bytes]:
    """Download a file into memory. Returns ``None`` if the download fails."""
    if _is_data_uri(url):
        return _decode_data_uri(str(url))

    flex = _client_for(url)
    if flex is None:
        return None
    with flex:
        return flex.get(bytes)


def get_file(url: UrlLike, destination: Union[str, Path]) -> Optional[Path]:
    """Download a file to ``destination`` unless a regular file is already there.

    Returns the destination path, or ``None`` if the download or the write
    fails.
    """
    path = Path(destination)
    if path.is_file():
        return path

    data = get_file_bytes(url)
    if data is None:
        return None

    try:
        with open(path, "xb") as file:
            file.write(data)
    except OSError as e:
        logger.error(f"Failed to write {path}: {e}")
        return None
    return path


def get_files_streams(urls: Sequence[UrlLike]) -> List[IO[bytes]]:
    streams = (get_file_stream(url) for url in urls)
    return [stream for stream in streams if stream is not None]


def get_files_bytes(urls: Sequence[UrlLike]) -> List[bytes]:
    contents = (get_file_bytes(url) for url in urls)
    return [content for content in contents if content is not None]


def get_files(destinations: Mapping[UrlLike, Union[str, Path]]) -> List[Path]:
    """Download each URL to its destination, skipping the ones that fail."""
    paths = (get_file(url, path) for url, path in destinations.items())
    return [path for path in paths if path is not None]


def get_json_string(text: str) -> str:
    """Return the part of ``text`` from the first ``{`` to the last ``}``.

    Raises:
        ValueError: If ``text`` has no ``{...}`` section.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise ValueError("No JSON object found in text")
    return text[start : end + 1]


def get_query_params(url: UrlLike) -> Dict[str, str]:
    """Return the decoded query parameters of ``url`` (first value wins)."""
    return dict(URL(url).params.items())
