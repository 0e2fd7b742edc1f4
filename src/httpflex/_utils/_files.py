import os
from pathlib import Path
from typing import IO, Any, Iterator, Union

from .constants import CHUNK_SIZE

PathLike = Union[str, "os.PathLike[str]"]


def iter_chunks(data: bytes, chunk_size: int = CHUNK_SIZE) -> Iterator[memoryview]:
    view = memoryview(data)
    for offset in range(0, len(view), chunk_size):
        yield view[offset : offset + chunk_size]


def iter_stream(stream: IO[Any], chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the remaining content of ``stream`` in chunks of at most ``chunk_size``.

    Text streams are encoded as UTF-8.
    """
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        yield chunk


def copy_stream(source: IO[Any], target: IO[bytes]) -> int:
    written = 0
    for chunk in iter_stream(source):
        written += target.write(chunk)
    return written


def copy_file(path: PathLike, target: IO[bytes]) -> int:
    with open(path, "rb") as source:
        return copy_stream(source, target)


def copy_bytes(data: bytes, target: IO[bytes]) -> int:
    written = 0
    for chunk in iter_chunks(data):
        written += target.write(chunk)
    return written


def drain_stream(stream: IO[Any]) -> bytes:
    return b"".join(iter_stream(stream))


def read_file_bytes(path: PathLike) -> bytes:
    return Path(path).read_bytes()


def read_file_text(path: PathLike) -> str:
    return Path(path).read_text(encoding="utf-8")
