from typing import Any, Optional

from pydantic import TypeAdapter
from pydantic_core import to_json


class JsonCodec:
    """Serializes request values to JSON text and parses response text.

    Serialization goes through ``pydantic_core.to_json`` so pydantic models,
    dataclasses, enums, datetimes and the like work without extra glue.
    Deserialization validates the text against the requested shape with a
    ``pydantic.TypeAdapter``.

    The codec holds no per-call state, so one instance can be shared across
    clients and threads.
    """

    def __init__(
        self,
        *,
        by_alias: bool = True,
        exclude_none: bool = False,
        indent: Optional[int] = None,
        strict: Optional[bool] = None,
    ) -> None:
        self.by_alias = by_alias
        self.exclude_none = exclude_none
        self.indent = indent
        self.strict = strict

    def serialize(self, value: Any) -> str:
        return to_json(
            value,
            indent=self.indent,
            by_alias=self.by_alias,
            exclude_none=self.exclude_none,
        ).decode("utf-8")

    def deserialize(self, text: str, shape: Any) -> Any:
        return TypeAdapter(shape).validate_json(text, strict=self.strict)


_default_codec = JsonCodec()


def get_default_codec() -> JsonCodec:
    return _default_codec


def set_default_codec(codec: JsonCodec) -> None:
    """Replace the codec used by clients and forms that were not given one."""
    global _default_codec
    _default_codec = codec
