from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

import click

from .._encoding import Multipart, UrlEncoded


def split_pair(value: str, separator: str, option: str) -> Tuple[str, str]:
    name, found, rest = value.partition(separator)
    if not found or not name.strip():
        raise click.BadParameter(
            f"expected NAME{separator}VALUE, got {value!r}", param_hint=option
        )
    return name.strip(), rest.strip() if separator == ":" else rest


def build_multipart(fields: Sequence[str]) -> Multipart:
    """Build a multipart form from ``name=value`` / ``name=@path`` pairs."""
    form = Multipart()
    for field in fields:
        name, value = split_pair(field, "=", "--form")
        if value.startswith("@"):
            path = Path(value[1:])
            if not path.is_file():
                raise click.BadParameter(f"no such file: {path}", param_hint="--form")
            form.put(name, path)
        else:
            form.put(name, value)
    return form


def build_url_encoded(fields: Sequence[str]) -> UrlEncoded:
    form = UrlEncoded()
    for field in fields:
        name, value = split_pair(field, "=", "--field")
        form.put_encoded(name, value)
    return form


def single_body(**candidates: Optional[Any]) -> Optional[Any]:
    given = {name: value for name, value in candidates.items() if value is not None}
    if len(given) > 1:
        options = ", ".join(f"--{name.replace('_', '-')}" for name in given)
        raise click.UsageError(f"Only one request body may be given, got {options}")
    return next(iter(given.values()), None)
