import json
import logging
from pathlib import Path
from typing import Any, Optional, Tuple

import click

from .._services.http_flex import HttpFlex
from .._utils._logs import setup_logging
from ..models.content_type import ContentType
from ..models.errors import HttpFlexError
from ._utils import build_multipart, build_url_encoded, single_body, split_pair

logger = logging.getLogger(__name__)


def _json_body(text: Optional[str]) -> Any:
    if text is None:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", param_hint="--json") from e


@click.command()
@click.argument("method")
@click.argument("url")
@click.option(
    "--header", "-H", "headers", multiple=True, help='Header as "Name: value".'
)
@click.option("--data", "-d", help="Send the text as the request body.")
@click.option("--json", "json_text", help="Send a JSON document.")
@click.option(
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Send the file content as the request body.",
)
@click.option(
    "--form",
    "-F",
    "form_fields",
    multiple=True,
    help="multipart/form-data field, NAME=VALUE or NAME=@PATH.",
)
@click.option(
    "--field",
    "url_fields",
    multiple=True,
    help="application/x-www-form-urlencoded field, NAME=VALUE.",
)
@click.option("--content-type", help="Content-Type for text and file bodies.")
@click.option("--proxy", help="Proxy as HOST:PORT.")
@click.option("--proxy-user", help="Proxy credentials as USER:PASSWORD.")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the response body to a file.",
)
@click.option("--fail", is_flag=True, help="Exit with 1 on HTTP error statuses.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def request(
    method: str,
    url: str,
    headers: Tuple[str, ...],
    data: Optional[str],
    json_text: Optional[str],
    file_path: Optional[Path],
    form_fields: Tuple[str, ...],
    url_fields: Tuple[str, ...],
    content_type: Optional[str],
    proxy: Optional[str],
    proxy_user: Optional[str],
    output: Optional[Path],
    fail: bool,
    verbose: bool,
) -> None:
    """Send METHOD to URL and print the response body."""
    setup_logging(should_debug=verbose)

    body = single_body(
        data=data,
        json=_json_body(json_text),
        file=file_path,
        form=build_multipart(form_fields) if form_fields else None,
        field=build_url_encoded(url_fields) if url_fields else None,
    )

    try:
        flex = HttpFlex(url).debug(verbose)
    except HttpFlexError as e:
        raise click.ClickException(str(e)) from e

    with flex:
        for header in headers:
            flex.header(*split_pair(header, ":", "--header"))
        if content_type:
            flex.content_type(ContentType.custom(content_type))
        if proxy:
            host, port = split_pair(proxy, ":", "--proxy")
            if not port.isdigit():
                raise click.BadParameter(f"invalid port {port!r}", param_hint="--proxy")
            flex.proxy(host, int(port))
        if proxy_user:
            flex.proxy_auth(*split_pair(proxy_user, ":", "--proxy-user"))

        try:
            if output is not None:
                output.write_bytes(flex.method(method, body, bytes))
                logger.debug(f"Response written to {output}")
            else:
                click.echo(flex.method(method, body, str))
        except HttpFlexError as e:
            raise click.ClickException(str(e)) from e

        response = flex.read_response()
        if fail and response is not None and response.status_code >= 400:
            click.echo(f"HTTP {response.status_code}", err=True)
            raise click.exceptions.Exit(1)
