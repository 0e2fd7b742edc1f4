import click

from .cli_download import download
from .cli_request import request


@click.group()
@click.version_option(package_name="httpflex")
def cli() -> None:
    r"""Send HTTP requests and download files.

    \b
    Examples:
        httpflex request GET https://example.com/api/items
        httpflex request POST https://example.com/api/items --json '{"name": "x"}'
        httpflex request POST https://example.com/upload -F file=@report.pdf -F note=hi
        httpflex download https://example.com/a.png https://example.com/b.png -d out
    """


cli.add_command(request)
cli.add_command(download)
