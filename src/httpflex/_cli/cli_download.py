from pathlib import Path
from typing import Dict, Set, Tuple

import click
from httpx import URL

from .._services.downloads import get_files
from .._utils._logs import setup_logging


def _file_name(url: str, index: int) -> str:
    if not url.startswith("data:"):
        name = URL(url).path.rstrip("/").rsplit("/", 1)[-1]
        if name:
            return name
    return f"download-{index}"


@click.command()
@click.argument("urls", nargs=-1, required=True)
@click.option(
    "--dir",
    "-d",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to save files in.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def download(urls: Tuple[str, ...], directory: Path, verbose: bool) -> None:
    """Download each URL into DIRECTORY.

    Files that already exist are left untouched.
    """
    setup_logging(should_debug=verbose)
    directory.mkdir(parents=True, exist_ok=True)

    destinations: Dict[str, Path] = {}
    taken: Set[str] = set()
    for index, url in enumerate(urls):
        base = Path(_file_name(url, index))
        name, counter = base.name, index
        while name in taken:
            name = f"{base.stem}-{counter}{base.suffix}"
            counter += 1
        taken.add(name)
        destinations[url] = directory / name
    saved = get_files(destinations)
    for path in saved:
        click.echo(str(path))

    if len(saved) < len(destinations):
        raise click.ClickException(
            f"{len(destinations) - len(saved)} of {len(destinations)} downloads failed"
        )
