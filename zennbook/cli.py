"""Command line interface for listing and previewing books."""

from __future__ import annotations

import asyncio
import logging
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from zennbook.content import (
    ContentError,
    book_summary,
    load_book_contents,
    load_book_preview_content,
)
from zennbook.context import AppContext
from zennbook.json_utils import json_dumps

try:
    __version__ = version("zennbook")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
ROOT_OPTION = click.option(
    "--root",
    type=click.Path(file_okay=False, dir_okay=True),
    default=None,
    help="Workspace root containing the books folder.",
)
FORCE_OPTION = click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Reload content instead of using cached results.",
)


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="ZENNBOOK_LOG_FILE",
)
@click.version_option(__version__, prog_name="zennbook")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _echo(data: object, output_format: str) -> None:
    if output_format == "yaml":
        click.echo(yaml.safe_dump(data, allow_unicode=True, sort_keys=False))
    else:
        click.echo(json_dumps(data, indent=True))


@cli.command()
@ROOT_OPTION
@FORMAT_OPTION
@FORCE_OPTION
def books(
    root: Optional[str] = None,
    output_format: str = "json",
    force: bool = False,
) -> None:
    """List the books of the workspace.

    Books that fail to load are listed with their error message.

    Args:
        root: Workspace root; defaults to ``ZENNBOOK_ROOT`` or the current
            directory.
        output_format: Format of the listing.
        force: Reload books instead of using cached results.
    """

    context = AppContext.from_env(root)

    try:
        results = asyncio.run(load_book_contents(context, force))
    except OSError as exc:
        raise click.ClickException(
            f"Cannot read {context.books_folder}: {exc}"
        ) from exc

    _echo([book_summary(r) for r in results], output_format)


@cli.command()
@click.argument("name")
@ROOT_OPTION
@FORMAT_OPTION
@FORCE_OPTION
def preview(
    name: str,
    root: Optional[str] = None,
    output_format: str = "json",
    force: bool = False,
) -> None:
    """Print the preview document of the book directory NAME.

    Args:
        name: Directory name of the book inside the books folder.
        root: Workspace root.
        output_format: Format of the preview.
        force: Reload the book and its chapters before rendering.
    """

    context = AppContext.from_env(root)
    uri = context.books_folder / name

    try:
        doc = asyncio.run(
            load_book_preview_content(context, uri, force=force)
        )
    except ContentError as exc:
        raise click.ClickException(exc.message) from exc

    _echo(doc.to_dict(), output_format)
