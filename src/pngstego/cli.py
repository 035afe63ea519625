"""Command-line interface for pngstego."""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .api import decode_file, encode_file, print_file, remove_file
from .exceptions import ConfigurationError, PngStegoError
from .utils import configure_logging
from .utils.logging import LOG_LEVELS

console = Console(emoji=False)
logger = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    raise SystemExit(1)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Set the log level for the CLI session.",
)
@click.version_option(__version__, prog_name="pngstego")
def main(log_level: Optional[str]) -> None:
    """Encode and decode messages into PNG files."""
    try:
        configure_logging(log_level)
    except ConfigurationError as exc:
        _fail(str(exc))


@main.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.argument("code")
@click.argument("message")
@click.argument("output", required=False, type=click.Path(dir_okay=False))
def encode(path: str, code: str, message: str, output: Optional[str]) -> None:
    """Encode a message into a PNG file."""
    try:
        out_path = encode_file(path, code, message, output)
    except (PngStegoError, OSError) as exc:
        _fail(str(exc))
    else:
        logger.info("encoded message with code %s into %s", code, out_path)


@main.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.argument("code")
def decode(path: str, code: str) -> None:
    """Decode a message stored in a PNG file."""
    try:
        message = decode_file(path, code)
    except (PngStegoError, OSError) as exc:
        _fail(str(exc))
    if message is None:
        _fail(f"Could not find message encoded with code {code}")
    console.print(
        f"The encoded message with code {escape(code)} is {escape(message)}",
        soft_wrap=True,
    )


@main.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.argument("code")
def remove(path: str, code: str) -> None:
    """Remove a message from a PNG file."""
    try:
        message = remove_file(path, code)
    except (PngStegoError, OSError) as exc:
        _fail(str(exc))
    console.print(
        f"Removed message encoded with code {escape(code)}, it was {escape(message)}",
        soft_wrap=True,
    )


@main.command(name="print")
@click.argument("path", type=click.Path(dir_okay=False))
def print_chunks(path: str) -> None:
    """Print a list of PNG chunks that can be searched for messages."""
    try:
        listing = print_file(path)
    except (PngStegoError, OSError) as exc:
        _fail(str(exc))
    console.print("List of possible messages")
    console.print(escape(listing), soft_wrap=True)


if __name__ == "__main__":  # pragma: no cover - module entry point
    main()
