"""Command-line interface.

Entry point for the ``signalcpu`` CLI tool::

    signalcpu 09 1 --input input.txt
"""

from __future__ import annotations

import logging
from typing import TextIO

import click

from signalcpu import __version__
from signalcpu.errors import SignalCPUError, UsageError
from signalcpu.puzzles import resolve

logger = logging.getLogger(__name__)


@click.command("signalcpu")
@click.version_option(version=__version__, prog_name="signalcpu")
@click.argument("day", type=int)
@click.argument("part", type=int)
@click.option(
    "--input",
    "-i",
    "source",
    type=click.File("r"),
    default="-",
    show_default=True,
    help="Puzzle input file ('-' for stdin).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(day: int, part: int, source: TextIO, verbose: bool) -> None:
    """Solve DAY/PART of the puzzle and print the answer."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        driver = resolve(day, part)
    except UsageError as e:
        raise click.UsageError(e.message) from e

    text = source.read()
    logger.debug("Read %d bytes of input", len(text))

    try:
        output = driver(text)
    except SignalCPUError as e:
        raise click.ClickException(e.message) from e

    click.echo(output)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()


if __name__ == "__main__":
    main()
