import logging
from typing import TextIO

import click
from pydantic import ValidationError

from gofencefmt.config import Settings
from gofencefmt.errors import FenceFormatError, InputReadError, StructureUnavailable
from gofencefmt.gofmt import GofmtFormatter
from gofencefmt.pipeline import run

logger = logging.getLogger(__name__)


def read_fragment(input: TextIO) -> str:
    """Read the whole fragment before any processing starts."""
    try:
        return input.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"reading input: {e}") from e


@click.command()
@click.option(
    "--input", "-i", type=click.File("r", encoding="utf-8"), default="-",
    help="File holding the fragment (default: stdin)",
)
@click.option(
    "--output", "-o", type=click.File("w", encoding="utf-8", lazy=True), default="-",
    help="File to write the reformatted fragment to (default: stdout)",
)
@click.option("--gofmt", type=str, default=None, help="Name or path of the gofmt binary")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="Seconds to wait for gofmt")
@click.option("--verbose", "-v", is_flag=True, help="Log each parsing attempt to stderr")
def main(
    input: TextIO,
    output: TextIO,
    gofmt: str | None,
    timeout: float | None,
    verbose: bool,
) -> None:
    """Reformat Go code selected from inside a Markdown code fence.

    Reads the fragment from stdin and writes it, reformatted and realigned to
    its original indentation, to stdout.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    # Options on the command line win over the environment.
    overrides = {"gofmt": gofmt, "timeout": timeout}
    try:
        settings = Settings(**{key: value for key, value in overrides.items() if value is not None})
    except ValidationError as e:
        raise click.ClickException(f"invalid configuration: {e}") from e

    try:
        fragment = read_fragment(input)
        formatted = run(fragment, GofmtFormatter.from_settings(settings))
    except StructureUnavailable as e:
        for strategy, error in e.failures.items():
            logger.debug(f"{strategy}: {error}")
        raise click.ClickException(str(e)) from e
    except FenceFormatError as e:
        raise click.ClickException(str(e)) from e

    output.write(formatted)


if __name__ == "__main__":
    main()
