from __future__ import annotations

from logging import getLogger

from gofencefmt.config import Settings
from gofencefmt.gofmt import Formatter, GofmtFormatter
from gofencefmt.indent import min_indent
from gofencefmt.parse import parse_fragment
from gofencefmt.reassemble import reassemble

logger = getLogger(__name__)


def run(fragment: str, formatter: Formatter | None = None) -> str:
    """Reformat a fenced fragment of Go code.

    The fragment may be a whole program, some top-level declarations, or
    statements lifted from a function body. The result is indented the way
    gofmt would indent it, shifted to the indentation the fragment had in its
    surrounding document, with trailing whitespace removed.

    Args:
        fragment: The raw text to reformat.
        formatter: The Go parser/formatter to use. Defaults to `gofmt` as
            configured by `Settings`.

    Raises:
        FenceFormatError: if the fragment cannot be reformatted.
    """
    if formatter is None:
        formatter = GofmtFormatter.from_settings(Settings())

    document_indent = min_indent(fragment)
    outcome = parse_fragment(fragment, formatter)
    logger.debug(
        f"Document indent {document_indent}, synthetic indent {outcome.synthetic_indent}"
    )

    return reassemble(outcome, document_indent, formatter)
