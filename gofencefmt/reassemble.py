"""
Recover a reformatted fragment from the canonical rendering of its wrapping.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from gofencefmt.errors import MarkerMissing, MarkerNotFound, RenderError
from gofencefmt.gofmt import Formatter
from gofencefmt.indent import split_lines
from gofencefmt.models.fragment import BEGIN_MARKER, END_MARKER, ParseOutcome

# gofmt indents with a single tab per nesting level.
INDENT_UNIT = "\t"


def _seek_to_beginning(lines: Iterator[str]) -> None:
    """Consume lines up to and including the BEGIN marker."""
    for line in lines:
        if line.strip() == BEGIN_MARKER:
            return
    raise MarkerNotFound()


def _lines_until_end(lines: Iterator[str]) -> Iterator[str]:
    """Yield fragment lines up to the END marker.

    gofmt keeps a marker that was glued to the fragment's last line (when the
    fragment lacks a trailing newline) on that line, so the code before it is
    yielded as the final line.
    """
    for line in lines:
        if line.strip() == END_MARKER:
            return
        if line.endswith(END_MARKER):
            yield line[: -len(END_MARKER)]
            return
        yield line
    raise MarkerMissing()


def _dedent(line: str, levels: int) -> str:
    """Remove up to `levels` leading indentation units from a line."""
    for _ in range(levels):
        if not line.startswith(INDENT_UNIT):
            break
        line = line[len(INDENT_UNIT) :]
    return line


def extract_fragment(
    rendered: str, synthetic_indent: int, document_indent: int
) -> str:
    """Cut the fragment out of rendered source and realign it.

    Args:
        rendered: Canonically formatted source holding the marked fragment.
        synthetic_indent: Nesting levels added by the wrapping, to be removed.
        document_indent: Columns of indentation the fragment sits at in its
            document, re-applied with spaces.

    Raises:
        MarkerNotFound: if the BEGIN marker is absent.
        MarkerMissing: if the END marker is absent.
    """
    lines = iter(split_lines(rendered))
    _seek_to_beginning(lines)

    indent = " " * document_indent
    output: list[str] = []
    for line in _lines_until_end(lines):
        if not line.strip():
            output.append(indent)
        else:
            output.append(indent + _dedent(line, synthetic_indent))

    return _join(output).rstrip()


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def reassemble(outcome: ParseOutcome, document_indent: int, formatter: Formatter) -> str:
    """Render a parsed fragment and realign it to its document's indentation.

    Raises:
        RenderError: if the formatter cannot render the parsed source.
        MarkerNotFound: if the BEGIN marker did not survive rendering.
        MarkerMissing: if the END marker did not survive rendering.
    """
    try:
        rendered = formatter.render(outcome.tree)
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(f"formatting source: {e}") from e

    return extract_fragment(rendered, outcome.synthetic_indent, document_indent)
