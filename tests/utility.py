import shutil
from typing import Callable

import pytest

from gofencefmt.models.fragment import GoSource, ParseAttempt

requires_gofmt = pytest.mark.skipif(
    shutil.which("gofmt") is None, reason="gofmt is not installed"
)


class FakeFormatter:
    """
    An in-memory stand-in for gofmt.

    Accepts any source for which `accepts` returns True and renders it with
    `render_source`, recording every source it was asked to parse.
    """

    def __init__(
        self,
        accepts: Callable[[str], bool] = lambda _: True,
        render_source: Callable[[str], str] = lambda source: source,
    ):
        self.accepts = accepts
        self.render_source = render_source
        self.parsed: list[str] = []

    def parse(self, text: str) -> ParseAttempt:
        self.parsed.append(text)
        if not self.accepts(text):
            return ParseAttempt.failure("expected declaration")
        return ParseAttempt.success(
            GoSource(source=text, canonical=self.render_source(text))
        )

    def render(self, tree: GoSource) -> str:
        return tree.canonical


def indent_body(source: str) -> str:
    """Indent everything between `func init() {` and its closing brace by one tab."""
    lines = source.splitlines()
    start = lines.index("func init() {")
    end = len(lines) - 1 - lines[::-1].index("}")
    for index in range(start + 1, end):
        if lines[index]:
            lines[index] = "\t" + lines[index]
    return "\n".join(lines) + "\n"
