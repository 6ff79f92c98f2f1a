from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

BEGIN_MARKER = "// BEGIN"
END_MARKER = "// END"

# Minimal scaffolding needed to turn a fragment into a Go source file.
PACKAGE_HEADER = "package main\n\n"
FUNCTION_OPENING = "func init() {\n"  # Any function will do.
FUNCTION_CLOSING = "}\n"


class WrappingStrategy(str, Enum):
    """Denotes how a fragment is wrapped to make it a parseable Go file.

    Members are declared from the most to the least structure assumed about
    the fragment, which is also the order they are tried in.
    """

    WHOLE_PROGRAM = "whole-program"
    TOP_LEVEL_DECLARATIONS = "top-level-declarations"
    FUNCTION_BODY = "function-body"

    @property
    def synthetic_indent(self) -> int:
        """Number of nesting levels the wrapping adds around the fragment."""
        if self == WrappingStrategy.FUNCTION_BODY:
            return 1
        return 0

    def wrap(self, fragment: str) -> str:
        """Surround the fragment with markers and the strategy's scaffolding."""
        marked = f"{BEGIN_MARKER}\n{fragment}{END_MARKER}\n"

        if self == WrappingStrategy.WHOLE_PROGRAM:
            return marked
        if self == WrappingStrategy.TOP_LEVEL_DECLARATIONS:
            return PACKAGE_HEADER + marked
        return PACKAGE_HEADER + FUNCTION_OPENING + marked + FUNCTION_CLOSING


class GoSource(BaseModel):
    """A Go source file the external parser accepted."""

    source: str
    """The text handed to the parser."""

    canonical: str
    """The same file in canonical formatting."""


class ParseAttempt(BaseModel):
    """The result of handing one candidate source to the external parser."""

    tree: GoSource | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.tree is not None

    @staticmethod
    def success(tree: GoSource) -> ParseAttempt:
        return ParseAttempt(tree=tree)

    @staticmethod
    def failure(error: str) -> ParseAttempt:
        return ParseAttempt(error=error)


class ParseOutcome(BaseModel):
    """A successfully parsed fragment, along with how it was wrapped."""

    tree: GoSource
    strategy: WrappingStrategy

    @property
    def synthetic_indent(self) -> int:
        return self.strategy.synthetic_indent
