"""
Errors raised while reformatting a fenced Go fragment.

Every terminal failure of the pipeline is a `FenceFormatError`, which the CLI
turns into a diagnostic and a non-zero exit status.
"""

from __future__ import annotations


class FenceFormatError(Exception):
    """Base class for terminal failures of the pipeline."""


class InputReadError(FenceFormatError):
    """The fragment could not be read from its source."""


class FormatterUnavailable(FenceFormatError):
    """The external formatter binary could not be located."""


class StructureUnavailable(FenceFormatError):
    """No wrapping strategy produced a parseable Go source file."""

    def __init__(self, failures: dict[str, str] | None = None):
        super().__init__("could not build structured representation")
        self.failures = failures or {}
        """The parser's complaint for each strategy that was tried."""


class RenderError(FenceFormatError):
    """The accepted source could not be rendered back to text."""


class MarkerNotFound(FenceFormatError):
    """The BEGIN marker is absent from the rendered source."""

    def __init__(self):
        super().__init__("could not find beginning of fragment")


class MarkerMissing(FenceFormatError):
    """The rendered source ended before the END marker."""

    def __init__(self):
        super().__init__("could not find end of fragment")
