"""
The external Go parser and formatter, backed by the `gofmt` binary.
"""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from pathlib import Path
from logging import getLogger
from typing import Protocol

from gofencefmt.config import Settings
from gofencefmt.errors import FormatterUnavailable, RenderError
from gofencefmt.models.fragment import GoSource, ParseAttempt

logger = getLogger(__name__)


class Formatter(Protocol):
    """Anything that can parse Go source and render it canonically."""

    def parse(self, text: str) -> ParseAttempt:
        """Parse a candidate source file. Must not raise on bad input."""
        ...

    def render(self, tree: GoSource) -> str:
        """Render a parsed source file using the canonical indentation."""
        ...


class GofmtFormatter:
    """Formatter that runs `gofmt` over each candidate source.

    gofmt parses and prints in a single pass, so the canonical text is
    captured while parsing and `render` hands it back. Sources are handed
    over as files: on stdin gofmt would accept fragments by itself.
    """

    def __init__(self, binary: str = "gofmt", timeout: float = 10.0):
        """
        Args:
            binary: Name or path of the gofmt binary; names are looked up on PATH.
            timeout: Seconds to wait for a single gofmt run.

        Raises:
            FormatterUnavailable: If the binary cannot be found.
        """
        path = shutil.which(binary)
        if path is None:
            raise FormatterUnavailable(f"could not find {binary!r} on PATH")

        self.binary = path
        self.timeout = timeout

    @staticmethod
    def from_settings(settings: Settings) -> GofmtFormatter:
        return GofmtFormatter(binary=settings.gofmt, timeout=settings.timeout)

    def parse(self, text: str) -> ParseAttempt:
        with tempfile.TemporaryDirectory() as temp_dir:
            return self._parse_file(Path(temp_dir) / "fragment.go", text)

    def _parse_file(self, path: Path, text: str) -> ParseAttempt:
        try:
            path.write_text(text, encoding="utf-8")
            logger.debug(f"Running {self.binary} {path}")
            result = subprocess.run(
                [self.binary, str(path)],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
            # Bytes in, so lone carriage returns are not turned into newlines.
            stdout = result.stdout.decode("utf-8")
            stderr = result.stderr.decode("utf-8", "replace")
        except subprocess.TimeoutExpired:
            return ParseAttempt.failure(f"gofmt timed out after {self.timeout}s")
        except (OSError, UnicodeError, subprocess.SubprocessError) as e:
            return ParseAttempt.failure(f"gofmt failed: {e}")

        if result.returncode != 0:
            return ParseAttempt.failure(stderr.strip() or "gofmt failed")

        return ParseAttempt.success(GoSource(source=text, canonical=stdout))

    def render(self, tree: GoSource) -> str:
        if not tree.canonical:
            raise RenderError("gofmt produced no output")
        return tree.canonical
