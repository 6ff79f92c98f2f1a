from __future__ import annotations

from logging import getLogger

from gofencefmt.errors import StructureUnavailable
from gofencefmt.gofmt import Formatter
from gofencefmt.models.fragment import ParseAttempt, ParseOutcome, WrappingStrategy

logger = getLogger(__name__)


def _attempt(formatter: Formatter, text: str) -> ParseAttempt:
    """Run the external parser, turning anything it raises into a failed attempt."""
    try:
        return formatter.parse(text)
    except Exception as e:
        return ParseAttempt.failure(f"parser raised {type(e).__name__}: {e}")


def parse_fragment(fragment: str, formatter: Formatter) -> ParseOutcome:
    """Parse a fragment of Go code of unknown completeness.

    The fragment is wrapped according to each `WrappingStrategy` in turn, from
    a whole program down to a run of statements inside a function, and the
    first wrapping the parser accepts wins.

    Raises:
        StructureUnavailable: if no wrapping yields a parseable file.
    """
    failures: dict[str, str] = {}

    for strategy in WrappingStrategy:
        attempt = _attempt(formatter, strategy.wrap(fragment))
        if attempt.ok:
            logger.debug(f"Parsed fragment as {strategy.value}")
            return ParseOutcome(tree=attempt.tree, strategy=strategy)

        logger.debug(f"Fragment is not a {strategy.value}: {attempt.error}")
        failures[strategy.value] = attempt.error or ""

    raise StructureUnavailable(failures)
