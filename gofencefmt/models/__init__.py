from gofencefmt.models.fragment import (
    BEGIN_MARKER,
    END_MARKER,
    GoSource,
    ParseAttempt,
    ParseOutcome,
    WrappingStrategy,
)

__all__ = [
    "BEGIN_MARKER",
    "END_MARKER",
    "GoSource",
    "ParseAttempt",
    "ParseOutcome",
    "WrappingStrategy",
]
