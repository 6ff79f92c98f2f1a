def split_lines(text: str) -> list[str]:
    """Split text on newlines only, dropping a carriage return ending any line.

    Unlike `str.splitlines`, form feeds, vertical tabs and Unicode line
    separators stay inside the line, where Go allows them in comments and
    string literals.
    """
    return [line.removesuffix("\r") for line in text.split("\n")]


def min_indent(text: str) -> int:
    """Find the indentation shared by every line of a fenced fragment.

    Each leading whitespace character counts as one column, so tabs are not
    expanded. Empty lines are skipped, but lines made only of whitespace are
    measured like any other line.
    """
    indent: int | None = None

    for line in split_lines(text):
        if not line:
            continue

        width = len(line) - len(line.lstrip())
        if width == 0:
            # Nothing can be shallower than this.
            return 0

        if indent is None or width < indent:
            indent = width

    # Failsafe for input without any measurable lines
    return indent or 0
