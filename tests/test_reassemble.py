import pytest

from gofencefmt.errors import MarkerMissing, MarkerNotFound, RenderError
from gofencefmt.models.fragment import GoSource, ParseOutcome, WrappingStrategy
from gofencefmt.reassemble import extract_fragment, reassemble
from tests.utility import FakeFormatter


def test_extract_between_markers():
    """Only the lines between the markers are kept."""
    rendered = "package main\n\n// BEGIN\nvar x int\n// END\n\nvar y int\n"
    assert extract_fragment(rendered, 0, 0) == "var x int"


def test_extract_removes_synthetic_indent():
    """One tab per synthetic nesting level is removed from every line."""
    rendered = (
        "package main\n\nfunc init() {\n"
        "\t// BEGIN\n"
        "\tif true {\n"
        '\t\tfmt.Println("hi")\n'
        "\t}\n"
        "\t// END\n"
        "}\n"
    )
    assert extract_fragment(rendered, 1, 0) == 'if true {\n\tfmt.Println("hi")\n}'


def test_extract_applies_document_indent():
    """The document indent is re-applied as spaces in front of the canonical tabs."""
    rendered = "\t// BEGIN\n\tif true {\n\t\tx++\n\t}\n\t// END\n"
    assert extract_fragment(rendered, 1, 3) == "   if true {\n   \tx++\n   }"


def test_extract_blank_lines_take_document_indent():
    """Internal blank lines become exactly as wide as the document indent."""
    rendered = "// BEGIN\nvar x int\n\t \nvar y int\n// END\n"
    assert extract_fragment(rendered, 0, 2) == "  var x int\n  \n  var y int"


def test_extract_trims_trailing_whitespace():
    """Trailing blank lines and spaces are dropped from the end of the fragment."""
    rendered = "// BEGIN\nvar x int\n\n\n   \n// END\n"
    assert extract_fragment(rendered, 0, 4) == "    var x int"


def test_extract_marker_glued_to_code():
    """An END marker trailing the last line of code is cut off that line."""
    rendered = 'func init() {\n\t// BEGIN\n\tfmt.Println("hi") // END\n}\n'
    assert extract_fragment(rendered, 1, 0) == 'fmt.Println("hi")'


def test_extract_indented_markers():
    """Markers are recognised regardless of the indentation around them."""
    rendered = "  // BEGIN  \nvar x int\n\t\t// END\t\n"
    assert extract_fragment(rendered, 0, 0) == "var x int"


def test_extract_only_strips_indentation():
    """Lines gofmt leaves unindented, like raw string contents, keep their text."""
    rendered = "\t// BEGIN\n\ts := `\nraw\n`\n\t// END\n"
    assert extract_fragment(rendered, 1, 0) == "s := `\nraw\n`"


def test_extract_missing_beginning():
    with pytest.raises(MarkerNotFound, match="could not find beginning of fragment"):
        extract_fragment("var x int\n// END\n", 0, 0)


def test_extract_missing_end():
    with pytest.raises(MarkerMissing, match="could not find end of fragment"):
        extract_fragment("// BEGIN\nvar x int\n", 0, 0)


def test_reassemble_uses_formatter_rendering():
    """The fragment is cut from the formatter's rendering, not the parsed source."""
    formatter = FakeFormatter()
    tree = GoSource(source="// BEGIN\nvar  x   int\n// END\n", canonical="// BEGIN\nvar x int\n// END\n")
    outcome = ParseOutcome(tree=tree, strategy=WrappingStrategy.WHOLE_PROGRAM)

    assert reassemble(outcome, 0, formatter) == "var x int"


class BrokenRenderer(FakeFormatter):
    def render(self, tree):
        raise ValueError("unexpected node")


def test_reassemble_render_failure():
    """Rendering faults surface as a RenderError."""
    tree = GoSource(source="// BEGIN\n// END\n", canonical="")
    outcome = ParseOutcome(tree=tree, strategy=WrappingStrategy.WHOLE_PROGRAM)

    with pytest.raises(RenderError, match="unexpected node"):
        reassemble(outcome, 0, BrokenRenderer())


def test_extract_keeps_unusual_line_breaks():
    """Line separators and form feeds inside literals and comments are not newlines."""
    rendered = (
        "func init() {\n"
        "\t// BEGIN\n"
        '\ts := "a\u2028b"\n'
        "\tx := 1 // a\x0cb\n"
        "\t// END\n"
        "}\n"
    )
    assert extract_fragment(rendered, 1, 0) == 's := "a\u2028b"\nx := 1 // a\x0cb'


def test_extract_crlf_rendering():
    rendered = "// BEGIN\r\nvar x int\r\n// END\r\n"
    assert extract_fragment(rendered, 0, 2) == "  var x int"
