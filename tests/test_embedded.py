import pytest

from sveltefmt.diagnostics import EmbeddedFormatError
from sveltefmt.embedded import (
    BeautifierFormatter,
    check_syntax,
    collapse_line_breaks,
    prefer_single_quotes,
    strip_wrapping_parens,
    template_literal_ranges,
)
from sveltefmt.text import TextRange


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("(a + b)", "a + b"),
        ("(a)(b)", "(a)(b)"),
        ("(f(')'))", "f(')')"),
        ("a + b", "a + b"),
        (r"(/\)/.test(a) || (b))", r"/\)/.test(a) || (b)"),
        ("(a) || (b)", "(a) || (b)"),
    ],
)
def test_strip_wrapping_parens(text: str, expected: str) -> None:
    assert strip_wrapping_parens(text) == expected


def test_prefer_single_quotes_rewrites_plain_double_quoted_strings() -> None:
    source, tree = check_syntax('f("a", "it\'s", \'b\')', "expression")

    assert prefer_single_quotes(source, tree) == "f('a', \"it's\", 'b')"


def test_check_syntax_reports_the_error_location() -> None:
    with pytest.raises(EmbeddedFormatError) as excinfo:
        check_syntax("let a = 1;\nlet = ;", "typescript")

    error = excinfo.value
    assert error.language == "typescript"
    assert error.diagnostic.code == "EMBED_INVALID_SYNTAX"
    assert error.range.start >= len("let a = 1;\n")


def test_expression_formatting_is_single_line_and_unwrapped() -> None:
    formatter = BeautifierFormatter()

    assert formatter.format("a  +   b", "expression") == "a + b"
    assert formatter.format('items.map( x => "y" )', "expression") == "items.map(x => 'y')"


def test_regex_literal_parens_do_not_unwrap_the_expression() -> None:
    formatter = BeautifierFormatter()

    formatted = formatter.format(r"/\)/.test(a) || (b)", "expression")

    assert formatted == r"/\)/.test(a) || (b)"
    assert formatter.format(formatted, "expression") == formatted


def test_template_literal_line_breaks_survive_expression_formatting() -> None:
    assert BeautifierFormatter().format("`a\n  b`", "expression") == "`a\n  b`"


def test_template_literal_ranges_skip_nested_templates() -> None:
    text = "const s = `a${`b`}\nc`;\nf(`d`);"

    assert template_literal_ranges(text) == [
        TextRange(text.index("`a"), text.index(";")),
        TextRange(text.index("`d`"), text.index("`d`") + 3),
    ]


def test_collapse_line_breaks_keeps_template_literals() -> None:
    assert collapse_line_breaks("f(\n  a,\n  `x\n  y`\n)") == "f( a, `x\n  y` )"


def test_invalid_expression_range_is_relative_to_the_expression() -> None:
    with pytest.raises(EmbeddedFormatError) as excinfo:
        BeautifierFormatter().format("a +", "expression")

    assert excinfo.value.range.start <= len("a +")


def test_css_is_indented_with_configured_width() -> None:
    assert BeautifierFormatter(indent_size=2).format("p{color:red}", "css") == "p {\n  color: red\n}"


def test_embedded_error_shift_and_relocate() -> None:
    error = EmbeddedFormatError.invalid("css", "bad", TextRange(1, 2))

    assert error.shifted(10).range == TextRange(11, 12)
    assert error.relocated(TextRange(0, 40)).range == TextRange(0, 40)
    assert error.shifted(10).language == "css"
