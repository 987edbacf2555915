import pytest

from sveltefmt.diagnostics import ParseError, render_diagnostic
from sveltefmt.doc import print_doc_to_string
from sveltefmt.format import FormatOptions, build_doc, format_text, run_format
from sveltefmt.parser import parse_result
from tests._svelte_ast import FakeFormatter, StaticParser, element, fragment, root


def _paragraph_parser(parser_input: str = "<p></p>") -> StaticParser:
    return StaticParser(root(fragment(parser_input, [element(parser_input, "<p></p>", "p")])))


def test_run_format_reports_whether_text_changed() -> None:
    formatter = FakeFormatter()

    unchanged = run_format("<p />\n", parser=_paragraph_parser(), formatter=formatter)
    changed = run_format("<p></p>", parser=_paragraph_parser(), formatter=formatter)

    assert unchanged.formatted_text == "<p />\n"
    assert unchanged.changed is False
    assert changed.changed is True


def test_run_format_reuses_a_parse_result() -> None:
    parser = _paragraph_parser()
    parse = parse_result("<p></p>", parser=parser)

    result = run_format("<p></p>", parse=parse, formatter=FakeFormatter())

    assert result.parse is parse
    assert len(parser.seen) == 1


def test_run_format_rejects_parse_and_parser_together() -> None:
    parser = _paragraph_parser()
    parse = parse_result("<p></p>", parser=parser)

    with pytest.raises(ValueError, match="Pass either parse or parser, not both"):
        run_format("<p></p>", parser=parser, parse=parse)


def test_build_doc_and_format_text_agree() -> None:
    parse = parse_result("<p></p>", parser=_paragraph_parser())
    options = FormatOptions()

    doc = build_doc(parse, options, formatter=FakeFormatter())

    assert print_doc_to_string(doc) == format_text(
        "<p></p>", options, parser=_paragraph_parser(), formatter=FakeFormatter()
    )


def test_render_diagnostic_with_source_location() -> None:
    error = ParseError.at("Expected }", 4, 5)

    assert render_diagnostic(error.diagnostic, "<p>\n{a</p>") == (
        "error[PARSER_SYNTAX_ERROR] 2:1: Expected }"
    )
    assert render_diagnostic(error.diagnostic) == "error[PARSER_SYNTAX_ERROR] 4-5: Expected }"
