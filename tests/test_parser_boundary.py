import pytest

from sveltefmt.diagnostics import ParseError
from sveltefmt.parser import NodeSvelteParser, parse, parse_result, read_parser_payload
from sveltefmt.text import TextRange
from tests._svelte_ast import StaticParser, fragment, root


def test_error_payload_with_compiler_locations() -> None:
    payload = {
        "error": {
            "message": "Expected }",
            "start": {"line": 1, "column": 3, "character": 3},
            "end": {"line": 1, "column": 5, "character": 5},
        }
    }

    with pytest.raises(ParseError) as excinfo:
        read_parser_payload(payload, "<p>{a</p>")

    assert excinfo.value.range == TextRange(3, 5)
    assert excinfo.value.diagnostic.code == "PARSER_SYNTAX_ERROR"
    assert excinfo.value.diagnostic.message == "Expected }"


def test_error_payload_falls_back_to_position() -> None:
    with pytest.raises(ParseError) as excinfo:
        read_parser_payload({"error": {"message": "Unexpected token", "pos": 4}}, "<p>{</p>")

    assert excinfo.value.range == TextRange(4, 4)


def test_payload_without_ast_is_bad_output() -> None:
    with pytest.raises(ParseError) as excinfo:
        read_parser_payload({"ast": []}, "")

    assert excinfo.value.diagnostic.code == "PARSER_BAD_OUTPUT"


def test_offsets_are_remapped_from_utf16_units() -> None:
    text = "\N{GRINNING FACE}{a}"
    payload = {
        "ast": {
            "html": {
                "type": "Fragment",
                "start": 0,
                "end": 5,
                "children": [
                    {"type": "Text", "data": "\N{GRINNING FACE}", "start": 0, "end": 2},
                    {
                        "type": "MustacheTag",
                        "start": 2,
                        "end": 5,
                        "expression": {"type": "Identifier", "name": "a", "start": 3, "end": 4},
                    },
                ],
            }
        }
    }

    ast = read_parser_payload(payload, text)

    text_node, mustache_node = ast["html"]["children"]
    assert (text_node["start"], text_node["end"]) == (0, 1)
    assert (mustache_node["start"], mustache_node["end"]) == (1, 4)
    assert text[mustache_node["expression"]["start"] : mustache_node["expression"]["end"]] == "a"


def test_missing_node_executable_is_reported_as_unavailable() -> None:
    parser = NodeSvelteParser(node_executable="sveltefmt-no-such-node-binary")

    with pytest.raises(ParseError) as excinfo:
        parser.parse("<p></p>")

    assert excinfo.value.diagnostic.code == "PARSER_UNAVAILABLE"
    assert excinfo.value.diagnostic.hint is not None


def test_parse_result_keeps_source_and_preprocessed_input() -> None:
    source = "\n<p>a</p>\n"
    parser = StaticParser(root(fragment("<p>a</p>", [])))

    result = parse_result(source, parser=parser)

    assert parser.seen == ["<p>a</p>"]
    assert result.source_text == source
    assert result.parser_input == "<p>a</p>"
    assert result.ast_root() is result.ast_root()
    assert parse(source, parser=parser) == parser.ast


def test_error_offsets_after_several_astral_characters() -> None:
    text = "\N{GRINNING FACE}x\N{GRINNING FACE}{b"
    payload = {
        "error": {
            "message": "Expected }",
            "start": {"line": 1, "column": 5, "character": 5},
            "end": {"line": 1, "column": 9, "character": 9},
        }
    }

    with pytest.raises(ParseError) as excinfo:
        read_parser_payload(payload, text)

    assert excinfo.value.range == TextRange(text.index("{"), len(text))
