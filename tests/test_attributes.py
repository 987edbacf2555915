import pytest

from sveltefmt.ast import Attribute, Text
from sveltefmt.parser import SNIPPED_CONTENT_ATTRIBUTE
from sveltefmt.printer import extract_attributes


def test_extracts_quoted_and_bare_attributes() -> None:
    attributes = extract_attributes("<script context='module' defer>{}</script>")

    assert [attribute.name for attribute in attributes] == ["context", "defer"]
    context, defer = attributes
    assert context.value == (Text(start=9, end=15, data="module"),)
    assert defer.value is True


def test_value_positions_are_relative_to_the_attribute_string() -> None:
    html = f'<script lang="ts" {SNIPPED_CONTENT_ATTRIBUTE}="YQ==">{{}}</script>'
    lang, content = extract_attributes(html)

    assert lang == Attribute(start=0, end=9, name="lang", value=(Text(start=6, end=8, data="ts"),))
    assert content.name == SNIPPED_CONTENT_ATTRIBUTE
    assert content.start == 10
    assert content.value is not True
    assert content.value[0].data == "YQ=="
    assert content.value[0].start == 10 + len(SNIPPED_CONTENT_ATTRIBUTE) + 2


def test_tag_without_attributes_yields_none() -> None:
    assert extract_attributes("<script>{}</script>") == ()


def test_missing_opening_tag_is_an_error() -> None:
    with pytest.raises(ValueError):
        extract_attributes("just text")


def test_attributes_may_span_lines() -> None:
    attributes = extract_attributes('<script\n  context="module"\n  lang="ts">{}</script>')

    assert [attribute.name for attribute in attributes] == ["context", "lang"]
    assert [attribute.value[0].data for attribute in attributes if attribute.value is not True] == [
        "module",
        "ts",
    ]
