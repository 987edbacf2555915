import pytest

from sveltefmt.text import TextRange, get_text, node_range, offset_to_line_col


def test_text_range_invariants() -> None:
    with pytest.raises(ValueError):
        TextRange(3, 1)
    with pytest.raises(ValueError):
        TextRange(-1, 1)


def test_text_range_helpers() -> None:
    text_range = TextRange(2, 5)

    assert text_range.contains(2) and not text_range.contains(5)
    assert text_range.shift(-4) == TextRange(0, 1)
    assert TextRange.empty(4) == TextRange(4, 4)


def test_offset_to_line_col_is_one_based() -> None:
    source = "<p>\n  {a}\n</p>"

    assert offset_to_line_col(source, 0) == (1, 1)
    assert offset_to_line_col(source, source.index("{")) == (2, 3)
    assert offset_to_line_col(source, 10_000) == (3, 5)


def test_get_text_slices_by_node_offsets() -> None:
    class Span:
        start = 3
        end = 6

    assert get_text(Span(), "<p>{a}</p>") == "{a}"
    assert node_range(Span()) == TextRange(3, 6)
