import pytest

from sveltefmt.diagnostics import OptionsError
from sveltefmt.format import LANGUAGE, OPTION_DECLARATIONS, FormatOptions, SortOrder


def test_sort_order_sections_split_on_separator() -> None:
    assert SortOrder.STYLES_MARKUP_SCRIPTS.sections() == ["styles", "markup", "scripts"]
    assert len(list(SortOrder)) == 6


def test_defaults_match_option_declarations() -> None:
    defaults = {declaration.key: declaration.default for declaration in OPTION_DECLARATIONS}
    options = FormatOptions()

    assert options.sort_order == defaults["svelteSortOrder"]
    assert options.strict_mode is defaults["svelteStrictMode"]
    assert options.bracket_new_line is defaults["svelteBracketNewLine"]
    assert options.print_width == defaults["printWidth"]


def test_from_mapping_reads_prettier_style_keys() -> None:
    options = FormatOptions.from_mapping(
        {
            "svelteSortOrder": "markup-scripts-styles",
            "svelteStrictMode": True,
            "printWidth": 100,
        }
    )

    assert options.sort_order is SortOrder.MARKUP_SCRIPTS_STYLES
    assert options.strict_mode is True
    assert options.bracket_new_line is False
    assert options.print_width == 100


@pytest.mark.parametrize(
    "mapping",
    [
        {"svelteSortOrder": "scripts-scripts-markup"},
        {"svelteStrictMode": "yes"},
        {"tabWidth": -1},
        {"semi": False},
    ],
)
def test_from_mapping_rejects_invalid_values(mapping: dict[str, object]) -> None:
    with pytest.raises(OptionsError) as excinfo:
        FormatOptions.from_mapping(mapping)

    assert excinfo.value.diagnostic.code == "OPTIONS_INVALID_VALUE"


def test_language_record_registers_svelte_extension() -> None:
    assert LANGUAGE.extensions == (".svelte",)
    assert LANGUAGE.parsers == ("svelte",)
