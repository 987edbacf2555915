"""Formatting options and the language registration record."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Final, Literal

from sveltefmt.diagnostics import OptionsError

type Section = Literal["scripts", "styles", "markup"]

SORT_ORDER_SEPARATOR: Final[str] = "-"


class SortOrder(StrEnum):
    """Order of the top-level script, style and markup sections."""

    SCRIPTS_STYLES_MARKUP = "scripts-styles-markup"
    SCRIPTS_MARKUP_STYLES = "scripts-markup-styles"
    MARKUP_STYLES_SCRIPTS = "markup-styles-scripts"
    MARKUP_SCRIPTS_STYLES = "markup-scripts-styles"
    STYLES_MARKUP_SCRIPTS = "styles-markup-scripts"
    STYLES_SCRIPTS_MARKUP = "styles-scripts-markup"

    def sections(self) -> list[Section]:
        return self.value.split(SORT_ORDER_SEPARATOR)  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class OptionDeclaration:
    key: str
    type: Literal["choice", "boolean", "int"]
    default: Any
    description: str
    choices: tuple[str, ...] = ()


OPTION_DECLARATIONS: Final[tuple[OptionDeclaration, ...]] = (
    OptionDeclaration(
        key="svelteSortOrder",
        type="choice",
        default=SortOrder.SCRIPTS_STYLES_MARKUP.value,
        description="Sort order for scripts, styles, and markup",
        choices=tuple(order.value for order in SortOrder),
    ),
    OptionDeclaration(
        key="svelteStrictMode",
        type="boolean",
        default=False,
        description="More strict HTML syntax: self-closed tags, quotes in attributes",
    ),
    OptionDeclaration(
        key="svelteBracketNewLine",
        type="boolean",
        default=False,
        description="Put the `>` of a multiline element on a new line",
    ),
    OptionDeclaration(
        key="printWidth",
        type="int",
        default=80,
        description="The line length where the layout will try to wrap",
    ),
    OptionDeclaration(
        key="tabWidth",
        type="int",
        default=2,
        description="Number of spaces per indentation level",
    ),
)

_FIELD_FOR_KEY: Final[dict[str, str]] = {
    "svelteSortOrder": "sort_order",
    "svelteStrictMode": "strict_mode",
    "svelteBracketNewLine": "bracket_new_line",
    "printWidth": "print_width",
    "tabWidth": "tab_width",
}


@dataclass(frozen=True, slots=True)
class LanguageRecord:
    name: str
    parsers: tuple[str, ...]
    extensions: tuple[str, ...]


LANGUAGE: Final[LanguageRecord] = LanguageRecord(
    name="svelte",
    parsers=("svelte",),
    extensions=(".svelte",),
)


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Resolved option values consumed by the printer and the layout."""

    sort_order: SortOrder = SortOrder.SCRIPTS_STYLES_MARKUP
    strict_mode: bool = False
    bracket_new_line: bool = False
    print_width: int = 80
    tab_width: int = 2

    @staticmethod
    def from_mapping(mapping: Mapping[str, Any]) -> FormatOptions:
        """Build options from prettier-style keys, e.g. ``{"svelteStrictMode": True}``."""
        values: dict[str, Any] = {}
        declarations = {declaration.key: declaration for declaration in OPTION_DECLARATIONS}
        for key, raw in mapping.items():
            declaration = declarations.get(key)
            if declaration is None:
                raise OptionsError.invalid(f"Unknown option `{key}`")
            values[_FIELD_FOR_KEY[key]] = _coerce(declaration, raw)
        return FormatOptions(**values)


def _coerce(declaration: OptionDeclaration, raw: Any) -> Any:
    if declaration.type == "choice":
        if raw not in declaration.choices:
            choices = ", ".join(declaration.choices)
            raise OptionsError.invalid(
                f"Invalid value {raw!r} for `{declaration.key}`; expected one of: {choices}"
            )
        return SortOrder(raw)

    if declaration.type == "boolean":
        if not isinstance(raw, bool):
            raise OptionsError.invalid(f"`{declaration.key}` expects a boolean, got {raw!r}")
        return raw

    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise OptionsError.invalid(
            f"`{declaration.key}` expects a non-negative integer, got {raw!r}"
        )
    return raw
