"""Sub-language formatter boundary."""

from __future__ import annotations

from typing import Literal, Protocol

type EmbeddedLanguage = Literal["typescript", "css", "expression"]


class EmbeddedFormatter(Protocol):
    """Formats one extracted region of script, style or expression text.

    Implementations must be re-entrant: one document calls `format` once per
    embedded region, in sequence. Invalid input raises `EmbeddedFormatError`
    with a range relative to `text`.
    """

    def format(self, text: str, language: EmbeddedLanguage) -> str: ...
