"""Formatting entrypoints and options."""

from sveltefmt.format.options import (
    LANGUAGE,
    OPTION_DECLARATIONS,
    FormatOptions,
    LanguageRecord,
    OptionDeclaration,
    SortOrder,
)
from sveltefmt.format.runner import build_doc, format_text, run_format

__all__ = [
    "LANGUAGE",
    "OPTION_DECLARATIONS",
    "FormatOptions",
    "LanguageRecord",
    "OptionDeclaration",
    "SortOrder",
    "build_doc",
    "format_text",
    "run_format",
]
