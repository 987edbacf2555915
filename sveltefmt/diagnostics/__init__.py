"""Diagnostics."""

from sveltefmt.diagnostics.codes import (
    EMBED_INVALID_SYNTAX,
    OPTIONS_INVALID_VALUE,
    PARSER_BAD_OUTPUT,
    PARSER_SYNTAX_ERROR,
    PARSER_UNAVAILABLE,
    PRINTER_UNKNOWN_NODE,
    DiagnosticSpec,
)
from sveltefmt.diagnostics.diagnostic import Diagnostic, Severity
from sveltefmt.diagnostics.errors import (
    EmbeddedFormatError,
    FormatError,
    OptionsError,
    ParseError,
    UnknownNodeError,
)
from sveltefmt.diagnostics.report import render_diagnostic

__all__ = [
    "EMBED_INVALID_SYNTAX",
    "OPTIONS_INVALID_VALUE",
    "PARSER_BAD_OUTPUT",
    "PARSER_SYNTAX_ERROR",
    "PARSER_UNAVAILABLE",
    "PRINTER_UNKNOWN_NODE",
    "Diagnostic",
    "DiagnosticSpec",
    "EmbeddedFormatError",
    "FormatError",
    "OptionsError",
    "ParseError",
    "Severity",
    "UnknownNodeError",
    "render_diagnostic",
]
