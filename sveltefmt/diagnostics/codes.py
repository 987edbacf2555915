"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_SYNTAX_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_SYNTAX_ERROR",
    message="Template could not be parsed",
    severity="error",
    category="parser",
)

PARSER_BAD_OUTPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_BAD_OUTPUT",
    message="Parser produced output that is not a JSON AST",
    severity="error",
    category="parser",
)

PARSER_UNAVAILABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNAVAILABLE",
    message="Template parser could not be started",
    hint="Install Node.js and the `svelte` package, or pass a parser explicitly.",
    severity="error",
    category="parser",
)

PRINTER_UNKNOWN_NODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PRINTER_UNKNOWN_NODE",
    message="Unknown node type",
    hint="The parser and the printer disagree on the template AST; check the parser version.",
    severity="error",
    category="printer",
)

EMBED_INVALID_SYNTAX: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EMBED_INVALID_SYNTAX",
    message="Embedded code could not be formatted",
    severity="error",
    category="embed",
)

OPTIONS_INVALID_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="OPTIONS_INVALID_VALUE",
    message="Invalid formatting option",
    severity="error",
    category="options",
)
