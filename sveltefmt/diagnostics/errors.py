"""Exceptions that abort a format pass, each carrying a Diagnostic."""

from __future__ import annotations

import json
from dataclasses import replace
from typing import Any, Self

from sveltefmt.diagnostics.codes import (
    EMBED_INVALID_SYNTAX,
    OPTIONS_INVALID_VALUE,
    PARSER_SYNTAX_ERROR,
    PRINTER_UNKNOWN_NODE,
    DiagnosticSpec,
)
from sveltefmt.diagnostics.diagnostic import Diagnostic
from sveltefmt.text import TextRange


class FormatError(Exception):
    """Base class for failures of a whole format call."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def range(self) -> TextRange:
        return self.diagnostic.range

    @classmethod
    def from_spec(
        cls,
        spec: DiagnosticSpec,
        range: TextRange,
        message: str | None = None,
        **kwargs: Any,
    ) -> Self:
        diagnostic = Diagnostic(
            code=spec.code,
            message=message or spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
        return cls(diagnostic, **kwargs)


class ParseError(FormatError):
    """Parser failure with a normalized start/end location."""

    @classmethod
    def at(cls, message: str, start: int | None, end: int | None) -> ParseError:
        start = start or 0
        end = start if end is None else max(end, start)
        return cls.from_spec(PARSER_SYNTAX_ERROR, TextRange(start, end), message)


class UnknownNodeError(FormatError):
    """Raised when the printer is handed a node kind it has no rule for."""

    def __init__(self, diagnostic: Diagnostic, node_type: str = "", serialized: str = "") -> None:
        super().__init__(diagnostic)
        self.node_type = node_type
        self.serialized = serialized

    @classmethod
    def for_node(cls, node_type: str, start: int, end: int, raw: Any) -> UnknownNodeError:
        serialized = json.dumps(raw, indent=4, default=str, ensure_ascii=False)
        return cls.from_spec(
            PRINTER_UNKNOWN_NODE,
            TextRange(start, max(start, end)),
            f"unknown node type: {node_type}",
            node_type=node_type,
            serialized=serialized,
        )


class EmbeddedFormatError(FormatError):
    """An embedded script, style or expression failed to format."""

    def __init__(self, diagnostic: Diagnostic, language: str = "") -> None:
        super().__init__(diagnostic)
        self.language = language

    @classmethod
    def invalid(cls, language: str, message: str, range: TextRange) -> EmbeddedFormatError:
        return cls.from_spec(
            EMBED_INVALID_SYNTAX,
            range,
            f"{language}: {message}",
            language=language,
        )

    def shifted(self, delta: int) -> EmbeddedFormatError:
        """Same error with its range moved into the host document."""
        return self.relocated(self.diagnostic.range.shift(delta))

    def relocated(self, range: TextRange) -> EmbeddedFormatError:
        return EmbeddedFormatError(replace(self.diagnostic, range=range), language=self.language)


class OptionsError(FormatError):
    @classmethod
    def invalid(cls, message: str) -> OptionsError:
        return cls.from_spec(OPTIONS_INVALID_VALUE, TextRange.empty(0), message)
