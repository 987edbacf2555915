"""High-level parse entrypoint for Svelte source text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sveltefmt.parser.snip import preprocess
from sveltefmt.parser.svelte import NodeSvelteParser, SvelteParser

if TYPE_CHECKING:
    from sveltefmt.pipeline import SvelteParseResult

logger = logging.getLogger(__name__)


def parse(text: str, parser: SvelteParser | None = None) -> dict[str, Any]:
    """Preprocess `text` and return the parser's raw JSON AST."""
    return parse_result(text, parser=parser).raw_ast


def parse_result(text: str, parser: SvelteParser | None = None) -> SvelteParseResult:
    from sveltefmt.pipeline import SvelteParseResult

    resolved_parser = parser if parser is not None else NodeSvelteParser()
    parser_input = preprocess(text)
    logger.debug("preprocessed %d chars into %d chars", len(text), len(parser_input))
    return SvelteParseResult(
        source_text=text,
        parser_input=parser_input,
        raw_ast=resolved_parser.parse(parser_input),
    )
