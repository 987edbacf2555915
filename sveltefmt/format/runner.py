"""Format runner over a shared Svelte parse result."""

from __future__ import annotations

import logging

from sveltefmt.doc import Doc, print_doc_to_string
from sveltefmt.embedded import BeautifierFormatter, EmbeddedFormatter
from sveltefmt.format.options import FormatOptions
from sveltefmt.parser import SvelteParser, parse_result
from sveltefmt.pipeline import FormatRunResult, SvelteParseResult
from sveltefmt.printer import PrintContext, print_root

logger = logging.getLogger(__name__)


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parser: SvelteParser | None = None,
    formatter: EmbeddedFormatter | None = None,
    parse: SvelteParseResult | None = None,
) -> FormatRunResult:
    """Format one Svelte document end to end.

    Any parse, printer or embedded-format failure propagates; no partial
    output is produced.
    """
    resolved_options = options if options is not None else FormatOptions()
    resolved_parse = _resolve_parse(text, parser=parser, parse=parse)
    doc = build_doc(resolved_parse, resolved_options, formatter=formatter)
    formatted_text = print_doc_to_string(
        doc,
        width=resolved_options.print_width,
        tab_width=resolved_options.tab_width,
    )
    logger.debug("formatted %d chars into %d chars", len(text), len(formatted_text))

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        changed=formatted_text != resolved_parse.source_text,
    )


def build_doc(
    parse: SvelteParseResult,
    options: FormatOptions,
    *,
    formatter: EmbeddedFormatter | None = None,
) -> Doc:
    ctx = PrintContext(
        source_text=parse.parser_input,
        options=options,
        formatter=formatter if formatter is not None else BeautifierFormatter(options.tab_width),
    )
    return print_root(parse.ast_root(), ctx)


def _resolve_parse(
    text: str,
    *,
    parser: SvelteParser | None,
    parse: SvelteParseResult | None,
) -> SvelteParseResult:
    if parse is not None:
        if parser is not None:
            raise ValueError("Pass either parse or parser, not both")
        return parse
    return parse_result(text, parser=parser)


def format_text(text: str, options: FormatOptions | None = None, **kwargs) -> str:
    """Formatted text only; see `run_format`."""
    return run_format(text, options, **kwargs).formatted_text
