"""Embedding: format script, style and expression regions with a sub-formatter.

`embed` returns None for every node it does not handle, which sends the
node down the structural printer instead.
"""

from __future__ import annotations

import logging

from sveltefmt.ast import (
    Attribute,
    AttributeLike,
    Element,
    Node,
    Script,
    Style,
    Text,
)
from sveltefmt.diagnostics import PARSER_BAD_OUTPUT, EmbeddedFormatError, ParseError
from sveltefmt.doc import (
    HARDLINE,
    LINE,
    Doc,
    concat,
    group,
    indent,
    join_lines,
    nuke_last_line,
    remove_lines,
    text_to_doc,
)
from sveltefmt.embedded import EmbeddedLanguage, template_literal_ranges
from sveltefmt.parser.snip import SNIPPED_CONTENT_ATTRIBUTE, decode_content
from sveltefmt.printer.attributes import extract_attributes
from sveltefmt.printer.context import PrintContext, PrintFn
from sveltefmt.text import Located, node_range

logger = logging.getLogger(__name__)


def embed(node: Node, ctx: PrintContext, print_node: PrintFn) -> Doc | None:
    if ctx.is_js:
        return embed_expression(node, ctx)

    match node:
        case Script():
            attributes = _script_attributes(node, ctx)
            return embed_tag("script", node, attributes, ctx, print_node)
        case Style():
            return embed_tag("style", node, node.attributes, ctx, print_node)
        case Element(name="script" | "style"):
            return embed_tag(node.name, node, node.attributes, ctx, print_node, inline=True)
    return None


def _script_attributes(node: Script, ctx: PrintContext) -> tuple[Attribute, ...]:
    try:
        return extract_attributes(ctx.get_text(node))
    except ValueError as exc:
        raise ParseError.from_spec(PARSER_BAD_OUTPUT, node_range(node), str(exc)) from exc


def embed_expression(node: Located, ctx: PrintContext) -> Doc:
    """Single-line rendering of the expression whose source `node` spans."""
    text = ctx.get_text(node)
    formatted = format_embedded(text, "expression", node, ctx, offset=node.start).strip()
    return remove_lines(join_lines(formatted, LINE, template_literal_ranges(formatted)))


def format_embedded(
    text: str,
    language: EmbeddedLanguage,
    node: Located,
    ctx: PrintContext,
    *,
    offset: int | None = None,
) -> str:
    """Run the sub-formatter, mapping its error location into the host text.

    With `offset`, the embedded text is a verbatim slice of the host text
    starting there; otherwise the error is reported on the whole node.
    """
    try:
        return ctx.formatter.format(text, language)
    except EmbeddedFormatError as exc:
        if offset is not None:
            raise exc.shifted(offset) from exc
        raise exc.relocated(node_range(node)) from exc


def snipped_content(attributes: tuple[AttributeLike, ...]) -> tuple[str, Attribute | None]:
    """Decoded body of a snipped tag and the attribute that carried it."""
    content_attribute = next(
        (
            attribute
            for attribute in attributes
            if isinstance(attribute, Attribute) and attribute.name == SNIPPED_CONTENT_ATTRIBUTE
        ),
        None,
    )
    content = ""
    if (
        content_attribute is not None
        and content_attribute.value is not True
        and len(content_attribute.value) > 0
        and isinstance(content_attribute.value[0], Text)
    ):
        content = decode_content(content_attribute.value[0].data)
    return content, content_attribute


def embed_tag(
    tag: str,
    node: Script | Style | Element,
    attributes: tuple[AttributeLike, ...],
    ctx: PrintContext,
    print_node: PrintFn,
    inline: bool = False,
) -> Doc:
    language: EmbeddedLanguage = "typescript" if tag == "script" else "css"
    content, content_attribute = snipped_content(attributes)
    printed_attributes = [attribute for attribute in attributes if attribute is not content_attribute]
    logger.debug("embedding <%s> at %d with %d chars", tag, node.start, len(content))

    formatted = format_embedded(content, language, node, ctx).strip("\n")
    literal_ranges = template_literal_ranges(formatted) if language == "typescript" else ()
    body = text_to_doc(formatted, literal_ranges)
    attribute_ctx = ctx.child(node)
    return group(
        concat(
            [
                "<",
                tag,
                indent(
                    group(concat(print_node(attribute, attribute_ctx) for attribute in printed_attributes))
                ),
                ">",
                indent(concat([HARDLINE, nuke_last_line(body)])),
                HARDLINE,
                "</",
                tag,
                ">",
                "" if inline else HARDLINE,
            ]
        )
    )
