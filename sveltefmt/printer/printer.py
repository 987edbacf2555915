"""AST printer: every formatting rule for every template node kind."""

from __future__ import annotations

import re
from dataclasses import asdict, is_dataclass
from typing import Final

from sveltefmt.ast import (
    Action,
    Animation,
    Attribute,
    AttributeShorthand,
    AwaitBlock,
    Binding,
    Body,
    CatchBlock,
    ClassDirective,
    Comment,
    DebugTag,
    EachBlock,
    ElseBlock,
    EventHandler,
    Expression,
    Fragment,
    IfBlock,
    InlineComponent,
    Let,
    MustacheTag,
    Node,
    Options,
    PendingBlock,
    RawMustacheTag,
    Ref,
    Root,
    Spread,
    TagNode,
    TemplateNode,
    Text,
    ThenBlock,
    Transition,
    UnknownNode,
    all_empty,
)
from sveltefmt.diagnostics import UnknownNodeError
from sveltefmt.doc import (
    HARDLINE,
    LINE,
    SOFTLINE,
    Doc,
    concat,
    dedent,
    fill,
    group,
    indent,
    join,
    line,
)
from sveltefmt.parser.snip import has_snipped_content, unsnip_content
from sveltefmt.printer.children import print_children
from sveltefmt.printer.context import PrintContext
from sveltefmt.printer.embed import embed

# @see http://xahlee.info/js/html5_non-closing_tag.html
SELF_CLOSING_TAGS: Final[frozenset[str]] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

_WORD_SEPARATOR_RE: Final[re.Pattern[str]] = re.compile(r"[\t\n\f\r ]+")


def print_root(root: Root, ctx: PrintContext) -> Doc:
    """Top-level sections in the configured sort order."""
    parts: list[Doc] = []
    for section in ctx.options.sort_order.sections():
        match section:
            case "scripts":
                if root.module is not None:
                    parts.append(print_node(root.module, ctx))
                if root.instance is not None:
                    parts.append(print_node(root.instance, ctx))
            case "styles":
                if root.css is not None:
                    parts.append(print_node(root.css, ctx))
            case "markup":
                html_doc = print_node(root.html, ctx)
                if html_doc:
                    parts.append(html_doc)
    return group(join(HARDLINE, parts))


def print_node(node: Node, ctx: PrintContext) -> Doc:
    embedded = embed(node, ctx, print_node)
    if embedded is not None:
        return embedded
    return _print_structural(node, ctx)


def print_js(expression: Expression, ctx: PrintContext) -> Doc:
    return print_node(expression, ctx.as_js())


def _children(children: tuple[TemplateNode, ...], ctx: PrintContext) -> Doc:
    return print_children(children, ctx, print_node)


def _directive_value(expression: Expression | None, ctx: PrintContext) -> Doc:
    if expression is None:
        return ""
    open_, close = ctx.mustache_quotes
    return concat(["=", open_, print_js(expression, ctx), close])


def _modifiers(modifiers: tuple[str, ...]) -> Doc:
    if not modifiers:
        return ""
    return concat(["|", join("|", modifiers)])


def _print_structural(node: Node, ctx: PrintContext) -> Doc:
    child_ctx = ctx.child(node)
    match node:
        case Fragment(children=children):
            if not children or all_empty(children):
                return ""
            return concat(
                [print_children(children, child_ctx, print_node, surrounding_lines=False), HARDLINE]
            )

        case Text():
            if node.is_empty:
                # A text node is lonely when it is alone in an inline run, such as
                # the whitespace between consecutive tags. Lonely empty text is
                # dropped unless it held at least one blank line.
                return line(keep_if_lonely=node.has_blank_line)
            # each word is joined by a line so `fill` can wrap text like prose
            return fill(join(LINE, _WORD_SEPARATOR_RE.split(node.content)).parts)

        case Options() | Body():
            return group(
                concat(
                    [
                        "<",
                        node.name,
                        indent(group(concat(print_node(attr, child_ctx) for attr in node.attributes))),
                        " />",
                    ]
                )
            )

        case TagNode():
            return _print_tag(node, ctx)

        case Expression() if node.is_identifier:
            return node.name or ""

        case Attribute():
            return _print_attribute(node, child_ctx)

        case MustacheTag() | AttributeShorthand():
            return concat(["{", print_js(node.expression, child_ctx), "}"])

        case IfBlock():
            parts: list[Doc] = [
                "{#if ",
                print_js(node.expression, child_ctx),
                "}",
                indent(_children(node.children, child_ctx)),
            ]
            if node.else_block is not None:
                parts.append(print_node(node.else_block, child_ctx))
            parts.append("{/if}")
            return group(concat(parts))

        case ElseBlock():
            return _print_else(node, ctx)

        case EachBlock():
            parts = [
                "{#each ",
                print_js(node.expression, child_ctx),
                " as ",
                print_js(node.context, child_ctx),
            ]
            if node.index:
                parts.extend([", ", node.index])
            if node.key is not None:
                parts.extend([" (", print_js(node.key, child_ctx), ")"])
            parts.extend(["}", indent(_children(node.children, child_ctx))])
            if node.else_block is not None:
                parts.append(print_node(node.else_block, child_ctx))
            parts.append("{/each}")
            return group(concat(parts))

        case AwaitBlock():
            return _print_await(node, child_ctx)

        case PendingBlock() | ThenBlock() | CatchBlock():
            return _children(node.children, child_ctx)

        case EventHandler():
            return concat(
                [
                    LINE,
                    "on:",
                    node.name,
                    _modifiers(node.modifiers),
                    _directive_value(node.expression, child_ctx),
                ]
            )

        case Binding() | ClassDirective():
            prefix = "bind:" if isinstance(node, Binding) else "class:"
            shorthand = node.expression.is_identifier_named(node.name)
            return concat(
                [
                    LINE,
                    prefix,
                    node.name,
                    "" if shorthand else _directive_value(node.expression, child_ctx),
                ]
            )

        case Let():
            shorthand = node.expression is None or node.expression.is_identifier_named(node.name)
            return concat(
                [
                    LINE,
                    "let:",
                    node.name,
                    "" if shorthand else _directive_value(node.expression, child_ctx),
                ]
            )

        case DebugTag():
            identifiers: Doc = ""
            if node.identifiers:
                identifiers = concat(
                    [" ", join(", ", (print_node(item, child_ctx) for item in node.identifiers))]
                )
            return concat(["{@debug", identifiers, "}"])

        case Ref():
            return concat([LINE, "ref:", node.name])

        case Comment():
            text = node.data
            if has_snipped_content(text):
                text = unsnip_content(text)
            return group(concat(["<!--", text, "-->"]))

        case Transition():
            return concat(
                [
                    LINE,
                    node.directive,
                    ":",
                    node.name,
                    _modifiers(node.modifiers),
                    _directive_value(node.expression, child_ctx),
                ]
            )

        case Action() | Animation():
            prefix = "use:" if isinstance(node, Action) else "animate:"
            return concat([LINE, prefix, node.name, _directive_value(node.expression, child_ctx)])

        case RawMustacheTag():
            return concat(["{@html ", print_js(node.expression, child_ctx), "}"])

        case Spread():
            return concat([LINE, "{...", print_js(node.expression, child_ctx), "}"])

    raise _unknown_node(node)


def _unknown_node(node: object) -> UnknownNodeError:
    if isinstance(node, UnknownNode):
        return UnknownNodeError.for_node(node.type, node.start, node.end, node.raw)
    node_type = str(getattr(node, "type", type(node).__name__))
    raw = asdict(node) if is_dataclass(node) and not isinstance(node, type) else repr(node)
    start = int(getattr(node, "start", 0) or 0)
    end = int(getattr(node, "end", start) or start)
    return UnknownNodeError.for_node(node_type, start, end, raw)


def _print_tag(node: TagNode, ctx: PrintContext) -> Doc:
    options = ctx.options
    child_ctx = ctx.child(node)
    is_empty = all_empty(node.children)
    is_self_closing = is_empty and (
        not options.strict_mode
        or node.type != "Element"
        or node.name in SELF_CLOSING_TAGS
    )

    this_attribute: Doc = ""
    if isinstance(node, InlineComponent) and node.expression is not None:
        open_, close = ctx.mustache_quotes
        this_attribute = concat(
            [LINE, "this=", open_, print_js(node.expression, child_ctx), close]
        )

    bracket: Doc = ""
    if options.bracket_new_line:
        bracket = dedent(LINE if is_self_closing else SOFTLINE)

    closing: Doc = ">"
    if is_self_closing:
        closing = "/>" if options.bracket_new_line else " />"

    return group(
        concat(
            [
                "<",
                node.name,
                indent(
                    group(
                        concat(
                            [
                                this_attribute,
                                *(print_node(attr, child_ctx) for attr in node.attributes),
                                bracket,
                            ]
                        )
                    )
                ),
                closing,
                "" if is_empty else indent(_children(node.children, child_ctx)),
                "" if is_self_closing else concat(["</", node.name, ">"]),
            ]
        )
    )


def _print_attribute(node: Attribute, ctx: PrintContext) -> Doc:
    value = node.value
    lone = value[0] if value is not True and len(value) == 1 else None
    has_lone_mustache = isinstance(lone, MustacheTag)
    is_shorthand = isinstance(lone, AttributeShorthand)

    # a={a} becomes {a}
    if isinstance(lone, MustacheTag):
        is_shorthand = lone.expression.is_identifier_named(node.name)

    if is_shorthand:
        return concat([LINE, "{", node.name, "}"])

    parts: list[Doc] = [LINE, node.name]
    if value is not True:
        parts.append("=")
        quotes = not has_lone_mustache or ctx.options.strict_mode
        if quotes:
            parts.append('"')
        parts.extend(print_node(item, ctx) for item in value)
        if quotes:
            parts.append('"')
    return concat(parts)


def _print_else(node: ElseBlock, ctx: PrintContext) -> Doc:
    children = node.children
    # else-if chains do not collapse inside each-blocks
    if (
        len(children) == 1
        and isinstance(children[0], IfBlock)
        and not isinstance(ctx.parent, EachBlock)
    ):
        if_node = children[0]
        if_ctx = ctx.child(if_node)
        parts: list[Doc] = [
            "{:else if ",
            print_js(if_node.expression, if_ctx),
            "}",
            indent(_children(if_node.children, if_ctx)),
        ]
        if if_node.else_block is not None:
            parts.append(print_node(if_node.else_block, if_ctx))
        return group(concat(parts))
    return group(concat(["{:else}", indent(_children(children, ctx.child(node)))]))


def _print_await(node: AwaitBlock, ctx: PrintContext) -> Doc:
    has_pending_block = not all_empty(node.pending.children)
    has_catch_block = not all_empty(node.catch.children)
    opening = group(concat(["{#await ", print_js(node.expression, ctx), "}"]))
    then_opening = group(concat(["{:then", f" {node.value}" if node.value else "", "}"]))

    if has_pending_block and has_catch_block:
        return group(
            concat(
                [
                    opening,
                    indent(print_node(node.pending, ctx)),
                    then_opening,
                    indent(print_node(node.then, ctx)),
                    group(concat(["{:catch", f" {node.error}" if node.error else "", "}"])),
                    indent(print_node(node.catch, ctx)),
                    "{/await}",
                ]
            )
        )

    if has_pending_block:
        return group(
            concat(
                [
                    opening,
                    indent(print_node(node.pending, ctx)),
                    then_opening,
                    indent(print_node(node.then, ctx)),
                    "{/await}",
                ]
            )
        )

    return group(
        concat(
            [
                group(
                    concat(
                        [
                            "{#await ",
                            print_js(node.expression, ctx),
                            " then ",
                            node.value or "",
                            "}",
                        ]
                    )
                ),
                indent(print_node(node.then, ctx)),
                "{/await}",
            ]
        )
    )
