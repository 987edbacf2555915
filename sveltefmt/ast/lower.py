"""Lower the parser's JSON AST into the typed model."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, cast

from sveltefmt.ast.model import (
    Action,
    Animation,
    Attribute,
    AttributeLike,
    AttributeShorthand,
    AttributeValue,
    AwaitBlock,
    Binding,
    Body,
    CatchBlock,
    ClassDirective,
    Comment,
    DebugTag,
    EachBlock,
    Element,
    ElseBlock,
    EventHandler,
    Expression,
    Fragment,
    Head,
    IfBlock,
    InlineComponent,
    Let,
    MustacheTag,
    Options,
    PendingBlock,
    RawMustacheTag,
    Ref,
    Root,
    Script,
    Slot,
    Spread,
    Style,
    TagNode,
    TemplateNode,
    Text,
    ThenBlock,
    Title,
    Transition,
    UnknownNode,
    Window,
)

type Data = Mapping[str, Any]

_TAG_CLASSES: dict[str, type[TagNode]] = {
    "Element": Element,
    "Slot": Slot,
    "Window": Window,
    "Head": Head,
    "Title": Title,
    "Options": Options,
    "Body": Body,
}


def lower_ast(data: Data) -> Root:
    """Convert a parser result (`html`/`css`/`instance`/`module`) into a Root."""
    html = data.get("html")
    fragment = (
        _lower_fragment(html)
        if html
        else Fragment(start=0, end=0, children=())
    )
    css = data.get("css")
    instance = data.get("instance")
    module = data.get("module")
    return Root(
        html=fragment,
        css=_lower_style(css) if css else None,
        instance=_lower_script(instance) if instance else None,
        module=_lower_script(module) if module else None,
    )


def lower_node(data: Data) -> TemplateNode:
    """Lower one template (markup) node."""
    node_type = data.get("type")
    lowerer = _TEMPLATE_LOWERERS.get(node_type or "")
    if lowerer is None:
        return _unknown(data)
    return lowerer(data)


def lower_expression(data: Data) -> Expression:
    return Expression(
        type=str(data.get("type", "")),
        start=int(data["start"]),
        end=int(data["end"]),
        name=data.get("name") if data.get("type") == "Identifier" else None,
    )


def _optional_expression(data: Data) -> Expression | None:
    expression = data.get("expression")
    return lower_expression(expression) if expression else None


def _children(data: Data) -> tuple[TemplateNode, ...]:
    return tuple(lower_node(child) for child in data.get("children") or ())


def _span(data: Data) -> dict[str, int]:
    return {"start": int(data.get("start") or 0), "end": int(data.get("end") or 0)}


def _unknown(data: Data) -> UnknownNode:
    return UnknownNode(type=str(data.get("type")), raw=dict(data), **_span(data))


def _lower_fragment(data: Data) -> Fragment:
    return Fragment(children=_children(data), **_span(data))


def _lower_script(data: Data) -> Script:
    return Script(context=str(data.get("context") or "default"), **_span(data))


def _lower_style(data: Data) -> Style:
    return Style(attributes=_attributes(data), **_span(data))


def _lower_text(data: Data) -> Text:
    return Text(data=str(data.get("data", "")), raw=data.get("raw"), **_span(data))


def _lower_mustache(data: Data) -> MustacheTag:
    return MustacheTag(expression=lower_expression(data["expression"]), **_span(data))


def _lower_raw_mustache(data: Data) -> RawMustacheTag:
    return RawMustacheTag(expression=lower_expression(data["expression"]), **_span(data))


def _lower_comment(data: Data) -> Comment:
    return Comment(data=str(data.get("data", "")), **_span(data))


def _lower_debug(data: Data) -> DebugTag:
    identifiers = tuple(lower_expression(item) for item in data.get("identifiers") or ())
    return DebugTag(identifiers=identifiers, **_span(data))


def _lower_tag(data: Data) -> TagNode:
    node_type = str(data["type"])
    name = str(data.get("name", ""))
    if node_type == "InlineComponent":
        return InlineComponent(
            name=name,
            attributes=_attributes(data),
            children=_children(data),
            expression=_optional_expression(data),
            **_span(data),
        )
    cls = _TAG_CLASSES[node_type]
    return cls(
        name=name,
        attributes=_attributes(data),
        children=_children(data),
        **_span(data),
    )


def _lower_else(data: Data | None) -> ElseBlock | None:
    if not data:
        return None
    return ElseBlock(children=_children(data), **_span(data))


def _lower_if(data: Data) -> IfBlock:
    return IfBlock(
        expression=lower_expression(data["expression"]),
        children=_children(data),
        else_block=_lower_else(data.get("else")),
        **_span(data),
    )


def _lower_each(data: Data) -> EachBlock:
    key = data.get("key")
    return EachBlock(
        expression=lower_expression(data["expression"]),
        context=lower_expression(data["context"]),
        children=_children(data),
        index=data.get("index"),
        key=lower_expression(key) if key else None,
        else_block=_lower_else(data.get("else")),
        **_span(data),
    )


def _lower_await(data: Data) -> AwaitBlock:
    pending = data.get("pending") or {}
    then = data.get("then") or {}
    catch = data.get("catch") or {}
    return AwaitBlock(
        expression=lower_expression(data["expression"]),
        pending=PendingBlock(children=_children(pending), **_span(pending)),
        then=ThenBlock(children=_children(then), **_span(then)),
        catch=CatchBlock(children=_children(catch), **_span(catch)),
        value=_binding_name(data.get("value")),
        error=_binding_name(data.get("error")),
        **_span(data),
    )


def _binding_name(value: Any) -> str | None:
    # newer compilers report the await bindings as Identifier nodes
    if isinstance(value, Mapping):
        return value.get("name")
    return value


# --- attributes -------------------------------------------------------------


def _attributes(data: Data) -> tuple[AttributeLike, ...]:
    return tuple(_lower_attribute(item) for item in data.get("attributes") or ())


def _lower_attribute_value(data: Data) -> AttributeValue:
    match data.get("type"):
        case "Text":
            return _lower_text(data)
        case "MustacheTag":
            return _lower_mustache(data)
        case "AttributeShorthand":
            return AttributeShorthand(
                expression=lower_expression(data["expression"]),
                **_span(data),
            )
    return cast(AttributeValue, _unknown(data))


def _lower_attribute(data: Data) -> AttributeLike:
    span = _span(data)
    name = str(data.get("name", ""))
    match data.get("type"):
        case "Attribute":
            value = data.get("value", True)
            if value is True:
                return Attribute(name=name, value=True, **span)
            return Attribute(
                name=name,
                value=tuple(_lower_attribute_value(item) for item in value),
                **span,
            )
        case "Spread":
            return Spread(expression=lower_expression(data["expression"]), **span)
        case "EventHandler":
            return EventHandler(
                name=name,
                modifiers=tuple(data.get("modifiers") or ()),
                expression=_optional_expression(data),
                **span,
            )
        case "Binding":
            return Binding(name=name, expression=lower_expression(data["expression"]), **span)
        case "Class":
            return ClassDirective(
                name=name,
                expression=lower_expression(data["expression"]),
                **span,
            )
        case "Let":
            return Let(name=name, expression=_optional_expression(data), **span)
        case "Action":
            return Action(name=name, expression=_optional_expression(data), **span)
        case "Animation":
            return Animation(name=name, expression=_optional_expression(data), **span)
        case "Transition":
            return Transition(
                name=name,
                intro=bool(data.get("intro")),
                outro=bool(data.get("outro")),
                modifiers=tuple(data.get("modifiers") or ()),
                expression=_optional_expression(data),
                **span,
            )
        case "Ref":
            return Ref(name=name, **span)
    return _unknown(data)


_TEMPLATE_LOWERERS: dict[str, Callable[[Data], TemplateNode]] = {
    "Text": _lower_text,
    "MustacheTag": _lower_mustache,
    "RawMustacheTag": _lower_raw_mustache,
    "Comment": _lower_comment,
    "DebugTag": _lower_debug,
    "IfBlock": _lower_if,
    "EachBlock": _lower_each,
    "AwaitBlock": _lower_await,
    "InlineComponent": _lower_tag,
    **{node_type: _lower_tag for node_type in _TAG_CLASSES},
}
