"""Typed, immutable AST for Svelte templates.

Every node keeps the `start`/`end` offsets reported by the parser. Node kinds
are closed: the printer matches on these classes, and anything the lowering
does not recognise becomes an `UnknownNode`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

_BLANK_LINE_RE = re.compile(r"\n\r?\s*\n\r?")


@dataclass(frozen=True, slots=True)
class Expression:
    """ESTree expression or pattern, printed from its source slice."""

    type: str
    start: int
    end: int
    name: str | None = None

    @property
    def is_identifier(self) -> bool:
        return self.type == "Identifier"

    def is_identifier_named(self, name: str) -> bool:
        return self.is_identifier and self.name == name


@dataclass(frozen=True, slots=True)
class Text:
    type: ClassVar[str] = "Text"

    start: int
    end: int
    data: str
    raw: str | None = None

    @property
    def content(self) -> str:
        return self.raw or self.data

    @property
    def is_empty(self) -> bool:
        return self.content.strip() == ""

    @property
    def has_blank_line(self) -> bool:
        """At least two line-break sequences, i.e. one genuinely blank line."""
        return _BLANK_LINE_RE.search(self.content) is not None


@dataclass(frozen=True, slots=True)
class MustacheTag:
    type: ClassVar[str] = "MustacheTag"

    start: int
    end: int
    expression: Expression


@dataclass(frozen=True, slots=True)
class RawMustacheTag:
    type: ClassVar[str] = "RawMustacheTag"

    start: int
    end: int
    expression: Expression


@dataclass(frozen=True, slots=True)
class AttributeShorthand:
    type: ClassVar[str] = "AttributeShorthand"

    start: int
    end: int
    expression: Expression


@dataclass(frozen=True, slots=True)
class Attribute:
    """`name`, `name="..."` or `name={...}`; `value is True` for bare attributes."""

    type: ClassVar[str] = "Attribute"

    start: int
    end: int
    name: str
    value: tuple[AttributeValue, ...] | Literal[True] = True


@dataclass(frozen=True, slots=True)
class Spread:
    type: ClassVar[str] = "Spread"

    start: int
    end: int
    expression: Expression


@dataclass(frozen=True, slots=True)
class EventHandler:
    type: ClassVar[str] = "EventHandler"

    start: int
    end: int
    name: str
    modifiers: tuple[str, ...] = ()
    expression: Expression | None = None


@dataclass(frozen=True, slots=True)
class Binding:
    type: ClassVar[str] = "Binding"

    start: int
    end: int
    name: str
    expression: Expression


@dataclass(frozen=True, slots=True)
class ClassDirective:
    type: ClassVar[str] = "Class"

    start: int
    end: int
    name: str
    expression: Expression


@dataclass(frozen=True, slots=True)
class Let:
    type: ClassVar[str] = "Let"

    start: int
    end: int
    name: str
    # shorthand let directives have no expression
    expression: Expression | None = None


@dataclass(frozen=True, slots=True)
class Action:
    type: ClassVar[str] = "Action"

    start: int
    end: int
    name: str
    expression: Expression | None = None


@dataclass(frozen=True, slots=True)
class Animation:
    type: ClassVar[str] = "Animation"

    start: int
    end: int
    name: str
    expression: Expression | None = None


@dataclass(frozen=True, slots=True)
class Transition:
    type: ClassVar[str] = "Transition"

    start: int
    end: int
    name: str
    intro: bool = False
    outro: bool = False
    modifiers: tuple[str, ...] = ()
    expression: Expression | None = None

    @property
    def directive(self) -> str:
        if self.intro and self.outro:
            return "transition"
        return "in" if self.intro else "out"


@dataclass(frozen=True, slots=True)
class Ref:
    type: ClassVar[str] = "Ref"

    start: int
    end: int
    name: str


@dataclass(frozen=True, slots=True)
class TagNode:
    """Shared shape of every `<name attrs>children</name>` node."""

    type: ClassVar[str] = "Element"

    start: int
    end: int
    name: str
    attributes: tuple[AttributeLike, ...] = ()
    children: tuple[TemplateNode, ...] = ()


@dataclass(frozen=True, slots=True)
class Element(TagNode):
    type: ClassVar[str] = "Element"


@dataclass(frozen=True, slots=True)
class InlineComponent(TagNode):
    type: ClassVar[str] = "InlineComponent"

    # `<svelte:component this={...}>`
    expression: Expression | None = None


@dataclass(frozen=True, slots=True)
class Slot(TagNode):
    type: ClassVar[str] = "Slot"


@dataclass(frozen=True, slots=True)
class Window(TagNode):
    type: ClassVar[str] = "Window"


@dataclass(frozen=True, slots=True)
class Head(TagNode):
    type: ClassVar[str] = "Head"


@dataclass(frozen=True, slots=True)
class Title(TagNode):
    type: ClassVar[str] = "Title"


@dataclass(frozen=True, slots=True)
class Options(TagNode):
    type: ClassVar[str] = "Options"


@dataclass(frozen=True, slots=True)
class Body(TagNode):
    type: ClassVar[str] = "Body"


@dataclass(frozen=True, slots=True)
class Comment:
    type: ClassVar[str] = "Comment"

    start: int
    end: int
    data: str


@dataclass(frozen=True, slots=True)
class DebugTag:
    type: ClassVar[str] = "DebugTag"

    start: int
    end: int
    identifiers: tuple[Expression, ...] = ()


@dataclass(frozen=True, slots=True)
class ElseBlock:
    type: ClassVar[str] = "ElseBlock"

    start: int
    end: int
    children: tuple[TemplateNode, ...] = ()


@dataclass(frozen=True, slots=True)
class IfBlock:
    type: ClassVar[str] = "IfBlock"

    start: int
    end: int
    expression: Expression
    children: tuple[TemplateNode, ...] = ()
    else_block: ElseBlock | None = None


@dataclass(frozen=True, slots=True)
class EachBlock:
    type: ClassVar[str] = "EachBlock"

    start: int
    end: int
    expression: Expression
    context: Expression
    children: tuple[TemplateNode, ...] = ()
    index: str | None = None
    key: Expression | None = None
    else_block: ElseBlock | None = None


@dataclass(frozen=True, slots=True)
class PendingBlock:
    type: ClassVar[str] = "PendingBlock"

    start: int
    end: int
    children: tuple[TemplateNode, ...] = ()


@dataclass(frozen=True, slots=True)
class ThenBlock:
    type: ClassVar[str] = "ThenBlock"

    start: int
    end: int
    children: tuple[TemplateNode, ...] = ()


@dataclass(frozen=True, slots=True)
class CatchBlock:
    type: ClassVar[str] = "CatchBlock"

    start: int
    end: int
    children: tuple[TemplateNode, ...] = ()


@dataclass(frozen=True, slots=True)
class AwaitBlock:
    type: ClassVar[str] = "AwaitBlock"

    start: int
    end: int
    expression: Expression
    pending: PendingBlock
    then: ThenBlock
    catch: CatchBlock
    value: str | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class Script:
    """Top-level `<script>` carrier; `context="module"` for module scripts."""

    type: ClassVar[str] = "Script"

    start: int
    end: int
    context: str = "default"


@dataclass(frozen=True, slots=True)
class Style:
    type: ClassVar[str] = "Style"

    start: int
    end: int
    attributes: tuple[AttributeLike, ...] = ()


@dataclass(frozen=True, slots=True)
class Fragment:
    type: ClassVar[str] = "Fragment"

    start: int
    end: int
    children: tuple[TemplateNode, ...] = ()


@dataclass(frozen=True, slots=True)
class UnknownNode:
    """A node kind this printer does not know, kept verbatim for error reporting."""

    type: str
    start: int
    end: int
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Root:
    html: Fragment
    css: Style | None = None
    instance: Script | None = None
    module: Script | None = None


type AttributeValue = Text | MustacheTag | AttributeShorthand
type AttributeLike = (
    Attribute
    | Spread
    | EventHandler
    | Binding
    | ClassDirective
    | Let
    | Action
    | Animation
    | Transition
    | Ref
    | UnknownNode
)
type TemplateNode = (
    Text
    | MustacheTag
    | RawMustacheTag
    | TagNode
    | Comment
    | DebugTag
    | IfBlock
    | EachBlock
    | AwaitBlock
    | UnknownNode
)
type Node = (
    TemplateNode
    | AttributeLike
    | AttributeValue
    | Expression
    | Fragment
    | ElseBlock
    | PendingBlock
    | ThenBlock
    | CatchBlock
    | Script
    | Style
)


def is_empty_node(node: Node) -> bool:
    return isinstance(node, Text) and node.is_empty


def is_inline_node(node: Node) -> bool:
    return isinstance(node, (Text, MustacheTag))


def all_empty(children: tuple[TemplateNode, ...]) -> bool:
    """True for no children or whitespace-only text children."""
    return all(is_empty_node(child) for child in children)


__all__ = [
    "Action",
    "Animation",
    "Attribute",
    "AttributeLike",
    "AttributeShorthand",
    "AttributeValue",
    "AwaitBlock",
    "Binding",
    "Body",
    "CatchBlock",
    "ClassDirective",
    "Comment",
    "DebugTag",
    "EachBlock",
    "Element",
    "ElseBlock",
    "EventHandler",
    "Expression",
    "Fragment",
    "Head",
    "IfBlock",
    "InlineComponent",
    "Let",
    "MustacheTag",
    "Node",
    "Options",
    "PendingBlock",
    "RawMustacheTag",
    "Ref",
    "Root",
    "Script",
    "Slot",
    "Spread",
    "Style",
    "TagNode",
    "TemplateNode",
    "Text",
    "ThenBlock",
    "Title",
    "Transition",
    "UnknownNode",
    "Window",
    "all_empty",
    "is_empty_node",
    "is_inline_node",
]
