"""Typed Svelte AST and lowering from the parser's JSON output."""

from sveltefmt.ast.lower import lower_ast, lower_expression, lower_node
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
    Node,
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
    all_empty,
    is_empty_node,
    is_inline_node,
)

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
    "lower_ast",
    "lower_expression",
    "lower_node",
]
