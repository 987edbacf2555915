from sveltefmt.ast import (
    Attribute,
    AttributeShorthand,
    AwaitBlock,
    Binding,
    ClassDirective,
    Element,
    EventHandler,
    IfBlock,
    InlineComponent,
    Let,
    MustacheTag,
    Script,
    Spread,
    Style,
    Text,
    Transition,
    UnknownNode,
    all_empty,
    is_empty_node,
    is_inline_node,
    lower_ast,
    lower_expression,
    lower_node,
)


def _identifier(name: str, start: int) -> dict[str, object]:
    return {"type": "Identifier", "name": name, "start": start, "end": start + len(name)}


def test_lower_ast_with_no_html_yields_empty_fragment() -> None:
    root = lower_ast({"html": None, "css": None, "instance": None, "module": None})

    assert (root.css, root.instance, root.module) == (None, None, None)
    assert root.html.children == ()


def test_lower_ast_keeps_script_contexts_and_style_attributes() -> None:
    root = lower_ast(
        {
            "html": {"type": "Fragment", "start": 0, "end": 0, "children": []},
            "instance": {"type": "Script", "start": 0, "end": 10, "context": "default"},
            "module": {"type": "Script", "start": 10, "end": 20, "context": "module"},
            "css": {
                "type": "Style",
                "start": 20,
                "end": 30,
                "attributes": [{"type": "Attribute", "name": "global", "value": True, "start": 27, "end": 33}],
            },
        }
    )

    assert root.instance == Script(start=0, end=10, context="default")
    assert root.module == Script(start=10, end=20, context="module")
    assert isinstance(root.css, Style)
    assert root.css.attributes == (Attribute(start=27, end=33, name="global", value=True),)


def test_lower_element_attributes_and_directives() -> None:
    node = lower_node(
        {
            "type": "Element",
            "name": "input",
            "start": 0,
            "end": 60,
            "children": [],
            "attributes": [
                {
                    "type": "Attribute",
                    "name": "value",
                    "start": 7,
                    "end": 14,
                    "value": [{"type": "AttributeShorthand", "start": 7, "end": 14, "expression": _identifier("value", 8)}],
                },
                {"type": "Spread", "start": 15, "end": 25, "expression": _identifier("props", 19)},
                {"type": "EventHandler", "name": "click", "modifiers": ["once"], "start": 26, "end": 40},
                {"type": "Binding", "name": "value", "start": 41, "end": 51, "expression": _identifier("value", 46)},
                {"type": "Class", "name": "on", "start": 52, "end": 60, "expression": _identifier("on", 58)},
            ],
        }
    )

    assert isinstance(node, Element)
    value, spread, handler, binding, class_directive = node.attributes
    assert isinstance(value, Attribute)
    assert isinstance(value.value, tuple)
    assert isinstance(value.value[0], AttributeShorthand)
    assert isinstance(spread, Spread)
    assert handler == EventHandler(start=26, end=40, name="click", modifiers=("once",))
    assert isinstance(binding, Binding)
    assert binding.expression.is_identifier_named("value")
    assert isinstance(class_directive, ClassDirective)


def test_lower_transition_direction() -> None:
    node = lower_node(
        {
            "type": "Element",
            "name": "div",
            "start": 0,
            "end": 30,
            "children": [],
            "attributes": [
                {"type": "Transition", "name": "fade", "intro": True, "outro": True, "start": 5, "end": 20},
                {"type": "Transition", "name": "fly", "intro": True, "outro": False, "start": 5, "end": 20},
                {"type": "Let", "name": "item", "start": 21, "end": 29},
            ],
        }
    )

    assert isinstance(node, Element)
    both, intro, let = node.attributes
    assert isinstance(both, Transition) and both.directive == "transition"
    assert isinstance(intro, Transition) and intro.directive == "in"
    assert let == Let(start=21, end=29, name="item")


def test_lower_if_block_with_else() -> None:
    node = lower_node(
        {
            "type": "IfBlock",
            "start": 0,
            "end": 30,
            "expression": _identifier("a", 5),
            "children": [{"type": "Text", "data": "x", "raw": "x", "start": 7, "end": 8}],
            "else": {"type": "ElseBlock", "start": 15, "end": 25, "children": []},
        }
    )

    assert isinstance(node, IfBlock)
    assert node.children == (Text(start=7, end=8, data="x", raw="x"),)
    assert node.else_block is not None
    assert node.else_block.children == ()


def test_lower_await_accepts_string_and_identifier_bindings() -> None:
    await_data = {
        "type": "AwaitBlock",
        "start": 0,
        "end": 50,
        "expression": _identifier("promise", 8),
        "value": {"type": "Identifier", "name": "value", "start": 20, "end": 25},
        "error": "err",
        "pending": {"type": "PendingBlock", "start": 16, "end": 16, "children": []},
        "then": {"type": "ThenBlock", "start": 26, "end": 30, "children": []},
        "catch": {"type": "CatchBlock", "start": 30, "end": 40, "children": []},
    }

    node = lower_node(await_data)

    assert isinstance(node, AwaitBlock)
    assert node.value == "value"
    assert node.error == "err"


def test_lower_svelte_component_keeps_this_expression() -> None:
    node = lower_node(
        {
            "type": "InlineComponent",
            "name": "svelte:component",
            "start": 0,
            "end": 40,
            "expression": _identifier("Widget", 23),
            "attributes": [],
            "children": [],
        }
    )

    assert isinstance(node, InlineComponent)
    assert node.expression is not None
    assert node.expression.name == "Widget"


def test_unknown_kinds_are_kept_verbatim() -> None:
    data = {"type": "SnippetBlock", "start": 3, "end": 9, "extra": [1, 2]}

    node = lower_node(data)

    assert node == UnknownNode(type="SnippetBlock", start=3, end=9, raw=data)


def test_inline_and_empty_classification() -> None:
    blank = Text(start=0, end=3, data=" \n ")
    word = Text(start=0, end=1, data="a")
    mustache = MustacheTag(start=0, end=3, expression=lower_expression(_identifier("a", 1)))

    assert is_empty_node(blank) is True
    assert is_empty_node(word) is False
    assert is_inline_node(word) and is_inline_node(mustache)
    assert not is_inline_node(Element(start=0, end=7, name="p"))
    assert all_empty((blank, blank)) is True
    assert all_empty((blank, word)) is False
