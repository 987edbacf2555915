"""AST-to-Doc printer, children grouping and embedded-language splicing."""

from sveltefmt.printer.attributes import extract_attributes
from sveltefmt.printer.children import is_empty_group, print_children, trim_left, trim_right
from sveltefmt.printer.context import PrintContext, PrintFn
from sveltefmt.printer.embed import embed, embed_expression, embed_tag, snipped_content
from sveltefmt.printer.printer import SELF_CLOSING_TAGS, print_js, print_node, print_root

__all__ = [
    "SELF_CLOSING_TAGS",
    "PrintContext",
    "PrintFn",
    "embed",
    "embed_expression",
    "embed_tag",
    "extract_attributes",
    "is_empty_group",
    "print_children",
    "print_js",
    "print_node",
    "print_root",
    "snipped_content",
    "trim_left",
    "trim_right",
]
