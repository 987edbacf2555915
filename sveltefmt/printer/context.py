"""Explicit print context threaded through every print call."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from sveltefmt.text import Located, get_text

if TYPE_CHECKING:
    from sveltefmt.ast import Node
    from sveltefmt.doc import Doc
    from sveltefmt.embedded import EmbeddedFormatter
    from sveltefmt.format.options import FormatOptions


@dataclass(frozen=True, slots=True)
class PrintContext:
    """Everything a print rule may read besides the node itself.

    `parent` is the node that owns the one being printed. `is_js` asks for the
    node to be rendered through the expression formatter instead of printed
    structurally.
    """

    source_text: str
    options: FormatOptions
    formatter: EmbeddedFormatter
    parent: Node | None = None
    is_js: bool = False

    def child(self, parent: Node) -> PrintContext:
        return replace(self, parent=parent, is_js=False)

    def as_js(self) -> PrintContext:
        return replace(self, is_js=True)

    def get_text(self, node: Located) -> str:
        return get_text(node, self.source_text)

    @property
    def mustache_quotes(self) -> tuple[str, str]:
        """Delimiters around directive expressions; strict mode quotes them."""
        return ('"{', '}"') if self.options.strict_mode else ("{", "}")


type PrintFn = Callable[["Node", PrintContext], "Doc"]
