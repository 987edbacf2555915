"""Parse carrier shared by everything that consumes one parse lifecycle."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sveltefmt.ast import Root


@dataclass(slots=True)
class SvelteParseResult:
    """Svelte parse result with a lazily lowered, typed AST.

    `parser_input` is the preprocessed text; every node offset indexes it.
    """

    source_text: str
    parser_input: str
    raw_ast: dict[str, Any]
    _ast_root: Root | None = field(default=None, init=False, repr=False)

    def ast_root(self) -> Root:
        if self._ast_root is None:
            from sveltefmt.ast import lower_ast

            self._ast_root = lower_ast(self.raw_ast)
        return self._ast_root
