"""Parser boundary: the Svelte compiler's `parse`, run out of process."""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, Protocol

from sveltefmt.diagnostics import PARSER_BAD_OUTPUT, PARSER_UNAVAILABLE, ParseError
from sveltefmt.text import TextRange

logger = logging.getLogger(__name__)

_NODE_PARSE_SCRIPT: Final[str] = """
const { parse } = require(process.argv[1]);
let input = '';
process.stdin.setEncoding('utf8');
process.stdin.on('data', chunk => { input += chunk; });
process.stdin.on('end', () => {
    let result;
    try {
        result = { ast: parse(input) };
    } catch (err) {
        result = { error: { message: err.message, start: err.start, end: err.end, pos: err.pos } };
    }
    process.stdout.write(JSON.stringify(result));
});
"""


class SvelteParser(Protocol):
    """Anything that turns preprocessed template text into the compiler's JSON AST.

    Failures must be raised as `ParseError` with a start/end range.
    """

    def parse(self, text: str) -> dict[str, Any]: ...


@dataclass(frozen=True, slots=True)
class NodeSvelteParser:
    node_executable: str = "node"
    compiler_module: str = "svelte/compiler"
    cwd: str | None = None
    timeout: float | None = 60.0

    def parse(self, text: str) -> dict[str, Any]:
        logger.debug("parsing %d chars with %s", len(text), self.compiler_module)
        try:
            completed = subprocess.run(
                [self.node_executable, "-e", _NODE_PARSE_SCRIPT, self.compiler_module],
                input=text,
                capture_output=True,
                text=True,
                encoding="utf-8",
                cwd=self.cwd,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise ParseError.from_spec(
                PARSER_UNAVAILABLE,
                TextRange.empty(0),
                f"{PARSER_UNAVAILABLE.message}: {exc}",
            ) from exc

        if completed.returncode != 0:
            raise ParseError.from_spec(
                PARSER_UNAVAILABLE,
                TextRange.empty(0),
                f"{PARSER_UNAVAILABLE.message}: {completed.stderr.strip()}",
            )

        try:
            payload = json.loads(completed.stdout)
        except json.JSONDecodeError as exc:
            raise ParseError.from_spec(PARSER_BAD_OUTPUT, TextRange.empty(0)) from exc

        return read_parser_payload(payload, text)


def read_parser_payload(payload: Mapping[str, Any], text: str) -> dict[str, Any]:
    """Unwrap `{"ast": ...}` or raise the `{"error": ...}` as a ParseError."""
    error = payload.get("error")
    if error is not None:
        start = _error_offset(error.get("start"), error.get("pos"))
        end = _error_offset(error.get("end"), None)
        table = _utf16_index_table(text)
        raise ParseError.at(
            str(error.get("message") or "parse error"),
            _utf16_to_index(table, start) if start is not None else None,
            _utf16_to_index(table, end) if end is not None else None,
        )

    ast = payload.get("ast")
    if not isinstance(ast, dict):
        raise ParseError.from_spec(PARSER_BAD_OUTPUT, TextRange.empty(0))
    if _has_astral(text):
        _remap_offsets(ast, _utf16_index_table(text))
    return ast


def _error_offset(location: Any, fallback: Any) -> int | None:
    # compiler errors report {line, column, character}
    if isinstance(location, Mapping):
        character = location.get("character")
        return int(character) if character is not None else None
    if isinstance(location, int):
        return location
    if isinstance(fallback, int):
        return fallback
    return None


def _has_astral(text: str) -> bool:
    return any(ord(char) > 0xFFFF for char in text)


def _utf16_index_table(text: str) -> list[int]:
    """Python string index for every UTF-16 code unit of `text`, plus its end.

    The second unit of a surrogate pair maps to the character after the pair.
    """
    table: list[int] = []
    for index, char in enumerate(text):
        table.append(index)
        if ord(char) > 0xFFFF:
            table.append(index + 1)
    table.append(len(text))
    return table


def _utf16_to_index(table: list[int], offset: int) -> int:
    """Map a JavaScript (UTF-16 code unit) offset to a Python string index."""
    if offset >= len(table):
        return table[-1]
    return table[max(offset, 0)]


def _remap_offsets(node: Any, table: list[int]) -> None:
    if isinstance(node, list):
        for item in node:
            _remap_offsets(item, table)
        return
    if not isinstance(node, dict):
        return
    for key, value in node.items():
        if key in ("start", "end") and isinstance(value, int):
            node[key] = _utf16_to_index(table, value)
        else:
            _remap_offsets(value, table)
