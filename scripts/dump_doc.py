from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from pprint import pprint
from typing import Any

from sveltefmt.diagnostics import FormatError, render_diagnostic
from sveltefmt.doc import print_doc_to_string
from sveltefmt.format import FormatOptions, build_doc
from sveltefmt.parser import parse_result, preprocess


@dataclass(frozen=True, slots=True)
class JsonAstParser:
    """Replays an AST saved from `svelte/compiler` instead of running node."""

    ast: dict[str, Any]

    def parse(self, text: str) -> dict[str, Any]:
        return self.ast


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the Doc tree and formatted output of a .svelte file.")
    parser.add_argument("input", type=Path, help="Path to the .svelte file.")
    parser.add_argument(
        "--ast",
        type=Path,
        default=None,
        help="JSON AST of the preprocessed input (defaults to running the node parser).",
    )
    parser.add_argument(
        "--options",
        type=json.loads,
        default={},
        help='Prettier-style options as JSON, e.g. \'{"svelteStrictMode": true}\'.',
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    text = args.input.read_text(encoding="utf-8")
    svelte_parser = None
    if args.ast is not None:
        svelte_parser = JsonAstParser(json.loads(args.ast.read_text(encoding="utf-8")))

    try:
        options = FormatOptions.from_mapping(args.options)
        parse = parse_result(text, parser=svelte_parser)
        doc = build_doc(parse, options)
    except FormatError as exc:
        print(render_diagnostic(exc.diagnostic, preprocess(text)), file=sys.stderr)
        return 1

    pprint(doc)
    print("-" * 80)
    print(print_doc_to_string(doc, width=options.print_width, tab_width=options.tab_width), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
