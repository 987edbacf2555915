"""Parser boundary: preprocessing, the external Svelte parser and parse results."""

from sveltefmt.parser.parse import parse, parse_result
from sveltefmt.parser.snip import (
    SNIPPED_CONTENT_ATTRIBUTE,
    decode_content,
    encode_content,
    has_snipped_content,
    preprocess,
    snip_tag_content,
    unsnip_content,
)
from sveltefmt.parser.svelte import NodeSvelteParser, SvelteParser, read_parser_payload

__all__ = [
    "SNIPPED_CONTENT_ATTRIBUTE",
    "NodeSvelteParser",
    "SvelteParser",
    "decode_content",
    "encode_content",
    "has_snipped_content",
    "parse",
    "parse_result",
    "preprocess",
    "read_parser_payload",
    "snip_tag_content",
    "unsnip_content",
]
