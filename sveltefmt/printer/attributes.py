"""Fallback attribute extraction from raw opening-tag text.

Used for top-level script carriers, whose AST nodes have no attribute list.
Only the literal grammar of an opening tag is supported: bare names and
single- or double-quoted values.
"""

from __future__ import annotations

import re
from typing import Final, Literal

from sveltefmt.ast import Attribute, Text

_OPENING_TAG_RE: Final[re.Pattern[str]] = re.compile(r"<[a-z]+\s*([\s\S]*?)>", re.IGNORECASE)
_ATTRIBUTE_RE: Final[re.Pattern[str]] = re.compile(
    r"""([^\s=]+)(?:=("|')([\s\S]*?)\2)?""",
    re.IGNORECASE,
)


def extract_attributes(html: str) -> tuple[Attribute, ...]:
    """Attributes of the first opening tag in `html`.

    Positions are relative to the attribute string of that tag. Raises
    ValueError when `html` holds no opening tag.
    """
    match = _OPENING_TAG_RE.search(html)
    if match is None:
        raise ValueError(f"No opening tag in {html[:40]!r}")

    attributes: list[Attribute] = []
    for attribute_match in _ATTRIBUTE_RE.finditer(match.group(1)):
        name, quotes, value = attribute_match.group(1, 2, 3)
        start = attribute_match.start()
        value_node: tuple[Text, ...] | Literal[True]
        if not value:
            value_node = True
        else:
            value_start = start + len(name)
            if quotes:
                value_start += 2
            value_node = (Text(start=value_start, end=value_start + len(value), data=value),)
        attributes.append(
            Attribute(
                start=start,
                end=start + len(attribute_match.group(0)),
                name=name,
                value=value_node,
            )
        )
    return tuple(attributes)
