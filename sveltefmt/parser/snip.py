"""Hide script/style bodies from the template parser and recover them later.

The body of every `<tag ...>...</tag>` is base64-encoded into a synthetic
attribute on the opening tag and replaced with a short placeholder, so the
parser only ever sees a stable, simplified body.
"""

from __future__ import annotations

import base64
import re
from typing import Final

SNIPPED_CONTENT_ATTRIBUTE: Final[str] = "✂prettier:content✂"

_UNSNIP_RE: Final[re.Pattern[str]] = re.compile(
    rf"(<\w+.*?)\s*{SNIPPED_CONTENT_ATTRIBUTE}=\"(.*?)\">.*?(?=</)",
    re.IGNORECASE,
)


def encode_content(content: str) -> str:
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


def decode_content(encoded: str) -> str:
    return base64.b64decode(encoded).decode("utf-8")


def _tag_re(tag_name: str) -> re.Pattern[str]:
    name = re.escape(tag_name)
    return re.compile(rf"\s*<{name}([\s\S]*?)>([\s\S]*?)</{name}>\s*", re.IGNORECASE)


def snip_tag_content(tag_name: str, source: str, placeholder: str = "") -> str:
    def _replace(match: re.Match[str]) -> str:
        attributes, content = match.group(1), match.group(2)
        encoded = encode_content(content)
        return (
            f"<{tag_name}{attributes} {SNIPPED_CONTENT_ATTRIBUTE}=\"{encoded}\">"
            f"{placeholder}</{tag_name}>"
        )

    return _tag_re(tag_name).sub(_replace, source)


def has_snipped_content(text: str) -> bool:
    return SNIPPED_CONTENT_ATTRIBUTE in text


def unsnip_content(text: str) -> str:
    """Restore every snipped body in `text` from its encoded attribute."""

    def _replace(match: re.Match[str]) -> str:
        return f"{match.group(1)}>{decode_content(match.group(2))}"

    return _UNSNIP_RE.sub(_replace, text)


def preprocess(text: str) -> str:
    """Parser input: trimmed, with script and style bodies snipped."""
    text = snip_tag_content("style", text)
    text = snip_tag_content("script", text, "{}")
    return text.strip()
