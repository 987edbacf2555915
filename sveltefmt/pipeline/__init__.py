"""Shared parse carrier and run results."""

from sveltefmt.pipeline.result import SvelteParseResult
from sveltefmt.pipeline.results import FormatRunResult

__all__ = [
    "FormatRunResult",
    "SvelteParseResult",
]
