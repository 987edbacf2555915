"""Document IR builders, helpers and layout."""

from sveltefmt.doc.builders import (
    BREAK_PARENT,
    HARDLINE,
    LITERALLINE,
    LINE,
    SOFTLINE,
    BreakParent,
    Concat,
    Dedent,
    Doc,
    Fill,
    Group,
    Indent,
    Line,
    concat,
    dedent,
    fill,
    group,
    indent,
    join,
    line,
)
from sveltefmt.doc.printer import print_doc_to_string
from sveltefmt.doc.utils import (
    has_forced_break,
    join_lines,
    map_doc,
    nuke_last_line,
    remove_lines,
    text_to_doc,
)

__all__ = [
    "BREAK_PARENT",
    "HARDLINE",
    "LITERALLINE",
    "LINE",
    "SOFTLINE",
    "BreakParent",
    "Concat",
    "Dedent",
    "Doc",
    "Fill",
    "Group",
    "Indent",
    "Line",
    "concat",
    "dedent",
    "fill",
    "group",
    "has_forced_break",
    "indent",
    "join",
    "line",
    "join_lines",
    "map_doc",
    "nuke_last_line",
    "print_doc_to_string",
    "remove_lines",
    "text_to_doc",
]
