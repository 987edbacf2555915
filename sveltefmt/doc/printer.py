"""Resolve a Doc against a line-width budget and render it to text.

This is the command-stack layout used by prettier: every command is an
(indentation, mode, doc) triple, groups are measured with `_fits` against the
remaining width, and fills decide each separator on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from sveltefmt.doc.builders import (
    BreakParent,
    Concat,
    Dedent,
    Doc,
    Fill,
    Group,
    Indent,
    Line,
)
from sveltefmt.doc.utils import has_forced_break


class Mode(Enum):
    BREAK = auto()
    FLAT = auto()


@dataclass(frozen=True, slots=True)
class Indentation:
    parts: tuple[str, ...] = ()

    @property
    def value(self) -> str:
        return "".join(self.parts)

    @property
    def length(self) -> int:
        return len(self.value)

    def indent(self, unit: str) -> Indentation:
        return Indentation((*self.parts, unit))

    def dedent(self) -> Indentation:
        return Indentation(self.parts[:-1])


type Command = tuple[Indentation, Mode, Doc]


class _Layout:
    def __init__(self, width: int, tab_width: int) -> None:
        self.width = width
        self.unit = " " * tab_width
        self._breaks: dict[int, bool] = {}

    def breaks(self, group: Group) -> bool:
        return group.should_break or has_forced_break(group.contents, self._breaks)

    def fits(
        self,
        next_command: Command,
        rest_commands: list[Command],
        width: int,
        must_be_flat: bool = False,
    ) -> bool:
        rest_index = len(rest_commands)
        commands = [next_command]
        while width >= 0:
            if not commands:
                if rest_index == 0:
                    return True
                commands.append(rest_commands[rest_index - 1])
                rest_index -= 1
                continue

            indentation, mode, doc = commands.pop()
            match doc:
                case str():
                    width -= len(doc)
                case Concat(parts=parts) | Fill(parts=parts):
                    for part in reversed(parts):
                        commands.append((indentation, mode, part))
                case Indent(contents=contents):
                    commands.append((indentation.indent(self.unit), mode, contents))
                case Dedent(contents=contents):
                    commands.append((indentation.dedent(), mode, contents))
                case Group(contents=contents):
                    group_breaks = self.breaks(doc)
                    if must_be_flat and group_breaks:
                        return False
                    commands.append(
                        (indentation, Mode.BREAK if group_breaks else mode, contents)
                    )
                case Line(soft=soft, hard=hard):
                    if mode is Mode.BREAK or hard:
                        return True
                    if not soft:
                        width -= 1
                case BreakParent():
                    pass
        return False

    def render(self, doc: Doc) -> str:
        out: list[str] = []
        position = 0
        should_remeasure = False
        commands: list[Command] = [(Indentation(), Mode.BREAK, doc)]

        while commands:
            indentation, mode, doc = commands.pop()
            match doc:
                case str():
                    out.append(doc)
                    position += len(doc)
                case Concat(parts=parts):
                    for part in reversed(parts):
                        commands.append((indentation, mode, part))
                case Indent(contents=contents):
                    commands.append((indentation.indent(self.unit), mode, contents))
                case Dedent(contents=contents):
                    commands.append((indentation.dedent(), mode, contents))
                case Group(contents=contents):
                    group_breaks = self.breaks(doc)
                    if mode is Mode.FLAT and not should_remeasure:
                        commands.append(
                            (indentation, Mode.BREAK if group_breaks else Mode.FLAT, contents)
                        )
                        continue
                    should_remeasure = False
                    flat: Command = (indentation, Mode.FLAT, contents)
                    if not group_breaks and self.fits(flat, commands, self.width - position):
                        commands.append(flat)
                    else:
                        commands.append((indentation, Mode.BREAK, contents))
                case Fill(parts=parts):
                    self._fill(indentation, mode, parts, commands, self.width - position)
                case Line(soft=soft, hard=hard, literal=literal):
                    if mode is Mode.FLAT and not hard:
                        if not soft:
                            out.append(" ")
                            position += 1
                        continue
                    if mode is Mode.FLAT:
                        should_remeasure = True
                    if literal:
                        # trailing whitespace before a literal line is content
                        out.append("\n")
                        position = 0
                        continue
                    _trim(out)
                    out.append("\n" + indentation.value)
                    position = indentation.length
                case BreakParent():
                    pass

        return "".join(out)

    def _fill(
        self,
        indentation: Indentation,
        mode: Mode,
        parts: tuple[Doc, ...],
        commands: list[Command],
        remaining: int,
    ) -> None:
        if not parts:
            return

        content = parts[0]
        content_flat: Command = (indentation, Mode.FLAT, content)
        content_break: Command = (indentation, Mode.BREAK, content)
        content_fits = self.fits(content_flat, [], remaining, must_be_flat=True)

        if len(parts) == 1:
            commands.append(content_flat if content_fits else content_break)
            return

        whitespace = parts[1]
        whitespace_flat: Command = (indentation, Mode.FLAT, whitespace)
        whitespace_break: Command = (indentation, Mode.BREAK, whitespace)

        if len(parts) == 2:
            if content_fits:
                commands.extend((whitespace_flat, content_flat))
            else:
                commands.extend((whitespace_break, content_break))
            return

        rest = parts[2:]
        remaining_command: Command = (indentation, mode, Fill(rest))
        pair_flat: Command = (
            indentation,
            Mode.FLAT,
            Concat((content, whitespace, rest[0])),
        )
        pair_fits = self.fits(pair_flat, [], remaining, must_be_flat=True)

        if pair_fits:
            commands.extend((remaining_command, whitespace_flat, content_flat))
        elif content_fits:
            commands.extend((remaining_command, whitespace_break, content_flat))
        else:
            commands.extend((remaining_command, whitespace_break, content_break))


def _trim(out: list[str]) -> None:
    """Strip trailing spaces and tabs from what has been emitted so far."""
    while out:
        trimmed = out[-1].rstrip(" \t")
        if trimmed:
            out[-1] = trimmed
            return
        out.pop()


def print_doc_to_string(doc: Doc, width: int = 80, tab_width: int = 2) -> str:
    return _Layout(width, tab_width).render(doc)
