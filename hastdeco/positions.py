# hastdeco/positions.py

from __future__ import annotations

from typing import List

import regex as re

from hastdeco.errors import InvalidPositionError
from hastdeco.models import SourcePosition


LINE_BREAK_RE = re.compile(r"(\r?\n)")


def split_lines(source: str, keep_ends: bool = False) -> List[str]:
    parts = LINE_BREAK_RE.split(source)
    lines = []
    for i in range(0, len(parts), 2):
        ending = parts[i + 1] if keep_ends and i + 1 < len(parts) else ""
        lines.append(parts[i] + ending)
    return lines


def line_endings(source: str) -> List[str]:
    """The terminator of every line but the last, in order."""
    return LINE_BREAK_RE.split(source)[1::2]


class PositionConverter:
    """
    Convert between absolute offsets and (line, character) positions.

    Line endings belong to the line they terminate, so the first character
    of line N sits at the sum of the lengths of lines 0..N-1 including
    their endings. An offset equal to len(source) maps to the end of the
    last line.
    """

    def __init__(self, source: str):
        self.source = source
        self.lines = split_lines(source, keep_ends=True)

    def offset_to_position(self, offset: int) -> SourcePosition:
        if offset < 0 or offset > len(self.source):
            raise InvalidPositionError(offset)
        if offset == len(self.source):
            return SourcePosition(len(self.lines) - 1, len(self.lines[-1]))

        character = offset
        line = 0
        for text in self.lines:
            if character < len(text):
                break
            character -= len(text)
            line += 1
        return SourcePosition(line, character)

    def position_to_offset(self, line: int, character: int) -> int:
        if line < 0 or character < 0 or line >= len(self.lines):
            raise InvalidPositionError({"line": line, "character": character})
        return sum(len(text) for text in self.lines[:line]) + character
