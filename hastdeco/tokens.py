# hastdeco/tokens.py

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Sequence

import regex as re

from hastdeco.models import ResolvedDecorationItem
from hastdeco.positions import LINE_BREAK_RE


TOKEN_RE = re.compile(
    r"(?P<word>[\p{L}_][\p{L}\p{N}_]*)"
    r"|(?P<number>\p{N}+(?:\.\p{N}+)?)"
    r"|(?P<string>\"[^\"]*\"?|'[^']*'?)"
    r"|(?P<space>[ \t]+)"
    r"|(?P<punct>.)"
)


@dataclass
class Token:
    content: str
    offset: int
    kind: str = "text"

    @property
    def end(self) -> int:
        return self.offset + len(self.content)


def tokenize_source(source: str) -> List[List[Token]]:
    """
    Minimal lexer: one list of tokens per source line.

    Offsets are absolute in `source`; line endings are not tokenized.
    """
    lines: List[List[Token]] = []
    cursor = 0
    parts = LINE_BREAK_RE.split(source)
    for i in range(0, len(parts), 2):
        text = parts[i]
        line: List[Token] = []
        for m in TOKEN_RE.finditer(text):
            line.append(Token(content=m.group(0), offset=cursor + m.start(), kind=m.lastgroup))
        lines.append(line)
        cursor += len(text)
        if i + 1 < len(parts):
            cursor += len(parts[i + 1])
    return lines


def breakpoints(items: Iterable[ResolvedDecorationItem]) -> List[int]:
    points = set()
    for d in items:
        points.add(d.start.offset)
        points.add(d.end.offset)
    return sorted(points)


def _split_token(token: Token, cuts: Sequence[int]) -> List[Token]:
    pieces: List[Token] = []
    last = 0
    for cut in cuts:
        pieces.append(replace(token, content=token.content[last:cut], offset=token.offset + last))
        last = cut
    pieces.append(replace(token, content=token.content[last:], offset=token.offset + last))
    return pieces


def split_tokens(lines: List[List[Token]], points: Iterable[int]) -> List[List[Token]]:
    """Cut every token that strictly contains a breakpoint."""
    sorted_points = sorted(set(points))
    if not sorted_points:
        return lines

    result: List[List[Token]] = []
    for line in lines:
        out: List[Token] = []
        for token in line:
            cuts = [p - token.offset for p in sorted_points if token.offset < p < token.end]
            if cuts:
                out.extend(_split_token(token, cuts))
            else:
                out.append(token)
        result.append(out)
    return result
