# hastdeco/normalize.py

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable, List

from hastdeco.errors import InvalidPositionError
from hastdeco.models import (
    DecorationItem,
    OffsetOrPosition,
    ResolvedDecorationItem,
    ResolvedPosition,
    SourcePosition,
)
from hastdeco.positions import PositionConverter


def _is_index(value) -> bool:
    # bool is an int subclass but never a valid index
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _as_position(p: OffsetOrPosition):
    if isinstance(p, Mapping):
        line, character = p.get("line"), p.get("character")
        if not (_is_index(line) and _is_index(character)):
            raise InvalidPositionError(p)
        return SourcePosition(line, character)
    return p


def normalize_position(p: OffsetOrPosition, converter: PositionConverter) -> ResolvedPosition:
    p = _as_position(p)

    if isinstance(p, int) and not isinstance(p, bool):
        if not _is_index(p):
            raise InvalidPositionError(p)
        pos = converter.offset_to_position(p)
        return ResolvedPosition(line=pos.line, character=pos.character, offset=p)

    if isinstance(p, SourcePosition):
        if not (_is_index(p.line) and _is_index(p.character)):
            raise InvalidPositionError(p)
        offset = converter.position_to_offset(p.line, p.character)
        return ResolvedPosition(line=p.line, character=p.character, offset=offset)

    raise InvalidPositionError(p)


def normalize_decorations(
    items: Iterable[DecorationItem],
    converter: PositionConverter,
) -> List[ResolvedDecorationItem]:
    """
    Resolve every start/end to a ResolvedPosition, keeping input order.

    Out-of-order bounds are passed through untouched; rejecting them is
    verify_intersections' job.
    """
    return [
        ResolvedDecorationItem(
            start=normalize_position(d.start, converter),
            end=normalize_position(d.end, converter),
            tag_name=d.tag_name,
            properties=dict(d.properties or {}),
            always_wrap=d.always_wrap,
            transform=d.transform,
            raw=d,
        )
        for d in items
    ]
