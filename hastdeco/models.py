# hastdeco/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Union

if TYPE_CHECKING:
    from hastdeco.hast import Element


@dataclass(frozen=True)
class SourcePosition:
    line: int
    character: int


@dataclass(frozen=True)
class ResolvedPosition:
    line: int
    character: int
    offset: int

    def describe(self) -> str:
        return f"{self.line}:{self.character} (offset {self.offset})"


# A bare offset, a SourcePosition, or a {"line": .., "character": ..} mapping
OffsetOrPosition = Union[int, SourcePosition, Mapping[str, int]]


@dataclass(frozen=True)
class Keep:
    """Hook result: leave the carrier element as it is."""


@dataclass(frozen=True)
class Replace:
    """Hook result: substitute `element` for the carrier."""

    element: "Element"


TransformResult = Union[Keep, Replace]
TransformHook = Callable[["Element", bool], TransformResult]


@dataclass
class DecorationItem:
    start: OffsetOrPosition
    end: OffsetOrPosition
    tag_name: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict)
    always_wrap: bool = False
    transform: Optional[TransformHook] = None


@dataclass
class ResolvedDecorationItem:
    start: ResolvedPosition
    end: ResolvedPosition
    tag_name: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict)
    always_wrap: bool = False
    transform: Optional[TransformHook] = None
    raw: Optional[DecorationItem] = None

    def is_multiline(self) -> bool:
        return self.start.line < self.end.line
