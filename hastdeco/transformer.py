# hastdeco/transformer.py

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass, field
from typing import List, Sequence

from hastdeco.hast import Element
from hastdeco.models import DecorationItem, ResolvedDecorationItem
from hastdeco.normalize import normalize_decorations
from hastdeco.positions import PositionConverter
from hastdeco.tokens import Token, breakpoints, split_tokens
from hastdeco.transform import apply_decorations
from hastdeco.validators import verify_intersections

logger = logging.getLogger(__name__)


class HighlightMeta:
    """
    Identity of one highlighting invocation.

    Carries no data; the decorations transformer keys its per-invocation
    cache on this object.
    """


@dataclass
class HighlightContext:
    source: str
    decorations: Sequence[DecorationItem] = ()
    meta: HighlightMeta = field(default_factory=HighlightMeta)


@dataclass
class DecorationContext:
    decorations: List[ResolvedDecorationItem]
    converter: PositionConverter
    source: str


class DecorationsTransformer:
    """
    Resolve, validate and apply decorations for highlighting invocations.

    Resolved decorations are computed once per invocation and held in a
    WeakKeyDictionary keyed by the invocation's HighlightMeta, so an entry
    goes away together with its invocation.
    """

    name = "hastdeco:decorations"

    def __init__(self):
        self._contexts: "weakref.WeakKeyDictionary[HighlightMeta, DecorationContext]" = (
            weakref.WeakKeyDictionary()
        )

    def __len__(self) -> int:
        return len(self._contexts)

    def get_context(self, hl: HighlightContext) -> DecorationContext:
        ctx = self._contexts.get(hl.meta)
        if ctx is None:
            converter = PositionConverter(hl.source)
            decorations = normalize_decorations(hl.decorations, converter)
            verify_intersections(decorations)
            ctx = DecorationContext(decorations=decorations, converter=converter, source=hl.source)
            self._contexts[hl.meta] = ctx
            logger.debug("Resolved %d decorations", len(decorations))
        return ctx

    def tokens(self, hl: HighlightContext, lines: List[List[Token]]) -> List[List[Token]]:
        if not hl.decorations:
            return lines
        ctx = self.get_context(hl)
        return split_tokens(lines, breakpoints(ctx.decorations))

    def code(self, hl: HighlightContext, code_el: Element) -> Element:
        if not hl.decorations:
            return code_el
        ctx = self.get_context(hl)
        return apply_decorations(code_el, ctx.decorations)
