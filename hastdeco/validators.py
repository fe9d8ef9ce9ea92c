# hastdeco/validators.py

from __future__ import annotations

from typing import Sequence

from hastdeco.errors import IntersectingRangesError, InvalidRangeError
from hastdeco.models import ResolvedDecorationItem


def _strictly_inside(outer: ResolvedDecorationItem, offset: int) -> bool:
    return outer.start.offset < offset < outer.end.offset


def verify_intersections(items: Sequence[ResolvedDecorationItem]) -> None:
    """
    Reject the whole set unless every pair is disjoint or properly nested.

    Nesting is strict on both edges: the inner range's start and end must
    both lie strictly inside the outer range. Pairs sharing a single edge
    (e.g. [0, 10) and [0, 5)) therefore count as intersecting, while
    identical and touching ranges count as disjoint.

    Read-only; raises before anything is mutated.
    """
    for item in items:
        if item.start.offset > item.end.offset:
            raise InvalidRangeError(item)

    for i, first in enumerate(items):
        for second in items[i + 1:]:
            first_has_start = _strictly_inside(first, second.start.offset)
            first_has_end = _strictly_inside(first, second.end.offset)
            second_has_start = _strictly_inside(second, first.start.offset)
            second_has_end = _strictly_inside(second, first.end.offset)

            if not (first_has_start or first_has_end or second_has_start or second_has_end):
                continue  # disjoint
            if first_has_start and first_has_end:
                continue  # second nested in first
            if second_has_start and second_has_end:
                continue  # first nested in second
            raise IntersectingRangesError(first, second)
