# tests/test_validators.py

import pytest

from hastdeco.errors import IntersectingRangesError, InvalidRangeError
from hastdeco.models import DecorationItem
from hastdeco.normalize import normalize_decorations
from hastdeco.positions import PositionConverter
from hastdeco.validators import verify_intersections


def _resolve(*ranges):
    conv = PositionConverter("x" * 40)
    return normalize_decorations([DecorationItem(start=s, end=e) for s, e in ranges], conv)


@pytest.mark.parametrize(
    "ranges",
    [
        [(0, 10), (2, 5)],
        [(2, 5), (0, 10)],
        [(0, 5), (5, 8)],
        [(0, 5), (10, 20)],
        [(3, 6), (3, 6)],
        [(0, 0), (0, 10)],
        [(0, 20), (2, 10), (4, 6), (12, 15)],
    ],
)
def test_valid_sets(ranges):
    verify_intersections(_resolve(*ranges))


@pytest.mark.parametrize(
    "ranges",
    [
        [(0, 5), (3, 8)],
        [(3, 8), (0, 5)],
        [(0, 10), (0, 5)],
        [(0, 10), (5, 10)],
        [(0, 20), (2, 10), (8, 12)],
    ],
)
def test_intersecting_sets(ranges):
    with pytest.raises(IntersectingRangesError):
        verify_intersections(_resolve(*ranges))


def test_intersection_names_both_items():
    items = _resolve((0, 5), (3, 8))
    with pytest.raises(IntersectingRangesError) as exc:
        verify_intersections(items)
    assert exc.value.first is items[0]
    assert exc.value.second is items[1]
    assert "intersect" in str(exc.value)


def test_reversed_range_is_invalid():
    items = _resolve((0, 3), (8, 4))
    with pytest.raises(InvalidRangeError) as exc:
        verify_intersections(items)
    assert exc.value.item is items[1]

