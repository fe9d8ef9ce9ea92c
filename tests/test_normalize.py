# tests/test_normalize.py

import pytest

from hastdeco.errors import InvalidPositionError
from hastdeco.models import DecorationItem, ResolvedPosition, SourcePosition
from hastdeco.normalize import normalize_decorations
from hastdeco.positions import PositionConverter


SOURCE = "const a = 1\nlet b = 2\n"


def test_offsets_and_positions_resolve_to_both_forms():
    conv = PositionConverter(SOURCE)
    items = [
        DecorationItem(start=12, end=15),
        DecorationItem(start=SourcePosition(0, 6), end={"line": 0, "character": 7}),
    ]
    resolved = normalize_decorations(items, conv)

    assert resolved[0].start == ResolvedPosition(line=1, character=0, offset=12)
    assert resolved[0].end == ResolvedPosition(line=1, character=3, offset=15)
    assert resolved[1].start == ResolvedPosition(line=0, character=6, offset=6)
    assert resolved[1].end == ResolvedPosition(line=0, character=7, offset=7)
    assert resolved[1].raw is items[1]


def test_out_of_order_bounds_are_kept():
    conv = PositionConverter(SOURCE)
    resolved = normalize_decorations([DecorationItem(start=5, end=2)], conv)
    assert resolved[0].start.offset == 5
    assert resolved[0].end.offset == 2


def test_properties_are_copied():
    conv = PositionConverter(SOURCE)
    item = DecorationItem(start=0, end=5, properties={"class": ["x"]})
    resolved = normalize_decorations([item], conv)
    resolved[0].properties["id"] = "changed"
    assert "id" not in item.properties


@pytest.mark.parametrize(
    "bound",
    [
        -1,
        SourcePosition(-1, 0),
        SourcePosition("1", 0),
        {"line": 0},
        {"line": "1", "character": 0},
        {"line": 1.9, "character": 0},
        {"line": True, "character": 0},
        "3",
        True,
    ],
)
def test_invalid_bounds(bound):
    conv = PositionConverter(SOURCE)
    with pytest.raises(InvalidPositionError):
        normalize_decorations([DecorationItem(start=bound, end=3)], conv)
