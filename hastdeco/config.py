# hastdeco/config.py

from __future__ import annotations

import yaml
from typing import Any, Dict, List

from hastdeco.errors import ConfigError
from hastdeco.models import DecorationItem, OffsetOrPosition, SourcePosition


def _parse_bound(value: Any, key: str, index: int) -> OffsetOrPosition:
    if isinstance(value, bool):
        raise ConfigError(f"decorations[{index}].{key}: expected offset or position, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, dict) and "line" in value and "character" in value:
        line, character = value["line"], value["character"]
        if isinstance(line, int) and isinstance(character, int):
            return SourcePosition(line=line, character=character)
    raise ConfigError(f"decorations[{index}].{key}: expected offset or position, got {value!r}")


def parse_decoration(props: Dict[str, Any], index: int = 0) -> DecorationItem:
    if not isinstance(props, dict):
        raise ConfigError(f"decorations[{index}]: expected a mapping, got {props!r}")
    for key in ("start", "end"):
        if key not in props:
            raise ConfigError(f"decorations[{index}]: missing '{key}'")

    properties = props.get("properties") or {}
    if not isinstance(properties, dict):
        raise ConfigError(f"decorations[{index}].properties: expected a mapping")

    return DecorationItem(
        start=_parse_bound(props["start"], "start", index),
        end=_parse_bound(props["end"], "end", index),
        tag_name=props.get("tag_name"),
        properties=dict(properties),
        always_wrap=bool(props.get("always_wrap", False)),
    )


def parse_decorations(cfg: Dict[str, Any] | None) -> List[DecorationItem]:
    items = (cfg or {}).get("decorations") or []
    if not isinstance(items, list):
        raise ConfigError("'decorations' must be a list")
    return [parse_decoration(props, i) for i, props in enumerate(items)]


def load_decorations(path: str) -> List[DecorationItem]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    return parse_decorations(cfg)
