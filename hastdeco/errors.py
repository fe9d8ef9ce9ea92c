# hastdeco/errors.py

from __future__ import annotations

from typing import Any, Optional


class DecorationError(ValueError):
    """Base class for everything that aborts a decoration run."""


class ConfigError(DecorationError):
    pass


class InvalidPositionError(DecorationError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid decoration position: {value!r}")


class InvalidRangeError(DecorationError):
    def __init__(self, item: Any):
        self.item = item
        super().__init__(
            f"Invalid decoration range: {item.start.describe()} - {item.end.describe()}"
        )


class IntersectingRangesError(DecorationError):
    def __init__(self, first: Any, second: Any):
        self.first = first
        self.second = second
        super().__init__(
            f"Decorations [{first.start.describe()}, {first.end.describe()}) and "
            f"[{second.start.describe()}, {second.end.describe()}) intersect."
        )


class BoundaryNotFoundError(DecorationError):
    def __init__(self, line: int, character: float, reason: Optional[str] = None):
        self.line = line
        self.character = character
        msg = f"Failed to find boundary for decoration at line {line}, character {character}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
