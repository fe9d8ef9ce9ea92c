# hastdeco/transform.py

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from hastdeco.errors import BoundaryNotFoundError
from hastdeco.hast import Element, add_class, line_elements, stringify
from hastdeco.models import Keep, Replace, ResolvedDecorationItem

logger = logging.getLogger(__name__)

END_OF_LINE = math.inf

# (line, start character, end character)
Section = Tuple[int, float, float]


def _find_index(line_el: Element, line: int, character: float) -> int:
    """Child index whose preceding siblings hold exactly `character` chars."""
    if character == 0:
        return 0
    if character == END_OF_LINE:
        return len(line_el.children)

    total = 0
    for i, child in enumerate(line_el.children):
        total += len(stringify(child))
        if total == character:
            return i + 1
    raise BoundaryNotFoundError(line, character)


def _line(lines: List[Element], line: int, character: float) -> Element:
    if not 0 <= line < len(lines):
        raise BoundaryNotFoundError(
            line, character, f"tree has {len(lines)} lines"
        )
    return lines[line]


def _plan(decoration: ResolvedDecorationItem) -> Tuple[List[Section], List[int]]:
    start, end = decoration.start, decoration.end
    if decoration.is_multiline():
        sections = [
            (start.line, start.character, END_OF_LINE),
            (end.line, 0, end.character),
        ]
        return sections, list(range(start.line + 1, end.line))
    return [(start.line, start.character, end.character)], []


def _check_boundaries(lines: List[Element], decorations: Sequence[ResolvedDecorationItem]) -> None:
    for decoration in decorations:
        sections, whole_lines = _plan(decoration)
        for line, start, end in sections:
            line_el = _line(lines, line, start)
            _find_index(line_el, line, start)
            _find_index(line_el, line, end)
        for line in whole_lines:
            _line(lines, line, 0)


def apply_decoration(el: Element, decoration: ResolvedDecorationItem, is_line: bool) -> Element:
    """
    Merge a decoration into its carrier element and run its hook.

    Decoration properties override the carrier's, except "class", which is
    unioned with the carrier's existing class list. Returns the element to
    splice in, which is `el` unless the hook asked for a replacement.
    """
    if decoration.tag_name:
        el.tag_name = decoration.tag_name

    properties = dict(decoration.properties or {})
    classes = properties.pop("class", None)
    el.properties.update(properties)
    if classes:
        add_class(el, classes)

    if decoration.transform is None:
        return el

    result = decoration.transform(el, is_line)
    if isinstance(result, Replace):
        return result.element
    if isinstance(result, Keep):
        return el
    raise TypeError(
        f"Decoration transform must return Keep() or Replace(element), got {result!r}"
    )


class _Journal:
    """Snapshots of every element touched while splicing, for rollback."""

    def __init__(self):
        self._saved = []
        self._seen = set()

    def record(self, el: Element) -> None:
        if id(el) in self._seen:
            return
        self._seen.add(id(el))
        self._saved.append((el, el.tag_name, dict(el.properties), list(el.children)))

    def rollback(self) -> None:
        for el, tag_name, properties, children in reversed(self._saved):
            el.tag_name = tag_name
            el.properties = properties
            el.children = children


def _apply_line_section(
    lines: List[Element],
    section: Section,
    decoration: ResolvedDecorationItem,
    journal: _Journal,
) -> None:
    line, start, end = section
    line_el = _line(lines, line, start)
    start_index = _find_index(line_el, line, start)
    end_index = _find_index(line_el, line, end)

    children = line_el.children[start_index:end_index]
    if not decoration.always_wrap and len(children) == 1 and isinstance(children[0], Element):
        carrier = children[0]
        journal.record(carrier)
    else:
        carrier = Element("span", {}, children)

    carrier = apply_decoration(carrier, decoration, False)
    journal.record(line_el)
    line_el.children[start_index:end_index] = [carrier]


def _apply_line(
    code_el: Element,
    lines: List[Element],
    line: int,
    decoration: ResolvedDecorationItem,
    journal: _Journal,
) -> None:
    old = lines[line]
    journal.record(old)
    new = apply_decoration(old, decoration, True)
    if new is not old:
        lines[line] = new
        journal.record(code_el)
        for i, child in enumerate(code_el.children):
            if child is old:
                code_el.children[i] = new
                break


def apply_decorations(code_el: Element, decorations: Sequence[ResolvedDecorationItem]) -> Element:
    """
    Splice decoration wrappers into the line elements of `code_el` in place.

    - Decorations run by start offset descending (ties: shorter first), so a
      nested decoration is already a single child when its parent scans the
      line.
    - Every boundary is checked against the tree before the first splice.
    - Lines fully covered by a multi-line decoration are decorated as a
      whole after the main pass, outermost first, so the innermost
      decoration's tag and properties win on a shared line.
    - If a hook fails, every element touched so far gets back its tag,
      properties and children before the error propagates. Changes a hook
      makes inside an element's subtree are not undone.
    """
    lines = line_elements(code_el)
    ordered = sorted(decorations, key=lambda d: (-d.start.offset, d.end.offset))

    _check_boundaries(lines, ordered)

    journal = _Journal()
    whole_line_applies: List[Tuple[int, ResolvedDecorationItem]] = []
    try:
        for decoration in ordered:
            sections, whole_lines = _plan(decoration)
            for section in sections:
                _apply_line_section(lines, section, decoration, journal)
            whole_line_applies.extend((line, decoration) for line in whole_lines)

        for line, decoration in reversed(whole_line_applies):
            _apply_line(code_el, lines, line, decoration, journal)
    except Exception:
        journal.rollback()
        raise

    logger.debug(
        "Applied %d decorations (%d whole-line)", len(ordered), len(whole_line_applies)
    )
    return code_el
