# hastdeco/hast.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from hastdeco.tokens import Token


@dataclass
class Text:
    value: str
    type: str = field(default="text", init=False)


@dataclass
class Element:
    tag_name: str
    properties: Dict[str, Any] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)
    type: str = field(default="element", init=False)


Node = Union[Element, Text]


def stringify(node: Node) -> str:
    """Concatenate all descendant text in document order."""
    if isinstance(node, Text):
        return node.value
    return "".join(stringify(child) for child in node.children)


def _class_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return [str(v) for v in value]


def add_class(el: Element, classes: Union[str, Iterable[str]]) -> Element:
    """Union `classes` into el's class list, keeping existing order."""
    current = _class_list(el.properties.get("class"))
    for cls in _class_list(classes):
        if cls not in current:
            current.append(cls)
    el.properties["class"] = current
    return el


def line_elements(code_el: Element) -> List[Element]:
    return [
        child
        for child in code_el.children
        if isinstance(child, Element) and child.tag_name == "span"
    ]


def tokens_to_hast(lines: List[List[Token]], endings: Optional[Sequence[str]] = None) -> Element:
    """
    Build pre > code > span.line > span.token from tokenized lines.

    Lines are separated by text nodes holding their terminators (`endings`,
    "\\n" where not given), so stringify(code) reproduces the source.
    """
    code = Element("code")
    for idx, tokens in enumerate(lines):
        line = Element("span", {"class": ["line"]})
        for token in tokens:
            line.children.append(
                Element("span", {"class": ["token", f"tok-{token.kind}"]}, [Text(token.content)])
            )
        code.children.append(line)
        if idx < len(lines) - 1:
            ending = endings[idx] if endings is not None and idx < len(endings) else "\n"
            code.children.append(Text(ending))
    return Element("pre", {"class": ["hastdeco"]}, [code])


def find_code(root: Element) -> Element:
    if root.tag_name == "code":
        return root
    for child in root.children:
        if isinstance(child, Element) and child.tag_name == "code":
            return child
    raise ValueError("No <code> element in tree")


def to_dict(node: Node) -> Dict[str, Any]:
    if isinstance(node, Text):
        return {"type": "text", "value": node.value}
    return {
        "type": "element",
        "tagName": node.tag_name,
        "properties": dict(node.properties),
        "children": [to_dict(child) for child in node.children],
    }
