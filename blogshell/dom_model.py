"""Immutable node tree and HTML serialization."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, List, Mapping, Sequence, Tuple, Union

PropValue = Union[str, int, float, bool, None]

# Elements serialized without a closing tag.
VOID_TAGS = frozenset({"area", "base", "br", "col", "hr", "img", "input", "link", "meta", "source"})
# Elements whose text children are emitted unescaped.
RAW_TEXT_TAGS = frozenset({"script", "style"})


@dataclass(frozen=True)
class Node:
    tag: str
    props: Mapping[str, PropValue] = field(default_factory=dict)
    children: Tuple["DomContent", ...] = ()

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's mapping do not leak in.
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))
        object.__setattr__(self, "children", tuple(self.children))

    def __hash__(self) -> int:
        return hash((self.tag, frozenset(self.props.items()), self.children))

    @property
    def classes(self) -> List[str]:
        raw = self.props.get("class") or ""
        return str(raw).split()


DomContent = Union[Node, str]


def _render_attrs(props: Mapping[str, PropValue]) -> str:
    if not props:
        return ""
    parts: List[str] = []
    for name, value in props.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(name)
            continue
        parts.append(f'{name}="{html.escape(str(value), quote=True)}"')
    return (" " + " ".join(parts)) if parts else ""


def _render_raw_text(tag: str, text: str) -> str:
    if f"</{tag}" in text.lower():
        raise ValueError(f"<{tag}> text cannot contain a closing </{tag}> sequence")
    return text


def _render_children(tag: str, children: Sequence[DomContent]) -> str:
    html_parts: List[str] = []
    for child in children:
        if isinstance(child, Node):
            html_parts.append(dom_to_html(child))
        elif tag in RAW_TEXT_TAGS:
            html_parts.append(_render_raw_text(tag, child))
        else:
            html_parts.append(html.escape(child, quote=False))
    return "".join(html_parts)


def dom_to_html(dom: Union[DomContent, Sequence[DomContent]]) -> str:
    """Serialize a node, a text leaf, or a sequence of either."""

    if isinstance(dom, (Node, str)):
        dom = [dom]
    parts: List[str] = []
    for node in dom:
        if not isinstance(node, Node):
            parts.append(html.escape(node, quote=False))
            continue
        attrs = _render_attrs(node.props)
        if node.tag in VOID_TAGS:
            if node.children:
                raise ValueError(f"<{node.tag}> cannot have children")
            parts.append(f"<{node.tag}{attrs}>")
            continue
        parts.append(f"<{node.tag}{attrs}>")
        parts.append(_render_children(node.tag, node.children))
        parts.append(f"</{node.tag}>")
    return "".join(parts)


def render_document(root: Node) -> str:
    """Serialize a document root with its doctype."""

    return "<!doctype html>\n" + dom_to_html(root) + "\n"


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and every descendant node, depth first."""

    yield node
    for child in node.children:
        if isinstance(child, Node):
            yield from walk(child)


def find_by_id(node: Node, element_id: str) -> Node | None:
    for candidate in walk(node):
        if candidate.props.get("id") == element_id:
            return candidate
    return None


def text_content(node: DomContent) -> str:
    if isinstance(node, str):
        return node
    return "".join(text_content(child) for child in node.children)


__all__ = [
    "DomContent",
    "Node",
    "PropValue",
    "VOID_TAGS",
    "dom_to_html",
    "find_by_id",
    "render_document",
    "text_content",
    "walk",
]
