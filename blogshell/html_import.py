"""Conversion between BeautifulSoup trees and nodes."""

from __future__ import annotations

from typing import List

from bs4 import (
    BeautifulSoup,
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from .dom_model import DomContent, Node, PropValue

BOOLEAN_ATTRS = frozenset(
    {
        "async",
        "autofocus",
        "checked",
        "controls",
        "defer",
        "disabled",
        "hidden",
        "loop",
        "multiple",
        "muted",
        "nomodule",
        "novalidate",
        "open",
        "readonly",
        "required",
        "selected",
    }
)


def _convert_attrs(tag: Tag) -> dict[str, PropValue]:
    props: dict[str, PropValue] = {}
    for name, value in tag.attrs.items():
        if isinstance(value, list):
            # Multi-valued attributes such as class come back as lists.
            props[name] = " ".join(value)
        elif value == "" and name in BOOLEAN_ATTRS:
            props[name] = True
        else:
            props[name] = value
    return props


def _convert(element) -> DomContent | None:
    # Comments, doctypes and other declarations carry no content.
    if isinstance(element, (CData, Comment, Declaration, Doctype, ProcessingInstruction)):
        return None
    if isinstance(element, NavigableString):
        return str(element)
    if isinstance(element, Tag):
        children: List[DomContent] = []
        for child in element.children:
            converted = _convert(child)
            if converted is not None:
                children.append(converted)
        return Node(tag=element.name, props=_convert_attrs(element), children=tuple(children))
    return None


def nodes_from_html(markup: str) -> tuple[DomContent, ...]:
    """Parse a trusted HTML fragment into nodes and text leaves.

    Whitespace-only text between top-level elements is dropped.
    """

    soup = BeautifulSoup(markup, "html.parser")
    items: List[DomContent] = []
    for element in soup.contents:
        converted = _convert(element)
        if converted is None:
            continue
        if isinstance(converted, str) and not converted.strip():
            continue
        items.append(converted)
    return tuple(items)


def to_soup(html: str) -> BeautifulSoup:
    """Parse a rendered document for inspection or client-side handling."""

    return BeautifulSoup(html, "html.parser")


__all__ = ["nodes_from_html", "to_soup"]
