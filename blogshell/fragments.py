"""Header and navigation fragments."""

from __future__ import annotations

from typing import Sequence

from .builder import NodeBuilder
from .dom_model import Node
from .models import HeaderContent, NavLink


def _text_input(b: NodeBuilder, name: str, label: str, input_type: str = "text") -> None:
    b.build("label", {"for": name}, label)
    b.build(
        "input",
        {"type": input_type, "id": name, "name": name, "value": "", "required": True},
    )


def header(b: NodeBuilder, content: HeaderContent) -> Node:
    """Build the site header: title block, motto and subscribe form."""

    def subscribe_form() -> None:
        _text_input(b, "name", "Name")
        _text_input(b, "email", "Email")
        b.build("button", {"type": "submit", "class": "btn btn-primary"}, content.button_label)

    def subscribe() -> None:
        b.build("h2", "Get new tutorials by email")
        b.build(
            "div",
            {"id": content.container_id, "class": "subscribe-container"},
            lambda: b.build("form", {"id": content.form_id, "method": "post"}, subscribe_form),
        )

    def body() -> None:
        b.build("h1", {"class": "site-title"}, content.title)
        b.build("p", {"class": "subtitle"}, content.subtitle)
        b.build("div", {"class": "divider", "aria-hidden": "true"})
        b.build("blockquote", {"class": "motto"}, lambda: b.text(content.motto))
        b.build("section", {"class": "subscribe"}, subscribe)

    return b.build("header", {"class": "site-header"}, body)


def navigation(b: NodeBuilder, links: Sequence[NavLink]) -> Node:
    """Build the navigation bar with links in the given order."""

    def item(link: NavLink) -> None:
        b.build("a", {"class": "nav-link", "href": link.href}, link.label)

    def items() -> None:
        for link in links:
            b.build("li", {"class": "nav-item"}, lambda link=link: item(link))

    return b.build("nav", {"class": "navbar"}, lambda: b.build("ul", {"class": "nav"}, items))


__all__ = ["header", "navigation"]
