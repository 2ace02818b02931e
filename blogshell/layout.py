"""Page composer for the blog shell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from .builder import NodeBuilder, Producer
from .dom_model import DomContent, Node, render_document
from .fragments import header, navigation
from .models import SiteSettings

PageContent = Union[Producer, Sequence[DomContent]]


@dataclass(frozen=True)
class LayoutConfig:
    """Options of a single page composition.

    ``content`` is either a producer that builds the page body with the
    composer's builder, or a sequence of prebuilt nodes and text leaves.
    Either way it is spliced into the layout wrapper without a wrapping node.
    """

    include_header: bool = False
    content: PageContent = ()


def compose_page(
    config: LayoutConfig,
    settings: SiteSettings | None = None,
    builder: NodeBuilder | None = None,
) -> Node:
    """Assemble the full ``html`` document node."""

    settings = settings or SiteSettings()
    b = builder or NodeBuilder()
    assets = settings.assets

    def content() -> None:
        if callable(config.content):
            b.group(config.content)
        else:
            b.splice(list(config.content))

    def layout() -> None:
        if config.include_header:
            header(b, settings.header)
        navigation(b, settings.navigation)
        content()
        b.build("script", {"src": assets.highlight_js})
        b.build(
            "script",
            {
                "src": assets.ui_bundle_js,
                "integrity": assets.ui_bundle_integrity,
                "crossorigin": "anonymous",
            },
        )
        b.build("script", {"src": assets.page_js})

    def head() -> None:
        b.build("meta", {"name": "viewport", "content": assets.viewport})
        b.build("link", {"rel": "stylesheet", "href": assets.base_css})
        b.build("link", {"rel": "stylesheet", "href": assets.highlight_css})

    def document() -> None:
        b.build("head", head)
        b.build("body", lambda: b.build("div", {"class": "app-layout"}, layout))

    return b.build("html", {"lang": "en"}, document)


def render_page(config: LayoutConfig, settings: SiteSettings | None = None) -> str:
    """Compose a page and serialize it with its doctype."""

    return render_document(compose_page(config, settings))


__all__ = ["LayoutConfig", "PageContent", "compose_page", "render_page"]
