"""Command-line interface for blogshell."""

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Iterable, Optional

import httpx

from . import __version__
from .config import load_site_settings
from .html_import import nodes_from_html, to_soup
from .layout import LayoutConfig, render_page
from .lead_capture import LeadCaptureHandler, SubmissionState
from .models import SiteSettings
from .shared_gen import generate_lead_capture_js

logger = logging.getLogger(__name__)


def _config_path(args: argparse.Namespace) -> Path | None:
    return Path(args.config) if args.config else None


def _load_content(path: Optional[str]) -> tuple:
    if not path:
        return ()
    content_path = Path(path)
    if not content_path.exists():
        raise SystemExit(f"Content fragment not found: {content_path}")
    return nodes_from_html(content_path.read_text(encoding="utf-8"))


def _handle_render(args: argparse.Namespace) -> None:
    settings = load_site_settings(_config_path(args))
    config = LayoutConfig(include_header=args.header, content=_load_content(args.content))
    output_path = Path(args.out)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_page(config, settings), encoding="utf-8")
    print(f"Rendered {output_path} (header {'on' if args.header else 'off'}).")


def _handle_assets(args: argparse.Namespace) -> None:
    settings = load_site_settings(_config_path(args))
    written = generate_lead_capture_js(Path(args.out), settings)
    print(f"Wrote {written}.")


async def _subscribe(
    settings: SiteSettings, base_url: str, name: str, email: str, timeout: float
) -> SubmissionState:
    document = to_soup(render_page(LayoutConfig(include_header=True), settings))
    async with httpx.AsyncClient(base_url=base_url, timeout=timeout) as client:
        handler = LeadCaptureHandler(document, client, settings.lead_capture)
        handler.fill(name, email)
        return await handler.handle_submit()


def _handle_subscribe(args: argparse.Namespace) -> None:
    settings = load_site_settings(_config_path(args))
    state = asyncio.run(
        _subscribe(settings, args.base_url, args.name, args.email, args.timeout)
    )
    print(f"Submission {state.value}.")
    if state is SubmissionState.FAILED:
        raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blogshell",
        description="Blog page shell rendering and lead capture utilities",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"blogshell {__version__}",
        help="Show the blogshell version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render the page shell to an HTML file.",
        description="Compose the document shell and write it as HTML.",
    )
    render_parser.add_argument("--config", help="Path to site.yaml (defaults built in).")
    render_parser.add_argument("--out", required=True, help="HTML file to write.")
    render_parser.add_argument(
        "--header",
        action="store_true",
        help="Include the header with the subscribe form.",
    )
    render_parser.add_argument(
        "--content",
        help="Trusted HTML fragment spliced into the layout after the navigation.",
    )
    render_parser.set_defaults(func=_handle_render)

    assets_parser = subparsers.add_parser(
        "assets",
        help="Write the page behavior script.",
        description="Render the lead capture script to the configured page script path.",
    )
    assets_parser.add_argument("--config", help="Path to site.yaml (defaults built in).")
    assets_parser.add_argument("--out", required=True, help="Site output root directory.")
    assets_parser.set_defaults(func=_handle_assets)

    subscribe_parser = subparsers.add_parser(
        "subscribe",
        help="Submit the subscribe form against a running backend.",
        description="Fill the rendered subscribe form and post it to the lead endpoint.",
    )
    subscribe_parser.add_argument("--config", help="Path to site.yaml (defaults built in).")
    subscribe_parser.add_argument(
        "--base-url", dest="base_url", required=True, help="Backend base URL."
    )
    subscribe_parser.add_argument("--name", required=True, help="Subscriber name.")
    subscribe_parser.add_argument("--email", required=True, help="Subscriber email.")
    subscribe_parser.add_argument(
        "--timeout",
        type=float,
        default=10.0,
        help="Request timeout in seconds.",
    )
    subscribe_parser.set_defaults(func=_handle_subscribe)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
