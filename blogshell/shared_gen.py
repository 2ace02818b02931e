"""Generators for the static assets the layout references."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .models import SiteSettings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def jinja_env() -> Environment:
    """Environment for the packaged asset templates."""

    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render_lead_capture_js(settings: SiteSettings) -> str:
    """Render the browser script driving the subscribe form."""

    lead = settings.lead_capture
    template = jinja_env().get_template("lead_capture.js.jinja")
    return template.render(
        form_id=lead.form_id,
        container_id=lead.container_id,
        endpoint=lead.endpoint,
        success_message=lead.success_message,
        thank_you=lead.thank_you,
    )


def generate_lead_capture_js(out_dir: Path, settings: SiteSettings) -> Path:
    """Write the page behavior script under ``out_dir`` at the layout's path."""

    target_path = out_dir / settings.assets.page_js.lstrip("/")
    target_path.parent.mkdir(parents=True, exist_ok=True)
    target_path.write_text(render_lead_capture_js(settings), encoding="utf-8")
    logger.info("Wrote %s", target_path)
    return target_path


__all__ = ["generate_lead_capture_js", "jinja_env", "render_lead_capture_js"]
