"""Loading of site.yaml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import SiteSettings

logger = logging.getLogger(__name__)


def load_site_settings(path: Path | None) -> SiteSettings:
    """Load and validate site settings, or return the defaults for ``None``."""

    if path is None:
        return SiteSettings()

    if not path.exists():
        raise SystemExit(f"Site config not found: {path}")

    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"{path.name} must contain a mapping of settings.")

    try:
        settings = SiteSettings.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid site config in {path}: {exc}") from exc

    logger.debug("Loaded site settings from %s", path)
    return settings


__all__ = ["load_site_settings"]
