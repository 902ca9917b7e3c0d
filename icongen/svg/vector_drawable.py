"""Android vector drawable post-processing."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

THEME_FILL_COLOR = "?attr/colorControlNormal"

_FILL_COLOR_RE = re.compile(r'android:fillColor="([^"]*)"')


def set_fill_color(xml_text: str, color: str = THEME_FILL_COLOR) -> str:
    """Point every android:fillColor at ``color`` so the icon follows the theme tint."""
    return _FILL_COLOR_RE.sub(lambda _: f'android:fillColor="{color}"', xml_text)


def recolor_drawable(path: Path, color: str = THEME_FILL_COLOR) -> int:
    """Rewrite a drawable file in place. Returns the number of fills replaced."""
    xml_text = path.read_text(encoding="utf-8")
    count = len(_FILL_COLOR_RE.findall(xml_text))
    path.write_text(set_fill_color(xml_text, color), encoding="utf-8")
    logger.debug("Recolored %d fill(s) in %s", count, path.name)
    return count
