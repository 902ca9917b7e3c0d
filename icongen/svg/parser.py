"""SVG parser — regex facade for the fixed SVGs the external fixer emits.

Only two things are read from an icon: the root viewBox and the ``d`` data of
every ``<path>``. Inputs are normalised by the fixer first, so pattern matching
is enough here.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r"""viewBox=["']([^"']*)["']""")
_PATH_D_RE = re.compile(r'<path[^>]*\sd="([^"]*)"[^>]*>')


@dataclass(frozen=True)
class ViewBox:
    """Coordinate-space rectangle an icon is drawn against."""

    x: float = 0.0
    y: float = 0.0
    width: float = 24.0
    height: float = 24.0

    @classmethod
    def default(cls) -> ViewBox:
        return cls()


def parse_viewbox(svg_text: str) -> ViewBox:
    """Read the viewBox attribute, falling back to ``0 0 24 24``."""
    match = _VIEWBOX_RE.search(svg_text)
    if not match:
        return ViewBox.default()

    parts = match.group(1).split()
    if len(parts) != 4:
        logger.debug("viewBox %r does not have 4 values, using default", match.group(1))
        return ViewBox.default()

    try:
        x, y, width, height = (float(p) for p in parts)
    except ValueError:
        logger.debug("viewBox %r is not numeric, using default", match.group(1))
        return ViewBox.default()

    # Zero or negative extents would make the slot scale infinite
    if not all(math.isfinite(v) for v in (x, y, width, height)) or width <= 0 or height <= 0:
        logger.debug("viewBox %r has unusable extents, using default", match.group(1))
        return ViewBox.default()

    return ViewBox(x=x, y=y, width=width, height=height)


def extract_path_data(svg_text: str) -> list[str]:
    """Return the ``d`` attribute of every <path>, in document order."""
    return _PATH_D_RE.findall(svg_text)
