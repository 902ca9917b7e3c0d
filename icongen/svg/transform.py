"""Path transform engine — places icon geometry into an SF Symbols template slot.

Usage:
    d = transform_paths_for_slot(fixed_svg, slot_index=1)

The icon's viewBox is scaled by ``target_size / extent * SCALE_MODIFIER`` on each
axis and centred in the slot's guide box. Two rewrite modes exist:

- POSITIONAL (default): numeric tokens of each ``d`` string alternate x, y, x, y
  in the order they appear, regardless of the command they belong to. Arc flags,
  rotations and H/V arguments are therefore classified by position only. This is
  the output existing symbol sets were generated with.
- GEOMETRIC: paths are parsed with svgpathtools into typed segments and every
  point is mapped through the same affine transform.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier, parse_path

from icongen.svg.parser import ViewBox, extract_path_data, parse_viewbox
from icongen.svg.slots import FALLBACK_PATH, GUIDE_HEIGHT, SCALE_MODIFIER, Slot, get_slot

logger = logging.getLogger(__name__)

# Signed integers or decimals; ".5" and exponents are not recognised as a unit
_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


class TransformMode(str, enum.Enum):
    POSITIONAL = "positional"
    GEOMETRIC = "geometric"


@dataclass(frozen=True)
class SlotTransform:
    """Per-axis affine map ``v * scale + offset``."""

    scale_x: float
    scale_y: float
    offset_x: float
    offset_y: float

    def apply(self, z: complex) -> complex:
        return complex(z.real * self.scale_x + self.offset_x, z.imag * self.scale_y + self.offset_y)


def compute_slot_transform(viewbox: ViewBox, slot: Slot) -> SlotTransform:
    scale_x = (slot.target_size / viewbox.width) * SCALE_MODIFIER
    scale_y = (slot.target_size / viewbox.height) * SCALE_MODIFIER

    scaled_width = viewbox.width * scale_x
    scaled_height = viewbox.height * scale_y

    return SlotTransform(
        scale_x=scale_x,
        scale_y=scale_y,
        offset_x=(slot.guide_width - scaled_width) / 2,
        offset_y=(GUIDE_HEIGHT - scaled_height) / 2,
    )


def format_number(value: float) -> str:
    """Shortest round-trip decimal, integral values without a fraction.

    Exponent notation is only used below 1e-6 and from 1e21 upward.
    """
    value = float(value)
    if value == 0:
        return "0"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, trim="-")
    return np.format_float_scientific(value, trim="-", exp_digits=1)


def _alternating_affine(values: NDArray[np.float64], transform: SlotTransform) -> NDArray[np.float64]:
    is_x = np.arange(len(values)) % 2 == 0
    scale = np.where(is_x, transform.scale_x, transform.scale_y)
    offset = np.where(is_x, transform.offset_x, transform.offset_y)
    return values * scale + offset


def transform_path_data(d: str, transform: SlotTransform) -> str:
    """Rewrite every numeric token of ``d``; everything else is copied through.

    Axis alternation restarts at x for each call.
    """
    matches = list(_NUMBER_RE.finditer(d))
    if not matches:
        return d

    values = np.array([float(m.group(0)) for m in matches], dtype=np.float64)
    transformed = _alternating_affine(values, transform)

    pieces: list[str] = []
    cursor = 0
    for match, value in zip(matches, transformed):
        pieces.append(d[cursor:match.start()])
        pieces.append(format_number(value))
        cursor = match.end()
    pieces.append(d[cursor:])
    return "".join(pieces)


def _transform_segment(seg, transform: SlotTransform):
    if isinstance(seg, Line):
        return Line(transform.apply(seg.start), transform.apply(seg.end))
    if isinstance(seg, QuadraticBezier):
        return QuadraticBezier(
            transform.apply(seg.start),
            transform.apply(seg.control),
            transform.apply(seg.end),
        )
    if isinstance(seg, CubicBezier):
        return CubicBezier(
            transform.apply(seg.start),
            transform.apply(seg.control1),
            transform.apply(seg.control2),
            transform.apply(seg.end),
        )
    radius = complex(seg.radius.real * transform.scale_x, seg.radius.imag * transform.scale_y)
    return Arc(
        transform.apply(seg.start),
        radius,
        seg.rotation,
        seg.large_arc,
        seg.sweep,
        transform.apply(seg.end),
    )


def transform_path_geometric(d: str, transform: SlotTransform) -> str:
    """Map each segment's points through ``transform`` using svgpathtools.

    Closed subpaths keep their ``Z``. Arc radii are scaled per axis, which is
    exact for unrotated arcs and for square viewBoxes (equal scales). A path
    with no drawable segments (a lone moveto) is rewritten positionally.
    """
    path = parse_path(d)
    if len(path) == 0:
        return transform_path_data(d, transform)

    parts: list[str] = []
    for subpath in path.continuous_subpaths():
        segments = list(subpath)
        closed = subpath.isclosed()
        # The closing line is implied by Z
        if closed and len(segments) > 1 and isinstance(segments[-1], Line):
            segments = segments[:-1]
        sub_d = Path(*[_transform_segment(seg, transform) for seg in segments]).d()
        parts.append(f"{sub_d} Z" if closed else sub_d)
    return " ".join(parts)


def transform_paths_for_slot(
    svg_text: str,
    slot_index: int,
    mode: TransformMode = TransformMode.POSITIONAL,
) -> str:
    """Return the combined ``d`` value placing every icon path into a slot.

    An SVG without paths yields FALLBACK_PATH. Raises UnknownSlotError for a
    slot the template does not define.
    """
    slot = get_slot(slot_index)
    paths = extract_path_data(svg_text)
    if not paths:
        logger.debug("No <path> elements found, using fallback shape for %s", slot.name)
        return FALLBACK_PATH

    transform = compute_slot_transform(parse_viewbox(svg_text), slot)

    transformed: list[str] = []
    for d in paths:
        if mode == TransformMode.GEOMETRIC:
            try:
                transformed.append(transform_path_geometric(d, transform))
                continue
            except Exception as e:
                logger.warning("Failed to parse path for geometric transform: %s", e)
        transformed.append(transform_path_data(d, transform))

    return " ".join(transformed)
