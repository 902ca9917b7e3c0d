"""SF Symbols template slots — one per weight variant on the small scale row.

All values are constants of Template v.6.0 and are not derived from input.
"""

from __future__ import annotations

from dataclasses import dataclass

# Cap height of the template's small row; shared by every slot
GUIDE_HEIGHT = 70.459
SCALE_MODIFIER = 1.1
# Circle drawn in place of an icon without any <path>
FALLBACK_PATH = "M24,12 a12,12 0 1,0 -24,0 a12,12 0 1,0 24,0"


class UnknownSlotError(ValueError):
    """Raised for a slot index the template does not define."""


@dataclass(frozen=True)
class Slot:
    index: int
    name: str
    target_size: float
    guide_width: float


SLOTS: dict[int, Slot] = {
    0: Slot(index=0, name="Ultralight-S", target_size=74.44922, guide_width=88.124),
    1: Slot(index=1, name="Regular-S", target_size=78.80859, guide_width=92.53),
    2: Slot(index=2, name="Black-S", target_size=83.98438, guide_width=97.66),
}


def get_slot(index: int) -> Slot:
    try:
        return SLOTS[index]
    except KeyError:
        raise UnknownSlotError(
            f"Unknown template slot {index!r}; expected one of {sorted(SLOTS)}"
        ) from None
