from __future__ import annotations

from typing import Dict

from ..core.types import ReckoningSpec
from .easter import JULIAN, ORTHODOX, WESTERN


# ============================================================
# NAMED EASTER RECKONINGS
# ============================================================

WESTERN_SPEC = ReckoningSpec(
    name="western",
    options=WESTERN,
    description="Gregorian computus (Church of England, Roman Catholic and most Protestant churches)",
)

JULIAN_SPEC = ReckoningSpec(
    name="julian",
    options=JULIAN,
    description="Julian computus, month/day on the Julian calendar",
)

ORTHODOX_SPEC = ReckoningSpec(
    name="orthodox",
    options=ORTHODOX,
    description="Julian computus converted to the Gregorian calendar (Eastern Orthodox)",
)

ALL_SPECS: Dict[str, ReckoningSpec] = {
    s.name: s for s in (WESTERN_SPEC, JULIAN_SPEC, ORTHODOX_SPEC)
}
