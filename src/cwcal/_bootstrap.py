from __future__ import annotations
from cwcal.core.engine import ReckoningRegistry
from cwcal.engines.specs import ALL_SPECS

def build_registry() -> ReckoningRegistry:
    # copy so that register_reckoning never touches the module-level specs
    return ReckoningRegistry(dict(ALL_SPECS))
