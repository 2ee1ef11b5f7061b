from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from .errors import UnknownReckoningError
from .types import ReckoningSpec

@dataclass
class ReckoningRegistry:
    _specs: Dict[str, ReckoningSpec]

    def get(self, name: str) -> ReckoningSpec:
        if name not in self._specs:
            raise UnknownReckoningError(f"Unknown reckoning '{name}'. Available: {sorted(self._specs)}")
        return self._specs[name]

    def list(self) -> List[str]:
        return sorted(self._specs.keys())

    def register(self, name: str, spec: ReckoningSpec, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._specs):
            raise KeyError(f"Reckoning '{name}' already exists. Use overwrite=True to replace.")
        self._specs[name] = spec
