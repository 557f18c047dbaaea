"""Fuel, hunger and sleep levels, drained by distance."""
from __future__ import annotations

from typing import Dict, Optional

from config import FUEL, HUNGER, RESOURCE_DEPLETION_DISTANCE, RESOURCE_KINDS, RESOURCE_MAX, SLEEP
from haul.entities import clamp


class ResourcePool:
    def __init__(self, depletion_distance: Optional[Dict[str, float]] = None) -> None:
        self.depletion_distance: Dict[str, float] = dict(depletion_distance or RESOURCE_DEPLETION_DISTANCE)
        self.levels: Dict[str, float] = {}
        self.reset()

    def reset(self) -> None:
        self.levels = {kind: RESOURCE_MAX for kind in RESOURCE_KINDS}

    def deplete(self, distance_delta: float) -> None:
        """Drain every resource by its share of ``distance_delta`` miles."""
        for kind in RESOURCE_KINDS:
            drain = distance_delta / self.depletion_distance[kind] * RESOURCE_MAX
            self.levels[kind] = clamp(self.levels[kind] - drain, 0.0, RESOURCE_MAX)

    def replenish(self, kind: str, amount: float) -> float:
        self.levels[kind] = clamp(self.levels[kind] + amount, 0.0, RESOURCE_MAX)
        return self.levels[kind]

    def is_full(self, kind: str) -> bool:
        return self.levels[kind] >= RESOURCE_MAX

    def exhausted_kind(self) -> Optional[str]:
        for kind in RESOURCE_KINDS:
            if self.levels[kind] <= 0:
                return kind
        return None

    def is_exhausted(self) -> bool:
        return self.exhausted_kind() is not None

    @property
    def fuel(self) -> float:
        return self.levels[FUEL]

    @fuel.setter
    def fuel(self, value: float) -> None:
        self.levels[FUEL] = value

    @property
    def hunger(self) -> float:
        return self.levels[HUNGER]

    @property
    def sleep(self) -> float:
        return self.levels[SLEEP]
