"""Roadside service stops, spawned per kind on a distance cadence."""
from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from config import (
    LANE_SERVICE,
    LANE_Y,
    STOP_LOOKAHEAD,
    STOP_SPAWN_X,
    STOP_TRAILING_MARGIN,
)
from haul.entities import ServiceStop, SpawnCadence
from service_catalog import load_service_catalog

log = logging.getLogger(__name__)


class ServiceStopField:
    """Owns the active stops and one :class:`SpawnCadence` per stop kind.

    Stops sit still on the road; since the truck's x is fixed on screen, the
    road (and every stop on it) scrolls back by the truck's speed each frame.
    """

    def __init__(self, rng: random.Random, catalog: Optional[Dict[str, Dict]] = None) -> None:
        self.rng = rng
        self.catalog: Dict[str, Dict] = catalog if catalog is not None else load_service_catalog()
        self.stops: List[ServiceStop] = []
        self.cadences: Dict[str, SpawnCadence] = {}
        self.reset()

    def reset(self) -> None:
        self.stops = []
        self.cadences = {
            kind: SpawnCadence(accumulated=0.0, threshold=float(entry["first_spawn"]))
            for kind, entry in self.catalog.items()
        }

    def resource_for(self, kind: str) -> str:
        return str(self.catalog[kind]["resource"])

    def _draw_threshold(self, kind: str) -> float:
        entry = self.catalog[kind]
        return self.rng.uniform(float(entry["spawn_min"]), float(entry["spawn_max"]))

    def spawn_one(self, kind: str) -> ServiceStop:
        stop = ServiceStop(x=STOP_SPAWN_X, y=LANE_Y[LANE_SERVICE], kind=kind)
        self.stops.append(stop)
        return stop

    def advance_cadences(self, distance_delta: float) -> None:
        for cadence in self.cadences.values():
            cadence.accumulated += distance_delta

    def spawn_on_cadence(self) -> List[ServiceStop]:
        spawned: List[ServiceStop] = []
        for kind, cadence in self.cadences.items():
            if cadence.accumulated < cadence.threshold:
                continue
            spawned.append(self.spawn_one(kind))
            cadence.accumulated = 0.0
            cadence.threshold = self._draw_threshold(kind)
            log.debug("Spawned %s stop; next in %.2f mi", kind, cadence.threshold)
        return spawned

    def scroll(self, player_speed: float) -> None:
        for stop in self.stops:
            stop.x -= player_speed

    def advance(self, distance_delta: float, player_speed: float) -> List[ServiceStop]:
        self.scroll(player_speed)
        self.advance_cadences(distance_delta)
        return self.spawn_on_cadence()

    def reap(self, player_x: float) -> int:
        kept = [s for s in self.stops if player_x <= s.x + STOP_TRAILING_MARGIN]
        removed = len(self.stops) - len(kept)
        self.stops = kept
        return removed

    def any_ahead(self, player_x: float, window: float = STOP_LOOKAHEAD) -> bool:
        return any(
            not stop.collected and player_x < stop.x < player_x + window
            for stop in self.stops
        )
