"""Simulation: deterministic, headless-compatible highway simulation.

All gameplay constants are imported from ``config``.  The simulation has no
pygame dependency and is safe to import in headless / test contexts.
"""
from __future__ import annotations

import logging
import random
from dataclasses import asdict
from typing import Dict, List, Optional

from config import (
    DISTANCE_SCALE,
    EVENT_LOG_SIZE,
    ROAD_MARKER_COUNT,
    ROAD_MARKER_SPACING,
    ROAD_MARKER_W,
    ROAD_MARKER_WRAP,
    SCREEN_W,
    STATE_GAME_OVER,
    STATE_PLAYING,
    STATE_START,
)
from haul.clock import Clock
from haul.entities import FrameInput, RoadMarker, Vehicle, overlaps
from haul.ledger import DeliveryLedger
from haul.resources import ResourcePool
from haul.stops import ServiceStopField
from haul.traffic import TrafficField
from haul.vehicle import VehicleController

log = logging.getLogger(__name__)

GAME_OVER_COLLISION = "collision"


class Simulation:
    """Frame-based simulation of one truck run.

    All state mutations happen inside :meth:`advance_frame` (and
    :meth:`start`, which re-initialises every component).  One shared
    ``random.Random(seed)`` feeds traffic, stops and contracts, so a seed and
    an input sequence reproduce a run exactly.
    """

    def __init__(self, seed: int = 7, stop_catalog: Optional[Dict[str, Dict]] = None) -> None:
        self.rng = random.Random(seed)
        self.state: str = STATE_START
        self.clock = Clock()
        self.stops = ServiceStopField(self.rng, catalog=stop_catalog)
        self.controller = VehicleController(resource_for=self.stops.resource_for)
        self.resources = ResourcePool()
        self.traffic = TrafficField(self.rng)
        self.ledger = DeliveryLedger(self.rng)
        self.road_markers: List[RoadMarker] = []
        self.distance: float = 0.0
        self.service_access: bool = False
        self.game_over_reason: str = ""
        self.event_log: List[str] = []
        self._init_road_markers()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _init_road_markers(self) -> None:
        self.road_markers = [
            RoadMarker(x=i * ROAD_MARKER_SPACING, width=ROAD_MARKER_W)
            for i in range(ROAD_MARKER_COUNT)
        ]

    def start(self) -> bool:
        """Handle the start/restart event; ignored while a run is in progress."""
        if self.state == STATE_PLAYING:
            return False
        self.clock.reset()
        self.controller.reset()
        self.resources.reset()
        self.traffic.reset()
        self.stops.reset()
        self.ledger.reset()
        self.distance = 0.0
        self.service_access = False
        self.game_over_reason = ""
        self.event_log = []
        self.state = STATE_PLAYING
        self._log_event(f"New run: deliver {self.ledger.contract.target} mi")
        return True

    def _log_event(self, message: str) -> None:
        self.event_log.append(message)
        self.event_log = self.event_log[-EVENT_LOG_SIZE:]

    def _game_over(self, reason: str) -> str:
        self.state = STATE_GAME_OVER
        self.game_over_reason = reason
        self._log_event(f"Game over: {reason}")
        log.info(
            "Game over (%s) after %.1f mi, %ds, $%d",
            reason, self.distance, self.clock.play_seconds, self.ledger.money,
        )
        return self.state

    # ------------------------------------------------------------------
    # Convenience accessors
    # ------------------------------------------------------------------

    @property
    def vehicle(self) -> Vehicle:
        return self.controller.vehicle

    @property
    def money(self) -> int:
        return self.ledger.money

    @property
    def frame(self) -> int:
        return self.clock.frame

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _scroll_road_markers(self, speed: float) -> None:
        for marker in self.road_markers:
            marker.x -= speed
            if marker.x < ROAD_MARKER_WRAP:
                marker.x = SCREEN_W

    def _resolve_collisions(self) -> bool:
        """Return True when traffic ended the run; otherwise latch at most one stop."""
        vehicle = self.vehicle
        if any(overlaps(vehicle, obstacle) for obstacle in self.traffic.obstacles):
            self._game_over(GAME_OVER_COLLISION)
            return True

        for stop in self.stops.stops:
            if stop.collected or not overlaps(vehicle, stop):
                continue
            stop.collected = True
            self.controller.enter_pit_stop(stop.kind)
            self._log_event(f"Pulled into {stop.kind} stop")
            break
        return False

    # ------------------------------------------------------------------
    # Main frame
    # ------------------------------------------------------------------

    def advance_frame(self, frame_input: Optional[FrameInput] = None) -> str:
        frame_input = frame_input or FrameInput()
        if frame_input.start and self.state != STATE_PLAYING:
            self.start()
            return self.state
        if self.state != STATE_PLAYING:
            return self.state

        self.clock.tick()
        vehicle = self.vehicle

        # Input, with service-lane access decided before lanes resolve
        self.service_access = self.stops.any_ahead(vehicle.x)
        self.controller.update(frame_input, self.service_access)
        self.controller.ease_position()

        distance_delta = vehicle.speed * DISTANCE_SCALE
        self.distance += distance_delta

        # Resources
        self.resources.deplete(distance_delta)
        exhausted = self.resources.exhausted_kind()
        if exhausted is not None:
            return self._game_over(exhausted)

        # Deliveries
        self.ledger.advance(distance_delta)
        paid = self.ledger.try_settle()
        if paid:
            self._log_event(f"Delivered! +${paid}")

        self._scroll_road_markers(vehicle.speed)

        # Traffic
        self.traffic.advance(vehicle.speed)
        self.traffic.spawn_on_cadence()
        self.traffic.reap()

        # Service stops
        for stop in self.stops.advance(distance_delta, vehicle.speed):
            self._log_event(f"{self.stops.catalog[stop.kind]['display_name']} ahead")
        self.stops.reap(vehicle.x)

        if self._resolve_collisions():
            return self.state

        if self.controller.process_pit_stop(self.resources):
            self._log_event("Back on the road")
        return self.state

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def snapshot(self) -> Dict:
        contract = self.ledger.contract
        return {
            "state": self.state,
            "frame": self.clock.frame,
            "play_time": self.clock.elapsed,
            "distance": self.distance,
            "money": self.ledger.money,
            "deliveries_completed": self.ledger.completed,
            "delivery_target": contract.target,
            "delivery_remaining": contract.remaining,
            "resources": dict(self.resources.levels),
            "vehicle": asdict(self.vehicle),
            "speed_mph": self.controller.display_speed,
            "service_access": self.service_access,
            "obstacles": [asdict(o) for o in self.traffic.obstacles],
            "stops": [asdict(s) for s in self.stops.stops],
            "road_markers": [asdict(m) for m in self.road_markers],
            "game_over_reason": self.game_over_reason,
            "event_log": list(self.event_log),
        }
