"""Player truck: throttle, lane state machine and pit-stop replenishment."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from config import (
    ACCELERATION,
    BRAKE_FACTOR,
    COAST_FACTOR,
    DECELERATION,
    LANE_BOTTOM,
    LANE_EASING,
    LANE_SERVICE,
    LANE_TOP,
    LANE_Y,
    MAX_SPEED,
    PIT_STOP_FRAMES,
    PIT_STOP_REPLENISH_RATE,
)
from haul.entities import FrameInput, Vehicle, clamp
from haul.resources import ResourcePool
from service_catalog import DEFAULT_STOPS

log = logging.getLogger(__name__)


def _default_resource_for(kind: str) -> str:
    return DEFAULT_STOPS[kind].resource


class VehicleController:
    """Drives the singleton :class:`Vehicle`.

    Lane intents are edge-triggered: a press arms the intent, processing it
    disarms it, and releasing the key disarms it too.  An armed intent that
    cannot be acted on yet (e.g. up from the top lane before a stop is in
    range) stays armed while the key is held.

    The resource a pit stop refills is looked up from the active stop kind
    through ``resource_for``, so the vehicle state alone describes the stop.
    """

    def __init__(self, max_speed: float = MAX_SPEED, acceleration: float = ACCELERATION,
                 deceleration: float = DECELERATION,
                 resource_for: Optional[Callable[[str], str]] = None) -> None:
        self.max_speed = max_speed
        self.acceleration = acceleration
        self.deceleration = deceleration
        self.resource_for = resource_for or _default_resource_for
        self.vehicle = Vehicle()
        self._up_held = False
        self._down_held = False
        self._up_armed = False
        self._down_armed = False

    def reset(self) -> None:
        self.vehicle = Vehicle()
        self._up_held = self._down_held = False
        self._up_armed = self._down_armed = False

    # ------------------------------------------------------------------
    # Throttle
    # ------------------------------------------------------------------

    def apply_throttle(self, accelerate: bool, brake: bool) -> float:
        v = self.vehicle
        if accelerate:
            v.speed = min(v.speed + self.acceleration, self.max_speed)
        elif brake:
            v.speed = max(v.speed - self.deceleration * BRAKE_FACTOR, 0.0)
        else:
            v.speed = max(v.speed - self.deceleration * COAST_FACTOR, 0.0)
        return v.speed

    # ------------------------------------------------------------------
    # Lanes
    # ------------------------------------------------------------------

    def _arm(self, lane_up: bool, lane_down: bool) -> None:
        if lane_up and not self._up_held:
            self._up_armed = True
        if lane_down and not self._down_held:
            self._down_armed = True
        if not lane_up:
            self._up_armed = False
        if not lane_down:
            self._down_armed = False
        self._up_held = lane_up
        self._down_held = lane_down

    def apply_lanes(self, lane_up: bool, lane_down: bool, service_access: bool) -> int:
        self._arm(lane_up, lane_down)
        v = self.vehicle

        if v.lane != LANE_SERVICE:
            if self._up_armed and not v.in_pit_stop:
                if v.lane > LANE_TOP:
                    v.lane -= 1
                    self._up_armed = False
                elif service_access:
                    v.lane = LANE_SERVICE
                    self._up_armed = False
            if self._down_armed and not v.in_pit_stop and v.lane < LANE_BOTTOM:
                v.lane += 1
                self._down_armed = False
        else:
            if self._down_armed and not v.in_pit_stop:
                v.lane = LANE_TOP
                self._down_armed = False
            # no lane above the service lane
            self._up_armed = False
            if not service_access and not v.in_pit_stop:
                v.lane = LANE_TOP

        v.lane = int(clamp(v.lane, LANE_TOP, LANE_SERVICE))
        v.target_y = LANE_Y[v.lane]
        return v.lane

    def update(self, frame_input: FrameInput, service_access: bool) -> None:
        self.apply_throttle(frame_input.accelerate, frame_input.brake)
        self.apply_lanes(frame_input.lane_up, frame_input.lane_down, service_access)

    def ease_position(self) -> float:
        v = self.vehicle
        v.y += (v.target_y - v.y) * LANE_EASING
        return v.y

    # ------------------------------------------------------------------
    # Pit stop
    # ------------------------------------------------------------------

    def enter_pit_stop(self, kind: str) -> None:
        v = self.vehicle
        v.in_pit_stop = True
        v.pit_stop_timer = 0
        v.active_stop_kind = kind
        log.debug("Pit stop started: %s", kind)

    def _leave_pit_stop(self) -> None:
        v = self.vehicle
        v.in_pit_stop = False
        v.pit_stop_timer = 0
        v.active_stop_kind = None

    def process_pit_stop(self, pool: ResourcePool) -> bool:
        """Advance an active pit stop by one frame; return True on the frame it ends."""
        v = self.vehicle
        if not v.in_pit_stop:
            return False
        resource = self.resource_for(v.active_stop_kind)
        v.pit_stop_timer += 1
        pool.replenish(resource, PIT_STOP_REPLENISH_RATE)
        if v.pit_stop_timer >= PIT_STOP_FRAMES or pool.is_full(resource):
            log.debug("Pit stop finished after %d frames", v.pit_stop_timer)
            self._leave_pit_stop()
            return True
        return False

    @property
    def display_speed(self) -> int:
        return int(self.vehicle.speed / self.max_speed * 100)
