"""Core dataclasses for the Long Haul simulation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from config import (
    LANE_MIDDLE,
    LANE_Y,
    SCREEN_H,
    STOP_H,
    STOP_W,
    TRUCK_H,
    TRUCK_W,
    TRUCK_X,
)


@dataclass
class FrameInput:
    """Directional intents held during one frame, plus the start/restart event.

    When ``accelerate`` and ``brake`` are both held, accelerate wins.
    """

    accelerate: bool = False
    brake: bool = False
    lane_up: bool = False
    lane_down: bool = False
    start: bool = False


@dataclass
class Vehicle:
    """The player's truck.  ``x``/``y`` are the centre of its bounding box."""

    x: float = TRUCK_X
    y: float = SCREEN_H / 2
    width: int = TRUCK_W
    height: int = TRUCK_H
    speed: float = 0.0
    lane: int = LANE_MIDDLE
    target_y: float = LANE_Y[LANE_MIDDLE]
    in_pit_stop: bool = False
    pit_stop_timer: int = 0
    active_stop_kind: Optional[str] = None


@dataclass
class Obstacle:
    """A car or truck sharing the road, moving at its own speed."""

    x: float
    y: float
    width: int
    height: int
    kind: str
    speed: float
    color: Tuple[int, int, int]


@dataclass
class ServiceStop:
    """A roadside stop in the service lane.

    ``collected`` latches the first time the truck touches the stop, so one
    stop can start at most one pit stop.
    """

    x: float
    y: float
    kind: str
    width: int = STOP_W
    height: int = STOP_H
    collected: bool = False


@dataclass
class DeliveryContract:
    target: int
    remaining: float


@dataclass
class SpawnCadence:
    """Miles driven since the last stop of one kind, and the miles until the next."""

    accumulated: float
    threshold: float


@dataclass
class RoadMarker:
    x: float
    width: float


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def overlaps(a, b) -> bool:
    """Axis-aligned overlap of two centre-positioned boxes; touching edges do not count."""
    return (
        a.x - a.width / 2 < b.x + b.width / 2
        and a.x + a.width / 2 > b.x - b.width / 2
        and a.y - a.height / 2 < b.y + b.height / 2
        and a.y + a.height / 2 > b.y - b.height / 2
    )
