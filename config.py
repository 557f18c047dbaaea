"""Centralised configuration constants for Long Haul."""
from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# Screen / frame rate
# ---------------------------------------------------------------------------
SCREEN_W: int = 800
SCREEN_H: int = 600
FPS: int = 60
MAX_FRAMES_PER_UPDATE: int = 5        # fixed-step catch-up cap per rendered frame

# ---------------------------------------------------------------------------
# File paths
# ---------------------------------------------------------------------------
SERVICE_STOPS_FILE: Path = Path("data/service_stops.json")

# ---------------------------------------------------------------------------
# Top-level game states
# ---------------------------------------------------------------------------
STATE_START: str = "start"
STATE_PLAYING: str = "playing"
STATE_GAME_OVER: str = "game_over"

# ---------------------------------------------------------------------------
# Lanes (index → vertical centre)
# ---------------------------------------------------------------------------
LANE_TOP: int = 0
LANE_MIDDLE: int = 1
LANE_BOTTOM: int = 2
LANE_SERVICE: int = 3

LANE_Y: dict[int, float] = {
    LANE_TOP: SCREEN_H / 2 - 100,
    LANE_MIDDLE: SCREEN_H / 2,
    LANE_BOTTOM: SCREEN_H / 2 + 100,
    LANE_SERVICE: 120.0,
}
THROUGH_LANES: list[int] = [LANE_TOP, LANE_MIDDLE, LANE_BOTTOM]
LANE_EASING: float = 0.15              # fraction of remaining distance closed per frame

# ---------------------------------------------------------------------------
# Truck physics (per frame at the reference tick rate)
# ---------------------------------------------------------------------------
TRUCK_X: float = SCREEN_W / 2
TRUCK_W: int = 80
TRUCK_H: int = 60
MAX_SPEED: float = 10.0                # shown as 100 mph
ACCELERATION: float = 0.2
DECELERATION: float = 0.15             # brake applies 2x, coasting 0.5x
BRAKE_FACTOR: float = 2.0
COAST_FACTOR: float = 0.5
DISTANCE_SCALE: float = 0.02           # miles per speed unit per frame

# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------
FUEL: str = "fuel"
HUNGER: str = "hunger"
SLEEP: str = "sleep"
RESOURCE_KINDS: list[str] = [FUEL, HUNGER, SLEEP]
RESOURCE_MAX: float = 100.0

# Miles needed to drain each resource from full to empty
RESOURCE_DEPLETION_DISTANCE: dict[str, float] = {
    FUEL: 1000.0,
    HUNGER: 1500.0,
    SLEEP: 1250.0,
}

# ---------------------------------------------------------------------------
# Service stops
# ---------------------------------------------------------------------------
STOP_FUEL: str = "fuel"
STOP_FOOD: str = "food"
STOP_REST: str = "rest"

STOP_W: int = 80
STOP_H: int = 60
STOP_SPAWN_X: float = SCREEN_W + 100
STOP_LOOKAHEAD: float = 300.0          # service lane opens when a stop is this close ahead
STOP_TRAILING_MARGIN: float = 200.0    # stops further behind the truck than this expire

PIT_STOP_FRAMES: int = 300             # longest pit stop (5 seconds)
PIT_STOP_REPLENISH_RATE: float = RESOURCE_MAX / PIT_STOP_FRAMES

# ---------------------------------------------------------------------------
# Traffic
# ---------------------------------------------------------------------------
CAR: str = "car"
TRUCK: str = "truck"
OBSTACLE_KINDS: list[str] = [CAR, TRUCK]
OBSTACLE_SIZES: dict[str, tuple[int, int]] = {
    CAR: (60, 50),
    TRUCK: (90, 60),
}
TRUCK_OBSTACLE_COLOR: tuple[int, int, int] = (74, 74, 74)
TRAFFIC_SPAWN_FRAMES: int = 80
TRAFFIC_SPAWN_X: float = -100.0
TRAFFIC_SPEED_MIN: float = 3.0
TRAFFIC_SPEED_MAX: float = 11.0        # exclusive; spans both slower and faster than MAX_SPEED
TRAFFIC_REAP_MARGIN: float = 200.0

# ---------------------------------------------------------------------------
# Road markers
# ---------------------------------------------------------------------------
ROAD_MARKER_COUNT: int = 20
ROAD_MARKER_SPACING: float = 60.0
ROAD_MARKER_W: float = 40.0
ROAD_MARKER_WRAP: float = -60.0

# ---------------------------------------------------------------------------
# Delivery contracts: (cumulative probability, low, high) with high exclusive
# ---------------------------------------------------------------------------
DELIVERY_TIERS: list[tuple[float, int, int]] = [
    (0.6, 100, 800),
    (0.9, 800, 1500),
    (1.0, 1500, 2800),
]

# ---------------------------------------------------------------------------
# HUD
# ---------------------------------------------------------------------------
EVENT_LOG_SIZE: int = 12
LOW_RESOURCE_WARNING: float = 30.0
