"""Through traffic: vehicles that overtake or get overtaken by the truck."""
from __future__ import annotations

import logging
import random
from typing import List, Tuple

from config import (
    LANE_Y,
    OBSTACLE_KINDS,
    OBSTACLE_SIZES,
    SCREEN_W,
    THROUGH_LANES,
    TRAFFIC_REAP_MARGIN,
    TRAFFIC_SPAWN_FRAMES,
    TRAFFIC_SPAWN_X,
    TRAFFIC_SPEED_MAX,
    TRAFFIC_SPEED_MIN,
    TRUCK,
    TRUCK_OBSTACLE_COLOR,
)
from haul.clock import Cadence
from haul.entities import Obstacle

log = logging.getLogger(__name__)


class TrafficField:
    """Spawns obstacles from behind on a frame cadence and moves them relative to the truck."""

    def __init__(self, rng: random.Random, spawn_frames: int = TRAFFIC_SPAWN_FRAMES) -> None:
        self.rng = rng
        self.spawn_cadence = Cadence(spawn_frames)
        self.obstacles: List[Obstacle] = []

    def reset(self) -> None:
        self.obstacles = []
        self.spawn_cadence.reset()

    def _random_color(self, kind: str) -> Tuple[int, int, int]:
        if kind == TRUCK:
            return TRUCK_OBSTACLE_COLOR
        return (self.rng.randrange(256), self.rng.randrange(256), self.rng.randrange(256))

    def spawn_one(self) -> Obstacle:
        lane = self.rng.choice(THROUGH_LANES)
        kind = self.rng.choice(OBSTACLE_KINDS)
        width, height = OBSTACLE_SIZES[kind]
        obstacle = Obstacle(
            x=TRAFFIC_SPAWN_X,
            y=LANE_Y[lane],
            width=width,
            height=height,
            kind=kind,
            speed=self.rng.uniform(TRAFFIC_SPEED_MIN, TRAFFIC_SPEED_MAX),
            color=self._random_color(kind),
        )
        self.obstacles.append(obstacle)
        log.debug("Spawned %s in lane %d at speed %.2f", kind, lane, obstacle.speed)
        return obstacle

    def spawn_on_cadence(self, frames: int = 1) -> int:
        fired = self.spawn_cadence.advance(frames)
        for _ in range(fired):
            self.spawn_one()
        return fired

    def advance(self, player_speed: float) -> None:
        for obstacle in self.obstacles:
            obstacle.x += obstacle.speed - player_speed

    def reap(self) -> int:
        kept = [
            o for o in self.obstacles
            if -TRAFFIC_REAP_MARGIN <= o.x <= SCREEN_W + TRAFFIC_REAP_MARGIN
        ]
        removed = len(self.obstacles) - len(kept)
        self.obstacles = kept
        return removed
