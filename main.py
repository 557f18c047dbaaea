from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Dict, Optional, Tuple

try:
    import pygame  # type: ignore
except Exception:
    pygame = None

from config import (
    FPS,
    FUEL,
    HUNGER,
    LANE_SERVICE,
    LANE_TOP,
    LANE_Y,
    LOW_RESOURCE_WARNING,
    RESOURCE_KINDS,
    SCREEN_H,
    SCREEN_W,
    SLEEP,
    STATE_GAME_OVER,
    STATE_PLAYING,
    STATE_START,
    STOP_FOOD,
    STOP_FUEL,
    STOP_REST,
)
from haul import FrameInput, Simulation
from haul.simulation import GAME_OVER_COLLISION

log = logging.getLogger("haul.main")

LOW_RESOURCE_AUTOPILOT: float = 60.0


class Autopilot:
    """Minimal driver for headless runs: floor it and take stops when something runs low."""

    def __init__(self) -> None:
        self._pressed_up = False

    def next_input(self, sim: Simulation) -> FrameInput:
        vehicle = sim.vehicle
        wants_stop = any(level < LOW_RESOURCE_AUTOPILOT for level in sim.resources.levels.values())
        lane_up = (
            wants_stop
            and vehicle.lane != LANE_SERVICE
            and not self._pressed_up
        )
        self._pressed_up = lane_up
        return FrameInput(accelerate=True, lane_up=lane_up)


def format_clock(seconds: float) -> str:
    whole = int(seconds)
    return f"{whole // 60}:{whole % 60:02d}"


def run_headless(frames: int, seed: int) -> Simulation:
    sim = Simulation(seed=seed)
    sim.start()
    pilot = Autopilot()
    for _ in range(frames):
        if sim.advance_frame(pilot.next_input(sim)) != STATE_PLAYING:
            break

    snap = sim.snapshot()
    levels = snap["resources"]
    print(
        f"headless_done state={snap['state']} frames={snap['frame']} t={format_clock(snap['play_time'])} "
        f"miles={snap['distance']:.1f} cash=${snap['money']} deliveries={snap['deliveries_completed']} "
        f"res[fuel={levels['fuel']:.1f},hunger={levels['hunger']:.1f},sleep={levels['sleep']:.1f}]"
        + (f" reason={snap['game_over_reason']}" if snap["game_over_reason"] else "")
    )
    return sim


class GameUI:
    def __init__(self, sim: Simulation):
        if pygame is None:
            raise RuntimeError("pygame is required for graphical mode. Relaunch with --headless.")
        pygame.init()
        if not pygame.display.get_init():
            raise RuntimeError("Display subsystem is unavailable. Relaunch with --headless.")
        self.sim = sim
        try:
            self.screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        except pygame.error as exc:
            raise RuntimeError(f"Could not open a window ({exc}). Relaunch with --headless.") from exc
        pygame.display.set_caption("Long Haul")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("couriernew", 22, bold=True)
        self.small = pygame.font.SysFont("couriernew", 16)
        self.big = pygame.font.SysFont("couriernew", 48, bold=True)
        self.running = True
        self.start_requested = False

        self.palette = {
            "bg": (42, 42, 42),
            "road": (58, 58, 58),
            "shoulder": (26, 26, 26),
            "marker": (255, 255, 0),
            "truck": (121, 14, 203),
            "text": (255, 255, 255),
            "muted": (204, 204, 204),
            "bar_bg": (68, 68, 68),
            "warning": (255, 0, 0),
        }
        self.stop_colors: Dict[str, Tuple[int, int, int]] = {
            STOP_FUEL: (0, 255, 0),
            STOP_FOOD: (255, 153, 0),
            STOP_REST: (0, 153, 255),
        }
        self.resource_colors: Dict[str, Tuple[int, int, int]] = {
            FUEL: (0, 255, 0),
            HUNGER: (255, 153, 0),
            SLEEP: (0, 153, 255),
        }

    def _request_start(self) -> None:
        # presses made mid-run are ignored, not queued for after a crash
        if self.sim.state != STATE_PLAYING:
            self.start_requested = True

    def handle_input(self) -> FrameInput:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False
            elif ev.type == pygame.KEYDOWN and ev.key == pygame.K_SPACE:
                self._request_start()
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                self._request_start()

        keys = pygame.key.get_pressed()
        frame_input = FrameInput(
            accelerate=bool(keys[pygame.K_RIGHT]),
            brake=bool(keys[pygame.K_LEFT]),
            lane_up=bool(keys[pygame.K_UP]),
            lane_down=bool(keys[pygame.K_DOWN]),
            start=self.start_requested,
        )
        return frame_input

    def _rect(self, entity: Dict) -> "pygame.Rect":
        rect = pygame.Rect(0, 0, entity["width"], entity["height"])
        rect.center = (int(entity["x"]), int(entity["y"]))
        return rect

    def _text(self, font, text: str, color: Tuple[int, int, int], pos: Tuple[int, int], anchor: str = "topleft") -> None:
        surface = font.render(text, True, color)
        rect = surface.get_rect(**{anchor: pos})
        self.screen.blit(surface, rect)

    def _draw_bar(self, x: int, y: int, label: str, value: float, hue: Tuple[int, int, int]) -> None:
        self._text(self.small, label.capitalize(), self.palette["text"], (x, y))
        bar_bg = pygame.Rect(x, y + 18, 150, 16)
        pygame.draw.rect(self.screen, self.palette["bar_bg"], bar_bg)
        fill_color = hue if value > LOW_RESOURCE_WARNING else self.palette["warning"]
        pygame.draw.rect(self.screen, fill_color, (bar_bg.x, bar_bg.y, int(bar_bg.w * value / 100.0), bar_bg.h))

    def draw_world(self, snap: Dict) -> None:
        mid = SCREEN_H // 2
        pygame.draw.rect(self.screen, self.palette["shoulder"], (0, 0, SCREEN_W, mid - 150))
        pygame.draw.rect(self.screen, self.palette["road"], (0, mid - 150, SCREEN_W, 300))
        for marker in snap["road_markers"]:
            pygame.draw.rect(self.screen, self.palette["marker"], (int(marker["x"]), mid - 50, int(marker["width"]), 4))
            pygame.draw.rect(self.screen, self.palette["marker"], (int(marker["x"]), mid + 46, int(marker["width"]), 4))

        vehicle = snap["vehicle"]
        if snap["service_access"] and vehicle["lane"] == LANE_TOP and (snap["frame"] // 15) % 2 == 0:
            self._text(self.font, "^ PIT STOP", self.palette["truck"], (SCREEN_W // 2, int(LANE_Y[LANE_SERVICE]) + 60), "center")

        for stop in snap["stops"]:
            if not stop["collected"]:
                pygame.draw.rect(self.screen, self.stop_colors.get(stop["kind"], (255, 255, 255)), self._rect(stop))
                self._text(self.small, stop["kind"].upper(), (0, 0, 0), (int(stop["x"]), int(stop["y"])), "center")
        for obstacle in snap["obstacles"]:
            pygame.draw.rect(self.screen, obstacle["color"], self._rect(obstacle))
        pygame.draw.rect(self.screen, self.palette["truck"], self._rect(vehicle), border_radius=6)

    def draw_hud(self, snap: Dict) -> None:
        y = 12
        for kind in RESOURCE_KINDS:
            self._draw_bar(20, y, kind, snap["resources"][kind], self.resource_colors[kind])
            y += 40
        self._text(self.small, f"Speed: {snap['speed_mph']} mph", self.palette["text"], (20, y))
        if snap["vehicle"]["in_pit_stop"]:
            self._text(self.small, f"Refilling {snap['vehicle']['active_stop_kind']}...", self.palette["muted"], (20, y + 20))

        right = SCREEN_W - 20
        self._text(self.small, f"Time: {format_clock(snap['play_time'])}", self.palette["text"], (right, 12), "topright")
        self._text(self.font, f"${snap['money']}", self.palette["truck"], (right, 34), "topright")
        remaining = max(0, math.ceil(snap["delivery_remaining"]))
        self._text(self.small, f"Delivery: {remaining} mi", (0, 255, 0), (right, 62), "topright")
        if snap["event_log"]:
            self._text(self.small, snap["event_log"][-1], self.palette["muted"], (right, SCREEN_H - 28), "topright")

    def draw_start(self) -> None:
        cx, cy = SCREEN_W // 2, SCREEN_H // 2
        self._text(self.big, "LONG HAUL", self.palette["truck"], (cx, cy - 80), "center")
        self._text(self.font, "Press SPACE or Click to Start!", self.palette["text"], (cx, cy), "center")
        self._text(self.small, "Right/Left: Accelerate/Brake | Up/Down: Change Lanes", self.palette["muted"], (cx, cy + 60), "center")
        self._text(self.small, "Pull into pit stops at the top to refuel, eat and rest!", self.palette["muted"], (cx, cy + 90), "center")

    def draw_game_over(self, snap: Dict) -> None:
        overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 178))
        self.screen.blit(overlay, (0, 0))
        cx, cy = SCREEN_W // 2, SCREEN_H // 2
        self._text(self.big, "GAME OVER", (255, 0, 0), (cx, cy - 90), "center")
        reason = snap["game_over_reason"]
        headline = "Crashed!" if reason == GAME_OVER_COLLISION else f"Out of {reason}"
        self._text(self.font, headline, self.palette["text"], (cx, cy - 45), "center")
        self._text(self.font, f"Time: {format_clock(snap['play_time'])}", self.palette["text"], (cx, cy - 10), "center")
        self._text(self.font, f"Money: ${snap['money']}", self.palette["text"], (cx, cy + 20), "center")
        self._text(self.font, f"Miles: {int(snap['distance'])}", self.palette["text"], (cx, cy + 50), "center")
        self._text(self.font, "Press SPACE or Click to Restart", self.palette["truck"], (cx, cy + 90), "center")

    def draw(self) -> None:
        snap = self.sim.snapshot()
        self.screen.fill(self.palette["bg"])
        if snap["state"] == STATE_START:
            self.draw_start()
        else:
            self.draw_world(snap)
            self.draw_hud(snap)
            if snap["state"] == STATE_GAME_OVER:
                self.draw_game_over(snap)
        pygame.display.flip()

    def run(self) -> None:
        while self.running:
            real_dt = self.clock.tick(FPS) / 1000.0
            frame_input = self.handle_input()
            steps = self.sim.clock.accumulate(real_dt)
            for _ in range(steps):
                self.sim.advance_frame(frame_input)
                frame_input.start = False
            # the first step after a press consumes it
            if steps:
                self.start_requested = False
            self.draw()
        pygame.quit()


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Long Haul trucking arcade")
    parser.add_argument("--headless", action="store_true", help="run simulation without graphics")
    parser.add_argument("--frames", type=int, default=3600, help="headless frames to run")
    parser.add_argument("--seed", type=int, default=7, help="random seed for traffic, stops and contracts")
    parser.add_argument("--log-level", default="WARNING", help="logging threshold (DEBUG, INFO, ...)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.headless:
        run_headless(args.frames, args.seed)
        return

    try:
        ui = GameUI(Simulation(seed=args.seed))
    except RuntimeError as exc:
        log.error("Startup failed: %s", exc)
        print(f"Startup error: {exc}", file=sys.stderr)
        sys.exit(1)
    ui.run()


if __name__ == "__main__":
    main()
