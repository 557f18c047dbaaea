"""Frame counting and accumulator-based scheduling."""
from __future__ import annotations

from config import FPS, MAX_FRAMES_PER_UPDATE


class Cadence:
    """Fires once per ``period`` units of accumulated time.

    Leftover time carries over, so the firing rate stays correct however the
    time is sliced into ``advance`` calls.
    """

    def __init__(self, period: float) -> None:
        self.period = period
        self.accumulated: float = 0.0

    def advance(self, amount: float) -> int:
        self.accumulated += amount
        fired = 0
        while self.accumulated >= self.period:
            self.accumulated -= self.period
            fired += 1
        return fired

    def reset(self) -> None:
        self.accumulated = 0.0


class Clock:
    """Monotonic simulation frame counter.

    The shell feeds wall-clock time to :meth:`accumulate` and runs one
    simulation frame per returned step; the simulation itself calls
    :meth:`tick` once per frame.
    """

    def __init__(self, fps: int = FPS) -> None:
        self.fps = fps
        self.frame: int = 0
        self._stepper = Cadence(1.0 / fps)

    def tick(self) -> int:
        self.frame += 1
        return self.frame

    @property
    def elapsed(self) -> float:
        """Seconds of play time represented by the frames run so far."""
        return self.frame / self.fps

    @property
    def play_seconds(self) -> int:
        return self.frame // self.fps

    def accumulate(self, real_dt: float) -> int:
        steps = self._stepper.advance(real_dt)
        if steps > MAX_FRAMES_PER_UPDATE:
            # drop the backlog instead of spiralling after a long stall
            self._stepper.reset()
            steps = MAX_FRAMES_PER_UPDATE
        return steps

    def reset(self) -> None:
        self.frame = 0
        self._stepper.reset()
