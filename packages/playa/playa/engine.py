"""Engine - frame loop and lifecycle hooks."""

from typing import Callable

from playa.clock import FrameClock
from playa.types import FrameContext, System
from playa.world import World


class Engine:
    def __init__(self, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._clock = FrameClock(1.0 / fps)
        self._world = World()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[World, FrameContext], None]] = []
        self._stop_hooks: list[Callable[[World, FrameContext], None]] = []
        self._stop_requested: bool = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> FrameClock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[World, FrameContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[World, FrameContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _frame(self, dt: float | None) -> None:
        self._clock.advance(dt)
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def step(self, dt: float | None = None) -> None:
        """Run a single frame of ``dt`` seconds without lifecycle hooks."""
        self._stop_requested = False
        self._frame(dt)

    def run(self, n: int, dt: float | None = None) -> None:
        """Run ``n`` frames of equal length between start and stop hooks."""
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop)
        for hook in self._start_hooks:
            hook(self._world, ctx)

        for _ in range(n):
            self._frame(dt)
            if self._stop_requested:
                break

        ctx = self._clock.context(self._request_stop)
        for hook in self._stop_hooks:
            hook(self._world, ctx)
