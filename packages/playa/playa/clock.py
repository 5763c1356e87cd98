"""FrameClock for variable-timestep frames."""

from typing import Callable

from playa.types import FrameContext


class FrameClock:
    """Counts frames and accumulates elapsed seconds.

    Frames carry their own ``dt`` (real time since the previous frame);
    ``default_dt`` is used when the caller does not supply one.
    """

    def __init__(self, default_dt: float) -> None:
        if default_dt <= 0:
            raise ValueError("default_dt must be positive")
        self._default_dt = default_dt
        self._frame = 0
        self._elapsed = 0.0
        self._last_dt = 0.0

    @property
    def default_dt(self) -> float:
        return self._default_dt

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def last_dt(self) -> float:
        return self._last_dt

    def advance(self, dt: float | None = None) -> int:
        step = self._default_dt if dt is None else dt
        self._frame += 1
        self._elapsed += step
        self._last_dt = step
        return self._frame

    def context(self, stop_fn: Callable[[], None]) -> FrameContext:
        return FrameContext(
            frame=self._frame,
            dt=self._last_dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
        )

    def reset(self) -> None:
        self._frame = 0
        self._elapsed = 0.0
        self._last_dt = 0.0
