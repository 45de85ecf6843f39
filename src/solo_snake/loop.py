"""Asyncio frame driver that keeps calling the engine until stopped."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from solo_snake.engine import GameEngine

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class FrameDriver:
    """Re-arms a frame callback at a fixed cadence.

    Each frame calls :meth:`GameEngine.frame` with the current clock and
    then *on_frame* with whether a tick fired. Stopping the driver, or
    cancelling the task running :meth:`run`, is the only cancellation path;
    a frame in progress always completes.
    """

    def __init__(
        self,
        engine: GameEngine,
        frame_period: float,
        on_frame: Callable[[bool], object] | None = None,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        if frame_period <= 0:
            raise ValueError("frame_period must be positive.")
        self.engine = engine
        self.frame_period = frame_period
        self.on_frame = on_frame
        self.clock = clock
        self.frames = 0
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        self._stopped = True

    async def run(self, max_frames: int | None = None) -> int:
        """Drive frames until stopped; returns the number of frames run."""
        try:
            while not self._stopped:
                if max_frames is not None and self.frames >= max_frames:
                    break
                await asyncio.sleep(self.frame_period)
                if self._stopped:
                    break
                fired = self.engine.frame(self.clock())
                self.frames += 1
                if self.on_frame is not None:
                    result = self.on_frame(fired)
                    if asyncio.iscoroutine(result):
                        await result
        except asyncio.CancelledError:
            logger.debug("Frame driver cancelled after %d frames.", self.frames)
            raise
        finally:
            self._stopped = True
        return self.frames
