"""
Animation scheduler for the network visualization.

A single-threaded cooperative loop: every tick runs one frame and asks the
host for the next tick. Stopping is a flag flip checked before any further
tick is requested, so a torn-down host never receives another frame.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from .interaction import InteractionState

logger = logging.getLogger(__name__)


class TickSource(Protocol):
    """Host primitive that calls back once per display refresh."""

    def request(self, callback: Callable[[], None]) -> None:
        """Invoke `callback` once on the next refresh."""
        ...

    def cancel(self) -> None:
        """Drop any pending callback."""
        ...


class AnimationScheduler:
    """
    Drive a frame function at the host's refresh rate.

    The scheduler owns the `InteractionState` handed to every frame; pointer
    handlers mutate it between ticks.

    Attributes:
        interaction: Pointer state passed to each frame
        frames: Frames run since construction
        failed_frames: Frames that raised and were skipped
    """

    def __init__(
        self,
        tick_source: TickSource,
        frame_fn: Callable[[InteractionState], None],
        interaction: InteractionState | None = None,
    ):
        self.tick_source = tick_source
        self.frame_fn = frame_fn
        self.interaction = interaction or InteractionState()
        self.frames = 0
        self.failed_frames = 0
        self._running = False
        self._paused = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_paused(self) -> bool:
        return self._paused

    def start(self) -> None:
        """Start ticking; no-op when already running."""
        if self._running:
            return
        self._running = True
        logger.debug("Scheduler started")
        self.tick_source.request(self._tick)

    def stop(self) -> None:
        """Stop issuing ticks. Safe to call repeatedly and before `start`."""
        if not self._running:
            return
        self._running = False
        self.tick_source.cancel()
        logger.debug("Scheduler stopped after %d frames", self.frames)

    def pause(self) -> None:
        """Keep ticking but skip frames (e.g. while the view is hidden)."""
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def toggle_pause(self) -> bool:
        """Flip the paused flag and return the new value."""
        self._paused = not self._paused
        return self._paused

    def _tick(self) -> None:
        if not self._running:
            return
        if not self._paused:
            try:
                self.frame_fn(self.interaction)
                self.frames += 1
            except Exception as e:
                self.failed_frames += 1
                logger.warning("Skipping frame after error: %s", e)
                logger.debug("Frame failure traceback", exc_info=True)
        if self._running:
            self.tick_source.request(self._tick)
