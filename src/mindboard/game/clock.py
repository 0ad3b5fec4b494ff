"""Countdown clock for a timed drill."""

from __future__ import annotations

import time

from mindboard.game.interfaces import IClock


class DrillClock(IClock):
    """Single countdown clock; pausing keeps the remaining time.

    Uses monotonic time for accuracy.
    """

    __slots__ = ("_limit", "_remaining", "_last_tick", "_running")

    def __init__(self, limit_seconds: float) -> None:
        self._limit = limit_seconds
        self._remaining: float = limit_seconds
        self._last_tick: float = 0.0
        self._running: bool = False

    # ── IClock implementation ────────────────────────────────────────────

    def start(self) -> None:
        if self._running:
            return
        self._last_tick = time.monotonic()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._consume_elapsed()
            self._running = False

    def remaining(self) -> float:
        if self._running:
            elapsed = time.monotonic() - self._last_tick
            return max(0.0, self._remaining - elapsed)
        return max(0.0, self._remaining)

    def is_flag_fallen(self) -> bool:
        return self.remaining() <= 0.0

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def is_unlimited(self) -> bool:
        return self._limit == float("inf")

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def limit(self) -> float:
        return self._limit

    def set_remaining(self, seconds: float) -> None:
        """Manually override remaining time (for testing / UI override)."""
        self._remaining = seconds
        self._last_tick = time.monotonic()

    def reset(self) -> None:
        """Stop and refill to the full limit."""
        self._running = False
        self._remaining = self._limit

    # ── Internal ─────────────────────────────────────────────────────────

    def _consume_elapsed(self) -> None:
        now = time.monotonic()
        elapsed = now - self._last_tick
        self._remaining = max(0.0, self._remaining - elapsed)
        self._last_tick = now
