"""Turn-based chess clock counting down in whole seconds."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from chessduel.core.enums import Color
from chessduel.game.interfaces import ClockPhase, IClock

_LOGGER = logging.getLogger(__name__)

ExpiredCallback = Callable[[Color], None]


@dataclass(frozen=True, slots=True)
class ClockState:
    """Read-only snapshot of the clock, handed to listeners and the UI."""

    white_remaining: int
    black_remaining: int
    running: Color | None
    phase: ClockPhase
    expired: Color | None
    epoch: int

    def remaining(self, color: Color) -> int:
        return self.white_remaining if color == Color.WHITE else self.black_remaining

    @property
    def is_running(self) -> bool:
        return self.phase == ClockPhase.RUNNING


class Clock(IClock):
    """Dual countdown clock with one running side at a time.

    Time is consumed only through :meth:`tick`, which the owner calls once
    per elapsed second. Every reconfiguration (start, stop, reset, expiry)
    bumps :attr:`epoch`; a tick carrying an older epoch is discarded.
    A side that is started, or left running, with no time expires at once.

    State machine::

        IDLE -> RUNNING(white) <-> RUNNING(black) -> STOPPED

    ``STOPPED`` is left only through :meth:`reset`.
    """

    __slots__ = (
        "_remaining",
        "_running",
        "_phase",
        "_expired",
        "_epoch",
        "_on_expired",
    )

    def __init__(
        self,
        initial_seconds: int,
        on_expired: ExpiredCallback | None = None,
    ) -> None:
        self._remaining: dict[Color, int] = {}
        self._running: Color | None = None
        self._phase = ClockPhase.IDLE
        self._expired: Color | None = None
        self._epoch = 0
        self._on_expired = on_expired
        self.reset(initial_seconds)

    # ── IClock implementation ────────────────────────────────────────────

    def start(self, color: Color) -> None:
        if self._phase == ClockPhase.STOPPED:
            _LOGGER.debug("Ignoring start(%s): clock is stopped", color)
            return
        self._running = color
        self._phase = ClockPhase.RUNNING
        self._epoch += 1
        if self._remaining[color] <= 0:
            self._expire(color)

    def stop(self) -> None:
        if self._phase == ClockPhase.STOPPED:
            return
        self._running = None
        self._phase = ClockPhase.STOPPED
        self._epoch += 1

    def tick(self, epoch: int | None = None) -> bool:
        if epoch is not None and epoch != self._epoch:
            _LOGGER.debug("Dropping stale tick (epoch %d, now %d)", epoch, self._epoch)
            return False
        color = self._running
        if self._phase != ClockPhase.RUNNING or color is None:
            return False
        if self._remaining[color] <= 0:
            self._expire(color)
            return True

        self._remaining[color] -= 1
        if self._remaining[color] == 0:
            self._expire(color)
        return True

    def reset(self, initial_seconds: int) -> None:
        if initial_seconds < 0:
            raise ValueError(f"initial_seconds must be >= 0, got {initial_seconds}")
        self._remaining = {
            Color.WHITE: int(initial_seconds),
            Color.BLACK: int(initial_seconds),
        }
        self._running = None
        self._phase = ClockPhase.IDLE
        self._expired = None
        self._epoch += 1

    def remaining(self, color: Color) -> int:
        return self._remaining[color]

    def snapshot(self) -> ClockState:
        return ClockState(
            white_remaining=self._remaining[Color.WHITE],
            black_remaining=self._remaining[Color.BLACK],
            running=self._running,
            phase=self._phase,
            expired=self._expired,
            epoch=self._epoch,
        )

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def phase(self) -> ClockPhase:
        return self._phase

    @property
    def running(self) -> Color | None:
        return self._running

    @property
    def is_running(self) -> bool:
        return self._phase == ClockPhase.RUNNING

    @property
    def expired(self) -> Color | None:
        """Side whose time ran out, if any."""
        return self._expired

    def set_remaining(self, color: Color, seconds: int) -> None:
        """Manually override remaining time (for testing / UI override)."""
        self._remaining[color] = max(0, int(seconds))
        if self._remaining[color] == 0 and self._running == color:
            self._expire(color)

    # ── Internal ─────────────────────────────────────────────────────────

    def _expire(self, color: Color) -> None:
        self._expired = color
        self._running = None
        self._phase = ClockPhase.STOPPED
        self._epoch += 1
        _LOGGER.info("Flag fell for %s", color)
        if self._on_expired is not None:
            self._on_expired(color)
