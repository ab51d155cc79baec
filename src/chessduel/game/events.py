"""Session input messages.

UI gestures and timer callbacks are turned into these values and handed
to :meth:`GameSession.handle` one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessduel.game.interfaces import TimeControl


@dataclass(frozen=True, slots=True)
class MoveAttempted:
    source: str
    target: str


@dataclass(frozen=True, slots=True)
class TickElapsed:
    """One second elapsed on the clock configuration identified by *epoch*."""

    epoch: int | None = None


@dataclass(frozen=True, slots=True)
class ResetRequested:
    initial_seconds: int | None = None


@dataclass(frozen=True, slots=True)
class UndoRequested:
    pass


@dataclass(frozen=True, slots=True)
class TimeControlChanged:
    time_control: TimeControl


SessionEvent = (
    MoveAttempted | TickElapsed | ResetRequested | UndoRequested | TimeControlChanged
)
