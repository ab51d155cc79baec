"""Abstract interfaces for the game layer.

Follows Dependency Inversion: :class:`~chessduel.game.session.GameSession`
depends on these ABCs and on :class:`~chessduel.core.rules.IRulesEngine`,
not on concrete implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessduel.core.enums import Color

if TYPE_CHECKING:
    from chessduel.game.clock import ClockState
    from chessduel.game.status import GameStatus


# ── Clock FSM states ─────────────────────────────────────────────────────────


class ClockPhase(IntEnum):
    """Finite-state-machine states for the clock."""

    IDLE = auto()
    RUNNING = auto()
    STOPPED = auto()  # terminal until reset


class MoveOutcome(IntEnum):
    """Result of a move attempt."""

    ACCEPTED = auto()
    ILLEGAL_MOVE = auto()
    GAME_OVER = auto()

    @property
    def is_accepted(self) -> bool:
        return self == MoveOutcome.ACCEPTED


# ── Time control presets ─────────────────────────────────────────────────────


class TimeControl:
    """Immutable time-control definition.

    Args:
        initial_seconds: Starting time per player, in whole seconds.
    """

    __slots__ = ("initial_seconds",)

    def __init__(self, initial_seconds: int) -> None:
        if initial_seconds < 0:
            raise ValueError(f"initial_seconds must be >= 0, got {initial_seconds}")
        self.initial_seconds = int(initial_seconds)

    # Common presets
    @classmethod
    def bullet_1m(cls) -> TimeControl:
        return cls(60)

    @classmethod
    def blitz_5m(cls) -> TimeControl:
        return cls(5 * 60)

    @classmethod
    def rapid_10m(cls) -> TimeControl:
        return cls(10 * 60)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeControl):
            return NotImplemented
        return self.initial_seconds == other.initial_seconds

    def __hash__(self) -> int:
        return hash(self.initial_seconds)

    def __repr__(self) -> str:
        return f"TimeControl({self.initial_seconds}s)"


TIME_CONTROL_OPTIONS: tuple[TimeControl, ...] = (
    TimeControl.rapid_10m(),
    TimeControl.blitz_5m(),
    TimeControl.bullet_1m(),
)


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IClock(ABC):
    """Interface for a turn-based chess clock."""

    @abstractmethod
    def start(self, color: Color) -> None:
        """Run *color*'s clock; the other side stops."""

    @abstractmethod
    def stop(self) -> None:
        """Halt ticking for good (until reset)."""

    @abstractmethod
    def tick(self, epoch: int | None = None) -> bool:
        """Consume one second from the running side."""

    @abstractmethod
    def reset(self, initial_seconds: int) -> None:
        """Put both sides back to *initial_seconds*, idle."""

    @abstractmethod
    def remaining(self, color: Color) -> int:
        """Whole seconds remaining for *color*."""

    @abstractmethod
    def snapshot(self) -> ClockState:
        """Immutable view of the current clock state."""


class IGameSession(ABC):
    """Interface for the session coordinator."""

    @abstractmethod
    def attempt_move(self, source: str, target: str) -> MoveOutcome:
        """Try to play *source* -> *target*."""

    @abstractmethod
    def undo(self) -> bool:
        """Take back the last move. Returns True on success."""

    @abstractmethod
    def reset(self, initial_seconds: int | None = None) -> None:
        """Start over from the initial position."""

    @abstractmethod
    def derive_status(self) -> GameStatus:
        """Recompute the status from the current state."""
