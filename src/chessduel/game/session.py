"""GameSession: the central coordinator of a timed two-player game.

Coordinates: RulesEngine, Clock, derived status and move lists.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from chessduel.core.enums import Color
from chessduel.core.rules import ChessRulesEngine, IRulesEngine, Position
from chessduel.game.clock import Clock, ClockState
from chessduel.game.events import (
    MoveAttempted,
    ResetRequested,
    SessionEvent,
    TickElapsed,
    TimeControlChanged,
    UndoRequested,
)
from chessduel.game.interfaces import IGameSession, MoveOutcome, TimeControl
from chessduel.game.status import GameStatus, derive_status, split_moves

_LOGGER = logging.getLogger(__name__)

# ── Callbacks ────────────────────────────────────────────────────────────────

PositionCallback = Callable[[Position], None]
StatusCallback = Callable[[GameStatus], None]
ClockCallback = Callable[[ClockState], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_position_changed: list[PositionCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_clock_changed: list[ClockCallback] = field(default_factory=list)
    on_game_over: list[StatusCallback] = field(default_factory=list)

    def clear(self) -> None:
        self.on_position_changed.clear()
        self.on_status_changed.clear()
        self.on_clock_changed.clear()
        self.on_game_over.clear()


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """Owns the canonical game: position, history, status and clock.

    Thread-safety: every method must be called from the single thread that
    processes UI and timer events. Nothing outside the session mutates its
    state.
    """

    __slots__ = (
        "_rules",
        "_clock",
        "_time_control",
        "_history",
        "_status",
        "_closed",
        "_defer_flag",
        "events",
    )

    def __init__(
        self,
        time_control: TimeControl | None = None,
        rules: IRulesEngine | None = None,
    ) -> None:
        self._rules = rules if rules is not None else ChessRulesEngine()
        self._time_control = time_control or TimeControl.rapid_10m()
        self._clock = Clock(self._time_control.initial_seconds, self._on_flag_fall)
        self._history: list[str] = []
        self._status = GameStatus.to_move(Color.WHITE)
        self._closed = False
        self._defer_flag = False
        self.events = SessionEvents()
        self.reset()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._rules.position

    @property
    def side_to_move(self) -> Color:
        return self._rules.side_to_move

    @property
    def history(self) -> list[str]:
        return list(self._history)

    @property
    def white_moves(self) -> list[str]:
        return split_moves(self._history)[0]

    @property
    def black_moves(self) -> list[str]:
        return split_moves(self._history)[1]

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def clock_state(self) -> ClockState:
        return self._clock.snapshot()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def time_control(self) -> TimeControl:
        return self._time_control

    @property
    def pgn(self) -> str:
        return self._rules.pgn()

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def is_closed(self) -> bool:
        return self._closed

    # ── IGameSession impl ────────────────────────────────────────────────

    def attempt_move(self, source: str, target: str) -> MoveOutcome:
        if self._closed or self._status.is_terminal:
            return MoveOutcome.GAME_OVER

        new_position = self._rules.apply_move(source, target, promotion="q")
        if new_position is None:
            _LOGGER.debug("Illegal move %s-%s", source, target)
            return MoveOutcome.ILLEGAL_MOVE

        self._refresh()
        if self._status.is_terminal:
            self._clock.stop()
        else:
            self._start_clock(self._rules.side_to_move)

        _LOGGER.debug("Accepted %s (%s)", self._history[-1], self._status.kind.name)
        self._emit_position()
        self._emit_clock()
        self._emit_status()
        if self._status.is_terminal:
            self._emit_game_over()
        return MoveOutcome.ACCEPTED

    def can_drag(self, source: str, piece: str) -> bool:
        """Whether the board may pick up *piece* (e.g. ``"wP"``) from *source*."""
        if self._closed or self._status.is_terminal:
            return False
        return piece.startswith(self._rules.side_to_move.prefix)

    def undo(self) -> bool:
        if self._closed or self._status.is_terminal or not self._history:
            return False
        if self._rules.undo_last() is None:
            return False

        self._refresh()
        # Keep the clock on the side that is to move again.
        if self._clock.running != self._rules.side_to_move:
            self._start_clock(self._rules.side_to_move)

        self._emit_position()
        self._emit_clock()
        self._emit_status()
        if self._status.is_terminal:
            self._emit_game_over()
        return True

    def reset(self, initial_seconds: int | None = None) -> None:
        if self._closed:
            return
        if initial_seconds is None:
            initial_seconds = self._time_control.initial_seconds

        self._rules.reset()
        self._clock.reset(initial_seconds)
        self._refresh()
        self._start_clock(Color.WHITE)
        _LOGGER.info("New game, %d s per side", initial_seconds)

        self._emit_position()
        self._emit_clock()
        self._emit_status()
        if self._status.is_terminal:
            self._emit_game_over()

    def select_time_control(self, time_control: TimeControl) -> None:
        """Switch time control; always starts a fresh game."""
        if self._closed:
            return
        self._time_control = time_control
        self.reset(time_control.initial_seconds)

    def tick(self, epoch: int | None = None) -> bool:
        """Consume one second of the running side's time."""
        if self._closed:
            return False
        ticked = self._clock.tick(epoch)
        if ticked:
            self._emit_clock()
        return ticked

    def derive_status(self) -> GameStatus:
        return derive_status(self._rules, self._clock.snapshot())

    def destroy(self) -> None:
        """End the session: stop the clock and drop all listeners."""
        if self._closed:
            return
        self._clock.stop()
        self._closed = True
        self.events.clear()

    # ── Event dispatch ───────────────────────────────────────────────────

    def handle(self, event: SessionEvent) -> object:
        """Apply a single event and return the operation's result."""
        if isinstance(event, MoveAttempted):
            return self.attempt_move(event.source, event.target)
        if isinstance(event, TickElapsed):
            return self.tick(event.epoch)
        if isinstance(event, UndoRequested):
            return self.undo()
        if isinstance(event, ResetRequested):
            return self.reset(event.initial_seconds)
        if isinstance(event, TimeControlChanged):
            return self.select_time_control(event.time_control)
        raise TypeError(f"Unsupported session event: {event!r}")

    def process(self, events: Iterable[SessionEvent]) -> list[object]:
        """Apply a batch of events that arrived in one scheduling turn.

        User commands are applied first, in submission order, then ticks.
        A move committed in the same turn as a clock's last second therefore
        decides the game before the flag can fall.
        """
        batch = list(events)
        commands = [e for e in batch if not isinstance(e, TickElapsed)]
        ticks = [e for e in batch if isinstance(e, TickElapsed)]
        return [self.handle(e) for e in commands + ticks]

    # ── Internal helpers ─────────────────────────────────────────────────

    def _refresh(self) -> None:
        """Recompute history and status from the rules engine and clock."""
        self._history = self._rules.history_as_notation()
        self._status = self.derive_status()

    def _start_clock(self, color: Color) -> None:
        """Start *color*'s clock; callers report an immediate flag fall."""
        self._defer_flag = True
        try:
            self._clock.start(color)
        finally:
            self._defer_flag = False

    def _on_flag_fall(self, color: Color) -> None:
        self._status = self.derive_status()
        _LOGGER.info("Time expired for %s: %s", color, self._status.kind.name)
        if self._defer_flag:
            return
        self._emit_status()
        if self._status.is_terminal:
            self._emit_game_over()

    def _emit_position(self) -> None:
        position = self._rules.position
        for cb in self.events.on_position_changed:
            cb(position)

    def _emit_status(self) -> None:
        for cb in self.events.on_status_changed:
            cb(self._status)

    def _emit_clock(self) -> None:
        state = self._clock.snapshot()
        for cb in self.events.on_clock_changed:
            cb(state)

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self._status)
