"""Game management layer: session coordinator, clock, status derivation.

Quick start::

    from chessduel.game import GameSession, TimeControl

    session = GameSession(TimeControl.blitz_5m())
    session.attempt_move("e2", "e4")
    session.tick(session.clock_state.epoch)
"""

from chessduel.game.clock import Clock, ClockState
from chessduel.game.events import (
    MoveAttempted,
    ResetRequested,
    SessionEvent,
    TickElapsed,
    TimeControlChanged,
    UndoRequested,
)
from chessduel.game.interfaces import (
    TIME_CONTROL_OPTIONS,
    ClockPhase,
    IClock,
    IGameSession,
    MoveOutcome,
    TimeControl,
)
from chessduel.game.session import GameSession, SessionEvents
from chessduel.game.status import (
    GameStatus,
    StatusKind,
    derive_status,
    format_time,
    split_moves,
)

__all__ = [
    # Interfaces
    "ClockPhase",
    "IClock",
    "IGameSession",
    "MoveOutcome",
    "TIME_CONTROL_OPTIONS",
    "TimeControl",
    # Events
    "MoveAttempted",
    "ResetRequested",
    "SessionEvent",
    "TickElapsed",
    "TimeControlChanged",
    "UndoRequested",
    # Concrete
    "Clock",
    "ClockState",
    "GameSession",
    "GameStatus",
    "SessionEvents",
    "StatusKind",
    "derive_status",
    "format_time",
    "split_moves",
]
