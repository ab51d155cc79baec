"""Game status and move-list derivation.

Everything here is a pure function of the rules engine and a clock
snapshot; callers recompute after every change instead of patching.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessduel.core.enums import Color

if TYPE_CHECKING:
    from chessduel.core.rules import IRulesEngine
    from chessduel.game.clock import ClockState


class StatusKind(IntEnum):
    TO_MOVE = auto()
    TO_MOVE_IN_CHECK = auto()
    CHECKMATE = auto()
    DRAW = auto()
    TIME_EXPIRED = auto()


_TERMINAL = frozenset({StatusKind.CHECKMATE, StatusKind.DRAW, StatusKind.TIME_EXPIRED})


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Exactly one status variant.

    ``side`` means the side to move for ``TO_MOVE*``, the winner for
    ``CHECKMATE``, the side that ran out of time for ``TIME_EXPIRED`` and
    is ``None`` for ``DRAW``.
    """

    kind: StatusKind
    side: Color | None = None

    @classmethod
    def to_move(cls, side: Color) -> GameStatus:
        return cls(StatusKind.TO_MOVE, side)

    @classmethod
    def to_move_in_check(cls, side: Color) -> GameStatus:
        return cls(StatusKind.TO_MOVE_IN_CHECK, side)

    @classmethod
    def checkmate(cls, winner: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, winner)

    @classmethod
    def draw(cls) -> GameStatus:
        return cls(StatusKind.DRAW)

    @classmethod
    def time_expired(cls, loser: Color) -> GameStatus:
        return cls(StatusKind.TIME_EXPIRED, loser)

    @property
    def is_terminal(self) -> bool:
        return self.kind in _TERMINAL


def derive_status(rules: IRulesEngine, clock: ClockState) -> GameStatus:
    """Compute the status of the committed position.

    Checkmate and draw are facts about the position and win over a clock
    that expired in the same turn.
    """
    side = rules.side_to_move
    if rules.is_checkmate():
        return GameStatus.checkmate(side.opposite)
    if rules.is_draw():
        return GameStatus.draw()
    if clock.expired is not None:
        return GameStatus.time_expired(clock.expired)
    if rules.is_in_check():
        return GameStatus.to_move_in_check(side)
    return GameStatus.to_move(side)


def split_moves(history: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split SAN history into White's and Black's moves by ply parity."""
    return list(history[0::2]), list(history[1::2])


def format_time(seconds: int) -> str:
    """Render whole seconds as ``MM:SS``."""
    s = max(0, int(seconds))
    return f"{s // 60:02d}:{s % 60:02d}"
