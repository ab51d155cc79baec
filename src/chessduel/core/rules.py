"""Rules engine contract and its python-chess implementation.

The session layer depends only on :class:`IRulesEngine`; the concrete
:class:`ChessRulesEngine` keeps python-chess internals out of the rest of
the codebase.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import NewType

import chess
import chess.pgn

from chessduel.core.enums import Color

_LOGGER = logging.getLogger(__name__)

Position = NewType("Position", str)
"""Opaque FEN snapshot exchanged between the rules engine and the board."""

STARTING_FEN = Position(chess.STARTING_FEN)

_PROMOTION_PIECES: dict[str, chess.PieceType] = {
    "q": chess.QUEEN,
    "r": chess.ROOK,
    "b": chess.BISHOP,
    "n": chess.KNIGHT,
}


class IRulesEngine(ABC):
    """Move legality and terminal-state queries for one game."""

    @property
    @abstractmethod
    def position(self) -> Position:
        """Current position."""

    @property
    @abstractmethod
    def side_to_move(self) -> Color: ...

    @abstractmethod
    def apply_move(
        self, source: str, target: str, promotion: str = "q"
    ) -> Position | None:
        """Play *source* -> *target*. Returns the new position, or None if illegal."""

    @abstractmethod
    def is_in_check(self) -> bool: ...

    @abstractmethod
    def is_checkmate(self) -> bool: ...

    @abstractmethod
    def is_draw(self) -> bool: ...

    @abstractmethod
    def undo_last(self) -> Position | None:
        """Take back the last move. Returns the restored position, or None."""

    @abstractmethod
    def history_as_notation(self) -> list[str]:
        """Moves played so far in SAN, oldest first."""

    @abstractmethod
    def reset(self) -> Position:
        """Return to the starting position and clear the history."""

    @abstractmethod
    def pgn(self) -> str:
        """Move text of the game so far."""


class ChessRulesEngine(IRulesEngine):
    """:class:`IRulesEngine` backed by :class:`chess.Board`."""

    __slots__ = ("_start_fen", "_board")

    def __init__(self, fen: str | None = None) -> None:
        self._start_fen = fen or chess.STARTING_FEN
        self._board = chess.Board(self._start_fen)

    @property
    def position(self) -> Position:
        return Position(self._board.fen())

    @property
    def side_to_move(self) -> Color:
        return Color.WHITE if self._board.turn == chess.WHITE else Color.BLACK

    def apply_move(
        self, source: str, target: str, promotion: str = "q"
    ) -> Position | None:
        try:
            from_sq = chess.parse_square(source)
            to_sq = chess.parse_square(target)
        except ValueError:
            _LOGGER.debug("Unparseable squares: %r -> %r", source, target)
            return None

        move = chess.Move(from_sq, to_sq)
        if not self._board.is_legal(move):
            piece_type = _PROMOTION_PIECES.get(promotion.lower(), chess.QUEEN)
            move = chess.Move(from_sq, to_sq, promotion=piece_type)
            if not self._board.is_legal(move):
                return None

        self._board.push(move)
        return self.position

    def is_in_check(self) -> bool:
        return self._board.is_check()

    def is_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def is_draw(self) -> bool:
        board = self._board
        return (
            board.is_stalemate()
            or board.is_insufficient_material()
            or board.is_fifty_moves()
            or board.is_repetition(3)
        )

    def undo_last(self) -> Position | None:
        if not self._board.move_stack:
            return None
        self._board.pop()
        return self.position

    def history_as_notation(self) -> list[str]:
        replay = chess.Board(self._start_fen)
        san_moves: list[str] = []
        for move in self._board.move_stack:
            san_moves.append(replay.san(move))
            replay.push(move)
        return san_moves

    def reset(self) -> Position:
        self._board = chess.Board(self._start_fen)
        return self.position

    def pgn(self) -> str:
        if not self._board.move_stack:
            return ""
        game = chess.pgn.Game.from_board(self._board)
        exporter = chess.pgn.StringExporter(headers=False, variations=False)
        return game.accept(exporter)
