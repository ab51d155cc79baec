"""Core domain layer: side colours and the rules-engine contract.

Quick start::

    from chessduel.core import ChessRulesEngine, Color

    rules = ChessRulesEngine()
    rules.apply_move("e2", "e4")
    assert rules.side_to_move == Color.BLACK
"""

from chessduel.core.enums import Color
from chessduel.core.rules import (
    STARTING_FEN,
    ChessRulesEngine,
    IRulesEngine,
    Position,
)

__all__ = [
    "STARTING_FEN",
    "ChessRulesEngine",
    "Color",
    "IRulesEngine",
    "Position",
]
