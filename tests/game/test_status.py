"""Tests for status derivation, move-list split and time formatting."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from chessduel.core.enums import Color
from chessduel.game.clock import ClockState
from chessduel.game.interfaces import ClockPhase
from chessduel.game.status import (
    GameStatus,
    StatusKind,
    derive_status,
    format_time,
    split_moves,
)


@dataclass
class _StubRules:
    side_to_move: Color = Color.WHITE
    check: bool = False
    mate: bool = False
    draw: bool = False

    def is_in_check(self) -> bool:
        return self.check

    def is_checkmate(self) -> bool:
        return self.mate

    def is_draw(self) -> bool:
        return self.draw


def _clock(expired: Color | None = None) -> ClockState:
    return ClockState(
        white_remaining=0 if expired == Color.WHITE else 60,
        black_remaining=0 if expired == Color.BLACK else 60,
        running=None if expired else Color.WHITE,
        phase=ClockPhase.STOPPED if expired else ClockPhase.RUNNING,
        expired=expired,
        epoch=1,
    )


class TestDeriveStatus:
    def test_to_move(self) -> None:
        status = derive_status(_StubRules(Color.BLACK), _clock())
        assert status == GameStatus.to_move(Color.BLACK)
        assert not status.is_terminal

    def test_in_check(self) -> None:
        status = derive_status(_StubRules(Color.WHITE, check=True), _clock())
        assert status == GameStatus.to_move_in_check(Color.WHITE)

    def test_checkmate_names_winner(self) -> None:
        status = derive_status(_StubRules(Color.BLACK, check=True, mate=True), _clock())
        assert status == GameStatus.checkmate(Color.WHITE)
        assert status.is_terminal

    def test_draw(self) -> None:
        status = derive_status(_StubRules(draw=True), _clock())
        assert status == GameStatus.draw()
        assert status.side is None

    def test_time_expired_names_loser(self) -> None:
        status = derive_status(_StubRules(Color.WHITE), _clock(Color.WHITE))
        assert status == GameStatus.time_expired(Color.WHITE)
        assert status.is_terminal

    def test_time_expired_beats_check(self) -> None:
        status = derive_status(_StubRules(Color.WHITE, check=True), _clock(Color.WHITE))
        assert status.kind == StatusKind.TIME_EXPIRED

    def test_checkmate_beats_expired_clock(self) -> None:
        rules = _StubRules(Color.BLACK, check=True, mate=True)
        status = derive_status(rules, _clock(Color.BLACK))
        assert status == GameStatus.checkmate(Color.WHITE)

    def test_draw_beats_expired_clock(self) -> None:
        status = derive_status(_StubRules(draw=True), _clock(Color.WHITE))
        assert status == GameStatus.draw()


class TestSplitMoves:
    def test_parity_split(self) -> None:
        white, black = split_moves(["e4", "e5", "Nf3", "Nc6", "Bb5"])
        assert white == ["e4", "Nf3", "Bb5"]
        assert black == ["e5", "Nc6"]

    def test_empty(self) -> None:
        assert split_moves([]) == ([], [])


class TestFormatTime:
    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (600, "10:00"),
            (300, "05:00"),
            (61, "01:01"),
            (59, "00:59"),
            (0, "00:00"),
            (-5, "00:00"),
        ],
    )
    def test_mm_ss(self, seconds: int, expected: str) -> None:
        assert format_time(seconds) == expected
