"""Tests for clock widget display and styling."""

from __future__ import annotations

from chessduel.core.enums import Color
from chessduel.game.clock import Clock
from chessduel.ui.panels.clock_widget import ClockWidget, _SingleClock


class TestSingleClock:
    def test_low_time_style_is_cleared_after_time_increase(self, qapp) -> None:
        clock = _SingleClock(Color.WHITE)
        clock.set_active(True)

        clock.update_time(10)
        assert "#8b2020" in clock.styleSheet()
        assert clock.text() == "00:10"

        clock.update_time(45)
        assert "#8b2020" not in clock.styleSheet()
        assert "#3a7d44" in clock.styleSheet()


class TestClockWidget:
    def test_show_state_formats_and_highlights(self, qapp) -> None:
        clock = Clock(300)
        clock.start(Color.BLACK)
        clock.tick()

        widget = ClockWidget()
        widget.show_state(clock.snapshot())
        assert widget.texts() == ("05:00", "04:59")
        assert "#3a7d44" in widget._black_clock.styleSheet()
        assert "#3a7d44" not in widget._white_clock.styleSheet()

    def test_stopped_clock_has_no_active_side(self, qapp) -> None:
        clock = Clock(60)
        clock.start(Color.WHITE)
        clock.stop()

        widget = ClockWidget()
        widget.show_state(clock.snapshot())
        assert "#aaa" in widget._white_clock.styleSheet()
        assert "#aaa" in widget._black_clock.styleSheet()

    def test_expired_side_is_flagged(self, qapp) -> None:
        clock = Clock(1)
        clock.start(Color.WHITE)
        clock.tick()

        widget = ClockWidget()
        widget.show_state(clock.snapshot())
        assert widget.texts() == ("00:00", "00:01")
        assert "#4a0f0f" in widget._white_clock.styleSheet()
        assert "#4a0f0f" not in widget._black_clock.styleSheet()
