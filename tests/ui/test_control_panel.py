"""Tests for the control panel's time-control selector."""

from __future__ import annotations

from chessduel.game.interfaces import TIME_CONTROL_OPTIONS, TimeControl
from chessduel.ui.panels.control_panel import ControlPanel


def test_default_selection_is_first_option(qapp) -> None:
    panel = ControlPanel()
    assert panel.current_time_control() == TIME_CONTROL_OPTIONS[0]
    assert panel._tc_combo.count() == len(TIME_CONTROL_OPTIONS)
    assert panel._tc_combo.itemText(1) == "5 min"


def test_selection_emits_time_control(qapp) -> None:
    panel = ControlPanel()
    emitted: list[TimeControl] = []
    panel.time_control_changed.connect(emitted.append)

    panel.select_time_control(TimeControl.bullet_1m())
    assert emitted == [TimeControl.bullet_1m()]
    assert panel.current_time_control() == TimeControl.bullet_1m()


def test_silent_selection_does_not_emit(qapp) -> None:
    panel = ControlPanel()
    emitted: list[TimeControl] = []
    panel.time_control_changed.connect(emitted.append)

    panel.set_time_control_silently(TimeControl.blitz_5m())
    assert emitted == []
    assert panel.current_time_control() == TimeControl.blitz_5m()


def test_buttons_emit(qapp) -> None:
    panel = ControlPanel()
    clicks: list[str] = []
    panel.reset_clicked.connect(lambda: clicks.append("reset"))
    panel.undo_clicked.connect(lambda: clicks.append("undo"))
    panel._btn_reset.click()
    panel._btn_undo.click()
    assert clicks == ["reset", "undo"]


def test_custom_option_labels(qapp) -> None:
    options = (TimeControl.rapid_10m(), TimeControl(120), TimeControl(90))
    panel = ControlPanel(options)
    assert panel._tc_combo.itemText(1) == "2 min"
    assert panel._tc_combo.itemText(2) == "01:30"
