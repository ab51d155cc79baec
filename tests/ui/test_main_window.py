"""Integration tests for MainWindow wiring."""

from __future__ import annotations

from chessduel.core.enums import Color
from chessduel.core.rules import STARTING_FEN
from chessduel.game.interfaces import TimeControl
from chessduel.ui.board.board_scene import SNAPBACK
from chessduel.ui.main_window import MainWindow
from chessduel.ui.settings import AppSettings


def _play(window: MainWindow, *moves: str) -> None:
    for move in moves:
        source, target = move.split("-")
        assert window._on_drop(source, target) is None


class TestInitialState:
    def test_shows_fresh_game(self, qapp) -> None:
        window = MainWindow()
        assert window.status_text() == "White to move"
        assert window.fen_text() == STARTING_FEN
        assert window.clock_widget.texts() == ("10:00", "10:00")
        assert window.move_panel.white_moves() == []
        assert window.board_view.board_scene.piece_at("e2") == "wP"

    def test_clock_driver_armed_for_white(self, qapp) -> None:
        window = MainWindow()
        assert window.clock_driver.is_active
        assert window.clock_driver.armed_epoch == window.session.clock.epoch
        assert window.session.clock.running == Color.WHITE

    def test_time_control_from_settings(self, qapp) -> None:
        window = MainWindow(AppSettings(time_control_seconds=300))
        assert window.clock_widget.texts() == ("05:00", "05:00")
        assert window.control_panel.current_time_control() == TimeControl.blitz_5m()

    def test_custom_time_control_is_selectable(self, qapp) -> None:
        window = MainWindow(AppSettings(time_control_seconds=120))
        assert window.clock_widget.texts() == ("02:00", "02:00")
        assert window.control_panel.current_time_control() == TimeControl(120)
        assert window.control_panel._tc_combo.currentText() == "2 min"

    def test_russian_settings(self, qapp) -> None:
        window = MainWindow(AppSettings(language="Russian"))
        assert window.status_text() == "Ход: Белые"


class TestMoves:
    def test_legal_drop_updates_ui(self, qapp) -> None:
        window = MainWindow()
        _play(window, "e2-e4")
        assert window.status_text() == "Black to move"
        assert window.move_panel.white_moves() == ["e4"]
        assert window.board_view.board_scene.piece_at("e4") == "wP"
        assert window.board_view.board_scene.piece_at("e2") is None
        assert window.fen_text() == window.session.position
        assert window.control_panel.is_undo_enabled()

    def test_illegal_drop_snaps_back(self, qapp) -> None:
        window = MainWindow()
        assert window._on_drop("e2", "e5") == SNAPBACK
        assert window.fen_text() == STARTING_FEN

    def test_drag_only_side_to_move(self, qapp) -> None:
        window = MainWindow()
        assert window._on_drag_start("e2", "wP")
        assert not window._on_drag_start("e7", "bP")

    def test_checkmate_ends_game(self, qapp) -> None:
        window = MainWindow()
        _play(window, "e2-e4", "e7-e5", "f1-c4", "b8-c6", "d1-h5", "g8-f6", "h5-f7")
        assert window.status_text() == "Game over, Black is in checkmate."
        assert not window.clock_driver.is_active
        assert not window.control_panel.is_undo_enabled()
        assert window._on_drop("a7", "a6") == SNAPBACK
        assert window.move_panel.white_moves()[-1] == "Qxf7#"


class TestCommands:
    def test_time_control_change_starts_new_game(self, qapp) -> None:
        window = MainWindow()
        _play(window, "e2-e4")
        window.control_panel.select_time_control(TimeControl.blitz_5m())
        assert window.clock_widget.texts() == ("05:00", "05:00")
        assert window.move_panel.white_moves() == []
        assert window.fen_text() == STARTING_FEN

    def test_reset_button(self, qapp) -> None:
        window = MainWindow()
        _play(window, "e2-e4", "e7-e5")
        window.control_panel.reset_clicked.emit()
        assert window.fen_text() == STARTING_FEN
        assert window.status_text() == "White to move"
        assert window.move_panel.black_moves() == []

    def test_undo_button(self, qapp) -> None:
        window = MainWindow()
        _play(window, "e2-e4")
        window.control_panel.undo_clicked.emit()
        assert window.fen_text() == STARTING_FEN
        assert window.status_text() == "White to move"
        assert window.session.clock.running == Color.WHITE
        assert not window.control_panel.is_undo_enabled()


class TestClock:
    def test_timer_tick_is_applied_at_end_of_turn(self, qapp) -> None:
        window = MainWindow()
        window.clock_driver._on_timeout()
        assert window.clock_widget.texts() == ("10:00", "10:00")
        window._drain_pending()
        assert window.clock_widget.texts() == ("09:59", "10:00")

    def test_flag_fall(self, qapp) -> None:
        window = MainWindow()
        window.session.clock.set_remaining(Color.WHITE, 1)
        window.clock_driver._on_timeout()
        window._drain_pending()
        assert window.status_text() == "Time's up! Black wins."
        assert window.clock_widget.texts()[0] == "00:00"
        assert not window.clock_driver.is_active
        assert window._on_drop("e2", "e4") == SNAPBACK

    def test_mating_drop_beats_tick_from_same_turn(self, qapp) -> None:
        window = MainWindow()
        _play(window, "e2-e4", "e7-e5", "f1-c4", "b8-c6", "d1-h5", "g8-f6")
        window.session.clock.set_remaining(Color.WHITE, 1)
        window.clock_driver._on_timeout()
        assert window._on_drop("h5", "f7") is None
        window._drain_pending()
        assert window.status_text() == "Game over, Black is in checkmate."
        assert window.clock_widget.texts()[0] == "00:01"

    def test_tick_queued_before_move_is_stale(self, qapp) -> None:
        window = MainWindow()
        window.clock_driver._on_timeout()
        _play(window, "e2-e4")
        window._drain_pending()
        assert window.clock_widget.texts() == ("10:00", "10:00")
        assert window.status_text() == "Black to move"


class TestShutdown:
    def test_shutdown_releases_resources(self, qapp) -> None:
        window = MainWindow()
        window.shutdown()
        assert window.session.is_closed
        assert window.board_view.is_destroyed
        assert not window.clock_driver.is_active

    def test_shutdown_is_idempotent(self, qapp) -> None:
        window = MainWindow()
        window.shutdown()
        window.shutdown()
        assert window.session.is_closed
