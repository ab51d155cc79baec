"""Tests for BoardScene / BoardView rendering and drop handling."""

from __future__ import annotations

import chess
from PyQt6.QtCore import QPointF
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from chessduel.ui.board.board_scene import SNAPBACK, BoardConfig, BoardScene
from chessduel.ui.board.board_view import BoardView


def test_initial_position_is_rendered(qapp) -> None:
    scene = BoardScene()
    assert len(scene._piece_items) == 32
    assert scene.piece_at("e1") == "wK"
    assert scene.piece_at("d8") == "bQ"
    assert scene.piece_at("e4") is None


def test_set_position_redraws_pieces(qapp) -> None:
    scene = BoardScene()
    scene.set_position("4k3/8/8/8/8/8/8/4K2R w K - 0 1")
    assert scene.position == "4k3/8/8/8/8/8/8/4K2R w K - 0 1"
    assert len(scene._piece_items) == 3
    assert scene.piece_at("h1") == "wR"


def test_pos_to_square_white_at_bottom(qapp) -> None:
    scene = BoardScene()
    t = scene.TILE
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == "a8"
    assert scene._pos_to_square(QPointF(t * 4.5, t * 7.5)) == "e1"
    assert scene._pos_to_square(QPointF(-1, 10)) is None


def test_set_show_coordinates_toggles_all_labels_visibility(qapp) -> None:
    scene = BoardScene()
    assert scene._coord_items

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_drop_snapback_returns_piece(qapp) -> None:
    calls: list[tuple[str, str]] = []

    def on_drop(source: str, target: str) -> str:
        calls.append((source, target))
        return SNAPBACK

    scene = BoardScene(BoardConfig(on_drop=on_drop))
    item = scene._piece_items["e2"]
    origin = item.pos()
    item.start_drag()
    item.drag_to(QPointF(300, 100))

    assert not scene.drop(item, "e5")
    assert calls == [("e2", "e5")]
    assert item.pos() == origin
    assert scene.piece_at("e2") == "wP"
    assert scene.piece_at("e5") is None


def test_drop_off_board_snaps_back_without_callback(qapp) -> None:
    calls: list[tuple[str, str]] = []
    scene = BoardScene(BoardConfig(on_drop=lambda s, t: calls.append((s, t))))
    item = scene._piece_items["g1"]
    item.start_drag()

    assert not scene.drop(item, None)
    assert not scene.drop(item, "g1")
    assert calls == []
    assert scene.piece_at("g1") == "wN"


def test_accepted_drop_moves_piece_and_calls_snap_end(qapp) -> None:
    snap_ends: list[bool] = []
    scene = BoardScene(
        BoardConfig(
            on_drop=lambda _s, _t: None,
            on_snap_end=lambda: snap_ends.append(True),
        )
    )
    item = scene._piece_items["e2"]
    item.start_drag()

    assert scene.drop(item, "e4")
    assert scene.piece_at("e4") == "wP"
    assert scene.piece_at("e2") is None
    assert not item.is_dragging
    assert snap_ends == [True]


def test_accepted_drop_with_resync_from_handler(qapp) -> None:
    board = chess.Board()
    scene = BoardScene()

    def on_drop(source: str, target: str) -> None:
        board.push(chess.Move.from_uci(source + target))
        scene.set_position(board.fen())

    scene._config.on_drop = on_drop
    item = scene._piece_items["g1"]
    assert scene.drop(item, "f3")
    assert scene.piece_at("f3") == "wN"
    assert scene.piece_at("g1") is None
    assert len(scene._piece_items) == 32


def test_board_view_create_and_destroy(qapp) -> None:
    container = QWidget()
    layout = QVBoxLayout(container)
    view = BoardView.create(container, BoardConfig())
    assert layout.indexOf(view) >= 0
    assert view.board_scene.piece_at("a1") == "wR"

    view.destroy_board()
    assert view.is_destroyed
    assert view.board_scene.position is None
    view.set_position(chess.STARTING_FEN)
    assert view.board_scene.position is None
    assert view.board_scene._config.on_drop is None
