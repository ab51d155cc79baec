"""BoardScene: QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import chess
from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessduel.ui.board.piece_item import PieceItem
from chessduel.ui.styles.theme import BoardTheme

SNAPBACK = "snapback"

DragStartCallback = Callable[[str, str], bool]  # source, piece code
DropCallback = Callable[[str, str], "str | None"]  # source, target
SnapEndCallback = Callable[[], None]


@dataclass
class BoardConfig:
    """Creation options for a board surface.

    ``on_drop`` returns :data:`SNAPBACK` to send the piece back to its
    origin; any other value leaves it on the target square.
    """

    initial_position: str = chess.STARTING_FEN
    on_drag_start: DragStartCallback | None = None
    on_drop: DropCallback | None = None
    on_snap_end: SnapEndCallback | None = None
    draggable: bool = True
    show_coordinates: bool = True


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates and piece items; reports drag/drop."""

    TILE = 60  # px per square

    def __init__(
        self, config: BoardConfig | None = None, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._config = config or BoardConfig()
        self._theme = BoardTheme.default()
        self._position: str | None = None

        self._dragging_item: PieceItem | None = None
        self._square_items: list[QGraphicsRectItem] = []
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[str, PieceItem] = {}

        self._draw_board()
        self.set_position(self._config.initial_position)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def position(self) -> str | None:
        """FEN currently on display."""
        return self._position

    def set_position(self, position: str) -> None:
        """Update the displayed position (full redraw of pieces)."""
        self._position = position
        self._dragging_item = None
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece dragging."""
        self._config.draggable = interactive

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._config.show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def piece_at(self, square: str) -> str | None:
        """Piece code displayed on *square*, e.g. ``"wK"``."""
        item = self._piece_items.get(square)
        return item.code if item is not None else None

    def teardown(self) -> None:
        """Drop all items and callbacks."""
        self._config.on_drag_start = None
        self._config.on_drop = None
        self._config.on_snap_end = None
        self._dragging_item = None
        self._piece_items.clear()
        self._square_items.clear()
        self._coord_items.clear()
        self._position = None
        self.clear()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw the 64 squares and coordinates."""
        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in chess.SQUARES:
            f, r = chess.square_file(sq), chess.square_rank(sq)
            col, row = f, 7 - r
            is_light = (f + r) % 2 == 1
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items.append(rect)

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light
            # Rank numbers (left edge)
            if f == 0:
                self._add_coord(str(r + 1), font, text_color, col * t + 2, row * t + 1)
            # File letters (bottom edge)
            if r == 0:
                x, y = col * t + t - 12, row * t + t - 16
                self._add_coord(chess.FILE_NAMES[f], font, text_color, x, y)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._config.show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if not self._position:
            return

        board = chess.Board(self._position)
        for sq, piece in board.piece_map().items():
            prefix = "w" if piece.color == chess.WHITE else "b"
            name = chess.square_name(sq)
            item = self._make_piece(prefix + piece.symbol().upper(), name)
            self.addItem(item)
            self._piece_items[name] = item

    def _make_piece(self, code: str, square: str) -> PieceItem:
        fill, outline = (
            (self._theme.piece_white, self._theme.piece_black)
            if code[0] == "w"
            else (self._theme.piece_black, self._theme.piece_white)
        )
        item = PieceItem(code, square, self.TILE, fill, outline)
        item.setPos(item.top_left_for(*self._visual_coords(square)))
        return item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._config.draggable or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        item = self._piece_items.get(sq) if sq is not None else None
        if item is None:
            return super().mousePressEvent(event)

        on_drag_start = self._config.on_drag_start
        if on_drag_start is not None and not on_drag_start(item.square, item.code):
            return super().mousePressEvent(event)

        item.start_drag()
        self._dragging_item = item

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is not None and event is not None:
            self._dragging_item.drag_to(event.scenePos())
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is None or event is None:
            return super().mouseReleaseEvent(event)
        self.drop(self._dragging_item, self._pos_to_square(event.scenePos()))

    def drop(self, item: PieceItem, target: str | None) -> bool:
        """Finish a drag of *item* on *target*. Returns True if the drop stuck."""
        self._dragging_item = None
        source = item.square

        # Off-board drops and drops on the origin square always snap back.
        if target is None or target == source:
            item.cancel_drag()
            return False

        on_drop = self._config.on_drop
        result = on_drop(source, target) if on_drop is not None else None
        if result == SNAPBACK:
            item.cancel_drag()
            return False

        item.finish_drag()
        # The drop handler may already have pushed a fresh position.
        if item.scene() is self:
            captured = self._piece_items.pop(target, None)
            if captured is not None:
                self.removeItem(captured)
            del self._piece_items[source]
            item.square = target
            item.setPos(item.top_left_for(*self._visual_coords(target)))
            self._piece_items[target] = item

        on_snap_end = self._config.on_snap_end
        if on_snap_end is not None:
            on_snap_end()
        return True

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, square: str) -> tuple[int, int]:
        """Square name -> visual (column, row), white at the bottom."""
        sq = chess.parse_square(square)
        return chess.square_file(sq), 7 - chess.square_rank(sq)

    def _pos_to_square(self, pos: QPointF) -> str | None:
        """Scene position -> square name."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return chess.square_name(chess.square(col, 7 - row))
