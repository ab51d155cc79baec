"""PieceItem: draggable chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

_GLYPHS: dict[str, str] = {
    "K": "♚",
    "Q": "♛",
    "R": "♜",
    "B": "♝",
    "N": "♞",
    "P": "♟",
}


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    *code* follows the board convention: colour prefix plus upper-case
    piece letter, e.g. ``"wP"`` or ``"bK"``.
    """

    def __init__(
        self,
        code: str,
        square: str,
        tile_size: int,
        fill: QColor,
        outline: QColor,
    ) -> None:
        super().__init__(_GLYPHS[code[1]])
        self.code = code
        self.square = square
        self._tile_size = tile_size
        self._drag_origin: QPointF | None = None

        self.setFont(QFont("DejaVu Sans", int(tile_size * 0.62)))
        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 1.0))
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        self.setZValue(1)

    def top_left_for(self, col: int, row: int) -> QPointF:
        """Scene position that centres the glyph in tile (*col*, *row*)."""
        t = self._tile_size
        rect = self.boundingRect()
        return QPointF(
            col * t + (t - rect.width()) / 2,
            row * t + (t - rect.height()) / 2,
        )

    @property
    def is_dragging(self) -> bool:
        return self._drag_origin is not None

    def start_drag(self) -> None:
        """Called at the beginning of a drag gesture."""
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def drag_to(self, scene_pos: QPointF) -> None:
        rect = self.boundingRect()
        self.setPos(scene_pos - QPointF(rect.width() / 2, rect.height() / 2))

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._finish_drag()

    def finish_drag(self) -> None:
        """Cleanup after a successful drop."""
        self._finish_drag()

    def _finish_drag(self) -> None:
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        self.setOpacity(1.0)
