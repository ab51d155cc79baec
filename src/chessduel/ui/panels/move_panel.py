"""MovePanel: White and Black move columns in SAN notation."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QListWidget, QVBoxLayout, QWidget

from chessduel.game.status import split_moves
from chessduel.ui.i18n import t


class MovePanel(QWidget):
    """Displays the game's move history, one column per side."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        layout.addWidget(self._header)

        columns = QHBoxLayout()
        self._white_header, self._white_list = self._make_column(columns)
        self._black_header, self._black_list = self._make_column(columns)
        layout.addLayout(columns)

    def _make_column(self, row: QHBoxLayout) -> tuple[QLabel, QListWidget]:
        box = QVBoxLayout()
        header = QLabel()
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        moves = QListWidget()
        moves.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        moves.setFont(QFont("AdwaitaMono Nerd Font", 12))
        box.addWidget(header)
        box.addWidget(moves)
        row.addLayout(box)
        return header, moves

    def retranslate_ui(self) -> None:
        s = t()
        self._header.setText(s.moves_header)
        self._white_header.setText(s.moves_white)
        self._black_header.setText(s.moves_black)

    def set_history(self, history: Sequence[str]) -> None:
        """Rebuild both columns from the full SAN history."""
        white, black = split_moves(history)
        self._white_list.clear()
        self._white_list.addItems(white)
        self._black_list.clear()
        self._black_list.addItems(black)
        self._white_list.scrollToBottom()
        self._black_list.scrollToBottom()

    def white_moves(self) -> list[str]:
        return [self._white_list.item(i).text() for i in range(self._white_list.count())]

    def black_moves(self) -> list[str]:
        return [self._black_list.item(i).text() for i in range(self._black_list.count())]

    def clear(self) -> None:
        self._white_list.clear()
        self._black_list.clear()
