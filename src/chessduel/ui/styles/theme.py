"""Board and clock colours, plus the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard and its glyph pieces."""

    light_square: QColor
    dark_square: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    piece_white: QColor
    piece_black: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )


@dataclass(frozen=True)
class ClockTheme:
    """(background, foreground) pairs for each clock face state."""

    idle: tuple[str, str] = ("#2b2b2b", "#aaa")
    running: tuple[str, str] = ("#3a7d44", "white")
    low_time: tuple[str, str] = ("#8b2020", "white")
    flagged: tuple[str, str] = ("#4a0f0f", "#ff8080")
    low_time_seconds: int = 30

    def stylesheet(self, colors: tuple[str, str]) -> str:
        background, foreground = colors
        return (
            f"background-color: {background}; color: {foreground}; "
            "padding: 6px 12px; border-radius: 4px;"
        )


APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QListWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-size: 13px;
}

QPushButton, QComboBox {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}
"""
