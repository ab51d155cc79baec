"""ClockWidget: dual chess clock display."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from chessduel.core.enums import Color
from chessduel.game.clock import ClockState
from chessduel.game.status import format_time
from chessduel.ui.i18n import t
from chessduel.ui.styles.theme import ClockTheme


class _SingleClock(QLabel):
    """One side's clock face: remaining time plus a state colour."""

    def __init__(
        self,
        color: Color,
        theme: ClockTheme | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._color = color
        self._theme = theme or ClockTheme()
        self._seconds = 0
        self._active = False
        self._flagged = False

        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFont(QFont("Adwaita Sans", 22, QFont.Weight.Bold))
        self.setMinimumWidth(110)
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)
        self.update_time(0)

    def set_active(self, active: bool) -> None:
        self._active = active
        self._apply_style()

    def set_flagged(self, flagged: bool) -> None:
        self._flagged = flagged
        self._apply_style()

    def update_time(self, seconds: int) -> None:
        self._seconds = seconds
        self.setText(format_time(seconds))
        self._apply_style()

    def _apply_style(self) -> None:
        theme = self._theme
        if self._flagged:
            colors = theme.flagged
        elif not self._active:
            colors = theme.idle
        elif self._seconds < theme.low_time_seconds:
            colors = theme.low_time
        else:
            colors = theme.running
        self.setStyleSheet(theme.stylesheet(colors))


class ClockWidget(QWidget):
    """White and Black clock faces side by side, each under a caption."""

    def __init__(
        self, theme: ClockTheme | None = None, parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        theme = theme or ClockTheme()

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        self._faces: dict[Color, _SingleClock] = {}
        self._captions: dict[Color, QLabel] = {}
        for color in (Color.WHITE, Color.BLACK):
            column = QVBoxLayout()
            caption = QLabel()
            caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
            caption.setFont(QFont("Adwaita Sans", 9))
            face = _SingleClock(color, theme)
            column.addWidget(caption)
            column.addWidget(face)
            layout.addLayout(column)
            self._captions[color] = caption
            self._faces[color] = face

        self.retranslate_ui()

    @property
    def _white_clock(self) -> _SingleClock:
        return self._faces[Color.WHITE]

    @property
    def _black_clock(self) -> _SingleClock:
        return self._faces[Color.BLACK]

    def retranslate_ui(self) -> None:
        s = t()
        self._captions[Color.WHITE].setText(s.clock_white)
        self._captions[Color.BLACK].setText(s.clock_black)

    def texts(self) -> tuple[str, str]:
        """Currently displayed (white, black) times."""
        return self._white_clock.text(), self._black_clock.text()

    def show_state(self, state: ClockState) -> None:
        for color, face in self._faces.items():
            face.update_time(state.remaining(color))
            face.set_active(state.running == color)
            face.set_flagged(state.expired == color)
