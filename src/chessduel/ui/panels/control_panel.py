"""ControlPanel: time-control selector and game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessduel.game.interfaces import TIME_CONTROL_OPTIONS, TimeControl
from chessduel.game.status import format_time
from chessduel.ui.i18n import t


def _option_text(time_control: TimeControl) -> str:
    minutes, seconds = divmod(time_control.initial_seconds, 60)
    if seconds:
        return format_time(time_control.initial_seconds)
    return t().time_option.format(minutes=minutes)


class ControlPanel(QWidget):
    """Time-control combo box plus Reset and Undo buttons."""

    reset_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    time_control_changed = pyqtSignal(object)  # TimeControl

    def __init__(
        self,
        options: tuple[TimeControl, ...] = TIME_CONTROL_OPTIONS,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._options = options
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        row1 = QHBoxLayout()
        self._tc_label = QLabel()
        row1.addWidget(self._tc_label)
        self._tc_combo = QComboBox()
        self._tc_combo.currentIndexChanged.connect(self._on_index_changed)
        row1.addWidget(self._tc_combo, stretch=1)
        layout.addLayout(row1)

        row2 = QHBoxLayout()
        self._btn_reset = QPushButton()
        self._btn_reset.setFont(btn_font)
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        row2.addWidget(self._btn_reset)

        self._btn_undo = QPushButton()
        self._btn_undo.setFont(btn_font)
        self._btn_undo.setMinimumHeight(36)
        self._btn_undo.clicked.connect(self.undo_clicked)
        row2.addWidget(self._btn_undo)
        layout.addLayout(row2)

    def retranslate_ui(self) -> None:
        s = t()
        self._tc_label.setText(s.time_control_header)
        self._btn_reset.setText(s.btn_reset)
        self._btn_undo.setText(s.btn_undo)

        current = max(0, self._tc_combo.currentIndex())
        self._tc_combo.blockSignals(True)
        self._tc_combo.clear()
        for tc in self._options:
            self._tc_combo.addItem(_option_text(tc), tc)
        self._tc_combo.setCurrentIndex(current)
        self._tc_combo.blockSignals(False)

    def current_time_control(self) -> TimeControl:
        return self._options[max(0, self._tc_combo.currentIndex())]

    def select_time_control(self, time_control: TimeControl) -> None:
        """Programmatically pick *time_control*; emits ``time_control_changed``."""
        self._tc_combo.setCurrentIndex(self._options.index(time_control))

    def set_time_control_silently(self, time_control: TimeControl) -> None:
        if time_control not in self._options:
            return
        self._tc_combo.blockSignals(True)
        self._tc_combo.setCurrentIndex(self._options.index(time_control))
        self._tc_combo.blockSignals(False)

    def set_undo_enabled(self, enabled: bool) -> None:
        self._btn_undo.setEnabled(enabled)

    def is_undo_enabled(self) -> bool:
        return self._btn_undo.isEnabled()

    def _on_index_changed(self, index: int) -> None:
        if 0 <= index < len(self._options):
            self.time_control_changed.emit(self._options[index])
