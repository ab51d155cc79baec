"""MainWindow: top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QCloseEvent, QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from chessduel.game.events import (
    MoveAttempted,
    ResetRequested,
    SessionEvent,
    TickElapsed,
    TimeControlChanged,
    UndoRequested,
)
from chessduel.game.interfaces import TIME_CONTROL_OPTIONS, MoveOutcome, TimeControl
from chessduel.game.session import GameSession
from chessduel.ui.board.board_scene import SNAPBACK, BoardConfig
from chessduel.ui.board.board_view import BoardView
from chessduel.ui.clock_driver import ClockDriver
from chessduel.ui.game_sync import GameSync
from chessduel.ui.i18n import set_language, t
from chessduel.ui.panels.clock_widget import ClockWidget
from chessduel.ui.panels.control_panel import ControlPanel
from chessduel.ui.panels.move_panel import MovePanel
from chessduel.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def _time_control_for(seconds: int) -> TimeControl:
    for tc in TIME_CONTROL_OPTIONS:
        if tc.initial_seconds == seconds:
            return tc
    return TimeControl(seconds)


def _options_with(time_control: TimeControl) -> tuple[TimeControl, ...]:
    if time_control in TIME_CONTROL_OPTIONS:
        return TIME_CONTROL_OPTIONS
    return (*TIME_CONTROL_OPTIONS, time_control)


class MainWindow(QMainWindow):
    """Main application window: board on the left, info panel on the right."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        set_language(self._settings.language)

        self.setWindowTitle(t().window_title)
        self.setMinimumSize(900, 600)

        self._session = GameSession(
            _time_control_for(self._settings.time_control_seconds)
        )
        # Ticks are held until the end of the event-loop turn; commands go first.
        self._pending_ticks: list[TickElapsed] = []
        self._drain_timer = QTimer(self)
        self._drain_timer.setSingleShot(True)
        self._drain_timer.setInterval(0)
        self._drain_timer.timeout.connect(self._drain_pending)
        self._clock_driver = ClockDriver(self._post_tick, self)

        self._setup_ui()
        self._connect_signals()

        self._sync = GameSync(
            session=self._session,
            board_view=self._board_view,
            move_panel=self._move_panel,
            control_panel=self._control_panel,
            clock_widget=self._clock_widget,
            clock_driver=self._clock_driver,
            set_status=self._status_value.setText,
            set_fen=self._fen_value.setText,
        )
        self._sync.connect()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (left)
        self._board_view = BoardView.create(
            central,
            BoardConfig(
                initial_position=self._session.position,
                on_drag_start=self._on_drag_start,
                on_drop=self._on_drop,
                on_snap_end=self._on_snap_end,
                show_coordinates=self._settings.show_coordinates,
            ),
        )
        root.setStretchFactor(self._board_view, 3)

        # Info panel (right)
        right = QVBoxLayout()
        right.setSpacing(6)

        header_font = QFont("Adwaita Sans", 10, QFont.Weight.Bold)
        self._status_header = QLabel()
        self._status_header.setFont(header_font)
        right.addWidget(self._status_header)
        self._status_value = QLabel()
        self._status_value.setWordWrap(True)
        right.addWidget(self._status_value)

        self._fen_header = QLabel()
        self._fen_header.setFont(header_font)
        right.addWidget(self._fen_header)
        self._fen_value = QLabel()
        self._fen_value.setWordWrap(True)
        self._fen_value.setFont(QFont("AdwaitaMono Nerd Font", 9))
        right.addWidget(self._fen_value)

        self._control_panel = ControlPanel(_options_with(self._session.time_control))
        self._control_panel.set_time_control_silently(self._session.time_control)
        right.addWidget(self._control_panel)

        self._clock_widget = ClockWidget()
        right.addWidget(self._clock_widget)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(300)
        root.addWidget(right_widget)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._status_header.setText(s.status_header)
        self._fen_header.setText(s.fen_header)
        self._control_panel.retranslate_ui()
        self._clock_widget.retranslate_ui()
        self._move_panel.retranslate_ui()

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._control_panel.reset_clicked.connect(self._on_reset)
        self._control_panel.undo_clicked.connect(self._on_undo)
        self._control_panel.time_control_changed.connect(self._on_time_control)

    # ── Board callbacks ──────────────────────────────────────────────────

    def _on_drag_start(self, source: str, piece: str) -> bool:
        return self._session.can_drag(source, piece)

    def _on_drop(self, source: str, target: str) -> str | None:
        outcome = self._submit(MoveAttempted(source, target))
        if outcome != MoveOutcome.ACCEPTED:
            return SNAPBACK
        return None

    def _on_snap_end(self) -> None:
        # Castling, en passant and promotion change more than the dragged piece.
        self._board_view.set_position(self._session.position)

    # ── User commands ────────────────────────────────────────────────────

    def _on_reset(self) -> None:
        self._submit(ResetRequested())

    def _on_undo(self) -> None:
        self._submit(UndoRequested())

    def _on_time_control(self, time_control: TimeControl) -> None:
        self._settings.time_control_seconds = time_control.initial_seconds
        self._submit(TimeControlChanged(time_control))

    # ── Event queue ──────────────────────────────────────────────────────

    def _submit(self, command: SessionEvent) -> object:
        """Apply *command* together with the ticks queued in this turn."""
        batch: list[SessionEvent] = [command, *self._take_pending()]
        return self._session.process(batch)[0]

    def _post_tick(self, tick: TickElapsed) -> None:
        self._pending_ticks.append(tick)
        if not self._drain_timer.isActive():
            self._drain_timer.start()

    def _take_pending(self) -> list[TickElapsed]:
        self._drain_timer.stop()
        ticks, self._pending_ticks = self._pending_ticks, []
        return ticks

    def _drain_pending(self) -> None:
        ticks = self._take_pending()
        if ticks and not self._session.is_closed:
            self._session.process(ticks)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    @property
    def clock_widget(self) -> ClockWidget:
        return self._clock_widget

    @property
    def clock_driver(self) -> ClockDriver:
        return self._clock_driver

    @property
    def move_panel(self) -> MovePanel:
        return self._move_panel

    def status_text(self) -> str:
        return self._status_value.text()

    def fen_text(self) -> str:
        return self._fen_value.text()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self.shutdown()
        super().closeEvent(event)

    def shutdown(self) -> None:
        """End the session and release the board surface."""
        if self._session.is_closed:
            return
        _LOGGER.debug("Shutting down session")
        self._clock_driver.stop()
        self._take_pending()
        self._session.destroy()
        self._board_view.destroy_board()
