"""UI/game state synchronisation helpers for MainWindow."""

from __future__ import annotations

from collections.abc import Callable

from chessduel.core.enums import Color
from chessduel.core.rules import Position
from chessduel.game.clock import ClockState
from chessduel.game.session import GameSession
from chessduel.game.status import GameStatus, StatusKind
from chessduel.ui.board.board_view import BoardView
from chessduel.ui.clock_driver import ClockDriver
from chessduel.ui.i18n import t
from chessduel.ui.panels.clock_widget import ClockWidget
from chessduel.ui.panels.control_panel import ControlPanel
from chessduel.ui.panels.move_panel import MovePanel


def status_text(status: GameStatus) -> str:
    """Human-readable status line for *status*."""
    s = t()

    def name(color: Color | None) -> str:
        return s.color_white if color == Color.WHITE else s.color_black

    if status.kind == StatusKind.CHECKMATE:
        # The side that was mated is the one to move.
        loser = status.side.opposite if status.side is not None else None
        return s.status_checkmate.format(color=name(loser))
    if status.kind == StatusKind.DRAW:
        return s.status_draw
    if status.kind == StatusKind.TIME_EXPIRED:
        winner = status.side.opposite if status.side is not None else None
        return s.status_time_up.format(color=name(winner))

    text = s.status_to_move.format(color=name(status.side))
    if status.kind == StatusKind.TO_MOVE_IN_CHECK:
        text += s.status_in_check.format(color=name(status.side))
    return text


class GameSync:
    """Applies session changes to UI widgets."""

    __slots__ = (
        "_session",
        "_board_view",
        "_move_panel",
        "_control_panel",
        "_clock_widget",
        "_clock_driver",
        "_set_status",
        "_set_fen",
    )

    def __init__(
        self,
        *,
        session: GameSession,
        board_view: BoardView,
        move_panel: MovePanel,
        control_panel: ControlPanel,
        clock_widget: ClockWidget,
        clock_driver: ClockDriver,
        set_status: Callable[[str], None],
        set_fen: Callable[[str], None],
    ) -> None:
        self._session = session
        self._board_view = board_view
        self._move_panel = move_panel
        self._control_panel = control_panel
        self._clock_widget = clock_widget
        self._clock_driver = clock_driver
        self._set_status = set_status
        self._set_fen = set_fen

    def connect(self) -> None:
        """Subscribe to the session and render its current state."""
        events = self._session.events
        events.on_position_changed.append(self.on_position_changed)
        events.on_status_changed.append(self.on_status_changed)
        events.on_clock_changed.append(self.on_clock_changed)
        events.on_game_over.append(self.on_game_over)
        self.refresh()

    def refresh(self) -> None:
        self.on_position_changed(self._session.position)
        self.on_clock_changed(self._session.clock_state)
        self.on_status_changed(self._session.status)

    def on_position_changed(self, position: Position) -> None:
        self._board_view.set_position(position)
        self._set_fen(position)
        self._move_panel.set_history(self._session.history)

    def on_status_changed(self, status: GameStatus) -> None:
        self._set_status(status_text(status))
        self._board_view.set_interactive(not status.is_terminal)
        self._control_panel.set_undo_enabled(
            not status.is_terminal and bool(self._session.history)
        )

    def on_clock_changed(self, state: ClockState) -> None:
        self._clock_widget.show_state(state)
        self._clock_driver.sync(state)

    def on_game_over(self, _status: GameStatus) -> None:
        self._clock_driver.stop()
        self._board_view.set_interactive(False)
