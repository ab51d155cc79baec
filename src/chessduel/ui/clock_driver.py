"""ClockDriver: turns a QTimer into one-second session ticks."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from chessduel.game.clock import ClockState
from chessduel.game.events import TickElapsed


class ClockDriver(QObject):
    """Fires ``TickElapsed`` once per second for the current clock epoch.

    Whenever the clock is reconfigured (new epoch) the timer is restarted,
    which cancels the pending tick of the previous configuration; the epoch
    stamped on each tick lets the clock drop anything that slips through.
    """

    INTERVAL_MS = 1000

    def __init__(
        self,
        post: Callable[[TickElapsed], object],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._post = post
        self._epoch: int | None = None
        self._timer = QTimer(self)
        self._timer.setInterval(self.INTERVAL_MS)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def armed_epoch(self) -> int | None:
        return self._epoch

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def sync(self, state: ClockState) -> None:
        """Follow *state*: (re)arm on a new running epoch, stop otherwise."""
        if not state.is_running:
            self.stop()
            return
        if state.epoch == self._epoch and self._timer.isActive():
            return
        self._epoch = state.epoch
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._epoch = None

    def _on_timeout(self) -> None:
        if self._epoch is not None:
            self._post(TickElapsed(self._epoch))
