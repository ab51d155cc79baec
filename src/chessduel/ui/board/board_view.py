"""BoardView: QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chessduel.ui.board.board_scene import BoardConfig, BoardScene


class BoardView(QGraphicsView):
    """Rendering surface: displays a position and reports drag/drop gestures.

    The game layer only ever writes to it (:meth:`set_position`); user
    gestures come back through the callbacks in :class:`BoardConfig`.
    """

    def __init__(
        self, config: BoardConfig | None = None, parent: QWidget | None = None
    ) -> None:
        self._scene = BoardScene(config)
        super().__init__(self._scene, parent)
        self._destroyed = False

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

    @classmethod
    def create(cls, container: QWidget | None, config: BoardConfig) -> BoardView:
        """Build a board inside *container* (appended to its layout, if any)."""
        view = cls(config, container)
        if container is not None and container.layout() is not None:
            container.layout().addWidget(view)
        return view

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def set_position(self, position: str) -> None:
        if self._destroyed:
            return
        self._scene.set_position(position)

    def set_interactive(self, interactive: bool) -> None:
        if not self._destroyed:
            self._scene.set_interactive(interactive)

    def destroy_board(self) -> None:
        """Release the rendering surface. Further updates are ignored."""
        if self._destroyed:
            return
        self._destroyed = True
        self._scene.teardown()
        self.setScene(None)
        self.deleteLater()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
