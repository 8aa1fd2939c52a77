from __future__ import annotations

from typing import List, Sequence

import pyqtgraph as pg
from PySide6 import QtCore, QtWidgets

from ...core.model import BodyState, DisplayAttributes


class SceneView(QtWidgets.QWidget):
    """Top-down view of the bodies, drawn in already-scaled view units."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._plot = pg.PlotWidget(background="k")
        self._plot.setFocusPolicy(QtCore.Qt.NoFocus)
        self._plot.setAspectLocked(True)
        self._plot.showGrid(x=True, y=True, alpha=0.15)
        self._plot.setLabel("bottom", "X")
        self._plot.setLabel("left", "Y")
        self._points = pg.ScatterPlotItem(pxMode=True)
        self._plot.addItem(self._points)
        self._labels: List[pg.TextItem] = []

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._plot)

    def set_view_range(self, half_width: float) -> None:
        self._plot.setXRange(-half_width, half_width, padding=0.0)
        self._plot.setYRange(-half_width, half_width, padding=0.0)

    def set_bodies(self, bodies: Sequence[tuple[BodyState, float, float]], show_labels: bool = True) -> None:
        spots = []
        for state, x, y in bodies:
            display = state.display if isinstance(state.display, DisplayAttributes) else None
            color = display.color if display is not None else "#ffffff"
            radius = display.radius if display is not None else 5.0
            spots.append(
                {
                    "pos": (x, y),
                    "size": 2.0 * radius,
                    "brush": pg.mkBrush(color),
                    "pen": pg.mkPen(color),
                }
            )
        self._points.setData(spots)
        self._sync_labels(bodies if show_labels else [])

    def clear(self) -> None:
        self._points.setData([])
        self._sync_labels([])

    def _sync_labels(self, bodies: Sequence[tuple[BodyState, float, float]]) -> None:
        while len(self._labels) > len(bodies):
            self._plot.removeItem(self._labels.pop())
        while len(self._labels) < len(bodies):
            label = pg.TextItem(color="#cccccc", anchor=(0.0, 1.0))
            self._plot.addItem(label)
            self._labels.append(label)
        for label, (state, x, y) in zip(self._labels, bodies):
            text = state.display.label if isinstance(state.display, DisplayAttributes) else str(state.body_id)
            label.setText(text)
            label.setPos(x, y)
