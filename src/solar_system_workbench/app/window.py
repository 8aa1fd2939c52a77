from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from ..core.scenario_definition import ScenarioDefinition
from ..core.scenarios import load_builtin_scenarios, scenario_registry
from .driver import SimulationDriver
from .widgets import InvariantsPanel, SceneView

FRAME_INTERVAL_MS = 16
VIEW_HALF_WIDTH = 400.0


class MainWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        scenario_id: str | None = None,
        definition: ScenarioDefinition | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Solar System Workbench")
        self.resize(1000, 800)
        self.setFocusPolicy(QtCore.Qt.StrongFocus)

        load_builtin_scenarios()
        self._driver = SimulationDriver()

        self._scene = SceneView()
        self._scene.set_view_range(VIEW_HALF_WIDTH)
        self.setCentralWidget(self._scene)

        self._invariants = InvariantsPanel()
        self._invariants.setTitle("")
        self._invariants_dock = QtWidgets.QDockWidget("Invariants", self)
        self._invariants_dock.setWidget(self._invariants)
        self._invariants_dock.setAllowedAreas(
            QtCore.Qt.LeftDockWidgetArea | QtCore.Qt.RightDockWidgetArea
        )
        self.addDockWidget(QtCore.Qt.RightDockWidgetArea, self._invariants_dock)

        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self._on_tick)

        self._reset_action = QtGui.QAction("Reset", self)
        self._reset_action.triggered.connect(self._reset)

        self._show_labels_action = QtGui.QAction("Show Labels", self)
        self._show_labels_action.setCheckable(True)
        self._show_labels_action.setChecked(True)
        self._show_labels_action.toggled.connect(lambda _checked: self._update_ui())

        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")
        scenario_menu = file_menu.addMenu("Scenario")
        self._scenario_group = QtGui.QActionGroup(self)
        self._scenario_group.setExclusive(True)
        for scenario in scenario_registry:
            action = QtGui.QAction(scenario.name, self)
            action.setCheckable(True)
            action.setData(scenario.scenario_id)
            action.triggered.connect(self._on_scenario_action)
            self._scenario_group.addAction(action)
            scenario_menu.addAction(action)

        edit_menu = menu_bar.addMenu("Edit")
        edit_menu.addAction(self._reset_action)

        view_menu = menu_bar.addMenu("View")
        view_menu.addAction(self._show_labels_action)
        view_menu.addAction(self._invariants_dock.toggleViewAction())

        scenario_ids = scenario_registry.ids()
        if definition is not None:
            self._set_definition(definition)
        elif scenario_id is None and scenario_ids:
            self._set_scenario(scenario_ids[0])
        elif scenario_id is not None:
            self._set_scenario(scenario_id)
        self._timer.start(FRAME_INTERVAL_MS)

    def keyPressEvent(self, event: QtGui.QKeyEvent) -> None:
        if self._driver.simulation is None:
            super().keyPressEvent(event)
            return
        key = event.key()
        if key == QtCore.Qt.Key_Up:
            self._show_message(f"Speed multiplier increased to: {self._driver.speed_up():.4g}")
        elif key == QtCore.Qt.Key_Down:
            self._show_message(f"Speed multiplier decreased to: {self._driver.slow_down():.4g}")
        elif key == QtCore.Qt.Key_Right:
            self._show_message(f"Scale factor increased to: {self._driver.zoom_out():.4g}")
        elif key == QtCore.Qt.Key_Left:
            self._show_message(f"Scale factor decreased to: {self._driver.zoom_in():.4g}")
        elif key == QtCore.Qt.Key_Space:
            self._show_message("Paused" if self._driver.toggle_pause() else "Running")
        elif key == QtCore.Qt.Key_R:
            self._reset()
        else:
            super().keyPressEvent(event)
            return
        self._update_ui()

    def _on_scenario_action(self) -> None:
        action = self.sender()
        if not isinstance(action, QtGui.QAction):
            return
        scenario_id = action.data()
        if scenario_id is None:
            return
        self._set_scenario(str(scenario_id))

    def _set_scenario(self, scenario_id: str) -> None:
        scenario = scenario_registry.get(scenario_id)
        self._driver.load(scenario.definition())
        for action in self._scenario_group.actions():
            action.setChecked(action.data() == scenario_id)
        self._show_message(f"Loaded {scenario.name}")
        self._update_ui()

    def _set_definition(self, definition: ScenarioDefinition) -> None:
        self._driver.load(definition)
        for action in self._scenario_group.actions():
            action.setChecked(False)
        self._show_message(f"Loaded {definition.name}")
        self._update_ui()

    def _reset(self) -> None:
        self._driver.reset()
        self._show_message("Reset")
        self._update_ui()

    def _on_tick(self) -> None:
        was_frozen = self._driver.frozen
        if self._driver.tick():
            self._update_ui()
        elif self._driver.frozen and not was_frozen:
            self._show_message(f"Simulation stopped: {self._driver.error}", timeout_ms=0)

    def _update_ui(self) -> None:
        self._scene.set_bodies(self._driver.view_positions(), show_labels=self._show_labels_action.isChecked())
        self._invariants.update_values(self._driver.simulation)

    def _show_message(self, text: str, timeout_ms: int = 3000) -> None:
        self.statusBar().showMessage(text, timeout_ms)
