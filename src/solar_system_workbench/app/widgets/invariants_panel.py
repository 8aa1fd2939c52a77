from __future__ import annotations

import numpy as np
from PySide6 import QtWidgets

from ...core.errors import DegenerateConfiguration
from ...core.physics import total_energy, total_mass, total_momentum
from ...core.sim import Simulation


class InvariantsPanel(QtWidgets.QGroupBox):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("Invariants", parent)
        layout = QtWidgets.QFormLayout(self)

        self._time = QtWidgets.QLabel("-")
        self._time_scale = QtWidgets.QLabel("-")
        self._total_mass = QtWidgets.QLabel("-")
        self._momentum = QtWidgets.QLabel("-")
        self._energy = QtWidgets.QLabel("-")

        layout.addRow("Elapsed (days)", self._time)
        layout.addRow("Time scale", self._time_scale)
        layout.addRow("Total Mass (kg)", self._total_mass)
        layout.addRow("||sum(m v)||", self._momentum)
        layout.addRow("Total Energy (J)", self._energy)

    def update_values(self, sim: Simulation | None) -> None:
        if sim is None or len(sim) == 0:
            for label in (self._time, self._time_scale, self._total_mass, self._momentum, self._energy):
                label.setText("-")
            return

        bodies = sim.bodies()
        self._time.setText(f"{sim.time / 86400.0:.2f}")
        self._time_scale.setText(f"{sim.time_scale:.3f}")
        self._total_mass.setText(f"{total_mass(bodies):.4e}")
        self._momentum.setText(f"{np.linalg.norm(total_momentum(bodies)):.4e}")
        try:
            self._energy.setText(f"{total_energy(bodies, sim.gravitational_constant):.6e}")
        except DegenerateConfiguration:
            self._energy.setText("undefined")
