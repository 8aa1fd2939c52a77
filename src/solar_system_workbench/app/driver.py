from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.errors import DegenerateConfiguration
from ..core.model import BodyState
from ..core.scenario_definition import ScenarioDefinition, simulation_from_definition
from ..core.sim import Simulation

_LOG = logging.getLogger(__name__)

SPEED_UP_FACTOR = 1.1
SLOW_DOWN_FACTOR = 0.9
ZOOM_FACTOR = 1.1


@dataclass
class DriverContext:
    definition: ScenarioDefinition
    simulation: Simulation
    scale_factor: float


class SimulationDriver:
    """
    Owns frame cadence and the controls that sit outside the physics core.

    ``tick`` advances the simulation by the scenario's base step. A
    ``DegenerateConfiguration`` freezes the driver until ``reset``.
    """

    def __init__(self) -> None:
        self._context: DriverContext | None = None
        self._paused = False
        self._error: DegenerateConfiguration | None = None

    @property
    def definition(self) -> ScenarioDefinition | None:
        return None if self._context is None else self._context.definition

    @property
    def simulation(self) -> Simulation | None:
        return None if self._context is None else self._context.simulation

    @property
    def scale_factor(self) -> float:
        return 1.0 if self._context is None else self._context.scale_factor

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def frozen(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> DegenerateConfiguration | None:
        return self._error

    def load(self, definition: ScenarioDefinition) -> None:
        self._context = DriverContext(
            definition=definition,
            simulation=simulation_from_definition(definition),
            scale_factor=float(definition.view_scale),
        )
        self._error = None

    def reset(self) -> None:
        if self._context is None:
            return
        scale_factor = self._context.scale_factor
        self.load(self._context.definition)
        self._context.scale_factor = scale_factor

    def tick(self) -> bool:
        """Advance one frame. Returns False when nothing was stepped."""
        if self._context is None or self._paused or self._error is not None:
            return False
        try:
            self._context.simulation.step(self._context.definition.simulation.dt)
        except DegenerateConfiguration as exc:
            self._error = exc
            _LOG.warning("Simulation frozen: %s", exc)
            return False
        return True

    def toggle_pause(self) -> bool:
        self._paused = not self._paused
        return self._paused

    def speed_up(self) -> float:
        return self._require_simulation().scale_time_by(SPEED_UP_FACTOR)

    def slow_down(self) -> float:
        return self._require_simulation().scale_time_by(SLOW_DOWN_FACTOR)

    def zoom_out(self) -> float:
        context = self._require_context()
        context.scale_factor *= ZOOM_FACTOR
        return context.scale_factor

    def zoom_in(self) -> float:
        context = self._require_context()
        context.scale_factor /= ZOOM_FACTOR
        return context.scale_factor

    def view_positions(self) -> list[tuple[BodyState, float, float]]:
        """Bodies with their x/y projection divided by the view scale."""
        if self._context is None:
            return []
        scale = self._context.scale_factor
        return [
            (state, float(state.position[0]) / scale, float(state.position[1]) / scale)
            for state in self._context.simulation.bodies()
        ]

    def _require_context(self) -> DriverContext:
        if self._context is None:
            raise RuntimeError("No scenario loaded")
        return self._context

    def _require_simulation(self) -> Simulation:
        return self._require_context().simulation
