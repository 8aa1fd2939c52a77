from __future__ import annotations

from typing import Protocol

from ..scenario_definition import ScenarioDefinition, simulation_from_definition
from ..sim import Simulation


class Scenario(Protocol):
    scenario_id: str
    name: str

    def definition(self) -> ScenarioDefinition:
        ...


def create_simulation(scenario: Scenario) -> Simulation:
    return simulation_from_definition(scenario.definition())
