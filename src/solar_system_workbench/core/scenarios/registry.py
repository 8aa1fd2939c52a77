from __future__ import annotations

import logging
from typing import Dict, Iterator, List

from ..scenario_definition import ScenarioDefinition
from ..sim import Simulation
from .base import Scenario, create_simulation

_LOG = logging.getLogger(__name__)


class ScenarioRegistry:
    """Built-in scenarios keyed by id, in registration order."""

    def __init__(self) -> None:
        self._by_id: Dict[str, Scenario] = {}

    def __contains__(self, scenario_id: object) -> bool:
        return scenario_id in self._by_id

    def __iter__(self) -> Iterator[Scenario]:
        return iter(list(self._by_id.values()))

    def __len__(self) -> int:
        return len(self._by_id)

    def register(self, scenario: Scenario) -> Scenario:
        scenario_id = scenario.scenario_id
        if scenario_id in self._by_id:
            raise ValueError(f"Duplicate scenario id: {scenario_id}")
        self._by_id[scenario_id] = scenario
        _LOG.debug("Registered scenario %s (%s)", scenario_id, scenario.name)
        return scenario

    def get(self, scenario_id: str) -> Scenario:
        if scenario_id not in self._by_id:
            known = ", ".join(self._by_id) or "none"
            raise KeyError(f"Unknown scenario id: {scenario_id} (known: {known})")
        return self._by_id[scenario_id]

    def definition(self, scenario_id: str) -> ScenarioDefinition:
        return self.get(scenario_id).definition()

    def create(self, scenario_id: str) -> Simulation:
        return create_simulation(self.get(scenario_id))

    def ids(self) -> List[str]:
        return list(self._by_id)

    def all(self) -> List[Scenario]:
        return list(self)


scenario_registry = ScenarioRegistry()
