from __future__ import annotations

import math

import numpy as np

from ..physics import G_DEFAULT
from ..scenario_definition import BodyDefinition, ScenarioDefinition, SimulationDefinition
from .registry import scenario_registry


class BinaryStarScenario:
    scenario_id = "binary_star"
    name = "Equal-Mass Binary"

    star_mass = 2.0e30
    separation = 3.0e11

    def definition(self) -> ScenarioDefinition:
        # Each star circles the barycentre at half the separation.
        speed = math.sqrt(G_DEFAULT * self.star_mass / (2.0 * self.separation))
        half = 0.5 * self.separation
        bodies = [
            BodyDefinition(
                name="Star A",
                mass=self.star_mass,
                position=np.array([-half, 0.0, 0.0], dtype=float),
                velocity=np.array([0.0, -speed, 0.0], dtype=float),
                color="#ffdd44",
                radius=9.0,
            ),
            BodyDefinition(
                name="Star B",
                mass=self.star_mass,
                position=np.array([half, 0.0, 0.0], dtype=float),
                velocity=np.array([0.0, speed, 0.0], dtype=float),
                color="#ff7043",
                radius=9.0,
            ),
        ]
        return ScenarioDefinition(
            name=self.name,
            simulation=SimulationDefinition(dt=600.0),
            bodies=bodies,
            view_scale=2.0e9,
        )


scenario_registry.register(BinaryStarScenario())
