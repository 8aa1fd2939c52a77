from __future__ import annotations

import numpy as np

from ..scenario_definition import BodyDefinition, ScenarioDefinition, SimulationDefinition
from .registry import scenario_registry

# name, mass (kg), orbital radius (m), orbital speed (m/s), color
_CATALOG = [
    ("Mercury", 3.3011e23, 5.79e10, 47.87e3, "#a9a9a9"),
    ("Venus", 4.8675e24, 1.082e11, 35.02e3, "#ffcc99"),
    ("Earth", 5.972e24, 1.496e11, 29.78e3, "#0000ff"),
    ("Mars", 6.417e23, 2.279e11, 24.07e3, "#ff0000"),
    ("Jupiter", 1.898e27, 7.785e11, 13.07e3, "#ffa500"),
    ("Saturn", 5.683e26, 1.429e12, 9.68e3, "#ffdfba"),
    ("Uranus", 8.681e25, 2.871e12, 6.80e3, "#add8e6"),
    ("Neptune", 1.024e26, 4.495e12, 5.43e3, "#00008b"),
]

SUN_MASS = 1.989e30


class SolarSystemScenario:
    scenario_id = "solar_system"
    name = "Solar System"

    def definition(self) -> ScenarioDefinition:
        bodies = [
            BodyDefinition(name="Sun", mass=SUN_MASS, color="#ffa500", radius=10.0),
        ]
        # Planets start lined up on +x, moving along +y.
        for name, mass, distance, speed, color in _CATALOG:
            bodies.append(
                BodyDefinition(
                    name=name,
                    mass=mass,
                    position=np.array([distance, 0.0, 0.0], dtype=float),
                    velocity=np.array([0.0, speed, 0.0], dtype=float),
                    color=color,
                    radius=5.0,
                )
            )
        return ScenarioDefinition(
            name=self.name,
            simulation=SimulationDefinition(dt=60.0),
            bodies=bodies,
            view_scale=1.0e9,
        )


scenario_registry.register(SolarSystemScenario())
