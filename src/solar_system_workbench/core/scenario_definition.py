from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

import numpy as np

from .model import Body, DisplayAttributes
from .physics import G_DEFAULT
from .sim import Integrator, Simulation, SymplecticEulerIntegrator

_LOG = logging.getLogger(__name__)

SCENARIO_SCHEMA_VERSION = 1

INTEGRATOR_IDS: dict[str, type[Integrator]] = {
    "symplectic_euler": SymplecticEulerIntegrator,
}


@dataclass
class SimulationDefinition:
    dt: float = 60.0
    time_scale: float = 1.0
    gravitational_constant: float = G_DEFAULT
    integrator: str = "symplectic_euler"


@dataclass
class BodyDefinition:
    name: str
    mass: float
    position: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=float))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=float))
    color: str = "#ffffff"
    radius: float = 5.0


@dataclass
class ScenarioDefinition:
    name: str
    simulation: SimulationDefinition = field(default_factory=SimulationDefinition)
    bodies: List[BodyDefinition] = field(default_factory=list)
    # Metres per view unit for the presentation layer.
    view_scale: float = 1.0e9
    schema_version: int = SCENARIO_SCHEMA_VERSION


def integrator_from_id(integrator_id: str) -> Integrator:
    integrator_cls = INTEGRATOR_IDS.get(integrator_id)
    if integrator_cls is None:
        raise ValueError(f"Unknown integrator id: {integrator_id}")
    return integrator_cls()


def integrator_id_from_instance(integrator: Integrator) -> str:
    for key, integrator_cls in INTEGRATOR_IDS.items():
        if isinstance(integrator, integrator_cls):
            return key
    raise ValueError(f"Unsupported integrator: {type(integrator)}")


def body_from_definition(defn: BodyDefinition) -> Body:
    return Body(
        mass=float(defn.mass),
        position=np.array(defn.position, dtype=float),
        velocity=np.array(defn.velocity, dtype=float),
        display=DisplayAttributes(label=defn.name, color=defn.color, radius=float(defn.radius)),
    )


def bodies_from_definition(bodies: Iterable[BodyDefinition]) -> list[Body]:
    return [body_from_definition(body) for body in bodies]


def simulation_from_definition(defn: ScenarioDefinition) -> Simulation:
    sim = Simulation(
        gravitational_constant=float(defn.simulation.gravitational_constant),
        time_scale=float(defn.simulation.time_scale),
        integrator=integrator_from_id(defn.simulation.integrator),
    )
    sim.add_bodies(bodies_from_definition(defn.bodies))
    _LOG.debug("Built simulation %r with %d bodies", defn.name, len(sim))
    return sim
