from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from ..physics import G_DEFAULT
from ..scenario_definition import (
    SCENARIO_SCHEMA_VERSION,
    BodyDefinition,
    ScenarioDefinition,
    SimulationDefinition,
)


def scenario_definition_to_dict(defn: ScenarioDefinition) -> Dict[str, Any]:
    return {
        "schema_version": defn.schema_version,
        "name": defn.name,
        "view_scale": defn.view_scale,
        "simulation": {
            "dt": defn.simulation.dt,
            "time_scale": defn.simulation.time_scale,
            "gravitational_constant": defn.simulation.gravitational_constant,
            "integrator": defn.simulation.integrator,
        },
        "bodies": [_body_to_dict(body) for body in defn.bodies],
    }


def _body_to_dict(body: BodyDefinition) -> Dict[str, Any]:
    return {
        "name": body.name,
        "mass": body.mass,
        "position": np.asarray(body.position, dtype=float).tolist(),
        "velocity": np.asarray(body.velocity, dtype=float).tolist(),
        "color": body.color,
        "radius": body.radius,
    }


def scenario_definition_from_dict(payload: Dict[str, Any]) -> ScenarioDefinition:
    version = int(payload.get("schema_version", 0))
    if version != SCENARIO_SCHEMA_VERSION:
        raise ValueError(f"Unsupported scenario schema version: {version}")
    simulation_payload = payload.get("simulation", {})
    simulation = SimulationDefinition(
        dt=float(simulation_payload.get("dt", 60.0)),
        time_scale=float(simulation_payload.get("time_scale", 1.0)),
        gravitational_constant=float(simulation_payload.get("gravitational_constant", G_DEFAULT)),
        integrator=str(simulation_payload.get("integrator", "symplectic_euler")),
    )
    bodies: List[BodyDefinition] = []
    for body_payload in payload.get("bodies", []):
        if "mass" not in body_payload:
            raise ValueError(f"Body {body_payload.get('name', '?')!r} is missing a mass")
        bodies.append(
            BodyDefinition(
                name=str(body_payload.get("name", "")),
                mass=float(body_payload["mass"]),
                position=np.array(body_payload.get("position", [0.0, 0.0, 0.0]), dtype=float),
                velocity=np.array(body_payload.get("velocity", [0.0, 0.0, 0.0]), dtype=float),
                color=str(body_payload.get("color", "#ffffff")),
                radius=float(body_payload.get("radius", 5.0)),
            )
        )
    return ScenarioDefinition(
        name=str(payload.get("name", "Untitled Scenario")),
        simulation=simulation,
        bodies=bodies,
        view_scale=float(payload.get("view_scale", 1.0e9)),
        schema_version=version,
    )


def serialize_scenario_definition(defn: ScenarioDefinition) -> str:
    return json.dumps(scenario_definition_to_dict(defn), indent=2)


def deserialize_scenario_definition(payload: str) -> ScenarioDefinition:
    return scenario_definition_from_dict(json.loads(payload))


def load_scenario_file(path: Path | str) -> ScenarioDefinition:
    return deserialize_scenario_definition(Path(path).read_text(encoding="utf-8"))
