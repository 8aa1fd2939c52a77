from __future__ import annotations

from typing import Iterable

import numpy as np

from ..errors import DegenerateConfiguration
from ..model import MassPointLike, Vector
from .gravity import G_DEFAULT


def total_mass(bodies: Iterable[MassPointLike]) -> float:
    masses = [body.mass for body in bodies]
    return float(np.sum(masses))


def center_of_mass(bodies: Iterable[MassPointLike]) -> Vector:
    bodies_list = list(bodies)
    if not bodies_list:
        raise ValueError("No bodies provided")
    masses = np.array([body.mass for body in bodies_list], dtype=float)
    positions = np.stack([body.position for body in bodies_list])
    return np.sum(positions * masses[:, None], axis=0) / np.sum(masses)


def total_momentum(bodies: Iterable[MassPointLike]) -> Vector:
    bodies_list = list(bodies)
    if not bodies_list:
        return np.zeros(3, dtype=float)
    masses = np.array([body.mass for body in bodies_list], dtype=float)
    velocities = np.stack([body.velocity for body in bodies_list])
    return np.sum(velocities * masses[:, None], axis=0)


def kinetic_energy(bodies: Iterable[MassPointLike]) -> float:
    return float(sum(0.5 * body.mass * float(np.dot(body.velocity, body.velocity)) for body in bodies))


def potential_energy(bodies: Iterable[MassPointLike], gravitational_constant: float = G_DEFAULT) -> float:
    bodies_list = list(bodies)
    energy = 0.0
    for i in range(len(bodies_list)):
        for j in range(i + 1, len(bodies_list)):
            distance = float(np.linalg.norm(bodies_list[j].position - bodies_list[i].position))
            if distance == 0.0:
                raise DegenerateConfiguration(i, j)
            energy -= gravitational_constant * bodies_list[i].mass * bodies_list[j].mass / distance
    return energy


def total_energy(bodies: Iterable[MassPointLike], gravitational_constant: float = G_DEFAULT) -> float:
    bodies_list = list(bodies)
    return kinetic_energy(bodies_list) + potential_energy(bodies_list, gravitational_constant)
