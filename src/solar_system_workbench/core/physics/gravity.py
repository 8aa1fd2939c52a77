from __future__ import annotations

from typing import Sequence

import numpy as np

from ..errors import DegenerateConfiguration
from ..model import MassPointLike

G_DEFAULT = 6.67430e-11  # m^3 kg^-1 s^-2


def compute_forces(bodies: Sequence[MassPointLike], gravitational_constant: float = G_DEFAULT) -> np.ndarray:
    """
    Net Newtonian attraction on every body, index-aligned with ``bodies``.

    Every ordered pair is visited, so body i sums its own contribution from
    each j instead of borrowing the reaction from j's pass. Raises
    ``DegenerateConfiguration`` when two bodies share a position or sit so
    close that the force between them is not a finite number.
    """
    count = len(bodies)
    forces = np.zeros((count, 3), dtype=float)
    # numpy scalars overflow to inf instead of raising; the sum is checked per pair.
    with np.errstate(over="ignore", under="ignore", divide="ignore", invalid="ignore"):
        for i in range(count):
            body = bodies[i]
            for j in range(count):
                if i == j:
                    continue
                other = bodies[j]
                direction = other.position - body.position
                distance = np.linalg.norm(direction)
                if distance == 0.0:
                    raise DegenerateConfiguration(i, j)
                forces[i] += direction * (gravitational_constant * body.mass * other.mass / distance**3)
                if not np.all(np.isfinite(forces[i])):
                    raise DegenerateConfiguration(i, j)
    return forces


def pair_force(body: MassPointLike, other: MassPointLike, gravitational_constant: float = G_DEFAULT) -> np.ndarray:
    """Force exerted on ``body`` by ``other``."""
    return compute_forces([body, other], gravitational_constant)[0]
