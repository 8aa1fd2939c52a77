from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol

import numpy as np

from ..errors import InvalidMass

Vector = np.ndarray
BodyId = int


def _to_vector(values: Iterable[float], *, length: int = 3) -> Vector:
    arr = np.asarray(list(values), dtype=float)
    if arr.ndim != 1:
        raise ValueError("Vector must be 1D")
    if arr.size != length:
        raise ValueError(f"Vector must have length {length}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Vector components must be finite")
    return arr


def _frozen_copy(vec: Vector) -> Vector:
    arr = np.array(vec, dtype=float)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True)
class DisplayAttributes:
    label: str
    color: str = "#ffffff"
    radius: float = 5.0


@dataclass
class Body:
    """A point mass. Only the integrator mutates position and velocity after construction."""

    mass: float
    position: Vector = field(default_factory=lambda: np.zeros(3, dtype=float))
    velocity: Vector = field(default_factory=lambda: np.zeros(3, dtype=float))
    # Never read by the force model or the integrator.
    display: Any = None

    def __post_init__(self) -> None:
        mass = float(self.mass)
        if not math.isfinite(mass) or mass <= 0:
            raise InvalidMass(self.mass)
        self.mass = mass
        self.position = _to_vector(self.position)
        self.velocity = _to_vector(self.velocity)


class MassPointLike(Protocol):
    mass: float
    position: Vector
    velocity: Vector


@dataclass(frozen=True)
class BodyState:
    body_id: BodyId
    mass: float
    position: Vector
    velocity: Vector
    display: Any = None

    @property
    def momentum(self) -> Vector:
        return self.mass * self.velocity


def snapshot(body_id: BodyId, body: Body) -> BodyState:
    return BodyState(
        body_id=body_id,
        mass=body.mass,
        position=_frozen_copy(body.position),
        velocity=_frozen_copy(body.velocity),
        display=body.display,
    )
