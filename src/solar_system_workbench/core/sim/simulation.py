from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Protocol, Sequence

import numpy as np

from ..model import Body, BodyId, BodyState, snapshot
from ..physics import G_DEFAULT, compute_forces

_LOG = logging.getLogger(__name__)


class Integrator(Protocol):
    def integrate(self, bodies: Sequence[Body], forces: np.ndarray, dt: float) -> None:
        ...


@dataclass
class SymplecticEulerIntegrator:
    """Semi-implicit Euler: velocity first, then position from the updated velocity."""

    def integrate(self, bodies: Sequence[Body], forces: np.ndarray, dt: float) -> None:
        forces = np.asarray(forces, dtype=float)
        if forces.shape != (len(bodies), 3):
            raise ValueError(f"Expected forces of shape {(len(bodies), 3)}, got {forces.shape}")
        for body, force in zip(bodies, forces):
            acceleration = force / body.mass
            body.velocity = body.velocity + acceleration * dt
            body.position = body.position + body.velocity * dt


class Simulation:
    def __init__(
        self,
        gravitational_constant: float = G_DEFAULT,
        time_scale: float = 1.0,
        integrator: Integrator | None = None,
    ) -> None:
        self._gravitational_constant = float(gravitational_constant)
        self._bodies: List[Body] = []
        self._time_scale = 1.0
        self.set_time_scale(time_scale)
        self.integrator: Integrator = integrator if integrator is not None else SymplecticEulerIntegrator()
        self.time = 0.0
        self.step_count = 0
        self._stepping = False

    @property
    def gravitational_constant(self) -> float:
        return self._gravitational_constant

    @property
    def time_scale(self) -> float:
        return self._time_scale

    def __len__(self) -> int:
        return len(self._bodies)

    def add_body(
        self,
        body: Body | float,
        position: Iterable[float] | None = None,
        velocity: Iterable[float] | None = None,
        display: Any = None,
    ) -> BodyId:
        if self._stepping:
            raise RuntimeError("Cannot add bodies while a step is in progress")
        if not isinstance(body, Body):
            body = Body(
                mass=body,
                position=np.zeros(3) if position is None else position,
                velocity=np.zeros(3) if velocity is None else velocity,
                display=display,
            )
        elif position is not None or velocity is not None or display is not None:
            raise ValueError("Pass either a Body or its constructor arguments, not both")
        else:
            # Re-validated copy; the caller keeps no handle on stored state.
            body = Body(mass=body.mass, position=body.position, velocity=body.velocity, display=body.display)
        self._bodies.append(body)
        body_id = len(self._bodies) - 1
        _LOG.debug("Added body %d (mass=%g)", body_id, body.mass)
        return body_id

    def add_bodies(self, bodies: Iterable[Body]) -> List[BodyId]:
        return [self.add_body(body) for body in bodies]

    def step(self, dt: float) -> None:
        dt = float(dt)
        if not math.isfinite(dt):
            raise ValueError("dt must be finite")
        if self._stepping:
            raise RuntimeError("step() is not reentrant")
        effective_dt = dt * self._time_scale
        self._stepping = True
        try:
            # Forces are staged in full before any body is touched, so a
            # DegenerateConfiguration leaves the state as it was.
            forces = compute_forces(self._bodies, self._gravitational_constant)
            self.integrator.integrate(self._bodies, forces, effective_dt)
        finally:
            self._stepping = False
        self.time += effective_dt
        self.step_count += 1

    def set_time_scale(self, factor: float) -> None:
        factor = float(factor)
        if not math.isfinite(factor):
            raise ValueError("time scale must be finite")
        self._time_scale = factor

    def scale_time_by(self, factor: float) -> float:
        self.set_time_scale(self._time_scale * float(factor))
        return self._time_scale

    def bodies(self) -> tuple[BodyState, ...]:
        return tuple(snapshot(idx, body) for idx, body in enumerate(self._bodies))

    def body(self, body_id: BodyId) -> BodyState:
        if body_id < 0 or body_id >= len(self._bodies):
            raise IndexError(f"Unknown body id: {body_id}")
        return snapshot(body_id, self._bodies[body_id])
