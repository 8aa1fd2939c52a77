from __future__ import annotations


class SimulationError(Exception):
    """Base class for failures raised by the physics core."""


class InvalidMass(SimulationError, ValueError):
    def __init__(self, mass: float) -> None:
        super().__init__(f"Mass must be positive and finite, got {mass!r}")
        self.mass = mass


class DegenerateConfiguration(SimulationError, ArithmeticError):
    """Two distinct bodies coincide or nearly coincide, so the force between them is not finite."""

    def __init__(self, first: int, second: int) -> None:
        super().__init__(f"Bodies {first} and {second} are too close for a finite gravitational force")
        self.first = first
        self.second = second
