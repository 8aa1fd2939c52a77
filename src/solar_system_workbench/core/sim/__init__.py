from .simulation import Integrator, Simulation, SymplecticEulerIntegrator

__all__ = [
    "Integrator",
    "Simulation",
    "SymplecticEulerIntegrator",
]
