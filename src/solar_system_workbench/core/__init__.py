from .errors import DegenerateConfiguration, InvalidMass, SimulationError
from .model import (
    Body,
    BodyId,
    BodyState,
    DisplayAttributes,
    MassPointLike,
    Vector,
)
from .physics import (
    G_DEFAULT,
    center_of_mass,
    compute_forces,
    kinetic_energy,
    potential_energy,
    total_energy,
    total_mass,
    total_momentum,
)
from .sim import Integrator, Simulation, SymplecticEulerIntegrator

__all__ = [
    "Body",
    "BodyId",
    "BodyState",
    "DegenerateConfiguration",
    "DisplayAttributes",
    "G_DEFAULT",
    "InvalidMass",
    "MassPointLike",
    "SimulationError",
    "Vector",
    "center_of_mass",
    "compute_forces",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    "total_mass",
    "total_momentum",
    "Integrator",
    "Simulation",
    "SymplecticEulerIntegrator",
]
