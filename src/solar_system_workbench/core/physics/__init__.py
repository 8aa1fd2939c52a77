from .gravity import G_DEFAULT, compute_forces, pair_force
from .invariants import (
    center_of_mass,
    kinetic_energy,
    potential_energy,
    total_energy,
    total_mass,
    total_momentum,
)

__all__ = [
    "G_DEFAULT",
    "center_of_mass",
    "compute_forces",
    "kinetic_energy",
    "pair_force",
    "potential_energy",
    "total_energy",
    "total_mass",
    "total_momentum",
]
