from .base import Scenario, create_simulation
from .registry import ScenarioRegistry, scenario_registry


def load_builtin_scenarios() -> None:
    # Import side effects to register built-in scenarios.
    from . import binary_star  # noqa: F401
    from . import solar_system  # noqa: F401


__all__ = [
    "Scenario",
    "ScenarioRegistry",
    "create_simulation",
    "scenario_registry",
    "load_builtin_scenarios",
]
