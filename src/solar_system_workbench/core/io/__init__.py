from .scenario_io import (
    deserialize_scenario_definition,
    load_scenario_file,
    scenario_definition_from_dict,
    scenario_definition_to_dict,
    serialize_scenario_definition,
)

__all__ = [
    "deserialize_scenario_definition",
    "load_scenario_file",
    "scenario_definition_from_dict",
    "scenario_definition_to_dict",
    "serialize_scenario_definition",
]
