from .entities import (
    Body,
    BodyId,
    BodyState,
    DisplayAttributes,
    MassPointLike,
    Vector,
    snapshot,
)

__all__ = [
    "Body",
    "BodyId",
    "BodyState",
    "DisplayAttributes",
    "MassPointLike",
    "Vector",
    "snapshot",
]
