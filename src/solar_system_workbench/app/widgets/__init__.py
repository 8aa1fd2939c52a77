from .invariants_panel import InvariantsPanel
from .scene_view import SceneView

__all__ = [
    "InvariantsPanel",
    "SceneView",
]
