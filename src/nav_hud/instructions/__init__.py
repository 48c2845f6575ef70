"""Maneuver panel: trip state → icon, instruction text and rounded distance."""

from nav_hud.instructions.icons import GlyphIconRenderer, NullIconRenderer
from nav_hud.instructions.renderer import (
    InstructionsRenderer,
    ManeuverPanel,
    round_to_nearest_ten,
)
from nav_hud.instructions.view import InstructionsView

__all__ = [
    "GlyphIconRenderer",
    "InstructionsRenderer",
    "InstructionsView",
    "ManeuverPanel",
    "NullIconRenderer",
    "round_to_nearest_ten",
]
