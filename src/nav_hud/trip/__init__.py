"""Trip-state snapshots pushed by the navigation engine.

Public API
----------
TripState       - Idle | Navigating | Complete
Navigating      - active trip with visual instruction and progress
TripStateParser - engine JSON → TripState
"""

from nav_hud.trip.models import (
    Complete,
    Idle,
    LaneInfo,
    Navigating,
    SpokenInstruction,
    TripProgress,
    TripState,
    VisualInstruction,
    VisualInstructionContent,
)
from nav_hud.trip.parser import TripStateParser

__all__ = [
    "Complete",
    "Idle",
    "LaneInfo",
    "Navigating",
    "SpokenInstruction",
    "TripProgress",
    "TripState",
    "TripStateParser",
    "VisualInstruction",
    "VisualInstructionContent",
]
