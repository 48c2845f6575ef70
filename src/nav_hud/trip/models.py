"""Trip-state data models.

A :data:`TripState` is one of :class:`Idle`, :class:`Navigating` or
:class:`Complete`.  Only :class:`Navigating` carries a maneuver to display.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class LaneInfo:
    """A single lane in a lane-guidance banner.

    Args:
        active: Whether the lane is valid for the upcoming maneuver.
        directions: Directions the lane allows (e.g. ``["left", "straight"]``).
        active_direction: Direction to take from this lane, when active.
    """

    active: bool
    directions: list[str] = field(default_factory=list)
    active_direction: str | None = None


@dataclass(frozen=True)
class VisualInstructionContent:
    """One line of a maneuver banner."""

    text: str
    """Human-readable instruction text, e.g. ``"Turn right onto Main St"``."""

    maneuver_type: str | None = None
    """Maneuver type such as ``"turn"``, ``"merge"`` or ``"roundabout"``."""

    maneuver_modifier: str | None = None
    """Direction modifier such as ``"left"`` or ``"slight right"``."""

    roundabout_exit_degrees: int | None = None
    """Exit angle for roundabout maneuvers, in degrees."""

    lane_info: list[LaneInfo] | None = None


@dataclass(frozen=True)
class VisualInstruction:
    """Structured description of the upcoming maneuver.

    ``primary_content`` is always shown; the secondary and sub lines are
    optional.
    """

    primary_content: VisualInstructionContent
    secondary_content: VisualInstructionContent | None = None
    sub_content: VisualInstructionContent | None = None
    trigger_distance_before_maneuver: float = 0.0


@dataclass(frozen=True)
class SpokenInstruction:
    """Voice prompt attached to a navigating snapshot. Never rendered here."""

    text: str
    ssml: str | None = None
    trigger_distance_before_maneuver: float = 0.0
    utterance_id: str | None = None


@dataclass(frozen=True)
class TripProgress:
    """Progress along the current route."""

    distance_to_next_maneuver: float
    """Metres from the user's position to the upcoming maneuver."""

    distance_remaining: float = 0.0
    """Metres left on the whole route."""

    duration_remaining: float = 0.0
    """Seconds left on the whole route."""


@dataclass(frozen=True)
class Idle:
    """No trip in progress."""


@dataclass(frozen=True)
class Navigating:
    """An active trip with an upcoming maneuver."""

    visual_instruction: VisualInstruction
    progress: TripProgress
    spoken_instruction: SpokenInstruction | None = None


@dataclass(frozen=True)
class Complete:
    """The user has arrived at the final waypoint."""


TripState = Union[Idle, Navigating, Complete]
