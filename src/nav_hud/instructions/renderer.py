"""Maneuver panel rendering — trip state to display-ready data."""

from __future__ import annotations

import math
from dataclasses import dataclass

from nav_hud.trip.models import Navigating, TripState, VisualInstruction


def round_to_nearest_ten(meters: float) -> int | float:
    """Round *meters* to the nearest multiple of 10.

    Ties round up (toward positive infinity), so ``5 -> 10`` and
    ``-5 -> 0``.  Finite input gives an ``int``; NaN and infinities are
    returned unchanged as floats.

    Examples
    --------
    >>> round_to_nearest_ten(347)
    350
    >>> round_to_nearest_ten(15)
    20
    """
    tens = meters / 10
    if not math.isfinite(tens):
        return tens * 10
    whole = math.floor(tens)
    # tens - whole is exact for any float below 2**52
    if tens - whole >= 0.5:
        whole += 1
    return int(whole) * 10


@dataclass(frozen=True)
class ManeuverPanel:
    """What the maneuver panel shows for one trip-state snapshot.

    Parameters
    ----------
    icon:
        Visual instruction handed to the icon renderer.
    text:
        Primary instruction text, verbatim.
    rounded_distance_m:
        Distance to the maneuver rounded to the nearest 10 m.
    """

    icon: VisualInstruction
    text: str
    rounded_distance_m: int | float

    @property
    def distance_label(self) -> str:
        return f"{self.rounded_distance_m}m"


class InstructionsRenderer:
    """Maps a :data:`~nav_hud.trip.models.TripState` to a :class:`ManeuverPanel`.

    Stateless: every call depends only on its argument, so the same instance
    can be shared between threads.
    """

    def classify(self, state: TripState | None) -> Navigating | None:
        """Return the navigating payload, or None when nothing should render."""
        if isinstance(state, Navigating):
            return state
        return None

    def format_distance(self, meters: float) -> int | float:
        return round_to_nearest_ten(meters)

    def render(self, state: TripState | None) -> ManeuverPanel | None:
        """Return the panel for *state*, or None to render nothing.

        Payload fields are passed through without validation.
        """
        navigating = self.classify(state)
        if navigating is None:
            return None

        instruction = navigating.visual_instruction
        return ManeuverPanel(
            icon=instruction,
            text=instruction.primary_content.text,
            rounded_distance_m=self.format_distance(
                navigating.progress.distance_to_next_maneuver
            ),
        )
