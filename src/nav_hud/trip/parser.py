"""TripStateParser — converts navigation-engine JSON to a typed TripState."""

from __future__ import annotations

import logging
import math

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

_logger = logging.getLogger(__name__)


def _parse_lane(raw: dict) -> LaneInfo:
    return LaneInfo(
        active=bool(raw.get("active", False)),
        directions=list(raw.get("directions") or []),
        active_direction=raw.get("activeDirection"),
    )


def _parse_content(raw: dict | None) -> VisualInstructionContent | None:
    if raw is None:
        return None
    lanes = raw.get("laneInfo")
    return VisualInstructionContent(
        text=raw.get("text", ""),
        maneuver_type=raw.get("maneuverType"),
        maneuver_modifier=raw.get("maneuverModifier"),
        roundabout_exit_degrees=raw.get("roundaboutExitDegrees"),
        lane_info=[_parse_lane(lane) for lane in lanes] if lanes else None,
    )


def _parse_visual_instruction(raw: dict) -> VisualInstruction:
    return VisualInstruction(
        primary_content=_parse_content(raw.get("primaryContent") or {}),
        secondary_content=_parse_content(raw.get("secondaryContent")),
        sub_content=_parse_content(raw.get("subContent")),
        trigger_distance_before_maneuver=raw.get("triggerDistanceBeforeManeuver", 0.0),
    )


def _parse_spoken_instruction(raw: dict | None) -> SpokenInstruction | None:
    if raw is None:
        return None
    return SpokenInstruction(
        text=raw.get("text", ""),
        ssml=raw.get("ssml"),
        trigger_distance_before_maneuver=raw.get("triggerDistanceBeforeManeuver", 0.0),
        utterance_id=raw.get("utteranceId"),
    )


def _as_distance(value: object) -> float:
    """Return *value* as the number the panel arithmetic sees. Never raises.

    ``None`` counts as 0, numeric strings are read as numbers and anything
    else non-numeric becomes NaN, which then shows up on the panel.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def _parse_progress(raw: dict) -> TripProgress:
    # A missing distance becomes NaN and shows up as such on the panel.
    return TripProgress(
        distance_to_next_maneuver=_as_distance(raw.get("distanceToNextManeuver", math.nan)),
        distance_remaining=raw.get("distanceRemaining", 0.0),
        duration_remaining=raw.get("durationRemaining", 0.0),
    )


class TripStateParser:
    """Parses an externally tagged trip-state snapshot into a :data:`TripState`.

    The engine serialises the union with the variant name as the only key,
    e.g. ``{"Navigating": {...}}``.  Payload-less variants may also arrive as
    a bare string (``"Idle"``).  Field names are camelCase.

    Payloads are assumed to be validated upstream.  Missing optional fields
    fall back to defaults; nothing is rejected.
    """

    def parse(self, raw: dict | str | None) -> TripState | None:
        """Convert *raw* to a trip state, or None when no trip is reported."""
        if raw is None:
            return None

        if isinstance(raw, str):
            tag, payload = raw, {}
        else:
            if not raw:
                return None
            tag, payload = next(iter(raw.items()))
            payload = payload or {}

        if tag == "Idle":
            return Idle()
        if tag == "Complete":
            return Complete()
        if tag == "Navigating":
            return Navigating(
                visual_instruction=_parse_visual_instruction(
                    payload.get("visualInstruction") or {}
                ),
                progress=_parse_progress(payload.get("progress") or {}),
                spoken_instruction=_parse_spoken_instruction(
                    payload.get("spokenInstruction")
                ),
            )

        _logger.debug("Ignoring unknown trip state variant %r", tag)
        return None
