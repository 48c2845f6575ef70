"""Pydantic response schemas for the Web API."""

from __future__ import annotations

import math

from pydantic import BaseModel

from nav_hud.instructions.renderer import ManeuverPanel


class HealthResponse(BaseModel):
    status: str
    version: str


class PanelResponse(BaseModel):
    visible: bool
    text: str | None = None
    rounded_distance_m: int | None = None
    distance_label: str | None = None
    maneuver_type: str | None = None
    maneuver_modifier: str | None = None
    icon: str | None = None

    @classmethod
    def from_panel(cls, panel: ManeuverPanel | None, icon: object = None) -> PanelResponse:
        if panel is None:
            return cls(visible=False)
        content = panel.icon.primary_content
        distance = panel.rounded_distance_m
        # JSON has no NaN; distance_label still carries the raw value
        if not math.isfinite(distance):
            distance = None
        return cls(
            visible=True,
            text=panel.text,
            rounded_distance_m=distance,
            distance_label=panel.distance_label,
            maneuver_type=content.maneuver_type,
            maneuver_modifier=content.maneuver_modifier,
            icon=icon if isinstance(icon, str) else None,
        )
