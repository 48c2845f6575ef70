"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from nav_hud.instructions.icons import GlyphIconRenderer
from nav_hud.instructions.view import InstructionsView
from nav_hud.web.app import app, get_view


@pytest.fixture
def view():
    """Fresh view injected into the app for each test."""
    v = InstructionsView(icon_renderer=GlyphIconRenderer())
    app.dependency_overrides[get_view] = lambda: v
    yield v
    app.dependency_overrides.pop(get_view, None)


@pytest.fixture
def client(view):
    """FastAPI test client."""
    with TestClient(app) as c:
        yield c


def make_navigating_json(
    text: str = "Turn right",
    distance: float = 347.0,
    maneuver_type: str | None = "turn",
    maneuver_modifier: str | None = "right",
) -> dict:
    """Build an engine ``Navigating`` trip-state snapshot."""
    primary: dict = {"text": text}
    if maneuver_type is not None:
        primary["maneuverType"] = maneuver_type
    if maneuver_modifier is not None:
        primary["maneuverModifier"] = maneuver_modifier
    return {
        "Navigating": {
            "visualInstruction": {"primaryContent": primary},
            "progress": {"distanceToNextManeuver": distance},
        }
    }
