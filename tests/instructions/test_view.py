"""Tests for InstructionsView."""

from __future__ import annotations

import threading
import time
from unittest.mock import MagicMock

import pytest

from nav_hud.instructions.icons import GlyphIconRenderer, NullIconRenderer
from nav_hud.instructions.view import InstructionsView
from nav_hud.trip.models import (
    Complete,
    Idle,
    Navigating,
    TripProgress,
    VisualInstruction,
    VisualInstructionContent,
)
from nav_hud.trip.parser import TripStateParser


def _make_navigating(text: str = "Turn right", distance: float = 347.0) -> Navigating:
    return Navigating(
        visual_instruction=VisualInstruction(
            primary_content=VisualInstructionContent(
                text=text, maneuver_type="turn", maneuver_modifier="right"
            ),
        ),
        progress=TripProgress(distance_to_next_maneuver=distance),
    )


def test_update_navigating_renders_icon():
    icons = NullIconRenderer()
    view = InstructionsView(icon_renderer=icons)
    state = _make_navigating()

    panel = view.update(state)

    assert panel.text == "Turn right"
    assert panel.rounded_distance_m == 350
    assert icons.rendered == [state.visual_instruction]


@pytest.mark.parametrize("state", [None, Idle(), Complete()])
def test_update_suppressed_invokes_nothing(state):
    icons = MagicMock()
    view = InstructionsView(icon_renderer=icons)

    assert view.update(state) is None
    icons.render.assert_not_called()
    assert view.snapshot() == (None, None)


def test_snapshot_holds_icon_from_renderer():
    view = InstructionsView(icon_renderer=GlyphIconRenderer())
    view.update(_make_navigating())

    panel, icon = view.snapshot()
    assert panel is view.panel
    assert icon == "→"


def test_suppressed_push_clears_previous_panel():
    view = InstructionsView()
    view.update(_make_navigating())
    view.update(Idle())
    assert view.panel is None


def test_latest_push_wins():
    view = InstructionsView()
    view.update(_make_navigating("Turn right", 300))
    view.update(Complete())
    view.update(_make_navigating("Turn left", 12))

    assert view.panel.text == "Turn left"
    assert view.panel.rounded_distance_m == 10


def test_end_to_end_from_engine_json():
    icons = NullIconRenderer()
    view = InstructionsView(icon_renderer=icons)
    parser = TripStateParser()

    state = parser.parse(
        {
            "Navigating": {
                "visualInstruction": {"primaryContent": {"text": "Turn right"}},
                "progress": {"distanceToNextManeuver": 347},
            }
        }
    )
    panel = view.update(state)

    assert panel.text == "Turn right"
    assert panel.rounded_distance_m == 350
    assert icons.rendered == [state.visual_instruction]

    for raw in ({"Idle": {}}, None):
        assert view.update(parser.parse(raw)) is None
    assert len(icons.rendered) == 1


def test_concurrent_pushes_publish_the_later_one():
    entered = threading.Event()
    release = threading.Event()

    class _SlowFirstIcon:
        def __init__(self) -> None:
            self.calls = 0

        def render(self, instruction):
            self.calls += 1
            if self.calls == 1:
                entered.set()
                release.wait(timeout=2.0)
            return instruction.primary_content.text

    view = InstructionsView(icon_renderer=_SlowFirstIcon())
    first = threading.Thread(target=view.update, args=(_make_navigating("Turn right", 300),))
    second = threading.Thread(target=view.update, args=(_make_navigating("Turn left", 40),))

    first.start()
    assert entered.wait(timeout=2.0)
    second.start()
    time.sleep(0.05)
    release.set()
    first.join(timeout=2.0)
    second.join(timeout=2.0)

    panel, icon = view.snapshot()
    assert panel.text == "Turn left"
    assert icon == "Turn left"
