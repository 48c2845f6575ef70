"""Maneuver icon renderers — glyph renderer with NullIconRenderer for tests."""

from __future__ import annotations

from nav_hud.trip.models import VisualInstruction

# maneuver_modifier → arrow glyph
_MODIFIER_GLYPHS: dict[str, str] = {
    "uturn": "↶",
    "sharp right": "↘",
    "right": "→",
    "slight right": "↗",
    "straight": "↑",
    "slight left": "↖",
    "left": "←",
    "sharp left": "↙",
}

# maneuver types whose glyph does not depend on the modifier
_TYPE_GLYPHS: dict[str, str] = {
    "arrive": "⚑",
    "depart": "●",
    "roundabout": "↻",
    "rotary": "↻",
    "exit roundabout": "↻",
    "exit rotary": "↻",
}

_FALLBACK_GLYPH = "↑"


class NullIconRenderer:
    """No-op renderer; records calls for test assertions."""

    def __init__(self) -> None:
        self.rendered: list[VisualInstruction] = []

    def render(self, instruction: VisualInstruction) -> None:
        self.rendered.append(instruction)


class GlyphIconRenderer:
    """Renders the primary maneuver as a single text glyph.

    Used by text surfaces (the Tk overlay and the HTML card).  Unknown
    maneuvers fall back to a straight-ahead arrow.
    """

    def render(self, instruction: VisualInstruction) -> str:
        content = instruction.primary_content
        glyph = _TYPE_GLYPHS.get(content.maneuver_type or "")
        if glyph is not None:
            return glyph
        return _MODIFIER_GLYPHS.get(content.maneuver_modifier or "", _FALLBACK_GLYPH)
