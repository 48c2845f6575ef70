"""InstructionsView — receives trip-state pushes and publishes the maneuver panel."""

from __future__ import annotations

import logging
import threading

from nav_hud.instructions.icons import NullIconRenderer
from nav_hud.instructions.renderer import InstructionsRenderer, ManeuverPanel
from nav_hud.trip.models import TripState

_logger = logging.getLogger(__name__)


class InstructionsView:
    """The maneuver panel component the host pushes trip states into.

    Every :meth:`update` is evaluated on its own: the panel is rebuilt from the
    pushed state and the icon renderer is invoked only when a panel is shown.
    The latest ``(panel, icon)`` pair is kept for surfaces that poll it.

    Parameters
    ----------
    renderer:
        Maps trip state to :class:`ManeuverPanel`.  Defaults to
        :class:`InstructionsRenderer`.
    icon_renderer:
        Object with ``render(visual_instruction)`` — either
        :class:`~nav_hud.instructions.icons.GlyphIconRenderer` or
        :class:`~nav_hud.instructions.icons.NullIconRenderer`.
    """

    def __init__(
        self,
        renderer: InstructionsRenderer | None = None,
        icon_renderer=None,
    ) -> None:
        self._renderer = renderer or InstructionsRenderer()
        self._icons = icon_renderer if icon_renderer is not None else NullIconRenderer()
        self._lock = threading.Lock()
        self._panel: ManeuverPanel | None = None
        self._icon = None

    def update(self, state: TripState | None) -> ManeuverPanel | None:
        """Render *state* and publish the result (thread-safe).

        Returns the new panel, or None when nothing is displayed.
        """
        # one critical section: the published panel belongs to the last push
        with self._lock:
            panel = self._renderer.render(state)
            icon = None
            if panel is not None:
                icon = self._icons.render(panel.icon)
            self._panel = panel
            self._icon = icon

        if panel is None:
            _logger.debug("Maneuver panel suppressed (%s)", type(state).__name__)
        return panel

    def snapshot(self) -> tuple[ManeuverPanel | None, object]:
        """Return the latest ``(panel, icon)`` pair."""
        with self._lock:
            return self._panel, self._icon

    @property
    def panel(self) -> ManeuverPanel | None:
        with self._lock:
            return self._panel
