"""Tkinter-based always-on-top maneuver panel window."""

from __future__ import annotations

import contextlib
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nav_hud.instructions.view import InstructionsView

# Card styling
_BG = "#ffffff"
_FG_TEXT = "#1a1a1a"
_FG_DISTANCE = "#555555"
_PAD = 10
_ICON_FONT = ("Segoe UI Symbol", 32)
_TEXT_FONT = ("Segoe UI", 14, "bold")
_DISTANCE_FONT = ("Segoe UI", 12)


class OverlayWindow:
    """Transparent, always-on-top maneuver panel.

    Displays the icon glyph, primary instruction and rounded distance of the
    latest panel published by an :class:`~nav_hud.instructions.view.InstructionsView`.
    The window is withdrawn while the view has nothing to show.

    The Tk event loop runs in a daemon thread and polls the view every
    *refresh_ms*; push trip states into the view from any thread.

    Parameters
    ----------
    view:
        The view to poll.
    x, y:
        Initial screen position (pixels from top-left).
    alpha:
        Window transparency 0.0 (invisible) – 1.0 (opaque).  Default 0.9.
    refresh_ms:
        Poll interval in ms.
    headless:
        When True, skip Tk initialisation (for unit testing).
    """

    def __init__(
        self,
        view: InstructionsView,
        x: int = 20,
        y: int = 20,
        alpha: float = 0.9,
        refresh_ms: int = 33,
        headless: bool = False,
    ) -> None:
        self._view = view
        self._x = x
        self._y = y
        self._alpha = alpha
        self._refresh_ms = refresh_ms
        self._headless = headless

        self._thread: threading.Thread | None = None
        self._root = None  # tkinter.Tk, set by _run()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the overlay in a daemon thread."""
        self._thread = threading.Thread(
            target=self._run, daemon=True, name="ManeuverPanelThread"
        )
        self._thread.start()

    def stop(self) -> None:
        """Destroy the overlay window."""
        root = self._root
        if root is not None:
            with contextlib.suppress(Exception):
                root.quit()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    # ------------------------------------------------------------------
    # Internal — runs inside the overlay thread
    # ------------------------------------------------------------------

    def _run(self) -> None:
        if self._headless:
            return
        try:
            import tkinter as tk
        except ImportError:
            return

        root = tk.Tk()
        self._root = root
        root.title("Maneuver Panel")
        root.geometry(f"+{self._x}+{self._y}")
        root.configure(bg=_BG)
        root.wm_attributes("-topmost", True)
        root.wm_attributes("-alpha", self._alpha)
        root.overrideredirect(True)  # remove title bar
        root.withdraw()

        icon_var = tk.StringVar()
        text_var = tk.StringVar()
        distance_var = tk.StringVar()

        tk.Label(
            root, textvariable=icon_var, font=_ICON_FONT, bg=_BG, fg=_FG_TEXT
        ).grid(row=0, column=0, rowspan=2, padx=_PAD, pady=_PAD)
        tk.Label(
            root, textvariable=text_var, font=_TEXT_FONT, bg=_BG, fg=_FG_TEXT, anchor="w"
        ).grid(row=0, column=1, sticky="w", padx=(0, _PAD), pady=(_PAD, 0))
        tk.Label(
            root, textvariable=distance_var, font=_DISTANCE_FONT, bg=_BG, fg=_FG_DISTANCE, anchor="w"
        ).grid(row=1, column=1, sticky="w", padx=(0, _PAD), pady=(0, _PAD))

        visible = False

        def _refresh() -> None:
            nonlocal visible
            panel, icon = self._view.snapshot()
            if panel is None:
                if visible:
                    root.withdraw()
                    visible = False
            else:
                icon_var.set(icon if isinstance(icon, str) else "")
                text_var.set(panel.text)
                distance_var.set(panel.distance_label)
                if not visible:
                    root.deiconify()
                    visible = True

            root.after(self._refresh_ms, _refresh)

        root.after(self._refresh_ms, _refresh)
        root.mainloop()
