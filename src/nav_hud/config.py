"""Runtime configuration read from the environment (``.env`` supported)."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class HudConfig:
    """Overlay window and logging settings.

    Call ``load_dotenv()`` before :meth:`from_env` to pick up a ``.env`` file.
    """

    window_x: int = 20
    window_y: int = 20
    alpha: float = 0.9         # 0.0 invisible – 1.0 opaque
    refresh_ms: int = 33       # ≤ 33 gives ≥ 30 fps
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> HudConfig:
        return cls(
            window_x=int(os.environ.get("NAV_HUD_WINDOW_X", cls.window_x)),
            window_y=int(os.environ.get("NAV_HUD_WINDOW_Y", cls.window_y)),
            alpha=float(os.environ.get("NAV_HUD_ALPHA", cls.alpha)),
            refresh_ms=int(os.environ.get("NAV_HUD_REFRESH_MS", cls.refresh_ms)),
            log_level=os.environ.get("NAV_HUD_LOG_LEVEL", cls.log_level).upper(),
        )
