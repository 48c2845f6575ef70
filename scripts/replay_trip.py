"""Replay a recorded trip-state log into the maneuver panel.

The log holds one engine trip-state JSON value per line (``null``,
``"Idle"``, ``{"Navigating": {...}}``, ...).

Usage:
    uv run python scripts/replay_trip.py trip.jsonl
    uv run python scripts/replay_trip.py trip.jsonl --interval 0.5 --overlay
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from nav_hud.config import HudConfig  # noqa: E402
from nav_hud.instructions.icons import GlyphIconRenderer  # noqa: E402
from nav_hud.instructions.view import InstructionsView  # noqa: E402
from nav_hud.overlay.window import OverlayWindow  # noqa: E402
from nav_hud.trip.parser import TripStateParser  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Maneuver panel — trip-state replay")
    ap.add_argument("log", type=Path, help="JSON-lines trip-state log")
    ap.add_argument("--interval", type=float, default=1.0, help="Seconds between states")
    ap.add_argument("--overlay", action="store_true", help="Show the Tk overlay window")
    args = ap.parse_args()

    cfg = HudConfig.from_env()
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parser = TripStateParser()
    view = InstructionsView(icon_renderer=GlyphIconRenderer())

    window = None
    if args.overlay:
        window = OverlayWindow(
            view,
            x=cfg.window_x,
            y=cfg.window_y,
            alpha=cfg.alpha,
            refresh_ms=cfg.refresh_ms,
        )
        window.start()

    try:
        with args.log.open(encoding="utf-8") as fh:
            for lineno, line in enumerate(fh, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    state = parser.parse(json.loads(line))
                except (AttributeError, KeyError, TypeError, ValueError) as exc:
                    print(f"WARNING: line {lineno}: {exc}", file=sys.stderr)
                    continue

                view.update(state)
                panel, icon = view.snapshot()
                if panel is None:
                    print(f"[{lineno:>4}] -")
                else:
                    print(f"[{lineno:>4}] {icon}  {panel.text}  {panel.distance_label}")
                time.sleep(args.interval)
    except KeyboardInterrupt:
        pass
    finally:
        if window is not None:
            window.stop()


if __name__ == "__main__":
    main()
