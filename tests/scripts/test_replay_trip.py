"""Tests for scripts/replay_trip.py."""

from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path

_SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "replay_trip.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("replay_trip", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _write_log(tmp_path, lines: list[str]):
    path = tmp_path / "trip.jsonl"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_replay_prints_panels_and_skips_malformed_lines(tmp_path, monkeypatch, capsys):
    navigating = {
        "Navigating": {
            "visualInstruction": {
                "primaryContent": {
                    "text": "Turn right",
                    "maneuverType": "turn",
                    "maneuverModifier": "right",
                }
            },
            "progress": {"distanceToNextManeuver": 347},
        }
    }
    log = _write_log(
        tmp_path,
        [
            json.dumps(navigating),
            json.dumps("Idle"),
            "",
            "{not json",
            "null",
        ],
    )
    monkeypatch.setattr(sys, "argv", ["replay_trip.py", str(log), "--interval", "0"])

    _load_script().main()

    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "[   1] →  Turn right  350m",
        "[   2] -",
        "[   5] -",
    ]
    assert "WARNING: line 4:" in captured.err
