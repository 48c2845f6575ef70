"""FastAPI Web application — HTTP host for the maneuver panel."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from nav_hud.instructions.icons import GlyphIconRenderer
from nav_hud.instructions.view import InstructionsView
from nav_hud.trip.parser import TripStateParser
from nav_hud.web.schemas import HealthResponse, PanelResponse

load_dotenv()  # loads .env from project root; must run before env vars are consumed

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

_HERE = Path(__file__).parent

app = FastAPI(title="Maneuver Panel", version="0.1.0")

app.mount("/static", StaticFiles(directory=str(_HERE / "static")), name="static")
templates = Jinja2Templates(directory=str(_HERE / "templates"))

_parser = TripStateParser()
_view = InstructionsView(icon_renderer=GlyphIconRenderer())


def get_view() -> InstructionsView:
    return _view


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0")


@app.post("/api/trip-state", response_model=PanelResponse)
def push_trip_state(
    trip_state: dict[str, Any] | str | None = Body(default=None),
    view: InstructionsView = Depends(get_view),
) -> PanelResponse:
    """Push the engine's latest trip-state snapshot and return the new panel."""
    try:
        state = _parser.parse(trip_state)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        _logger.warning("Rejected malformed trip state: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    view.update(state)
    return PanelResponse.from_panel(*view.snapshot())


@app.get("/api/panel", response_model=PanelResponse)
def current_panel(view: InstructionsView = Depends(get_view)) -> PanelResponse:
    """Return the panel for the most recently pushed trip state."""
    return PanelResponse.from_panel(*view.snapshot())


@app.get("/panel", response_class=HTMLResponse)
def panel_page(request: Request, view: InstructionsView = Depends(get_view)) -> HTMLResponse:
    """Render the maneuver card; the container is empty while suppressed."""
    panel, icon = view.snapshot()
    return templates.TemplateResponse(
        request,
        "panel.html",
        {
            "panel": panel,
            "icon": icon if isinstance(icon, str) else "",
        },
    )
