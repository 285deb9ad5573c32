"""FastAPI Web application — chart listing and route scoring."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from ifr_sketchpad import __version__
from ifr_sketchpad.charts.storage import ChartStorage
from ifr_sketchpad.scoring.models import PracticeMode
from ifr_sketchpad.web.schemas import (
    ChartResponse,
    HealthResponse,
    ScoreRequest,
    ScoreResponse,
)
from ifr_sketchpad.web.service import ChartNotFoundError, ScoringService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

_DEFAULT_DB = os.environ.get("IFR_SKETCHPAD_DB", "charts.db")
_DATA_DIR = os.environ.get("IFR_SKETCHPAD_DATA_DIR", "data")
_CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "IFR_SKETCHPAD_CORS_ORIGINS", "http://localhost:3000"
    ).split(",")
    if origin.strip()
]

app = FastAPI(title="IFR Procedure Sketchpad", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


def mount_chart_images(target: FastAPI, data_dir: str) -> bool:
    """Serve *data_dir* under ``/data``; skipped when the directory is missing.

    Without the mount, image requests fall through to a plain 404.
    """
    if not Path(data_dir).is_dir():
        _logger.warning("Chart image directory %s not found; /data is not served", data_dir)
        return False
    target.mount("/data", StaticFiles(directory=data_dir), name="data")
    return True


mount_chart_images(app, _DATA_DIR)


def _storage() -> ChartStorage:
    return ChartStorage(_DEFAULT_DB)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/", response_class=PlainTextResponse)
def index() -> str:
    return "Aviation Trainer Backend API is running."


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.get("/api/charts/{airport_id}", response_model=list[ChartResponse])
def list_charts(
    airport_id: str,
    chart_type: Literal["SID", "STAR"] | None = Query(None, alias="type"),
    mode: PracticeMode | None = None,
) -> list[ChartResponse]:
    """Return every SID/STAR of *airport_id* with its reference fixes.

    ``image_url`` is the chart image variant to show for *mode*.
    """
    storage = _storage()
    try:
        charts = storage.list_charts(airport_id, chart_type)
    finally:
        storage.close()

    if not charts:
        raise HTTPException(
            status_code=404,
            detail=f"No charts found for airport {airport_id.upper()}.",
        )
    return [
        ChartResponse.model_validate({**c.to_dict(), "image_url": c.map_url_for(mode)})
        for c in charts
    ]


@app.post("/api/score", response_model=ScoreResponse, response_model_exclude_none=True)
def score(req: ScoreRequest) -> ScoreResponse:
    """Score a submitted route against the chart's reference route."""
    svc = ScoringService(_DEFAULT_DB)
    try:
        result = svc.score(req)
    except ChartNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Chart not found") from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        _logger.exception("Scoring failed for chart %r", req.mapId)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return ScoreResponse.model_validate(result.to_dict())
