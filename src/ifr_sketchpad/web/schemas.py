"""Pydantic request/response schemas for the Web API.

Field names follow the JSON the chart trainer front ends already exchange
(``mapId``, ``missedFixes``, ``_id`` ...), so they are not snake_case.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ifr_sketchpad.scoring.models import PracticeMode


class HealthResponse(BaseModel):
    status: str
    version: str


class ChartResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    airport_id: str
    name: str
    type: str
    map_url: str
    map_url_no_alt: str = ""
    map_url_no_fix: str = ""
    map_url_clean: str = ""
    fixes: list[Any] = Field(default_factory=list)
    # Image variant for the requested practice mode.
    image_url: str = ""


class ScoreRequest(BaseModel):
    mapId: str = Field(min_length=1)
    # Items stay untyped: non-object entries are dropped by the scorer.
    waypoints: list[Any]
    practiceMode: PracticeMode | None = None


class ScoreResponse(BaseModel):
    """Score result; the per-facet fields are left out when not scored."""

    score: int
    totalFixes: int
    correctFixes: int
    altitudeErrors: list[str]
    missedFixes: list[str]
    message: str
    scoringMode: str | None = None
    fixAccuracy: int | None = None
    altAccuracy: int | None = None
    correctAltitudes: int | None = None
