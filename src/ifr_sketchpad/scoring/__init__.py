"""Altitude normalisation and route scoring."""

from ifr_sketchpad.scoring.altitude import NO_CONSTRAINT, format_altitude, parse_altitude
from ifr_sketchpad.scoring.engine import (
    NameMatchScorer,
    PositionalScorer,
    sanitize_waypoints,
    score_route,
    summary_message,
)
from ifr_sketchpad.scoring.models import (
    PracticeMode,
    ReferenceFix,
    ScoreResult,
    UserWaypoint,
)

__all__ = [
    "NO_CONSTRAINT",
    "NameMatchScorer",
    "PositionalScorer",
    "PracticeMode",
    "ReferenceFix",
    "ScoreResult",
    "UserWaypoint",
    "format_altitude",
    "parse_altitude",
    "sanitize_waypoints",
    "score_route",
    "summary_message",
]
