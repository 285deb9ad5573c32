"""Scoring data models: practice modes, fixes, waypoints and results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PracticeMode(str, Enum):
    """Which facets of a chart are hidden from the user, and therefore scored.

    ``NO_ALT`` hides altitudes (only altitudes are scored), ``NO_FIX`` hides
    fix names (only names are scored).  ``FULL`` and ``CLEAN`` score both.
    """

    FULL = "FULL"
    NO_ALT = "NO_ALT"
    NO_FIX = "NO_FIX"
    CLEAN = "CLEAN"

    @property
    def scores_fix_names(self) -> bool:
        return self is not PracticeMode.NO_ALT

    @property
    def scores_altitudes(self) -> bool:
        return self is not PracticeMode.NO_FIX

    @property
    def label(self) -> str:
        """Human-readable name of what is being scored."""
        if self is PracticeMode.NO_ALT:
            return "Altitude Constraints"
        if self is PracticeMode.NO_FIX:
            return "Fix Names"
        return "Procedure"


@dataclass(frozen=True)
class ReferenceFix:
    """One fix of a chart's reference route.

    Altitudes are kept raw; they are normalised with
    :func:`~ifr_sketchpad.scoring.altitude.parse_altitude` at comparison time.
    """

    name: str
    min_alt: Any = None
    max_alt: Any = None
    x: float | None = None
    y: float | None = None

    @classmethod
    def from_raw(cls, item: Any) -> ReferenceFix | None:
        """Build a fix from a stored mapping, or ``None`` if it is unusable.

        The name is read from ``fix_name`` first, then ``name``.
        """
        if not isinstance(item, Mapping):
            return None
        raw_name = item.get("fix_name") or item.get("name")
        if not raw_name:
            return None
        return cls(
            name=str(raw_name),
            min_alt=item.get("min_alt"),
            max_alt=item.get("max_alt"),
            x=item.get("x"),
            y=item.get("y"),
        )


@dataclass(frozen=True)
class UserWaypoint:
    """A waypoint placed on the chart by the user.  Never persisted."""

    name: Any = None
    min_altitude: Any = None
    max_altitude: Any = None
    id: str | None = None
    x: float | None = None
    y: float | None = None

    @classmethod
    def from_raw(cls, item: Any) -> UserWaypoint | None:
        """Build a waypoint from a submitted JSON object; ``None`` for non-objects."""
        if not isinstance(item, Mapping):
            return None
        return cls(
            name=item.get("name"),
            min_altitude=item.get("minAltitude"),
            max_altitude=item.get("maxAltitude"),
            id=item.get("id"),
            x=item.get("x"),
            y=item.get("y"),
        )


# Attribute name -> wire key, in output order.
_WIRE_KEYS: dict[str, str] = {
    "score": "score",
    "total_fixes": "totalFixes",
    "correct_fixes": "correctFixes",
    "altitude_errors": "altitudeErrors",
    "missed_fixes": "missedFixes",
    "message": "message",
    "scoring_mode": "scoringMode",
    "fix_accuracy": "fixAccuracy",
    "alt_accuracy": "altAccuracy",
    "correct_altitudes": "correctAltitudes",
}


@dataclass
class ScoreResult:
    """Outcome of comparing a user route against a chart's reference route.

    The optional fields are only filled by mode-aware scoring, and only for
    the facets that were actually scored; :meth:`to_dict` leaves them out
    instead of emitting ``null``.
    """

    score: int
    total_fixes: int
    correct_fixes: int
    message: str
    altitude_errors: list[str] = field(default_factory=list)
    missed_fixes: list[str] = field(default_factory=list)
    scoring_mode: str | None = None
    fix_accuracy: int | None = None
    alt_accuracy: int | None = None
    correct_altitudes: int | None = None

    def to_dict(self) -> dict:
        """Return the JSON-serializable wire form (camelCase keys)."""
        d = {}
        for attr, key in _WIRE_KEYS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            d[key] = list(value) if isinstance(value, list) else value
        return d

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> ScoreResult:
        """Inverse of :meth:`to_dict`."""
        kwargs = {attr: d[key] for attr, key in _WIRE_KEYS.items() if key in d}
        kwargs.setdefault("altitude_errors", [])
        kwargs.setdefault("missed_fixes", [])
        return cls(**kwargs)
