"""ScoringService — loads the chart for a score request and runs the scorer."""

from __future__ import annotations

import logging

from ifr_sketchpad.charts.storage import ChartStorage
from ifr_sketchpad.scoring.engine import score_route
from ifr_sketchpad.scoring.models import ScoreResult
from ifr_sketchpad.web.schemas import ScoreRequest

_logger = logging.getLogger(__name__)


class ChartNotFoundError(LookupError):
    """Raised when a score request names a chart that is not stored."""


class ScoringService:
    """Wraps chart lookup + route scoring.

    Parameters
    ----------
    db_path:
        Path to the SQLite chart database.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    def score(self, req: ScoreRequest) -> ScoreResult:
        """Score ``req.waypoints`` against the reference route of ``req.mapId``.

        Without ``req.practiceMode`` fixes are matched by name; with it, by
        position, scoring only the facets the mode hides.

        Raises
        ------
        ChartNotFoundError
            If no chart has the id ``req.mapId``.
        """
        storage = ChartStorage(self._db_path)
        try:
            chart = storage.get_chart(req.mapId)
        finally:
            storage.close()

        if chart is None:
            _logger.warning("Score requested for unknown chart %r", req.mapId)
            raise ChartNotFoundError(f"Chart not found: {req.mapId}")

        result = score_route(chart.fixes, req.waypoints, req.practiceMode)
        _logger.info(
            "Scored %s (%s): %d%%",
            chart.id,
            req.practiceMode.value if req.practiceMode else "name match",
            result.score,
        )
        return result
