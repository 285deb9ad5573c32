"""Load chart JSON files into a :class:`ChartStorage`.

A chart file looks like::

    {
      "id": "LLBG-SUVAS1",
      "name": "SUVAS 1",
      "type": "SID",
      "map_url": "/data/LLBG-SUVAS1.png",
      "map_url_no_alt": "...", "map_url_no_fix": "...", "map_url_clean": "...",
      "fixes": [{"fix_name": "SUVAS", "min_alt": "5000", "max_alt": ""}, ...]
    }

The airport is the part of ``id`` before the first ``-``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from ifr_sketchpad.charts.models import Chart
from ifr_sketchpad.charts.storage import ChartStorage

_logger = logging.getLogger(__name__)

_CHART_TYPES = ("SID", "STAR")


def load_chart_file(path: str | Path) -> Chart:
    """Read one chart JSON file.

    Raises:
        ValueError: If the file is not valid JSON, has no ``id``, or its
            ``type`` is neither ``SID`` nor ``STAR``.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    chart_id = data.get("id")
    if not chart_id:
        raise ValueError(f"Chart file {str(path)!r} has no 'id'")
    chart_type = str(data.get("type", "SID")).upper()
    if chart_type not in _CHART_TYPES:
        raise ValueError(f"Chart file {str(path)!r} has unknown type {chart_type!r}")

    return Chart(
        id=chart_id,
        airport_id=chart_id.split("-")[0].upper(),
        name=data.get("name", chart_id),
        type=chart_type,
        map_url=data.get("map_url", ""),
        map_url_no_alt=data.get("map_url_no_alt", ""),
        map_url_no_fix=data.get("map_url_no_fix", ""),
        map_url_clean=data.get("map_url_clean", ""),
        fixes=list(data.get("fixes") or []),
    )


def seed_charts(
    storage: ChartStorage,
    paths: Iterable[str | Path],
    clear: bool = True,
) -> int:
    """Load every file in *paths* into *storage* and return how many were saved.

    Missing files are skipped with a warning.  Every other file is read
    before the store is touched, and the charts are written in one
    transaction: a bad file leaves the stored charts unchanged.  With
    *clear*, existing charts are replaced so re-seeding never leaves stale
    charts behind.
    """
    charts = []
    for path in paths:
        if not Path(path).exists():
            _logger.warning("Chart file not found: %s. Skipping.", path)
            continue
        chart = load_chart_file(path)
        _logger.info("Read %s (%d fixes)", chart.id, len(chart.fixes))
        charts.append(chart)

    saved = storage.save_charts(charts, clear=clear)
    _logger.info("Saved %d charts%s", saved, " (store cleared)" if clear else "")
    return saved
