"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ifr_sketchpad.charts.models import Chart
from ifr_sketchpad.charts.storage import ChartStorage
from ifr_sketchpad.web.app import app


@pytest.fixture
def client():
    """FastAPI test client."""
    with TestClient(app) as c:
        yield c


def make_chart(
    chart_id: str = "LLBG-SUVAS1",
    chart_type: str = "SID",
    fixes: list | None = None,
) -> Chart:
    """Build a chart with two constrained fixes."""
    if fixes is None:
        fixes = [
            {"fix_name": "SUVAS", "min_alt": "3000", "max_alt": "5000", "x": 120, "y": 340},
            {"fix_name": "DAFNA", "min_alt": "", "max_alt": "FL120", "x": 300, "y": 90},
        ]
    return Chart(
        id=chart_id,
        airport_id=chart_id.split("-")[0],
        name=chart_id.split("-")[1],
        type=chart_type,
        map_url=f"/data/{chart_id}.png",
        map_url_no_alt=f"/data/{chart_id}_no_alt.png",
        map_url_no_fix=f"/data/{chart_id}_no_fix.png",
        map_url_clean=f"/data/{chart_id}_clean.png",
        fixes=fixes,
    )


@pytest.fixture
def chart_db(tmp_path, monkeypatch) -> str:
    """Path of a SQLite chart database holding two LLBG charts.

    The API is pointed at it for the duration of the test.
    """
    db = str(tmp_path / "charts.db")
    storage = ChartStorage(db)
    storage.save_chart(make_chart("LLBG-SUVAS1"))
    storage.save_chart(make_chart("LLBG-VETEK1A", chart_type="STAR"))
    storage.close()
    monkeypatch.setattr("ifr_sketchpad.web.app._DEFAULT_DB", db)
    return db
