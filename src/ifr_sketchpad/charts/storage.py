"""ChartStorage — persists charts and their reference routes to SQLite.

Schema design notes:
  - One row per chart; ``id`` is the published chart identifier
    (e.g. ``LLBG-SUVAS1``) and is the primary key.
  - ``fixes_json`` keeps the fix list as stored, in route order.  Fixes are
    always read and written as a whole with their chart, and malformed
    entries must survive a round-trip untouched, so they are not normalised
    into a table of their own.
  - ``airport_id`` is stored uppercased and indexed together with ``type``
    for the per-airport listing.
"""

from __future__ import annotations

import contextlib
import json
import sqlite3

from ifr_sketchpad.charts.models import Chart

_DDL = """
PRAGMA journal_mode = WAL;
PRAGMA synchronous  = NORMAL;

CREATE TABLE IF NOT EXISTS charts (
    id             TEXT PRIMARY KEY,
    airport_id     TEXT NOT NULL,
    name           TEXT NOT NULL,
    type           TEXT NOT NULL CHECK (type IN ('SID', 'STAR')),
    map_url        TEXT NOT NULL,
    map_url_no_alt TEXT NOT NULL DEFAULT '',
    map_url_no_fix TEXT NOT NULL DEFAULT '',
    map_url_clean  TEXT NOT NULL DEFAULT '',
    fixes_json     TEXT NOT NULL DEFAULT '[]'
);

CREATE INDEX IF NOT EXISTS idx_charts_airport_type
    ON charts (airport_id, type);
"""

_UPSERT_CHART = """
INSERT OR REPLACE INTO charts (
    id, airport_id, name, type,
    map_url, map_url_no_alt, map_url_no_fix, map_url_clean,
    fixes_json
) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
"""

_SELECT_COLUMNS = """
SELECT id, airport_id, name, type,
       map_url, map_url_no_alt, map_url_no_fix, map_url_clean,
       fixes_json
FROM   charts
"""


def _chart_params(chart: Chart) -> tuple:
    return (
        chart.id,
        chart.airport_id.upper(),
        chart.name,
        chart.type,
        chart.map_url,
        chart.map_url_no_alt,
        chart.map_url_no_fix,
        chart.map_url_clean,
        json.dumps(chart.fixes),
    )


def _row_to_chart(row: sqlite3.Row) -> Chart:
    return Chart(
        id=row["id"],
        airport_id=row["airport_id"],
        name=row["name"],
        type=row["type"],
        map_url=row["map_url"],
        map_url_no_alt=row["map_url_no_alt"],
        map_url_no_fix=row["map_url_no_fix"],
        map_url_clean=row["map_url_clean"],
        fixes=json.loads(row["fixes_json"]),
    )


class ChartStorage:
    """Stores and retrieves charts from a SQLite database.

    Parameters
    ----------
    db_path:
        Path to the SQLite file.  Pass ``":memory:"`` for in-process testing.
    """

    def __init__(self, db_path: str = "charts.db") -> None:
        self._conn = sqlite3.connect(db_path)
        self._conn.row_factory = sqlite3.Row
        for stmt in _DDL.strip().split(";"):
            stmt = stmt.strip()
            if stmt:
                self._conn.execute(stmt)
        self._conn.commit()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def save_chart(self, chart: Chart) -> None:
        """Insert *chart*, replacing any stored chart with the same id."""
        self._conn.execute(_UPSERT_CHART, _chart_params(chart))
        self._conn.commit()

    def save_charts(self, charts: list[Chart], clear: bool = False) -> int:
        """Save *charts* in a single transaction and return how many were saved.

        With *clear*, every stored chart is deleted first.  On any error the
        transaction is rolled back and the store is left as it was.
        """
        with self._conn:
            if clear:
                self._conn.execute("DELETE FROM charts")
            self._conn.executemany(_UPSERT_CHART, [_chart_params(c) for c in charts])
        return len(charts)

    def get_chart(self, chart_id: str) -> Chart | None:
        """Return the chart with *chart_id*, or None if not found."""
        row = self._conn.execute(
            _SELECT_COLUMNS + "WHERE id = ?", (chart_id,)
        ).fetchone()
        return _row_to_chart(row) if row else None

    def list_charts(self, airport_id: str, chart_type: str | None = None) -> list[Chart]:
        """Return every chart of *airport_id*, SIDs before STARs, then by name.

        The airport id is matched case-insensitively.  Pass *chart_type*
        (``"SID"`` / ``"STAR"``) to restrict the listing.
        """
        sql = _SELECT_COLUMNS + "WHERE airport_id = ?"
        params: list[str] = [airport_id.upper()]
        if chart_type:
            sql += " AND type = ?"
            params.append(chart_type.upper())
        sql += " ORDER BY type, name"
        return [_row_to_chart(r) for r in self._conn.execute(sql, params).fetchall()]

    def clear(self) -> int:
        """Delete every chart and return how many were removed."""
        cursor = self._conn.execute("DELETE FROM charts")
        self._conn.commit()
        return cursor.rowcount

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __del__(self) -> None:
        with contextlib.suppress(Exception):
            self._conn.close()
