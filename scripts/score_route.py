"""Offline route scoring — score a saved waypoint list against a stored chart.

Usage:
  uv run python scripts/score_route.py \\
      --db charts.db \\
      --chart LLBG-SUVAS1 \\
      --waypoints my_route.json \\
      --mode NO_ALT \\
      --output score.md

``my_route.json`` holds the list the front end submits, e.g.
``[{"name": "SUVAS", "minAltitude": "5000", "maxAltitude": ""}]``.
Without ``--mode`` fixes are matched by name regardless of order.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from ifr_sketchpad.charts.storage import ChartStorage
from ifr_sketchpad.reporting.formatter import MarkdownFormatter
from ifr_sketchpad.scoring.engine import score_route
from ifr_sketchpad.scoring.models import PracticeMode


def main() -> None:
    ap = argparse.ArgumentParser(description="Score a waypoint list against a chart")
    ap.add_argument("--db", default="charts.db", help="SQLite database path")
    ap.add_argument("--chart", required=True, help="Chart id, e.g. LLBG-SUVAS1")
    ap.add_argument("--waypoints", required=True, help="JSON file with the user's waypoints")
    ap.add_argument(
        "--mode",
        choices=[m.value for m in PracticeMode],
        default=None,
        help="Practice mode (positional scoring); omit for name matching",
    )
    ap.add_argument("--output", default=None, help="Write the Markdown report here")
    args = ap.parse_args()

    storage = ChartStorage(args.db)
    try:
        chart = storage.get_chart(args.chart)
    finally:
        storage.close()
    if chart is None:
        print(f"  [!] Chart not found: {args.chart!r}", file=sys.stderr)
        sys.exit(1)

    waypoints = json.loads(Path(args.waypoints).read_text(encoding="utf-8"))
    if not isinstance(waypoints, list):
        print("  [!] Waypoints file must contain a JSON list", file=sys.stderr)
        sys.exit(1)

    result = score_route(chart.fixes, waypoints, args.mode)
    formatter = MarkdownFormatter()
    if args.output:
        formatter.write(result, args.output, chart)
        print(f"[OK] {result.score}%, report written to {args.output}")
    else:
        print(formatter.format(result, chart))


if __name__ == "__main__":
    main()
