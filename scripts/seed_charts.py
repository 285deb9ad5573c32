"""Chart seeding script — load SID/STAR JSON files into the SQLite chart store.

Usage:
  uv run python scripts/seed_charts.py --db charts.db \\
      --data-dir data LLBG-SUVAS1.json LLBG-DAFNA1.json

Existing charts are deleted first unless ``--keep`` is given.
"""

from __future__ import annotations

import argparse
import sqlite3
import sys
from pathlib import Path

from ifr_sketchpad.charts.seed import seed_charts
from ifr_sketchpad.charts.storage import ChartStorage


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed the chart database from JSON files")
    ap.add_argument("files", nargs="+", help="Chart JSON file names")
    ap.add_argument("--db", default="charts.db", help="SQLite database path")
    ap.add_argument("--data-dir", default="data", help="Directory holding the chart files")
    ap.add_argument("--keep", action="store_true", help="Do not delete existing charts")
    args = ap.parse_args()

    paths = [Path(args.data_dir) / name for name in args.files]

    storage = ChartStorage(args.db)
    try:
        saved = seed_charts(storage, paths, clear=not args.keep)
    except (ValueError, sqlite3.Error) as exc:
        print(f"  [!] Seeding failed, existing charts kept: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        storage.close()

    print(f"[OK] Inserted {saved} chart(s) into {args.db}")


if __name__ == "__main__":
    main()
