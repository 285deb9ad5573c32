"""Chart model, SQLite chart store and JSON seeding."""

from ifr_sketchpad.charts.models import Chart
from ifr_sketchpad.charts.seed import load_chart_file, seed_charts
from ifr_sketchpad.charts.storage import ChartStorage

__all__ = [
    "Chart",
    "ChartStorage",
    "load_chart_file",
    "seed_charts",
]
