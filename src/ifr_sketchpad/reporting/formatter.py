"""Markdown score report formatter."""

from __future__ import annotations

from pathlib import Path

from ifr_sketchpad.charts.models import Chart
from ifr_sketchpad.scoring.models import ScoreResult


def _accuracy_table(result: ScoreResult) -> list[str]:
    rows = []
    if result.fix_accuracy is not None:
        rows.append(f"| Fix names | {result.fix_accuracy}% |")
    if result.alt_accuracy is not None:
        rows.append(f"| Altitude constraints | {result.alt_accuracy}% |")
    if not rows:
        return []
    return ["| Facet | Accuracy |", "|-------|----------|", *rows, ""]


class MarkdownFormatter:
    """Format a :class:`~ifr_sketchpad.scoring.models.ScoreResult` as Markdown."""

    def format(self, result: ScoreResult, chart: Chart | None = None) -> str:
        """Return the full Markdown report as a string."""
        lines: list[str] = []

        # Header
        lines += ["# Route Score", ""]
        if chart is not None:
            lines.append(f"**Chart**: {chart.name} ({chart.type}, {chart.airport_id})  ")
        if result.scoring_mode:
            lines.append(f"**Scoring**: {result.scoring_mode}  ")
        lines += [
            f"**Score**: {result.score}%  ",
            f"**Fully correct fixes**: {result.correct_fixes} / {result.total_fixes}",
            "",
            f"> {result.message}",
            "",
        ]

        lines.extend(_accuracy_table(result))

        if result.missed_fixes:
            lines += ["## Missed or incorrect fixes", ""]
            lines += [f"- {fix}" for fix in result.missed_fixes]
            lines.append("")

        if result.altitude_errors:
            lines += ["## Altitude errors", ""]
            lines += [f"- {err}" for err in result.altitude_errors]
            lines.append("")

        if result.score == 100:
            lines += ["All constraints met!", ""]

        return "\n".join(lines)

    def write(self, result: ScoreResult, path: str, chart: Chart | None = None) -> None:
        """Write the formatted report to *path* (UTF-8)."""
        Path(path).write_text(self.format(result, chart), encoding="utf-8")
