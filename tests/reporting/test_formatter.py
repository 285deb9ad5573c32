"""Tests for MarkdownFormatter."""

from __future__ import annotations

from ifr_sketchpad.charts.models import Chart
from ifr_sketchpad.reporting.formatter import MarkdownFormatter
from ifr_sketchpad.scoring.models import ScoreResult


def _chart() -> Chart:
    return Chart(id="LLBG-SUVAS1", airport_id="LLBG", name="SUVAS 1", type="SID", map_url="")


def _result(**overrides) -> ScoreResult:
    defaults = dict(
        score=50,
        total_fixes=2,
        correct_fixes=1,
        message="Check your procedure.",
        altitude_errors=["DAFNA: Maximum altitude expected 120, got None."],
        missed_fixes=["DAFNA (entered: Empty)"],
        scoring_mode="Procedure",
        fix_accuracy=50,
        alt_accuracy=50,
        correct_altitudes=1,
    )
    defaults.update(overrides)
    return ScoreResult(**defaults)


class TestMarkdownFormatter:
    def test_header(self):
        md = MarkdownFormatter().format(_result(), _chart())
        assert md.startswith("# Route Score")
        assert "**Chart**: SUVAS 1 (SID, LLBG)" in md
        assert "**Scoring**: Procedure" in md
        assert "**Score**: 50%" in md
        assert "**Fully correct fixes**: 1 / 2" in md
        assert "> Check your procedure." in md

    def test_accuracy_table(self):
        md = MarkdownFormatter().format(_result())
        assert "| Fix names | 50% |" in md
        assert "| Altitude constraints | 50% |" in md

    def test_unscored_facet_left_out(self):
        md = MarkdownFormatter().format(_result(alt_accuracy=None))
        assert "| Fix names | 50% |" in md
        assert "Altitude constraints |" not in md

    def test_name_match_result_has_no_table(self):
        md = MarkdownFormatter().format(
            _result(scoring_mode=None, fix_accuracy=None, alt_accuracy=None)
        )
        assert "| Facet |" not in md
        assert "**Scoring**" not in md

    def test_diagnostics_listed(self):
        md = MarkdownFormatter().format(_result())
        assert "## Missed or incorrect fixes" in md
        assert "- DAFNA (entered: Empty)" in md
        assert "## Altitude errors" in md
        assert "- DAFNA: Maximum altitude expected 120, got None." in md

    def test_perfect_score(self):
        md = MarkdownFormatter().format(
            _result(score=100, altitude_errors=[], missed_fixes=[], message="Perfect Flight!")
        )
        assert "All constraints met!" in md
        assert "## Altitude errors" not in md

    def test_write(self, tmp_path):
        path = tmp_path / "score.md"
        MarkdownFormatter().write(_result(), str(path), _chart())
        assert path.read_text(encoding="utf-8") == MarkdownFormatter().format(_result(), _chart())
