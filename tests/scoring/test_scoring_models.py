"""Tests for scoring data models."""

from __future__ import annotations

import json

import pytest

from ifr_sketchpad.scoring.engine import NameMatchScorer, PositionalScorer, sanitize_waypoints
from ifr_sketchpad.scoring.models import (
    PracticeMode,
    ReferenceFix,
    ScoreResult,
    UserWaypoint,
)


class TestPracticeMode:
    @pytest.mark.parametrize(
        ("mode", "names", "alts", "label"),
        [
            (PracticeMode.FULL, True, True, "Procedure"),
            (PracticeMode.CLEAN, True, True, "Procedure"),
            (PracticeMode.NO_ALT, False, True, "Altitude Constraints"),
            (PracticeMode.NO_FIX, True, False, "Fix Names"),
        ],
    )
    def test_facets(self, mode, names, alts, label):
        assert mode.scores_fix_names is names
        assert mode.scores_altitudes is alts
        assert mode.label == label

    def test_from_wire_value(self):
        assert PracticeMode("NO_ALT") is PracticeMode.NO_ALT


class TestReferenceFix:
    def test_from_fix_name_key(self):
        fix = ReferenceFix.from_raw({"fix_name": "SUVAS", "min_alt": "5000", "max_alt": "", "x": 1, "y": 2})
        assert fix == ReferenceFix(name="SUVAS", min_alt="5000", max_alt="", x=1, y=2)

    def test_falls_back_to_name_key(self):
        assert ReferenceFix.from_raw({"fix_name": "", "name": "DAFNA"}).name == "DAFNA"

    @pytest.mark.parametrize("item", [None, "SUVAS", 3, [], {"min_alt": "5000"}, {"name": None}])
    def test_unusable_entries(self, item):
        assert ReferenceFix.from_raw(item) is None


class TestUserWaypoint:
    def test_reads_wire_keys(self):
        wp = UserWaypoint.from_raw(
            {"id": "w1", "name": "SUVAS", "minAltitude": "5000", "maxAltitude": 7000, "x": 10, "y": 20}
        )
        assert wp.name == "SUVAS"
        assert wp.min_altitude == "5000"
        assert wp.max_altitude == 7000
        assert (wp.id, wp.x, wp.y) == ("w1", 10, 20)

    def test_sanitize_drops_non_objects(self):
        waypoints = sanitize_waypoints([None, "x", 1, {"name": "A"}, {}])
        assert [wp.name for wp in waypoints] == ["A", None]


class TestScoreResult:
    def test_name_match_wire_form_has_no_mode_fields(self):
        result = NameMatchScorer().score([{"fix_name": "A"}], [{"name": "A"}])
        d = result.to_dict()
        assert d == {
            "score": 100,
            "totalFixes": 1,
            "correctFixes": 1,
            "altitudeErrors": [],
            "missedFixes": [],
            "message": "Perfect Flight!",
        }

    def test_json_round_trip_preserves_present_fields(self):
        result = PositionalScorer().score(
            [{"fix_name": "A", "min_alt": "1000"}],
            [{"name": "B", "minAltitude": "1000"}],
            PracticeMode.NO_FIX,
        )
        wire = json.loads(json.dumps(result.to_dict()))
        assert "altAccuracy" not in wire
        assert None not in wire.values()
        assert ScoreResult.from_dict(wire) == result

    def test_round_trip_full_mode(self):
        result = PositionalScorer().score(
            [{"fix_name": "A", "min_alt": "1000"}],
            [{"name": "A", "minAltitude": "2000"}],
        )
        wire = json.loads(json.dumps(result.to_dict()))
        assert wire["fixAccuracy"] == 100
        assert wire["altAccuracy"] == 0
        assert wire["scoringMode"] == "Procedure"
        assert ScoreResult.from_dict(wire) == result
