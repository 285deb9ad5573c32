"""Route scoring — compare a user's waypoints with a chart's reference route.

Two matching strategies are provided:

- :class:`NameMatchScorer` looks every reference fix up by name in the user's
  list (order-free) and awards 4 points per fix: 2 for the name, 1 each for
  the minimum and maximum altitude.
- :class:`PositionalScorer` pairs the i-th waypoint with the i-th reference
  fix and scores fix names and altitude constraints as two separate facets,
  gated by a :class:`~ifr_sketchpad.scoring.models.PracticeMode`.

Both are pure: the inputs are read, never mutated, and nothing is shared
between calls.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from ifr_sketchpad.scoring.altitude import format_altitude, parse_altitude
from ifr_sketchpad.scoring.models import (
    PracticeMode,
    ReferenceFix,
    ScoreResult,
    UserWaypoint,
)

_POINTS_PER_FIX = 4
_NAME_POINTS = 2
_DEFAULT_LABEL = "Altitude Constraints"

# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


def round_half_up(value: float) -> int:
    """Round like a score display does: ``12.5 -> 13`` (not banker's rounding)."""
    return math.floor(value + 0.5)


def percent(part: int, total: int) -> float:
    """Return ``part / total * 100``, or 0 when *total* is 0."""
    return part / total * 100 if total > 0 else 0.0


def summary_message(score: int, label: str | None = None) -> str:
    """Return the one-line verdict shown next to the score."""
    if score == 100:
        return "Perfect Flight!"
    if score > 70:
        return "Good Job!"
    return f"Check your {(label or _DEFAULT_LABEL).lower()}."


def sanitize_waypoints(items: Sequence[Any]) -> list[UserWaypoint]:
    """Drop everything that is not a JSON object from the submitted waypoints."""
    waypoints = []
    for item in items:
        wp = UserWaypoint.from_raw(item)
        if wp is not None:
            waypoints.append(wp)
    return waypoints


def compare_altitudes(fix: ReferenceFix, wp: UserWaypoint) -> tuple[bool, bool, str | None]:
    """Compare the min/max constraints of *wp* against *fix*.

    Returns:
        ``(min_matches, max_matches, error)`` where *error* describes the
        mismatching bounds, or is ``None`` when both match.
    """
    expected_min = parse_altitude(fix.min_alt)
    expected_max = parse_altitude(fix.max_alt)
    got_min = parse_altitude(wp.min_altitude)
    got_max = parse_altitude(wp.max_altitude)

    min_matches = got_min == expected_min
    max_matches = got_max == expected_max
    if min_matches and max_matches:
        return True, True, None

    name = fix.name.upper()
    parts = []
    if not min_matches:
        parts.append(
            f"Minimum altitude expected {format_altitude(expected_min)}, "
            f"got {format_altitude(got_min)}."
        )
    if not max_matches:
        parts.append(
            f"Maximum altitude expected {format_altitude(expected_max)}, "
            f"got {format_altitude(got_max)}."
        )
    return min_matches, max_matches, f"{name}: {' '.join(parts)}"


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


class NameMatchScorer:
    """Order-free scoring: find each reference fix by name in the user's list."""

    def score(
        self,
        reference_fixes: Sequence[Any],
        user_waypoints: Sequence[Any],
    ) -> ScoreResult:
        """Score *user_waypoints* against *reference_fixes*.

        Args:
            reference_fixes: Stored fix mappings, in route order.  Entries that
                are not mappings or carry no name are skipped but still count
                towards the maximum score.
            user_waypoints: Submitted waypoint objects; non-objects are ignored.
        """
        waypoints = sanitize_waypoints(user_waypoints)
        total = len(reference_fixes)

        points = 0
        fully_correct = 0
        altitude_errors: list[str] = []
        missed_fixes: list[str] = []

        for raw_fix in reference_fixes:
            fix = ReferenceFix.from_raw(raw_fix)
            if fix is None:
                continue

            name = fix.name.upper()
            match = next(
                (wp for wp in waypoints if wp.name and str(wp.name).upper() == name),
                None,
            )
            if match is None:
                missed_fixes.append(name)
                continue

            points += _NAME_POINTS
            min_ok, max_ok, error = compare_altitudes(fix, match)
            points += int(min_ok) + int(max_ok)
            if error is None:
                fully_correct += 1
            else:
                altitude_errors.append(error)

        max_points = total * _POINTS_PER_FIX
        score = round_half_up(points / max_points * 100) if max_points > 0 else 0

        return ScoreResult(
            score=score,
            total_fixes=total,
            correct_fixes=fully_correct,
            altitude_errors=altitude_errors,
            missed_fixes=missed_fixes,
            message=summary_message(score),
        )


class PositionalScorer:
    """Index-matched scoring with per-facet accuracy, gated by practice mode."""

    def score(
        self,
        reference_fixes: Sequence[Any],
        user_waypoints: Sequence[Any],
        mode: PracticeMode = PracticeMode.FULL,
    ) -> ScoreResult:
        """Score the i-th user waypoint against the i-th reference fix.

        Fix names are compared unless *mode* is ``NO_ALT``; altitude
        constraints are compared unless *mode* is ``NO_FIX``.
        """
        waypoints = sanitize_waypoints(user_waypoints)
        total = len(reference_fixes)
        check_names = mode.scores_fix_names
        check_alts = mode.scores_altitudes

        matched_names = 0
        matched_alts = 0
        fully_correct = 0
        altitude_errors: list[str] = []
        missed_fixes: list[str] = []

        for i, raw_fix in enumerate(reference_fixes):
            fix = ReferenceFix.from_raw(raw_fix)
            if fix is None:
                continue
            name = fix.name.upper()

            if i >= len(waypoints):
                if check_names:
                    missed_fixes.append(name)
                if check_alts:
                    altitude_errors.append(f"{name}: No waypoint entered.")
                continue
            wp = waypoints[i]

            name_ok = True
            if check_names:
                entered = "" if wp.name is None else str(wp.name).strip()
                name_ok = entered.upper() == name.strip()
                if name_ok:
                    matched_names += 1
                else:
                    missed_fixes.append(f"{name} (entered: {entered or 'Empty'})")

            alt_ok = True
            if check_alts:
                _, _, error = compare_altitudes(fix, wp)
                alt_ok = error is None
                if alt_ok:
                    matched_alts += 1
                else:
                    altitude_errors.append(error)

            if name_ok and alt_ok:
                fully_correct += 1

        fix_percent = percent(matched_names, total)
        alt_percent = percent(matched_alts, total)
        if check_names and check_alts:
            score = round_half_up((fix_percent + alt_percent) / 2)
        elif check_names:
            score = round_half_up(fix_percent)
        else:
            score = round_half_up(alt_percent)

        return ScoreResult(
            score=score,
            total_fixes=total,
            correct_fixes=fully_correct,
            altitude_errors=altitude_errors,
            missed_fixes=missed_fixes,
            message=summary_message(score, mode.label),
            scoring_mode=mode.label,
            fix_accuracy=round_half_up(fix_percent) if check_names else None,
            alt_accuracy=round_half_up(alt_percent) if check_alts else None,
            correct_altitudes=matched_alts if check_alts else None,
        )


def score_route(
    reference_fixes: Sequence[Any],
    user_waypoints: Sequence[Any],
    mode: PracticeMode | str | None = None,
) -> ScoreResult:
    """Score a submitted route.

    Without a *mode* the order-free :class:`NameMatchScorer` is used, which is
    what clients that predate practice modes expect.  With a mode, the
    :class:`PositionalScorer` applies.

    Raises:
        ValueError: If *mode* is a string that names no :class:`PracticeMode`.
    """
    if mode is None:
        return NameMatchScorer().score(reference_fixes, user_waypoints)
    return PositionalScorer().score(reference_fixes, user_waypoints, PracticeMode(mode))
