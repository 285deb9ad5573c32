"""Altitude constraint normalisation.

Chart data and user input carry altitudes in many shapes: plain numbers,
numeric strings, flight levels (``"FL080"``), text with separators
(``"5 000"``), empty strings or nothing at all.  Everything is reduced to a
single integer encoding:

- ``-1`` (:data:`NO_CONSTRAINT`): no altitude constraint;
- ``0``: ground level, also the result for non-empty text without digits;
- any other value: the digit run of the input, in feet.
"""

from __future__ import annotations

import logging
import re
from typing import Any

_logger = logging.getLogger(__name__)

NO_CONSTRAINT = -1

_NON_DIGITS = re.compile(r"\D")


def _as_text(value: Any) -> str:
    """Return the wire-format text of *value*."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        # JSON numbers print without a trailing ".0"
        return str(int(value))
    return str(value)


def parse_altitude(value: Any) -> int:
    """Normalise a raw altitude value to an integer.

    Examples::

        >>> parse_altitude("FL080")
        80
        >>> parse_altitude(" 5 000 ")
        5000
        >>> parse_altitude("abc")
        0
        >>> parse_altitude(None)
        -1

    Never raises.
    """
    if value is None or value == "":
        return NO_CONSTRAINT

    try:
        text = _as_text(value).strip()
        if text == "-1":
            return NO_CONSTRAINT
        digits = _NON_DIGITS.sub("", text)
        return int(digits) if digits else 0
    except Exception as exc:  # arbitrary objects may fail to render
        _logger.warning("Could not parse altitude %r: %s", value, exc)
        return NO_CONSTRAINT


def format_altitude(value: int) -> str:
    """Render a parsed altitude for diagnostics (``-1`` becomes ``"None"``)."""
    return "None" if value == NO_CONSTRAINT else str(value)
