"""Chart data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ifr_sketchpad.scoring.models import PracticeMode


@dataclass
class Chart:
    """A published SID or STAR with its reference route.

    ``fixes`` holds the fix mappings exactly as stored (``fix_name``,
    ``min_alt``, ``max_alt``, optionally ``x``/``y``).  Order is the route
    order.  Entries are not validated here; scoring skips malformed ones.
    """

    id: str
    airport_id: str
    name: str
    type: str
    """``"SID"`` or ``"STAR"``."""

    map_url: str
    """Chart image with everything printed."""

    map_url_no_alt: str = ""
    map_url_no_fix: str = ""
    map_url_clean: str = ""
    """Route line only: no fix names, no altitudes."""

    fixes: list[Any] = field(default_factory=list)

    def map_url_for(self, mode: PracticeMode | str | None) -> str:
        """Return the chart image variant that hides what *mode* asks the user for."""
        variants = {
            PracticeMode.NO_ALT: self.map_url_no_alt,
            PracticeMode.NO_FIX: self.map_url_no_fix,
            PracticeMode.CLEAN: self.map_url_clean,
        }
        url = variants.get(PracticeMode(mode)) if mode else None
        return url or self.map_url

    def to_dict(self) -> dict:
        """Return the wire form (the id is published as ``_id``)."""
        return {
            "_id": self.id,
            "airport_id": self.airport_id,
            "name": self.name,
            "type": self.type,
            "map_url": self.map_url,
            "map_url_no_alt": self.map_url_no_alt,
            "map_url_no_fix": self.map_url_no_fix,
            "map_url_clean": self.map_url_clean,
            "fixes": list(self.fixes),
        }
