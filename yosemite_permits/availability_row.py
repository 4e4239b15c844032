from __future__ import annotations

from dataclasses import dataclass
from datetime import date


# Field order is the sort order: date first, then trailhead name
@dataclass(frozen=True, order=True)
class AvailabilityRow:
    date: date
    trailhead_name: str
    availability: int
    trailhead_id: str = ""
    quota: int = 0
    occupied: int = 0

    def as_tuple(self):
        return (self.date, self.trailhead_name, self.availability)
