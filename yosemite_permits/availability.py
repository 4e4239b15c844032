from collections import defaultdict
from datetime import timedelta

from yosemite_permits.availability_row import AvailabilityRow
from yosemite_permits.config import WINDOW_LENGTH_DAYS
from yosemite_permits.errors import InvalidTrailheads, InvalidWindow, UnknownTrailheadReference
from yosemite_permits.logger import get_logger

logger = get_logger(__name__)


class PermitLedger:
    """Trailheads, their quota periods and aggregated occupancy, indexed for lookup."""

    def __init__(self, trailheads, quota_periods=(), occupancy_entries=()):
        """
        Initialize ledger.

        Args:
            trailheads: iterable of Trailhead objects, ids must be unique
            quota_periods: iterable of QuotaPeriod objects
            occupancy_entries: iterable of OccupancyEntry objects

        Raises UnknownTrailheadReference if a quota period or occupancy entry
        points at a trailhead id that isn't in `trailheads`.
        """
        self.trailheads = {}
        for trailhead in trailheads:
            if trailhead.id in self.trailheads:
                raise InvalidTrailheads(f"Duplicate trailhead id '{trailhead.id}'")
            self.trailheads[trailhead.id] = trailhead

        # {trailhead_id: [QuotaPeriod, ...]} in the order they were supplied
        self.quota_periods = defaultdict(list)
        for period in quota_periods:
            if period.trailhead_id not in self.trailheads:
                raise UnknownTrailheadReference(period.trailhead_id, "QuotaPeriod")
            self.quota_periods[period.trailhead_id].append(period)

        # {(trailhead_id, date): occupied}, duplicates are summed
        self.occupancy = defaultdict(int)
        for entry in occupancy_entries:
            if entry.trailhead_id not in self.trailheads:
                raise UnknownTrailheadReference(entry.trailhead_id, "OccupancyEntry")
            self.occupancy[entry.key] += entry.occupied

    def get_trailhead(self, trailhead_id):
        return self.trailheads[str(trailhead_id)]

    def get_quota_period(self, trailhead_id, day):
        """
        Find the quota period that governs a trailhead on a date.

        When several periods cover the date the narrowest one wins; equal
        widths go to the later start, and after that to the period supplied
        last. Returns None when nothing covers the date.
        """
        best = None
        for period in self.quota_periods.get(str(trailhead_id), []):
            if not period.covers(day):
                continue
            if best is None or (-period.num_days, period.start_date) >= (-best.num_days, best.start_date):
                best = period
        return best

    def get_quota(self, trailhead_id, day):
        """Quota for a trailhead on a date, 0 (closed) when no period covers it."""
        period = self.get_quota_period(trailhead_id, day)
        return period.quota if period else 0

    def get_occupied(self, trailhead_id, day):
        """Permits already issued, 0 when nothing was reported."""
        return self.occupancy.get((str(trailhead_id), day), 0)

    def get_availability(self, trailhead_id, day):
        # Overbooked trailheads report zero, never negative
        return max(0, self.get_quota(trailhead_id, day) - self.get_occupied(trailhead_id, day))

    def get_rows(self, window_start, window_length_days=WINDOW_LENGTH_DAYS):
        """Build one AvailabilityRow per trailhead per date in the window."""
        if window_length_days <= 0:
            raise InvalidWindow(window_length_days)

        dates = [window_start + timedelta(days=offset) for offset in range(window_length_days)]
        rows = []
        for trailhead in self.trailheads.values():
            for day in dates:
                quota = self.get_quota(trailhead.id, day)
                occupied = self.get_occupied(trailhead.id, day)
                rows.append(AvailabilityRow(
                    date=day,
                    trailhead_name=trailhead.name,
                    availability=max(0, quota - occupied),
                    trailhead_id=trailhead.id,
                    quota=quota,
                    occupied=occupied,
                ))
        return rows

    def __repr__(self):
        return f"PermitLedger(trailheads={len(self.trailheads)}, occupancy_keys={len(self.occupancy)})"


def compute(trailheads, quota_periods, occupancy_entries, window_start, window_length_days=WINDOW_LENGTH_DAYS):
    """
    Compute per-date, per-trailhead permit availability.

    Args:
        trailheads: non-empty collection of Trailhead
        quota_periods: collection of QuotaPeriod, may be empty
        occupancy_entries: collection of OccupancyEntry, may be empty
        window_start: first date of the window (a datetime.date)
        window_length_days: number of dates in the window

    Returns exactly len(trailheads) * window_length_days AvailabilityRow
    objects, zero-availability rows included.

    Raises InvalidWindow for a non-positive window length and
    UnknownTrailheadReference for dangling trailhead ids.
    """
    if window_length_days <= 0:
        raise InvalidWindow(window_length_days)

    trailheads = list(trailheads)
    if not trailheads:
        raise InvalidTrailheads("At least one trailhead is required")

    ledger = PermitLedger(trailheads, quota_periods, occupancy_entries)
    rows = ledger.get_rows(window_start, window_length_days)

    logger.debug(f"Computed {len(rows)} availability rows for {len(trailheads)} trailheads "
                 f"from {window_start} over {window_length_days} days")
    return rows
