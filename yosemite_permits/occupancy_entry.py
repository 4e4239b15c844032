from yosemite_permits.quota_period import to_date


class OccupancyEntry:
    """Permits already issued for a trailhead on one date."""

    def __init__(self, trailhead_id, date, occupied):
        self.trailhead_id = str(trailhead_id)
        self.date = to_date(date)
        self.occupied = int(occupied)

        if self.occupied < 0:
            raise ValueError(f"Negative occupancy for {self.trailhead_id} on {self.date}")

    @property
    def key(self):
        return (self.trailhead_id, self.date)

    def __eq__(self, other):
        if not isinstance(other, OccupancyEntry):
            return False
        return (self.key, self.occupied) == (other.key, other.occupied)

    def __hash__(self):
        return hash((self.key, self.occupied))

    def __repr__(self):
        return f"OccupancyEntry({self.trailhead_id}, {self.date.strftime('%Y-%m-%d')}, occupied={self.occupied})"
