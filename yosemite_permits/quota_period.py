from datetime import date, datetime


def to_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


class QuotaPeriod:
    """A daily quota that applies to one trailhead over an inclusive date range."""

    def __init__(self, trailhead_id, start_date, end_date, quota):
        self.trailhead_id = str(trailhead_id)
        self.start_date = to_date(start_date)
        self.end_date = to_date(end_date)
        self.quota = int(quota)

        if self.end_date < self.start_date:
            raise ValueError(f"Quota period for {self.trailhead_id} ends before it starts")
        if self.quota < 0:
            raise ValueError(f"Quota period for {self.trailhead_id} has a negative quota")

    @property
    def num_days(self):
        """Number of days covered, both ends included."""
        return (self.end_date - self.start_date).days + 1

    def covers(self, day):
        return self.start_date <= day <= self.end_date

    def __eq__(self, other):
        if not isinstance(other, QuotaPeriod):
            return False
        return (self.trailhead_id, self.start_date, self.end_date, self.quota) == \
            (other.trailhead_id, other.start_date, other.end_date, other.quota)

    def __hash__(self):
        return hash((self.trailhead_id, self.start_date, self.end_date, self.quota))

    def __repr__(self):
        return f"QuotaPeriod({self.trailhead_id}, {self.start_date.strftime('%Y-%m-%d')} to {self.end_date.strftime('%Y-%m-%d')}, quota={self.quota})"
