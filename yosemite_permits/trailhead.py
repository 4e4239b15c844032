class Trailhead:
    """Represents a wilderness trailhead with its daily permit limits."""

    def __init__(self, trailhead_id, name, quota, capacity, region=None, alert=None, notes=None):
        self.id = str(trailhead_id)
        self.name = name
        self.quota = int(quota)        # advance reservation quota
        self.capacity = int(capacity)  # walk-up capacity
        self.region = region
        self.alert = alert
        self.notes = notes

        if self.quota < 0 or self.capacity < 0:
            raise ValueError(f"Trailhead {self.name} has a negative quota or capacity")

    def __eq__(self, other):
        if not isinstance(other, Trailhead):
            return False
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return f"Trailhead({self.id}, {self.name}, quota={self.quota}, capacity={self.capacity})"
