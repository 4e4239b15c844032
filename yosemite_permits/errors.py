class PermitError(Exception):
    """Base class for errors raised by the permit availability tool."""


class InvalidWindow(PermitError, ValueError):
    """Raised when the reporting window has no days in it."""

    def __init__(self, window_length_days):
        self.window_length_days = window_length_days
        super().__init__(f"Window length must be positive, got {window_length_days}")


class UnknownTrailheadReference(PermitError, KeyError):
    """Raised when a quota period or occupancy entry points at a trailhead we don't know."""

    def __init__(self, trailhead_id, record_kind):
        self.trailhead_id = trailhead_id
        self.record_kind = record_kind
        super().__init__(f"{record_kind} references unknown trailhead '{trailhead_id}'")

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class UnexpectedResponse(PermitError):
    """Raised when the backend answers with a status other than a plain message."""

    def __init__(self, status_type, status_value):
        self.status_type = status_type
        self.status_value = status_value
        super().__init__(f"Unexpected response status {status_type!r}: {status_value}")


class DecodeError(PermitError, ValueError):
    """Raised when a backend payload does not have the expected structure."""


class InvalidTrailheads(PermitError, ValueError):
    """Raised when the trailhead set is empty or repeats an id."""
