"""
Decoding of wildtrails backend payloads into trailhead, quota and occupancy records.

Trailheads response:
    {"status": {"type": "message", "value": "..."},
     "response": {"timestamp": "2020-10-01 08:00:00",
                  "values": {"44": {"id": "44", "name": "Alder Creek", "region": "South",
                                    "quota": 12, "capacity": 30, "alert": null, "notes": null}}}}

Report response (one per region):
    {"status": {"type": "message", "value": "..."},
     "response": {"id": "South",
                  "values": [{"date": "2020-10-02", "44": 3, "45": 0}]}}
"""
import json
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from yosemite_permits.config import ADVANCE_HORIZON_DAYS, OK_STATUS_TYPE, WALKUP_DAYS
from yosemite_permits.errors import DecodeError, UnexpectedResponse
from yosemite_permits.occupancy_entry import OccupancyEntry
from yosemite_permits.quota_period import QuotaPeriod
from yosemite_permits.trailhead import Trailhead


class Status(BaseModel):
    type: str
    value: str = ""


class Envelope(BaseModel):
    status: Status
    response: Any = None


class TrailheadRecord(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: str
    region: Optional[str] = None
    quota: int
    capacity: int
    alert: Optional[str] = None
    notes: Optional[str] = None


class TrailheadsBody(BaseModel):
    timestamp: Optional[str] = None
    values: Dict[str, TrailheadRecord]


class ReportBody(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    values: List[Dict[str, Any]]


def _validate(model, data, what):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Invalid {what} payload: {e}") from e


def check_status(payload):
    """Return the response body of a payload, raising if the backend reported a problem."""
    envelope = _validate(Envelope, payload, "response")
    if envelope.status.type != OK_STATUS_TYPE:
        raise UnexpectedResponse(envelope.status.type, envelope.status.value)
    return envelope.response


def decode_trailheads(payload):
    """Decode a trailheads response into a list of Trailhead objects."""
    body = _validate(TrailheadsBody, check_status(payload), "trailheads")
    trailheads = []
    for record in body.values.values():
        try:
            trailheads.append(Trailhead(
                trailhead_id=record.id,
                name=record.name,
                quota=record.quota,
                capacity=record.capacity,
                region=record.region,
                alert=record.alert,
                notes=record.notes,
            ))
        except ValueError as e:
            raise DecodeError(str(e)) from e
    return trailheads


def decode_report(payload):
    """
    Decode a region report into OccupancyEntry objects.

    Each report value holds a "date" plus one integer per trailhead id.
    Values without a date are skipped, as are non-integer cells.
    """
    body = _validate(ReportBody, check_status(payload), "report")
    entries = []
    for values in body.values:
        if "date" not in values:
            continue
        try:
            day = datetime.strptime(str(values["date"]), "%Y-%m-%d").date()
        except ValueError as e:
            raise DecodeError(f"Invalid date {values['date']!r} in report {body.id}") from e

        for trailhead_id, occupied in values.items():
            if trailhead_id == "date" or isinstance(occupied, bool) or not isinstance(occupied, int):
                continue
            if occupied < 0:
                raise DecodeError(f"Negative occupancy for {trailhead_id} on {day} in report {body.id}")
            entries.append(OccupancyEntry(trailhead_id, day, occupied))
    return entries


def regions_of(trailheads):
    """Distinct regions referenced by the trailheads, sorted."""
    return sorted(set(t.region for t in trailheads if t.region))


def quota_periods_for(trailheads, today, window_start=None, window_end=None,
                      walkup_days=WALKUP_DAYS, horizon_days=ADVANCE_HORIZON_DAYS):
    """
    Derive quota periods from trailhead metadata.

    The walk-up days are counted from `today`, not from the window start.
    Each trailhead gets a walk-up period at its capacity running to
    today + walkup_days, and a wider advance period at its quota running to
    the horizon or the window end, whichever is later. Both start at today
    or the window start, whichever is earlier. The narrower walk-up period
    wins where they overlap.
    """
    start = min(today, window_start) if window_start else today
    walkup_end = today + timedelta(days=walkup_days)
    advance_end = today + timedelta(days=horizon_days)
    if window_end and window_end > advance_end:
        advance_end = window_end

    periods = []
    for trailhead in trailheads:
        periods.append(QuotaPeriod(trailhead.id, start, advance_end, trailhead.quota))
        periods.append(QuotaPeriod(trailhead.id, start, walkup_end, trailhead.capacity))
    return periods


def load_payload(path):
    """Load a saved JSON response from disk."""
    with open(path, 'r') as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise DecodeError(f"{path} is not valid JSON: {e}") from e
