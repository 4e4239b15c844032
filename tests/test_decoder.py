"""Test decoding of backend payloads into records"""
from datetime import date, timedelta

import pytest

from yosemite_permits.availability import PermitLedger
from yosemite_permits.decoder import (
    check_status, decode_report, decode_trailheads, load_payload, quota_periods_for, regions_of,
)
from yosemite_permits.errors import DecodeError, UnexpectedResponse
from yosemite_permits.trailhead import Trailhead


def test_decode_trailheads(trailheads_payload):
    trailheads = {t.id: t for t in decode_trailheads(trailheads_payload)}
    assert set(trailheads) == {"44", "45"}
    alder = trailheads["44"]
    assert alder.name == "Alder Creek"
    assert alder.quota == 12
    assert alder.capacity == 30
    assert alder.region == "South"
    assert trailheads["45"].alert == "Bear activity"


def test_numeric_trailhead_ids_become_strings(trailheads_payload):
    trailheads_payload["response"]["values"]["44"]["id"] = 44
    ids = {t.id for t in decode_trailheads(trailheads_payload)}
    assert ids == {"44", "45"}


def test_missing_field_fails_fast(trailheads_payload):
    del trailheads_payload["response"]["values"]["44"]["capacity"]
    with pytest.raises(DecodeError):
        decode_trailheads(trailheads_payload)


def test_bad_status_raises(trailheads_payload):
    trailheads_payload["status"] = {"type": "error", "value": "Not logged in"}
    with pytest.raises(UnexpectedResponse) as excinfo:
        decode_trailheads(trailheads_payload)
    assert excinfo.value.status_type == "error"
    assert excinfo.value.status_value == "Not logged in"


def test_missing_status_is_decode_error():
    with pytest.raises(DecodeError):
        check_status({"response": {}})


def test_decode_report(south_report_payload):
    entries = decode_report(south_report_payload)
    keyed = {(e.trailhead_id, e.date): e.occupied for e in entries}
    # the value without a date is skipped
    assert keyed == {
        ("44", date(2020, 10, 2)): 0,
        ("99", date(2020, 10, 2)): 4,
        ("44", date(2020, 10, 3)): 25,
    }


def test_report_ignores_non_integer_cells(hetch_report_payload):
    entries = decode_report(hetch_report_payload)
    assert {e.trailhead_id for e in entries} == {"45"}
    assert len(entries) == 2


def test_report_bad_date(south_report_payload):
    south_report_payload["response"]["values"][0]["date"] = "10/02/2020"
    with pytest.raises(DecodeError):
        decode_report(south_report_payload)


def test_report_negative_occupancy(south_report_payload):
    south_report_payload["response"]["values"][0]["44"] = -1
    with pytest.raises(DecodeError):
        decode_report(south_report_payload)


def test_regions_of():
    trailheads = [
        Trailhead("1", "A", 1, 1, region="South"),
        Trailhead("2", "B", 1, 1, region="Hetch Hetchy"),
        Trailhead("3", "C", 1, 1, region="South"),
        Trailhead("4", "D", 1, 1),
    ]
    assert regions_of(trailheads) == ["Hetch Hetchy", "South"]


def test_walkup_capacity_then_advance_quota():
    """Capacity applies for the walk-up days, quota after that"""
    today = date(2020, 10, 2)
    trailheads = [Trailhead("44", "Alder Creek", quota=12, capacity=30)]
    ledger = PermitLedger(trailheads, quota_periods_for(trailheads, today, walkup_days=15, horizon_days=60))
    assert ledger.get_quota("44", today) == 30
    assert ledger.get_quota("44", today + timedelta(days=15)) == 30
    assert ledger.get_quota("44", today + timedelta(days=16)) == 12
    assert ledger.get_quota("44", today + timedelta(days=60)) == 12
    assert ledger.get_quota("44", today + timedelta(days=61)) == 0
    assert ledger.get_quota("44", today - timedelta(days=1)) == 0


def test_load_payload(saved_payloads, tmp_path):
    assert load_payload(saved_payloads["trailheads"])["status"]["type"] == "message"
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(DecodeError):
        load_payload(str(broken))


def test_advance_quota_covers_long_window():
    """The advance period stretches to the window end when it is past the horizon"""
    today = date(2020, 10, 2)
    window_end = today + timedelta(days=400)
    trailheads = [Trailhead("44", "Alder Creek", quota=12, capacity=30)]
    periods = quota_periods_for(trailheads, today, today, window_end, walkup_days=15, horizon_days=168)
    ledger = PermitLedger(trailheads, periods)
    assert ledger.get_quota("44", today + timedelta(days=300)) == 12
    assert ledger.get_quota("44", window_end) == 12


def test_walkup_anchored_on_today_not_window_start():
    """A future window start doesn't move the walk-up days"""
    today = date(2020, 10, 2)
    window_start = today + timedelta(days=20)
    trailheads = [Trailhead("44", "Alder Creek", quota=12, capacity=30)]
    periods = quota_periods_for(trailheads, today, window_start, window_start + timedelta(days=5))
    ledger = PermitLedger(trailheads, periods)
    assert ledger.get_quota("44", window_start) == 12


def test_past_window_start_uses_capacity():
    """Dates before today count as walk-up dates"""
    today = date(2020, 10, 2)
    window_start = today - timedelta(days=3)
    trailheads = [Trailhead("44", "Alder Creek", quota=12, capacity=30)]
    ledger = PermitLedger(trailheads, quota_periods_for(trailheads, today, window_start, today))
    assert ledger.get_quota("44", window_start) == 30
