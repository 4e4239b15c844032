import json

import pytest


@pytest.fixture
def trailheads_payload():
    return {
        "status": {"type": "message", "value": "ok"},
        "response": {
            "timestamp": "2020-10-01 08:00:00",
            "values": {
                "44": {"id": "44", "name": "Alder Creek", "region": "South",
                       "quota": 12, "capacity": 30, "alert": None, "notes": None},
                "45": {"id": "45", "name": "Beehive Meadow", "region": "Hetch Hetchy",
                       "quota": 10, "capacity": 20, "alert": "Bear activity", "notes": None},
            },
        },
    }


@pytest.fixture
def south_report_payload():
    return {
        "status": {"type": "message", "value": "ok"},
        "response": {
            "id": "South",
            "values": [
                {"date": "2020-10-02", "44": 0, "99": 4},
                {"date": "2020-10-03", "44": 25},
                {"44": 1},
            ],
        },
    }


@pytest.fixture
def hetch_report_payload():
    return {
        "status": {"type": "message", "value": "ok"},
        "response": {
            "id": "Hetch Hetchy",
            "values": [
                {"date": "2020-10-02", "45": 22},
                {"date": "2020-10-03", "45": 3, "note": "closed"},
            ],
        },
    }


@pytest.fixture
def saved_payloads(tmp_path, trailheads_payload, south_report_payload, hetch_report_payload):
    """Write the sample payloads to disk and return their paths."""
    paths = {}
    for name, payload in (("trailheads", trailheads_payload),
                          ("south", south_report_payload),
                          ("hetch", hetch_report_payload)):
        path = tmp_path / f"{name}.json"
        path.write_text(json.dumps(payload))
        paths[name] = str(path)
    return paths
