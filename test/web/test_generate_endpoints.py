#!/usr/bin/env python3
"""Test one-shot generation endpoints (/generate-data and /data)"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

BODY = {"numFields": 4, "numObjects": 1, "numNesting": 1, "numRecords": 3, "nestedFields": 2}


def test_generate_data_wraps_records(client):
    response = client.post("/generate-data", json=BODY)
    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert len(payload["data"]) == 3
    record = payload["data"][0]
    assert list(record) == ["uuid_1", "firstName_2", "lastName_3", "fullName_4", "nested_object_1"]
    assert list(record["nested_object_1"]) == ["uuid_1", "firstName_2"]


def test_data_returns_bare_array(client):
    response = client.post("/data", json=BODY)
    assert response.status_code == 200
    records = response.json()
    assert isinstance(records, list)
    assert len(records) == 3


def test_uniform_length_across_records(client):
    body = dict(BODY, numFields=30, numRecords=20, uniformFieldLength=True)
    records = client.post("/data", json=body).json()
    for name in ("firstName_2", "city_18", "company_25"):
        lengths = {len(r[name]) for r in records}
        assert len(lengths) == 1, name


def test_missing_parameters_returns_400(client):
    response = client.post("/generate-data", json={"numFields": 3})
    assert response.status_code == 400
    payload = response.json()
    assert payload["code"] == "VALIDATION_ERROR"
    assert "Missing required parameters" in payload["error"]


def test_out_of_range_returns_400(client):
    response = client.post("/data", json=dict(BODY, numRecords=20000))
    assert response.status_code == 400
    assert response.json()["error"] == "Number of records must be between 1 and 10000"


def test_wrong_type_returns_400(client):
    response = client.post("/generate-data", json=dict(BODY, numFields="many"))
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
