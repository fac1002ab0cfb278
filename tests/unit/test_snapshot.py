"""
Unit tests for dashboard snapshot loading.
"""
import pytest

from loco_advisor.services.snapshot import SnapshotError, build_snapshot
from tests.conftest import ASSET_4430, ASSET_8772, ASSET_903


def test_builds_records_from_full_payload(snapshot):
    """Test the { status, value: { assetData } } shape."""
    assert len(snapshot) == 5
    record = snapshot[ASSET_4430]
    assert record.asset_id == ASSET_4430
    assert record.loco_no == "4430"
    assert record.mu_id == "MU-7"
    assert record.asset_states["engineHour"] == 18250
    assert record.has_last_inspection
    assert record.has_due_inspection


def test_accepts_value_and_bare_maps(dashboard_payload):
    """Test the { assetData } and bare assetData shapes."""
    value = dashboard_payload["value"]
    assert set(build_snapshot(value)) == set(value["assetData"])
    assert set(build_snapshot(value["assetData"])) == set(value["assetData"])


def test_empty_inspections_are_absent(snapshot):
    """Test that empty LastInspec / DueInspec objects mean no inspection."""
    record = snapshot[ASSET_903]
    assert not record.has_last_inspection
    assert not record.has_due_inspection
    assert record.normalized_loco_no == "903"


def test_numeric_loco_no_becomes_string(snapshot):
    """Test that numeric locoNo values are stored as strings."""
    assert snapshot[ASSET_8772].loco_no == "8772"


def test_snapshot_is_read_only(snapshot):
    """Test that the snapshot mapping cannot be modified."""
    with pytest.raises(TypeError):
        snapshot["new"] = snapshot[ASSET_4430]


def test_records_are_frozen(snapshot):
    """Test that records cannot be modified."""
    with pytest.raises(Exception):
        snapshot[ASSET_4430].name = "changed"


def test_unknown_fields_are_kept(dashboard_payload):
    """Test that extra payload fields survive on the record."""
    dashboard_payload["value"]["assetData"][ASSET_4430]["depot"] = "North"
    record = build_snapshot(dashboard_payload)[ASSET_4430]
    assert record.model_extra["depot"] == "North"


@pytest.mark.parametrize("payload", [
    [],
    "dashboard",
    {"status": 200, "value": {"summary": {}}},
    {"value": {"assetData": ["not", "a", "map"]}},
    {"assetData": {ASSET_4430: "not an object"}},
])
def test_rejects_bad_payloads(payload):
    """Test that unusable payloads raise SnapshotError."""
    with pytest.raises(SnapshotError):
        build_snapshot(payload)


def test_invalid_record_raises_snapshot_error(dashboard_payload):
    """Test that a record failing validation is reported with its asset ID."""
    dashboard_payload["value"]["assetData"][ASSET_4430]["assetStates"] = "broken"
    with pytest.raises(SnapshotError) as exc_info:
        build_snapshot(dashboard_payload)
    assert ASSET_4430 in str(exc_info.value)
