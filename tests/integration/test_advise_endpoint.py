"""
Integration tests for the HTTP surface.

Tests /ping, /extract, /advise and the optional /mcp endpoint through the
FastAPI test client.
"""
import uuid
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from loco_advisor.main import app
from tests.conftest import ASSET_4430

client = TestClient(app)


def test_ping():
    """Test the health check."""
    response = client.get("/ping")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert client.head("/ping").status_code == 200


def test_extract_endpoint():
    """Test extraction over HTTP with camelCase output."""
    response = client.post("/extract", json={"message": "loco 4430 SD70M"})
    assert response.status_code == 200
    data = response.json()
    assert data["locoNos"] == ["4430"]
    assert data["names"] == ["4430 SD70M"]
    assert data["confidence"] == "medium"


def test_extract_accepts_query_field():
    """Test the 'query' alias for the message."""
    response = client.post("/extract", json={"query": "Status for 4430SD70M"})
    assert response.status_code == 200
    assert response.json()["names"] == ["4430 SD70M"]


def test_extract_requires_message():
    """Test that a missing message is a client error."""
    response = client.post("/extract", json={})
    assert response.status_code == 400


def test_advise_endpoint(dashboard_payload):
    """Test a resolved recommendation over HTTP."""
    response = client.post("/advise", json={
        "message": "When is 4430 due next?",
        "dashboard": dashboard_payload,
        "dashboardDataFresh": True,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["intent"] == "LOCO_NEXT_DUE_INSPECTION"
    assert data["recommended_calls"] == [
        {"function": "getLocoNextDueLocoInspection", "args": {"assetId": ASSET_4430}},
    ]
    assert data["extraction"]["locoNos"] == ["4430"]


def test_advise_stale_by_timestamp(dashboard_payload):
    """Test that an old lastFetchTimestamp counts as stale."""
    response = client.post("/advise", json={
        "message": "Next inspection for loco 9999",
        "dashboard": dashboard_payload,
        "lastFetchTimestamp": "2020-01-01T00:00:00Z",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["refresh_recommended"] is True
    assert data["recommended_calls"] == [{"function": "getDashBoardData", "args": {}}]


def test_advise_ambiguous_has_no_asset_ids(dashboard_payload):
    """Test that disambiguation output carries labels, not asset IDs."""
    response = client.post("/advise", json={
        "message": "Is loco 123 out of use?",
        "dashboard": dashboard_payload,
        "dashboardDataFresh": True,
    })
    data = response.json()
    assert data["candidates"] == ["123 GP38 (loco 123)", "123 GP40 (loco 123)"]
    for asset_id in dashboard_payload["value"]["assetData"]:
        assert asset_id not in data["follow_up"]


def test_advise_rejects_bad_dashboard():
    """Test that an unusable dashboard payload is a client error."""
    response = client.post("/advise", json={"message": "loco 4430", "dashboard": {"status": 200}})
    assert response.status_code == 400


def test_advise_requires_dashboard():
    """Test that the dashboard payload is mandatory."""
    response = client.post("/advise", json={"message": "loco 4430"})
    assert response.status_code == 400


def test_advise_rejects_bad_timestamp(dashboard_payload):
    """Test that an unparseable timestamp is a client error."""
    response = client.post("/advise", json={
        "message": "loco 4430",
        "dashboard": dashboard_payload,
        "lastFetchTimestamp": "yesterday-ish",
    })
    assert response.status_code == 400


def test_mcp_disabled_by_default(dashboard_payload):
    """Test that /mcp is hidden unless ENABLE_MCP is set."""
    with patch("loco_advisor.config.ENABLE_MCP", False):
        response = client.post("/mcp", json={"trace_id": str(uuid.uuid4()), "steps": []})
    assert response.status_code == 404


@pytest.fixture
def mcp_enabled():
    with patch("loco_advisor.config.ENABLE_MCP", True):
        yield


def test_mcp_matches_advise(mcp_enabled, dashboard_payload):
    """Test that /mcp recommend output matches /advise for the same message."""
    message = "Is loco 4430 out of use?"
    advise_data = client.post("/advise", json={
        "message": message,
        "dashboard": dashboard_payload,
        "dashboardDataFresh": True,
    }).json()

    response = client.post("/mcp", json={
        "trace_id": str(uuid.uuid4()),
        "context": {"message": message, "dashboard": dashboard_payload, "dashboardDataFresh": True},
        "steps": [{"tool": "recommend"}],
    })
    assert response.status_code == 200
    steps = response.json()["steps"]

    # The missing extract step is created in front of recommend
    assert [s["tool"] for s in steps] == ["extract", "recommend"]
    assert steps[0]["output"]["locoNos"] == ["4430"]
    assert steps[1]["output"]["recommended_calls"] == advise_data["recommended_calls"]
    assert steps[1]["output"]["read_these_fields"] == advise_data["read_these_fields"]


def test_mcp_resolve_step(mcp_enabled, dashboard_payload):
    """Test the resolve step output for an ambiguous loco."""
    response = client.post("/mcp", json={
        "trace_id": str(uuid.uuid4()),
        "context": {"message": "Is loco 123 out of use?", "dashboard": dashboard_payload, "dashboardDataFresh": True},
        "steps": [{"tool": "extract"}, {"tool": "resolve"}],
    })
    assert response.status_code == 200
    output = response.json()["steps"][1]["output"]
    assert output["kind"] == "ambiguous"
    assert output["total_matches"] == 2
    assert "Which one did you mean?" in output["question"]
    for candidate in output["candidates"]:
        assert "asset_id" not in candidate


def test_mcp_requires_message(mcp_enabled):
    """Test that the envelope context must carry the message."""
    response = client.post("/mcp", json={
        "trace_id": str(uuid.uuid4()),
        "context": {"dashboard": {}},
        "steps": [{"tool": "extract"}],
    })
    assert response.status_code == 400


def test_mcp_keeps_existing_outputs(mcp_enabled, dashboard_payload):
    """Test that steps which already carry output are not re-run."""
    response = client.post("/mcp", json={
        "trace_id": str(uuid.uuid4()),
        "context": {"message": "loco 4430", "dashboard": dashboard_payload},
        "steps": [{"tool": "extract", "output": "done"}],
    })
    assert response.status_code == 200
    assert response.json()["steps"][0]["output"] == "done"


def test_mcp_resolve_step_reports_unresolved_loco(mcp_enabled, dashboard_payload):
    """Test that the resolve step keeps a loco that matched nothing."""
    response = client.post("/mcp", json={
        "trace_id": str(uuid.uuid4()),
        "context": {
            "message": "Next inspection for loco 4430 and loco 9999",
            "dashboard": dashboard_payload,
            "dashboardDataFresh": True,
        },
        "steps": [{"tool": "extract"}, {"tool": "resolve"}],
    })
    assert response.status_code == 200
    output = response.json()["steps"][1]["output"]
    assert output["kind"] == "resolved"
    assert output["unresolved"] == ["9999"]
    assert "loco 9999" in output["question"]
