"""
Unit tests for MCP schema.

Tests validation and serialization of MCP envelope and steps.
"""
import uuid

import pytest
from pydantic import ValidationError

from loco_advisor.schemas.mcp import MCPEnvelope, Step


def test_valid_step():
    """Test that valid Step objects can be created."""
    step1 = Step(tool="extract")
    assert step1.tool == "extract"
    assert step1.input is None
    assert step1.output is None

    step2 = Step(tool="resolve", output={"kind": "resolved"})
    assert step2.output == {"kind": "resolved"}

    step3 = Step(tool="recommend", output="Which locomotive?")
    assert step3.output == "Which locomotive?"


def test_invalid_step_tool():
    """Test that Step with invalid tool fails validation."""
    with pytest.raises(ValidationError):
        Step(tool="sql_exec")


def test_valid_envelope():
    """Test that valid MCPEnvelope objects can be created."""
    trace_id = uuid.uuid4()
    envelope = MCPEnvelope(
        trace_id=trace_id,
        context={"message": "loco 4430", "dashboard": {}},
        steps=[Step(tool="extract"), Step(tool="recommend")],
    )
    assert envelope.trace_id == trace_id
    assert envelope.context["message"] == "loco 4430"
    assert [s.tool for s in envelope.steps] == ["extract", "recommend"]


def test_invalid_trace_id():
    """Test that a non-UUID trace_id fails validation."""
    with pytest.raises(ValidationError):
        MCPEnvelope(trace_id="not-a-uuid", steps=[])


def test_envelope_serialization():
    """Test that envelopes round-trip through JSON."""
    envelope = MCPEnvelope(trace_id=uuid.uuid4(), steps=[Step(tool="extract", output={"locoNos": ["4430"]})])
    restored = MCPEnvelope.model_validate_json(envelope.model_dump_json())
    assert restored == envelope


def test_find_step():
    """Test looking up a step by tool name."""
    envelope = MCPEnvelope(trace_id=uuid.uuid4(), steps=[Step(tool="extract"), Step(tool="recommend")])
    assert envelope.find_step("recommend") is envelope.steps[1]
    assert envelope.find_step("resolve") is None
