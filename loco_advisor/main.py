"""
Main application module for Loco Advisor.

This module defines the FastAPI application, routes, and middleware.
"""
import logging
from typing import Any, Dict, Mapping, Tuple

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from loco_advisor import __version__, config
from loco_advisor.schemas.extraction import ExtractionResult
from loco_advisor.schemas.mcp import MCPEnvelope, Step
from loco_advisor.schemas.resolution import LocoRecord, ResolverContext, ResolverOptions
from loco_advisor.services.extraction import extract_loco_query
from loco_advisor.services.followup import followup_question
from loco_advisor.services.pipeline import GuardrailError, advise
from loco_advisor.services.resolver import resolve
from loco_advisor.services.snapshot import SnapshotError, build_snapshot

config.configure_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Loco Advisor",
    description="Locomotive reference extraction and read-only dashboard call recommendations",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_message(request: Mapping[str, Any]) -> str:
    """Accept either 'message' or 'query' field for compatibility."""
    message = request.get("message") or request.get("query")
    if not message or not isinstance(message, str):
        raise HTTPException(status_code=400, detail="Missing 'query' or 'message' field")
    return message


def get_snapshot_and_context(request: Mapping[str, Any]) -> Tuple[Mapping[str, LocoRecord], ResolverContext]:
    """
    Build the snapshot and freshness context from a request body.

    Raises:
        HTTPException: 400 if the dashboard payload or freshness fields are invalid
    """
    if "dashboard" not in request:
        raise HTTPException(status_code=400, detail="Missing 'dashboard' field")
    try:
        snapshot = build_snapshot(request["dashboard"])
        context = ResolverContext.model_validate({
            "dashboardDataFresh": request.get("dashboardDataFresh"),
            "lastFetchTimestamp": request.get("lastFetchTimestamp"),
        })
    except (SnapshotError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return snapshot, context


@app.get("/ping")
@app.head("/ping")
async def ping():
    """Health check endpoint. Supports both GET and HEAD methods."""
    return {"status": "ok"}


@app.post("/extract")
async def extract(request: Dict = Body(...)):
    """
    Extract locomotive references from a message.

    Args:
        request: Request body containing either 'message' or 'query' field

    Returns:
        ExtractionResult with asset IDs, loco numbers, names and confidence
    """
    message = get_message(request)
    try:
        return extract_loco_query(message)
    except Exception as e:
        logger.exception("Error in extract endpoint")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/advise")
async def advise_endpoint(request: Dict = Body(...)):
    """
    Recommend read-only dashboard calls for a message.

    Args:
        request: Body with 'message' (or 'query'), 'dashboard' (getDashBoardData
            payload) and optional 'dashboardDataFresh' / 'lastFetchTimestamp'

    Returns:
        Advice with bound calls or a follow-up question
    """
    message = get_message(request)
    snapshot, context = get_snapshot_and_context(request)
    try:
        return advise(message, snapshot, context, ResolverOptions.from_env())
    except GuardrailError as e:
        logger.warning("Guardrail rejected recommendation: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.exception("Error in advise endpoint")
        raise HTTPException(status_code=500, detail=str(e))


# MCP Helper functions
def validate_mcp_envelope(envelope: MCPEnvelope) -> str:
    """Validate MCP envelope and extract the message."""
    if not envelope.context:
        raise HTTPException(status_code=400, detail="Context must contain 'message' or 'query' field")
    return get_message(envelope.context)


def process_extract_step(step: Step, message: str, envelope: MCPEnvelope) -> None:
    step.output = extract_loco_query(message).model_dump(mode="json", by_alias=True)


def get_or_create_extract_step(envelope: MCPEnvelope, current_index: int, message: str) -> Step:
    """
    Get existing extract step or create and process a new one.

    Args:
        envelope: MCP envelope containing steps
        current_index: Index of the step that needs the extraction
        message: User message from context

    Returns:
        The extract step (either existing or newly created)
    """
    extract_step = envelope.find_step("extract")

    if not extract_step:
        extract_step = Step(tool="extract")
        envelope.steps.insert(current_index, extract_step)
        process_extract_step(extract_step, message, envelope)
    elif not extract_step.output:
        process_extract_step(extract_step, message, envelope)

    return extract_step


def process_resolve_step(step: Step, message: str, envelope: MCPEnvelope) -> None:
    try:
        current_index = envelope.steps.index(step)
        extract_step = get_or_create_extract_step(envelope, current_index, message)
        extraction = ExtractionResult.model_validate(extract_step.output)
    except (ValidationError, TypeError) as e:
        raise HTTPException(status_code=400, detail=f"Extract step output is invalid: {e}")

    snapshot, context = get_snapshot_and_context(envelope.context)
    options = ResolverOptions.from_env()
    outcome = resolve(extraction, snapshot, context, options)
    output = outcome.model_dump(mode="json", by_alias=True)
    output["question"] = followup_question(outcome, options.max_candidates)
    step.output = output


def process_recommend_step(step: Step, message: str, envelope: MCPEnvelope) -> None:
    current_index = envelope.steps.index(step)
    get_or_create_extract_step(envelope, current_index, message)

    snapshot, context = get_snapshot_and_context(envelope.context)
    step.output = advise(message, snapshot, context, ResolverOptions.from_env()).model_dump(mode="json", by_alias=True)


STEP_PROCESSORS = {
    "extract": process_extract_step,
    "resolve": process_resolve_step,
    "recommend": process_recommend_step,
}


def process_pending_steps(envelope: MCPEnvelope, message: str) -> None:
    """
    Process all steps in the envelope that don't have output yet.

    Prerequisite steps inserted on demand already carry output and are
    skipped when the loop reaches them.
    """
    index = 0
    while index < len(envelope.steps):
        step = envelope.steps[index]
        if step.output is None:
            STEP_PROCESSORS[step.tool](step, message, envelope)
        index += 1


@app.post("/mcp")
async def mcp_endpoint(envelope: MCPEnvelope):
    """
    Process a request through the Model Context Protocol.

    Only available when ENABLE_MCP is set.

    Args:
        envelope: MCP envelope with trace_id, context, and steps

    Returns:
        Updated MCP envelope with step outputs
    """
    if not config.ENABLE_MCP:
        raise HTTPException(status_code=404, detail="Not Found")
    try:
        message = validate_mcp_envelope(envelope)
        process_pending_steps(envelope, message)
        return envelope
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error in MCP endpoint")
        raise HTTPException(status_code=500, detail=str(e))
