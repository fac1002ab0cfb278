"""
Advisor pipeline for Loco Advisor.

This module ties the pieces together: route the message to an intent,
extract and resolve the locomotive it refers to, and bind the intent's
recommended calls to the resolved record. Nothing here executes a call;
the caller decides what to run.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from loco_advisor.guardrails import (
    FIELD_PLACEHOLDER,
    assert_user_safe,
    redact_asset_ids,
    validate_read_fields,
    validate_recommended_call,
)
from loco_advisor.schemas.advice import Advice
from loco_advisor.schemas.catalog import IntentSpec, RecommendedCall
from loco_advisor.schemas.extraction import ExtractionResult
from loco_advisor.schemas.resolution import (
    Ambiguous,
    LocoRecord,
    NeedsFollowup,
    PartialResolution,
    ResolutionOutcome,
    Resolved,
    ResolvedMultiple,
    ResolverContext,
    ResolverOptions,
)
from loco_advisor.services.extraction import extract_loco_query
from loco_advisor.services.followup import followup_question, format_candidate_labels
from loco_advisor.services.intent_catalog import DASHBOARD_CALL, INTENT_CATALOG
from loco_advisor.services.resolver import resolve
from loco_advisor.services.router import route_intent

logger = logging.getLogger(__name__)

NO_INTENT_MESSAGE = (
    "I can answer read-only questions about the locomotive dashboard. "
    "What would you like to know?"
)


class GuardrailError(RuntimeError):
    """Raised when a bound recommendation fails a guardrail check."""


def _placeholder_values(record: LocoRecord) -> Dict[str, str]:
    return {
        "$assetId": record.asset_id,
        "$locoId": record.id or record.asset_id,
        "$locoNo": record.normalized_loco_no,
    }


def _bind_value(value: Any, values: Dict[str, str]) -> Any:
    if isinstance(value, str) and value in values:
        return values[value]
    return value


def bind_call(call: RecommendedCall, record: LocoRecord) -> RecommendedCall:
    """Return a copy of call with its $placeholders bound to record."""
    values = _placeholder_values(record)
    args = {key: _bind_value(value, values) for key, value in call.args.items()}
    return RecommendedCall(function=call.function, args=args)


def bind_fields(fields: List[str], record: LocoRecord) -> List[str]:
    return [f.replace(FIELD_PLACEHOLDER, record.asset_id) for f in fields]


def _bound_recommendations(spec: IntentSpec, records: List[LocoRecord]) -> tuple:
    calls: List[RecommendedCall] = []
    fields: List[str] = []
    for record in records:
        calls.extend(bind_call(c, record) for c in spec.recommended_calls)
        fields.extend(bind_fields(spec.read_these_fields, record))
    return calls, fields


def _resolved_records(outcome: ResolutionOutcome) -> List[LocoRecord]:
    if isinstance(outcome, Resolved):
        return [outcome.locomotive]
    if isinstance(outcome, ResolvedMultiple):
        return list(outcome.locomotives)
    if isinstance(outcome, Ambiguous):
        return list(outcome.resolved)
    return []


def _check_calls(calls: List[RecommendedCall], allow_maintenance: bool) -> None:
    for call in calls:
        is_valid, error = validate_recommended_call(call, allow_maintenance=allow_maintenance)
        if not is_valid:
            raise GuardrailError(error)


def _user_text(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return assert_user_safe(redact_asset_ids(text))


def _advise_for_loco(
    advice: Dict[str, Any],
    spec: IntentSpec,
    extraction: ExtractionResult,
    snapshot: Mapping,
    context: Optional[ResolverContext],
    options: ResolverOptions,
) -> None:
    outcome = resolve(extraction, snapshot, context, options)
    advice["outcome_kind"] = outcome.kind

    records = _resolved_records(outcome)
    calls, fields = _bound_recommendations(spec, records)

    is_valid, error = validate_read_fields(fields)
    if not is_valid:
        raise GuardrailError(error)

    if isinstance(outcome, PartialResolution):
        if isinstance(outcome, Ambiguous):
            advice["candidates"] = format_candidate_labels(outcome.candidates, options.max_candidates)
        advice["follow_up"] = followup_question(outcome, options.max_candidates)
        # Stale snapshot: keep the bound calls and add a refresh
        if outcome.unresolved_followup is not None and outcome.unresolved_followup.refresh_recommended:
            advice["refresh_recommended"] = True
            calls = calls + [DASHBOARD_CALL]
    elif isinstance(outcome, NeedsFollowup):
        if outcome.reason == "no_candidates" and spec.follow_up_question:
            advice["follow_up"] = spec.follow_up_question
        else:
            advice["follow_up"] = outcome.question
        if outcome.refresh_recommended:
            advice["refresh_recommended"] = True
            calls = [DASHBOARD_CALL]

    advice["recommended_calls"] = calls
    advice["read_these_fields"] = fields


def advise(
    message: str,
    snapshot: Mapping,
    context: Optional[ResolverContext] = None,
    options: Optional[ResolverOptions] = None,
    allow_maintenance: bool = False,
) -> Advice:
    """
    Turn a user message into a read-only recommendation.

    Args:
        message: Natural language question
        snapshot: Mapping of assetId -> LocoRecord, as built by build_snapshot
        context: Snapshot freshness
        options: Resolver toggles; defaults come from the environment
        allow_maintenance: Let maintenance intents through instead of blocking them

    Returns:
        Advice with bound calls, or a follow-up question when the message
        cannot be answered yet

    Raises:
        GuardrailError: If a bound recommendation fails validation
        TypeError: If snapshot is not a Mapping of records
    """
    options = options or ResolverOptions.from_env()
    extraction = extract_loco_query(message)
    route = route_intent(message, extraction)

    advice: Dict[str, Any] = {"message": message, "extraction": extraction}

    if route is None:
        advice["follow_up"] = NO_INTENT_MESSAGE
        return Advice(**advice)

    spec = INTENT_CATALOG[route.intent_id]
    advice["intent"] = route.intent_id.value
    advice["matched_phrase"] = route.matched_phrase

    if spec.safety == "maintenance_only" and not allow_maintenance:
        logger.info("Blocked maintenance intent %s", route.intent_id.value)
        advice["blocked"] = True
        advice["follow_up"] = _user_text(spec.follow_up_question)
        return Advice(**advice)

    if spec.requires_loco:
        _advise_for_loco(advice, spec, extraction, snapshot, context, options)
    else:
        advice["recommended_calls"] = list(spec.recommended_calls)
        advice["read_these_fields"] = list(spec.read_these_fields)

    _check_calls(advice["recommended_calls"], allow_maintenance)
    advice["follow_up"] = _user_text(advice.get("follow_up"))
    advice["candidates"] = [_user_text(label) for label in advice.get("candidates", [])]

    logger.info(
        "Advice for %s: %d call(s), follow-up=%s",
        route.intent_id.value, len(advice["recommended_calls"]), advice["follow_up"] is not None,
    )
    return Advice(**advice)
