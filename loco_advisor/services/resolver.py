"""
Deterministic resolution of extracted references against the snapshot.

Rules are applied in strict priority order and the first rule with any
hit decides the outcome:
1. assetId: direct key lookup
2. locoNo: trimmed exact string match (optional numeric fallback)
3. name: case-insensitive exact match

Ties are never broken arbitrarily and nothing is fabricated: multiple
hits at one rule become Ambiguous, no hits become NeedsFollowup.
Identifiers that match nothing while others do are reported in the
outcome's unresolved list with their own not-found follow-up.
"""
import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from loco_advisor.schemas.extraction import ExtractionResult
from loco_advisor.schemas.resolution import (
    Ambiguous,
    Candidate,
    LocoRecord,
    MatchRule,
    PartialResolution,
    ResolutionOutcome,
    Resolved,
    ResolvedMultiple,
    ResolverContext,
    ResolverOptions,
)
from loco_advisor.services.followup import build_not_found_followup

logger = logging.getLogger(__name__)

# (identifier, records it matched)
MatchGroup = Tuple[str, List[LocoRecord]]


def _as_record(asset_id: str, value) -> LocoRecord:
    if isinstance(value, LocoRecord):
        return value
    if isinstance(value, Mapping):
        return LocoRecord.model_validate({**value, "assetId": asset_id})
    raise TypeError(f"Snapshot value for {asset_id!r} must be a LocoRecord or mapping, got {type(value).__name__}")


def _snapshot_records(snapshot: Mapping) -> Dict[str, LocoRecord]:
    """Copy the snapshot into a local dict so the call sees one consistent view."""
    if not isinstance(snapshot, Mapping):
        raise TypeError(f"snapshot must be a Mapping of assetId -> record, got {type(snapshot).__name__}")
    return {str(key): _as_record(str(key), value) for key, value in snapshot.items()}


def _unique_records(records: Sequence[LocoRecord]) -> List[LocoRecord]:
    seen = set()
    out = []
    for record in records:
        if record.asset_id not in seen:
            seen.add(record.asset_id)
            out.append(record)
    return out


def _collect(identifiers: Sequence[str], matcher: Callable[[str], List[LocoRecord]]) -> List[MatchGroup]:
    groups = []
    for ident in identifiers:
        hits = _unique_records(matcher(ident))
        if hits:
            groups.append((ident, hits))
    return groups


def _match_asset_ids(extraction: ExtractionResult, records: Dict[str, LocoRecord], options: ResolverOptions) -> List[MatchGroup]:
    by_lower = {key.lower(): record for key, record in records.items()}

    def matcher(asset_id: str) -> List[LocoRecord]:
        record = records.get(asset_id) or by_lower.get(asset_id.lower())
        return [record] if record is not None else []

    return _collect(extraction.asset_ids, matcher)


def _numeric_value(value: str) -> Optional[int]:
    return int(value) if value.isdigit() else None


def _match_loco_nos(extraction: ExtractionResult, records: Dict[str, LocoRecord], options: ResolverOptions) -> List[MatchGroup]:
    values = list(records.values())

    def exact(loco_no: str) -> List[LocoRecord]:
        wanted = loco_no.strip()
        return [r for r in values if r.normalized_loco_no == wanted]

    # Numeric fallback ignores leading zeros ("0903" == "903")
    def numeric(loco_no: str) -> List[LocoRecord]:
        wanted = _numeric_value(loco_no.strip())
        if wanted is None:
            return []
        return [r for r in values if _numeric_value(r.normalized_loco_no) == wanted]

    def matcher(loco_no: str) -> List[LocoRecord]:
        hits = exact(loco_no)
        if hits or not options.numeric_loco_fallback:
            return hits
        return numeric(loco_no)

    return _collect(extraction.loco_nos, matcher)


def _match_names(extraction: ExtractionResult, records: Dict[str, LocoRecord], options: ResolverOptions) -> List[MatchGroup]:
    values = list(records.values())

    def matcher(name: str) -> List[LocoRecord]:
        wanted = name.strip().casefold()
        return [r for r in values if (r.name or "").strip().casefold() == wanted]

    return _collect(extraction.names, matcher)


# (rule, ExtractionResult field it reads, matcher)
RULES: Tuple[Tuple[MatchRule, str, Callable], ...] = (
    ("assetId", "asset_ids", _match_asset_ids),
    ("locoNo", "loco_nos", _match_loco_nos),
    ("name", "names", _match_names),
)


def _ambiguous(records: List[LocoRecord], rule: MatchRule, options: ResolverOptions, resolved: List[LocoRecord] = None) -> Ambiguous:
    return Ambiguous(
        candidates=[Candidate.from_record(r) for r in records[:options.max_candidates]],
        total_matches=len(records),
        matched_by=rule,
        resolved=resolved or [],
    )


def _decide(rule: MatchRule, groups: List[MatchGroup], options: ResolverOptions) -> ResolutionOutcome:
    if not options.batch:
        distinct = _unique_records([r for _, hits in groups for r in hits])
        if len(distinct) == 1:
            return Resolved(locomotive=distinct[0], matched_by=rule)
        return _ambiguous(distinct, rule, options)

    # Batch mode: every identifier is resolved on its own
    resolved = []
    ambiguous = []
    for _, hits in groups:
        if len(hits) == 1:
            resolved.append(hits[0])
        else:
            ambiguous.extend(hits)
    resolved = _unique_records(resolved)
    ambiguous = _unique_records(ambiguous)

    if ambiguous:
        return _ambiguous(ambiguous, rule, options, resolved)
    if len(resolved) == 1:
        return Resolved(locomotive=resolved[0], matched_by=rule)
    return ResolvedMultiple(locomotives=resolved, matched_by=rule)


def _with_unresolved(
    outcome: PartialResolution,
    extraction: ExtractionResult,
    missing: Dict[str, List[str]],
    context: ResolverContext,
) -> PartialResolution:
    """Attach the identifiers that matched nothing and their not-found follow-up."""
    partial = ExtractionResult(input=extraction.input, **missing)
    followup = build_not_found_followup(partial, context.is_fresh())
    unresolved = [ident for idents in missing.values() for ident in idents]
    return outcome.model_copy(update={"unresolved": unresolved, "unresolved_followup": followup})


def resolve(
    extraction: ExtractionResult,
    snapshot: Mapping,
    context: Optional[ResolverContext] = None,
    options: Optional[ResolverOptions] = None,
) -> ResolutionOutcome:
    """
    Ground an extraction against the dashboard snapshot.

    Args:
        extraction: Output of extract_loco_query
        snapshot: Mapping of assetId -> LocoRecord (or raw record dict)
        context: Snapshot freshness, used to word not-found follow-ups
        options: Resolver toggles (numeric fallback, batch mode, candidate cap)

    Returns:
        Resolved, ResolvedMultiple, Ambiguous or NeedsFollowup

    Raises:
        TypeError: If snapshot is not a Mapping of records
    """
    records = _snapshot_records(snapshot)
    context = context or ResolverContext()
    options = options or ResolverOptions()

    missing: Dict[str, List[str]] = {}
    for rule, field, matcher in RULES:
        groups = matcher(extraction, records, options)
        matched = {ident for ident, _ in groups}
        missing[field] = [i for i in getattr(extraction, field) if i not in matched]
        if groups:
            outcome = _decide(rule, groups, options)
            if any(missing.values()):
                outcome = _with_unresolved(outcome, extraction, missing, context)
            logger.info("Resolved by %s rule: %s (%d unresolved)", rule, outcome.kind, len(outcome.unresolved))
            return outcome

    # No fuzzy name matching
    fresh = context.is_fresh()
    outcome = build_not_found_followup(extraction, fresh)
    logger.info("No snapshot match (fresh=%s): %s", fresh, outcome.reason)
    return outcome
