"""
Follow-up and disambiguation wording.

Turns Ambiguous and not-found resolutions into user-facing questions.
Candidates are shown as "name (loco <locoNo>)"; asset IDs never appear
in any text produced here.
"""
from typing import List, Optional, Sequence

from loco_advisor import config
from loco_advisor.schemas.extraction import ExtractionResult
from loco_advisor.schemas.resolution import (
    Ambiguous,
    Candidate,
    NeedsFollowup,
    ResolutionOutcome,
)

MAX_CANDIDATES = config.MAX_DISAMBIGUATION_CANDIDATES

GENERIC_CLARIFICATION = (
    "Which locomotive do you mean? Please give the loco number (e.g. 4430) "
    "or its name (e.g. 4430 SD70M)."
)

STALE_SNAPSHOT_MESSAGE = (
    "I couldn't find {reference} in the current dashboard snapshot. "
    "The snapshot may be stale; refresh the dashboard data and ask again."
)

NOT_IN_DATABASE_MESSAGE = (
    "I couldn't find {reference} in the database. "
    "Please recheck the loco number or name."
)


def describe_reference(extraction: ExtractionResult) -> str:
    """Describe what the user asked for, without exposing asset IDs."""
    parts = [f"loco {n}" for n in extraction.loco_nos]
    parts.extend(f"'{n}'" for n in extraction.names)
    if extraction.asset_ids:
        parts.append("the referenced asset")
    return ", ".join(parts) or "that locomotive"


def format_candidate_labels(candidates: Sequence[Candidate], limit: int = MAX_CANDIDATES) -> List[str]:
    return [c.label for c in list(candidates)[:limit]]


def build_disambiguation_question(
    candidates: Sequence[Candidate],
    total_matches: Optional[int] = None,
    limit: int = MAX_CANDIDATES,
) -> str:
    """
    Build the "which one did you mean" question for an ambiguous match.

    Args:
        candidates: Matching locomotives
        total_matches: Uncapped number of matches, if larger than candidates
        limit: Maximum number of candidates listed

    Returns:
        Question text listing at most limit candidate labels
    """
    labels = format_candidate_labels(candidates, limit)
    total = max(total_matches or 0, len(candidates))
    lines = [f"I found {total} matching locomotives. Which one did you mean?"]
    lines.extend(f"{i}. {label}" for i, label in enumerate(labels, start=1))
    if total > len(labels):
        lines.append(f"({total - len(labels)} more not shown; please be more specific.)")
    return "\n".join(lines)


def build_not_found_followup(extraction: ExtractionResult, fresh: bool) -> NeedsFollowup:
    """
    Build the follow-up for a reference that matched nothing.

    A stale snapshot recommends a refresh; a fresh one asks the user to
    recheck, with no further retries.
    """
    if extraction.is_empty:
        return NeedsFollowup(reason="no_candidates", question=GENERIC_CLARIFICATION)

    reference = describe_reference(extraction)
    if fresh:
        return NeedsFollowup(
            reason="not_in_database",
            question=NOT_IN_DATABASE_MESSAGE.format(reference=reference),
        )
    return NeedsFollowup(
        reason="stale_snapshot",
        question=STALE_SNAPSHOT_MESSAGE.format(reference=reference),
        refresh_recommended=True,
    )


def followup_question(outcome: ResolutionOutcome, limit: int = MAX_CANDIDATES) -> Optional[str]:
    """
    Return the question to ask for an outcome.

    Partial matches append the not-found question for the identifiers
    that matched nothing. Returns None when everything resolved.
    """
    if isinstance(outcome, NeedsFollowup):
        return outcome.question

    questions = []
    if isinstance(outcome, Ambiguous):
        questions.append(build_disambiguation_question(outcome.candidates, outcome.total_matches, limit))
    if outcome.unresolved_followup is not None:
        questions.append(outcome.unresolved_followup.question)
    return "\n".join(questions) or None
