"""
Unit tests for follow-up and disambiguation wording.
"""
from loco_advisor import config
from loco_advisor.schemas.extraction import ExtractionResult
from loco_advisor.schemas.resolution import Ambiguous, Candidate, Resolved, ResolverOptions
from loco_advisor.services.followup import (
    GENERIC_CLARIFICATION,
    MAX_CANDIDATES,
    build_disambiguation_question,
    build_not_found_followup,
    describe_reference,
    followup_question,
)


def make_candidates(count):
    return [
        Candidate(asset_id=f"{i:024x}", name=f"{100 + i} GP38", loco_no=str(100 + i))
        for i in range(count)
    ]


def test_disambiguation_lists_labels():
    """Test that candidates are listed as 'name (loco N)'."""
    question = build_disambiguation_question(make_candidates(2))
    assert "Which one did you mean?" in question
    assert "1. 100 GP38 (loco 100)" in question
    assert "2. 101 GP38 (loco 101)" in question
    assert "more not shown" not in question


def test_disambiguation_caps_at_limit():
    """Test that only five candidates are shown with a note for the rest."""
    candidates = make_candidates(8)
    question = build_disambiguation_question(candidates, total_matches=8)
    assert "5. 104 GP38 (loco 104)" in question
    assert "6." not in question
    assert "(3 more not shown" in question


def test_disambiguation_never_shows_asset_ids():
    """Test that asset IDs stay out of the question."""
    candidates = make_candidates(3)
    question = build_disambiguation_question(candidates)
    for c in candidates:
        assert c.asset_id not in question


def test_candidate_serialization_excludes_asset_id():
    """Test that a candidate dumped to JSON carries no asset ID."""
    data = make_candidates(1)[0].model_dump()
    assert "asset_id" not in data
    assert data == {"name": "100 GP38", "loco_no": "100"}


def test_describe_reference():
    """Test the wording used for what the user asked about."""
    assert describe_reference(ExtractionResult(input="", loco_nos=["4430", "903"])) == "loco 4430, loco 903"
    assert describe_reference(ExtractionResult(input="", names=["4430 SD70M"])) == "'4430 SD70M'"
    assert describe_reference(ExtractionResult(input="", asset_ids=["ab" * 12])) == "the referenced asset"


def test_not_found_followups():
    """Test stale, fresh and empty not-found follow-ups."""
    extraction = ExtractionResult(input="", loco_nos=["9999"])

    stale = build_not_found_followup(extraction, fresh=False)
    assert stale.reason == "stale_snapshot"
    assert stale.refresh_recommended

    fresh = build_not_found_followup(extraction, fresh=True)
    assert fresh.reason == "not_in_database"
    assert not fresh.refresh_recommended

    empty = build_not_found_followup(ExtractionResult(input=""), fresh=False)
    assert empty.reason == "no_candidates"
    assert empty.question == GENERIC_CLARIFICATION


def test_followup_question_for_resolved_is_none(snapshot):
    """Test that a resolved outcome needs no follow-up."""
    record = next(iter(snapshot.values()))
    assert followup_question(Resolved(locomotive=record, matched_by="assetId")) is None


def test_followup_question_for_ambiguous():
    """Test that ambiguous outcomes produce the disambiguation question."""
    outcome = Ambiguous(candidates=make_candidates(2), total_matches=2, matched_by="locoNo")
    assert "I found 2 matching locomotives" in followup_question(outcome)


def test_followup_question_for_partial_match(snapshot):
    """Test that unmatched identifiers add their not-found question."""
    record = next(iter(snapshot.values()))
    missing = build_not_found_followup(ExtractionResult(input="", loco_nos=["9999"]), fresh=True)
    outcome = Resolved(locomotive=record, matched_by="locoNo", unresolved=["9999"], unresolved_followup=missing)
    assert followup_question(outcome) == missing.question

    ambiguous = Ambiguous(
        candidates=make_candidates(2), total_matches=2, matched_by="locoNo",
        unresolved=["9999"], unresolved_followup=missing,
    )
    question = followup_question(ambiguous)
    assert question.startswith("I found 2 matching locomotives")
    assert question.endswith(missing.question)


def test_describe_reference_mixed_kinds():
    """Test that every kind of reference is described."""
    extraction = ExtractionResult(input="", asset_ids=["ab" * 12], loco_nos=["9999"], names=["No Such Loco"])
    assert describe_reference(extraction) == "loco 9999, 'No Such Loco', the referenced asset"


def test_default_cap_follows_config():
    """Test that the follow-up cap and the resolver cap share one setting."""
    assert MAX_CANDIDATES == config.MAX_DISAMBIGUATION_CANDIDATES
    assert ResolverOptions().max_candidates == config.MAX_DISAMBIGUATION_CANDIDATES


def test_label_for_unnamed_candidate():
    """Test that a blank name never yields a blank label."""
    assert Candidate(asset_id="a" * 24, name="", loco_no="123").label == "Unnamed locomotive (loco 123)"
    assert Candidate(asset_id="a" * 24, name="  ", loco_no="").label == "Unnamed locomotive"
