"""
Locomotive reference extraction.

This module pulls locomotive references out of free-text admin questions:
1. Asset IDs (24-character hex tokens)
2. Loco numbers (keyword-anchored, then scored generic 3-5 digit numbers)
3. Loco names ("4430 SD70M", "903 EMD SL-1", "4430SD70M", bare model tokens)

Extraction is pure and deterministic. No external NLP model is used.
"""
import logging
import re
from typing import List, NamedTuple, Tuple

from loco_advisor.schemas.extraction import Confidence, ExtractionResult, RawMatch
from loco_advisor.services.text_utils import (
    MODELISH_CHARS,
    has_domain_context,
    is_followed_by_dayish,
    is_stopword,
    iter_matches,
    looks_like_count_number,
    looks_like_year,
    looks_modelish,
    near_keywords,
    uniq,
)

logger = logging.getLogger(__name__)

# Word boundaries and digit classes are ASCII-only
ASSET_ID_PATTERN = re.compile(r"\b[a-f0-9]{24}\b", re.IGNORECASE | re.ASCII)

# Phase A: "loco 4430", "loco: 4430", "loco no. 4430", "engines #903"
LOCO_KEYWORD_NUMBER_PATTERN = re.compile(
    r"\b(?:loco|locomotive|unit|engine)s?\b"
    r"(?:\s*(?:no\.?|number)?)\s*[:#\-]?\s*"
    r"(\d{3,5})\b",
    re.IGNORECASE | re.ASCII,
)

# Phase B: "loco4430", "unit903"
LOCO_KEYWORD_NUMBER_CONCAT_PATTERN = re.compile(
    r"\b(?:loco|locomotive|unit|engine)(\d{3,5})\b",
    re.IGNORECASE | re.ASCII,
)

# Phase C and name phrases start from any standalone 3-5 digit number
NUMBER_PATTERN = re.compile(r"\b\d{3,5}\b", re.ASCII)

# "4430SD70M", "903EMD"
NAME_NOSPACE_PATTERN = re.compile(
    r"\b(\d{3,5})([A-Za-z][A-Za-z0-9\-/]{2,15})\b", re.ASCII
)

# Up to three tokens after a number: the first must start with a letter
PHRASE_FIRST_TOKEN = re.compile(r"\s+([A-Za-z][A-Za-z0-9\-/]*)")
PHRASE_NEXT_TOKEN = re.compile(r"\s+([A-Za-z0-9][A-Za-z0-9\-/]*)")
PHRASE_MAX_TOKENS = 3

# Bare model tokens such as SD70M, AC44C6M, SL-1 (case-sensitive)
MODEL_TOKEN_PATTERN = re.compile(r"\b[A-Z][A-Z0-9\-/]{1,15}\b", re.ASCII)
MODEL_TOKEN_WINDOW = 25

NUMBERED_NAME_PATTERN = re.compile(r"^\d{3,5}\b", re.ASCII)

KEYWORD_WINDOW = 20


class NumberCandidate(NamedTuple):
    """A generic number that survived the Phase C filters."""
    text: str
    start: int
    end: int
    score: int


def extract_asset_ids(text: str) -> Tuple[List[str], List[RawMatch]]:
    """
    Extract all 24-hex asset IDs.

    Values are lower-cased and de-duplicated; every occurrence is kept as
    a raw match with its original casing.
    """
    asset_ids = []
    matches = []
    for m in iter_matches(ASSET_ID_PATTERN, text):
        asset_ids.append(m.group(0).lower())
        matches.append(RawMatch(kind="assetId", text=m.group(0), start=m.start(), end=m.end()))
    return uniq(asset_ids), matches


def _score_number(text: str, start: int, end: int, domain: bool) -> int:
    score = 0
    if near_keywords(text, start, end, KEYWORD_WINDOW):
        score += 2
    if "#" in text[max(0, start - 2):start]:
        score += 1
    if domain:
        score += 1
    return score


def _generic_number_candidates(text: str, taken: List[str]) -> List[NumberCandidate]:
    """Phase C: score every remaining 3-5 digit number."""
    domain = has_domain_context(text)
    candidates = []
    for m in iter_matches(NUMBER_PATTERN, text):
        num_text = m.group(0)
        start, end = m.start(), m.end()

        if num_text in taken:
            continue
        # "368-day", "368 days", "368d" are durations
        if is_followed_by_dayish(text, end):
            continue
        # "top 100", "show 50 inspections"
        if looks_like_count_number(text, start, end):
            continue
        # Years are never loco numbers without a keyword anchor
        if looks_like_year(int(num_text)):
            continue

        candidates.append(NumberCandidate(num_text, start, end, _score_number(text, start, end, domain)))
    return candidates


def extract_loco_nos(text: str) -> Tuple[List[str], List[RawMatch]]:
    """
    Extract all likely loco numbers.

    Keyword-anchored numbers (phases A and B) are trusted as-is, years
    included. Remaining numbers need a score of at least 1 from keyword
    proximity, a leading '#' or domain wording in the question.
    """
    loco_nos = []
    matches = []

    for pattern in (LOCO_KEYWORD_NUMBER_PATTERN, LOCO_KEYWORD_NUMBER_CONCAT_PATTERN):
        for m in iter_matches(pattern, text):
            num_text = m.group(1)
            if num_text in loco_nos:
                continue
            loco_nos.append(num_text)
            matches.append(RawMatch(kind="locoNo", text=num_text, start=m.start(1), end=m.end(1)))

    trusted = list(loco_nos)
    for candidate in _generic_number_candidates(text, trusted):
        # A bare number with no supporting signal is never accepted
        if candidate.score < 1:
            continue
        loco_nos.append(candidate.text)
        matches.append(
            RawMatch(kind="locoNo", text=candidate.text, start=candidate.start, end=candidate.end)
        )

    return uniq(loco_nos), matches


def _extract_nospace_names(text: str, names: List[str], matches: List[RawMatch]) -> None:
    for m in iter_matches(NAME_NOSPACE_PATTERN, text):
        number, model = m.group(1), m.group(2)
        if is_stopword(model):
            continue
        if not looks_modelish(model):
            continue

        phrase = f"{number} {model}"
        if phrase in names:
            continue
        names.append(phrase)
        # Raw text keeps the original unspaced form
        matches.append(RawMatch(kind="name", text=m.group(0), start=m.start(), end=m.end()))


def _phrase_tokens(text: str, pos: int) -> List[Tuple[str, int]]:
    """Collect up to three (token, end offset) pairs following pos."""
    tokens = []
    pattern = PHRASE_FIRST_TOKEN
    while len(tokens) < PHRASE_MAX_TOKENS:
        m = pattern.match(text, pos)
        if m is None:
            break
        tokens.append((m.group(1), m.end(1)))
        pos = m.end(1)
        pattern = PHRASE_NEXT_TOKEN
    return tokens


def _extract_phrase_names(text: str, names: List[str], matches: List[RawMatch]) -> None:
    for m in iter_matches(NUMBER_PATTERN, text):
        following = _phrase_tokens(text, m.end())
        if not following:
            continue
        if is_stopword(following[0][0]):
            continue

        # Cut the phrase at the first stopword
        for i, (token, _) in enumerate(following):
            if is_stopword(token):
                following = following[:i]
                break

        if not any(looks_modelish(token) for token, _ in following):
            continue

        while following and is_stopword(following[-1][0]):
            following.pop()
        if not following:
            continue

        phrase = " ".join([m.group(0)] + [token for token, _ in following])
        if phrase in names:
            continue
        end = following[-1][1]
        names.append(phrase)
        matches.append(RawMatch(kind="name", text=text[m.start():end], start=m.start(), end=end))


def _extract_model_tokens(text: str, names: List[str], matches: List[RawMatch]) -> None:
    for m in iter_matches(MODEL_TOKEN_PATTERN, text):
        token = m.group(0)
        if is_stopword(token):
            continue
        if not MODELISH_CHARS.search(token):
            continue
        if not near_keywords(text, m.start(), m.end(), MODEL_TOKEN_WINDOW):
            continue
        if any(token in name for name in names):
            continue
        names.append(token)
        matches.append(RawMatch(kind="name", text=token, start=m.start(), end=m.end()))


def extract_names(text: str) -> Tuple[List[str], List[RawMatch]]:
    """
    Extract all likely loco names, most specific layer first.

    1. No-space compounds ("4430SD70M" -> "4430 SD70M")
    2. Number + model phrase ("903 EMD SL-1")
    3. Bare model tokens near a loco keyword ("loco SD70M")
    """
    names = []
    matches = []
    _extract_nospace_names(text, names, matches)
    _extract_phrase_names(text, names, matches)
    _extract_model_tokens(text, names, matches)
    return uniq(names), matches


def compute_confidence(asset_ids: List[str], loco_nos: List[str], names: List[str]) -> Confidence:
    """
    Collapse the extracted candidates into one ordinal confidence.

    Model-only names (no leading number) stay low confidence.
    """
    if asset_ids:
        return "high"
    if loco_nos:
        return "medium"
    if any(NUMBERED_NAME_PATTERN.match(name) for name in names):
        return "medium"
    return "low"


def extract_loco_query(text: str) -> ExtractionResult:
    """
    Extract every locomotive reference from a user message.

    Args:
        text: The raw user message

    Returns:
        ExtractionResult with unique asset IDs, loco numbers and names,
        raw matches sorted by start offset, and a confidence label
    """
    text = text or ""
    asset_ids, asset_matches = extract_asset_ids(text)
    loco_nos, loco_matches = extract_loco_nos(text)
    names, name_matches = extract_names(text)

    raw_matches = sorted(asset_matches + loco_matches + name_matches, key=lambda r: r.start)
    confidence = compute_confidence(asset_ids, loco_nos, names)

    logger.debug(
        "Extracted %d asset ids, %d loco numbers, %d names (confidence=%s)",
        len(asset_ids), len(loco_nos), len(names), confidence,
    )

    return ExtractionResult(
        input=text,
        asset_ids=asset_ids,
        loco_nos=loco_nos,
        names=names,
        raw_matches=raw_matches,
        confidence=confidence,
    )
