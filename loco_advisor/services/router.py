"""
Keyword intent router.

Maps a user message to the catalog intent whose trigger phrase fits it
best. Matching is whole-word on normalized text, so "out of use credit"
beats "out of use" and a phrase never matches inside a longer word.
"""
import logging
import re
from typing import Dict, List, NamedTuple, Optional

from loco_advisor.schemas.catalog import IntentSpec
from loco_advisor.schemas.extraction import ExtractionResult
from loco_advisor.services.intent_catalog import INTENT_CATALOG, IntentId

logger = logging.getLogger(__name__)

# Tokens carrying a digit are identifiers, not wording
_IDENTIFIER_TOKEN = re.compile(r"\b\w*\d\w*\b")
_NON_WORD = re.compile(r"[^a-z0-9]+")


class RouteResult(NamedTuple):
    intent_id: IntentId
    matched_phrase: str
    score: int


def normalize_text(text: str) -> str:
    text = _IDENTIFIER_TOKEN.sub(" ", text.lower())
    return " ".join(_NON_WORD.sub(" ", text).split())


def _phrase_pattern(phrase: str) -> re.Pattern:
    words = normalize_text(phrase).split()
    return re.compile(r"\b" + r"\s+".join(re.escape(w) for w in words) + r"\b")


def _compile_triggers(catalog: Dict[IntentId, IntentSpec]) -> List[tuple]:
    compiled = []
    for intent_id, spec in catalog.items():
        for phrase in spec.trigger_phrases:
            compiled.append((intent_id, phrase, _phrase_pattern(phrase), len(normalize_text(phrase).split())))
    return compiled


TRIGGERS = _compile_triggers(INTENT_CATALOG)


def route_intent(text: str, extraction: Optional[ExtractionResult] = None) -> Optional[RouteResult]:
    """
    Pick the best matching intent for a message.

    Args:
        text: Raw user message
        extraction: Extracted references; when present, intents that need a
            locomotive get a one point bonus

    Returns:
        RouteResult for the highest scoring intent, or None if no trigger matched.
        Ties go to the intent listed first in the catalog.
    """
    normalized = normalize_text(text or "")
    has_reference = extraction is not None and not extraction.is_empty

    best: Optional[RouteResult] = None
    for intent_id, phrase, pattern, words in TRIGGERS:
        if not pattern.search(normalized):
            continue
        score = words
        if has_reference and INTENT_CATALOG[intent_id].requires_loco:
            score += 1
        if best is None or score > best.score:
            best = RouteResult(intent_id, phrase, score)

    if best is None:
        logger.debug("No intent matched: %r", normalized)
    else:
        logger.debug("Routed to %s via %r (score %d)", best.intent_id.value, best.matched_phrase, best.score)
    return best
