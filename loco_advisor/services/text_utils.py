"""
Text helpers for locomotive reference extraction.

This module provides the small pure functions the extractor is built from:
1. Forward-progress regex scanning
2. Stopword and model-token checks
3. Heuristics for years, day durations, counts and domain context
"""
import re
from typing import Iterable, Iterator, List, Pattern

from loco_advisor.config import load_yaml_config

LEXICON = load_yaml_config("lexicon.yaml")

LOCO_KEYWORDS = tuple(LEXICON["loco_keywords"])

NAME_STOPWORDS = frozenset(
    word.upper()
    for group in LEXICON["name_stopwords"].values()
    for word in group
)

_KEYWORD_ALTERNATION = "|".join(re.escape(k) for k in LOCO_KEYWORDS)

# Singular or plural keyword as a whole word
KEYWORD_PATTERN = re.compile(rf"\b(?:{_KEYWORD_ALTERNATION})s?\b", re.IGNORECASE)

DOMAIN_CONTEXT_PATTERN = re.compile(
    r"\b(?:"
    + "|".join(re.escape(t) for t in LEXICON["domain_context_terms"])
    + r"|out[\s\-]*of[\s\-]*use)\b",
    re.IGNORECASE,
)

# "-day", "-days", " day", " days", "368d"
DAYISH_PATTERN = re.compile(r"^(?:\s*-\s*days?\b|\s+days?\b|d\b)", re.IGNORECASE)

_count = LEXICON["count_phrases"]
COUNT_LIMIT_LEFT = re.compile(
    r"\b(?:" + "|".join(_count["limit_words"]) + r")\s*$", re.IGNORECASE
)
COUNT_VERB_LEFT = re.compile(
    r"\b(?:" + "|".join(_count["listing_verbs"]) + r")\s*$", re.IGNORECASE
)
COUNT_NOUN_RIGHT = re.compile(
    r"^\s*(?:" + "|".join(_count["counted_nouns"]) + r")\b", re.IGNORECASE
)
COUNT_OF_LEFT = re.compile(r"\b(?:number\s+of|count\s+of)\s*$", re.IGNORECASE)

MODELISH_CHARS = re.compile(r"[0-9\-/]")

YEAR_MIN = 1900
YEAR_MAX = 2099


def iter_matches(pattern: Pattern, text: str) -> Iterator[re.Match]:
    """
    Yield every match of pattern in text, left to right.

    Scanning starts at offset 0 on every call and always moves forward,
    stepping one character past any zero-width match.
    """
    pos = 0
    length = len(text)
    while pos <= length:
        match = pattern.search(text, pos)
        if match is None:
            return
        yield match
        pos = match.end() if match.end() > match.start() else match.end() + 1


def uniq(values: Iterable[str]) -> List[str]:
    """De-duplicate while keeping first-seen order."""
    seen = set()
    out = []
    for value in values:
        if value not in seen:
            seen.add(value)
            out.append(value)
    return out


def is_stopword(word: str) -> bool:
    return word.upper() in NAME_STOPWORDS


def looks_modelish(token: str) -> bool:
    """A model token has a digit, hyphen or slash, or is an all-caps word."""
    if MODELISH_CHARS.search(token):
        return True
    return len(token) >= 2 and token == token.upper() and token.isalpha()


def near_keywords(text: str, start: int, end: int, window: int = 20) -> bool:
    """Check whether a loco keyword appears within window chars of a span."""
    left = max(0, start - window)
    right = min(len(text), end + window)
    return KEYWORD_PATTERN.search(text[left:right]) is not None


def is_followed_by_dayish(text: str, end: int) -> bool:
    """True for durations such as "368-day", "368 days" or "368d"."""
    tail = text[end:end + 10]
    return DAYISH_PATTERN.match(tail) is not None


def looks_like_year(value: int) -> bool:
    return YEAR_MIN <= value <= YEAR_MAX


def looks_like_count_number(text: str, start: int, end: int) -> bool:
    """
    Check if a number reads as a count or limit rather than an identifier.

    Examples: "top 100", "show 50 inspections", "number of 20 units".
    """
    left = text[max(0, start - 20):start]
    right = text[end:end + 25]

    if COUNT_LIMIT_LEFT.search(left):
        return True
    if COUNT_VERB_LEFT.search(left) and COUNT_NOUN_RIGHT.match(right):
        return True
    if COUNT_OF_LEFT.search(left):
        return True
    return False


def has_domain_context(text: str) -> bool:
    """True if the text talks about inspections, due dates, credit, status..."""
    return DOMAIN_CONTEXT_PATTERN.search(text) is not None
