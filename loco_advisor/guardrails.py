"""
Recommendation guardrails for Loco Advisor.

This module provides the checks every recommended call and every piece of
user-facing text passes through before leaving the advisor.
"""
import re
from typing import Iterable, Tuple

from loco_advisor.schemas.catalog import MAINTENANCE_FUNCTIONS, FunctionName, RecommendedCall

ASSET_ID_TEXT_PATTERN = re.compile(r"\b[a-f0-9]{24}\b", re.IGNORECASE | re.ASCII)
PLACEHOLDER_PATTERN = re.compile(r"^\$[A-Za-z]+$")
FIELD_PLACEHOLDER = "<assetId>"
REDACTED = "[redacted]"


def validate_recommended_call(call: RecommendedCall, allow_maintenance: bool = False) -> Tuple[bool, str]:
    """
    Validate a call before it is handed to the caller.

    Args:
        call: The bound recommended call
        allow_maintenance: Whether write/side-effect functions may pass

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(call.function, FunctionName):
        return False, f"Unknown function: {call.function}"

    if call.function in MAINTENANCE_FUNCTIONS and not allow_maintenance:
        return False, f"Function {call.function.value} is blocked in advisor mode"

    for key, value in call.args.items():
        if isinstance(value, str) and PLACEHOLDER_PATTERN.match(value):
            return False, f"Argument '{key}' is still an unbound placeholder: {value}"

    return True, ""


def validate_read_fields(fields: Iterable[str]) -> Tuple[bool, str]:
    """Check that no field path still holds the assetId placeholder."""
    for field in fields:
        if FIELD_PLACEHOLDER in field:
            return False, f"Field path is not bound to a locomotive: {field}"
    return True, ""


def contains_asset_id(text: str) -> bool:
    return bool(ASSET_ID_TEXT_PATTERN.search(text or ""))


def redact_asset_ids(text: str) -> str:
    """Replace anything that looks like an asset ID with a placeholder."""
    if not text:
        return text
    return ASSET_ID_TEXT_PATTERN.sub(REDACTED, text)


def assert_user_safe(text: str) -> str:
    """
    Ensure a user-facing string carries no asset ID.

    Raises:
        ValueError: If the text contains something shaped like an asset ID
    """
    if contains_asset_id(text):
        raise ValueError("User-facing text must not contain asset IDs")
    return text
