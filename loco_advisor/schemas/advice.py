"""
Advice response schema.

This module defines the Pydantic model returned by the advisor pipeline.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from loco_advisor.schemas.catalog import RecommendedCall
from loco_advisor.schemas.extraction import ExtractionResult


class Advice(BaseModel):
    """Response model for the /advise endpoint."""
    message: str = Field(..., description="The user message that was advised on")
    intent: Optional[str] = Field(None, description="Catalog intent the message routed to")
    matched_phrase: Optional[str] = Field(None, description="Trigger phrase that selected the intent")
    recommended_calls: List[RecommendedCall] = Field(
        default_factory=list,
        description="Read-only service calls, bound to the resolved locomotive(s)",
    )
    read_these_fields: List[str] = Field(
        default_factory=list,
        description="Payload paths to display once the calls have run",
    )
    follow_up: Optional[str] = Field(None, description="Question to ask the user instead of answering")
    candidates: List[str] = Field(
        default_factory=list,
        description="Candidate labels offered for disambiguation, 'name (loco <locoNo>)'",
    )
    blocked: bool = Field(False, description="True when the intent has side effects and was refused")
    refresh_recommended: bool = Field(False, description="Snapshot looked stale; refresh before retrying")
    outcome_kind: Optional[str] = Field(None, description="Resolution outcome kind, if resolution ran")
    extraction: Optional[ExtractionResult] = None
