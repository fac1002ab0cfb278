"""
Schemas for locomotive reference extraction.

This module defines the Pydantic models returned by the extractor.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

Confidence = Literal["low", "medium", "high"]
RawMatchKind = Literal["assetId", "locoNo", "name"]


class RawMatch(BaseModel):
    """
    A single span of the input recognised as a locomotive reference.

    start and end are character offsets into the original input, end exclusive.
    """
    model_config = ConfigDict(frozen=True)

    kind: RawMatchKind
    text: str
    start: int = Field(..., ge=0)
    end: int

    @model_validator(mode="after")
    def check_span(self) -> "RawMatch":
        if self.start >= self.end:
            raise ValueError(f"RawMatch span must be non-empty, got {self.start}..{self.end}")
        return self


class ExtractionResult(BaseModel):
    """Everything the extractor found in one user message."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    input: str
    asset_ids: List[str] = Field(default_factory=list, alias="assetIds")
    loco_nos: List[str] = Field(default_factory=list, alias="locoNos")
    names: List[str] = Field(default_factory=list)
    raw_matches: List[RawMatch] = Field(default_factory=list, alias="rawMatches")
    confidence: Confidence = "low"

    @property
    def asset_id(self) -> Optional[str]:
        return self.asset_ids[0] if self.asset_ids else None

    @property
    def loco_no(self) -> Optional[str]:
        return self.loco_nos[0] if self.loco_nos else None

    @property
    def name(self) -> Optional[str]:
        return self.names[0] if self.names else None

    @property
    def is_empty(self) -> bool:
        return not (self.asset_ids or self.loco_nos or self.names)
