"""
Schemas for grounding extracted references against the dashboard snapshot.

This module defines the snapshot record, the resolver context and options,
and the tagged union of resolution outcomes.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from loco_advisor import config


class LocoRecord(BaseModel):
    """
    One locomotive from the dashboard assetData map.

    Field names follow the dashboard payload. Empty LastInspec / DueInspec
    objects mean the inspection is absent.
    """
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    asset_id: str = Field(..., alias="assetId")
    id: Optional[str] = None
    name: Optional[str] = ""
    mu_id: Optional[str] = Field(None, alias="muId")
    loco_no: Optional[str] = Field("", alias="locoNo")
    asset_states: Optional[Dict[str, Any]] = Field(default_factory=dict, alias="assetStates")
    out_of_use_credit: Optional[Dict[str, Any]] = Field(default_factory=dict, alias="outOfUseCredit")
    last_inspection: Optional[Dict[str, Any]] = Field(default_factory=dict, alias="LastInspec")
    due_inspection: Optional[Dict[str, Any]] = Field(default_factory=dict, alias="DueInspec")

    @field_validator("id", "mu_id", "loco_no", mode="before")
    @classmethod
    def stringify_identifiers(cls, value: Any) -> Any:
        # Numeric loco numbers and ids arrive from some payloads
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def normalized_loco_no(self) -> str:
        return (self.loco_no or "").strip()

    @property
    def has_last_inspection(self) -> bool:
        return bool(self.last_inspection)

    @property
    def has_due_inspection(self) -> bool:
        return bool(self.due_inspection)


class Candidate(BaseModel):
    """A locomotive offered to the user during disambiguation."""
    model_config = ConfigDict(frozen=True)

    asset_id: str = Field(..., exclude=True)
    name: str
    loco_no: str

    @property
    def label(self) -> str:
        name = self.name.strip() or "Unnamed locomotive"
        if not self.loco_no:
            return name
        return f"{name} (loco {self.loco_no})"

    @classmethod
    def from_record(cls, record: LocoRecord) -> "Candidate":
        return cls(asset_id=record.asset_id, name=record.name or "", loco_no=record.normalized_loco_no)


class ResolverContext(BaseModel):
    """
    Freshness information supplied by the caller.

    An explicit dashboard_data_fresh flag wins over last_fetch_timestamp.
    With neither, the snapshot is treated as stale.
    """
    dashboard_data_fresh: Optional[bool] = Field(None, alias="dashboardDataFresh")
    last_fetch_timestamp: Optional[datetime] = Field(None, alias="lastFetchTimestamp")
    max_age_seconds: int = config.SNAPSHOT_MAX_AGE_SECONDS

    model_config = ConfigDict(populate_by_name=True)

    def is_fresh(self, now: Optional[datetime] = None) -> bool:
        if self.dashboard_data_fresh is not None:
            return self.dashboard_data_fresh
        if self.last_fetch_timestamp is None:
            return False

        fetched = self.last_fetch_timestamp
        if fetched.tzinfo is None:
            fetched = fetched.replace(tzinfo=timezone.utc)
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return (now - fetched).total_seconds() <= self.max_age_seconds


class ResolverOptions(BaseModel):
    """Toggles for the resolver; all default to the strict behaviour."""
    numeric_loco_fallback: bool = False
    batch: bool = False
    max_candidates: int = config.MAX_DISAMBIGUATION_CANDIDATES

    @classmethod
    def from_env(cls) -> "ResolverOptions":
        return cls(
            numeric_loco_fallback=config.LOCO_NUMERIC_FALLBACK,
            batch=config.ENABLE_BATCH_RESOLUTION,
            max_candidates=config.MAX_DISAMBIGUATION_CANDIDATES,
        )


MatchRule = Literal["assetId", "locoNo", "name"]
FollowupReason = Literal["no_candidates", "stale_snapshot", "not_in_database"]


class NeedsFollowup(BaseModel):
    kind: Literal["needs_followup"] = "needs_followup"
    reason: FollowupReason
    question: str
    refresh_recommended: bool = False


class PartialResolution(BaseModel):
    """
    Base for outcomes where at least one identifier matched.

    unresolved lists the identifiers that matched nothing under the deciding
    rule or any rule tried before it; unresolved_followup carries the
    not-found question for them.
    """
    unresolved: List[str] = Field(default_factory=list)
    unresolved_followup: Optional[NeedsFollowup] = None


class Resolved(PartialResolution):
    kind: Literal["resolved"] = "resolved"
    locomotive: LocoRecord
    matched_by: MatchRule


class ResolvedMultiple(PartialResolution):
    kind: Literal["resolved_multiple"] = "resolved_multiple"
    locomotives: List[LocoRecord]
    matched_by: MatchRule


class Ambiguous(PartialResolution):
    """
    Several records match at the same rule.

    candidates is capped for display; total_matches is the uncapped count.
    In batch mode, identifiers that did resolve uniquely are kept in resolved.
    """
    kind: Literal["ambiguous"] = "ambiguous"
    candidates: List[Candidate]
    total_matches: int
    matched_by: MatchRule
    resolved: List[LocoRecord] = Field(default_factory=list)


ResolutionOutcome = Union[Resolved, ResolvedMultiple, Ambiguous, NeedsFollowup]
