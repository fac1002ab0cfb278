"""
Schemas for the intent catalog.

This module defines the dashboard service function names, the recommended
call shape and the intent specification.
"""
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class FunctionName(str, Enum):
    """Dashboard service functions an intent may name."""
    GET_ALL_LOCOMOTIVES = "getAllLocomotives"
    GET_ALL_TEST_CODES = "getAllTestCodes"
    GET_ALL_LOCOMOTIVES_COUNT = "getAllLocomotivesCount"
    GET_ALL_OUT_OF_SERVICE_LOCOMOTIVES_COUNT = "getAllOutOfServiceLocomotivesCount"
    GET_ALL_NON_COMPLIANT_LOCOMOTIVES = "getAllNonCompliantLocomotives"
    GET_ALL_INSPECTIONS_COMPLETED_TODAY_COUNT = "getAllInspectionsCompletedTodayCount"
    GET_ALL_DAILY_INSPECTION_LOCOMOTIVES_COUNT = "getAllDailyInspectionLocomotivesCount"
    GET_ALL_LOCOMOTIVE_LAST_INSPECTION_DATE = "getAllLocomotiveLastInspectionDate"
    GET_ALL_LOCOMOTIVE_DUE_INSPECTION_DATE = "getAllLocomotiveDueInspectionDate"
    GET_LOCO_OUT_OF_USE_CREDIT = "getLocoOutOfUseCredit"
    UPDATE_DASHBOARD_LOCO_STATE = "updateDashBoardLocoState"
    UPDATE_LOCO_OUT_OF_USE_CREDIT = "updateLocoOutOfUseCredit"
    GET_LOCO_NEXT_DUE_LOCO_INSPECTION = "getLocoNextDueLocoInspection"
    UPDATE_DASHBOARD_LOCO_INSPECTION = "updateDashBoardLocoInspection"
    GET_LOCO_MU_ID = "getLocoMUId"
    UPDATE_DASHBOARD_LOCO_MU_ID = "updateDashBoardLocoMUId"
    GET_DASHBOARD_DATA = "getDashBoardData"
    DASHBOARD_DATA_BUILD_UP = "dashBoardDataBuildUp"


# Functions with side effects, plus the internal MU helper
MAINTENANCE_FUNCTIONS = frozenset({
    FunctionName.UPDATE_DASHBOARD_LOCO_STATE,
    FunctionName.UPDATE_LOCO_OUT_OF_USE_CREDIT,
    FunctionName.UPDATE_DASHBOARD_LOCO_INSPECTION,
    FunctionName.UPDATE_DASHBOARD_LOCO_MU_ID,
    FunctionName.DASHBOARD_DATA_BUILD_UP,
    FunctionName.GET_LOCO_MU_ID,
})

SafetyMode = Literal["safe", "maintenance_only"]

RequiredEntity = Literal[
    "assetId", "confirmWrite", "date", "locoId", "locoNo", "locos", "name",
    "testCode", "thresholdHours", "title", "unitId", "userObject",
]


class RecommendedCall(BaseModel):
    """
    A service call the surrounding application may choose to execute.

    Arguments may hold "$assetId" / "$locoId" templates until bound.
    """
    model_config = ConfigDict(frozen=True)

    function: FunctionName
    args: Dict[str, Any] = Field(default_factory=dict)


class IntentSpec(BaseModel):
    """One catalog entry: what the user asks and which read-only call answers it."""
    model_config = ConfigDict(frozen=True)

    description: str
    requires_loco: bool
    required_entities: List[RequiredEntity] = Field(default_factory=list)
    recommended_calls: List[RecommendedCall]
    returns: str
    read_these_fields: List[str]
    follow_up_question: Optional[str] = None
    safety: SafetyMode = "safe"
    notes: Optional[str] = None
    trigger_phrases: List[str]
    example_questions: List[str] = Field(default_factory=list)
