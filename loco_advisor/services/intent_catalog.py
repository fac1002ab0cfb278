"""
Intent catalog for the advisor.

Every question the advisor understands maps to one IntentId, and every
IntentId maps to a frozen IntentSpec naming the read-only dashboard call
that answers it and the payload fields to display. The advisor only ever
recommends calls that appear here.

Placeholders:
- "$assetId" / "$locoId" inside args are bound once a locomotive resolves.
- "<assetId>" inside read_these_fields is the assetData map key.
"""
from enum import Enum
from typing import Dict, List

from loco_advisor.schemas.catalog import (
    MAINTENANCE_FUNCTIONS,
    FunctionName,
    IntentSpec,
    RecommendedCall,
)


class CatalogError(ValueError):
    """Raised when the intent catalog is inconsistent."""


class IntentId(str, Enum):
    DASHBOARD_OVERVIEW = "DASHBOARD_OVERVIEW"
    FLEET_SIZE_TOTAL = "FLEET_SIZE_TOTAL"
    OUT_OF_SERVICE_COUNT = "OUT_OF_SERVICE_COUNT"
    NON_COMPLIANT_COUNT = "NON_COMPLIANT_COUNT"
    COMPLIANT_COUNT = "COMPLIANT_COUNT"
    INSPECTIONS_COMPLETED_TODAY_COUNT = "INSPECTIONS_COMPLETED_TODAY_COUNT"
    DAILY_DUE_TODAY_COUNT = "DAILY_DUE_TODAY_COUNT"
    LIST_ALL_LOCOS_FROM_DASHBOARD = "LIST_ALL_LOCOS_FROM_DASHBOARD"
    LIST_OUT_OF_SERVICE_LOCOS = "LIST_OUT_OF_SERVICE_LOCOS"
    LIST_AVAILABLE_LOCOS = "LIST_AVAILABLE_LOCOS"
    LIST_NON_COMPLIANT_LOCOS = "LIST_NON_COMPLIANT_LOCOS"
    LIST_LOCOS_MISSING_LAST_INSPECTION = "LIST_LOCOS_MISSING_LAST_INSPECTION"
    LIST_LOCOS_MISSING_DUE_INSPECTION = "LIST_LOCOS_MISSING_DUE_INSPECTION"
    FIND_LOCO_BY_ASSET_ID = "FIND_LOCO_BY_ASSET_ID"
    FIND_LOCO_BY_LOCO_NUMBER = "FIND_LOCO_BY_LOCO_NUMBER"
    FIND_LOCO_BY_NAME = "FIND_LOCO_BY_NAME"
    LOCO_STATUS_OUT_OF_USE = "LOCO_STATUS_OUT_OF_USE"
    LOCO_STATUS_NON_COMPLIANT = "LOCO_STATUS_NON_COMPLIANT"
    LOCO_ENGINE_HOURS = "LOCO_ENGINE_HOURS"
    LOCO_BASIC_METADATA = "LOCO_BASIC_METADATA"
    LOCO_OUT_OF_USE_CREDIT_SUMMARY = "LOCO_OUT_OF_USE_CREDIT_SUMMARY"
    LOCO_NEXT_DUE_INSPECTION = "LOCO_NEXT_DUE_INSPECTION"
    LOCO_DUE_INSPECTION_FROM_DASHBOARD = "LOCO_DUE_INSPECTION_FROM_DASHBOARD"
    LOCO_LAST_INSPECTION_SUMMARY = "LOCO_LAST_INSPECTION_SUMMARY"
    LOCO_MU_ID_READ = "LOCO_MU_ID_READ"
    FLEET_OVERDUE_INSPECTIONS = "FLEET_OVERDUE_INSPECTIONS"
    LIST_TEST_CODES = "LIST_TEST_CODES"
    MAINT_REFRESH_REBUILD_DASHBOARD = "MAINT_REFRESH_REBUILD_DASHBOARD"
    MAINT_UPDATE_LOCO_STATE_IN_DASHBOARD = "MAINT_UPDATE_LOCO_STATE_IN_DASHBOARD"
    MAINT_RECALC_OOU_CREDIT_AND_SAVE = "MAINT_RECALC_OOU_CREDIT_AND_SAVE"
    MAINT_UPDATE_MU_ID_FIELD = "MAINT_UPDATE_MU_ID_FIELD"


DASHBOARD_CALL = RecommendedCall(function=FunctionName.GET_DASHBOARD_DATA)
DASHBOARD_RETURNS = "getDashBoardData -> { status, value: { summary, assetData: Record<assetId, loco> } }"
WHICH_LOCO = "Which locomotive (loco number or name)?"
CONFIRM_WRITE = "This action has side effects. If you really want it, confirm with CONFIRM_WRITE."
BLOCKED_NOTE = "Blocked by default in advisor mode (write/side-effect)."


def _loco_fields(*paths: str) -> List[str]:
    return [f"value.assetData.<assetId>.{p}" for p in paths]


INTENT_CATALOG: Dict[IntentId, IntentSpec] = {
    IntentId.DASHBOARD_OVERVIEW: IntentSpec(
        description="Fetch the full dashboard payload (summary KPIs + per-locomotive map).",
        requires_loco=False,
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=["status", "value.summary", "value.assetData"],
        trigger_phrases=["dashboard", "overview", "kpi", "kpis", "summary", "show dashboard"],
        example_questions=["Show me the dashboard overview.", "What are today's KPIs?"],
    ),
    IntentId.FLEET_SIZE_TOTAL: IntentSpec(
        description="Total number of locomotives (count).",
        requires_loco=False,
        recommended_calls=[RecommendedCall(function=FunctionName.GET_ALL_LOCOMOTIVES_COUNT)],
        returns="getAllLocomotivesCount -> number",
        read_these_fields=["$"],
        trigger_phrases=["how many locomotives", "how many locos", "fleet size", "total locomotives", "total units"],
        example_questions=["How many locomotives are in the fleet?"],
    ),
    IntentId.OUT_OF_SERVICE_COUNT: IntentSpec(
        description="Count of locomotives currently out of service.",
        requires_loco=False,
        recommended_calls=[RecommendedCall(function=FunctionName.GET_ALL_OUT_OF_SERVICE_LOCOMOTIVES_COUNT)],
        returns="getAllOutOfServiceLocomotivesCount -> number",
        read_these_fields=["$"],
        trigger_phrases=[
            "out of service count", "out of use count", "how many are out of service",
            "how many locomotives are out of service", "oos count",
        ],
        example_questions=["How many locomotives are out of service?"],
    ),
    IntentId.NON_COMPLIANT_COUNT: IntentSpec(
        description="Count of non-compliant locomotives.",
        requires_loco=False,
        recommended_calls=[RecommendedCall(function=FunctionName.GET_ALL_NON_COMPLIANT_LOCOMOTIVES)],
        returns="getAllNonCompliantLocomotives -> number (count)",
        read_these_fields=["$"],
        trigger_phrases=[
            "non compliant count", "noncompliant count", "how many non compliant",
            "how many locomotives are non compliant",
        ],
        example_questions=["How many locomotives are non-compliant?"],
    ),
    IntentId.COMPLIANT_COUNT: IntentSpec(
        description="Count of compliant locomotives from dashboard summary.",
        requires_loco=False,
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=["value.summary.compliantLocomotives"],
        trigger_phrases=["compliant count", "how many compliant", "how many locomotives are compliant"],
        example_questions=["How many locomotives are compliant?"],
    ),
    IntentId.INSPECTIONS_COMPLETED_TODAY_COUNT: IntentSpec(
        description="Count of inspections completed today (service timezone day bounds).",
        requires_loco=False,
        recommended_calls=[RecommendedCall(function=FunctionName.GET_ALL_INSPECTIONS_COMPLETED_TODAY_COUNT)],
        returns="getAllInspectionsCompletedTodayCount -> number",
        read_these_fields=["$"],
        trigger_phrases=["inspections completed today", "completed today count", "today s inspections"],
        example_questions=["How many inspections were completed today?"],
    ),
    IntentId.DAILY_DUE_TODAY_COUNT: IntentSpec(
        description="Count of locomotives due today for daily inspection.",
        requires_loco=False,
        recommended_calls=[RecommendedCall(function=FunctionName.GET_ALL_DAILY_INSPECTION_LOCOMOTIVES_COUNT)],
        returns="getAllDailyInspectionLocomotivesCount -> number",
        read_these_fields=["$"],
        trigger_phrases=["daily due today count", "due today for daily inspection", "daily inspection due today"],
        example_questions=["How many locomotives are due today for daily inspection?"],
    ),
    IntentId.LIST_ALL_LOCOS_FROM_DASHBOARD: IntentSpec(
        description="List all locomotives from dashboard assetData map.",
        requires_loco=False,
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=["value.assetData"] + _loco_fields("id", "locoNo", "name", "muId"),
        trigger_phrases=["list locomotives", "list all locomotives", "show all locos", "all locomotives", "fleet list"],
        example_questions=["List all locomotives."],
    ),
    IntentId.LIST_OUT_OF_SERVICE_LOCOS: IntentSpec(
        description="List locomotives where assetStates.outOfUse is true (client-side filter).",
        requires_loco=False,
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("assetStates.outOfUse", "locoNo", "name"),
        notes="Filter: assetStates.outOfUse === true",
        trigger_phrases=[
            "list out of service", "which are out of service", "which locomotives are out of service",
            "out of service locomotives", "out of use locos", "oos list",
        ],
        example_questions=["Which locomotives are out of service?"],
    ),
    IntentId.LIST_AVAILABLE_LOCOS: IntentSpec(
        description="List locomotives where assetStates.outOfUse is false (client-side filter).",
        requires_loco=False,
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("assetStates.outOfUse", "locoNo", "name"),
        notes="Filter: assetStates.outOfUse === false",
        trigger_phrases=["available locomotives", "in service locomotives", "not out of service", "available list"],
        example_questions=["Which locomotives are available?"],
    ),
    IntentId.LIST_NON_COMPLIANT_LOCOS: IntentSpec(
        description="List locomotives where assetStates.nonCompliant is true (client-side filter).",
        requires_loco=False,
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("assetStates.nonCompliant", "locoNo", "name"),
        notes="Filter: assetStates.nonCompliant === true",
        trigger_phrases=["list non compliant", "which are non compliant", "noncompliant locomotives"],
        example_questions=["List all non-compliant locomotives."],
    ),
    IntentId.LIST_LOCOS_MISSING_LAST_INSPECTION: IntentSpec(
        description="List locomotives with an empty LastInspec (client-side filter).",
        requires_loco=False,
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("LastInspec", "locoNo", "name"),
        notes="Filter: LastInspec is an empty object",
        trigger_phrases=["missing last inspection", "no last inspection", "last inspection missing"],
        example_questions=["Which locomotives have no last inspection record?"],
    ),
    IntentId.LIST_LOCOS_MISSING_DUE_INSPECTION: IntentSpec(
        description="List locomotives with an empty DueInspec (client-side filter).",
        requires_loco=False,
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("DueInspec", "locoNo", "name"),
        notes="Filter: DueInspec is an empty object",
        trigger_phrases=["missing due inspection", "no due inspection", "due inspection missing"],
        example_questions=["Which locomotives are missing a due inspection record?"],
    ),
    IntentId.FIND_LOCO_BY_ASSET_ID: IntentSpec(
        description="Find a locomotive in dashboard assetData by assetId.",
        requires_loco=True,
        required_entities=["assetId"],
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=["value.assetData.<assetId>"],
        follow_up_question="What is the locomotive assetId?",
        trigger_phrases=["find by asset id", "asset id", "assetid", "lookup asset id"],
        example_questions=["Find locomotive with assetId 68efe...."],
    ),
    IntentId.FIND_LOCO_BY_LOCO_NUMBER: IntentSpec(
        description="Find a locomotive by loco number (client-side search over dashboard assetData).",
        requires_loco=True,
        required_entities=["locoNo"],
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("locoNo", "id", "name"),
        follow_up_question="Which locomotive number (e.g., 4430)?",
        notes="If multiple match, ask the user to pick one.",
        trigger_phrases=["find loco", "find locomotive", "loco number", "locomotive number", "unit number", "engine number"],
        example_questions=["Find loco 4430.", "Do we have locomotive number 8772?"],
    ),
    IntentId.FIND_LOCO_BY_NAME: IntentSpec(
        description="Find a locomotive by name (client-side search over dashboard assetData).",
        requires_loco=True,
        required_entities=["name"],
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("name", "id", "locoNo"),
        follow_up_question="Which locomotive name?",
        trigger_phrases=["loco name", "locomotive named", "search name", "find by name"],
        example_questions=["Find locomotive named 4430 SD70M."],
    ),
    IntentId.LOCO_STATUS_OUT_OF_USE: IntentSpec(
        description="Check whether a locomotive is out of use.",
        requires_loco=True,
        required_entities=["assetId"],
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("assetStates.outOfUse", "assetStates.outOfUseDate"),
        follow_up_question=WHICH_LOCO,
        trigger_phrases=["out of use", "out of use status", "out of service status", "is it out of use"],
        example_questions=["Is loco 4430 out of use?"],
    ),
    IntentId.LOCO_STATUS_NON_COMPLIANT: IntentSpec(
        description="Check whether a locomotive is non-compliant.",
        requires_loco=True,
        required_entities=["assetId"],
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("assetStates.nonCompliant"),
        follow_up_question=WHICH_LOCO,
        trigger_phrases=["non compliant status", "is it non compliant", "compliance status", "non compliant"],
        example_questions=["Is loco 8772 non-compliant?"],
    ),
    IntentId.LOCO_ENGINE_HOURS: IntentSpec(
        description="Get engine hours for a locomotive.",
        requires_loco=True,
        required_entities=["assetId"],
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("assetStates.engineHour"),
        follow_up_question=WHICH_LOCO,
        trigger_phrases=["engine hours", "hours on engine", "running hours"],
        example_questions=["How many engine hours does loco 4430 have?"],
    ),
    IntentId.LOCO_BASIC_METADATA: IntentSpec(
        description="Read basic locomotive metadata (id, number, name, MU id).",
        requires_loco=True,
        required_entities=["assetId"],
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("id", "locoNo", "name", "muId"),
        follow_up_question=WHICH_LOCO,
        trigger_phrases=["loco details", "locomotive details", "metadata", "basic info"],
        example_questions=["Show basic info for loco 4430."],
    ),
    IntentId.LOCO_OUT_OF_USE_CREDIT_SUMMARY: IntentSpec(
        description="Get out-of-use credit summary for a locomotive.",
        requires_loco=True,
        required_entities=["assetId"],
        recommended_calls=[
            RecommendedCall(function=FunctionName.GET_LOCO_OUT_OF_USE_CREDIT, args={"assetId": "$assetId"}),
        ],
        returns="getLocoOutOfUseCredit -> { credit:number, outOfUseDays:number, status:string }",
        read_these_fields=["credit", "outOfUseDays", "status"],
        follow_up_question=WHICH_LOCO,
        trigger_phrases=["out of use credit", "oou credit", "credit summary", "credit status"],
        example_questions=["What's the out-of-use credit for loco 4430?"],
    ),
    IntentId.LOCO_NEXT_DUE_INSPECTION: IntentSpec(
        description="Get the next due inspection for a locomotive (service helper).",
        requires_loco=True,
        required_entities=["assetId"],
        recommended_calls=[
            RecommendedCall(function=FunctionName.GET_LOCO_NEXT_DUE_LOCO_INSPECTION, args={"assetId": "$assetId"}),
        ],
        returns="getLocoNextDueLocoInspection -> { assetId, nextExpiryDate, title, testCode } | {}",
        read_these_fields=["nextExpiryDate", "title", "testCode"],
        follow_up_question=WHICH_LOCO,
        trigger_phrases=[
            "next inspection due", "next due inspection", "next inspection", "due next", "next due",
            "when is next due", "upcoming inspection", "expiry date",
        ],
        example_questions=["When is loco 4430 due next?", "Next inspection for loco 4430?"],
    ),
    IntentId.LOCO_DUE_INSPECTION_FROM_DASHBOARD: IntentSpec(
        description="Read due inspection fields from dashboard-stored assetData.",
        requires_loco=True,
        required_entities=["assetId"],
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("DueInspec.nextExpiryDate", "DueInspec.title", "DueInspec.testCode"),
        follow_up_question=WHICH_LOCO,
        trigger_phrases=["stored due inspection", "due inspection fields", "dueinspec"],
        example_questions=["Show stored due inspection fields for loco 4430."],
    ),
    IntentId.LOCO_LAST_INSPECTION_SUMMARY: IntentSpec(
        description="Read last inspection summary from dashboard-stored assetData.",
        requires_loco=True,
        required_entities=["assetId"],
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("LastInspec.date", "LastInspec.title", "LastInspec.testCode"),
        follow_up_question=WHICH_LOCO,
        trigger_phrases=["last inspection", "last inspected", "most recent inspection", "previous inspection"],
        example_questions=["When was loco 4430 last inspected?"],
    ),
    IntentId.LOCO_MU_ID_READ: IntentSpec(
        description="Read MU id for a locomotive (from dashboard).",
        requires_loco=True,
        required_entities=["assetId"],
        recommended_calls=[DASHBOARD_CALL],
        returns=DASHBOARD_RETURNS,
        read_these_fields=_loco_fields("muId"),
        follow_up_question=WHICH_LOCO,
        trigger_phrases=["mu id", "multiple unit id", "consist id", "muid"],
        example_questions=["What's the MU id for loco 4430?"],
    ),
    IntentId.FLEET_OVERDUE_INSPECTIONS: IntentSpec(
        description="List locos with overdue inspections (client-side filter).",
        requires_loco=False,
        recommended_calls=[RecommendedCall(function=FunctionName.GET_ALL_LOCOMOTIVE_DUE_INSPECTION_DATE)],
        returns="getAllLocomotiveDueInspectionDate -> map",
        read_these_fields=["<assetId>.nextExpiryDate", "<assetId>.title", "<assetId>.testCode"],
        notes="Client-side filter: nextExpiryDate < now",
        trigger_phrases=["overdue inspections", "past due", "expired inspections", "overdue list"],
        example_questions=["Which locomotives are overdue for inspection?"],
    ),
    IntentId.LIST_TEST_CODES: IntentSpec(
        description="List all active test codes.",
        requires_loco=False,
        recommended_calls=[RecommendedCall(function=FunctionName.GET_ALL_TEST_CODES)],
        returns="getAllTestCodes -> string[]",
        read_these_fields=["$"],
        trigger_phrases=["list test codes", "all test codes", "available test codes"],
        example_questions=["List all test codes."],
    ),
    IntentId.MAINT_REFRESH_REBUILD_DASHBOARD: IntentSpec(
        description="Rebuild/refresh the stored dashboard data (bulk write job).",
        requires_loco=False,
        required_entities=["confirmWrite"],
        recommended_calls=[RecommendedCall(function=FunctionName.DASHBOARD_DATA_BUILD_UP)],
        returns="dashBoardDataBuildUp -> (implementation-defined)",
        read_these_fields=["$"],
        follow_up_question=CONFIRM_WRITE,
        safety="maintenance_only",
        notes=BLOCKED_NOTE,
        trigger_phrases=["rebuild dashboard", "rebuild the dashboard", "recalculate dashboard", "build up dashboard"],
        example_questions=["Rebuild the dashboard data."],
    ),
    IntentId.MAINT_UPDATE_LOCO_STATE_IN_DASHBOARD: IntentSpec(
        description="Update stored dashboard state for a locomotive (write).",
        requires_loco=True,
        required_entities=["locoId", "confirmWrite"],
        recommended_calls=[
            RecommendedCall(function=FunctionName.UPDATE_DASHBOARD_LOCO_STATE, args={"locoId": "$locoId"}),
        ],
        returns="updateDashBoardLocoState -> (implementation-defined)",
        read_these_fields=["$"],
        follow_up_question=CONFIRM_WRITE,
        safety="maintenance_only",
        notes=BLOCKED_NOTE,
        trigger_phrases=["update loco state", "refresh loco state", "recompute loco state"],
        example_questions=["Update the dashboard state for loco 4430."],
    ),
    IntentId.MAINT_RECALC_OOU_CREDIT_AND_SAVE: IntentSpec(
        description="Recalculate and update out-of-use credit for a locomotive (write).",
        requires_loco=True,
        required_entities=["locoId", "confirmWrite"],
        recommended_calls=[
            RecommendedCall(function=FunctionName.UPDATE_LOCO_OUT_OF_USE_CREDIT, args={"locoId": "$locoId"}),
        ],
        returns="updateLocoOutOfUseCredit -> (implementation-defined)",
        read_these_fields=["$"],
        follow_up_question=CONFIRM_WRITE,
        safety="maintenance_only",
        notes=BLOCKED_NOTE,
        trigger_phrases=["recalculate oou credit", "update oou credit", "recompute credit", "update out of use credit"],
        example_questions=["Recalculate OOU credit for loco 4430."],
    ),
    IntentId.MAINT_UPDATE_MU_ID_FIELD: IntentSpec(
        description="Update stored MU id for a locomotive in dashboard (write).",
        requires_loco=True,
        required_entities=["locoId", "confirmWrite"],
        recommended_calls=[
            RecommendedCall(function=FunctionName.UPDATE_DASHBOARD_LOCO_MU_ID, args={"locoId": "$locoId"}),
        ],
        returns="updateDashBoardLocoMUId -> (implementation-defined)",
        read_these_fields=["$"],
        follow_up_question=CONFIRM_WRITE,
        safety="maintenance_only",
        notes=BLOCKED_NOTE,
        trigger_phrases=["update mu id", "refresh mu id"],
        example_questions=["Update MU id in dashboard for loco 4430."],
    ),
}

SAFE_INTENTS = [i for i, spec in INTENT_CATALOG.items() if spec.safety == "safe"]
MAINTENANCE_INTENTS = [i for i, spec in INTENT_CATALOG.items() if spec.safety == "maintenance_only"]


def validate_intent_catalog(catalog: Dict[IntentId, IntentSpec] = None) -> None:
    """
    Check the catalog for consistency.

    Raises:
        CatalogError: If an intent is missing, names an unknown function,
            or a safe intent recommends a maintenance function
    """
    catalog = INTENT_CATALOG if catalog is None else catalog

    missing = [i.value for i in IntentId if i not in catalog]
    if missing:
        raise CatalogError(f"Intents without a catalog entry: {', '.join(missing)}")

    for intent_id, spec in catalog.items():
        if not spec.trigger_phrases:
            raise CatalogError(f"Intent {intent_id.value} has no trigger phrases")
        for call in spec.recommended_calls:
            if not isinstance(call.function, FunctionName):
                raise CatalogError(f"Intent {intent_id.value} references unknown function: {call.function}")
            if spec.safety == "safe" and call.function in MAINTENANCE_FUNCTIONS:
                raise CatalogError(
                    f"Intent {intent_id.value} is marked safe but recommends {call.function.value}"
                )


validate_intent_catalog()
