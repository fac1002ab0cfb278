"""
Dashboard snapshot loading.

Converts a getDashBoardData payload into a read-only assetId -> LocoRecord
mapping. The mapping and its records are immutable, so a resolver holding
it cannot observe changes made by a concurrent refresh.
"""
import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from loco_advisor.schemas.resolution import LocoRecord

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a dashboard payload has no usable assetData map."""


def _asset_data(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    # { status, value: { summary, assetData } }
    value = payload.get("value")
    if isinstance(value, Mapping) and "assetData" in value:
        return value["assetData"]
    # { assetData }
    if "assetData" in payload:
        return payload["assetData"]
    # Bare assetData map
    if payload and all(isinstance(v, Mapping) for v in payload.values()):
        return payload
    raise SnapshotError("Dashboard payload does not contain an assetData map")


def build_snapshot(payload: Mapping[str, Any]) -> Mapping[str, LocoRecord]:
    """
    Build an immutable snapshot from a dashboard payload.

    Args:
        payload: getDashBoardData result, its value object, or a bare assetData map

    Returns:
        Read-only mapping of assetId -> LocoRecord

    Raises:
        SnapshotError: If the payload shape is not recognised or a record is invalid
    """
    if not isinstance(payload, Mapping):
        raise SnapshotError(f"Dashboard payload must be an object, got {type(payload).__name__}")

    asset_data = _asset_data(payload)
    if not isinstance(asset_data, Mapping):
        raise SnapshotError("assetData must be an object keyed by assetId")

    records: Dict[str, LocoRecord] = {}
    for asset_id, raw in asset_data.items():
        if not isinstance(raw, Mapping):
            raise SnapshotError(f"Record for asset {asset_id!r} must be an object")
        try:
            records[str(asset_id)] = LocoRecord.model_validate({**raw, "assetId": str(asset_id)})
        except ValidationError as e:
            raise SnapshotError(f"Invalid record for asset {asset_id!r}: {e}") from e

    logger.debug("Loaded dashboard snapshot with %d locomotives", len(records))
    return MappingProxyType(records)
