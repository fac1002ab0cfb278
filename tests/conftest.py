"""
Test configuration and fixtures for Loco Advisor.

This module provides a sample dashboard payload and the snapshot built
from it for both unit and integration tests.
"""
import copy

import pytest

from loco_advisor.services.snapshot import build_snapshot

ASSET_4430 = "68efe0a1b2c3d4e5f6a7b801"
ASSET_903 = "68efe0a1b2c3d4e5f6a7b802"
ASSET_123_A = "68efe0a1b2c3d4e5f6a7b803"
ASSET_123_B = "68efe0a1b2c3d4e5f6a7b804"
ASSET_8772 = "68efe0a1b2c3d4e5f6a7b805"

DASHBOARD_PAYLOAD = {
    "status": 200,
    "value": {
        "summary": {
            "totalLocomotives": 5,
            "outOfServiceLocomotives": 1,
            "compliantLocomotives": 4,
        },
        "assetData": {
            ASSET_4430: {
                "id": "L-4430",
                "name": "4430 SD70M",
                "locoNo": "4430",
                "muId": "MU-7",
                "assetStates": {"outOfUse": False, "nonCompliant": False, "engineHour": 18250},
                "outOfUseCredit": {"credit": 12, "outOfUseDays": 3},
                "LastInspec": {"date": "2025-09-01", "title": "92-day", "testCode": "A"},
                "DueInspec": {"nextExpiryDate": "2025-12-01", "title": "92-day", "testCode": "A"},
            },
            ASSET_903: {
                "id": "L-903",
                "name": "903 EMD SL-1",
                "locoNo": "903 ",
                "assetStates": {"outOfUse": True, "outOfUseDate": "2025-10-02", "nonCompliant": True},
                "LastInspec": {},
                "DueInspec": {},
            },
            ASSET_123_A: {"id": "L-123A", "name": "123 GP38", "locoNo": "123"},
            ASSET_123_B: {"id": "L-123B", "name": "123 GP40", "locoNo": "123"},
            ASSET_8772: {
                "id": "L-8772",
                "name": "8772 AC44C6M",
                "locoNo": 8772,
                "assetStates": {"outOfUse": False, "nonCompliant": True},
            },
        },
    },
}


@pytest.fixture
def dashboard_payload():
    """A deep copy of the sample getDashBoardData payload."""
    return copy.deepcopy(DASHBOARD_PAYLOAD)


@pytest.fixture
def snapshot(dashboard_payload):
    """Read-only snapshot built from the sample payload."""
    return build_snapshot(dashboard_payload)
