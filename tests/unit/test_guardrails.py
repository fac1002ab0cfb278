"""
Recommendation guardrails tests.

This module tests the validation functionality in guardrails.py.
"""
import unittest

from loco_advisor.guardrails import (
    REDACTED,
    assert_user_safe,
    contains_asset_id,
    redact_asset_ids,
    validate_read_fields,
    validate_recommended_call,
)
from loco_advisor.schemas.catalog import FunctionName, RecommendedCall

ASSET_ID = "68efe0a1b2c3d4e5f6a7b801"


class TestRecommendationGuardrails(unittest.TestCase):
    """Tests for recommendation guardrails."""

    def test_read_only_call_is_valid(self):
        """Test that a bound read-only call passes."""
        call = RecommendedCall(function=FunctionName.GET_LOCO_OUT_OF_USE_CREDIT, args={"assetId": ASSET_ID})
        is_valid, message = validate_recommended_call(call)
        self.assertTrue(is_valid, f"Call should be valid, got: {message}")
        self.assertEqual(message, "")

    def test_maintenance_call_is_blocked(self):
        """Test that write functions are rejected by default."""
        for function in [
            FunctionName.DASHBOARD_DATA_BUILD_UP,
            FunctionName.UPDATE_DASHBOARD_LOCO_STATE,
            FunctionName.UPDATE_LOCO_OUT_OF_USE_CREDIT,
            FunctionName.UPDATE_DASHBOARD_LOCO_INSPECTION,
            FunctionName.UPDATE_DASHBOARD_LOCO_MU_ID,
            FunctionName.GET_LOCO_MU_ID,
        ]:
            is_valid, message = validate_recommended_call(RecommendedCall(function=function))
            self.assertFalse(is_valid)
            self.assertIn(function.value, message)

    def test_maintenance_call_allowed_when_enabled(self):
        """Test that maintenance mode lets write functions through."""
        call = RecommendedCall(function=FunctionName.DASHBOARD_DATA_BUILD_UP)
        is_valid, _ = validate_recommended_call(call, allow_maintenance=True)
        self.assertTrue(is_valid)

    def test_unbound_placeholder_is_rejected(self):
        """Test that template arguments must be bound first."""
        call = RecommendedCall(function=FunctionName.GET_LOCO_NEXT_DUE_LOCO_INSPECTION, args={"assetId": "$assetId"})
        is_valid, message = validate_recommended_call(call)
        self.assertFalse(is_valid)
        self.assertIn("placeholder", message)

    def test_read_fields_must_be_bound(self):
        """Test that field paths may not keep the <assetId> placeholder."""
        self.assertEqual(validate_read_fields([f"value.assetData.{ASSET_ID}.muId"]), (True, ""))
        is_valid, message = validate_read_fields(["value.assetData.<assetId>.muId"])
        self.assertFalse(is_valid)
        self.assertIn("<assetId>", message)

    def test_contains_asset_id(self):
        """Test asset ID detection in free text."""
        self.assertTrue(contains_asset_id(f"see {ASSET_ID}"))
        self.assertTrue(contains_asset_id(ASSET_ID.upper()))
        self.assertFalse(contains_asset_id("loco 4430 SD70M"))
        self.assertFalse(contains_asset_id(""))

    def test_redact_asset_ids(self):
        """Test that asset IDs are replaced in user-facing text."""
        self.assertEqual(redact_asset_ids(f"loco {ASSET_ID} is due"), f"loco {REDACTED} is due")
        self.assertEqual(redact_asset_ids("nothing here"), "nothing here")
        self.assertIsNone(redact_asset_ids(None))

    def test_assert_user_safe(self):
        """Test that text with an asset ID is refused."""
        self.assertEqual(assert_user_safe("Which locomotive?"), "Which locomotive?")
        with self.assertRaises(ValueError):
            assert_user_safe(f"Found {ASSET_ID}")


if __name__ == "__main__":
    unittest.main()
