import sqlite3

import pytest

from classification.merchant_matcher import MerchantMatcher
from tests.classification.fakes import FakeMerchantService
from tests.helpers import make_merchant


@pytest.fixture
def starbucks():
    return make_merchant(
        "merchant_cafe_starbucks",
        "スターバックス",
        "food_cafe",
        aliases=["STARBUCKS", "スタバ"],
        confidence=0.98,
    )


@pytest.fixture
def tullys():
    return make_merchant(
        "merchant_cafe_tullys", "タリーズ", "food_cafe", aliases=["TULLY'S"]
    )


class TestMerchantMatcher:
    """Tests for MerchantMatcher."""

    def test_match_by_name(self, starbucks, tullys):
        """Test that a merchant is found by its name."""
        matcher = MerchantMatcher(FakeMerchantService([tullys, starbucks]))

        assert matcher.match("スターバックス 表参道店") is starbucks

    def test_match_by_alias(self, starbucks, tullys):
        """Test that a merchant is found by an alias."""
        matcher = MerchantMatcher(FakeMerchantService([tullys, starbucks]))

        assert matcher.match("STARBUCKS COFFEE SHIBUYA") is starbucks
        assert matcher.match("Tully's Coffee") is tullys

    def test_first_match_wins(self, starbucks):
        """Test that the earlier merchant wins when several match."""
        generic = make_merchant("merchant_generic", "コーヒー", "food_cafe")
        matcher = MerchantMatcher(FakeMerchantService([generic, starbucks]))

        assert matcher.match("スターバックスコーヒー") is generic

        matcher = MerchantMatcher(FakeMerchantService([starbucks, generic]))

        assert matcher.match("スターバックスコーヒー") is starbucks

    def test_no_match_returns_none(self, starbucks, tullys):
        matcher = MerchantMatcher(FakeMerchantService([starbucks, tullys]))

        assert matcher.match("ドトール") is None

    def test_no_merchants(self):
        assert MerchantMatcher(FakeMerchantService([])).match("スターバックス") is None

    def test_repository_error_propagates(self):
        """Test that errors from the merchant service are not swallowed."""
        matcher = MerchantMatcher(
            FakeMerchantService(error=sqlite3.OperationalError("database is locked"))
        )

        with pytest.raises(sqlite3.OperationalError, match="database is locked"):
            matcher.match("スターバックス")
