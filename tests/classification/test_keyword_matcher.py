import pytest

from classification.keyword_matcher import KeywordMatcher
from classification.keywords import build_keyword_map, load_keyword_map
from models.subcategory import CategoryType
from tests.helpers import make_subcategory


@pytest.fixture
def keyword_map():
    return build_keyword_map(
        {
            "EXPENSE": {
                "food_cafe": ["カフェ", "スターバックス", "コーヒー", "喫茶"],
                "food_dining_out": ["レストラン", "外食"],
                "transport_train_bus": ["定期券", "JR", "地下鉄", "バス"],
                "transport_taxi": ["タクシー", "Uber"],
            }
        }
    )


@pytest.fixture
def matcher(keyword_map):
    return KeywordMatcher(keyword_map)


@pytest.fixture
def expense_subcategories():
    return [
        make_subcategory("food_cafe", display_order=1),
        make_subcategory("food_dining_out", display_order=2),
        make_subcategory("transport_train_bus", display_order=3),
        make_subcategory("transport_taxi", display_order=4),
        make_subcategory("other_expense", display_order=99, is_default=True),
    ]


class TestKeywordMatcherMatch:
    """Tests for KeywordMatcher.match."""

    def test_single_keyword_hit(self, matcher, expense_subcategories):
        """Test that a single keyword hit is scored by keyword share."""
        match = matcher.match(
            "新宿駅 定期券購入", CategoryType.EXPENSE, expense_subcategories
        )

        assert match is not None
        assert match.subcategory.id == "transport_train_bus"
        assert match.score == pytest.approx(0.25)

    def test_best_score_wins(self, matcher, expense_subcategories):
        """Test that the subcategory with the higher share wins."""
        # food_cafe: 1/4, transport_taxi: 1/2
        match = matcher.match(
            "カフェ経由 タクシー", CategoryType.EXPENSE, expense_subcategories
        )

        assert match.subcategory.id == "transport_taxi"
        assert match.score == pytest.approx(0.5)

    def test_first_candidate_wins_ties(self, matcher):
        """Test that on equal scores the earlier candidate is kept."""
        candidates = [
            make_subcategory("food_dining_out"),
            make_subcategory("transport_taxi"),
        ]

        match = matcher.match("外食 タクシー", CategoryType.EXPENSE, candidates)

        assert match.subcategory.id == "food_dining_out"

        match = matcher.match(
            "外食 タクシー", CategoryType.EXPENSE, list(reversed(candidates))
        )

        assert match.subcategory.id == "transport_taxi"

    def test_matches_case_and_width_insensitive(self, matcher, expense_subcategories):
        """Test that keywords match regardless of case and width."""
        match = matcher.match("ｊｒ東日本", CategoryType.EXPENSE, expense_subcategories)

        assert match.subcategory.id == "transport_train_bus"

    def test_no_keyword_hit_returns_none(self, matcher, expense_subcategories):
        """Test that None is returned when nothing matches."""
        assert (
            matcher.match("謎の支払い", CategoryType.EXPENSE, expense_subcategories)
            is None
        )

    def test_category_without_keywords_returns_none(
        self, matcher, expense_subcategories
    ):
        """Test that a category type missing from the table returns None."""
        assert (
            matcher.match("定期券", CategoryType.TRANSFER, expense_subcategories)
            is None
        )

    def test_candidates_without_keywords_are_skipped(self, matcher):
        """Test that only candidates are scored, even if others would match."""
        match = matcher.match(
            "定期券",
            CategoryType.EXPENSE,
            [make_subcategory("other_expense"), make_subcategory("food_cafe")],
        )

        assert match is None

    def test_empty_candidates(self, matcher):
        assert matcher.match("定期券", CategoryType.EXPENSE, []) is None


class TestCalculateMatchScore:
    """Tests for KeywordMatcher.calculate_match_score."""

    def test_share_of_matched_keywords(self, matcher):
        score = matcher.calculate_match_score(
            "スターバックスコーヒー", ["カフェ", "スターバックス", "コーヒー", "喫茶"]
        )

        assert score == pytest.approx(0.5)

    def test_all_keywords_matched(self, matcher):
        assert matcher.calculate_match_score("外食レストラン", ["レストラン", "外食"]) == 1.0

    def test_no_match_is_zero(self, matcher):
        assert matcher.calculate_match_score("タクシー", ["レストラン", "外食"]) == 0.0

    def test_empty_keywords_is_zero(self, matcher):
        assert matcher.calculate_match_score("タクシー", []) == 0.0


class TestExtractKeywords:
    """Tests for KeywordMatcher.extract_keywords."""

    def test_splits_on_whitespace(self, matcher):
        assert matcher.extract_keywords("新宿駅 定期券購入") == ["新宿駅", "定期券購入"]

    def test_cleans_and_filters_empty_tokens(self, matcher):
        """Test lowercasing, width folding, symbol removal and empty filtering."""
        assert matcher.extract_keywords("  ＳＵＩＣＡ  チャージ!!  ") == [
            "suica",
            "チャージ",
        ]

    def test_empty_text(self, matcher):
        assert matcher.extract_keywords("") == []


class TestBundledKeywords:
    """Tests against the bundled keyword table."""

    def test_bundled_table_scores_train_pass(self):
        """Test the train-pass example against the shipped keywords."""
        matcher = KeywordMatcher(load_keyword_map())

        match = matcher.match(
            "新宿駅 定期券購入",
            CategoryType.EXPENSE,
            [make_subcategory("transport_train_bus")],
        )

        assert match.subcategory.id == "transport_train_bus"
        assert match.score == pytest.approx(1 / 7)
