"""Keyword-based subcategory matching."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from classification import normalizer
from classification.keywords import KeywordMap
from models.subcategory import CategoryType, Subcategory


@dataclass(frozen=True)
class KeywordMatch:
    """Best-scoring subcategory for a description."""

    subcategory: Subcategory
    score: float


class KeywordMatcher:
    """Scores candidate subcategories by the keywords found in a description.

    Args:
        keyword_map: Read-only table of category type -> subcategory id -> keywords.
    """

    def __init__(self, keyword_map: KeywordMap):
        self.keyword_map = keyword_map

    def match(
        self,
        description: str,
        category_type: CategoryType,
        subcategories: Sequence[Subcategory],
    ) -> Optional[KeywordMatch]:
        """Find the candidate subcategory whose keywords best cover the description.

        Each candidate is scored as matched keywords / total keywords.
        Candidates without configured keywords are skipped. On equal scores
        the earlier candidate wins.

        Args:
            description: Transaction description.
            category_type: Main category type the candidates belong to.
            subcategories: Candidate subcategories, in priority order.

        Returns:
            The best KeywordMatch, or None if nothing scored above zero or the
            category type has no keywords configured.
        """
        category_keywords = self.keyword_map.get(category_type)
        if not category_keywords:
            return None

        normalized_text = normalizer.normalize(description)

        best_match: Optional[KeywordMatch] = None
        for subcategory in subcategories:
            keywords = category_keywords.get(subcategory.id)
            if not keywords:
                continue

            score = self.calculate_match_score(normalized_text, keywords)
            if score > 0 and (best_match is None or score > best_match.score):
                best_match = KeywordMatch(subcategory=subcategory, score=score)

        return best_match

    def calculate_match_score(
        self, normalized_text: str, keywords: Sequence[str]
    ) -> float:
        """Share of keywords contained in an already-normalized text.

        Returns:
            A score in [0, 1]; 0 when no keyword matched or keywords is empty.
        """
        if not keywords:
            return 0.0

        match_count = sum(
            1 for keyword in keywords if normalizer.normalize(keyword) in normalized_text
        )
        return match_count / len(keywords) if match_count > 0 else 0.0

    def extract_keywords(self, text: str) -> List[str]:
        """Split text into lowercase, symbol-free words.

        Simple whitespace tokenization. Proper tokenization for Japanese text
        (morphological analysis) is not implemented. match() does not use this.
        """
        cleaned = text.lower()
        cleaned = normalizer.normalize_width(cleaned)
        cleaned = normalizer.strip_symbols(cleaned)
        return [word for word in cleaned.split() if word]
