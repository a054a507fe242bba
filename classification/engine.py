"""Subcategory classification pipeline.

Classification is attempted in this order, stopping at the first hit:

1. Merchant match - a known merchant is named in the description.
2. Keyword match - configured keywords appear in the description.
3. Amount inference - not implemented, never matches.
4. Recurring pattern - not implemented, never matches.
5. Default - the category type's default subcategory.
"""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from classification.keyword_matcher import KeywordMatcher
from classification.merchant_matcher import MerchantMatcher
from models.classification import (
    ClassificationConfidence,
    ClassificationReason,
    ClassificationResult,
)
from models.subcategory import CategoryType
from logger import get_logger

logger = get_logger()

KEYWORD_MATCH_MIN_CONFIDENCE = 0.7
DEFAULT_CONFIDENCE = 0.5


class DefaultSubcategoryNotFoundError(Exception):
    """No default subcategory is configured for a category type."""

    def __init__(self, category_type: CategoryType):
        self.category_type = category_type
        super().__init__(
            f"Default subcategory not found for category: {category_type.value}"
        )


class SubcategoryClassifier:
    """Classifies transactions into subcategories.

    Args:
        subcategory_service: Collaborator providing find_by_category() (active
                             only) and find_default().
        merchant_matcher: Matcher for known merchants.
        keyword_matcher: Matcher for configured keywords.
    """

    def __init__(
        self,
        subcategory_service,
        merchant_matcher: MerchantMatcher,
        keyword_matcher: KeywordMatcher,
    ):
        self.subcategory_service = subcategory_service
        self.merchant_matcher = merchant_matcher
        self.keyword_matcher = keyword_matcher

    def classify(
        self,
        description: str,
        amount: Union[Decimal, float],
        category_type: CategoryType,
        transaction_date: Optional[date] = None,
    ) -> ClassificationResult:
        """Classify a transaction into a subcategory.

        Args:
            description: Transaction description.
            amount: Transaction amount (reserved for amount inference).
            category_type: Main category type of the transaction.
            transaction_date: Transaction date (reserved for recurring patterns).

        Returns:
            ClassificationResult for the first stage that matched.

        Raises:
            DefaultSubcategoryNotFoundError: If nothing matched and the category
                type has no default subcategory.
        """
        merchant = self.merchant_matcher.match(description)
        if merchant:
            logger.debug(
                f"Classified '{description}' as {merchant.default_subcategory_id} "
                f"by merchant {merchant.id}"
            )
            return ClassificationResult(
                subcategory_id=merchant.default_subcategory_id,
                confidence=merchant.confidence,
                reason=ClassificationReason.MERCHANT_MATCH,
                merchant_id=merchant.id,
            )

        subcategories = self.subcategory_service.find_by_category(category_type)
        keyword_match = self.keyword_matcher.match(
            description, category_type, subcategories
        )
        if keyword_match:
            # Any keyword hit is trusted at least at the medium band
            confidence = max(keyword_match.score, KEYWORD_MATCH_MIN_CONFIDENCE)
            logger.debug(
                f"Classified '{description}' as {keyword_match.subcategory.id} "
                f"by keywords (score {keyword_match.score:.2f})"
            )
            return ClassificationResult(
                subcategory_id=keyword_match.subcategory.id,
                confidence=ClassificationConfidence(confidence),
                reason=ClassificationReason.KEYWORD_MATCH,
            )

        inferred = self._infer_from_amount(amount, category_type)
        if inferred:
            return inferred

        if transaction_date is not None:
            recurring = self._infer_from_recurring(description, transaction_date)
            if recurring:
                return recurring

        default_subcategory = self.subcategory_service.find_default(category_type)
        if default_subcategory is None:
            logger.error(
                f"No default subcategory configured for category {category_type.value}"
            )
            raise DefaultSubcategoryNotFoundError(category_type)

        logger.debug(
            f"Classified '{description}' as default {default_subcategory.id}"
        )
        return ClassificationResult(
            subcategory_id=default_subcategory.id,
            confidence=ClassificationConfidence(DEFAULT_CONFIDENCE),
            reason=ClassificationReason.DEFAULT,
        )

    def _infer_from_amount(
        self, amount: Union[Decimal, float], category_type: CategoryType
    ) -> Optional[ClassificationResult]:
        """Infer a subcategory from the amount range. Not implemented."""
        return None

    def _infer_from_recurring(
        self, description: str, transaction_date: date
    ) -> Optional[ClassificationResult]:
        """Infer a subcategory from a recurring payment pattern. Not implemented."""
        return None
