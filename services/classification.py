"""Transaction classification entry point for consumers (CLI, API layers)."""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from models.subcategory import CategoryType
from logger import get_logger

logger = get_logger()


def classify_transaction(
    services,
    description: str,
    amount: Union[Decimal, float],
    category_type: CategoryType,
    transaction_date: Optional[date] = None,
) -> dict:
    """Classify a transaction and resolve the referenced subcategory and merchant.

    Args:
        services: Services container.
        description: Transaction description.
        amount: Transaction amount.
        category_type: Main category type of the transaction.
        transaction_date: Optional transaction date.

    Returns:
        Dictionary with the classification result fields plus:
        - subcategory: the chosen subcategory as a dict, or None if it no
          longer exists
        - merchant_name: name of the matched merchant, or None
        - is_reliable: whether confidence is medium or high

    Raises:
        DefaultSubcategoryNotFoundError: If the category type has no default
            subcategory and nothing else matched.
    """
    result = services.classifier.classify(
        description, amount, category_type, transaction_date
    )

    subcategory = services.subcategories.find(result.subcategory_id)
    if subcategory is None:
        logger.warning(
            f"Classification chose subcategory {result.subcategory_id} which does not exist"
        )

    merchant_name = None
    if result.merchant_id is not None:
        merchant = services.merchants.find(result.merchant_id)
        merchant_name = merchant.name if merchant else None

    logger.info(
        f"Classified '{description}' as {result.subcategory_id} "
        f"({result.reason.value}, confidence {result.confidence.value:.2f})"
    )

    payload = result.to_dict()
    payload["subcategory"] = subcategory.to_dict() if subcategory else None
    payload["merchant_name"] = merchant_name
    payload["is_reliable"] = result.is_reliable()
    return payload
