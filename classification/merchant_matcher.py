"""Merchant lookup for transaction descriptions."""

from typing import Optional

from models.merchant import Merchant
from logger import get_logger

logger = get_logger()


class MerchantMatcher:
    """Finds the known merchant named in a transaction description.

    The first merchant (in the order returned by merchant_service.find_all())
    whose name or alias appears in the description wins. There is no scoring.

    Args:
        merchant_service: Collaborator providing find_all() -> List[Merchant].
    """

    def __init__(self, merchant_service):
        self.merchant_service = merchant_service

    def match(self, description: str) -> Optional[Merchant]:
        """Return the first merchant matching the description, or None.

        Errors raised by the merchant service propagate unchanged.
        """
        for merchant in self.merchant_service.find_all():
            if merchant.matches_description(description):
                logger.debug(f"Description '{description}' matched merchant {merchant.id}")
                return merchant
        return None
