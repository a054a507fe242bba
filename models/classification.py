"""Value objects produced by the subcategory classification pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

HIGH_CONFIDENCE_THRESHOLD = 0.9
MEDIUM_CONFIDENCE_THRESHOLD = 0.7


class ClassificationReason(str, Enum):
    """The pipeline stage that produced a classification."""

    MERCHANT_MATCH = "MERCHANT_MATCH"
    KEYWORD_MATCH = "KEYWORD_MATCH"
    AMOUNT_INFERENCE = "AMOUNT_INFERENCE"
    RECURRING_PATTERN = "RECURRING_PATTERN"
    DEFAULT = "DEFAULT"
    MANUAL = "MANUAL"


@dataclass(frozen=True)
class ClassificationConfidence:
    """A trust score in [0, 1] for an automatic classification.

    Bands:
        high: value >= 0.90
        medium: 0.70 <= value < 0.90
        low: value < 0.70

    Raises:
        ValueError: If value is outside [0, 1] or is NaN.
    """

    value: float

    def __post_init__(self):
        # also rejects NaN
        if not 0 <= self.value <= 1:
            raise ValueError(
                f"Classification confidence must be between 0.00 and 1.00, got {self.value}"
            )

    def is_high(self) -> bool:
        return self.value >= HIGH_CONFIDENCE_THRESHOLD

    def is_medium(self) -> bool:
        return MEDIUM_CONFIDENCE_THRESHOLD <= self.value < HIGH_CONFIDENCE_THRESHOLD

    def is_low(self) -> bool:
        return self.value < MEDIUM_CONFIDENCE_THRESHOLD

    def should_auto_confirm(self) -> bool:
        """High-confidence classifications can be applied without review."""
        return self.is_high()

    def should_recommend_review(self) -> bool:
        """Low-confidence classifications should be checked by the user."""
        return self.is_low()

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one transaction into a subcategory.

    Attributes:
        subcategory_id: The chosen subcategory.
        confidence: Trust in the choice.
        reason: Which stage of the pipeline made the choice.
        merchant_id: The matched merchant, only set for merchant matches.
    """

    subcategory_id: str
    confidence: ClassificationConfidence
    reason: ClassificationReason
    merchant_id: Optional[str] = None

    @classmethod
    def manual(cls, subcategory_id: str) -> "ClassificationResult":
        """Create the result of a user picking the subcategory by hand."""
        return cls(
            subcategory_id=subcategory_id,
            confidence=ClassificationConfidence(1.0),
            reason=ClassificationReason.MANUAL,
        )

    def is_reliable(self) -> bool:
        """True if confidence is in the high or medium band."""
        return self.confidence.is_high() or self.confidence.is_medium()

    def to_dict(self) -> dict:
        """Convert to a plain dictionary. merchant_id is omitted when unset."""
        data = {
            "subcategory_id": self.subcategory_id,
            "confidence": self.confidence.value,
            "reason": self.reason.value,
        }
        if self.merchant_id is not None:
            data["merchant_id"] = self.merchant_id
        return data
