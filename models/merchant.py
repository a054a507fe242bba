"""Merchant model for known payees and payers."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

from classification import normalizer
from models.classification import ClassificationConfidence


@dataclass(frozen=True)
class Merchant:
    """A known merchant whose name maps directly to a subcategory.

    Attributes:
        id: Unique identifier.
        name: Display name.
        aliases: Alternative spellings found in transaction descriptions. Any
                 iterable is accepted and stored as a tuple.
        default_subcategory_id: Subcategory assigned when this merchant matches.
        confidence: Trust in that assignment. A plain float is accepted and
                    validated into a ClassificationConfidence.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: str
    name: str
    aliases: Tuple[str, ...]
    default_subcategory_id: str
    confidence: ClassificationConfidence
    created_at: datetime
    updated_at: datetime
    _patterns: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.confidence, ClassificationConfidence):
            object.__setattr__(
                self, "confidence", ClassificationConfidence(self.confidence)
            )
        object.__setattr__(self, "aliases", tuple(self.aliases))
        object.__setattr__(self, "_patterns", (self.name, *self.aliases))

    def matches_description(self, description: str) -> bool:
        """True if the description contains the name or any alias.

        Comparison goes through the text normalizer, so case, full-width
        characters, symbols and spacing are ignored.
        """
        return any(
            normalizer.includes(description, pattern) for pattern in self._patterns
        )

    def to_dict(self) -> dict:
        """Convert merchant to a plain serializable dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "aliases": list(self.aliases),
            "default_subcategory_id": self.default_subcategory_id,
            "confidence": self.confidence.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
