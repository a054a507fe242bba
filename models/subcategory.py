"""Subcategory model for detailed transaction classification."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class CategoryType(str, Enum):
    """Top-level classification of a transaction."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"
    REPAYMENT = "REPAYMENT"
    INVESTMENT = "INVESTMENT"


@dataclass(frozen=True)
class Subcategory:
    """A finer-grained, hierarchical classification under a category type.

    Attributes:
        id: Unique identifier (e.g. "food_cafe").
        category_type: The main category type this subcategory belongs to.
        name: Display name.
        parent_id: Optional parent subcategory ID. None marks a root.
        display_order: Sort key among siblings.
        icon: Optional display icon.
        color: Optional display color.
        is_default: True for the fallback subcategory of its category type.
        is_active: Inactive subcategories are not offered for classification.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: str
    category_type: CategoryType
    name: str
    parent_id: Optional[str]
    display_order: int
    icon: Optional[str]
    color: Optional[str]
    is_default: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    def has_parent(self) -> bool:
        """True if this subcategory is nested under another one."""
        return self.parent_id is not None

    def to_dict(self) -> dict:
        """Convert subcategory to a plain serializable dictionary."""
        return {
            "id": self.id,
            "category_type": self.category_type.value,
            "name": self.name,
            "parent_id": self.parent_id,
            "display_order": self.display_order,
            "icon": self.icon,
            "color": self.color,
            "is_default": self.is_default,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
