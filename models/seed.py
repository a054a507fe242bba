"""Pydantic models for validating seed data files."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from models.merchant import Merchant
from models.subcategory import CategoryType, Subcategory


class SubcategorySeed(BaseModel):
    """One subcategory record from db/seed/subcategories.json."""

    id: str
    category_type: CategoryType
    name: str
    parent_id: Optional[str] = None
    display_order: int
    icon: Optional[str] = None
    color: Optional[str] = None
    is_default: bool = False
    is_active: bool = True

    def to_subcategory(self, now: datetime) -> Subcategory:
        return Subcategory(
            id=self.id,
            category_type=self.category_type,
            name=self.name,
            parent_id=self.parent_id,
            display_order=self.display_order,
            icon=self.icon,
            color=self.color,
            is_default=self.is_default,
            is_active=self.is_active,
            created_at=now,
            updated_at=now,
        )


class MerchantSeed(BaseModel):
    """One merchant record from db/seed/merchants.json."""

    id: str
    name: str
    aliases: List[str] = Field(default_factory=list)
    default_subcategory_id: str
    confidence: float = Field(ge=0.0, le=1.0)

    def to_merchant(self, now: datetime) -> Merchant:
        return Merchant(
            id=self.id,
            name=self.name,
            aliases=tuple(self.aliases),
            default_subcategory_id=self.default_subcategory_id,
            confidence=self.confidence,
            created_at=now,
            updated_at=now,
        )
