"""Tree-shaped view of subcategories for listing and browsing."""

from dataclasses import dataclass
from typing import List, Optional

from models.subcategory import CategoryType, Subcategory


@dataclass
class CategoryTreeNode:
    """A subcategory rendered with its nested children.

    children is None (not an empty list) when the node has no children,
    and to_dict() leaves the key out entirely in that case.
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
    created_at: str
    updated_at: str
    children: Optional[List["CategoryTreeNode"]] = None

    @classmethod
    def from_subcategory(cls, subcategory: Subcategory) -> "CategoryTreeNode":
        """Create a childless node from a subcategory."""
        return cls(
            id=subcategory.id,
            category_type=subcategory.category_type,
            name=subcategory.name,
            parent_id=subcategory.parent_id,
            display_order=subcategory.display_order,
            icon=subcategory.icon,
            color=subcategory.color,
            is_default=subcategory.is_default,
            is_active=subcategory.is_active,
            created_at=subcategory.created_at.isoformat(),
            updated_at=subcategory.updated_at.isoformat(),
        )

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "category_type": self.category_type.value,
            "name": self.name,
            "parent_id": self.parent_id,
            "display_order": self.display_order,
            "icon": self.icon,
            "color": self.color,
            "is_default": self.is_default,
            "is_active": self.is_active,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data
