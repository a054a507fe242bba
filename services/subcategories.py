"""Subcategory service for database operations."""

from datetime import datetime
from typing import List, Optional
from models.subcategory import CategoryType, Subcategory

_SUBCATEGORY_SELECT_FIELDS = """id, category_type, name, parent_id, display_order, icon,
       color, is_default, is_active, created_at, updated_at"""


def _row_to_subcategory(row) -> Subcategory:
    return Subcategory(
        id=row[0],
        category_type=CategoryType(row[1]),
        name=row[2],
        parent_id=row[3],
        display_order=row[4],
        icon=row[5],
        color=row[6],
        is_default=bool(row[7]),
        is_active=bool(row[8]),
        created_at=datetime.fromisoformat(row[9]),
        updated_at=datetime.fromisoformat(row[10]),
    )


class SubcategoryService:
    """Service for managing subcategories."""

    def __init__(self, db_manager):
        """Initialize the subcategory service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self) -> List[Subcategory]:
        """Get all subcategories, active or not.

        Returns:
            List of Subcategory objects, ordered by category type and display order.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_SUBCATEGORY_SELECT_FIELDS} FROM subcategories
                ORDER BY category_type, display_order, rowid
                """
            )
            return [_row_to_subcategory(row) for row in cursor.fetchall()]

    def find(self, subcategory_id: str) -> Optional[Subcategory]:
        """Get a single subcategory by ID.

        Args:
            subcategory_id: The subcategory ID to find.

        Returns:
            Subcategory object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_SUBCATEGORY_SELECT_FIELDS} FROM subcategories WHERE id = ?",
                (subcategory_id,),
            )
            row = cursor.fetchone()
            return _row_to_subcategory(row) if row else None

    def find_by_category(self, category_type: CategoryType) -> List[Subcategory]:
        """Get the active subcategories of a category type.

        Args:
            category_type: Main category type to filter by.

        Returns:
            List of active Subcategory objects, ordered by display order and
            then insertion order.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_SUBCATEGORY_SELECT_FIELDS} FROM subcategories
                WHERE category_type = ? AND is_active = 1
                ORDER BY display_order, rowid
                """,
                (category_type.value,),
            )
            return [_row_to_subcategory(row) for row in cursor.fetchall()]

    def find_by_parent(self, parent_id: str) -> List[Subcategory]:
        """Get the active direct children of a subcategory.

        Args:
            parent_id: ID of the parent subcategory.

        Returns:
            List of active Subcategory objects, ordered by display order.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_SUBCATEGORY_SELECT_FIELDS} FROM subcategories
                WHERE parent_id = ? AND is_active = 1
                ORDER BY display_order, rowid
                """,
                (parent_id,),
            )
            return [_row_to_subcategory(row) for row in cursor.fetchall()]

    def find_default(self, category_type: CategoryType) -> Optional[Subcategory]:
        """Get the active default subcategory of a category type.

        Args:
            category_type: Main category type.

        Returns:
            The default Subcategory, or None if none is configured.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_SUBCATEGORY_SELECT_FIELDS} FROM subcategories
                WHERE category_type = ? AND is_default = 1 AND is_active = 1
                ORDER BY rowid
                LIMIT 1
                """,
                (category_type.value,),
            )
            row = cursor.fetchone()
            return _row_to_subcategory(row) if row else None

    def create(self, subcategory: Subcategory) -> Subcategory:
        """Insert a subcategory.

        Args:
            subcategory: Subcategory to insert.

        Returns:
            The same Subcategory object.

        Raises:
            sqlite3.IntegrityError: If the ID already exists.
        """
        with self.db_manager.connect() as conn:
            conn.execute(
                f"""
                INSERT INTO subcategories ({_SUBCATEGORY_SELECT_FIELDS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    subcategory.id,
                    subcategory.category_type.value,
                    subcategory.name,
                    subcategory.parent_id,
                    subcategory.display_order,
                    subcategory.icon,
                    subcategory.color,
                    int(subcategory.is_default),
                    int(subcategory.is_active),
                    subcategory.created_at.isoformat(),
                    subcategory.updated_at.isoformat(),
                ),
            )
            conn.commit()

        return subcategory

    def set_active(self, subcategory_id: str, is_active: bool) -> Subcategory:
        """Activate or deactivate a subcategory.

        Args:
            subcategory_id: The subcategory ID to update.
            is_active: New active flag.

        Returns:
            The updated Subcategory object.

        Raises:
            Exception: If the subcategory is not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "UPDATE subcategories SET is_active = ?, updated_at = ? WHERE id = ?",
                (int(is_active), datetime.now().isoformat(), subcategory_id),
            )
            conn.commit()

            if cursor.rowcount == 0:
                raise Exception(f"Subcategory with ID {subcategory_id} not found")

        return self.find(subcategory_id)
