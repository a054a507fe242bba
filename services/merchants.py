"""Merchant service for database operations."""

import json
from datetime import datetime
from typing import List, Optional
from models.merchant import Merchant

_MERCHANT_SELECT_FIELDS = """id, name, aliases, default_subcategory_id, confidence,
       created_at, updated_at"""


def _row_to_merchant(row) -> Merchant:
    # Merchant() re-validates the stored confidence
    return Merchant(
        id=row[0],
        name=row[1],
        aliases=tuple(json.loads(row[2])) if row[2] else (),
        default_subcategory_id=row[3],
        confidence=row[4],
        created_at=datetime.fromisoformat(row[5]),
        updated_at=datetime.fromisoformat(row[6]),
    )


class MerchantService:
    """Service for managing known merchants."""

    def __init__(self, db_manager):
        """Initialize the merchant service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self) -> List[Merchant]:
        """Get all merchants.

        Returns:
            List of Merchant objects in insertion order. Merchant matching
            uses this order to pick the first match.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_MERCHANT_SELECT_FIELDS} FROM merchants ORDER BY rowid"
            )
            return [_row_to_merchant(row) for row in cursor.fetchall()]

    def find(self, merchant_id: str) -> Optional[Merchant]:
        """Get a single merchant by ID.

        Args:
            merchant_id: The merchant ID to find.

        Returns:
            Merchant object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_MERCHANT_SELECT_FIELDS} FROM merchants WHERE id = ?",
                (merchant_id,),
            )
            row = cursor.fetchone()
            return _row_to_merchant(row) if row else None

    def find_by_name(self, name: str) -> Optional[Merchant]:
        """Get a single merchant by exact name.

        Args:
            name: The merchant name to find.

        Returns:
            Merchant object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_MERCHANT_SELECT_FIELDS} FROM merchants WHERE name = ?",
                (name,),
            )
            row = cursor.fetchone()
            return _row_to_merchant(row) if row else None

    def search(self, query: str) -> List[Merchant]:
        """Find merchants whose name contains the query.

        Args:
            query: Substring to look for in merchant names.

        Returns:
            List of matching Merchant objects in insertion order.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_MERCHANT_SELECT_FIELDS} FROM merchants
                WHERE name LIKE ?
                ORDER BY rowid
                """,
                (f"%{query}%",),
            )
            return [_row_to_merchant(row) for row in cursor.fetchall()]

    def create(self, merchant: Merchant) -> Merchant:
        """Insert a merchant.

        Args:
            merchant: Merchant to insert.

        Returns:
            The same Merchant object.

        Raises:
            sqlite3.IntegrityError: If the ID already exists.
        """
        with self.db_manager.connect() as conn:
            conn.execute(
                f"""
                INSERT INTO merchants ({_MERCHANT_SELECT_FIELDS})
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    merchant.id,
                    merchant.name,
                    json.dumps(list(merchant.aliases), ensure_ascii=False),
                    merchant.default_subcategory_id,
                    merchant.confidence.value,
                    merchant.created_at.isoformat(),
                    merchant.updated_at.isoformat(),
                ),
            )
            conn.commit()

        return merchant
