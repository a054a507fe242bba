"""Helper utilities for tests."""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional
import sqlite3

from models.merchant import Merchant
from models.subcategory import CategoryType, Subcategory

BASE_DATE = datetime(2025, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        with open(migration_file, "r", encoding="utf-8") as f:
            conn.executescript(f.read())

    conn.commit()


def make_subcategory(
    id: str,
    name: Optional[str] = None,
    parent_id: Optional[str] = None,
    display_order: int = 1,
    category_type: CategoryType = CategoryType.EXPENSE,
    is_default: bool = False,
    is_active: bool = True,
    icon: Optional[str] = None,
    color: Optional[str] = None,
) -> Subcategory:
    """Build a Subcategory with sensible defaults."""
    return Subcategory(
        id=id,
        category_type=category_type,
        name=name or id,
        parent_id=parent_id,
        display_order=display_order,
        icon=icon,
        color=color,
        is_default=is_default,
        is_active=is_active,
        created_at=BASE_DATE,
        updated_at=BASE_DATE,
    )


def make_merchant(
    id: str,
    name: str,
    default_subcategory_id: str,
    aliases: Optional[List[str]] = None,
    confidence: float = 0.95,
) -> Merchant:
    """Build a Merchant with sensible defaults."""
    return Merchant(
        id=id,
        name=name,
        aliases=tuple(aliases or ()),
        default_subcategory_id=default_subcategory_id,
        confidence=confidence,
        created_at=BASE_DATE,
        updated_at=BASE_DATE,
    )
