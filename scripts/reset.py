#!/usr/bin/env python3
"""Reset script for Kakeibo.

This script will:
1. Delete the data directory (database and logs)
2. Run migrations to create a fresh database
3. Optionally load the bundled subcategory and merchant seed data
"""

import shutil
import sys

from config import load_config, get_seed_dir
from db.manager import DatabaseManager
from cli.migrate import apply_pending_migrations
from services.base import Services
from services.seed import seed_merchants, seed_subcategories


def reset():
    """Reset the application state."""
    print("Kakeibo Reset Script")
    print("=" * 50)

    config = load_config()

    if not config.enable_reset:
        print("\nReset is disabled in configuration (enable_reset=false).")
        print("To enable reset, set enable_reset=true in ~/.config/kakeibo.toml")
        sys.exit(1)

    print(f"\nData directory: {config.base_dir}")
    print(f"Database: {config.db_path}")
    print(f"Logs: {config.log_dir}")

    response = input("\nThis will delete ALL data. Continue? (yes/no): ")
    if response.lower() != "yes":
        print("Reset cancelled.")
        sys.exit(0)

    if config.base_dir.exists():
        print(f"\nDeleting {config.base_dir}...")
        shutil.rmtree(config.base_dir)
        print("✓ Data directory deleted")
    else:
        print(f"\n✓ Data directory does not exist: {config.base_dir}")

    print("\nRunning migrations...")
    db_manager = DatabaseManager(config)
    applied = apply_pending_migrations(db_manager)
    print(f"✓ Applied {len(applied)} migration(s)")

    response = input("\nLoad bundled subcategories and merchants? (yes/no): ")
    if response.lower() == "yes":
        services = Services(config, db_manager=db_manager)
        created, _ = seed_subcategories(services, get_seed_dir() / "subcategories.json")
        print(f"✓ Created {created} subcategories")
        created, _ = seed_merchants(services, get_seed_dir() / "merchants.json")
        print(f"✓ Created {created} merchants")

    print("\n" + "=" * 50)
    print("Reset complete! Database has been recreated.")
    print(f"Database location: {config.db_path}")


if __name__ == "__main__":
    reset()
