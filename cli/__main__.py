#!/usr/bin/env python3
"""
Kakeibo CLI - Command-line interface for subcategory classification.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    subcategories  List, browse, seed, and (de)activate subcategories
    merchants      List, show, and seed known merchants
    classify       Classify a transaction description
    migrate        Database migrations

Examples:
    python -m cli migrate apply
    python -m cli subcategories seed
    python -m cli merchants seed
    python -m cli subcategories tree --category EXPENSE
    python -m cli subcategories deactivate transport_taxi
    python -m cli merchants show スターバックス
    python -m cli classify "スターバックス 表参道店" --amount 580 --category EXPENSE
"""

import sys
import argparse
from cli import subcategories, merchants, classify, migrate
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Kakeibo - Personal finance transaction classification",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    subcategories.setup_parser(subparsers)
    merchants.setup_parser(subparsers)
    classify.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # migrate works on the raw database, everything else through services
            if args.command == "migrate":
                args.func(args, DatabaseManager(config))
            else:
                args.func(args, Services(config))
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
