#!/usr/bin/env python3

from services.seed import seed_merchants
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List merchants in match order."""
    if args.search:
        merchants = services.merchants.search(args.search)
    else:
        merchants = services.merchants.find_all()

    if not merchants:
        logger.info("No merchants found.")
        return

    logger.info("\nMerchants:")
    logger.info("=" * 80)
    for merchant in merchants:
        logger.info(f"ID: {merchant.id}")
        logger.info(f"Name: {merchant.name}")
        if merchant.aliases:
            logger.info(f"Aliases: {', '.join(merchant.aliases)}")
        logger.info(
            f"Subcategory: {merchant.default_subcategory_id} "
            f"(confidence {merchant.confidence.value:.2f})"
        )
        logger.info("-" * 80)

    logger.info(f"\nTotal merchants: {len(merchants)}")


def cmd_show(args, services):
    """Show one merchant by exact name."""
    merchant = services.merchants.find_by_name(args.name)
    if not merchant:
        raise Exception(f"Merchant '{args.name}' not found")

    subcategory = services.subcategories.find(merchant.default_subcategory_id)
    subcategory_name = subcategory.name if subcategory else "Unknown"

    logger.info(f"\nID: {merchant.id}")
    logger.info(f"Name: {merchant.name}")
    logger.info(f"Aliases: {', '.join(merchant.aliases) or '(none)'}")
    logger.info(
        f"Subcategory: {subcategory_name} ({merchant.default_subcategory_id})"
    )
    logger.info(f"Confidence: {merchant.confidence.value:.2f}")


def cmd_seed(args, services):
    """Seed merchants from JSON file."""
    seed_file = services.db_manager.get_seed_dir() / "merchants.json"

    logger.info("\nSeeding merchants from db/seed/merchants.json")
    logger.info("=" * 80)

    created_count, skipped_count = seed_merchants(services, seed_file)

    logger.info("=" * 80)
    logger.info("\nSeeding complete!")
    logger.info(f"Created: {created_count}")
    logger.info(f"Skipped: {skipped_count}")


def setup_parser(subparsers):
    """Setup merchants subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "merchants",
        help="Manage merchants",
        description="List, show, and seed known merchants",
    )

    merchants_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available merchant commands",
        dest="subcommand",
        required=True,
    )

    # merchants list
    list_parser = merchants_subparsers.add_parser("list", help="List merchants")
    list_parser.add_argument(
        "--search", help="Only list merchants whose name contains this text"
    )
    list_parser.set_defaults(func=cmd_list)

    # merchants show
    show_parser = merchants_subparsers.add_parser("show", help="Show one merchant")
    show_parser.add_argument("name", help="Exact merchant name")
    show_parser.set_defaults(func=cmd_show)

    # merchants seed
    seed_parser = merchants_subparsers.add_parser(
        "seed", help="Seed merchants from JSON file"
    )
    seed_parser.set_defaults(func=cmd_seed)
