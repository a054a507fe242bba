#!/usr/bin/env python3

import json
from classification.tree_builder import build_tree
from models.subcategory import CategoryType
from services.seed import seed_subcategories
from logger import get_logger

logger = get_logger()


def _load(args, services):
    if getattr(args, "parent", None):
        return services.subcategories.find_by_parent(args.parent)
    if args.category:
        return services.subcategories.find_by_category(CategoryType(args.category))
    return services.subcategories.find_all()


def cmd_list(args, services):
    """List subcategories."""
    subcategories = _load(args, services)

    if not subcategories:
        logger.info("No subcategories found.")
        return

    logger.info("\nSubcategories:")
    logger.info("=" * 80)
    for subcategory in subcategories:
        flags = []
        if subcategory.is_default:
            flags.append("default")
        if not subcategory.is_active:
            flags.append("inactive")
        suffix = f" [{', '.join(flags)}]" if flags else ""

        logger.info(
            f"{subcategory.category_type.value:<10} {subcategory.id:<25} "
            f"{subcategory.name}{suffix}"
        )
        if subcategory.parent_id:
            logger.info(f"{'':<10} parent: {subcategory.parent_id}")

    logger.info(f"\nTotal subcategories: {len(subcategories)}")


def _log_nodes(nodes, depth=0):
    for node in nodes:
        icon = f"{node.icon} " if node.icon else ""
        logger.info(f"{'  ' * depth}{icon}{node.name} ({node.id})")
        if node.children:
            _log_nodes(node.children, depth + 1)


def cmd_tree(args, services):
    """Show subcategories as a tree."""
    tree = build_tree(_load(args, services))

    if args.json:
        print(json.dumps([node.to_dict() for node in tree], ensure_ascii=False, indent=2))
        return

    if not tree:
        logger.info("No subcategories found.")
        return

    _log_nodes(tree)


def _set_active(args, services, is_active):
    subcategory = services.subcategories.set_active(args.subcategory_id, is_active)
    state = "active" if subcategory.is_active else "inactive"
    logger.info(f"✓ Subcategory '{subcategory.name}' ({subcategory.id}) is now {state}.")
    if subcategory.is_default and not subcategory.is_active:
        logger.warning(
            f"{subcategory.id} is the default for {subcategory.category_type.value}; "
            "classification will fail when nothing else matches."
        )


def cmd_activate(args, services):
    """Make a subcategory available to classification again."""
    _set_active(args, services, True)


def cmd_deactivate(args, services):
    """Hide a subcategory from classification."""
    _set_active(args, services, False)


def cmd_seed(args, services):
    """Seed subcategories from JSON file."""
    seed_file = services.db_manager.get_seed_dir() / "subcategories.json"

    logger.info("\nSeeding subcategories from db/seed/subcategories.json")
    logger.info("=" * 80)

    created_count, skipped_count = seed_subcategories(services, seed_file)

    logger.info("=" * 80)
    logger.info("\nSeeding complete!")
    logger.info(f"Created: {created_count}")
    logger.info(f"Skipped: {skipped_count}")


def setup_parser(subparsers):
    """Setup subcategories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "subcategories",
        help="Manage subcategories",
        description="List, browse, seed, and (de)activate transaction subcategories",
    )

    subcategories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available subcategory commands",
        dest="subcommand",
        required=True,
    )

    category_choices = [t.value for t in CategoryType]

    # subcategories list
    list_parser = subcategories_subparsers.add_parser(
        "list", help="List subcategories"
    )
    list_parser.add_argument(
        "--category",
        choices=category_choices,
        help="Only list active subcategories of this category type",
    )
    list_parser.add_argument(
        "--parent",
        metavar="ID",
        help="Only list active children of this subcategory",
    )
    list_parser.set_defaults(func=cmd_list)

    # subcategories tree
    tree_parser = subcategories_subparsers.add_parser(
        "tree", help="Show subcategories as a tree"
    )
    tree_parser.add_argument(
        "--category",
        choices=category_choices,
        help="Only show active subcategories of this category type",
    )
    tree_parser.add_argument(
        "--json", action="store_true", help="Print the tree as JSON"
    )
    tree_parser.set_defaults(func=cmd_tree)

    # subcategories activate
    activate_parser = subcategories_subparsers.add_parser(
        "activate", help="Activate a subcategory"
    )
    activate_parser.add_argument("subcategory_id", help="Subcategory ID to activate")
    activate_parser.set_defaults(func=cmd_activate)

    # subcategories deactivate
    deactivate_parser = subcategories_subparsers.add_parser(
        "deactivate", help="Deactivate a subcategory"
    )
    deactivate_parser.add_argument(
        "subcategory_id", help="Subcategory ID to deactivate"
    )
    deactivate_parser.set_defaults(func=cmd_deactivate)

    # subcategories seed
    seed_parser = subcategories_subparsers.add_parser(
        "seed", help="Seed subcategories from JSON file"
    )
    seed_parser.set_defaults(func=cmd_seed)
