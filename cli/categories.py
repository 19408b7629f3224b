#!/usr/bin/env python3

import sys
from actions import create_category_action
from cli.common import report
from presets import PresetCatalog, seed_categories
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List the categories of a wallet."""
    categories = services.categories.find_by_wallet(args.wallet)

    if not categories:
        logger.info("No categories found.")
        return

    catalog = PresetCatalog()

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        logger.info(f"ID: {category.id}")
        logger.info(f"Name: {category.name}")
        logger.info(f"Type: {category.type}")
        if category.color:
            logger.info(f"Color: {category.color}")
        logger.info(f"Icon: {catalog.icon_label(category.icon)}")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_create(args, services):
    """Create a new category in a wallet."""
    state = create_category_action(
        services,
        {
            "wallet_id": args.wallet,
            "name": args.name,
            "type": args.type,
            "color": args.color,
            "icon": args.icon,
        },
    )
    report(state)


def cmd_delete(args, services):
    """Delete a category by ID."""
    category_id = args.category_id

    category = services.categories.find(category_id)
    if not category:
        logger.error(f"Category with ID {category_id} not found.")
        sys.exit(1)

    logger.info("\nCategory to delete:")
    logger.info(f"  ID: {category.id}")
    logger.info(f"  Name: {category.name}")
    logger.info(f"  Type: {category.type}")

    if not args.yes:
        confirm = (
            input("\nAre you sure you want to delete this category? (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    try:
        if services.categories.delete(category_id):
            logger.info(f"✓ Category '{category.name}' deleted successfully.")
            logger.info("  Transactions in this category now show as uncategorised.")
        else:
            logger.error("Failed to delete category.")
            sys.exit(1)
    except Exception as e:
        logger.error(f"Error deleting category: {e}")
        sys.exit(1)


def cmd_seed(args, services):
    """Create the default categories for a wallet."""
    if services.wallets.find(args.wallet) is None:
        logger.error(f"Wallet with ID {args.wallet} not found.")
        sys.exit(1)

    try:
        created = seed_categories(services, args.wallet)
    except Exception as e:
        logger.error(f"Error seeding categories: {e}")
        sys.exit(1)

    logger.info(f"✓ Created {created} categories.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Create, list, delete and seed wallet categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser(
        "list", help="List a wallet's categories"
    )
    list_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    list_parser.set_defaults(func=cmd_list)

    # categories create
    create_parser = categories_subparsers.add_parser(
        "create", help="Create a new category"
    )
    create_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    create_parser.add_argument("name", help="Category name")
    create_parser.add_argument(
        "--type", choices=["expense", "income"], default="expense", help="Category type"
    )
    create_parser.add_argument("--color", help="Hex colour, e.g. #22c55e")
    create_parser.add_argument("--icon", help="Icon key, e.g. groceries")
    create_parser.set_defaults(func=cmd_create)

    # categories delete
    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category by ID"
    )
    delete_parser.add_argument("category_id", type=int, help="Category ID to delete")
    delete_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    delete_parser.set_defaults(func=cmd_delete)

    # categories seed
    seed_parser = categories_subparsers.add_parser(
        "seed", help="Create the default categories for a wallet"
    )
    seed_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    seed_parser.set_defaults(func=cmd_seed)
