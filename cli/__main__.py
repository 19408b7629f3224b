#!/usr/bin/env python3
"""
Tally CLI - shared wallets, budgets and expense tracking.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    wallets      Manage wallets
    categories   Manage wallet categories
    transactions Record and manage transactions
    budgets      Manage budgets
    teams        Share wallets with a team
    dashboard    Show the wallet dashboard
    reports      Wallet reports
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli wallets create Household --currency EUR
    python -m cli categories seed --wallet 1
    python -m cli transactions add 42.10 --wallet 1 --category 3 --merchant Lidl
    python -m cli budgets create 400 --wallet 1 --category 3
    python -m cli dashboard show --wallet 1
"""

import sys
import argparse
from cli import budgets, categories, dashboard, migrate, reports, teams, transactions, wallets
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging

SERVICE_COMMANDS = (
    "wallets",
    "categories",
    "transactions",
    "budgets",
    "teams",
    "dashboard",
    "reports",
)


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Tally - Shared wallet expense tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    wallets.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    transactions.setup_parser(subparsers)
    budgets.setup_parser(subparsers)
    teams.setup_parser(subparsers)
    dashboard.setup_parser(subparsers)
    reports.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            if args.command in SERVICE_COMMANDS:
                args.func(args, Services(config))
            elif args.command == "migrate":
                # Migrate commands need db_manager for raw database operations
                args.func(args, DatabaseManager(config))
            else:
                args.func(args)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
