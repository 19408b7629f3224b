#!/usr/bin/env python3

import sys
from datetime import date
from actions import (
    create_transaction_action,
    delete_transaction_action,
    update_transaction_action,
)
from cli.common import format_money, report
from tools.dashboard import categorize_transactions, index_categories
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List a wallet's transactions, newest first."""
    wallet = services.wallets.find(args.wallet)
    if wallet is None:
        logger.error(f"Wallet with ID {args.wallet} not found.")
        sys.exit(1)

    transactions = services.transactions.find_by_wallet(
        wallet.id,
        start_date=date.fromisoformat(args.since) if args.since else None,
        limit=args.limit,
    )

    if not transactions:
        logger.info("No transactions found.")
        return

    category_map = index_categories(services.categories.find_by_wallet(wallet.id))

    logger.info(f"\nTransactions in {wallet.name}:")
    logger.info("=" * 80)
    for t in categorize_transactions(transactions, category_map):
        sign = "+" if t.type == "income" else "-"
        line = (
            f"[{t.id}] {t.occurred_at.isoformat()}  "
            f"{sign}{format_money(t.amount, wallet.default_currency)}  "
            f"{t.category_name or 'Uncategorised'}"
        )
        if t.merchant:
            line += f"  @ {t.merchant}"
        if t.memo:
            line += f"  ({t.memo})"
        logger.info(line)

    logger.info(f"\nShown: {len(transactions)}")


def _form_values(args) -> dict:
    return {
        "wallet_id": args.wallet,
        "type": args.type,
        "category_id": args.category,
        "amount": args.amount,
        "occurred_at": args.date or date.today().isoformat(),
        "memo": args.memo,
        "merchant": args.merchant,
    }


def cmd_add(args, services):
    """Record a new transaction."""
    report(create_transaction_action(services, _form_values(args)))


def cmd_edit(args, services):
    """Replace the details of an existing transaction."""
    values = _form_values(args)
    values["transaction_id"] = args.transaction_id
    report(update_transaction_action(services, values))


def cmd_delete(args, services):
    """Delete a transaction."""
    report(
        delete_transaction_action(
            services,
            {"wallet_id": args.wallet, "transaction_id": args.transaction_id},
        )
    )


def _add_transaction_arguments(parser):
    parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    parser.add_argument("amount", help="Positive amount, e.g. 12.50")
    parser.add_argument(
        "--type", choices=["expense", "income"], default="expense", help="Transaction type"
    )
    parser.add_argument("--category", help="Category ID (omit for uncategorised)")
    parser.add_argument("--date", help="Date in YYYY-MM-DD format (defaults to today)")
    parser.add_argument("--memo", help="Optional note")
    parser.add_argument("--merchant", help="Optional merchant name")


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Record and manage transactions",
        description="Add, edit, delete and list wallet transactions",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions list
    list_parser = transactions_subparsers.add_parser(
        "list", help="List a wallet's transactions"
    )
    list_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    list_parser.add_argument("--since", help="Only show transactions on or after YYYY-MM-DD")
    list_parser.add_argument(
        "--limit", type=int, default=50, help="Maximum number of transactions (default 50)"
    )
    list_parser.set_defaults(func=cmd_list)

    # transactions add
    add_parser = transactions_subparsers.add_parser("add", help="Record a transaction")
    _add_transaction_arguments(add_parser)
    add_parser.set_defaults(func=cmd_add)

    # transactions edit
    edit_parser = transactions_subparsers.add_parser(
        "edit", help="Replace a transaction's details"
    )
    edit_parser.add_argument("transaction_id", type=int, help="Transaction ID")
    _add_transaction_arguments(edit_parser)
    edit_parser.set_defaults(func=cmd_edit)

    # transactions delete
    delete_parser = transactions_subparsers.add_parser(
        "delete", help="Delete a transaction"
    )
    delete_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    delete_parser.add_argument("transaction_id", type=int, help="Transaction ID")
    delete_parser.set_defaults(func=cmd_delete)
