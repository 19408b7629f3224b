"""Helpers shared by the CLI commands."""

import sys
from decimal import Decimal
from logger import get_logger

logger = get_logger()


def report(state) -> None:
    """Log the outcome of an action, exiting with status 1 on failure.

    Args:
        state: ActionState returned by an action.
    """
    if state.ok:
        logger.info(f"✓ {state.message}")
        return

    logger.error(state.message)
    for field_name, message in state.field_errors.items():
        logger.error(f"  {field_name}: {message}")
    sys.exit(1)


def format_money(amount: Decimal, currency: str) -> str:
    return f"{currency} {amount:,.2f}"
