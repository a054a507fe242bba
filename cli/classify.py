#!/usr/bin/env python3

import argparse
import json
from datetime import date
from decimal import Decimal, InvalidOperation
from models.subcategory import CategoryType
from services.classification import classify_transaction
from logger import get_logger

logger = get_logger()


def parse_amount(value: str) -> Decimal:
    """Parse an --amount argument, reporting bad input as a usage error."""
    try:
        amount = Decimal(value)
    except InvalidOperation:
        amount = None
    if amount is None or not amount.is_finite():
        raise argparse.ArgumentTypeError(f"invalid amount: '{value}'")
    return amount


def cmd_classify(args, services):
    """Classify a transaction description into a subcategory."""
    payload = classify_transaction(
        services,
        args.description,
        args.amount,
        CategoryType(args.category),
        args.date,
    )

    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    subcategory = payload["subcategory"]
    name = subcategory["name"] if subcategory else "Unknown"

    logger.info(f"\nSubcategory: {name} ({payload['subcategory_id']})")
    logger.info(f"Confidence: {payload['confidence']:.2f}")
    logger.info(f"Reason: {payload['reason']}")
    if payload["merchant_name"]:
        logger.info(f"Merchant: {payload['merchant_name']} ({payload['merchant_id']})")
    if not payload["is_reliable"]:
        logger.info("Low confidence - please review this classification.")


def setup_parser(subparsers):
    """Setup classify command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "classify",
        help="Classify a transaction into a subcategory",
        description="Classify a transaction description into a subcategory",
    )
    parser.add_argument("description", help="Transaction description")
    parser.add_argument(
        "--amount", type=parse_amount, default=Decimal("0"), help="Transaction amount"
    )
    parser.add_argument(
        "--category",
        choices=[t.value for t in CategoryType],
        default=CategoryType.EXPENSE.value,
        help="Main category type (default: EXPENSE)",
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Transaction date (YYYY-MM-DD)",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.set_defaults(func=cmd_classify)
