"""Command-line interface for orderfill."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from orderfill.ilp import solve_ilp
from orderfill.manifest import assemble_manifests
from orderfill.optimizer import optimize
from orderfill.output import format_orders_csv, format_results
from orderfill.parser import create_menu_template, parse_menu_yaml, parse_wishlist_csv

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for orderfill CLI."""
    parser = argparse.ArgumentParser(
        description="Decide who gets what in a group food order.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  orderfill wishlist.csv --menu menu.yaml
  orderfill wishlist.csv --menu menu.yaml --csv > orders.csv
  orderfill wishlist.csv --menu menu.yaml --max-participants 20 --cross-check
""",
    )
    parser.add_argument(
        "wishlist_csv",
        type=Path,
        help="Path to the CSV file with user_id, food_id and rating columns",
    )
    parser.add_argument(
        "--menu",
        type=Path,
        help="Path to the menu YAML file marking half-portion items",
    )
    parser.add_argument(
        "--max-participants",
        type=int,
        default=16,
        help="Reject orders with more participants than this (default: 16)",
    )
    parser.add_argument(
        "--output-template",
        type=Path,
        help="Path for menu template (default: menu_template.yaml)",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Print the orders as CSV instead of a report",
    )
    parser.add_argument(
        "--cross-check",
        action="store_true",
        help="Verify the optimum with an independent MILP solve",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Validate wishlist CSV exists
    if not args.wishlist_csv.exists():
        print(f"Error: Wishlist file not found: {args.wishlist_csv}", file=sys.stderr)
        return 1

    try:
        rows = parse_wishlist_csv(args.wishlist_csv)
    except ValueError as e:
        print(f"Error parsing wishlist CSV: {e}", file=sys.stderr)
        return 1

    # Parse menu or create a template from the wished-for foods
    menu = None
    if args.menu:
        if not args.menu.exists():
            print(f"Error: Menu file not found: {args.menu}", file=sys.stderr)
            return 1
        try:
            menu = parse_menu_yaml(args.menu)
        except (ValueError, yaml.YAMLError) as e:
            print(f"Error parsing menu YAML: {e}", file=sys.stderr)
            return 1
        logger.info("Loaded %d menu items", len(menu))
    else:
        template_path = args.output_template or Path("menu_template.yaml")
        food_ids = list(dict.fromkeys(row.food_id for row in rows))
        create_menu_template(template_path, food_ids)
        logger.info("No menu provided; created template at %s", template_path)
        logger.info("Treating every item as a whole portion")

    try:
        manifests = assemble_manifests(rows, menu)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Loaded %d participants from %d wishlist rows", len(manifests), len(rows))

    if len(manifests) > args.max_participants:
        print(
            f"Error: {len(manifests)} participants exceeds the limit of {args.max_participants}",
            file=sys.stderr,
        )
        return 1

    result = optimize(manifests)

    if args.cross_check:
        try:
            expected = solve_ilp(manifests)
        except RuntimeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        actual = (len(result.sacrificed_user_ids), result.total_score)
        if actual != expected:
            print(
                f"Error: cross-check mismatch, optimizer {actual} vs MILP {expected}",
                file=sys.stderr,
            )
            return 1
        logger.info("Cross-check passed")

    if args.csv:
        print(format_orders_csv(result))
    else:
        print(format_results(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
