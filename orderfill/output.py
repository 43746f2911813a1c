"""Output formatting for orderfill."""

from orderfill.models import FulfillmentResult


def format_results(result: FulfillmentResult) -> str:
    """Format a fulfillment result for display."""
    lines: list[str] = []

    num_fulfilled = len({order.user_id for order in result.orders})
    num_users = num_fulfilled + len(result.sacrificed_user_ids)

    lines.append("=== Order Fulfillment ===")
    lines.append(f"Total preference score: {result.total_score}")
    lines.append(f"Fulfilled participants: {num_fulfilled}/{num_users}")
    lines.append("")

    if result.orders:
        lines.append("--- Orders ---")
        for order in result.orders:
            pref_suffix = f" (preference {order.preference})" if order.preference is not None else ""
            lines.append(f"  - {order.user_id}: {order.food_id}{pref_suffix}")
        lines.append("")
    else:
        lines.append("No orders could be placed.")
        lines.append("")

    if result.sacrificed_user_ids:
        lines.append("--- Sacrificed ---")
        for user_id in result.sacrificed_user_ids:
            lines.append(f"  - {user_id}")
    else:
        lines.append("=== Everyone gets food ===")

    return "\n".join(lines)


def format_orders_csv(result: FulfillmentResult) -> str:
    """Format orders as CSV for export, in resolution order."""
    lines: list[str] = ["user_id,food_id"]
    for order in result.orders:
        lines.append(f"{order.user_id},{order.food_id}")
    return "\n".join(lines)
