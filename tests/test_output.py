from orderfill.models import FoodOrder, FulfillmentResult, UserManifest, WishlistEntry
from orderfill.optimizer import optimize
from orderfill.output import format_orders_csv, format_results


def test_format_results_with_preferences():
    result = FulfillmentResult(
        total_score=7,
        orders=[FoodOrder("alice", "margherita", 5), FoodOrder("bob", "soup", 2)],
        sacrificed_user_ids=["carol"],
    )
    text = format_results(result)

    assert "Total preference score: 7" in text
    assert "Fulfilled participants: 2/3" in text
    assert "  - alice: margherita (preference 5)" in text
    assert "--- Sacrificed ---\n  - carol" in text


def test_format_results_nothing_ordered():
    result = FulfillmentResult(total_score=0, orders=[], sacrificed_user_ids=[])
    text = format_results(result)
    assert "No orders could be placed." in text
    assert "=== Everyone gets food ===" in text


def test_format_orders_csv():
    result = FulfillmentResult(
        total_score=5,
        orders=[FoodOrder("alice", "diavola-half"), FoodOrder("bob", "diavola-half")],
        sacrificed_user_ids=[],
    )
    assert format_orders_csv(result) == "user_id,food_id\nalice,diavola-half\nbob,diavola-half"


def test_listed_preferences_add_up_to_total():
    # u1 wishes for pizza twice; the higher wish is the one that makes the pair
    result = optimize(
        [
            UserManifest("u1", [WishlistEntry("pizza", 1), WishlistEntry("pizza", 5)]),
            UserManifest("u2", [WishlistEntry("pizza", 2, is_half=True)]),
        ]
    )
    text = format_results(result)

    assert "Total preference score: 7" in text
    assert "  - u1: pizza (preference 5)" in text
    assert "  - u2: pizza (preference 2)" in text
