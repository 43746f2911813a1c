"""Group food-order fulfillment optimizer."""
