"""Data models for orderfill."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WishlistEntry:
    """One desired item on a participant's wishlist."""

    food_id: str
    preference: int
    is_half: bool = False  # only orderable as half of a shared line


@dataclass
class UserManifest:
    """A participant and everything they would accept for this order."""

    user_id: str
    items: list[WishlistEntry] = field(default_factory=list)


@dataclass(frozen=True)
class FoodOrder:
    """A food item assigned to a participant."""

    user_id: str
    food_id: str
    preference: int | None = field(default=None, compare=False)  # entry this order satisfies


@dataclass
class FulfillmentResult:
    """Result of the optimization."""

    total_score: int
    orders: list[FoodOrder]
    sacrificed_user_ids: list[str]  # participants who receive nothing


@dataclass(frozen=True)
class WishlistRow:
    """A stored wishlist row as exported for an order."""

    user_id: str
    food_id: str
    rating: int


@dataclass(frozen=True)
class MenuItem:
    """An orderable menu item."""

    food_id: str
    name: str = ""
    is_half: bool = False
