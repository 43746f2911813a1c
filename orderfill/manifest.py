"""Assemble participant manifests from stored wishlist rows."""

from orderfill.models import MenuItem, UserManifest, WishlistEntry, WishlistRow

MIN_RATING = 1
MAX_RATING = 5


class ManifestError(ValueError):
    """A wishlist row cannot be turned into a manifest entry."""


def assemble_manifests(
    rows: list[WishlistRow],
    menu: dict[str, MenuItem] | None = None,
) -> list[UserManifest]:
    """
    Group wishlist rows into one manifest per participant.

    Participants are ordered by their first row, and entries keep row order.
    The half-portion flag comes from the menu; without a menu every item is
    a whole portion.
    """
    manifests: dict[str, UserManifest] = {}

    for row in rows:
        if (
            not isinstance(row.rating, int)
            or isinstance(row.rating, bool)
            or not MIN_RATING <= row.rating <= MAX_RATING
        ):
            raise ManifestError(
                f"Rating for {row.food_id!r} by {row.user_id!r} must be between "
                f"{MIN_RATING} and {MAX_RATING}, got {row.rating!r}"
            )

        is_half = False
        if menu is not None:
            if row.food_id not in menu:
                raise ManifestError(f"Unknown food {row.food_id!r} wished by {row.user_id!r}")
            is_half = menu[row.food_id].is_half

        if row.user_id not in manifests:
            manifests[row.user_id] = UserManifest(user_id=row.user_id)
        manifests[row.user_id].items.append(
            WishlistEntry(food_id=row.food_id, preference=row.rating, is_half=is_half)
        )

    return list(manifests.values())
