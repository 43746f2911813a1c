"""Solo and shared-item scans over participant manifests."""

from orderfill.models import UserManifest, WishlistEntry


def best_solo_item(manifest: UserManifest) -> WishlistEntry | None:
    """
    Return the highest-preference whole-portion entry of a manifest.

    Ties go to the first entry in manifest order. Returns None when every
    entry is a half-portion or the wishlist is empty.
    """
    best: WishlistEntry | None = None
    for item in manifest.items:
        if item.is_half:
            continue
        if best is None or item.preference > best.preference:
            best = item
    return best


def best_shared_item(first: UserManifest, second: UserManifest) -> tuple[str, int] | None:
    """
    Find the item both participants want with the highest combined preference.

    Entries are matched on food_id only. For each of the first participant's
    entries the second participant's first matching entry is used.

    Returns (food_id, combined_score), or None if the wishlists share nothing.
    """
    best: tuple[str, int] | None = None
    for item in first.items:
        match = next((other for other in second.items if other.food_id == item.food_id), None)
        if match is None:
            continue
        combined = item.preference + match.preference
        if best is None or combined > best[1]:
            best = (item.food_id, combined)
    return best


def shared_items(manifests: list[UserManifest]) -> dict[tuple[int, int], tuple[str, int]]:
    """Map every index pair (i, j), i < j, that shares an item to its best shared item."""
    shared: dict[tuple[int, int], tuple[str, int]] = {}
    for i, first in enumerate(manifests):
        for j in range(i + 1, len(manifests)):
            match = best_shared_item(first, manifests[j])
            if match is not None:
                shared[(i, j)] = match
    return shared
