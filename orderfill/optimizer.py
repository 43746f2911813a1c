"""Exact subset-mask search for order fulfillment."""

import logging
from dataclasses import dataclass

import numpy as np

from orderfill.candidates import best_solo_item, shared_items
from orderfill.models import FoodOrder, FulfillmentResult, UserManifest, WishlistEntry

logger = logging.getLogger(__name__)

# Decision codes; non-negative decisions are the index of the pairing partner
SOLO = -1
SACRIFICE = -2


@dataclass
class MatchTable:
    """
    Memo table for one optimize() call, indexed by subset mask.

    Bit i of a mask is set while participant i is still unresolved.
    scores[mask] and sacrificed[mask] hold the optimum of that subproblem;
    decisions[mask] holds how its lowest unresolved participant was resolved.
    """

    manifests: list[UserManifest]
    solo: list[WishlistEntry | None]
    shared: dict[tuple[int, int], tuple[str, int]]
    scores: np.ndarray
    sacrificed: np.ndarray
    decisions: np.ndarray

    @property
    def full_mask(self) -> int:
        return (1 << len(self.manifests)) - 1


def lowest_unresolved(mask: int) -> int:
    """Index of the lowest set bit of a non-zero mask."""
    return (mask & -mask).bit_length() - 1


def is_better(sacrificed: int, score: int, best_sacrificed: int, best_score: int) -> bool:
    """Fewer sacrificed participants wins; on a tie the higher score wins."""
    if sacrificed != best_sacrificed:
        return sacrificed < best_sacrificed
    return score > best_score


def build_table(manifests: list[UserManifest]) -> MatchTable:
    """
    Solve every subset of participants, smallest masks first.

    Each mask resolves its lowest unresolved participant u1 either alone
    (best whole-portion item, or sacrificed when there is none) or paired
    with a later unresolved participant over their best shared item. Both
    sub-masks are numerically smaller than the mask, so they are already
    solved when it is reached.
    """
    num_users = len(manifests)
    num_masks = 1 << num_users

    solo = [best_solo_item(manifest) for manifest in manifests]
    shared = shared_items(manifests)
    partners = [[j for j in range(i + 1, num_users) if (i, j) in shared] for i in range(num_users)]

    scores = np.zeros(num_masks, dtype=np.int64)
    sacrificed = np.zeros(num_masks, dtype=np.int64)
    decisions = np.full(num_masks, SACRIFICE, dtype=np.int64)

    for mask in range(1, num_masks):
        u1 = lowest_unresolved(mask)
        rest = mask ^ (1 << u1)

        best_score = int(scores[rest])
        best_sacrificed = int(sacrificed[rest])
        if solo[u1] is not None:
            best_score += solo[u1].preference
            decision = SOLO
        else:
            best_sacrificed += 1
            decision = SACRIFICE

        for u2 in partners[u1]:
            if not mask & (1 << u2):
                continue
            sub = rest ^ (1 << u2)
            score = int(scores[sub]) + shared[(u1, u2)][1]
            lost = int(sacrificed[sub])
            if is_better(lost, score, best_sacrificed, best_score):
                best_score, best_sacrificed, decision = score, lost, u2

        scores[mask] = best_score
        sacrificed[mask] = best_sacrificed
        decisions[mask] = decision

    return MatchTable(
        manifests=manifests,
        solo=solo,
        shared=shared,
        scores=scores,
        sacrificed=sacrificed,
        decisions=decisions,
    )


def flatten(table: MatchTable) -> FulfillmentResult:
    """Replay the stored decisions from the full set down, root decision first."""
    orders: list[FoodOrder] = []
    sacrificed_user_ids: list[str] = []

    mask = table.full_mask
    while mask:
        u1 = lowest_unresolved(mask)
        user = table.manifests[u1]
        decision = int(table.decisions[mask])
        mask ^= 1 << u1

        if decision == SOLO:
            item = table.solo[u1]
            orders.append(FoodOrder(user.user_id, item.food_id, item.preference))
        elif decision == SACRIFICE:
            sacrificed_user_ids.append(user.user_id)
        else:
            partner = table.manifests[decision]
            food_id, combined = table.shared[(u1, decision)]
            # Duplicate wishes for the shared food: the best one made the pair
            preference = max(item.preference for item in user.items if item.food_id == food_id)
            orders.append(FoodOrder(user.user_id, food_id, preference))
            orders.append(FoodOrder(partner.user_id, food_id, combined - preference))
            mask ^= 1 << decision

    return FulfillmentResult(
        total_score=int(table.scores[table.full_mask]),
        orders=orders,
        sacrificed_user_ids=sacrificed_user_ids,
    )


def optimize(manifests: list[UserManifest]) -> FulfillmentResult:
    """
    Assign food to participants, sacrificing as few as possible.

    Among assignments with the fewest sacrificed participants, the one with
    the highest total preference is returned. Work grows as n * 2^n in the
    number of participants; callers must cap n.
    """
    logger.debug("Optimizing %d participants (%d subsets)", len(manifests), 1 << len(manifests))
    result = flatten(build_table(manifests))
    logger.debug(
        "Score %d, %d orders, %d sacrificed",
        result.total_score,
        len(result.orders),
        len(result.sacrificed_user_ids),
    )
    return result
