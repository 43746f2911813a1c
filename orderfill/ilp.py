"""Integer Linear Programming cross-check of the fulfillment optimum."""

import logging

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp

from orderfill.candidates import best_solo_item, shared_items
from orderfill.models import UserManifest

logger = logging.getLogger(__name__)


def solve_ilp(manifests: list[UserManifest]) -> tuple[int, int]:
    """
    Solve the same choice space as optimize() with scipy's MILP solver.

    Variables 0..n-1 mean "participant resolved alone" (solo item if one
    exists, otherwise sacrificed); the remaining variables select a pair
    sharing an item. The lexicographic objective is folded into one sum by
    weighting each sacrifice above any achievable score spread.

    Returns (sacrificed_count, total_score).
    """
    num_users = len(manifests)
    if num_users == 0:
        return 0, 0

    solo = [best_solo_item(manifest) for manifest in manifests]
    shared = shared_items(manifests)
    pairs = list(shared)
    num_vars = num_users + len(pairs)

    # Upper bound on |total score| of any assignment
    spread = sum(max((abs(item.preference) for item in m.items), default=0) for m in manifests)
    sacrifice_weight = 2 * spread + 1

    # Build objective: minimize sacrifices, then maximize score (negated)
    c = np.zeros(num_vars)
    for u_idx, item in enumerate(solo):
        c[u_idx] = -item.preference if item is not None else sacrifice_weight
    for p_idx, pair in enumerate(pairs):
        c[num_users + p_idx] = -shared[pair][1]

    # Each participant is resolved exactly once
    A_eq = np.zeros((num_users, num_vars))
    for u_idx in range(num_users):
        A_eq[u_idx, u_idx] = 1.0
    for p_idx, (i, j) in enumerate(pairs):
        A_eq[i, num_users + p_idx] = 1.0
        A_eq[j, num_users + p_idx] = 1.0
    b_eq = np.ones(num_users)

    result = milp(
        c,
        constraints=[LinearConstraint(A_eq, b_eq, b_eq)],
        bounds=Bounds(np.zeros(num_vars), np.ones(num_vars)),
        integrality=np.ones(num_vars, dtype=np.intp),
        options={"mip_rel_gap": 0},
    )
    if not result.success:
        raise RuntimeError(f"MILP solver failed: {result.message}")

    assert result.x is not None  # Guaranteed by result.success check above
    x = result.x
    sacrificed = 0
    total_score = 0
    for u_idx, item in enumerate(solo):
        if x[u_idx] > 0.5:  # Binary, so check > 0.5
            if item is None:
                sacrificed += 1
            else:
                total_score += item.preference
    for p_idx, pair in enumerate(pairs):
        if x[num_users + p_idx] > 0.5:
            total_score += shared[pair][1]

    logger.debug("MILP optimum: %d sacrificed, score %d", sacrificed, total_score)
    return sacrificed, total_score
