from __future__ import annotations
from typing import FrozenSet, List

import numpy as np
from scipy.optimize import linear_sum_assignment
from sokoban_core.grid import Cell
from sokoban_core.state import manhattan
from sokoban_core.deadlocks import INF


# ---- helpers

def _player_term(player: Cell, crates: FrozenSet[Cell]) -> int:
    """Distance from the player to the closest crate (0 without crates)."""
    if not crates:
        return 0
    return min(manhattan(player, c) for c in crates)


def _nearest_target(crate: Cell, targets: FrozenSet[Cell]) -> int:
    if not targets:
        return INF
    return min(manhattan(crate, t) for t in targets)


# ---- classical heuristics

def h_zero(player: Cell, crates: FrozenSet[Cell], targets: FrozenSet[Cell]) -> int:
    return 0


def h_manhattan(player: Cell, crates: FrozenSet[Cell], targets: FrozenSet[Cell]) -> int:
    """Sum of each crate's distance to its nearest target, plus player → nearest crate.

    Targets may be shared between crates and the player term is always added,
    so this is not a lower bound (and is not 0 at most goal states).
    """
    total = 0
    for c in crates:
        total += _nearest_target(c, targets)
    return total + _player_term(player, crates)


def h_hungarian(player: Cell, crates: FrozenSet[Cell], targets: FrozenSet[Cell]) -> int:
    """Optimal matching of crates → targets by Manhattan distance, plus the player term.
    Walls are not considered."""
    if not crates:
        return 0
    if len(crates) > len(targets):
        return INF
    cs: List[Cell] = sorted(crates)
    ts: List[Cell] = sorted(targets)

    C = np.empty((len(cs), len(ts)), dtype=np.int64)
    for i, b in enumerate(cs):
        for j, g in enumerate(ts):
            C[i, j] = manhattan(b, g)
    r, c = linear_sum_assignment(C)
    return int(C[r, c].sum()) + _player_term(player, crates)
