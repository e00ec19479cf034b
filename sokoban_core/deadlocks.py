from __future__ import annotations
from typing import FrozenSet

from .grid import Cell, GridFacts

INF = 10 ** 9

# --- low-level helpers -------------------------------------------------------

def _is_blocked(grid: GridFacts, crates: FrozenSet[Cell], cell: Cell) -> bool:
    """Wall or another crate."""
    return grid.is_wall(cell) or cell in crates

# --- deadlock rule -----------------------------------------------------------

def is_dead(crate: Cell, crates: FrozenSet[Cell], grid: GridFacts) -> bool:
    """Crate (not on a target) with every in-grid cell of its 3x3 neighbourhood blocked.

    Checked right after a push onto `crate`, with `crates` already updated.
    Cells outside the grid are skipped: they count neither as open nor as blocked.
    This is only a one-step local rule; corner, corridor and 2x2 deadlocks
    with an open neighbour are not detected.
    """
    if grid.is_target(crate):
        return False
    for nb in grid.neighbors8(crate):
        if not _is_blocked(grid, crates, nb):
            return False
    return True
