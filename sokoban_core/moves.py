from __future__ import annotations
from typing import Callable, Dict, FrozenSet, List, Tuple

from .grid import Cell, GridFacts
from .state import State
from .deadlocks import is_dead

# Fixed expansion order: right, left, down, up.
DIRECTIONS: Tuple[Tuple[str, int, int], ...] = (
    ("r", 1, 0),
    ("l", -1, 0),
    ("d", 0, 1),
    ("u", 0, -1),
)
DELTAS: Dict[str, Tuple[int, int]] = {m: (dx, dy) for m, dx, dy in DIRECTIONS}
MOVE_BY_DELTA: Dict[Tuple[int, int], str] = {(dx, dy): m for m, dx, dy in DIRECTIONS}

HFn = Callable[[Cell, FrozenSet[Cell], FrozenSet[Cell]], int]


def _step(cell: Cell, dx: int, dy: int) -> Cell:
    return (cell[0] + dx, cell[1] + dy)


def successors(state: State, grid: GridFacts, h_fn: HFn) -> List[State]:
    """Generates every state one player step away (walk or push), cost of step = 1.

    For each direction in DIRECTIONS order:
      1) the target cell must be inside the grid and not a wall,
      2) empty cell → walk, crates unchanged,
      3) crate → push; the cell beyond must be inside, not a wall and not a crate,
         and the pushed crate must not end up in a local deadlock (see is_dead).
    """
    succs: List[State] = []
    cost = state.cost + 1

    for _, dx, dy in DIRECTIONS:
        player = _step(state.player, dx, dy)
        if not grid.is_passable(player):
            continue

        if not state.has_crate(player):
            succs.append(State(
                player=player,
                crates=state.crates,
                cost=cost,
                heuristic=h_fn(player, state.crates, grid.targets),
                parent=state,
                hit_targets=state.hit_targets,
            ))
            continue

        dest = _step(player, dx, dy)
        if not grid.is_passable(dest) or state.has_crate(dest):
            continue
        crates = (state.crates - {player}) | {dest}
        if is_dead(dest, crates, grid):
            continue
        succs.append(State(
            player=player,
            crates=crates,
            cost=cost,
            heuristic=h_fn(player, crates, grid.targets),
            parent=state,
            hit_targets=crates & grid.targets,
        ))
    return succs


def move_between(parent: State, child: State) -> str:
    """Move letter for the player delta parent → child."""
    delta = (child.player[0] - parent.player[0], child.player[1] - parent.player[1])
    try:
        return MOVE_BY_DELTA[delta]
    except KeyError:
        raise ValueError(f"States are not one step apart: {parent.player} -> {child.player}") from None


def apply_moves(grid: GridFacts, player: Cell, crates: FrozenSet[Cell], moves: str) -> Tuple[Cell, FrozenSet[Cell]]:
    """Plays a move string from (player, crates) and returns the final (player, crates).

    Uses the same walk/push rules as successors(), without deadlock pruning.
    Raises ValueError on an unknown letter or an illegal step.
    """
    for i, m in enumerate(moves):
        if m not in DELTAS:
            raise ValueError(f"Unknown move {m!r} at position {i}")
        dx, dy = DELTAS[m]
        nxt = _step(player, dx, dy)
        if not grid.is_passable(nxt):
            raise ValueError(f"Move {i} ({m}) walks into a wall or off the grid at {nxt}")
        if nxt in crates:
            dest = _step(nxt, dx, dy)
            if not grid.is_passable(dest) or dest in crates:
                raise ValueError(f"Move {i} ({m}) pushes the crate at {nxt} into a blocked cell")
            crates = (crates - {nxt}) | {dest}
        player = nxt
    return player, crates
