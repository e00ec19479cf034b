from __future__ import annotations
from typing import Dict, Optional, Sequence, Union
import logging
import time

from sokoban_core.grid import GridFacts, read_items
from sokoban_core.state import State
from sokoban_core.moves import HFn, successors, move_between
from heuristics.classic import h_manhattan
from heuristics.selector import get_heuristic
from .priority_queue import Frontier
from .transposition import Transposition

logger = logging.getLogger(__name__)

Result = Dict[str, object]

# Returned by solve() when no solution was found.
NO_SOLUTION = "lr" * 38


def reconstruct(goal: State) -> str:
    """Move string from the root to goal, following parent links."""
    chain = list(goal.lineage())
    chain.reverse()
    return "".join(move_between(p, c) for p, c in zip(chain, chain[1:]))


def initial_state(grid: GridFacts, width: int, height: int, items: Sequence[Sequence[str]], h_fn: HFn) -> State:
    player, crates = read_items(width, height, items)
    return State(
        player=player,
        crates=crates,
        cost=0,
        heuristic=h_fn(player, crates, grid.targets),
        parent=None,
        hit_targets=crates & grid.targets,
    )


def astar(
    grid: GridFacts,
    start: State,
    h_fn: HFn = h_manhattan,
    trans: Optional[Transposition] = None,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
) -> Result:
    """Best-first search on cost + heuristic with duplicate suppression at insertion.

    Without limits the search runs until it finds a goal or the frontier is empty.
    """
    t0 = time.time()
    if trans is None:
        trans = Transposition()
    trans.mark(start)
    openq = Frontier(start)
    logger.debug("search start: player=%s crates=%d h0=%d", start.player, len(start.crates), start.heuristic)

    expanded = 0
    generated = 1
    found: Optional[State] = None

    while openq:
        if time_limit_s is not None and (time.time() - t0) >= time_limit_s:
            logger.debug("time limit %.2fs reached", time_limit_s)
            break
        s = openq.pop()
        if s.is_goal(grid.targets):
            found = s
            break
        if node_limit is not None and expanded >= node_limit:
            logger.debug("node limit %d reached", node_limit)
            break
        expanded += 1

        for ns in successors(s, grid, h_fn):
            if trans.mark(ns):
                generated += 1
                openq.push(ns)

    runtime = time.time() - t0
    if found is None:
        logger.debug("search exhausted: nodes=%d generated=%d runtime=%.3fs", expanded, generated, runtime)
        return {"success": False, "nodes": expanded, "generated": generated, "runtime": runtime}
    moves = reconstruct(found)
    logger.debug("solved: %d moves, nodes=%d generated=%d runtime=%.3fs", len(moves), expanded, generated, runtime)
    return {
        "success": True,
        "nodes": expanded,
        "generated": generated,
        "runtime": runtime,
        "solution_len": len(moves),
        "moves": moves,
        "goal": found,
    }


def solve(
    width: int,
    height: int,
    grid: Sequence[Sequence[str]],
    items: Sequence[Sequence[str]],
    h_fn: Union[HFn, str] = h_manhattan,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
) -> str:
    """Solves a puzzle given as a map layer and an items layer.

    grid:  height rows of width chars, '#' wall, '.' target, anything else floor.
    items: height rows of width chars, '@' player (exactly one), '$' crate.

    h_fn is a heuristic function or its name for get_heuristic().
    Returns the moves as a string over "udlr", or NO_SOLUTION if the frontier
    runs out (or a limit is hit) first. Raises ValueError on malformed input
    or an unknown heuristic name.
    """
    if isinstance(h_fn, str):
        h_fn = get_heuristic(h_fn)
    facts = GridFacts.from_rows(width, height, grid)
    start = initial_state(facts, width, height, items, h_fn)
    res = astar(facts, start, h_fn, time_limit_s=time_limit_s, node_limit=node_limit)
    if not res["success"]:
        return NO_SOLUTION
    return res["moves"]  # type: ignore[return-value]
