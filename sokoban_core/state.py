from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, Optional, Tuple

from .grid import Cell

__all__ = [
    "State",
    "StateKey",
    "manhattan",
]

StateKey = Tuple[Cell, FrozenSet[Cell]]


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass(frozen=True, slots=True)
class State:
    """
    Immutable search node.

    Equality and hashing use only (player, crates); cost, heuristic, parent
    and hit_targets are carried along but are not part of the identity.
    parent points one step towards the root, so the nodes form a tree.
    """

    player: Cell
    crates: FrozenSet[Cell]
    cost: int = field(default=0, compare=False) # moves from the root
    heuristic: int = field(default=0, compare=False) # estimate of moves left
    parent: Optional["State"] = field(default=None, compare=False, repr=False)
    # crates currently on a target; bookkeeping only
    hit_targets: FrozenSet[Cell] = field(default=frozenset(), compare=False, repr=False)


    @property
    def key(self) -> StateKey:
        return (self.player, self.crates)


    @property
    def priority(self) -> int:
        return self.cost + self.heuristic


    def is_goal(self, targets: FrozenSet[Cell]) -> bool:
        """All crates are on targets: crates ⊆ targets."""
        return self.crates <= targets


    def has_crate(self, cell: Cell) -> bool:
        return cell in self.crates


    def lineage(self) -> Iterator["State"]:
        """Yields this state, then its parent, ... up to the root."""
        cur: Optional[State] = self
        while cur is not None:
            yield cur
            cur = cur.parent
