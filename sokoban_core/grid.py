from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Sequence, Tuple

__all__ = [
    "Cell",
    "GridFacts",
    "TOK_WALL",
    "TOK_TARGET",
    "TOK_PLAYER",
    "TOK_CRATE",
    "read_items",
]

TOK_WALL = "#"
TOK_TARGET = "."
TOK_PLAYER = "@"
TOK_CRATE = "$"

Cell = Tuple[int, int]  # (x, y)

Rows = Sequence[Sequence[str]]


def _check_shape(rows: Rows, width: int, height: int, what: str) -> None:
    if len(rows) != height:
        raise ValueError(f"{what}: expected {height} rows, got {len(rows)}")
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"{what}: row {y} has {len(row)} cells, expected {width}")


@dataclass(frozen=True, slots=True)
class GridFacts:
    """
    Static part of a puzzle: walls and targets.

    Built once from the map layer ('#' wall, '.' target, anything else floor)
    and only read afterwards.
    """

    width: int
    height: int
    walls: FrozenSet[Cell]
    targets: FrozenSet[Cell]

    @classmethod
    def from_rows(cls, width: int, height: int, rows: Rows) -> "GridFacts":
        _check_shape(rows, width, height, "grid")
        walls = set()
        targets = set()
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch == TOK_WALL:
                    walls.add((x, y))
                elif ch == TOK_TARGET:
                    targets.add((x, y))
        return cls(width=width, height=height,
                   walls=frozenset(walls), targets=frozenset(targets))


    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height


    def is_wall(self, cell: Cell) -> bool:
        return cell in self.walls


    def is_target(self, cell: Cell) -> bool:
        return cell in self.targets


    def is_passable(self, cell: Cell) -> bool:
        """Inside the grid and not a wall (crates are not considered)."""
        return self.in_bounds(cell) and cell not in self.walls


    def neighbors8(self, cell: Cell) -> Iterable[Cell]:
        """3x3 neighbourhood without the cell itself, clipped to the grid."""
        x, y = cell
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nb = (x + dx, y + dy)
                if self.in_bounds(nb):
                    yield nb


def read_items(width: int, height: int, rows: Rows) -> Tuple[Cell, FrozenSet[Cell]]:
    """Returns (player, crates) from the items layer ('@' player, '$' crate).

    Exactly one player is required.
    """
    _check_shape(rows, width, height, "items")
    players: List[Cell] = []
    crates = set()
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == TOK_PLAYER:
                players.append((x, y))
            elif ch == TOK_CRATE:
                crates.add((x, y))

    if not players:
        raise ValueError("No player '@' found in items")
    if len(players) > 1:
        raise ValueError(f"Expected exactly one player '@' in items, found {len(players)}")
    return players[0], frozenset(crates)
