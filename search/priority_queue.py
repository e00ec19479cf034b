from __future__ import annotations
import heapq
import itertools
from typing import Iterator, List, Tuple

from sokoban_core.state import State

class Frontier:
    """Open list of states ordered by cost + heuristic.

    Equal priorities pop in the order they were pushed; that order is not
    something callers should rely on.
    """
    def __init__(self, *states: State) -> None:
        self._heap: List[Tuple[int, int, State]] = []
        self._seq: Iterator[int] = itertools.count()
        for s in states:
            self.push(s)

    def push(self, s: State) -> None:
        heapq.heappush(self._heap, (s.priority, next(self._seq), s))

    def pop(self) -> State:
        """Removes and returns the state with the lowest cost + heuristic."""
        return heapq.heappop(self._heap)[-1]

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
