from __future__ import annotations
from typing import Set
from sokoban_core.state import State, StateKey

class Transposition:
    """Set of (player, crates) keys already put on the frontier.

    A key is marked when a state is generated, not when it is expanded, so a
    later arrival at the same configuration is dropped even if it is cheaper.
    """
    def __init__(self) -> None:
        self.seen: Set[StateKey] = set()

    def mark(self, s: State) -> bool:
        """True if s was new (and is now marked), False if already seen."""
        key = s.key
        if key in self.seen:
            return False
        self.seen.add(key)
        return True

    def __contains__(self, s: State) -> bool:
        return s.key in self.seen

    def __len__(self) -> int:
        return len(self.seen)
