from __future__ import annotations
from typing import Callable

from heuristics.classic import h_zero, h_manhattan, h_hungarian


def get_heuristic(name: str = "manhattan") -> Callable:
    name = name.lower()
    if name == "manhattan":
        return h_manhattan
    elif name == "zero":
        return h_zero
    elif name == "hungarian":
        return h_hungarian
    raise ValueError(f"unknown heuristic: {name}")
