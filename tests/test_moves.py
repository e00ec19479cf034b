import pytest
from sokoban_core.grid import GridFacts, read_items
from sokoban_core.state import State
from sokoban_core.moves import successors, apply_moves, move_between
from heuristics.classic import h_manhattan
from level_layers import split_layers

LVL = """
#####
#.@ #
# $ #
# . #
#####
"""


def _load(drawing):
    w, h, grid, items = split_layers(drawing)
    g = GridFacts.from_rows(w, h, grid)
    player, crates = read_items(w, h, items)
    return g, State(player=player, crates=crates,
                    heuristic=h_manhattan(player, crates, g.targets))


def test_successors_order_walks_and_push():
    g, s = _load(LVL)
    succs = successors(s, g, h_manhattan)
    # right (walk), left (walk), down (push); up is a wall
    assert [ns.player for ns in succs] == [(3, 1), (1, 1), (2, 2)]
    assert all(ns.cost == 1 and ns.parent is s for ns in succs)
    assert succs[0].crates == s.crates
    assert succs[2].crates == frozenset({(2, 3)})
    assert succs[2].is_goal(g.targets)


def test_heuristic_recomputed_from_new_player_cell():
    g, s = _load("#@$.#")
    (ns,) = successors(s, g, h_manhattan)
    assert ns.player == (2, 0)
    assert ns.crates == frozenset({(3, 0)})
    assert ns.heuristic == 1
    assert ns.hit_targets == frozenset({(3, 0)})


def test_push_into_wall_or_crate_is_skipped():
    g, s = _load("#@$#")
    assert successors(s, g, h_manhattan) == []
    g, s = _load("#@$$.#")
    assert successors(s, g, h_manhattan) == []


def test_push_off_grid_is_skipped():
    g, s = _load("@$")
    assert successors(s, g, h_manhattan) == []


def test_deadlocked_push_is_discarded(monkeypatch):
    monkeypatch.setattr("sokoban_core.moves.is_dead", lambda crate, crates, grid: True)
    g, s = _load(LVL)
    succs = successors(s, g, h_manhattan)
    assert [ns.player for ns in succs] == [(3, 1), (1, 1)]


def test_push_into_pocket_is_generated():
    # the crate's old cell, where the player now stands, stays an open neighbour
    g, s = _load("""
###
# #
#$#
#@#
###
""")
    (ns,) = successors(s, g, h_manhattan)
    assert ns.crates == frozenset({(1, 1)})


def test_apply_moves():
    g, s = _load(LVL)
    player, crates = apply_moves(g, s.player, s.crates, "rld")
    assert player == (2, 2)
    assert crates == frozenset({(2, 3)})


@pytest.mark.parametrize("moves", ["u", "x", "rddd"])
def test_apply_moves_rejects_illegal(moves):
    g, s = _load(LVL)
    with pytest.raises(ValueError):
        apply_moves(g, s.player, s.crates, moves)


def test_move_between():
    a = State(player=(1, 1), crates=frozenset())
    assert move_between(a, State(player=(1, 0), crates=frozenset())) == "u"
    assert move_between(a, State(player=(0, 1), crates=frozenset())) == "l"
    with pytest.raises(ValueError):
        move_between(a, State(player=(3, 3), crates=frozenset()))
