from sokoban_core.grid import GridFacts
from sokoban_core.deadlocks import is_dead

BOX = ["###",
       "# #",
       "###"]


def test_surrounded_by_walls_is_dead():
    g = GridFacts.from_rows(3, 3, BOX)
    assert is_dead((1, 1), frozenset({(1, 1)}), g)


def test_surrounded_on_target_is_not_dead():
    g = GridFacts.from_rows(3, 3, ["###", "#.#", "###"])
    assert not is_dead((1, 1), frozenset({(1, 1)}), g)


def test_one_open_neighbour_is_enough():
    # only a diagonal cell is open
    g = GridFacts.from_rows(3, 3, ["## ", "# #", "###"])
    assert not is_dead((1, 1), frozenset({(1, 1)}), g)


def test_crates_count_as_blocked():
    g = GridFacts.from_rows(3, 3, ["## ", "# #", "###"])
    assert is_dead((1, 1), frozenset({(1, 1), (2, 0)}), g)


def test_out_of_grid_neighbours_are_skipped():
    # crate in the corner of the grid itself; the 3 in-grid neighbours are walls
    g = GridFacts.from_rows(2, 2, [" #", "##"])
    assert is_dead((0, 0), frozenset({(0, 0)}), g)
    g = GridFacts.from_rows(2, 2, ["  ", "##"])
    assert not is_dead((0, 0), frozenset({(0, 0)}), g)


def test_corner_with_open_room_is_not_dead():
    # a classic corner deadlock, but the local rule only looks for any open cell
    g = GridFacts.from_rows(5, 4, ["#####", "#   #", "#  .#", "#####"])
    assert not is_dead((1, 1), frozenset({(1, 1)}), g)
