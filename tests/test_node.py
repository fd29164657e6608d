import math

import pytest

from minesolve.node import Node, tile_cell


@pytest.mark.parametrize(
    "number, cell",
    [(0, (0, 0)), (-1, (0, 2)), (-2, (0, 1)), (1, (1, 0)), (6, (1, 5)), (-6, (0, 6))],
)
def test_tile_cell_known_values(number, cell):
    assert tile_cell(number) == cell


@pytest.mark.parametrize("number", [7, 8, -3, 100])
def test_tile_cell_unknown_values(number):
    assert tile_cell(number) is None


def test_corner_neighbors_are_in_bounds_and_exclude_self():
    node = Node(0, 0, 5, 5)
    assert (0, 0) not in node.neighbors
    assert all(0 <= r < 5 and 0 <= c < 5 for r, c in node.neighbors)
    assert set(node.neighbors) == {(0, 1), (1, 0), (1, 1)}


def test_interior_neighbors_surround_cell():
    node = Node(2, 2, 5, 5)
    expected = {(r, c) for r in (1, 2, 3) for c in (1, 2, 3)} - {(2, 2)}
    assert set(node.neighbors) == expected
    assert len(node.neighbors) == len(set(node.neighbors))


def test_setting_number_updates_tile():
    node = Node(1, 1, 3, 3)
    node.number = 3
    assert node.number == 3
    assert node.tile == tile_cell(3)


def test_unmapped_number_keeps_previous_tile():
    node = Node(1, 1, 3, 3)
    node.number = 2
    node.number = 7
    assert node.number == 7
    assert node.tile == tile_cell(2)


def test_zero_number_has_single_empty_combination():
    node = Node(1, 1, 3, 3, number=0)
    assert node.combinations() == [()]


@pytest.mark.parametrize("number", [1, 2, 3, 4])
def test_combinations_invariants(number):
    node = Node(1, 1, 3, 3, number=number)
    combos = node.combinations()
    assert len(combos) == math.comb(len(node.neighbors), number)
    assert len(set(combos)) == len(combos)
    for combo in combos:
        assert len(combo) == number
        assert set(combo) <= set(node.neighbors)


def test_combinations_keep_neighbor_order():
    node = Node(1, 1, 3, 3, number=2)
    combos = node.combinations()
    position = {coord: i for i, coord in enumerate(node.neighbors)}
    keys = [[position[c] for c in combo] for combo in combos]
    assert keys == sorted(keys)
    assert combos[0] == node.neighbors[:2]


def test_combinations_number_too_large_or_negative():
    corner = Node(0, 0, 3, 3, number=4)
    assert corner.combinations() == []
    flagged = Node(1, 1, 3, 3, number=-1)
    assert flagged.combinations() == []


def test_new_node_is_not_highlighted():
    node = Node(0, 0, 2, 2)
    node.highlighted = True
    assert node.highlighted is True
    assert Node(0, 0, 2, 2).highlighted is False