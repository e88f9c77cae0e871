import pytest

from sitesnake.grid import add_vectors, free_cells, in_bounds


@pytest.mark.parametrize(
    "cell, expected",
    [
        ((0, 0), True),
        ((19, 19), True),
        ((10, 10), True),
        ((-1, 5), False),
        ((5, -1), False),
        ((20, 5), False),
        ((5, 20), False),
    ],
)
def test_in_bounds(cell, expected):
    assert in_bounds(cell) is expected


def test_add_vectors():
    assert add_vectors((10, 10), (1, 0)) == (11, 10)
    assert add_vectors((0, 0), (0, -1)) == (0, -1)


def test_free_cells_excludes_snake():
    snake = [(10, 10), (9, 10), (8, 10)]
    cells = free_cells(snake)
    assert len(cells) == 400 - 3
    assert not set(snake) & set(cells)
    assert (0, 0) in cells and (19, 19) in cells


def test_free_cells_ignores_out_of_bounds_head():
    cells = free_cells([(20, 10), (19, 10)])
    assert len(cells) == 399
    assert (19, 10) not in cells
