import random

from sitesnake.food import place_food
from sitesnake.grid import in_bounds


def test_food_never_on_snake():
    snake = [(x, 10) for x in range(20)] + [(x, 11) for x in range(20)]
    rng = random.Random(3)
    for _ in range(300):
        food = place_food(snake, rng)
        assert in_bounds(food)
        assert food not in snake


def test_food_finds_last_free_cell():
    snake = [(x, y) for y in range(20) for x in range(20) if (x, y) != (13, 4)]
    assert place_food(snake, random.Random(0)) == (13, 4)


def test_full_board_has_no_food():
    snake = [(x, y) for y in range(4) for x in range(4)]
    assert place_food(snake, random.Random(0), size=4) is None


def test_small_board():
    snake = [(0, 0), (1, 0), (1, 1)]
    assert place_food(snake, random.Random(5), size=2) == (0, 1)
