from __future__ import annotations

import random

from . import config
from .food import place_food
from .grid import add_vectors, in_bounds
from .scoring import add_points
from .state import Functor, State


def adopt_direction(state: State) -> State:
    return state._replace(direction=state.next_direction)


def move_snake(state: State) -> State:
    new_head = add_vectors(state.snake[0], state.direction)
    if new_head == state.food:
        new_snake = [new_head] + state.snake
    else:
        new_snake = [new_head] + state.snake[:-1]
    return state._replace(snake=new_snake)


def eat_food(state: State, base_interval: int, rng: random.Random) -> State:
    # The pre-tick food cell is still stored, so a head on it means a meal.
    if state.snake[0] != state.food:
        return state
    state = add_points(state, config.POINTS_PER_FOOD, base_interval)
    return state._replace(food=place_food(state.snake, rng))


def check_collisions(state: State) -> State:
    head = state.snake[0]
    if not in_bounds(head):
        return state._replace(game_over=True)
    if head in state.snake[1:]:
        return state._replace(game_over=True)
    return state


def game_tick(state: State, base_interval: int, rng: random.Random) -> State:
    return (
        Functor(state)
        .map(adopt_direction)
        .map(move_snake)
        .map(lambda s: eat_food(s, base_interval, rng))
        .map(check_collisions)
        .get()
    )
