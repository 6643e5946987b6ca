import numpy as np
import pytest

from antcolony import rng
from antcolony.environment import (
    ATTEMPTS_PER_CLUMP,
    GRID_SIZE,
    INITIAL_FOOD_PER_SOURCE,
    INITIAL_FOOD_SOURCES,
    NUM_CLUMPS,
    Environment,
    in_bounds,
)


@pytest.fixture
def env():
    rng.seed(99)
    return Environment(9.6)


@pytest.fixture
def empty_env(env):
    env.food_grid[:, :] = 0
    env.total_food_sources = 0
    return env


def test_grid_shape_and_cell_size(env):
    assert env.food_grid.shape == (GRID_SIZE, GRID_SIZE)
    assert env.cell_size == 9.6


def test_source_count_matches_grid(env):
    assert env.total_food_sources == int(np.count_nonzero(env.food_grid))


def test_sources_hold_initial_quantity(env):
    values = env.food_grid[env.food_grid > 0]
    assert values.size > 0
    assert np.all(values == INITIAL_FOOD_PER_SOURCE)


def test_source_count_bounded(env):
    assert 0 < env.total_food_sources <= min(INITIAL_FOOD_SOURCES, NUM_CLUMPS * ATTEMPTS_PER_CLUMP)


def test_generation_is_reproducible_with_seed():
    rng.seed(5)
    a = Environment(1.0)
    rng.seed(5)
    b = Environment(1.0)
    assert np.array_equal(a.food_grid, b.food_grid)


def test_regenerate_resets_count(env):
    env.generate_food()
    assert env.total_food_sources == int(np.count_nonzero(env.food_grid))


@pytest.mark.parametrize(
    "x, y, expected",
    [(0, 0, True), (GRID_SIZE - 1, GRID_SIZE - 1, True), (-1, 0, False), (0, GRID_SIZE, False)],
)
def test_in_bounds(x, y, expected):
    assert in_bounds(x, y) is expected


def test_has_food_out_of_bounds_is_false(env):
    assert env.has_food(-1, 5) is False
    assert env.has_food(5, GRID_SIZE) is False


def test_remove_food_decrements_and_depletes(empty_env):
    empty_env.food_grid[3, 4] = 2
    empty_env.total_food_sources = 1
    assert empty_env.has_food(3, 4)
    empty_env.remove_food(3, 4)
    assert empty_env.food_grid[3, 4] == 1
    assert empty_env.total_food_sources == 1
    empty_env.remove_food(3, 4)
    assert not empty_env.has_food(3, 4)
    assert empty_env.total_food_sources == 0


def test_remove_food_on_empty_cell_is_noop(empty_env):
    empty_env.remove_food(10, 10)
    empty_env.remove_food(-5, 300)
    assert empty_env.total_food_sources == 0
    assert int(empty_env.food_grid.sum()) == 0


def test_food_positions_lists_cells_in_order(empty_env):
    empty_env.food_grid[7, 1] = 4
    empty_env.food_grid[2, 9] = 3
    assert list(empty_env.food_positions()) == [(2, 9, 3), (7, 1, 4)]


def test_debug_food_positions_output(empty_env, capsys):
    empty_env.food_grid[2, 9] = 3
    empty_env.debug_food_positions()
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Current food positions (with quantity):",
        "  Food at (2, 9) Qty: 3",
    ]


def test_debug_food_positions_empty(empty_env, capsys):
    empty_env.debug_food_positions()
    assert "  No food on the grid." in capsys.readouterr().out