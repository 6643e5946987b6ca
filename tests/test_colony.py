import pytest

from antcolony import rng
from antcolony.colony import FOOD_REQUIRED_PER_ANT_SPAWN, Colony
from antcolony.environment import Environment
from antcolony.trails import MAX_PHEROMONE_LEVEL


@pytest.fixture
def env():
    rng.seed(1234)
    return Environment(9.6)


def test_initial_ants_start_at_home():
    colony = Colony(40, 60, 5, (0, 0, 0), 2)
    assert len(colony.ants) == 5
    assert colony.peak_population == 5
    assert all((ant.x, ant.y) == (40, 60) for ant in colony.ants)
    assert all(ant.colony_id == 2 for ant in colony.ants)


def test_ants_share_colony_pheromone_grids():
    colony = Colony(10, 10, 3, (255, 0, 0), 0)
    assert all(ant.food_pheromones is colony.food_pheromones for ant in colony.ants)
    assert all(ant.home_pheromones is colony.home_pheromones for ant in colony.ants)


def test_add_food_defaults_to_one():
    colony = Colony(10, 10, 0, (0, 0, 0), 0)
    colony.add_food()
    colony.add_food(4)
    assert colony.food_stored == 5


def test_stored_food_spawns_ants(env):
    colony = Colony(100, 100, 0, (0, 0, 0), 0)
    colony.add_food(2 * FOOD_REQUIRED_PER_ANT_SPAWN + 1)
    colony.update(env)
    assert len(colony.ants) == 2
    assert colony.food_stored == 1
    assert colony.peak_population == 2


def test_dead_ants_are_removed_and_counted(env):
    colony = Colony(100, 100, 5, (0, 0, 0), 0)
    for ant in colony.ants:
        ant.lifespan = 1
    colony.update(env)
    assert colony.ants == []
    assert colony.total_ants_died == 5
    assert colony.peak_population == 5


def test_food_pheromone_clamped_to_maximum():
    colony = Colony(0, 0, 0, (0, 0, 0), 0)
    colony.add_food_pheromone(3, 4, MAX_PHEROMONE_LEVEL * 2)
    assert colony.food_pheromone_level(3, 4) == MAX_PHEROMONE_LEVEL


def test_home_pheromone_never_negative():
    colony = Colony(0, 0, 0, (0, 0, 0), 0)
    colony.add_home_pheromone(5, 5, 10.0)
    colony.add_home_pheromone(5, 5, -50.0)
    assert colony.home_pheromone_level(5, 5) == 0.0


def test_out_of_bounds_pheromones_ignored():
    colony = Colony(0, 0, 0, (0, 0, 0), 0)
    colony.add_food_pheromone(-1, 5, 10.0)
    colony.add_home_pheromone(5, 200, 10.0)
    assert colony.food_pheromone_level(-1, 5) == 0.0
    assert colony.home_pheromone_level(5, 200) == 0.0
    assert float(colony.food_pheromones.sum()) == 0.0
    assert float(colony.home_pheromones.sum()) == 0.0


def test_pheromones_decay():
    colony = Colony(0, 0, 0, (0, 0, 0), 0)
    colony.add_food_pheromone(1, 1, 100.0)
    colony.add_home_pheromone(2, 2, 100.0)
    colony.update_pheromones()
    assert 0.0 < colony.food_pheromone_level(1, 1) < 100.0
    assert colony.food_pheromone_level(1, 1) == pytest.approx(
        colony.home_pheromone_level(2, 2)
    )


def test_faint_pheromones_vanish():
    colony = Colony(0, 0, 0, (0, 0, 0), 0)
    colony.add_food_pheromone(1, 1, 0.0005)
    colony.add_home_pheromone(2, 2, 0.00101)
    colony.update_pheromones()
    assert colony.food_pheromone_level(1, 1) == 0.0
    assert colony.home_pheromone_level(2, 2) == 0.0


def test_decay_is_monotonic_over_turns():
    colony = Colony(0, 0, 0, (0, 0, 0), 0)
    colony.add_food_pheromone(7, 7, 50.0)
    levels = []
    for _ in range(5):
        colony.update_pheromones()
        levels.append(colony.food_pheromone_level(7, 7))
    assert levels == sorted(levels, reverse=True)
    assert len(set(levels)) == 5