"""An ant colony: its nest, its ants, its food store and its pheromone grids."""

from __future__ import annotations

from typing import Any

import numpy as np

from antcolony.ant import Ant
from antcolony.environment import GRID_SIZE, Environment, in_bounds
from antcolony.trails import MAX_PHEROMONE_LEVEL, PHEROMONE_DECAY_RATE

FOOD_REQUIRED_PER_ANT_SPAWN = 8
PHEROMONE_FLOOR = 0.001


class Colony:
    """A nest of ants sharing one pair of pheromone grids."""

    FOOD_REQUIRED_PER_ANT_SPAWN = FOOD_REQUIRED_PER_ANT_SPAWN
    PHEROMONE_DECAY_RATE = PHEROMONE_DECAY_RATE
    MAX_PHEROMONE_LEVEL = MAX_PHEROMONE_LEVEL

    def __init__(
        self,
        home_x: int,
        home_y: int,
        initial_ants: int,
        color: Any,
        colony_id: int,
    ) -> None:
        self.home_x = home_x
        self.home_y = home_y
        self.peak_population = initial_ants
        self.color = color
        self.colony_id = colony_id
        self.food_stored = 0
        self.total_ants_died = 0
        self.food_pheromones = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.float32)
        self.home_pheromones = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.float32)
        self.ants: list[Ant] = []
        self.spawn_ants(initial_ants)

    def add_food(self, amount: int = 1) -> None:
        """Add food to the colony's store."""
        self.food_stored += amount

    def spawn_ants(self, count: int) -> None:
        """Create ``count`` new ants at the nest."""
        self.ants.extend(
            Ant(
                self.home_x,
                self.home_y,
                self.home_x,
                self.home_y,
                self.color,
                self.food_pheromones,
                self.home_pheromones,
                self.colony_id,
            )
            for _ in range(count)
        )

    def update(self, env: Environment) -> None:
        """Run one turn: move every ant, bury the dead, breed, and decay pheromones."""
        for ant in self.ants:
            ant.update(env, self)

        before = len(self.ants)
        self.ants = [ant for ant in self.ants if not ant.is_dead()]
        self.total_ants_died += before - len(self.ants)

        while self.food_stored >= FOOD_REQUIRED_PER_ANT_SPAWN:
            self.spawn_ants(1)
            self.food_stored -= FOOD_REQUIRED_PER_ANT_SPAWN

        self.peak_population = max(self.peak_population, len(self.ants))
        self.update_pheromones()

    @staticmethod
    def _add(grid: np.ndarray, x: int, y: int, amount: float) -> None:
        if in_bounds(x, y):
            grid[x, y] = min(max(float(grid[x, y]) + amount, 0.0), MAX_PHEROMONE_LEVEL)

    @staticmethod
    def _level(grid: np.ndarray, x: int, y: int) -> float:
        return float(grid[x, y]) if in_bounds(x, y) else 0.0

    def add_food_pheromone(self, x: int, y: int, amount: float) -> None:
        """Add food-trail pheromone to a cell, clamped to ``[0, MAX_PHEROMONE_LEVEL]``."""
        self._add(self.food_pheromones, x, y, amount)

    def food_pheromone_level(self, x: int, y: int) -> float:
        """Food-trail pheromone on a cell; 0 off the grid."""
        return self._level(self.food_pheromones, x, y)

    def add_home_pheromone(self, x: int, y: int, amount: float) -> None:
        """Add home-trail pheromone to a cell, clamped to ``[0, MAX_PHEROMONE_LEVEL]``."""
        self._add(self.home_pheromones, x, y, amount)

    def home_pheromone_level(self, x: int, y: int) -> float:
        """Home-trail pheromone on a cell; 0 off the grid."""
        return self._level(self.home_pheromones, x, y)

    def update_pheromones(self) -> None:
        """Decay both grids, zeroing anything that falls below the floor."""
        for grid in (self.food_pheromones, self.home_pheromones):
            grid[grid <= PHEROMONE_FLOOR] = 0.0
            grid *= np.float32(PHEROMONE_DECAY_RATE)
            grid[grid < PHEROMONE_FLOOR] = 0.0