"""A single forager ant and its per-turn behaviour."""

from __future__ import annotations

from collections import deque
from typing import Any, Protocol

import numpy as np

from antcolony import rng
from antcolony.environment import Environment, in_bounds
from antcolony.trails import MAX_PHEROMONE_LEVEL, OFFSETS, TrailFollower, distance

MAX_LIFESPAN = 1000
MAX_PHEROMONE_RETURN_ATTEMPTS = 10
MAX_TOTAL_RETURN_ATTEMPTS = 150
HOME_PROXIMITY_THRESHOLD = 8.0
MEMORY_LENGTH = 10

INITIAL_PHEROMONE_STRENGTH = 100.0
FOOD_PHEROMONE_DEPOSIT = 60.0
HOME_PHEROMONE_DEPOSIT = 50.5
PHEROMONE_COST_PER_DEPOSIT = 0.1
STRENGTH_AFTER_FINDING_FOOD = 20.0
STRENGTH_REFILL_ON_STORE = 10.0


class FoodStore(Protocol):
    """Anything an ant can hand food over to."""

    def add_food(self, amount: int) -> None: ...


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Ant(TrailFollower):
    """An ant that searches for food, carries it home and lays pheromone trails."""

    MAX_LIFESPAN = MAX_LIFESPAN
    MAX_PHEROMONE_RETURN_ATTEMPTS = MAX_PHEROMONE_RETURN_ATTEMPTS
    MAX_TOTAL_RETURN_ATTEMPTS = MAX_TOTAL_RETURN_ATTEMPTS
    HOME_PROXIMITY_THRESHOLD = HOME_PROXIMITY_THRESHOLD

    def __init__(
        self,
        start_x: int,
        start_y: int,
        home_x: int,
        home_y: int,
        colony_color: Any,
        food_pheromones: np.ndarray,
        home_pheromones: np.ndarray,
        colony_id: int,
    ) -> None:
        self.x = start_x
        self.y = start_y
        self.prev_x = start_x
        self.prev_y = start_y
        self.direction = rng.rand_upto(7)
        self.has_food = False
        self.pheromone_strength = INITIAL_PHEROMONE_STRENGTH
        self.home_x = home_x
        self.home_y = home_y
        self.lifespan = MAX_LIFESPAN
        self.memory_length = MEMORY_LENGTH
        self.moves_while_returning_home = 0
        self.colony_color = colony_color
        self.colony_id = colony_id
        self.food_pheromones = food_pheromones
        self.home_pheromones = home_pheromones
        self.recent_positions: deque[tuple[int, int]] = deque(
            [(start_x, start_y)], maxlen=self.memory_length
        )

    @property
    def at_home(self) -> bool:
        return self.x == self.home_x and self.y == self.home_y

    def _distance_home(self) -> float:
        return distance(self.x, self.y, self.home_x, self.home_y)

    def update(self, env: Environment, colony: FoodStore) -> None:
        """Run one turn of behaviour."""
        if self.lifespan > 0:
            self.lifespan -= 1

        if self.has_food:
            self._return_with_food(env, colony)
        else:
            self._search(env)

    def _return_with_food(self, env: Environment, colony: FoodStore) -> None:
        if self.at_home:
            self.store_food(colony)
            self.lifespan += 1
            return

        old_x, old_y = self.x, self.y
        dist_before = self._distance_home()

        if (
            dist_before <= HOME_PROXIMITY_THRESHOLD
            or self.moves_while_returning_home < MAX_TOTAL_RETURN_ATTEMPTS
        ):
            self.go_home(colony, env)
        else:
            # Lost for far too long: wander at random.
            self.direction = rng.rand_upto(7)
            self.move(env)

        if not self.at_home:
            self.moves_while_returning_home += 1

        moved = (self.x, self.y) != (old_x, old_y)
        dist_after = self._distance_home()
        if (
            not moved or dist_after >= dist_before - 0.1
        ) and dist_before > HOME_PROXIMITY_THRESHOLD:
            self.moves_while_returning_home += 1

        if self.at_home:
            self.store_food(colony)
        elif self.has_food and self.moves_while_returning_home < MAX_TOTAL_RETURN_ATTEMPTS:
            self.deposit_food_pheromones(env)

    def _search(self, env: Environment) -> None:
        just_left_nest = (
            self.moves_while_returning_home == 0
            and self.prev_x == self.home_x
            and self.prev_y == self.home_y
        )
        if just_left_nest:
            if rng.rand_upto(99) < 3:
                self.wander(env)
            else:
                self.follow_food_pheromones(env)
            self.deposit_home_pheromones(env)
            return

        self.search_for_food(env)
        if not self.has_food:
            self.deposit_home_pheromones(env)
            self.follow_food_pheromones(env)
        else:
            self.pheromone_strength = STRENGTH_AFTER_FINDING_FOOD
            self.deposit_food_pheromones(env)
            self.moves_while_returning_home = 0

    def move(self, env: Environment) -> None:
        """Step once along the current heading, turning away from the grid edge."""
        self.prev_x, self.prev_y = self.x, self.y
        dx, dy = OFFSETS[self.direction]
        new_x, new_y = self.x + dx, self.y + dy

        last = Environment.GRID_SIZE - 1
        clamped_x = min(max(new_x, 0), last)
        clamped_y = min(max(new_y, 0), last)
        hit_boundary = (clamped_x, clamped_y) != (new_x, new_y)
        self.x, self.y = clamped_x, clamped_y

        if hit_boundary:
            turn = rng.rand_upto(2)
            if turn == 0:
                self.direction = (self.direction - 2 - rng.rand_upto(1) + 8) % 8
            elif turn == 1:
                self.direction = (self.direction + 2 + rng.rand_upto(1)) % 8
            else:
                self.direction = (self.direction + 4) % 8

        self.recent_positions.append((self.x, self.y))

    def _is_fresh_cell(self, nx: int, ny: int) -> bool:
        return (
            in_bounds(nx, ny)
            and (nx, ny) != (self.prev_x, self.prev_y)
            and (nx, ny) not in self.recent_positions
        )

    def wander(self, env: Environment) -> None:
        """Keep heading or pick an unvisited neighbour at random, then step."""
        keep_heading = False
        if rng.rand_upto(100) < 70:
            dx, dy = OFFSETS[self.direction]
            keep_heading = self._is_fresh_cell(self.x + dx, self.y + dy)

        if not keep_heading:
            good = [
                direction
                for direction, (dx, dy) in enumerate(OFFSETS)
                if self._is_fresh_cell(self.x + dx, self.y + dy)
            ]
            if good:
                self.direction = good[rng.rand_upto(len(good) - 1)]
            else:
                self.direction = rng.rand_upto(7)

        self.move(env)

    def search_for_food(self, env: Environment) -> None:
        """Pick up food from the current cell or step onto an adjacent food cell."""
        if env.has_food(self.x, self.y):
            self.has_food = True
            env.remove_food(self.x, self.y)
            return

        for dx, dy in OFFSETS:
            cx, cy = self.x + dx, self.y + dy
            if not in_bounds(cx, cy):
                continue
            if env.has_food(cx, cy):
                self.prev_x, self.prev_y = self.x, self.y
                self.x, self.y = cx, cy
                self.has_food = True
                env.remove_food(cx, cy)
                return

    def go_home(self, colony: FoodStore, env: Environment) -> None:
        """Step straight towards home, storing food on arrival."""
        delta = (_sign(self.home_x - self.x), _sign(self.home_y - self.y))
        if delta == (0, 0):
            if self.has_food:
                self.store_food(colony)
            return

        self.direction = OFFSETS.index(delta)
        self.move(env)

        if self.at_home and self.has_food:
            self.store_food(colony)

    def store_food(self, colony: FoodStore) -> None:
        """Hand one unit of food to the colony and recharge pheromones."""
        self.has_food = False
        self.pheromone_strength += STRENGTH_REFILL_ON_STORE
        colony.add_food(1)

    def _spend_pheromone(self) -> None:
        self.pheromone_strength = max(self.pheromone_strength - PHEROMONE_COST_PER_DEPOSIT, 0.0)

    def deposit_food_pheromones(self, env: Environment) -> None:
        """Lay food-trail pheromone on the current cell while carrying food."""
        if self.has_food and self.pheromone_strength > 0.05:
            level = float(self.food_pheromones[self.x, self.y]) + FOOD_PHEROMONE_DEPOSIT
            self.food_pheromones[self.x, self.y] = min(level, MAX_PHEROMONE_LEVEL)
            self._spend_pheromone()

    def deposit_home_pheromones(self, env: Environment) -> None:
        """Lay home-trail pheromone on the current cell while searching."""
        if not self.has_food and self.pheromone_strength > 0.1:
            level = float(self.home_pheromones[self.x, self.y]) + HOME_PHEROMONE_DEPOSIT
            self.home_pheromones[self.x, self.y] = min(level, MAX_PHEROMONE_LEVEL)
            self._spend_pheromone()

    def is_dead(self) -> bool:
        """Return True once the ant's lifespan has run out."""
        return self.lifespan <= 0