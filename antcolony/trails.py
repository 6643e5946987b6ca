"""Pheromone-trail following shared by every ant."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Sequence

import numpy as np

from antcolony import rng
from antcolony.environment import in_bounds

MAX_PHEROMONE_LEVEL = 500.0
PHEROMONE_DECAY_RATE = 0.98

# Grid offsets for the eight headings: N, NE, E, SE, S, SW, W, NW.
OFFSETS: tuple[tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)

_DIAGONAL_BONUS = 1.1


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two grid points."""
    return math.hypot(x1 - x2, y1 - y2)


def weighted_choice(weights: Sequence[float], directions: Sequence[int]) -> int:
    """Pick a direction with probability proportional to its weight.

    If rounding leaves the draw past the running sum, the heaviest
    direction (the first on ties) is returned instead.
    """
    if len(weights) != len(directions):
        raise ValueError("weights and directions must have the same length")
    if not directions:
        raise ValueError("no directions to choose from")

    total = sum(weights)
    pick = rng.uniform(0.0, total)
    running = 0.0
    for weight, direction in zip(weights, directions):
        running += weight
        if pick <= running:
            return direction

    best_weight = 0.0
    best = directions[0]
    for weight, direction in zip(weights, directions):
        if weight > best_weight:
            best_weight, best = weight, direction
    return best


class TrailFollower(ABC):
    """Steering along the colony's food and home pheromone trails.

    Subclasses provide the position state and the ``move``/``wander`` steps.
    """

    x: int
    y: int
    prev_x: int
    prev_y: int
    home_x: int
    home_y: int
    direction: int
    has_food: bool
    recent_positions: deque[tuple[int, int]]
    food_pheromones: np.ndarray
    home_pheromones: np.ndarray

    @abstractmethod
    def move(self, env: Any) -> None:
        """Take one step in the current direction."""

    @abstractmethod
    def wander(self, env: Any) -> None:
        """Pick a fresh exploratory direction and step."""

    def _weigh_neighbours(
        self,
        grid: np.ndarray,
        min_level: float,
        visited_factor: float,
        closer_factor: float,
        farther_factor: float,
    ) -> tuple[list[float], list[int]]:
        current_dist = distance(self.x, self.y, self.home_x, self.home_y)
        weights: list[float] = []
        directions: list[int] = []

        for direction, (dx, dy) in enumerate(OFFSETS):
            nx, ny = self.x + dx, self.y + dy
            if not in_bounds(nx, ny):
                continue
            if nx == self.prev_x and ny == self.prev_y:
                continue

            level = float(grid[nx, ny])
            if level <= min_level:
                continue

            weight = level
            if (nx, ny) in self.recent_positions:
                weight *= visited_factor

            neighbour_dist = distance(nx, ny, self.home_x, self.home_y)
            if neighbour_dist < current_dist:
                weight *= closer_factor
            elif neighbour_dist > current_dist:
                weight *= farther_factor

            if direction % 2 != 0:
                weight *= _DIAGONAL_BONUS

            if weight > 0.001:
                weights.append(weight)
                directions.append(direction)

        return weights, directions

    def follow_food_pheromones(self, env: Any) -> None:
        """Step along the food trail, preferring paths leading away from home."""
        if float(self.food_pheromones[self.x, self.y]) > 25.0 and rng.rand_upto(100) < 5:
            self.wander(env)
            return

        weights, directions = self._weigh_neighbours(
            self.food_pheromones,
            min_level=0.0,
            visited_factor=0.5,
            closer_factor=0.2,
            farther_factor=1.2,
        )

        if not directions or (sum(weights) <= 0.1 and rng.rand_upto(100) < 20):
            self.wander(env)
            return

        self.direction = weighted_choice(weights, directions)
        self.move(env)

    def follow_home_pheromones(self, env: Any) -> bool:
        """Step along the home trail; return True when a trail-guided step was taken."""
        if self.has_food:
            dx, dy = self.home_x - self.x, self.home_y - self.y
            if max(abs(dx), abs(dy)) == 1:
                self.direction = OFFSETS.index((dx, dy))
                self.move(env)
                return True

        if (
            not self.has_food
            and float(self.home_pheromones[self.x, self.y]) > 30.0
            and rng.rand_upto(100) < 5
        ):
            self.wander(env)
            return False

        near_home = self.has_food and distance(self.x, self.y, self.home_x, self.home_y) < 2.5
        weights, directions = self._weigh_neighbours(
            self.home_pheromones,
            min_level=0.001,
            visited_factor=0.9 if near_home else 0.5,
            closer_factor=2.0,
            farther_factor=0.1,
        )

        if not directions:
            if not self.has_food:
                self.wander(env)
            return False

        if not self.has_food and sum(weights) <= 0.1 and rng.rand_upto(100) < 20:
            self.wander(env)
            return False

        if self.has_food:
            best_weight = -1.0
            chosen = directions[0]
            for weight, direction in zip(weights, directions):
                if weight > best_weight:
                    best_weight, chosen = weight, direction
        else:
            chosen = weighted_choice(weights, directions)

        self.direction = chosen
        self.move(env)
        return True