"""The world grid and the food scattered across it."""

from __future__ import annotations

import math
from typing import Iterator

import numpy as np

from antcolony import rng

GRID_SIZE = 200
INITIAL_FOOD_PER_SOURCE = 50
INITIAL_FOOD_SOURCES = 100
NUM_CLUMPS = 8
ATTEMPTS_PER_CLUMP = (
    INITIAL_FOOD_SOURCES // NUM_CLUMPS
    if INITIAL_FOOD_SOURCES > 0 and NUM_CLUMPS > 0
    else 20
)
CLUMP_RADIUS = 10.0


def in_bounds(x: int, y: int) -> bool:
    """Return True when ``(x, y)`` lies on the grid."""
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Environment:
    """A square grid holding food quantities per cell, indexed ``[x, y]``."""

    GRID_SIZE = GRID_SIZE
    INITIAL_FOOD_PER_SOURCE = INITIAL_FOOD_PER_SOURCE
    INITIAL_FOOD_SOURCES = INITIAL_FOOD_SOURCES
    NUM_CLUMPS = NUM_CLUMPS
    ATTEMPTS_PER_CLUMP = ATTEMPTS_PER_CLUMP
    CLUMP_RADIUS = CLUMP_RADIUS

    def __init__(self, cell_size: float) -> None:
        self.cell_size = float(cell_size)
        self.food_grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.uint32)
        self.total_food_sources = 0
        self.generate_food()

    def _quota_reached(self) -> bool:
        return INITIAL_FOOD_SOURCES > 0 and self.total_food_sources >= INITIAL_FOOD_SOURCES

    def generate_food(self) -> None:
        """Clear the grid and scatter fresh food sources in clumps."""
        self.food_grid[:, :] = 0
        self.total_food_sources = 0

        for _ in range(NUM_CLUMPS):
            if self._quota_reached():
                break
            center_x = rng.rand_upto(GRID_SIZE - 1)
            center_y = rng.rand_upto(GRID_SIZE - 1)

            for _ in range(ATTEMPTS_PER_CLUMP):
                if self._quota_reached():
                    break
                angle = rng.uniform(0.0, 2.0 * math.pi)
                radius_factor = rng.uniform(0.0, 1.0)
                radius = CLUMP_RADIUS * radius_factor * radius_factor

                food_x = center_x + _round_half_away(radius * math.cos(angle))
                food_y = center_y + _round_half_away(radius * math.sin(angle))

                if in_bounds(food_x, food_y) and self.food_grid[food_x, food_y] == 0:
                    self.food_grid[food_x, food_y] = INITIAL_FOOD_PER_SOURCE
                    self.total_food_sources += 1

    def has_food(self, x: int, y: int) -> bool:
        """Return True when the cell exists and holds any food."""
        return in_bounds(x, y) and bool(self.food_grid[x, y] > 0)

    def remove_food(self, x: int, y: int) -> None:
        """Take one unit of food from a cell; a depleted cell stops counting as a source."""
        if not in_bounds(x, y) or self.food_grid[x, y] == 0:
            return
        self.food_grid[x, y] -= 1
        if self.food_grid[x, y] == 0:
            self.total_food_sources -= 1

    def food_positions(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(x, y, quantity)`` for every cell holding food, in x then y order."""
        for x, y in zip(*np.nonzero(self.food_grid)):
            yield int(x), int(y), int(self.food_grid[x, y])

    def debug_food_positions(self) -> None:
        """Print every food cell and its quantity."""
        print("Current food positions (with quantity):")
        found = False
        for x, y, quantity in self.food_positions():
            print(f"  Food at ({x}, {y}) Qty: {quantity}")
            found = True
        if not found:
            print("  No food on the grid.")