"""The simulation loop state: the world, the colonies and the auto-reset timer."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from antcolony import rng
from antcolony.colony import Colony
from antcolony.environment import GRID_SIZE, Environment

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
CELL_SIZE = WINDOW_WIDTH / GRID_SIZE

SIMULATION_SPEED = 0.05
RESET_DELAY_SECONDS = 3.0
INITIAL_ANTS_PER_COLONY = 5

BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
COLONY_COLORS = (BLACK, RED, BLUE)


class SimulationState(enum.Enum):
    RUNNING = "running"
    WAITING_FOR_RESET = "waiting_for_reset"


@dataclass(frozen=True)
class Stats:
    """Totals across all colonies."""

    live_ants: int
    peak_population: int
    deaths: int
    food_sources: int


class Simulation:
    """Drives the colonies in fixed steps and restarts once food or ants run out."""

    def __init__(self, cell_size: float = CELL_SIZE) -> None:
        self.cell_size = cell_size
        self.env = Environment(cell_size)
        self.colonies: list[Colony] = []
        self.state = SimulationState.RUNNING
        self._since_tick = 0.0
        self._waiting_for = 0.0
        self._create_colonies()

    def _create_colonies(self) -> None:
        self.colonies = []
        for colony_id, color in enumerate(COLONY_COLORS):
            home_x = rng.rand_upto(GRID_SIZE - 1)
            home_y = rng.rand_upto(GRID_SIZE - 1)
            self.colonies.append(
                Colony(home_x, home_y, INITIAL_ANTS_PER_COLONY, color, colony_id)
            )

    def reset(self) -> None:
        """Regenerate food, create fresh colonies and resume running."""
        self.env.generate_food()
        self._create_colonies()
        self.state = SimulationState.RUNNING
        self._since_tick = 0.0
        self._waiting_for = 0.0
        print("Simulation data reset. New colonies created.")

    @property
    def reset_countdown(self) -> int:
        """Whole seconds left before an automatic restart."""
        return int(max(0.0, RESET_DELAY_SECONDS - self._waiting_for))

    def tick(self) -> None:
        """Advance every colony by one turn and check the reset condition."""
        for colony in self.colonies:
            colony.update(self.env)
        self._since_tick = 0.0

        live = sum(len(colony.ants) for colony in self.colonies)
        if self.env.total_food_sources == 0 or live == 0:
            self.state = SimulationState.WAITING_FOR_RESET
            self._waiting_for = 0.0
            print(f"Reset condition met. Restarting in {RESET_DELAY_SECONDS:g} seconds...")

    def advance(self, elapsed: float) -> bool:
        """Let ``elapsed`` seconds of wall time pass; return True if a turn was run."""
        if self.state is SimulationState.RUNNING:
            self._since_tick += elapsed
            if int(self._since_tick * 1000) > int(SIMULATION_SPEED * 1000):
                self.tick()
                return True
            return False

        self._waiting_for += elapsed
        if RESET_DELAY_SECONDS - self._waiting_for <= 0:
            self.reset()
            print("Simulation restarted.")
        return False

    def stats(self) -> Stats:
        """Return totals over all colonies."""
        return Stats(
            live_ants=sum(len(colony.ants) for colony in self.colonies),
            peak_population=sum(colony.peak_population for colony in self.colonies),
            deaths=sum(colony.total_ants_died for colony in self.colonies),
            food_sources=self.env.total_food_sources,
        )