"""Grid-based ant colony simulation with pheromone trails, foraging and a pygame viewer."""

__version__ = "0.1.0"