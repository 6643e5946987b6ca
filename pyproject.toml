[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "antcolony"
version = "0.1.0"
description = "A grid-based ant colony simulation with pheromone trails, foraging and colony growth."
requires-python = ">=3.10"
keywords = ["ants", "simulation", "pheromones", "artificial life", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
antcolony = "antcolony.app:main"

[tool.hatch.build.targets.wheel]
packages = ["antcolony"]

[tool.pytest.ini_options]
addopts = "-ra"
