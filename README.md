# antcolony

An ant colony simulation on a 200 × 200 grid. Three colonies start with five
ants each, with their nests at random cells. Food is scattered in clumps. The
ants lay "home" trails while they search. They lay "food" trails while they
carry food back to the nest. Every 8 units of food brought home spawn a new
ant. Each ant lives 1000 turns. Both pheromone grids decay by 2% on every
turn. When all food sources are used up or every ant has died, the simulation
waits three seconds and then starts again with new food and new colonies.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Running the simulation

```
antcolony
```

This opens a resizable window. It draws:
- the nests;
- the home trails, tinted in each colony's colour;
- the food trails, in gold;
- the ants, green while they carry food and fading in their last 50 turns;
- the food cells.

The corner of the window shows the total live ants, the peak population, the
total deaths and the number of food sources left. The simulation advances one
turn about every 50 ms.

Options:

| Option          | Meaning                                               |
|-----------------|-------------------------------------------------------|
| `--font PATH`   | font file for the on-screen text (default `Vertiky.ttf`) |
| `--seed N`      | seed the random generator for a reproducible run      |

No font is bundled. If the font file cannot be loaded, the program prints
`Error: Could not load font!` and exits with status 1.

Controls:

| Input                         | Action                        |
|-------------------------------|-------------------------------|
| Up / Down arrow               | zoom in / out                 |
| Mouse wheel                   | zoom around the cursor        |
| Left / Right arrow, A / D     | pan left / right              |
| W / S                         | pan up / down                 |
| Left mouse drag               | pan                           |
| R                             | reset the simulation and view |
| Escape or closing the window  | quit                          |

At startup the program reads the first word of `verification.txt` in the
working directory and prints it as the verification hash. If the file is
missing, it prints a warning and the check fails. Either way the program goes
on to run. Each check is appended to `validation_history_log.txt`. Once that
file is over 5 MB, it is rotated to `.1`, `.2` and so on, and at most five
backups are kept.

## Using the library

The simulation runs without a window:

```python
from antcolony import rng
from antcolony.simulation import Simulation

rng.seed(42)
sim = Simulation(cell_size=9.6)
for _ in range(100):
    sim.tick()
print(sim.stats())
```

`Simulation.advance(elapsed)` takes wall-clock seconds instead. It runs a turn
once more than 50 ms have built up. While a restart is pending, it counts down
and then calls `reset()`.

The modules:
- `antcolony.rng` holds the shared random generator (`seed`, `rand_upto`, `uniform`).
- `antcolony.environment.Environment` holds the food grid (`has_food`, `remove_food`, `food_positions`, `generate_food`).
- `antcolony.colony.Colony` owns one colony's ants, its food store and its two pheromone grids.
- `antcolony.ant.Ant` holds the behaviour of a single ant. `antcolony.trails.TrailFollower` holds the trail-following steps that the ant uses.
- `antcolony.view.Camera` handles zooming, panning and the mapping between window pixels and the world.
- `antcolony.verification` provides `Verification` and `ValidationLogger`.

## Not included

The simulation state cannot be saved or loaded. The only way to watch a run is
the pygame window. There is no text or headless command-line mode. For a run
without a window, use the library as shown above.

## Tests

```
pytest
```