"""Generation stepping for the cancer automaton."""

from typing import Any, Callable, Deque, Dict, Optional, Tuple
from collections import deque
import numpy as np

from .cell import CellType
from .config import SimulationConfig
from .grid import Grid, init_grid
from .rules import transition


def advance(grid: Grid, rng: Any = None) -> Grid:
    """Compute the next generation of a grid.

    Every cell is evaluated against the same input grid, which is left
    untouched; results go into a new grid of the same size.

    Args:
        grid: Current generation
        rng: Random source with a ``random()`` method (defaults to a fresh numpy Generator)

    Returns:
        The next generation
    """
    if rng is None:
        rng = np.random.default_rng()

    next_grid = Grid(grid.size)
    for row in range(grid.size):
        for col in range(grid.size):
            next_grid.set_cell(row, col, transition(grid, row, col, rng))
    return next_grid


class Simulation:
    """Cancer automaton simulation engine.

    Holds the current generation and replaces it wholesale on each step.
    Cell rules:
    - Tissue may be infected by each cancerous neighbor
    - Cancer ages, dying of old age or being killed by neighboring immune cells
    - Immune and dead cells never change
    """

    def __init__(self, grid: Grid, rng: Any = None) -> None:
        """Initialize the simulation.

        Args:
            grid: Initial generation
            rng: Random source with a ``random()`` method (defaults to a fresh numpy Generator)
        """
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self._generation = 0
        self._history: Deque[Dict[CellType, int]] = deque(maxlen=1000)

        # Track initial counts
        self._update_history()

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "Simulation":
        """Seed a random grid as described by a configuration."""
        config.validate()
        rng = np.random.default_rng(config.seed)
        grid = init_grid(config.size, rng, config.mix)
        return cls(grid, rng)

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def history(self) -> list:
        """Cell counts per type for each recorded generation."""
        return list(self._history)

    @property
    def is_stable(self) -> bool:
        """Whether the grid can no longer change.

        With no cancer left, tissue has nothing to be infected by and every
        other type is absorbing, so each further step is an identity.
        """
        return self.grid.count(CellType.CANCER) == 0

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid = advance(self.grid, self.rng)
        self._generation += 1
        self._update_history()

    def run(self, iterations: int, callback: Optional[Callable[["Simulation"], None]] = None) -> None:
        """Run a fixed number of generations.

        Args:
            iterations: Number of steps to take
            callback: Called with this simulation after every step
        """
        for _ in range(iterations):
            self.step()
            if callback is not None:
                callback(self)

    def run_until_stable(self, max_generations: int = 1000) -> Tuple[int, str]:
        """Run until no cancer remains.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of
            'remission', 'max_generations'
        """
        if self.is_stable:
            return self._generation, "remission"

        for _ in range(max_generations):
            self.step()
            if self.is_stable:
                return self._generation, "remission"

        return self._generation, "max_generations"

    def _update_history(self) -> None:
        self._history.append(self.grid.counts())

    def get_statistics(self) -> Dict:
        """Get simulation statistics for the current generation.

        Returns:
            Dictionary with various statistics
        """
        counts = self.grid.counts()
        total = self.grid.size * self.grid.size
        states = self.grid.states

        cancer_mask = states == int(CellType.CANCER)
        cancer_ages = self.grid.ages[cancer_mask]
        cancer_neighbors = self.grid.count_state_neighbors(CellType.CANCER)
        immune_neighbors = self.grid.count_state_neighbors(CellType.IMMUNE)

        return {
            "generation": self._generation,
            "grid_size": self.grid.shape,
            "counts": {kind.name.lower(): count for kind, count in counts.items()},
            "densities": {kind.name.lower(): count / total for kind, count in counts.items()},
            "cancer_mean_age": float(np.mean(cancer_ages)) if cancer_ages.size else 0.0,
            "cancer_max_age": int(cancer_ages.max()) if cancer_ages.size else 0,
            "tissue_at_risk": int(np.sum((states == int(CellType.TISSUE)) & (cancer_neighbors > 0))),
            "cancer_in_immune_contact": int(np.sum(cancer_mask & (immune_neighbors > 0))),
            "cancer_history": [entry[CellType.CANCER] for entry in self._history],
            "stable": self.is_stable,
        }
