"""Core cancer automaton logic."""

from .cell import Cell, CellType, symbol_of, cell_from_symbol
from .config import InitialMix, SimulationConfig
from .grid import Grid, init_grid, moore_neighbors
from .rules import transition
from .simulation import Simulation, advance

__all__ = [
    "Cell",
    "CellType",
    "symbol_of",
    "cell_from_symbol",
    "InitialMix",
    "SimulationConfig",
    "Grid",
    "init_grid",
    "moore_neighbors",
    "transition",
    "Simulation",
    "advance",
]
