"""Cellular automaton of tissue, cancer, immune and dead cells."""

__version__ = "0.1.0"

from .core.cell import Cell, CellType, symbol_of
from .core.grid import Grid, init_grid
from .core.simulation import Simulation, advance

__all__ = ["Cell", "CellType", "symbol_of", "Grid", "init_grid", "Simulation", "advance"]
