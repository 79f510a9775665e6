"""Per-cell transition rules.

Every rule reads only the previous generation's grid and returns the
cell's next value; nothing here writes to a grid. Random draws happen in
neighbor scan order and stop at the first success, so a seeded random
source reproduces a step exactly.
"""

from typing import Any

from .cell import Cell, CellType
from .grid import Grid

INFECTION_PROBABILITY = 0.2
IMMUNE_KILL_PROBABILITY = 0.5
MAX_CANCER_AGE = 10


def _tissue_rule(grid: Grid, row: int, col: int, cell: Cell, rng: Any) -> Cell:
    # One infection trial per cancerous neighbor
    for nr, nc in grid.neighbors(row, col):
        if grid.get_type(nr, nc) == CellType.CANCER and rng.random() < INFECTION_PROBABILITY:
            return Cell.cancer()
    return cell


def _cancer_rule(grid: Grid, row: int, col: int, cell: Cell, rng: Any) -> Cell:
    age = cell.age + 1
    if age > MAX_CANCER_AGE:
        return Cell.dead()

    for nr, nc in grid.neighbors(row, col):
        if grid.get_type(nr, nc) == CellType.IMMUNE and rng.random() < IMMUNE_KILL_PROBABILITY:
            return Cell.dead()
    return Cell.cancer(age)


def _identity_rule(grid: Grid, row: int, col: int, cell: Cell, rng: Any) -> Cell:
    # Immune cells are stationary for now; dead cells never recover
    return cell


_RULES = {
    CellType.TISSUE: _tissue_rule,
    CellType.CANCER: _cancer_rule,
    CellType.IMMUNE: _identity_rule,
    CellType.DEAD: _identity_rule,
}


def transition(grid: Grid, row: int, col: int, rng: Any) -> Cell:
    """Compute the next value of one cell.

    Args:
        grid: Previous generation, treated as read-only
        row: Row of the cell
        col: Column of the cell
        rng: Random source with a ``random()`` method returning floats in [0, 1)

    Returns:
        The cell's value in the next generation

    Raises:
        IndexError: If (row, col) is outside the grid
    """
    cell = grid.get_cell(row, col)
    return _RULES[cell.kind](grid, row, col, cell, rng)
