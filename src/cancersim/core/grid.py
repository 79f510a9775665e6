"""Grid data structure for the cancer automaton."""

from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell, CellType, SYMBOLS, cell_from_symbol
from .config import InitialMix

# Moore neighborhood, excluding the centre cell
_MOORE_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def moore_neighbors(row: int, col: int, size: int) -> Iterator[Tuple[int, int]]:
    """Yield the in-bounds Moore neighbors of a coordinate.

    Neighbors come out in scan order: row offsets -1..1, and within each
    row column offsets -1..1, skipping the cell itself. Offsets that land
    outside the grid are skipped, so corners have 3 neighbors and edges 5.

    Args:
        row: Row of the origin cell
        col: Column of the origin cell
        size: Side length of the square grid
    """
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            nr, nc = row + dr, col + dc
            if 0 <= nr < size and 0 <= nc < size:
                yield (nr, nc)


class Grid:
    """A fixed-size square grid of cells.

    Cell variants are stored as ``CellType`` codes in an int8 array, with
    cancer ages kept alongside in a second array. Edges are bounded: there
    is no wraparound.
    """

    def __init__(self, size: int) -> None:
        """Initialize a grid filled with tissue.

        Args:
            size: Number of rows and columns

        Raises:
            ValueError: If size is not positive
        """
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self._states = np.full((size, size), int(CellType.TISSUE), dtype=np.int8)
        self._ages = np.zeros((size, size), dtype=np.int64)

    @property
    def states(self) -> np.ndarray:
        """Get the array of cell type codes."""
        return self._states

    @property
    def ages(self) -> np.ndarray:
        """Get the array of cancer ages (0 for non-cancer cells)."""
        return self._ages

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.size, self.size)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies inside the grid."""
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.size}x{self.size} grid")

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the cell at a coordinate.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return Cell(CellType(int(self._states[row, col])), int(self._ages[row, col]))

    def get_type(self, row: int, col: int) -> CellType:
        """Get just the variant at a coordinate, skipping Cell construction."""
        self._check_bounds(row, col)
        return CellType(int(self._states[row, col]))

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        """Set the cell at a coordinate.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        # Age before state: a rejected age leaves the cell unchanged
        self._ages[row, col] = cell.age
        self._states[row, col] = int(cell.kind)

    def neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """Yield in-bounds neighbor coordinates in scan order."""
        return moore_neighbors(row, col, self.size)

    def count(self, kind: CellType) -> int:
        """Count cells of a given type."""
        return int(np.sum(self._states == int(kind)))

    def counts(self) -> Dict[CellType, int]:
        """Count cells of every type."""
        return {kind: self.count(kind) for kind in CellType}

    def count_state_neighbors(self, kind: CellType) -> np.ndarray:
        """Count neighbors of a given type for all cells using PyTorch convolution.

        Returns:
            2D int8 array where entry (row, col) is the number of Moore
            neighbors of that cell currently of ``kind``
        """
        mask = torch.from_numpy((self._states == int(kind)).astype(np.float32))
        # Zero padding gives bounded edges
        neighbors = F.conv2d(mask.unsqueeze(0).unsqueeze(0), _MOORE_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def copy(self) -> "Grid":
        """Create an independent copy of this grid."""
        clone = Grid(self.size)
        clone._states[:] = self._states
        clone._ages[:] = self._ages
        return clone

    def to_symbols(self) -> List[str]:
        """Render each row as a string of cell symbols, without separators."""
        return ["".join(SYMBOLS[CellType(int(code))] for code in row) for row in self._states]

    @classmethod
    def from_rows(cls, rows: Sequence[str], ages: Optional[Sequence[Sequence[int]]] = None) -> "Grid":
        """Build a grid from rows of cell symbols.

        Rows may be written compactly ("TCT") or space separated ("T C T").

        Args:
            rows: One string per grid row
            ages: Optional matrix of ages applied to cancer cells

        Raises:
            ValueError: If the rows don't form a square or contain unknown symbols
        """
        symbol_rows = [row.split() if " " in row.strip() else list(row.strip()) for row in rows]
        size = len(symbol_rows)
        if size == 0:
            raise ValueError("Cannot build a grid from no rows")
        for i, symbols in enumerate(symbol_rows):
            if len(symbols) != size:
                raise ValueError(f"Row {i} has {len(symbols)} cells, expected {size}")

        grid = cls(size)
        for r, symbols in enumerate(symbol_rows):
            for c, symbol in enumerate(symbols):
                age = ages[r][c] if ages is not None else 0
                grid.set_cell(r, c, cell_from_symbol(symbol, age))
        return grid

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """Build a grid from multi-line symbol text, ignoring blank lines."""
        return cls.from_rows([line for line in text.splitlines() if line.strip()])

    def __eq__(self, other: object) -> bool:
        """Check if two grids hold the same cells."""
        if not isinstance(other, Grid):
            return False
        return (
            self.size == other.size
            and np.array_equal(self._states, other._states)
            and np.array_equal(self._ages, other._ages)
        )

    def __str__(self) -> str:
        """Space-separated symbols, one grid row per line."""
        return "\n".join(" ".join(row) for row in self.to_symbols())


def init_grid(size: int, rng: Any, mix: Optional[InitialMix] = None) -> Grid:
    """Create a randomly seeded grid.

    Each coordinate gets one uniform draw, in row-major order, which is
    mapped onto the cumulative thresholds of ``mix``.

    Args:
        size: Side length of the grid
        rng: Random source with a ``random()`` method returning floats in [0, 1)
        mix: Fractions of each cell type (defaults to 70/5/5/20)

    Returns:
        Newly seeded grid
    """
    if mix is None:
        mix = InitialMix()
    mix.validate()
    tissue_below, cancer_below, immune_below = mix.thresholds()

    grid = Grid(size)
    for row in range(size):
        for col in range(size):
            r = rng.random()
            if r < tissue_below:
                cell = Cell.tissue()
            elif r < cancer_below:
                cell = Cell.cancer()
            elif r < immune_below:
                cell = Cell.immune()
            else:
                cell = Cell.dead()
            grid.set_cell(row, col, cell)
    return grid
