"""Cell states for the cancer automaton."""

from dataclasses import dataclass
from enum import IntEnum


class CellType(IntEnum):
    """The four cell variants.

    The integer values are the codes stored in the grid's state array.
    """

    TISSUE = 0
    CANCER = 1
    IMMUNE = 2
    DEAD = 3


SYMBOLS = {
    CellType.TISSUE: "T",
    CellType.CANCER: "C",
    CellType.IMMUNE: "W",
    CellType.DEAD: "X",
}

_TYPES_BY_SYMBOL = {symbol: kind for kind, symbol in SYMBOLS.items()}


@dataclass(frozen=True)
class Cell:
    """A single cell value.

    Only cancer cells carry an age; any other variant is normalised to
    age 0 so that equal variants compare equal.
    """

    kind: CellType
    age: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", CellType(self.kind))
        if self.age < 0:
            raise ValueError(f"Cell age must be non-negative, got {self.age}")
        if self.kind != CellType.CANCER and self.age != 0:
            object.__setattr__(self, "age", 0)

    @classmethod
    def tissue(cls) -> "Cell":
        """Create a healthy tissue cell."""
        return cls(CellType.TISSUE)

    @classmethod
    def cancer(cls, age: int = 0) -> "Cell":
        """Create a cancer cell of the given age."""
        return cls(CellType.CANCER, age)

    @classmethod
    def immune(cls) -> "Cell":
        """Create an immune (white blood) cell."""
        return cls(CellType.IMMUNE)

    @classmethod
    def dead(cls) -> "Cell":
        """Create a dead cell."""
        return cls(CellType.DEAD)

    @property
    def is_cancer(self) -> bool:
        """Whether this cell is cancerous."""
        return self.kind == CellType.CANCER

    @property
    def is_absorbing(self) -> bool:
        """Whether this cell's transition always returns itself."""
        return self.kind in (CellType.IMMUNE, CellType.DEAD)

    @property
    def symbol(self) -> str:
        """Get the single-character display tag."""
        return SYMBOLS[self.kind]


def symbol_of(cell: Cell) -> str:
    """Get the single-character display tag for a cell."""
    return SYMBOLS[cell.kind]


def cell_from_symbol(symbol: str, age: int = 0) -> Cell:
    """Build a cell from its display tag.

    Args:
        symbol: One of 'T', 'C', 'W', 'X'
        age: Age to give the cell if it is cancerous

    Raises:
        ValueError: If the symbol is not recognised
    """
    try:
        kind = _TYPES_BY_SYMBOL[symbol]
    except KeyError:
        raise ValueError(f"Unknown cell symbol '{symbol}'") from None
    return Cell(kind, age if kind == CellType.CANCER else 0)
