"""Tests for cell values."""

import pytest
from cancersim.core.cell import Cell, CellType, cell_from_symbol, symbol_of


class TestCell:
    """Test cases for the Cell value type."""

    def test_constructors(self):
        """Test each variant's constructor."""
        assert Cell.tissue().kind == CellType.TISSUE
        assert Cell.cancer().kind == CellType.CANCER
        assert Cell.cancer().age == 0
        assert Cell.cancer(7).age == 7
        assert Cell.immune().kind == CellType.IMMUNE
        assert Cell.dead().kind == CellType.DEAD

    def test_symbols(self):
        """Test display symbols for every variant."""
        assert symbol_of(Cell.tissue()) == "T"
        assert symbol_of(Cell.cancer(3)) == "C"
        assert symbol_of(Cell.immune()) == "W"
        assert symbol_of(Cell.dead()) == "X"
        assert Cell.cancer().symbol == "C"

    def test_age_discarded_for_non_cancer(self):
        """Test that only cancer cells keep an age."""
        assert Cell(CellType.DEAD, 5) == Cell.dead()
        assert Cell(CellType.TISSUE, 2).age == 0

    def test_cancer_age_in_equality(self):
        """Test that cancer cells of different ages differ."""
        assert Cell.cancer(1) != Cell.cancer(2)
        assert Cell.cancer(4) == Cell.cancer(4)

    def test_negative_age_rejected(self):
        """Test negative ages raise ValueError."""
        with pytest.raises(ValueError):
            Cell.cancer(-1)

    def test_is_absorbing(self):
        """Test which variants are absorbing."""
        assert Cell.immune().is_absorbing
        assert Cell.dead().is_absorbing
        assert not Cell.tissue().is_absorbing
        assert not Cell.cancer().is_absorbing

    def test_frozen(self):
        """Test cells can't be mutated."""
        cell = Cell.cancer(1)
        with pytest.raises(AttributeError):
            cell.age = 2


class TestCellFromSymbol:
    """Test cases for parsing symbols."""

    def test_known_symbols(self):
        """Test every symbol maps back to its variant."""
        for cell in (Cell.tissue(), Cell.cancer(), Cell.immune(), Cell.dead()):
            assert cell_from_symbol(cell.symbol) == cell

    def test_age_applies_only_to_cancer(self):
        """Test the age argument is ignored for non-cancer symbols."""
        assert cell_from_symbol("C", 4) == Cell.cancer(4)
        assert cell_from_symbol("W", 4) == Cell.immune()

    def test_unknown_symbol(self):
        """Test unknown symbols raise ValueError."""
        with pytest.raises(ValueError, match="Unknown cell symbol"):
            cell_from_symbol("Q")
