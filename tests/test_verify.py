"""
Comprehensive test suite for grid verification.

Tests all validation cases:
- Shape errors (INVALID_SHAPE, INVALID_CELL)
- Word errors (INVALID_WORD, WORD_NOT_FOUND)
- Ownership errors (CELL_CONFLICT)
- Placement bookkeeping (MISSING_PLACEMENT, PLACEMENT_MISMATCH, PLACEMENT_SHAPE, PLACEMENT_OUT_OF_BOUNDS)
"""

import pytest

from src.engine import Cell, Direction, Grid, WordPlacement, compute_cells
from src.verifiers import (
    validate,
    verify_placements,
    find_word,
    check_cell_ownership,
    ValidationResult,
)


def placement(word, start, direction):
    return WordPlacement(
        word=word,
        start=start,
        direction=direction,
        cells=compute_cells(start, direction, len(word)),
    )


GRID_ROWS = [
    "CATX",
    "OXXD",
    "WXXO",
    "XTAG",
]


@pytest.fixture
def matrix():
    return [list(row) for row in GRID_ROWS]


class TestValidGrids:
    """Grids where every word can be found."""

    def test_horizontal_word(self, matrix):
        """A left-to-right word is found."""
        result = validate(matrix, ["CAT"])
        assert result.valid is True
        assert result.words == ["CAT"]
        assert result.placements[0].direction == Direction.HORIZONTAL

    def test_reversed_words(self, matrix):
        """Words reading right-to-left and bottom-to-top are found."""
        result = validate(matrix, ["GAT", "GOD"])
        assert result.valid is True
        directions = {p.word: p.direction for p in result.placements}
        assert directions["GAT"] == Direction.HORIZONTAL_REVERSE
        assert directions["GOD"] == Direction.VERTICAL_REVERSE

    def test_vertical_word(self, matrix):
        """A top-to-bottom word is found."""
        result = validate(matrix, ["COW"])
        assert result.valid is True
        assert result.placements[0].cells == [Cell(0, 0), Cell(1, 0), Cell(2, 0)]

    def test_diagonal_words(self):
        """Both diagonals are searched."""
        matrix = [list("ABC"), list("XEX"), list("GXI")]
        result = validate(matrix, ["AEI", "CEG"])
        assert result.valid is True

    def test_crossing_words(self, matrix):
        """Words sharing a letter do not conflict."""
        result = validate(matrix, ["CAT", "COW"])
        assert result.valid is True

    def test_grid_model_accepted(self, matrix):
        """A Grid model validates the same as its raw letters."""
        grid = Grid(cells=matrix)
        assert validate(grid, ["CAT", "DOG"]) == validate(matrix, ["CAT", "DOG"])

    def test_validation_is_pure(self, matrix):
        """Validating twice gives identical results."""
        first = validate(matrix, ["CAT", "ZEBRA", "DOG"])
        second = validate(matrix, ["CAT", "ZEBRA", "DOG"])
        assert first == second
        assert matrix == [list(row) for row in GRID_ROWS]


class TestWordErrors:
    """Words missing from the grid."""

    def test_word_not_found(self, matrix):
        """A word with no straight-line occurrence is reported."""
        result = validate(matrix, ["CAT", "BIRD"])
        assert result.valid is False
        assert [e.code for e in result.errors] == ["WORD_NOT_FOUND"]
        assert result.errors[0].word == "BIRD"

    def test_word_longer_than_grid(self, matrix):
        """A word longer than the grid is simply not found."""
        result = validate(matrix, ["CATERPILLAR"])
        assert any(e.code == "WORD_NOT_FOUND" for e in result.errors)

    def test_up_left_diagonal_not_searched(self):
        """Only the six placement directions are searched."""
        matrix = [list("IXX"), list("XEX"), list("XXA")]
        result = validate(matrix, ["AEI"])
        assert result.valid is False

    def test_invalid_word(self, matrix):
        """Lowercase or empty words are reported, not searched."""
        result = validate(matrix, ["cat", ""])
        codes = [e.code for e in result.errors]
        assert codes == ["INVALID_WORD", "INVALID_WORD"]


class TestShapeErrors:
    """Malformed grids stop validation early."""

    def test_empty_grid(self):
        result = validate([], ["CAT"])
        assert result.valid is False
        assert result.errors[0].code == "INVALID_SHAPE"

    def test_not_square(self):
        """Rows must match the number of rows."""
        result = validate([list("CAT"), list("DOG")], ["CAT"])
        assert result.valid is False
        assert all(e.code == "INVALID_SHAPE" for e in result.errors)

    def test_empty_cell(self):
        """An unfilled cell is corruption."""
        matrix = [list("CA"), ["T", ""]]
        result = validate(matrix, ["CA"])
        assert result.valid is False
        assert result.errors[0].code == "INVALID_CELL"
        assert result.errors[0].cell == Cell(1, 1)

    def test_lowercase_cell(self):
        """Cells must be uppercase."""
        result = validate([list("Ca"), list("TS")], ["CT"])
        assert [e.code for e in result.errors] == ["INVALID_CELL"]


class TestCellOwnership:
    """Two words requiring different letters in one cell."""

    def test_conflicting_placements(self):
        """AB across and CD down both claim (0, 0)."""
        errors = check_cell_ownership([
            placement("AB", (0, 0), Direction.HORIZONTAL),
            placement("CD", (0, 0), Direction.VERTICAL),
        ])
        assert [e.code for e in errors] == ["CELL_CONFLICT"]
        assert errors[0].cell == Cell(0, 0)

    def test_shared_letter_is_fine(self):
        """AB across and AC down share the A."""
        errors = check_cell_ownership([
            placement("AB", (0, 0), Direction.HORIZONTAL),
            placement("AC", (0, 0), Direction.VERTICAL),
        ])
        assert errors == []


class TestFindWord:
    """Direct word search."""

    def test_returns_first_occurrence(self, matrix):
        found = find_word(matrix, "CAT")
        assert found.start == Cell(0, 0)
        assert found.word == "CAT"

    def test_missing_word(self, matrix):
        assert find_word(matrix, "EMU") is None


class TestVerifyPlacements:
    """Checking a Grid's recorded placements."""

    def test_correct_placements(self, matrix):
        grid = Grid(cells=matrix, placements=[
            placement("CAT", (0, 0), Direction.HORIZONTAL),
            placement("GOD", (3, 3), Direction.VERTICAL_REVERSE),
        ])
        result = verify_placements(grid, ["CAT", "GOD"])
        assert isinstance(result, ValidationResult)
        assert result.valid is True

    def test_missing_placement(self, matrix):
        grid = Grid(cells=matrix, placements=[placement("CAT", (0, 0), Direction.HORIZONTAL)])
        result = verify_placements(grid, ["CAT", "GOD"])
        assert [e.code for e in result.errors] == ["MISSING_PLACEMENT"]

    def test_mismatched_placement(self, matrix):
        """A placement whose cells spell something else."""
        grid = Grid(cells=matrix, placements=[placement("DOG", (1, 0), Direction.HORIZONTAL)])
        result = verify_placements(grid, ["DOG"])
        assert [e.code for e in result.errors] == ["PLACEMENT_MISMATCH"]

    def test_cells_not_following_direction(self, matrix):
        grid = Grid(cells=matrix, placements=[
            WordPlacement(
                word="CAT",
                start=(0, 0),
                direction=Direction.VERTICAL,
                cells=[(0, 0), (0, 1), (0, 2)],
            )
        ])
        result = verify_placements(grid, ["CAT"])
        assert [e.code for e in result.errors] == ["PLACEMENT_SHAPE"]

    def test_placement_out_of_bounds(self, matrix):
        grid = Grid(cells=matrix, placements=[placement("CATS", (0, 2), Direction.HORIZONTAL)])
        result = verify_placements(grid, ["CATS"])
        assert [e.code for e in result.errors] == ["PLACEMENT_OUT_OF_BOUNDS"]
