"""Grid reading and word search utilities."""

import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..engine.directions import DIRECTIONS, Cell, compute_cells, in_bounds
from ..engine.models import Grid, WordPlacement
from .models import ValidationError


LETTER_PATTERN = re.compile(r'^[A-Z]$')
WORD_PATTERN = re.compile(r'^[A-Z]+$')

GridLike = Union[Grid, Sequence[Sequence[str]]]


def as_matrix(grid: GridLike) -> List[List[str]]:
    """Return the letter matrix of a Grid or of a raw list of rows."""
    if isinstance(grid, Grid):
        return [list(row) for row in grid.cells]
    return [list(row) for row in grid]


def check_shape(matrix: List[List[str]]) -> List[ValidationError]:
    """Check the matrix is square, non-empty and holds one letter A-Z per cell."""
    errors: List[ValidationError] = []
    size = len(matrix)

    if size == 0:
        errors.append(ValidationError(
            code="INVALID_SHAPE",
            message="Grid is empty"
        ))
        return errors

    for r, row in enumerate(matrix):
        if len(row) != size:
            errors.append(ValidationError(
                code="INVALID_SHAPE",
                message=f"Row {r} has {len(row)} cells, expected {size}"
            ))
    if errors:
        return errors

    for r, row in enumerate(matrix):
        for c, letter in enumerate(row):
            if not isinstance(letter, str) or not LETTER_PATTERN.match(letter):
                errors.append(ValidationError(
                    code="INVALID_CELL",
                    message=f"Cell ({r}, {c}) holds {letter!r}, expected a single letter A-Z",
                    cell=Cell(r, c)
                ))

    return errors


def read_cells(matrix: List[List[str]], cells: Iterable[Sequence[int]]) -> str:
    """Concatenate the letters at the given cells, in order."""
    return ''.join(matrix[row][col] for row, col in cells)


def find_word(matrix: List[List[str]], word: str) -> Optional[WordPlacement]:
    """
    Exhaustively search every (row, col, direction) for `word`.

    Returns the first occurrence in row-major, then direction order,
    or None if the word does not appear.
    """
    size = len(matrix)
    length = len(word)

    for row in range(size):
        for col in range(size):
            if matrix[row][col] != word[0]:
                continue
            for direction in DIRECTIONS:
                cells = compute_cells((row, col), direction, length)
                if not in_bounds(cells[-1], size):
                    continue
                if read_cells(matrix, cells) == word:
                    return WordPlacement(
                        word=word,
                        start=Cell(row, col),
                        direction=direction,
                        cells=cells
                    )

    return None


def check_cell_ownership(placements: Iterable[WordPlacement]) -> List[ValidationError]:
    """
    Report cells claimed by two words that require different letters.

    Words crossing on the same letter are fine.
    """
    errors: List[ValidationError] = []
    cell_usage: Dict[Cell, Tuple[str, str]] = {}

    for placement in placements:
        for cell, letter in zip(placement.cells, placement.word):
            owner = cell_usage.get(cell)
            if owner is not None and owner[0] != placement.word and owner[1] != letter:
                errors.append(ValidationError(
                    code="CELL_CONFLICT",
                    message=(
                        f"Word '{placement.word}' needs '{letter}' at ({cell.row}, {cell.col}) "
                        f"but '{owner[0]}' needs '{owner[1]}'"
                    ),
                    word=placement.word,
                    cell=cell
                ))
                continue
            cell_usage[cell] = (placement.word, letter)

    return errors
