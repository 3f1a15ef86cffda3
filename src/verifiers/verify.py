"""
Grid verification for generated word search puzzles.

Validates:
1. Shape (square, non-empty, one letter A-Z per cell)
2. Solvability (every word occurs in a straight line in some direction)
3. Cell ownership (words sharing a cell must agree on its letter)
4. Placement bookkeeping (recorded placements actually spell their words)
"""

from typing import Dict, Iterable, List

from ..engine.directions import compute_cells, in_bounds
from ..engine.models import Grid, WordPlacement
from .models import ValidationError, ValidationResult
from .grid import (
    GridLike,
    WORD_PATTERN,
    as_matrix,
    check_shape,
    read_cells,
    find_word,
    check_cell_ownership,
)


def validate_words(words: Iterable[str]) -> List[ValidationError]:
    """Reject words that cannot appear in a grid of letters A-Z."""
    errors: List[ValidationError] = []

    for word in words:
        if not isinstance(word, str) or not WORD_PATTERN.match(word):
            errors.append(ValidationError(
                code="INVALID_WORD",
                message=f"{word!r} is not an uppercase word of letters A-Z",
                word=word if isinstance(word, str) else None
            ))

    return errors


def validate(grid: GridLike, words: Iterable[str]) -> ValidationResult:
    """
    Re-derive every word from the grid letters alone.

    The generator's own placements are ignored, so this is the
    authoritative check before a grid is shown to a player.

    Returns a ValidationResult with:
    - valid: True if every word was found and nothing conflicts
    - errors: List of validation errors
    - words: The words that were checked
    - placements: One occurrence per word found in the grid
    """
    words = list(words)
    matrix = as_matrix(grid)

    errors = check_shape(matrix)
    if errors:
        return ValidationResult(valid=False, errors=errors, words=words)

    errors.extend(validate_words(words))

    found: Dict[str, WordPlacement] = {}
    for word in words:
        if not isinstance(word, str) or not WORD_PATTERN.match(word) or word in found:
            continue

        placement = find_word(matrix, word) if len(word) <= len(matrix) else None
        if placement is None:
            errors.append(ValidationError(
                code="WORD_NOT_FOUND",
                message=f"Word '{word}' cannot be found in the grid",
                word=word
            ))
        else:
            found[word] = placement

    errors.extend(check_cell_ownership(found.values()))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        words=words,
        placements=list(found.values()),
    )


def verify_placements(grid: Grid, words: Iterable[str]) -> ValidationResult:
    """
    Check the placements recorded on a Grid against its letters.

    Every word needs a placement whose cells follow its direction,
    stay in bounds and spell the word.
    """
    words = list(words)
    matrix = as_matrix(grid)

    errors = check_shape(matrix)
    if errors:
        return ValidationResult(valid=False, errors=errors, words=words)

    size = len(matrix)
    placed = {p.word for p in grid.placements}
    usable: List[WordPlacement] = []

    for word in words:
        if word not in placed:
            errors.append(ValidationError(
                code="MISSING_PLACEMENT",
                message=f"Word '{word}' has no placement in the grid",
                word=word
            ))

    for placement in grid.placements:
        expected = compute_cells(placement.start, placement.direction, len(placement.word))
        if placement.cells != expected:
            errors.append(ValidationError(
                code="PLACEMENT_SHAPE",
                message=(
                    f"Cells of '{placement.word}' do not run {placement.direction.value} "
                    f"from ({placement.start.row}, {placement.start.col})"
                ),
                word=placement.word
            ))
            continue

        outside = [cell for cell in placement.cells if not in_bounds(cell, size)]
        if outside:
            errors.append(ValidationError(
                code="PLACEMENT_OUT_OF_BOUNDS",
                message=f"Word '{placement.word}' leaves the grid at ({outside[0].row}, {outside[0].col})",
                word=placement.word,
                cell=outside[0]
            ))
            continue

        spelled = read_cells(matrix, placement.cells)
        if spelled != placement.word:
            errors.append(ValidationError(
                code="PLACEMENT_MISMATCH",
                message=f"Placement of '{placement.word}' spells '{spelled}'",
                word=placement.word
            ))

        usable.append(placement)

    errors.extend(check_cell_ownership(usable))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        words=words,
        placements=list(grid.placements),
    )
