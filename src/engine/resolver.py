"""Resolve a player's cell selection into a found word."""

from typing import Collection, Iterable, List, Optional, Sequence

from .directions import Cell, in_bounds, is_adjacent, step_between, to_cell
from .models import Grid


def is_contiguous(selection: Sequence[Cell]) -> bool:
    """Every consecutive pair of cells must be king-move adjacent."""
    return all(is_adjacent(a, b) for a, b in zip(selection, selection[1:]))


def is_straight(selection: Sequence[Cell]) -> bool:
    """All steps in the selection go the same way."""
    steps = {step_between(a, b) for a, b in zip(selection, selection[1:])}
    return len(steps) <= 1


def resolve(
    selection: Iterable[Sequence[int]],
    grid: Grid,
    remaining_words: Iterable[str],
    *,
    found_words: Optional[Collection[str]] = None,
    straight_only: bool = False,
) -> Optional[str]:
    """
    Return the word spelled by `selection`, forwards or backwards, or None.

    Any king-move-adjacent path counts, not only the straight line the word
    was placed on. Pass `straight_only=True` to require a constant direction.
    A selection that visits the same cell twice never matches.

    Args:
        selection: Ordered (row, col) cells picked by the player
        grid: The grid being played
        remaining_words: Candidate words, checked in order
        found_words: Words already found; never returned again
        straight_only: Require every step to go the same way

    Returns:
        The first remaining word equal to the selection or its reversal
    """
    cells: List[Cell] = [to_cell(c) for c in selection]

    if len(cells) < 2:
        return None
    if not all(in_bounds(cell, grid.size) for cell in cells):
        return None
    if not is_contiguous(cells):
        return None
    if len(set(cells)) != len(cells):
        return None
    if straight_only and not is_straight(cells):
        return None

    candidate = ''.join(grid.letter_at(cell) for cell in cells)
    reversed_candidate = candidate[::-1]

    excluded = set(found_words or ())
    candidates = [w for w in remaining_words if w not in excluded]

    for word in candidates:
        if word in (candidate, reversed_candidate):
            return word

    return None
