"""Direction vectors and grid geometry helpers."""

import random
from enum import Enum
from typing import Dict, List, NamedTuple, Sequence, Tuple


class Cell(NamedTuple):
    """A grid coordinate."""
    row: int
    col: int


class Direction(str, Enum):
    """The six directions a word can run in."""
    HORIZONTAL = "horizontal"
    HORIZONTAL_REVERSE = "horizontal-reverse"
    VERTICAL = "vertical"
    VERTICAL_REVERSE = "vertical-reverse"
    DIAGONAL = "diagonal"
    DIAGONAL_REVERSE = "diagonal-reverse"


# Unit step (row delta, col delta) taken between consecutive letters
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.HORIZONTAL_REVERSE: (0, -1),
    Direction.VERTICAL: (1, 0),
    Direction.VERTICAL_REVERSE: (-1, 0),
    Direction.DIAGONAL: (1, 1),
    Direction.DIAGONAL_REVERSE: (1, -1),
}

DIRECTIONS: List[Direction] = list(Direction)


def to_cell(value: Sequence[int]) -> Cell:
    """Coerce a (row, col) pair, list or Cell into a Cell."""
    row, col = value
    return Cell(int(row), int(col))


def start_range(step: int, length: int, size: int) -> range:
    """
    Legal start indices along one axis for a word of `length` letters.

    A forward step must leave room after the start, a backward step must
    leave room before it, and a zero step can start anywhere.
    """
    if step > 0:
        return range(0, size - length + 1)
    if step < 0:
        return range(length - 1, size)
    return range(0, size)


def random_start(
    direction: Direction,
    length: int,
    size: int,
    rng: random.Random
) -> Cell:
    """Pick a uniformly random start that keeps the whole word in bounds."""
    d_row, d_col = DIRECTION_VECTORS[direction]
    row = rng.choice(start_range(d_row, length, size))
    col = rng.choice(start_range(d_col, length, size))
    return Cell(row, col)


def compute_cells(start: Sequence[int], direction: Direction, length: int) -> List[Cell]:
    """Cells covered by a word of `length` letters, in word order."""
    row, col = start
    d_row, d_col = DIRECTION_VECTORS[direction]
    return [Cell(row + i * d_row, col + i * d_col) for i in range(length)]


def in_bounds(cell: Sequence[int], size: int) -> bool:
    row, col = cell
    return 0 <= row < size and 0 <= col < size


def is_adjacent(a: Sequence[int], b: Sequence[int]) -> bool:
    """King-move adjacency: row and column each differ by at most one."""
    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def step_between(a: Sequence[int], b: Sequence[int]) -> Tuple[int, int]:
    return (b[0] - a[0], b[1] - a[1])
