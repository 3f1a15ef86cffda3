"""
Word search grid generation.

Words are placed longest-first with random directions and starts. A word
that runs out of tries abandons the whole attempt, and the next attempt
starts again from a fresh empty grid (retry by full restart, no
incremental backtracking). A finished grid must pass validation before
it is returned.
"""

import random
import string
from typing import Iterable, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .directions import DIRECTIONS, Cell, compute_cells, in_bounds, random_start
from .errors import GenerationFailed, InvalidInput, PlacementExhausted, ValidationFailed
from .models import Grid, WordPlacement


ALPHABET = string.ascii_uppercase
EMPTY = ''

DEFAULT_GRID_SIZE = 8
MAX_ATTEMPTS = 100
MAX_WORD_ATTEMPTS = 50
MIN_WORD_LENGTH = 2


def check_words(words: Iterable[str], grid_size: int) -> List[str]:
    """
    Check a word list can be placed at all.

    Raises:
        InvalidInput: On a bad grid size, an empty list, a word that is not
            uppercase A-Z, a one-letter word, a word longer than the grid,
            or a duplicate word
    """
    if grid_size < 1:
        raise InvalidInput(f"Grid size must be at least 1, got {grid_size}")

    words = list(words)
    if not words:
        raise InvalidInput("At least one word is required")

    seen = set()
    for word in words:
        if not isinstance(word, str) or not word.isascii() or not word.isalpha() or not word.isupper():
            raise InvalidInput(f"Word {word!r} must be uppercase letters A-Z")
        if len(word) < MIN_WORD_LENGTH:
            raise InvalidInput(
                f"Word '{word}' is shorter than {MIN_WORD_LENGTH} letters and can never be selected"
            )
        if len(word) > grid_size:
            raise InvalidInput(
                f"Word '{word}' ({len(word)} letters) does not fit a {grid_size}x{grid_size} grid"
            )
        if word in seen:
            raise InvalidInput(f"Duplicate word '{word}'")
        seen.add(word)

    return words


class GridGenerator(BaseModel):
    """
    Builds validated word search grids.

    Attributes:
        grid_size: Width and height of the square grid
        max_attempts: Full generation attempts before giving up
        max_word_attempts: Placement tries per word within one attempt
        seed: Optional random seed for reproducibility
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    grid_size: int = Field(default=DEFAULT_GRID_SIZE, ge=1)
    max_attempts: int = Field(default=MAX_ATTEMPTS, ge=1)
    max_word_attempts: int = Field(default=MAX_WORD_ATTEMPTS, ge=1)
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def with_rng(cls, rng: random.Random, **kwargs) -> "GridGenerator":
        """Create a generator that draws from an existing random source."""
        generator = cls(**kwargs)
        generator._rng = rng
        return generator

    def generate(self, words: Iterable[str]) -> Grid:
        """
        Generate a grid containing every word.

        Args:
            words: Distinct uppercase words, each no longer than the grid

        Returns:
            A fully populated, validated Grid

        Raises:
            InvalidInput: If the words can never be placed
            GenerationFailed: If every attempt failed
        """
        words = check_words(words, self.grid_size)
        last_error: Optional[Exception] = None

        for _ in range(self.max_attempts):
            try:
                return self._attempt(words)
            except (PlacementExhausted, ValidationFailed) as e:
                last_error = e

        raise GenerationFailed(self.max_attempts, last_error)

    def _attempt(self, words: List[str]) -> Grid:
        """Run one generation attempt on a fresh empty grid."""
        from ..verifiers.verify import validate

        cells = [[EMPTY] * self.grid_size for _ in range(self.grid_size)]
        placements: List[WordPlacement] = []

        for word in sorted(words, key=len, reverse=True):
            placements.append(self._place_word(word, cells))

        self._fill_empty_cells(cells)

        grid = Grid(cells=cells, placements=placements)
        result = validate(grid, words)
        if not result.valid:
            raise ValidationFailed(result)

        return grid

    def _place_word(self, word: str, cells: List[List[str]]) -> WordPlacement:
        """Try random directions and starts until the word fits."""
        for _ in range(self.max_word_attempts):
            direction = self._rng.choice(DIRECTIONS)
            start = random_start(direction, len(word), self.grid_size, self._rng)
            targets = compute_cells(start, direction, len(word))

            if not self._can_place(word, targets, cells):
                continue

            for (row, col), letter in zip(targets, word):
                cells[row][col] = letter

            return WordPlacement(word=word, start=start, direction=direction, cells=targets)

        raise PlacementExhausted(word, self.max_word_attempts)

    def _can_place(self, word: str, targets: List[Cell], cells: List[List[str]]) -> bool:
        """Every target cell must be in bounds and empty or already hold the same letter."""
        for (row, col), letter in zip(targets, word):
            if not in_bounds((row, col), self.grid_size):
                return False
            if cells[row][col] not in (EMPTY, letter):
                return False
        return True

    def _fill_empty_cells(self, cells: List[List[str]]) -> None:
        for row in cells:
            for col, letter in enumerate(row):
                if letter == EMPTY:
                    row[col] = self._rng.choice(ALPHABET)


def generate(
    words: Iterable[str],
    grid_size: int = DEFAULT_GRID_SIZE,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    max_attempts: int = MAX_ATTEMPTS,
    max_word_attempts: int = MAX_WORD_ATTEMPTS,
) -> Grid:
    """Generate a validated grid; see GridGenerator.generate."""
    if grid_size < 1:
        raise InvalidInput(f"Grid size must be at least 1, got {grid_size}")

    settings = dict(
        grid_size=grid_size,
        max_attempts=max_attempts,
        max_word_attempts=max_word_attempts,
        seed=seed,
    )
    if rng is not None:
        generator = GridGenerator.with_rng(rng, **settings)
    else:
        generator = GridGenerator(**settings)

    return generator.generate(words)
