"""
Round state for a single word search grid.

Owns the caller-side state the engine never touches: the player's current
selection and the set of words found so far.
"""

from typing import Dict, Iterable, List, Optional, Sequence
from pydantic import BaseModel, Field

from ..engine.directions import Cell, in_bounds, is_adjacent, to_cell
from ..engine.generator import GridGenerator
from ..engine.models import Grid
from ..engine.resolver import is_contiguous, resolve


class WordSearchRound(BaseModel):
    """
    One grid and the player's progress on it.

    Attributes:
        round_number: 1-based position of the round in its game
        grid: The generated grid
        words: Target words, in the order given
        found_words: Words found so far, in the order found
        selection: Cells in the current gesture
        straight_only: Only accept straight-line selections
    """

    round_number: int = Field(default=1, ge=1)
    grid: Grid
    words: List[str] = Field(default_factory=list)
    found_words: List[str] = Field(default_factory=list)
    selection: List[Cell] = Field(default_factory=list)
    straight_only: bool = False

    @classmethod
    def create(
        cls,
        words: Iterable[str],
        generator: Optional[GridGenerator] = None,
        **kwargs
    ) -> "WordSearchRound":
        """
        Factory method to generate a grid and start a round on it.

        Args:
            words: Distinct uppercase target words
            generator: Generator to use (default: a fresh 8x8 generator)
            **kwargs: Extra round fields (round_number, straight_only)

        Raises:
            InvalidInput: If the words cannot be placed in the grid
            GenerationFailed: If no valid grid could be produced
        """
        words = list(words)
        generator = generator or GridGenerator()
        grid = generator.generate(words)
        return cls(grid=grid, words=words, **kwargs)

    @property
    def remaining_words(self) -> List[str]:
        return [w for w in self.words if w not in self.found_words]

    @property
    def is_complete(self) -> bool:
        """All target words have been found."""
        return not self.remaining_words

    def select(self, row: int, col: int) -> Optional[str]:
        """
        Add a tapped cell to the selection and check for a found word.

        Tapping a cell that is already selected drops it and everything
        after it. Tapping a cell that does not touch the last selected cell
        starts a new selection from that cell.

        Returns:
            The newly found word, or None

        Raises:
            ValueError: If the cell is outside the grid
        """
        cell = Cell(row, col)
        if not in_bounds(cell, self.grid.size):
            raise ValueError(f"Cell ({row}, {col}) is outside the {self.grid.size}x{self.grid.size} grid")

        if cell in self.selection:
            self.selection = self.selection[:self.selection.index(cell)]
            return None

        if self.selection and not is_adjacent(self.selection[-1], cell):
            self.selection = []

        self.selection.append(cell)
        return self._check_selection()

    def select_path(self, cells: Iterable[Sequence[int]]) -> Optional[str]:
        """
        Select a whole gesture at once, starting from an empty selection.

        A gesture with a gap between consecutive cells selects nothing.
        """
        self.clear_selection()
        path = [to_cell(cell) for cell in cells]
        if not is_contiguous(path):
            return None

        found = None
        for row, col in path:
            found = self.select(row, col) or found
        return found

    def clear_selection(self) -> None:
        self.selection = []

    def _check_selection(self) -> Optional[str]:
        word = resolve(
            self.selection,
            self.grid,
            self.remaining_words,
            straight_only=self.straight_only,
        )
        if word is not None:
            self.found_words.append(word)
            self.clear_selection()
        return word

    def found_cells(self) -> List[Cell]:
        """Cells of the recorded placements of every found word."""
        cells: List[Cell] = []
        for word in self.found_words:
            placement = self.grid.placement_for(word)
            if placement:
                cells.extend(placement.cells)
        return cells

    def get_state(self) -> Dict:
        """
        Get the current round state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "round_number": self.round_number,
            "words": self.words,
            "found_words": self.found_words,
            "remaining_words": self.remaining_words,
            "selection": [list(c) for c in self.selection],
            "is_complete": self.is_complete,
            "grid": self.grid.get_state(),
        }
