"""Data models for generated grids and word placements."""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, Field

from .directions import Cell, Direction


class WordPlacement(BaseModel):
    """
    Where a word sits in the grid.

    `cells` are listed in word order, so the letter at `cells[i]` is `word[i]`.
    """
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    start: Cell
    direction: Direction
    cells: List[Cell] = Field(default_factory=list)


class Grid(BaseModel):
    """
    A square letter grid together with the placement of every target word.

    Created once per round by the generator and never changed afterwards;
    found state is tracked by the caller.
    """
    model_config = ConfigDict(frozen=True)

    cells: Tuple[Tuple[str, ...], ...]  # Rows are tuples so letters cannot change
    placements: List[WordPlacement] = Field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.cells)

    @property
    def rows(self) -> List[str]:
        """Each row joined into a string."""
        return [''.join(row) for row in self.cells]

    @property
    def words(self) -> List[str]:
        """Placed words, in placement order."""
        return [p.word for p in self.placements]

    def letter_at(self, cell: Sequence[int]) -> str:
        row, col = cell
        return self.cells[row][col]

    def placement_for(self, word: str) -> Optional[WordPlacement]:
        for placement in self.placements:
            if placement.word == word:
                return placement
        return None

    def render(
        self,
        highlight: Optional[Iterable[Sequence[int]]] = None,
        coordinates: bool = False
    ) -> str:
        """
        Render the grid as a block of text.

        Highlighted cells are printed in lowercase. With `coordinates`,
        row and column indices are drawn along the edges.
        """
        marked = {(r, c) for r, c in (highlight or [])}
        lines = []

        if coordinates:
            lines.append('   ' + ' '.join(str(c % 10) for c in range(self.size)))

        for r, row in enumerate(self.cells):
            letters = ' '.join(
                letter.lower() if (r, c) in marked else letter
                for c, letter in enumerate(row)
            )
            lines.append(f"{r:>2} {letters}" if coordinates else letters)

        return '\n'.join(lines)

    def get_state(self) -> Dict:
        """Plain dictionary form, suitable for JSON output."""
        return {
            "size": self.size,
            "rows": self.rows,
            "placements": [
                {
                    "word": p.word,
                    "start": list(p.start),
                    "direction": p.direction.value,
                    "cells": [list(c) for c in p.cells],
                }
                for p in self.placements
            ],
        }
