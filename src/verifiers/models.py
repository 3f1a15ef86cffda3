"""Data models for grid verification."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..engine.directions import Cell
from ..engine.models import WordPlacement


class ValidationError(BaseModel):
    """A single validation error."""
    code: str
    message: str
    word: Optional[str] = None
    cell: Optional[Cell] = None


class ValidationResult(BaseModel):
    """Result of grid validation."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    placements: List[WordPlacement] = Field(default_factory=list)  # Occurrences found in the grid
