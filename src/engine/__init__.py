"""Word search grid generation and selection resolving."""

from .errors import (
    WordSearchError,
    InvalidInput,
    PlacementExhausted,
    ValidationFailed,
    GenerationFailed,
)
from .directions import (
    Cell,
    Direction,
    DIRECTIONS,
    DIRECTION_VECTORS,
    compute_cells,
    in_bounds,
    is_adjacent,
    random_start,
    start_range,
)
from .models import WordPlacement, Grid
from .generator import GridGenerator, generate, check_words, DEFAULT_GRID_SIZE
from .resolver import resolve, is_contiguous, is_straight

__all__ = [
    # Errors
    "WordSearchError",
    "InvalidInput",
    "PlacementExhausted",
    "ValidationFailed",
    "GenerationFailed",
    # Geometry
    "Cell",
    "Direction",
    "DIRECTIONS",
    "DIRECTION_VECTORS",
    "compute_cells",
    "in_bounds",
    "is_adjacent",
    "random_start",
    "start_range",
    # Models
    "WordPlacement",
    "Grid",
    # Generation
    "GridGenerator",
    "generate",
    "check_words",
    "DEFAULT_GRID_SIZE",
    # Resolving
    "resolve",
    "is_contiguous",
    "is_straight",
]
