"""Grid verification for word search puzzles."""

from .verify import validate, validate_words, verify_placements
from .models import ValidationError, ValidationResult
from .grid import as_matrix, check_shape, read_cells, find_word, check_cell_ownership

__all__ = [
    # Main verification
    "validate",
    "validate_words",
    "verify_placements",
    # Models
    "ValidationError",
    "ValidationResult",
    # Grid utilities
    "as_matrix",
    "check_shape",
    "read_cells",
    "find_word",
    "check_cell_ownership",
]
