"""Word bank, rounds and game sessions built on the word search engine."""

from .models import (
    Difficulty,
    BankWord,
    DifficultySettings,
    DIFFICULTY_SETTINGS,
    PuzzleConfig,
    RoundResult,
    GameResult,
)
from .wordbank import (
    WORD_BANK,
    load_word_bank,
    normalize_word,
    get_random_words,
    get_random_word,
    get_words_by_length,
    is_valid_word,
)
from .round import WordSearchRound
from .session import WordSearchGame, parse_cells

__all__ = [
    "Difficulty",
    "BankWord",
    "DifficultySettings",
    "DIFFICULTY_SETTINGS",
    "PuzzleConfig",
    "RoundResult",
    "GameResult",
    "WORD_BANK",
    "load_word_bank",
    "normalize_word",
    "get_random_words",
    "get_random_word",
    "get_words_by_length",
    "is_valid_word",
    "WordSearchRound",
    "WordSearchGame",
    "parse_cells",
]
