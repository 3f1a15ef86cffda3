"""
Pydantic models for the game layer.

Configuration and result models shared by the word bank, rounds and the
game session. The main logic classes (WordSearchRound, WordSearchGame)
live in their own files.
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from ..engine.generator import DEFAULT_GRID_SIZE, MAX_ATTEMPTS, MAX_WORD_ATTEMPTS


# Type aliases
Difficulty = Literal["easy", "medium", "hard"]


class BankWord(BaseModel):
    """A word bank entry."""
    word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    definition: str = ""
    difficulty: Difficulty


class DifficultySettings(BaseModel):
    """Round settings for one difficulty level."""
    words_per_round: int = Field(..., ge=1)
    rounds: int = Field(default=3, ge=1)


DIFFICULTY_SETTINGS: Dict[str, DifficultySettings] = {
    "easy": DifficultySettings(words_per_round=3),
    "medium": DifficultySettings(words_per_round=4),
    "hard": DifficultySettings(words_per_round=5),
}


class PuzzleConfig(BaseModel):
    """Configuration for a word search game."""
    difficulty: Difficulty = "easy"
    grid_size: int = Field(default=DEFAULT_GRID_SIZE, ge=1)
    words_per_round: Optional[int] = Field(default=None, ge=1)
    rounds: Optional[int] = Field(default=None, ge=1)
    seed: Optional[int] = None
    words: List[str] = Field(default_factory=list)  # Fixed words for every round instead of the bank
    straight_only: bool = False
    max_attempts: int = Field(default=MAX_ATTEMPTS, ge=1)
    max_word_attempts: int = Field(default=MAX_WORD_ATTEMPTS, ge=1)

    @field_validator("words")
    @classmethod
    def normalize_words(cls, words: List[str]) -> List[str]:
        from .wordbank import normalize_word
        return [w for w in (normalize_word(word) for word in words) if w]

    @property
    def settings(self) -> DifficultySettings:
        return DIFFICULTY_SETTINGS[self.difficulty]

    @property
    def round_word_count(self) -> int:
        """Number of words per round (explicit words win over the difficulty default)."""
        if self.words:
            return len(self.words)
        return self.words_per_round or self.settings.words_per_round

    @property
    def total_rounds(self) -> int:
        return self.rounds or self.settings.rounds


class RoundResult(BaseModel):
    """Outcome of a single round."""
    round_number: int
    words: List[str] = Field(default_factory=list)
    found_words: List[str] = Field(default_factory=list)
    grid: List[str] = Field(default_factory=list)  # Row strings
    completed: bool = False


class GameResult(BaseModel):
    """Result of a complete game."""
    config: PuzzleConfig
    rounds: List[RoundResult] = Field(default_factory=list)
    end_reason: str = ""
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0

    @property
    def words_found(self) -> int:
        return sum(len(r.found_words) for r in self.rounds)
