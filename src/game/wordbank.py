"""Static word bank with difficulty tiers and random selection helpers."""

import random
import unicodedata
from pathlib import Path
from typing import List, Optional

import yaml

from .models import BankWord, Difficulty


WORD_BANK_PATH = Path(__file__).parent / "data" / "word_bank.yaml"


def load_word_bank(path: Path = WORD_BANK_PATH) -> List[BankWord]:
    """Load word bank entries from a YAML file keyed by difficulty."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    entries: List[BankWord] = []
    for difficulty, words in data.items():
        for entry in words or []:
            entries.append(BankWord(difficulty=difficulty, **entry))
    return entries


WORD_BANK: List[BankWord] = load_word_bank()


def normalize_word(word: str) -> str:
    """Uppercase, strip accents and drop everything outside A-Z."""
    word = str(word or "").strip().upper()
    word = ''.join(
        ch for ch in unicodedata.normalize('NFD', word)
        if unicodedata.category(ch) != 'Mn'
    )
    return ''.join(ch for ch in word if 'A' <= ch <= 'Z')


def get_random_words(
    difficulty: Difficulty,
    count: int,
    rng: Optional[random.Random] = None,
    max_length: Optional[int] = None
) -> List[BankWord]:
    """
    Pick up to `count` distinct words of one difficulty.

    With `max_length`, longer words are left out of the draw. Returns fewer
    than `count` words if the tier is smaller.
    """
    rng = rng or random.Random()
    pool = [
        w for w in WORD_BANK
        if w.difficulty == difficulty and (max_length is None or len(w.word) <= max_length)
    ]
    return rng.sample(pool, min(count, len(pool)))


def get_random_word(difficulty: Difficulty, rng: Optional[random.Random] = None) -> BankWord:
    rng = rng or random.Random()
    pool = [w for w in WORD_BANK if w.difficulty == difficulty]
    if not pool:
        raise ValueError(f"No words with difficulty '{difficulty}'")
    return rng.choice(pool)


def get_words_by_length(
    length: int,
    count: int,
    rng: Optional[random.Random] = None
) -> List[BankWord]:
    """Pick up to `count` words with exactly `length` letters."""
    rng = rng or random.Random()
    pool = [w for w in WORD_BANK if len(w.word) == length]
    return rng.sample(pool, min(count, len(pool)))


def is_valid_word(word: str) -> bool:
    """Check if a word exists in the word bank (case-insensitive)."""
    word = word.upper()
    return any(w.word == word for w in WORD_BANK)
