"""Exceptions raised by the word search engine."""

from typing import Optional


class WordSearchError(Exception):
    """Base class for all engine errors."""


class InvalidInput(WordSearchError, ValueError):
    """The word list or grid size can never produce a grid."""


class PlacementExhausted(WordSearchError):
    """A word ran out of placement tries during a single generation attempt."""

    def __init__(self, word: str, tries: int):
        self.word = word
        self.tries = tries
        super().__init__(f"Could not place word '{word}' after {tries} tries")


class ValidationFailed(WordSearchError):
    """A fully populated grid did not pass validation."""

    def __init__(self, result):
        self.result = result
        messages = ", ".join(e.message for e in result.errors)
        super().__init__(f"Grid validation failed: {messages}")


class GenerationFailed(WordSearchError, RuntimeError):
    """Every generation attempt failed; no grid is produced."""

    def __init__(self, attempts: int, last_error: Optional[Exception] = None):
        self.attempts = attempts
        self.last_error = last_error
        message = f"Could not generate a valid grid after {attempts} attempts"
        if last_error is not None:
            message += f": {last_error}"
        super().__init__(message)
