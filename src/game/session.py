"""
Game session running a sequence of word search rounds.

Draws words from the word bank for each round, builds grids through a
single seeded generator, and optionally drives an interactive terminal
loop.
"""

import random
import re
from datetime import datetime
from typing import Callable, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..engine.directions import Cell
from ..engine.errors import InvalidInput
from ..engine.generator import GridGenerator
from .models import PuzzleConfig, RoundResult, GameResult
from .round import WordSearchRound
from .wordbank import get_random_words


CELL_PATTERN = re.compile(r'(\d+)\s*[,:]\s*(\d+)')


def parse_cells(text: str) -> List[Cell]:
    """
    Parse a typed selection such as "0,0 0,1 0,2" into cells.

    Raises:
        ValueError: If no cells could be read
    """
    cells = [Cell(int(r), int(c)) for r, c in CELL_PATTERN.findall(text)]
    if not cells:
        raise ValueError(f"No cells found in {text!r}; use row,col pairs like '0,0 0,1'")
    return cells


class WordSearchGame(BaseModel):
    """
    Top-level orchestrator for a word search game.

    Attributes:
        config: Game configuration
        generator: Grid generator shared by every round
        current_round: The round being played, if any
        history: Results of finished rounds
        end_reason: Why the game ended
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: PuzzleConfig = Field(default_factory=PuzzleConfig)
    generator: Optional[GridGenerator] = None
    current_round: Optional[WordSearchRound] = None
    history: List[RoundResult] = Field(default_factory=list)
    end_reason: str = ""
    started_at: Optional[datetime] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)
        if self.generator is None:
            self.generator = GridGenerator.with_rng(
                self._rng,
                grid_size=self.config.grid_size,
                max_attempts=self.config.max_attempts,
                max_word_attempts=self.config.max_word_attempts,
            )

    @classmethod
    def create(cls, config: Optional[PuzzleConfig] = None, **config_kwargs) -> "WordSearchGame":
        """
        Factory method to create a game from a config.

        Args:
            config: Optional PuzzleConfig instance
            **config_kwargs: Config parameters if config not provided
        """
        if config is None:
            config = PuzzleConfig(**config_kwargs)
        return cls(config=config)

    @property
    def round_number(self) -> int:
        """Number of rounds started so far."""
        return len(self.history) + (1 if self.current_round else 0)

    @property
    def is_finished(self) -> bool:
        """The last round is complete, or the game was ended early."""
        if self.end_reason:
            return True
        return (
            self.round_number >= self.config.total_rounds
            and self.current_round is not None
            and self.current_round.is_complete
        )

    def pick_words(self) -> List[str]:
        """Words for the next round: the configured words or a draw from the bank."""
        if self.config.words:
            return list(self.config.words)
        size = self.config.grid_size
        entries = get_random_words(
            self.config.difficulty,
            self.config.round_word_count,
            rng=self._rng,
            max_length=size
        )
        if not entries:
            raise InvalidInput(
                f"No {self.config.difficulty} words fit a {size}x{size} grid; use a larger grid or an easier difficulty"
            )
        return [e.word for e in entries]

    def start_round(self) -> WordSearchRound:
        """
        Start the next round, recording the current one first.

        Raises:
            RuntimeError: If every round has already been played
            InvalidInput: If the configured words cannot fit the grid
            GenerationFailed: If no valid grid could be produced
        """
        if self.started_at is None:
            self.started_at = datetime.now()

        if self.current_round is not None:
            self._record_round()

        if len(self.history) >= self.config.total_rounds:
            raise RuntimeError(f"All {self.config.total_rounds} rounds have been played")

        self.current_round = WordSearchRound.create(
            self.pick_words(),
            generator=self.generator,
            round_number=len(self.history) + 1,
            straight_only=self.config.straight_only,
        )
        return self.current_round

    def next_round(self) -> Optional[WordSearchRound]:
        """Start the next round, or return None when the game is over."""
        if self.round_number >= self.config.total_rounds:
            if self.current_round is not None:
                self._record_round()
            if not self.end_reason:
                self.end_reason = "All rounds played"
            return None
        return self.start_round()

    def _record_round(self) -> None:
        current = self.current_round
        self.history.append(RoundResult(
            round_number=current.round_number,
            words=list(current.words),
            found_words=list(current.found_words),
            grid=current.grid.rows,
            completed=current.is_complete,
        ))
        self.current_round = None

    def get_result(self) -> GameResult:
        """
        Get the game result.

        The round in progress is included without being recorded.
        """
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0

        rounds = list(self.history)
        if self.current_round is not None:
            current = self.current_round
            rounds.append(RoundResult(
                round_number=current.round_number,
                words=list(current.words),
                found_words=list(current.found_words),
                grid=current.grid.rows,
                completed=current.is_complete,
            ))

        return GameResult(
            config=self.config,
            rounds=rounds,
            end_reason=self.end_reason,
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
        )

    def run(
        self,
        read_input: Callable[[str], str] = input,
        verbose: bool = False,
    ) -> GameResult:
        """
        Play the game interactively in the terminal.

        Each line is a selection of row,col pairs ("0,0 0,1 0,2").
        "skip" ends the current round, "quit" ends the game.

        Args:
            read_input: Prompt function returning the player's line
            verbose: If True, print extra progress to stdout

        Returns:
            GameResult for all rounds played
        """
        if self.current_round is None:
            self.start_round()

        if verbose:
            print(f"Starting game: {self.config.difficulty}, {self.config.total_rounds} rounds")
            print(f"Grid: {self.config.grid_size}x{self.config.grid_size}")
            print("-" * 40)

        while self.current_round is not None:
            current = self.current_round
            print(f"\nRound {current.round_number}/{self.config.total_rounds}")
            print(current.grid.render(highlight=current.found_cells(), coordinates=True))
            print(f"Words: {' '.join(current.remaining_words)}")
            print(f"Found: {len(current.found_words)}/{len(current.words)}")

            try:
                line = read_input("> ").strip()
            except EOFError:
                line = "quit"

            command = line.lower()
            if command == "quit":
                self.end_reason = "Quit by player"
                break

            if command != "skip":
                try:
                    cells = parse_cells(line)
                    word = current.select_path(cells)
                except ValueError as e:
                    print(f"❌ {e}")
                    continue

                current.clear_selection()
                if word:
                    print(f"✓ Found {word}!")
                else:
                    print("✗ No word there")
                    continue

                if not current.is_complete:
                    continue

                print(f"\n*** Round {current.round_number} complete! ***")

            self.next_round()

        if verbose:
            print("-" * 40)
            print(f"Game over: {self.end_reason}")

        return self.get_result()
