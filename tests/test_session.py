"""Test game configuration, round progression and the interactive loop."""

import pytest

from src.engine import Cell, InvalidInput
from src.game import PuzzleConfig, WordSearchGame, WORD_BANK, parse_cells


def solve_lines(game_round):
    """Typed input lines that select every remaining word's placement."""
    return [
        ' '.join(f"{r},{c}" for r, c in game_round.grid.placement_for(word).cells)
        for word in game_round.remaining_words
    ]


def scripted(lines):
    """A read_input replacement that replays `lines` then raises EOFError."""
    remaining = list(lines)

    def read_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_input


class TestPuzzleConfig:
    """Configuration defaults and overrides."""

    def test_defaults(self):
        config = PuzzleConfig()
        assert config.difficulty == "easy"
        assert config.grid_size == 8
        assert config.round_word_count == 3
        assert config.total_rounds == 3

    @pytest.mark.parametrize("difficulty,count", [("easy", 3), ("medium", 4), ("hard", 5)])
    def test_words_per_difficulty(self, difficulty, count):
        assert PuzzleConfig(difficulty=difficulty).round_word_count == count

    def test_explicit_words_normalized(self):
        config = PuzzleConfig(words=["cat", " Dog ", "123"])
        assert config.words == ["CAT", "DOG"]
        assert config.round_word_count == 2

    def test_overrides(self):
        config = PuzzleConfig(words_per_round=6, rounds=1)
        assert config.round_word_count == 6
        assert config.total_rounds == 1

    def test_invalid_grid_size(self):
        with pytest.raises(ValueError):
            PuzzleConfig(grid_size=0)


class TestParseCells:
    """Typed selections."""

    def test_pairs(self):
        assert parse_cells("0,0 0,1 1:2") == [Cell(0, 0), Cell(0, 1), Cell(1, 2)]

    def test_no_cells(self):
        with pytest.raises(ValueError):
            parse_cells("hello")


class TestRounds:
    """Starting and advancing rounds."""

    def test_start_round_draws_from_bank(self):
        game = WordSearchGame.create(difficulty="medium", seed=1)
        current = game.start_round()
        bank = {w.word for w in WORD_BANK if w.difficulty == "medium"}

        assert current.round_number == 1
        assert len(current.words) == 4
        assert set(current.words) <= bank

    def test_fixed_words(self):
        game = WordSearchGame.create(words=["CAT", "DOG"], seed=2)
        assert game.start_round().words == ["CAT", "DOG"]

    def test_same_seed_same_game(self):
        first = WordSearchGame.create(seed=3).start_round()
        second = WordSearchGame.create(seed=3).start_round()
        assert first.words == second.words
        assert first.grid.rows == second.grid.rows

    def test_round_progression(self):
        game = WordSearchGame.create(seed=4, rounds=2)
        game.start_round()
        assert game.round_number == 1

        second = game.next_round()
        assert second.round_number == 2
        assert game.history[0].round_number == 1
        assert game.history[0].completed is False

        assert game.next_round() is None
        assert game.end_reason == "All rounds played"
        assert len(game.history) == 2

    def test_no_rounds_after_last(self):
        game = WordSearchGame.create(seed=5, rounds=1)
        game.start_round()
        with pytest.raises(RuntimeError):
            game.start_round()

    def test_is_finished_after_solving_last_round(self):
        game = WordSearchGame.create(words=["CAT", "DOG"], seed=6, rounds=1)
        current = game.start_round()
        assert game.is_finished is False
        for word in current.words:
            current.select_path(current.grid.placement_for(word).cells)
        assert game.is_finished is True

    def test_word_too_long_for_grid(self):
        game = WordSearchGame.create(words=["ELEPHANT"], grid_size=4)
        with pytest.raises(InvalidInput):
            game.start_round()

    def test_no_bank_words_fit_grid(self):
        """Hard words are seven letters or more, so a 5x5 grid has nothing to draw."""
        game = WordSearchGame.create(difficulty="hard", grid_size=5, seed=2)
        with pytest.raises(InvalidInput, match="No hard words fit a 5x5 grid"):
            game.start_round()

    def test_draw_limited_to_words_that_fit(self):
        """Medium words longer than the grid are left out of the draw."""
        game = WordSearchGame.create(difficulty="medium", grid_size=5, seed=4)
        current = game.start_round()
        assert len(current.words) == 4
        assert all(len(word) <= 5 for word in current.words)

    def test_result_includes_current_round(self):
        game = WordSearchGame.create(seed=7)
        game.start_round()
        result = game.get_result()
        assert len(result.rounds) == 1
        assert result.words_found == 0
        assert result.started_at != ""


class TestRun:
    """The interactive terminal loop."""

    def test_play_through_single_round(self, capsys):
        game = WordSearchGame.create(words=["CAT", "DOG"], seed=8, rounds=1)
        current = game.start_round()

        result = game.run(read_input=scripted(solve_lines(current)))

        assert result.end_reason == "All rounds played"
        assert result.words_found == 2
        assert result.rounds[0].completed is True
        out = capsys.readouterr().out
        assert "Found CAT" in out
        assert "Round 1 complete" in out

    def test_wrong_selection_and_bad_input(self, capsys):
        game = WordSearchGame.create(words=["CAT"], seed=9, rounds=1)
        game.start_round()

        result = game.run(read_input=scripted(["what", "quit"]))

        assert result.end_reason == "Quit by player"
        assert result.words_found == 0
        assert "No cells found" in capsys.readouterr().out

    def test_gapped_selection_is_not_found(self, capsys):
        """A typed path that jumps to the word is reported as a miss."""
        game = WordSearchGame.create(words=["CAT", "DOG"], seed=12, rounds=1)
        current = game.start_round()
        cells = current.grid.placement_for("CAT").cells
        far = next(
            (r, c) for r in range(8) for c in range(8)
            if abs(r - cells[0].row) > 1 or abs(c - cells[0].col) > 1
        )
        line = " ".join(f"{r},{c}" for r, c in [far, *cells])

        result = game.run(read_input=scripted([line, "quit"]))

        assert result.words_found == 0
        assert "No word there" in capsys.readouterr().out

    def test_skip_rounds(self):
        game = WordSearchGame.create(seed=10, rounds=2)
        result = game.run(read_input=scripted(["skip", "skip"]))

        assert result.end_reason == "All rounds played"
        assert len(result.rounds) == 2
        assert not any(r.completed for r in result.rounds)

    def test_end_of_input_quits(self):
        game = WordSearchGame.create(seed=11)
        result = game.run(read_input=scripted([]))
        assert result.end_reason == "Quit by player"
