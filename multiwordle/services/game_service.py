"""
Game Service

Contains the core game logic for the multi-word Wordle sentence game.
"""

import copy
import threading
from typing import Dict, List, Optional, Sequence, Tuple
from ..models.game import GameState, GameStatus, GuessResult, LetterFeedback
from ..config.game_settings import WORD_LENGTH, MAX_ATTEMPTS, validate_secret_words


def evaluate_guess(guess: str, target: str) -> List[LetterFeedback]:
    """
    Implements the authentic Wordle letter evaluation algorithm.

    Both words must be uppercase and of equal length. A secret letter that
    has been matched, exactly or as misplaced, is consumed and cannot credit
    another guess letter.
    """
    result: List[Optional[LetterFeedback]] = []

    # Working copy of the target to track letter consumption
    target_chars: List[Optional[str]] = list(target)

    # First pass: Mark all exact position matches
    for i, letter in enumerate(guess):
        if letter == target_chars[i]:
            result.append(LetterFeedback.CORRECT)
            target_chars[i] = None
        else:
            result.append(None)  # Placeholder for second pass

    # Second pass: Mark present letters and misses, scanning the target left to right
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue

        if letter in target_chars:
            result[i] = LetterFeedback.PRESENT
            target_chars[target_chars.index(letter)] = None
        else:
            result[i] = LetterFeedback.ABSENT

    return result  # type: ignore[return-value]


class GameService:
    """
    Core game service owning the single live sentence game.

    This class handles:
    - Secret sentence installation and reset
    - Attempt validation and evaluation
    - Guess and feedback history
    - Win/loss termination

    Every public operation runs under one lock so that concurrent request
    handlers cannot interleave their updates of the history and flags.
    """

    def __init__(self, secret_words: Sequence[str],
                 word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS):
        if word_length < 1:
            raise ValueError("Word length must be positive")
        if max_attempts < 1:
            raise ValueError("Maximum attempts must be positive")

        self.word_length = word_length
        self.max_attempts = max_attempts
        self._lock = threading.Lock()
        self.game: Dict = {}
        self.reset(secret_words)

    def reset(self, secret_words: Optional[Sequence[str]] = None) -> GameState:
        """
        Replaces the live game with a fresh one.

        Args:
            secret_words: New secret sentence, or None to replay the current one

        Returns:
            GameState snapshot of the new game

        Raises:
            ValueError: If the secret sentence is empty or malformed
        """
        with self._lock:
            if secret_words is None:
                words = self.game["words"]
            else:
                words = validate_secret_words(list(secret_words), self.word_length)

            self.game = {
                "words": words,
                "guesses": [],
                "feedback": [],
                "game_over": False,
                "won": False,
            }
            return self._snapshot()

    def get_state(self) -> GameState:
        """Returns a snapshot of the live game."""
        with self._lock:
            return self._snapshot()

    def is_valid_guess(self, attempt) -> Tuple[bool, str]:
        """
        Validates an attempt against the live game.

        Args:
            attempt: One guess word per secret word

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.game["game_over"]:
            return False, "Game is already over"

        if not isinstance(attempt, (list, tuple)) or not all(isinstance(word, str) for word in attempt):
            return False, "Guesses must be a list of words"

        expected = len(self.game["words"])
        if len(attempt) != expected:
            return False, f"Expected {expected} words, got {len(attempt)}"

        # Length is measured on the uppercase form that gets stored ('ß' -> 'SS')
        if any(len(word.upper()) != self.word_length for word in attempt):
            return False, f"Each guess must be exactly {self.word_length} letters"

        return True, ""

    def submit_guess(self, attempt) -> GuessResult:
        """
        Processes an attempt and updates game state.

        A rejected attempt leaves the game untouched and is reported through
        ``GuessResult.valid``; it never consumes one of the attempts.

        Args:
            attempt: One guess word per secret word

        Returns:
            GuessResult carrying the full history after the call
        """
        result, _ = self.submit_guess_with_state(attempt)
        return result

    def submit_guess_with_state(self, attempt) -> Tuple[GuessResult, GameState]:
        """
        Same as ``submit_guess``, also returning the game snapshot taken under
        the same lock.
        """
        with self._lock:
            is_valid, error = self.is_valid_guess(attempt)
            if not is_valid:
                return self._result(False, error), self._snapshot()

            game = self.game
            normalized = [word.upper() for word in attempt]

            row = []
            all_correct = True
            for guess, target in zip(normalized, game["words"]):
                evaluations = evaluate_guess(guess, target)
                if any(status != LetterFeedback.CORRECT for status in evaluations):
                    all_correct = False
                row.append([status.value for status in evaluations])

            game["guesses"].append(normalized)
            game["feedback"].append(row)

            if all_correct:
                game["won"] = True
                game["game_over"] = True
            elif len(game["guesses"]) >= self.max_attempts:
                game["game_over"] = True

            return self._result(True), self._snapshot()

    def _status(self) -> GameStatus:
        if self.game["won"]:
            return GameStatus.WON
        if self.game["game_over"]:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    def _snapshot(self) -> GameState:
        game = self.game
        return GameState(
            words=list(game["words"]),
            guesses=copy.deepcopy(game["guesses"]),
            feedback=copy.deepcopy(game["feedback"]),
            game_over=game["game_over"],
            won=game["won"],
            status=self._status().value,
            attempts_used=len(game["guesses"]),
            max_attempts=self.max_attempts,
            word_length=self.word_length
        )

    def _result(self, valid: bool, error: Optional[str] = None) -> GuessResult:
        game = self.game
        return GuessResult(
            valid=valid,
            game_over=game["game_over"],
            won=game["won"],
            words=list(game["words"]),
            guesses=copy.deepcopy(game["guesses"]),
            feedback=copy.deepcopy(game["feedback"]),
            error=error
        )
