"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class LetterFeedback(Enum):
    """Evaluation of a single guess letter against its secret word."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class GameStatus(Enum):
    """Lifecycle of a game between two resets."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass
class GameState:
    """Snapshot of the live game returned to callers."""
    words: List[str]
    guesses: List[List[str]]
    feedback: List[List[List[str]]]  # Feedback as strings for JSON serialization
    game_over: bool
    won: bool
    status: str
    attempts_used: int
    max_attempts: int
    word_length: int


@dataclass
class GuessResult:
    """Outcome of one submitted attempt, accepted or not."""
    valid: bool
    game_over: bool
    won: bool
    words: List[str]
    guesses: List[List[str]]
    feedback: List[List[List[str]]]
    error: Optional[str] = None  # Only set when the attempt was rejected
