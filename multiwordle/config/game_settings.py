"""
Game Configuration Constants Module

This module defines the fixed rules of the sentence game and the
validation applied to the secret sentence before the server starts.
"""

from typing import List, Final, Sequence

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every secret and guess word.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""


def validate_secret_words(words: Sequence[str], word_length: int = WORD_LENGTH) -> List[str]:
    """
    Validates an already split secret sentence and returns it in canonical form.

    Args:
        words: Secret words in sentence order
        word_length: Required number of letters per word

    Returns:
        List[str]: The secret words converted to uppercase

    Raises:
        ValueError: If the sentence is empty or any word is not exactly
            ``word_length`` ASCII letters. The message names the word.
    """
    if not words:
        raise ValueError(f"Please provide at least one {word_length}-letter word.")

    for word in words:
        if not isinstance(word, str) or len(word) != word_length:
            raise ValueError(f"Each word must be {word_length} letters: '{word}' is not")
        # Non-ASCII letters can change length when uppercased (e.g. 'ß' -> 'SS')
        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return [word.upper() for word in words]


def parse_secret_sentence(raw: str, word_length: int = WORD_LENGTH) -> List[str]:
    """Split a whitespace separated sentence and validate every word."""
    return validate_secret_words((raw or "").split(), word_length)


if __name__ == "__main__":
    import sys

    try:
        print(f" Secret sentence: {parse_secret_sentence(' '.join(sys.argv[1:]))}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
