"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GameStatus, GuessResult, LetterFeedback

__all__ = ['GameState', 'GameStatus', 'GuessResult', 'LetterFeedback']
