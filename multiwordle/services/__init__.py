"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, evaluate_guess

__all__ = ['GameService', 'evaluate_guess']
