"""
Logic module for TicTacToe.
Handles the board, rules, players, and game states.
Shared by the console game and the windowed game.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .board import Board
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .player import Player, HumanPlayer, PlayerFactory, UnknownPlayerTypeError
from .game_state import GamePhase, GameState, PlayerTurnState, CheckWinnerState, GameOverState
from .game import Game
