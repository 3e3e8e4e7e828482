"""
Game states for TicTacToe.
The game moves through PlayerTurn -> CheckWinner -> (PlayerTurn | GameOver).
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from .config import GameConfig

if TYPE_CHECKING:
    from .game import Game


class GamePhase(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class GameState(ABC):
    """One step of the game. Only the active state changes the game."""

    @abstractmethod
    def play(self, game: "Game"):
        """Run this state once."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PlayerTurnState(GameState):
    """
    Ask the current player for a move.

    An invalid move keeps this state active, so the same player is asked
    again on the next step.
    """

    def play(self, game: "Game"):
        player = game.current_player
        game.report(GameConfig.PROMPT_MESSAGE.format(
            name=player.name,
            symbol=player.symbol,
            first=GameConfig.FIRST_SLOT,
            last=GameConfig.LAST_SLOT,
        ))

        index = player.get_move(game.board)
        if index is None:
            message = GameConfig.INVALID_MOVE_MESSAGE
            if player.last_error:
                message = f"{player.last_error} {message}"
            game.report(message)
            return

        game.board.place_mark(index, player.symbol)
        game.set_state(CheckWinnerState())


class CheckWinnerState(GameState):
    """Look at the board after a move and decide what comes next."""

    def play(self, game: "Game"):
        if game.echo_board:
            game.report(game.board.render())

        result = game.board.check_winner()
        if result is None:
            game.switch_player()
            game.set_state(PlayerTurnState())
        else:
            game.set_state(GameOverState(result))


class GameOverState(GameState):
    """Record the result, announce it, and stop the game loop."""

    def __init__(self, result: str):
        self.result = result

    def play(self, game: "Game"):
        game.finish(self.result)
        game.report(game.describe_outcome())

    def __repr__(self) -> str:
        return f"GameOverState(result={self.result!r})"
