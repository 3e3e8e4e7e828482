"""
Game orchestration for TicTacToe.
Holds the board and both players, and drives the game states.
"""

from typing import Callable, Optional, Tuple

from .board import Board
from .config import GameConfig
from .game_state import GamePhase, GameState, PlayerTurnState
from .player import Player


class Game:
    """
    A single TicTacToe match.

    Game flow:
    1. Current player picks a slot (PlayerTurnState)
    2. Board is checked for a winner or a draw (CheckWinnerState)
    3. Either the other player moves next, or the game ends (GameOverState)

    Messages go through the output callable (print by default).
    """

    def __init__(
        self,
        player1: Player,
        player2: Player,
        board: Optional[Board] = None,
        output: Callable[[str], None] = print,
        echo_board: bool = True
    ):
        """
        Initialize the game.

        Args:
            player1: Player who moves first.
            player2: Second player.
            board: Board to play on (new empty board by default).
            output: Where messages are sent.
            echo_board: If True, report the board after every move.
        """
        self.board = board if board is not None else Board()
        self.players: Tuple[Player, Player] = (player1, player2)
        self.current_player = player1
        self.state: GameState = PlayerTurnState()
        self.output = output
        self.echo_board = echo_board

        # Game result
        self.winner: Optional[str] = None
        self.finished = False
        self.phase = GamePhase.IN_PROGRESS

    def start(self):
        """Play the game until it is finished."""
        self.report(GameConfig.WELCOME_MESSAGE)
        self.report(self.board.render())

        while not self.finished:
            self.step()

    def step(self):
        """Run the active state once. Does nothing after the game ended."""
        if self.finished:
            return
        self.state.play(self)

    def report(self, message: str):
        self.output(message)

    def set_state(self, state: GameState):
        self.state = state

    def switch_player(self):
        """Hand the turn to the other player."""
        first, second = self.players
        self.current_player = second if self.current_player is first else first

    def finish(self, result: str):
        """
        End the game.

        Args:
            result: The winning symbol, or GameConfig.DRAW.
        """
        self.winner = result
        self.finished = True
        self.phase = GamePhase.DRAW if result == GameConfig.DRAW else GamePhase.WON

    @property
    def is_draw(self) -> bool:
        return self.phase == GamePhase.DRAW

    @property
    def winning_player(self) -> Optional[Player]:
        """The player whose symbol won, or None for a draw or open game."""
        if self.phase != GamePhase.WON:
            return None

        for player in self.players:
            if player.symbol == self.winner:
                return player
        return None

    def describe_outcome(self) -> str:
        """Get the end-of-game message."""
        if self.is_draw:
            return GameConfig.DRAW_MESSAGE

        player = self.winning_player
        if player is None:
            return f"{self.winner} has won!"
        return GameConfig.WIN_MESSAGE.format(name=player.name, symbol=player.symbol)
