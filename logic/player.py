"""
Players for TicTacToe.
A player has a name, a symbol, and a way to pick the next move.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, TextIO, Type

from .board import Board
from .move_validator import MoveValidator


class UnknownPlayerTypeError(ValueError):
    """Raised when the factory is asked for a player type it does not know."""

    def __init__(self, player_type: str):
        super().__init__(f"Unknown player type: {player_type!r}")
        self.player_type = player_type


class Player(ABC):
    """
    Base class for everything that can make moves.

    get_move() returns a zero-based slot index, or None when the move
    request was invalid. The reason is kept in last_error.
    """

    def __init__(self, name: str, symbol: str):
        self.name = name
        self.symbol = symbol
        self.last_error: Optional[str] = None

    @abstractmethod
    def get_move(self, board: Board) -> Optional[int]:
        """Pick the next slot on the board."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, symbol={self.symbol!r})"


class HumanPlayer(Player):
    """
    A player typing slot numbers (1-9).

    Reads one line per move from input_stream, or from input() when no
    stream is given.
    """

    def __init__(self, name: str, symbol: str, input_stream: Optional[TextIO] = None):
        super().__init__(name, symbol)
        self.input_stream = input_stream
        self.validator = MoveValidator()

    def _read_line(self) -> str:
        if self.input_stream is None:
            return input()

        line = self.input_stream.readline()
        if not line:
            raise EOFError("No more input")
        return line

    def get_move(self, board: Board) -> Optional[int]:
        raw = self._read_line()

        result = self.validator.validate_slot(board, raw)
        if not result.is_valid:
            self.last_error = result.error_message
            return None

        self.last_error = None
        return result.index


class PlayerFactory:
    """
    Creates players by type name ("human", ...).

    Type names are case-insensitive. "computer" is reserved for a future
    AI opponent and is not registered.
    """

    _player_types: Dict[str, Type[Player]] = {
        "human": HumanPlayer,
    }

    @classmethod
    def register(cls, player_type: str, player_class: Type[Player]):
        """Make a new player type available to create_player()."""
        cls._player_types[player_type.lower()] = player_class

    @classmethod
    def available_types(cls):
        return sorted(cls._player_types)

    @classmethod
    def create_player(cls, player_type: str, name: str, symbol: str, **options) -> Player:
        """
        Create a player.

        Args:
            player_type: Type name, e.g. "human".
            name: Display name.
            symbol: Symbol the player marks slots with.
            **options: Passed on to the player class (e.g. input_stream).

        Raises:
            UnknownPlayerTypeError: If the type is not registered.
        """
        player_class = cls._player_types.get(player_type.lower())
        if player_class is None:
            raise UnknownPlayerTypeError(player_type)
        return player_class(name, symbol, **options)
