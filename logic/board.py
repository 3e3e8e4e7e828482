"""
Board for TicTacToe.
Holds the 9 slots and knows which ones are taken.
"""

from typing import List, Optional, Tuple

from .config import GameConfig
from .win_checker import WinChecker


class Board:
    """
    The 3x3 TicTacToe board, stored as a flat list of 9 cells.

    An empty cell holds its own slot label ("1" to "9"), so the board
    prints the numbers a player has to type. A marked cell holds the
    symbol of the player who took it.
    """

    def __init__(self):
        self.cells: List[str] = [str(i + 1) for i in range(GameConfig.CELL_COUNT)]
        self.win_checker = WinChecker()

    def _check_index(self, index: int):
        if not 0 <= index < GameConfig.CELL_COUNT:
            raise IndexError(f"Slot index {index} is out of range (0-{GameConfig.CELL_COUNT - 1})")

    def is_slot_available(self, index: int) -> bool:
        """
        Check if a slot is still empty.

        Args:
            index: Zero-based slot index (0-8).

        Returns:
            True if nobody has marked the slot yet.
        """
        self._check_index(index)
        return self.win_checker.is_empty(self.cells, index)

    def place_mark(self, index: int, symbol: str):
        """
        Put a symbol on a slot.

        The caller must check is_slot_available() first, an occupied
        slot is overwritten without complaint.
        """
        self._check_index(index)
        self.cells[index] = symbol

    def symbol_at(self, index: int) -> Optional[str]:
        """Get the symbol on a slot, or None if it is empty."""
        if self.is_slot_available(index):
            return None
        return self.cells[index]

    def check_winner(self) -> Optional[str]:
        """
        Check the board for a result.

        Returns:
            The winning symbol, "draw" if the board is full, or None if
            the game goes on.
        """
        return self.win_checker.evaluate(self.cells)

    def get_winning_line(self) -> Optional[Tuple[int, int, int]]:
        """Get the indices of the winning line, if any."""
        return self.win_checker.get_winning_line(self.cells)

    def get_empty_slots(self) -> List[int]:
        """
        Get all empty slots on the board.

        Returns:
            List of zero-based indices.
        """
        return [i for i in range(GameConfig.CELL_COUNT) if self.is_slot_available(i)]

    def is_full(self) -> bool:
        return not self.get_empty_slots()

    @staticmethod
    def to_row_col(index: int) -> Tuple[int, int]:
        """Convert a slot index to (row, col)."""
        return divmod(index, GameConfig.BOARD_SIZE)

    @staticmethod
    def to_index(row: int, col: int) -> int:
        """Convert (row, col) to a slot index."""
        return row * GameConfig.BOARD_SIZE + col

    def render(self) -> str:
        """Render the board as text, one row per line."""
        size = GameConfig.BOARD_SIZE
        lines = ["|---|---|---|"]
        for start in range(0, GameConfig.CELL_COUNT, size):
            row = self.cells[start:start + size]
            lines.append("| " + " | ".join(row) + " |")
            if start < GameConfig.CELL_COUNT - size:
                lines.append("|-----------|")
        lines.append("|---|---|---|")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print(self.render())

    def __str__(self) -> str:
        return self.render()
