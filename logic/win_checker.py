"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Sequence, Tuple

from .config import GameConfig


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same symbol in a row
    (horizontally, vertically, or diagonally)

    Cells are given as a flat sequence of 9 strings. An empty cell holds
    its own 1-based slot label, a marked cell holds a player symbol.
    """

    # All possible winning lines (as index triples into the flat board)
    WINNING_LINES: List[Tuple[int, int, int]] = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    @staticmethod
    def is_empty(cells: Sequence[str], index: int) -> bool:
        """True if the cell still holds its own slot label."""
        return cells[index] == str(index + 1)

    def check_winner(self, cells: Sequence[str]) -> Optional[str]:
        """
        Check if there's a winner.

        Args:
            cells: The 9 board cells.

        Returns:
            The winning symbol, or None if no line is complete.
        """
        line = self.get_winning_line(cells)
        if line is None:
            return None
        return cells[line[0]]

    def _check_line(self, cells: Sequence[str], line: Tuple[int, int, int]) -> bool:
        """
        Check if a single line is won.

        Args:
            cells: The 9 board cells.
            line: Indices of the three cells to check.

        Returns:
            True if all 3 cells are marked with the same symbol.
        """
        for index in line:
            if self.is_empty(cells, index):
                return False  # Empty cell, no winner on this line

        first, second, third = (cells[index] for index in line)
        return first == second == third

    def check_draw(self, cells: Sequence[str]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(cells) is not None:
            return False

        return not any(self.is_empty(cells, index) for index in range(len(cells)))

    def evaluate(self, cells: Sequence[str]) -> Optional[str]:
        """
        Evaluate the board.

        Returns:
            The winning symbol, GameConfig.DRAW for a full board without
            a winner, or None while the game is still open.
        """
        winner = self.check_winner(cells)
        if winner is not None:
            return winner

        if self.check_draw(cells):
            return GameConfig.DRAW

        return None

    def get_winning_line(self, cells: Sequence[str]) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Lines are checked in a fixed order (rows, columns, diagonals),
        the first complete one is returned.
        """
        for line in self.WINNING_LINES:
            if self._check_line(cells, line):
                return line
        return None
