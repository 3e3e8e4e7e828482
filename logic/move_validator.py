"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import List, Optional, Union
from dataclasses import dataclass

from .board import Board
from .config import GameConfig


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    index: Optional[int] = None        # Zero-based slot, set when valid
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The slot must be a number from 1 to 9
    2. Can only place on empty slots

    Validation never changes the board.
    """

    def validate_slot(self, board: Board, slot: Union[str, int]) -> ValidationResult:
        """
        Validate a move typed by a player.

        Args:
            board: Current board.
            slot: The 1-based slot, as typed (string) or as a number.

        Returns:
            ValidationResult with the zero-based index when valid.
        """
        if isinstance(slot, str):
            text = slot.strip()
            try:
                slot = int(text)
            except ValueError:
                return ValidationResult(
                    is_valid=False,
                    error_message=f"'{text}' is not a number."
                )

        if not GameConfig.FIRST_SLOT <= slot <= GameConfig.LAST_SLOT:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Slot {slot} is out of range. "
                    f"Must be {GameConfig.FIRST_SLOT}-{GameConfig.LAST_SLOT}."
                )
            )

        return self.validate_index(board, slot - GameConfig.FIRST_SLOT)

    def validate_index(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move given as a zero-based index.

        Args:
            board: Current board.
            index: Slot index (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not 0 <= index < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid slot index {index}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        if not board.is_slot_available(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Slot {index + 1} is already taken by {board.cells[index]}."
            )

        # All checks passed!
        return ValidationResult(is_valid=True, index=index)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves.

        Returns:
            List of zero-based slot indices.
        """
        return board.get_empty_slots()
