"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board as clickable buttons
- Whose turn it is
- A dialog when someone wins or the game is a draw

Clicks are fed into the same Game and state machine as the console game.
"""

import tkinter as tk
from tkinter import messagebox
from typing import List, Optional

from logic.board import Board
from logic.config import GameConfig
from logic.game import Game
from logic.game_state import GamePhase, PlayerTurnState
from logic.move_validator import MoveValidator
from logic.player import Player, PlayerFactory


# Window settings
WINDOW_TITLE = "Tic Tac Toe"
WINDOW_SIZE = "300x360"
CELL_FONT = ('Arial', 40, 'bold')
STATUS_FONT = ('Arial', 11)

# Colors
BG_COLOR = '#1a1a2e'
CELL_COLOR = '#16213e'
WIN_COLOR = '#065f46'
SYMBOL_COLORS = {
    GameConfig.PLAYER_ONE_SYMBOL: '#f87171',
    GameConfig.PLAYER_TWO_SYMBOL: '#10b981',
}


class ClickPlayer(Player):
    """
    A player whose moves come from button clicks.

    The UI queues the clicked slot, then steps the game, which asks
    this player for its move.
    """

    def __init__(self, name: str, symbol: str):
        super().__init__(name, symbol)
        self.pending_index: Optional[int] = None
        self.validator = MoveValidator()

    def queue_move(self, index: int):
        self.pending_index = index

    def get_move(self, board: Board) -> Optional[int]:
        index, self.pending_index = self.pending_index, None
        if index is None:
            self.last_error = "No slot selected."
            return None

        result = self.validator.validate_index(board, index)
        if not result.is_valid:
            self.last_error = result.error_message
            return None

        self.last_error = None
        return result.index


PlayerFactory.register("click", ClickPlayer)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        player1_name: str = GameConfig.PLAYER_ONE_NAME,
        player2_name: str = GameConfig.PLAYER_TWO_NAME
    ):
        """Initialize the UI."""
        self.player1_name = player1_name
        self.player2_name = player2_name
        self.game: Optional[Game] = None

        # Create UI
        self._create_ui()
        self._new_game()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.configure(bg=BG_COLOR)
        self.root.geometry(WINDOW_SIZE)

        # Board grid
        self.board_frame = tk.Frame(self.root, bg=BG_COLOR)
        self.board_frame.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

        self.cell_buttons: List[tk.Button] = []
        for index in range(GameConfig.CELL_COUNT):
            row, col = Board.to_row_col(index)
            button = tk.Button(
                self.board_frame,
                text="",
                font=CELL_FONT,
                bg=CELL_COLOR,
                fg='white',
                relief='ridge',
                command=lambda i=index: self._on_cell_click(i)
            )
            button.grid(row=row, column=col, sticky='nsew', padx=2, pady=2)
            self.cell_buttons.append(button)

        for i in range(GameConfig.BOARD_SIZE):
            self.board_frame.rowconfigure(i, weight=1)
            self.board_frame.columnconfigure(i, weight=1)

        # Game status
        self.status_label = tk.Label(
            self.root,
            text="",
            font=STATUS_FONT,
            bg=BG_COLOR,
            fg='#ffd700'
        )
        self.status_label.pack(pady=2)

        # Control buttons
        control_frame = tk.Frame(self.root, bg=BG_COLOR)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="New Game",
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._new_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _new_game(self):
        """Start a fresh game on an empty board."""
        player1 = PlayerFactory.create_player("click", self.player1_name, GameConfig.PLAYER_ONE_SYMBOL)
        player2 = PlayerFactory.create_player("click", self.player2_name, GameConfig.PLAYER_TWO_SYMBOL)
        self.game = Game(player1, player2, output=self._set_status, echo_board=False)

        for button in self.cell_buttons:
            button.configure(text="", bg=CELL_COLOR, state='normal')

        self._update_turn_label()

    def _on_cell_click(self, index: int):
        """Handle a click on one of the 9 cells."""
        game = self.game
        if game is None or game.finished:
            return

        # Clicks on taken cells are ignored
        if not game.board.is_slot_available(index):
            return

        game.current_player.queue_move(index)
        game.step()

        # Run the game until it waits for the next click or ends
        while not game.finished and not isinstance(game.state, PlayerTurnState):
            game.step()

        self._update_board_display()

        if game.finished:
            self._show_game_result()
        else:
            self._update_turn_label()

    def _update_board_display(self):
        """Update the button texts from the board."""
        for index, button in enumerate(self.cell_buttons):
            symbol = self.game.board.symbol_at(index)
            if symbol is None:
                button.configure(text="", bg=CELL_COLOR)
            else:
                button.configure(text=symbol, fg=SYMBOL_COLORS.get(symbol, 'white'))

    def _update_turn_label(self):
        player = self.game.current_player
        self._set_status(f"Turn: {player.name} ({player.symbol})")

    def _set_status(self, message: str):
        self.status_label.configure(text=message)

    def _show_game_result(self):
        """Highlight the winning line, lock the board, and announce the result."""
        game = self.game

        if game.phase == GamePhase.WON:
            line = game.board.get_winning_line() or ()
            for index in line:
                self.cell_buttons[index].configure(bg=WIN_COLOR)
            message = f"{game.winner} wins!"
        else:
            message = "It's a draw!"

        self._disable_board()
        messagebox.showinfo(WINDOW_TITLE, message, parent=self.root)

    def _disable_board(self):
        for button in self.cell_buttons:
            button.configure(state='disabled')

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
