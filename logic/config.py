"""
Game configuration for TicTacToe.
All the settings for the board, players, and console messages.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to customise names and messages.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 slots

    # Slots are numbered 1-9 for the player, 0-8 internally
    FIRST_SLOT = 1
    LAST_SLOT = CELL_COUNT

    # Result returned when the board is full and nobody won
    DRAW = "draw"

    # ==================== PLAYER SETTINGS ====================
    PLAYER_ONE_NAME = "Player 1"
    PLAYER_ONE_SYMBOL = "X"
    PLAYER_TWO_NAME = "Player 2"
    PLAYER_TWO_SYMBOL = "O"

    # Player type used by the console game
    DEFAULT_PLAYER_TYPE = "human"

    # ==================== MESSAGES ====================
    WELCOME_MESSAGE = "Welcome to Tic Tac Toe!"
    PROMPT_MESSAGE = "{name} ({symbol}), choose a slot ({first}-{last}): "
    INVALID_MOVE_MESSAGE = "Invalid move. Try again."
    WIN_MESSAGE = "Congratulations! {name} ({symbol}) has won!"
    DRAW_MESSAGE = "It's a draw! Thanks for playing."
