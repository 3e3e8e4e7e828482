"""
Main script for TicTacToe.

Two players share the keyboard and take turns typing slot numbers (1-9):

     1 | 2 | 3
     4 | 5 | 6
     7 | 8 | 9

Run with --gui to play in a window instead.
"""

import sys

from logic.config import GameConfig
from logic.game import Game
from logic.player import PlayerFactory


def play_console(
    player1_name: str = GameConfig.PLAYER_ONE_NAME,
    player2_name: str = GameConfig.PLAYER_TWO_NAME,
    input_stream=None
) -> Game:
    """
    Play one game in the console.

    Args:
        player1_name: Name of the player using X.
        player2_name: Name of the player using O.
        input_stream: Where moves are read from (stdin by default).

    Returns:
        The finished game.
    """
    player1 = PlayerFactory.create_player(
        GameConfig.DEFAULT_PLAYER_TYPE,
        player1_name,
        GameConfig.PLAYER_ONE_SYMBOL,
        input_stream=input_stream
    )
    player2 = PlayerFactory.create_player(
        GameConfig.DEFAULT_PLAYER_TYPE,
        player2_name,
        GameConfig.PLAYER_TWO_SYMBOL,
        input_stream=input_stream
    )

    game = Game(player1, player2)
    game.start()
    return game


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe for two players")
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Play in a window instead of the console"
    )
    parser.add_argument(
        "--player1",
        default=GameConfig.PLAYER_ONE_NAME,
        help=f"Name of the player using {GameConfig.PLAYER_ONE_SYMBOL}"
    )
    parser.add_argument(
        "--player2",
        default=GameConfig.PLAYER_TWO_NAME,
        help=f"Name of the player using {GameConfig.PLAYER_TWO_SYMBOL}"
    )

    args = parser.parse_args()

    if args.gui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(player1_name=args.player1, player2_name=args.player2)
        ui.run()
        return

    try:
        play_console(args.player1, args.player2, input_stream=sys.stdin)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
