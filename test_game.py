"""
Tests for TicTacToe players, game states, and the console game.
"""

import io

import pytest

import main
from logic.board import Board
from logic.config import GameConfig
from logic.game import Game
from logic.game_state import (
    CheckWinnerState,
    GameOverState,
    GamePhase,
    PlayerTurnState,
)
from logic.player import HumanPlayer, Player, PlayerFactory, UnknownPlayerTypeError


class ScriptedPlayer(Player):
    """Plays a fixed list of zero-based moves, None meaning an invalid request."""

    def __init__(self, name, symbol, moves):
        super().__init__(name, symbol)
        self.moves = list(moves)

    def get_move(self, board):
        move = self.moves.pop(0)
        if move is None or not board.is_slot_available(move):
            self.last_error = "Scripted invalid move."
            return None
        return move


def make_console_game(text):
    """Two human players reading from the same text, output captured."""
    stream = io.StringIO(text)
    messages = []
    player1 = HumanPlayer("Alice", "X", input_stream=stream)
    player2 = HumanPlayer("Bob", "O", input_stream=stream)
    return Game(player1, player2, output=messages.append), messages


# ==================== PLAYERS ====================

def test_human_player_maps_slot_to_index():
    player = HumanPlayer("Alice", "X", input_stream=io.StringIO("7\n"))
    assert player.get_move(Board()) == 6
    assert player.last_error is None


@pytest.mark.parametrize("text", ["0\n", "10\n", "abc\n", "\n"])
def test_human_player_rejects_bad_input(text):
    board = Board()
    player = HumanPlayer("Alice", "X", input_stream=io.StringIO(text))
    assert player.get_move(board) is None
    assert player.last_error
    assert board.get_empty_slots() == list(range(9))


def test_human_player_rejects_taken_slot():
    board = Board()
    board.place_mark(2, "O")
    player = HumanPlayer("Alice", "X", input_stream=io.StringIO("3\n"))
    assert player.get_move(board) is None
    assert board.cells[2] == "O"


def test_human_player_bad_input_is_consumed():
    player = HumanPlayer("Alice", "X", input_stream=io.StringIO("oops\n5\n"))
    board = Board()
    assert player.get_move(board) is None
    assert player.get_move(board) == 4


def test_human_player_raises_at_end_of_input():
    player = HumanPlayer("Alice", "X", input_stream=io.StringIO(""))
    with pytest.raises(EOFError):
        player.get_move(Board())


def test_factory_creates_human_any_case():
    for player_type in ("human", "HUMAN", "Human"):
        player = PlayerFactory.create_player(player_type, "Alice", "X")
        assert isinstance(player, HumanPlayer)
        assert player.name == "Alice"
        assert player.symbol == "X"


def test_factory_passes_options():
    stream = io.StringIO("1\n")
    player = PlayerFactory.create_player("human", "Alice", "X", input_stream=stream)
    assert player.input_stream is stream


@pytest.mark.parametrize("player_type", ["computer", "robot", ""])
def test_factory_rejects_unknown_type(player_type):
    with pytest.raises(UnknownPlayerTypeError) as excinfo:
        PlayerFactory.create_player(player_type, "HAL", "O")
    assert excinfo.value.player_type == player_type
    assert isinstance(excinfo.value, ValueError)


def test_factory_register_adds_type():
    PlayerFactory.register("Scripted", ScriptedPlayer)
    player = PlayerFactory.create_player("scripted", "Bot", "O", moves=[0])
    assert isinstance(player, ScriptedPlayer)
    assert "scripted" in PlayerFactory.available_types()


# ==================== GAME STATES ====================

def test_game_starts_in_player_turn():
    game = Game(ScriptedPlayer("A", "X", []), ScriptedPlayer("B", "O", []), output=lambda m: None)
    assert isinstance(game.state, PlayerTurnState)
    assert game.current_player is game.players[0]
    assert not game.finished
    assert game.winner is None
    assert game.phase == GamePhase.IN_PROGRESS


def test_valid_move_goes_to_check_winner():
    game = Game(ScriptedPlayer("A", "X", [4]), ScriptedPlayer("B", "O", []), output=lambda m: None)
    game.step()
    assert game.board.cells[4] == "X"
    assert isinstance(game.state, CheckWinnerState)

    game.step()
    assert isinstance(game.state, PlayerTurnState)
    assert game.current_player.symbol == "O"


def test_invalid_move_keeps_turn_and_board():
    messages = []
    player1 = ScriptedPlayer("A", "X", [None])
    game = Game(player1, ScriptedPlayer("B", "O", []), output=messages.append)
    game.step()
    assert isinstance(game.state, PlayerTurnState)
    assert game.current_player is player1
    assert game.board.get_empty_slots() == list(range(9))
    assert GameConfig.INVALID_MOVE_MESSAGE in messages[-1]


def test_taken_slot_does_not_switch_player():
    player1 = ScriptedPlayer("A", "X", [0])
    player2 = ScriptedPlayer("B", "O", [0, 1])
    game = Game(player1, player2, output=lambda m: None)
    game.step()  # X takes slot 1
    game.step()  # no winner, O to move
    game.step()  # O tries slot 1
    assert game.current_player is player2
    assert isinstance(game.state, PlayerTurnState)
    assert game.board.cells[0] == "X"

    game.step()  # O takes slot 2
    assert game.board.cells[1] == "O"


def test_winner_is_set_only_when_finished():
    player1 = ScriptedPlayer("A", "X", [0, 1, 2])
    player2 = ScriptedPlayer("B", "O", [3, 4])
    game = Game(player1, player2, output=lambda m: None)

    while not isinstance(game.state, GameOverState):
        game.step()
        assert (game.winner is None) == (not game.finished)

    game.step()
    assert game.finished
    assert game.winner == "X"
    assert game.phase == GamePhase.WON
    assert game.winning_player is player1


def test_finished_game_ignores_steps():
    player1 = ScriptedPlayer("A", "X", [0, 1, 2])
    player2 = ScriptedPlayer("B", "O", [3, 4])
    game = Game(player1, player2, output=lambda m: None)
    game.start()

    cells = list(game.board.cells)
    game.step()
    assert game.board.cells == cells


def test_check_winner_echoes_board():
    messages = []
    game = Game(ScriptedPlayer("A", "X", [0]), ScriptedPlayer("B", "O", []), output=messages.append)
    game.step()
    game.step()
    assert game.board.render() in messages

    quiet = []
    game = Game(ScriptedPlayer("A", "X", [0]), ScriptedPlayer("B", "O", []),
                output=quiet.append, echo_board=False)
    game.step()
    game.step()
    assert game.board.render() not in quiet


# ==================== CONSOLE GAME ====================

def test_console_game_top_row_win():
    game, messages = make_console_game("1\n4\n2\n5\n3\n")
    game.start()

    assert game.finished
    assert game.winner == "X"
    assert game.board.cells[:5] == ["X", "X", "X", "O", "O"]
    assert messages[0] == GameConfig.WELCOME_MESSAGE
    assert messages[-1] == "Congratulations! Alice (X) has won!"


def test_console_game_second_player_wins():
    game, messages = make_console_game("1\n4\n2\n5\n9\n6\n")
    game.start()

    assert game.winner == "O"
    assert game.winning_player.name == "Bob"
    assert messages[-1] == "Congratulations! Bob (O) has won!"


def test_console_game_draw():
    game, messages = make_console_game("1\n2\n3\n5\n4\n6\n8\n7\n9\n")
    game.start()

    assert game.finished
    assert game.winner == GameConfig.DRAW
    assert game.is_draw
    assert game.winning_player is None
    assert game.board.is_full()
    assert messages[-1] == GameConfig.DRAW_MESSAGE


def test_console_game_retries_bad_input():
    game, messages = make_console_game("0\n10\nabc\n1\n1\n4\n2\n5\n3\n")
    game.start()

    invalid = [m for m in messages if GameConfig.INVALID_MOVE_MESSAGE in m]
    assert len(invalid) == 4
    assert game.winner == "X"


def test_play_console_builds_two_humans():
    game = main.play_console("Ann", "Ben", input_stream=io.StringIO("1\n4\n2\n5\n3\n"))
    assert game.winning_player.name == "Ann"
    assert [p.symbol for p in game.players] == ["X", "O"]


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["tictactoe"])
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    main.main()
    assert "Goodbye!" in capsys.readouterr().out
