"""Widget-level tests: input reaches the core and the window mirrors it."""

import pytest
from PySide6.QtCore import Qt, QPoint
from PySide6.QtTest import QTest

from tictactoe.game_logic import GameLogic, GameStatus, PLAYER_X, PLAYER_O
from tictactoe.score_store import MemoryStore, ScoreStore, SCORE_KEY
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow, START_MESSAGE


@pytest.fixture
def window(qapp):
    win = TicTacToeWindow(ScoreStore(MemoryStore({SCORE_KEY: '{"X": 2, "O": 1}'})))
    yield win
    win.close()


def click_cells(window, cells):
    for index in cells:
        window.board_widget.cell_activated.emit(index)


def test_initial_render(window):
    assert window.turn_label.text() == PLAYER_X
    assert window.message_label.text() == START_MESSAGE
    assert window.score_x_label.text() == "2"
    assert window.score_o_label.text() == "1"


def test_moves_update_turn_and_message(window):
    click_cells(window, [4])
    assert window.game_logic.get_board_snapshot()[4] == PLAYER_X
    assert window.turn_label.text() == PLAYER_O
    assert window.message_label.text() == ""


def test_win_updates_message_and_score(window):
    click_cells(window, [0, 3, 1, 4, 2])
    assert window.game_logic.status is GameStatus.WON
    assert window.message_label.text() == "X wins!"
    assert window.score_x_label.text() == "3"
    # further clicks are ignored
    click_cells(window, [8])
    assert window.game_logic.get_board_snapshot()[8] == ""


def test_draw_message(window):
    click_cells(window, [0, 1, 2, 3, 4, 6, 5, 8, 7])
    assert window.message_label.text() == "Draw"
    assert window.score_x_label.text() == "2"
    assert window.score_o_label.text() == "1"


def test_restart_keeps_scores(window):
    click_cells(window, [0, 3, 1, 4, 2])
    window.restart_button.click()
    assert window.game_logic.get_board_snapshot() == [""] * 9
    assert window.turn_label.text() == PLAYER_X
    assert window.message_label.text() == ""
    assert window.score_x_label.text() == "3"


def test_clear_scores(window):
    window.clear_scores_button.click()
    assert window.score_x_label.text() == "0"
    assert window.score_o_label.text() == "0"
    assert window.message_label.text() == "Scores cleared"


@pytest.fixture
def board(qapp):
    game = GameLogic()
    widget = BoardWidget(game)
    widget.resize(300, 300)
    widget.show()
    activated = []
    widget.cell_activated.connect(activated.append)
    yield widget, activated
    widget.close()


def test_cell_at_maps_coordinates(board):
    widget, _ = board
    assert widget.cell_at(10, 10) == 0
    assert widget.cell_at(150, 150) == 4
    assert widget.cell_at(290, 110) == 5
    assert widget.cell_at(-5, 10) is None


def test_keyboard_activation(board):
    widget, activated = board
    QTest.keyClick(widget, Qt.Key_Space)
    QTest.keyClick(widget, Qt.Key_Left)
    QTest.keyClick(widget, Qt.Key_Return)
    QTest.keyClick(widget, Qt.Key_Up)
    QTest.keyClick(widget, Qt.Key_Up)
    QTest.keyClick(widget, Qt.Key_Enter)
    assert activated == [4, 3, 0]


def test_mouse_activation(board):
    widget, activated = board
    QTest.mouseClick(widget, Qt.LeftButton, Qt.NoModifier, QPoint(250, 250))
    assert activated == [8]
    assert widget.focused_cell == 8


def test_input_disabled(board):
    widget, activated = board
    widget.set_accept_input(False)
    QTest.keyClick(widget, Qt.Key_Space)
    assert activated == []
