import logging

from ..game_logic import GameLogic, GameStatus, PLAYER_X, PLAYER_O
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QGroupBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

START_MESSAGE = "Click a cell to start"
DRAW_MESSAGE = "Draw"
CLEARED_MESSAGE = "Scores cleared"


class TicTacToeWindow(QMainWindow):
    """
    main window UI, forwards input to GameLogic/ScoreStore and re-renders
    """
    def __init__(self, score_store):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.score_store = score_store
        self.score_store.load()
        self.game_logic = GameLogic(score_store=self.score_store)
        self.board_widget = BoardWidget(self.game_logic, parent=self)

        self._setup_ui()
        self._render()
        self._update_message(START_MESSAGE)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_status_bar()          # turn + scores
        self.main_layout.addWidget(self.status_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_activated.connect(self._on_cell_activated)

        self._create_bottom_controls()     # message + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.setFocus()

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self.restart_game)
        clear_action = QAction("Clear Scores", self)
        clear_action.triggered.connect(self.clear_scores)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, clear_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_status_bar(self):
        '''turn indicator + score group'''
        self.status_widget = QWidget()
        hl = QHBoxLayout(self.status_widget)
        f = QFont(); f.setPointSize(12)
        self.turn_caption = QLabel("Turn:")
        self.turn_label = QLabel("")
        for lbl in (self.turn_caption, self.turn_label): lbl.setFont(f)
        self.turn_label.setStyleSheet("color: #8acaff; font-weight: bold;")

        self.score_group = QGroupBox("Score")
        sl = QHBoxLayout()
        self.score_x_label = QLabel("0"); self.score_o_label = QLabel("0")
        sl.addWidget(QLabel(f"{PLAYER_X}:")); sl.addWidget(self.score_x_label)
        sl.addSpacing(12)
        sl.addWidget(QLabel(f"{PLAYER_O}:")); sl.addWidget(self.score_o_label)
        self.score_group.setLayout(sl)

        hl.addWidget(self.turn_caption); hl.addWidget(self.turn_label)
        hl.addStretch(1); hl.addWidget(self.score_group)

    def _create_bottom_controls(self):
        # status label + restart/clear buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart"); self.restart_button.clicked.connect(self.restart_game)
        self.clear_scores_button = QPushButton("Clear Scores"); self.clear_scores_button.clicked.connect(self.clear_scores)
        for w in (self.message_label, None, self.clear_scores_button, self.restart_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)
        self.bottom_layout = hl

    def _update_message(self, text, is_success=False):
        # set message text + style
        style = "color: lime; font-weight: bold;" if is_success else "color: #eee;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text or "")

    def _render(self):
        # redraw everything that mirrors core state
        self.turn_label.setText(self.game_logic.current_player)
        scores = self.score_store.scores
        self.score_x_label.setText(str(scores[PLAYER_X]))
        self.score_o_label.setText(str(scores[PLAYER_O]))
        self.board_widget.set_accept_input(not self.game_logic.game_over)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_activated(self, index):
        res = self.game_logic.place_mark(index)
        if not res.accepted:
            return  # taken cell or finished game
        self._render()
        if res.status is GameStatus.WON:
            self._update_message(f"{res.winner} wins!", is_success=True)
        elif res.status is GameStatus.DRAW:
            self._update_message(DRAW_MESSAGE)
        else:
            self._update_message("")

    @Slot()
    def restart_game(self):
        # fresh board, scores kept
        self.game_logic.reset()
        self._render()
        self._update_message("")
        logger.debug("game restarted")

    @Slot()
    def clear_scores(self):
        self.score_store.clear()
        self._render()
        self._update_message(CLEARED_MESSAGE)
