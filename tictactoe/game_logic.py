import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

PLAYER_X = 'X'
PLAYER_O = 'O'
EMPTY = ''
BOARD_CELLS = 9

# rows, then columns, then diagonals; first match wins
WIN_COMBOS = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class PlacementResult:
    """
    outcome of one place_mark call
    """
    accepted: bool
    index: int
    cell: str
    status: GameStatus
    turn: str = None              # next player, only while in progress
    winner: str = None
    winning_combo: tuple = None


def other_player(player):
    return PLAYER_O if player == PLAYER_X else PLAYER_X


def find_winning_combo(board):
    """
    scan combos in fixed order
    returns: (player, combo) or None
    """
    for combo in WIN_COMBOS:
        a, b, c = combo
        if board[a] and board[a] == board[b] == board[c]:
            return board[a], combo
    return None


def is_board_full(board):
    return all(cell != EMPTY for cell in board)


class GameLogic:
    """
    tic-tac-toe rules and state for one game at a time
    """
    def __init__(self, score_store=None):
        """
        init board and counters; score_store gets record_win on every win
        """
        self.score_store = score_store
        self.reset()

    def reset(self):
        """
        clear board and reset flags, scores are left alone
        """
        self.game_board = [EMPTY] * BOARD_CELLS   # row-major 0..8
        self.current_player = PLAYER_X            # X always starts
        self.status = GameStatus.IN_PROGRESS
        self.winner = None                        # 'X', 'O', or None
        self.winning_combo = None
        self.move_count = 0

    @property
    def game_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    def place_mark(self, index):
        """
        place current player's mark, check result
        occupied cells and finished games are ignored (accepted=False)
        """
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < BOARD_CELLS:
            raise ValueError(f"cell index must be 0..{BOARD_CELLS - 1}, got {index!r}")

        if self.game_over or self.game_board[index] != EMPTY:
            logger.debug("ignored placement at %d (status=%s, cell=%r)",
                         index, self.status.value, self.game_board[index])
            return self._result(index, accepted=False)

        player = self.current_player
        self.game_board[index] = player
        self.move_count += 1

        found = find_winning_combo(self.game_board)
        if found:
            self.winner, self.winning_combo = found
            self.status = GameStatus.WON
            logger.info("player %s wins with %s", self.winner, self.winning_combo)
            if self.score_store is not None:
                self.score_store.record_win(self.winner)
        elif is_board_full(self.game_board):
            self.status = GameStatus.DRAW
            logger.info("game drawn after %d moves", self.move_count)
        else:
            self.current_player = other_player(player)

        return self._result(index, accepted=True)

    def _result(self, index, accepted):
        return PlacementResult(
            accepted=accepted,
            index=index,
            cell=self.game_board[index],
            status=self.status,
            turn=None if self.game_over else self.current_player,
            winner=self.winner,
            winning_combo=self.winning_combo,
        )

    def get_board_snapshot(self):
        # copy so callers can't touch our board
        return list(self.game_board)

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if 0 <= index < BOARD_CELLS:
            return self.game_board[index] == EMPTY
        return False

    def available_moves(self):
        if self.game_over:
            return []
        return [i for i, cell in enumerate(self.game_board) if cell == EMPTY]
