from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import PLAYER_X, BOARD_CELLS

GRID_SIZE = 3

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_CELL_COLOR = QColor("#4a5d3a")
FOCUS_COLOR = QColor("#ddd")

ACTIVATION_KEYS = (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space)
FOCUS_MOVES = {
    Qt.Key_Left: (0, -1),
    Qt.Key_Right: (0, 1),
    Qt.Key_Up: (-1, 0),
    Qt.Key_Down: (1, 0),
}


class BoardWidget(QWidget):
    """
    custom widget to draw the board and turn clicks/keys into cell indexes
    """
    cell_activated = Signal(int)  # emits cell index 0..8

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # read-only view of game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setFocusPolicy(Qt.StrongFocus)
        self.focused_cell = 4           # keyboard cursor starts in the centre
        self._accept_input = True

    def set_accept_input(self, accept):
        # enable/disable user input
        self._accept_input = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # (offset_x, offset_y, side) of the square grid inside the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._geometry()
        cell = side / GRID_SIZE
        row, col = divmod(index, GRID_SIZE)
        return QRectF(ox + col * cell, oy + row * cell, cell, cell)

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / GRID_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, GRID_SIZE - 1)); col = max(0, min(col, GRID_SIZE - 1))
        return row * GRID_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, winning cells and keyboard focus
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / GRID_SIZE
            # winning cells under everything else
            for i in self.game_logic.winning_combo or ():
                painter.fillRect(self.cell_rect(i), WIN_CELL_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, GRID_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # marks
            board = self.game_logic.get_board_snapshot()
            for i in range(BOARD_CELLS):
                sym = board[i]
                if not sym:
                    continue
                center = self.cell_rect(i).center()
                cx, cy = center.x(), center.y()
                rad = cell_size / 2 * 0.7
                if sym == PLAYER_X:
                    painter.setPen(QPen(X_COLOR, 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            if self.hasFocus():
                painter.setPen(QPen(FOCUS_COLOR, 2, Qt.DashLine))
                painter.drawRect(self.cell_rect(self.focused_cell).adjusted(4, 4, -4, -4))
        finally:
            painter.end()

    def _activate(self, index):
        if not self._accept_input:
            return
        self.cell_activated.emit(index)  # notify main window

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index is None:
            return
        self.focused_cell = index
        self._activate(index)

    def keyPressEvent(self, event):
        """
        arrows move the focus cell, Return/Enter/Space place a mark there
        """
        key = event.key()
        if key in ACTIVATION_KEYS:
            event.accept()
            self._activate(self.focused_cell)
        elif key in FOCUS_MOVES:
            event.accept()
            dr, dc = FOCUS_MOVES[key]
            row, col = divmod(self.focused_cell, GRID_SIZE)
            row = max(0, min(row + dr, GRID_SIZE - 1))
            col = max(0, min(col + dc, GRID_SIZE - 1))
            self.focused_cell = row * GRID_SIZE + col
            self.update()
        else:
            super().keyPressEvent(event)
