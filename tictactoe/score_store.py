import json
import logging

from PySide6.QtCore import QSettings

from .game_logic import PLAYER_X, PLAYER_O

logger = logging.getLogger(__name__)

SCORE_KEY = "ttt-scores-v1"
ORGANIZATION_NAME = "tictactoe"
APPLICATION_NAME = "tictactoe"


def empty_tally():
    return {PLAYER_X: 0, PLAYER_O: 0}


class MemoryStore:
    """
    dict backed key-value store, nothing survives the process
    """
    def __init__(self, initial=None):
        self.values = dict(initial or {})

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value
        return True


class SettingsStore:
    """
    key-value store on top of QSettings

    With no path the platform's native user settings are used, otherwise
    an INI file at path. set() reports failure instead of raising.
    """
    def __init__(self, path=None):
        if path:
            self.settings = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings(ORGANIZATION_NAME, APPLICATION_NAME)

    def get(self, key):
        value = self.settings.value(key)
        if value is None:
            return None
        if not isinstance(value, str):
            logger.warning("settings value for %r is %s, not text",
                           key, type(value).__name__)
            return None
        return value

    def set(self, key, value):
        self.settings.setValue(key, value)
        self.settings.sync()
        status = self.settings.status()
        if status != QSettings.Status.NoError:
            logger.debug("QSettings sync for %r ended with %s", key, status)
            return False
        return True


def parse_tally(raw):
    """
    Decode a stored tally.

    Returns None when raw is not a JSON object with non-negative integer
    counts. A count that is missing altogether reads as 0.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    tally = empty_tally()
    for player in tally:
        count = data.get(player, 0)
        # bool is an int subclass but never a valid count
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            return None
        tally[player] = count
    return tally


class ScoreStore:
    """
    running win tally per player, written back after every change

    Writes are best effort: a failed write is logged and the in-memory
    tally keeps the change.
    """
    def __init__(self, storage, key=SCORE_KEY):
        self.storage = storage
        self.key = key
        self._tally = empty_tally()

    @property
    def scores(self):
        return dict(self._tally)

    def load(self):
        """
        read tally from storage; missing or corrupt data gives zeros
        """
        raw = self.storage.get(self.key)
        if raw is None:
            self._tally = empty_tally()
            return self.scores
        tally = parse_tally(raw)
        if tally is None:
            logger.warning("ignoring corrupt score data under %r: %.80r", self.key, raw)
            tally = empty_tally()
        self._tally = tally
        return self.scores

    def record_win(self, player):
        if player not in self._tally:
            raise ValueError(f"unknown player {player!r}")
        self._tally[player] += 1
        self._save("record win")
        return self.scores

    def clear(self):
        self._tally = empty_tally()
        self._save("clear scores")
        return self.scores

    def _save(self, action):
        try:
            saved = self.storage.set(self.key, json.dumps(self._tally))
        except OSError:
            logger.exception("score storage raised during %s", action)
            saved = False
        if not saved:
            logger.error("failed to save scores (%s); keeping %s in memory only",
                         action, self._tally)
