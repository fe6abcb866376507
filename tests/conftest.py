import os

import pytest

# no display needed for widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from tictactoe.score_store import MemoryStore, ScoreStore  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def score_store(memory_store):
    store = ScoreStore(memory_store)
    store.load()
    return store
