# tests/conftest.py
import pytest

from spell_dictionary.core.ordered_word_set import OrderedWordSet
from spell_dictionary.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    # keep log files out of the working tree
    monkeypatch.setattr(Log, "path", str(tmp_path / "logs" / "test.log"))
    monkeypatch.setattr(Log, "echo", False)


@pytest.fixture
def fruit_set():
    ws = OrderedWordSet()
    ws.bulk_load(["banana", "apple", "cherry", "application", "apply"])
    return ws


@pytest.fixture
def word_file(tmp_path):
    p = tmp_path / "dictionary.txt"
    p.write_text("banana\nApple\n\n  cherry  \napplication\napply\n", encoding="utf-8")
    return p
