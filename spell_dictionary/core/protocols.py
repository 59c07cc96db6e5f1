# spell_dictionary/core/protocols.py
"""
Protocol interfaces and result shapes shared by the word sets, the
DictionaryService, the JSON API and the CLI.

The service depends on WordSetProtocol rather than on a concrete class, so the
BST and the hash-backed set are interchangeable (and easy to stub in tests).
The result TypedDicts mirror the JSON objects the API writes, hence the
camelCase `timeMs` key.
"""

from typing import Iterable, List, Protocol, runtime_checkable
from typing_extensions import NotRequired, TypedDict


# Result structures ------------------------------------------------------------

class CheckResult(TypedDict):
    """
    Result of a spell check.
    `suggestions` is present only when the word was not found.
    """
    word: str
    found: bool
    timeMs: float
    method: str
    suggestions: NotRequired[List[str]]


class AddResult(TypedDict):
    """
    Result of adding a word.
    `persisted` is False when the word was accepted in memory but could not be
    appended to the word list.
    """
    word: str
    success: bool
    message: str
    timeMs: float
    persisted: bool


class ListResult(TypedDict):
    words: List[str]
    count: int
    timeMs: float
    method: str


# Protocols --------------------------------------------------------------------

@runtime_checkable
class WordSetProtocol(Protocol):
    """Minimal interface of a word set backend (OrderedWordSet, HashWordSet)."""

    method: str

    def insert(self, word: str) -> None:
        ...

    def contains(self, word: str) -> bool:
        ...

    def all_words(self) -> List[str]:
        """Every stored word in ascending dictionary order."""
        ...

    def suggest(self, word: str, limit: int = 10) -> List[str]:
        """Prefix matches in ascending order, or the first `limit` words if none match."""
        ...

    def bulk_load(self, words: Iterable[str]) -> None:
        ...

    def __len__(self) -> int:
        ...

    def __contains__(self, word: object) -> bool:
        ...
