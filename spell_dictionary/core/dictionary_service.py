# dictionary_service.py
"""
DictionaryService - application facade over the word sets.

Purpose:
 - Own one word set per method ("bst", "hashmap"), all fed from the same word list
 - Explicit lifecycle: construct -> load() -> check()/add()/list_words()
 - Suggestions are attached to a check only when the word is not found
 - New words go into every word set first, then to the word list; a failed
   append is logged and the word stays in memory
"""

from __future__ import annotations
import time
from typing import Dict, Mapping, Optional

from .collation import normalize_word
from .hash_word_set import HashWordSet
from .ordered_word_set import OrderedWordSet
from .protocols import AddResult, CheckResult, ListResult, WordSetProtocol
from ..utils.logger_utils import Log
from ..utils.word_store import WordStore

BACKENDS = {
    OrderedWordSet.method: OrderedWordSet,
    HashWordSet.method: HashWordSet,
}

MSG_ADDED = "Word added successfully"
MSG_EXISTS = "Word already exists"
MSG_NOT_SAVED = "Word added to in-memory dictionary, but failed to save to file"


def _elapsed_ms(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000.0


class DictionaryService:
    """
    Public API:
      - load() -> int
      - check(word, method=None) -> CheckResult
      - add(word, method=None, sort_file=False) -> AddResult
      - list_words(method=None) -> ListResult
    """

    def __init__(
        self,
        word_sets: Mapping[str, WordSetProtocol],
        store: Optional[WordStore] = None,
        max_suggestions: int = 10,
        default_method: str = "bst",
    ) -> None:
        if not word_sets:
            raise ValueError("At least one word set is required")
        if default_method not in word_sets:
            raise ValueError(f"Unknown method: {default_method}")
        self.word_sets: Dict[str, WordSetProtocol] = dict(word_sets)
        self.store = store
        self.max_suggestions = max_suggestions
        self.default_method = default_method

    @classmethod
    def from_config(cls, cfg) -> "DictionaryService":
        """Build word sets and store from a Config (or any mapping with the same keys)."""
        collation = cfg.get("collation", "unicode")
        word_sets: Dict[str, WordSetProtocol] = {}
        for method in cfg.get("methods", ["bst"]):
            backend = BACKENDS.get(method)
            if backend is None:
                raise ValueError(f"Unknown method: {method}")
            word_sets[method] = backend(collation=collation)
        return cls(
            word_sets,
            store=WordStore(cfg.get("dictionary_path", "dictionary.txt")),
            max_suggestions=int(cfg.get("max_suggestions", 10)),
            default_method=cfg.get("default_method", "bst"),
        )

    # lifecycle -------------------------------------------------------------
    def load(self) -> int:
        """Read the word list once and bulk-load every word set. Returns lines read."""
        if self.store is None:
            return 0
        words = self.store.load()
        for method, ws in self.word_sets.items():
            with Log.time_block(f"[DictionaryService] bulk_load {method}"):
                ws.bulk_load(words)
            Log.info(f"[DictionaryService] {method}: {len(ws)} unique words loaded")
        return len(words)

    def word_set(self, method: Optional[str] = None) -> WordSetProtocol:
        method = method or self.default_method
        try:
            return self.word_sets[method]
        except (KeyError, TypeError):
            raise ValueError(f"Unknown method: {method}") from None

    # operations ------------------------------------------------------------
    def check(self, word: str, method: Optional[str] = None) -> CheckResult:
        ws = self.word_set(method)
        w = self._require_word(word)

        t0 = time.perf_counter()
        found = ws.contains(w)
        result: CheckResult = {
            "word": w,
            "found": found,
            "timeMs": 0.0,
            "method": ws.method,
        }
        if not found:
            result["suggestions"] = ws.suggest(w, self.max_suggestions)
        result["timeMs"] = _elapsed_ms(t0)
        return result

    def add(self, word: str, method: Optional[str] = None, sort_file: bool = False) -> AddResult:
        ws = self.word_set(method)
        w = self._require_word(word)

        t0 = time.perf_counter()
        if ws.contains(w):
            return {
                "word": w,
                "success": False,
                "message": MSG_EXISTS,
                "timeMs": _elapsed_ms(t0),
                "persisted": False,
            }

        for other in self.word_sets.values():
            other.insert(w)

        persisted = self._persist(w, ws, sort_file)
        save_failed = self.store is not None and not persisted
        Log.info(f"[DictionaryService] added '{w}' (persisted={persisted})")
        return {
            "word": w,
            "success": True,
            "message": MSG_NOT_SAVED if save_failed else MSG_ADDED,
            "timeMs": _elapsed_ms(t0),
            "persisted": persisted,
        }

    def list_words(self, method: Optional[str] = None) -> ListResult:
        ws = self.word_set(method)
        t0 = time.perf_counter()
        words = ws.all_words()
        return {
            "words": words,
            "count": len(words),
            "timeMs": _elapsed_ms(t0),
            "method": ws.method,
        }

    # helpers ---------------------------------------------------------------
    @staticmethod
    def _require_word(word) -> str:
        if not isinstance(word, str):
            raise ValueError("Word is required")
        w = normalize_word(word)
        if not w:
            raise ValueError("Word is required")
        return w

    def _persist(self, word: str, ws: WordSetProtocol, sort_file: bool) -> bool:
        if self.store is None:
            return False
        try:
            if sort_file:
                self.store.rewrite_sorted(ws.all_words())
            else:
                self.store.append(word)
        except OSError as e:
            Log.error(f"[DictionaryService] failed to persist '{word}': {e}")
            return False
        return True
