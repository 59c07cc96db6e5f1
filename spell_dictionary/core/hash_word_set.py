# hash_word_set.py
# Hash-backed word set with the same contract as OrderedWordSet.
# O(1) membership; ordering is produced on demand by sorting on the
# collation key, so listing and suggestions cost O(n log n).

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List

from .collation import UNICODE, CollationKey, collation_key, normalize_word


class HashWordSet:
    """dict-based alternative to the BST, selected with method="hashmap"."""

    method = "hashmap"

    def __init__(self, collation: str = UNICODE) -> None:
        collation_key("", collation)
        self.collation = collation
        self._words: Dict[str, CollationKey] = {}

    def insert(self, word: str) -> None:
        w = normalize_word(word)
        if w and w not in self._words:
            self._words[w] = collation_key(w, self.collation)

    def bulk_load(self, words: Iterable[str]) -> None:
        for w in words:
            self.insert(w)

    def contains(self, word: str) -> bool:
        return normalize_word(word) in self._words

    def all_words(self) -> List[str]:
        return sorted(self._words, key=self._words.__getitem__)

    def suggest(self, word: str, limit: int = 10) -> List[str]:
        """Same prefix filter and fallback as OrderedWordSet.suggest."""
        if limit <= 0:
            return []
        prefix = normalize_word(word)
        ordered = self.all_words()
        matches: List[str] = []
        for w in ordered:
            if w.startswith(prefix):
                matches.append(w)
                if len(matches) >= limit:
                    break
        return matches or ordered[:limit]

    def clear(self) -> None:
        self._words.clear()

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.all_words())

    def __repr__(self) -> str:
        return f"HashWordSet(size={len(self._words)}, collation={self.collation!r})"
