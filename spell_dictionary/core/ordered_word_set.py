# ordered_word_set.py
# Binary search tree of normalized words, kept in dictionary order.
# Used by the DictionaryService for:
#  - exact membership checks (spell checking)
#  - ordered listing of the whole dictionary
#  - prefix suggestions with an "alphabetically first" fallback
# No rebalancing: the shape depends only on insertion order, so sorted input
# degrades to a linked list (O(n) depth). All walks are iterative so deep
# trees never hit the recursion limit.

from __future__ import annotations
from itertools import islice
from typing import Iterable, Iterator, List, Optional

from .collation import UNICODE, CollationKey, collation_key, normalize_word


class WordNode:
    """
    A single node in the tree.
    word: normalized word stored here
    key: cached collation key of `word`
    left/right: children, owned by this node only
    """

    __slots__ = ("word", "key", "left", "right")

    def __init__(self, word: str, key: CollationKey) -> None:
        self.word = word
        self.key = key
        self.left: Optional[WordNode] = None
        self.right: Optional[WordNode] = None


class OrderedWordSet:
    """Unbalanced BST over normalized words (insert, contains, all_words, suggest, bulk_load)."""

    method = "bst"

    def __init__(self, collation: str = UNICODE) -> None:
        collation_key("", collation)  # fail fast on an unknown mode
        self.collation = collation
        self._root: Optional[WordNode] = None
        self._size = 0

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word. Empty (after strip/lower) words and words already
        present are silently ignored.
        """
        w = normalize_word(word)
        if not w:
            return

        key = collation_key(w, self.collation)
        if self._root is None:
            self._root = WordNode(w, key)
            self._size = 1
            return

        node = self._root
        while True:
            if key == node.key:
                return
            if key < node.key:
                if node.left is None:
                    node.left = WordNode(w, key)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = WordNode(w, key)
                    break
                node = node.right
        self._size += 1

    def bulk_load(self, words: Iterable[str]) -> None:
        """Insert every word in the given order. Order only affects tree shape."""
        for w in words:
            self.insert(w)

    # lookup --------------------------------------------------------
    def contains(self, word: str) -> bool:
        w = normalize_word(word)
        if not w:
            return False
        key = collation_key(w, self.collation)
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    # traversal -----------------------------------------------------
    def _in_order(self) -> Iterator[WordNode]:
        """Left, self, right with an explicit stack."""
        stack: List[WordNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def all_words(self) -> List[str]:
        """Every stored word in ascending dictionary order."""
        return [n.word for n in self._in_order()]

    def suggest(self, word: str, limit: int = 10) -> List[str]:
        """
        Up to `limit` stored words starting with the normalized `word`, ascending.
        Walks the whole tree in order and filters, stopping once `limit` matches
        are found. With no prefix match at all, falls back to the first `limit`
        words of the dictionary (the empty prefix gives the same result).
        """
        if limit <= 0:
            return []

        prefix = normalize_word(word)
        matches: List[str] = []
        for node in self._in_order():
            if node.word.startswith(prefix):
                matches.append(node.word)
                if len(matches) >= limit:
                    break

        if not matches:
            return [n.word for n in islice(self._in_order(), limit)]
        return matches

    # convenience/debugging -----------------------------------------
    def height(self) -> int:
        """Nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        best = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > best:
                best = depth
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def clear(self) -> None:
        """Drop every node."""
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return (n.word for n in self._in_order())

    def __repr__(self) -> str:
        return f"OrderedWordSet(size={self._size}, collation={self.collation!r})"
