"""
spell_dictionary.core

The in-memory dictionary engine.
Contains:
 - the ordered word set (unbalanced BST) and its hash-backed counterpart
 - normalization and dictionary-order collation keys
 - the DictionaryService facade used by the CLI and the JSON API
"""

from .collation import collation_key, compare_words, normalize_word
from .ordered_word_set import OrderedWordSet, WordNode
from .hash_word_set import HashWordSet
from .protocols import AddResult, CheckResult, ListResult, WordSetProtocol
from .dictionary_service import DictionaryService

__all__ = [
    "collation_key",
    "compare_words",
    "normalize_word",
    "OrderedWordSet",
    "WordNode",
    "HashWordSet",
    "WordSetProtocol",
    "CheckResult",
    "AddResult",
    "ListResult",
    "DictionaryService",
]
