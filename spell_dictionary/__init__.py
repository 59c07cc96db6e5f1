"""
spell_dictionary

In-memory spell-checking dictionary built on an ordered word tree.
Exposes check/add/list through a Python API, a line-delimited JSON
protocol and a command line interface.
"""

from .core import DictionaryService, HashWordSet, OrderedWordSet

__all__ = ["DictionaryService", "HashWordSet", "OrderedWordSet"]

__version__ = "0.1.0"
