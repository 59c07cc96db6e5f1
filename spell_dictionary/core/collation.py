# collation.py
# Word normalization and dictionary-order sort keys.
# Every comparison in the word sets goes through collation_key() so that
# "e" < "é" < "f" (dictionary order) instead of raw code-point order.

from __future__ import annotations
import locale
import unicodedata
from typing import Tuple

CollationKey = Tuple[str, str]

UNICODE = "unicode"
LOCALE = "locale"
MODES = (UNICODE, LOCALE)


def normalize_word(word: str) -> str:
    """Lowercase + trim, the same normalizer used for storage and queries."""
    return word.strip().lower()


# Letters with no NFKD decomposition, folded to their base spelling.
_EXTRA_FOLDS = str.maketrans({
    "ø": "o",
    "ł": "l",
    "đ": "d",
    "ħ": "h",
    "ı": "i",
    "æ": "ae",
    "œ": "oe",
    "ß": "ss",
    "þ": "th",
})


def _fold_accents(word: str) -> str:
    """Drop combining marks after NFKD decomposition ("café" -> "cafe", "øl" -> "ol")."""
    decomposed = unicodedata.normalize("NFKD", word)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).translate(_EXTRA_FOLDS)


def collation_key(word: str, mode: str = UNICODE) -> CollationKey:
    """
    Sort key for an already-normalized word.
    The first element gives the dictionary ordering, the second element is the
    word itself, so two keys are equal only when the words are identical.
      - "unicode": accent-folded primary key (portable, the default)
      - "locale": locale.strxfrm under the process LC_COLLATE
    """
    if mode == UNICODE:
        return (_fold_accents(word), word)
    if mode == LOCALE:
        return (locale.strxfrm(word), word)
    raise ValueError(f"Unknown collation mode: {mode!r}")


def compare_words(a: str, b: str, mode: str = UNICODE) -> int:
    """Three-way comparison (-1, 0, 1) of two normalized words."""
    ka, kb = collation_key(a, mode), collation_key(b, mode)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0
