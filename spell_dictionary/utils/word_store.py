# word_store.py — persistence for the line-delimited word list

# handles:
# - loading the initial word list (one word per line, UTF-8)
# - appending newly accepted words in insertion order
# - rewriting the whole list in sorted order (optional)
# I/O errors are raised to the caller; only a missing file is tolerated on load.
# A sorted rewrite goes through a temp file + os.replace.

import os
import tempfile
from typing import Iterable, List

from .logger_utils import Log


class WordStore:
    def __init__(self, path: str = "dictionary.txt"):
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> List[str]:
        """
        Read the word list from disk.
        Returns:
            list: stripped, lower-cased, non-blank lines in file order
                  (empty if the file does not exist yet).
        """
        if not self.exists():
            Log.warning(f"[WordStore] {self.path} not found, starting with empty dictionary")
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            words = [ln.strip().lower() for ln in f if ln.strip()]
        Log.info(f"[WordStore] read {len(words)} words from {self.path}")
        return words

    def append(self, word: str) -> None:
        """Append a single word as a new line."""
        self._ensure_dir()
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(word + "\n")

    def rewrite_sorted(self, words: Iterable[str]) -> int:
        """
        Replace the file with `words`, one per line.
        Callers pass an already ordered sequence (e.g. OrderedWordSet.all_words()).
        The list is written to a temp file next to the target and swapped in,
        so a failed write leaves the old file untouched.
        """
        self._ensure_dir()
        folder = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(prefix=".words-", suffix=".tmp", dir=folder)
        count = 0
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for w in words:
                    f.write(w + "\n")
                    count += 1
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        Log.info(f"[WordStore] rewrote {self.path} with {count} words")
        return count

    def _ensure_dir(self) -> None:
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
