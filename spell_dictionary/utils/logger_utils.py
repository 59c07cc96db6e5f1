# logger_utils.py - logging messages, metrics and timings for the dictionary

import os
import time
from datetime import datetime

# Path to the default log file, can be overriden with Log.configure()
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "spell_dictionary.log")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    path = DEFAULT_LOG_PATH
    echo = False       # also print each line to the console
    use_color = True

    @classmethod
    def configure(cls, path: str = None, echo: bool = None, use_color: bool = None):
        """Redirect the log file and/or toggle console echo."""
        if path is not None:
            cls.path = path
        if echo is not None:
            cls.echo = echo
        if use_color is not None:
            cls.use_color = use_color

    @classmethod
    def write(cls, msg: str, level: str = "INFO"):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        The log directory is created on first write.
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(cls.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(cls.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not cls.echo:
            return
        if cls.use_color and level in cls.COLORS:
            print(f"{cls.COLORS[level]}{line}{cls.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    @classmethod
    def debug(cls, msg: str):
        cls.write(msg, "DEBUG")

    @classmethod
    def info(cls, msg: str):
        cls.write(msg, "INFO")

    @classmethod
    def warning(cls, msg: str):
        cls.write(msg, "WARNING")

    @classmethod
    def error(cls, msg: str):
        cls.write(msg, "ERROR")

    @classmethod
    def metric(cls, tag, value, unit=""):
        """
        Record a metric (timings, counts).
        Example line: [2025-01-01 12:45:02] METRIC  | load done: 0.123s
        """
        cls.write(f"{tag}: {value}{unit}", "METRIC")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("bulk_load") as t:
                do_some_work()
            t.elapsed_ms
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed_ms = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """Record the duration as a metric, also on error."""
        self.elapsed_ms = (time.perf_counter() - self.start) * 1000.0
        Log.metric(f"{self.label} done", round(self.elapsed_ms, 3), "ms")
