# metrics_tracker.py - running averages for check/add/list latencies

import json
import os
from collections import defaultdict

from .logger_utils import Log


class Metrics:
    def __init__(self, path=None):
        self.path = path  # None keeps metrics in memory only
        self.m = defaultdict(float)
        self.n = defaultdict(int)
        self._load()

    def _load(self):
        if not (self.path and os.path.exists(self.path)):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            sums = {k: float(v["sum"]) for k, v in d.items()}
            counts = {k: int(v["count"]) for k, v in d.items()}
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            Log.warning(f"[Metrics] could not read {self.path}, starting empty: {e}")
            return
        self.m.update(sums)
        self.n.update(counts)

    def save(self):
        if not self.path:
            return
        d = {k: {"sum": self.m[k], "count": self.n[k]} for k in self.m}
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(d, f, indent=2)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1
        self.save()

    def avg(self, key):
        if self.n[key] == 0: return 0.0
        return self.m[key] / self.n[key]

    def rows(self):
        """(key, calls, average) tuples, sorted by key."""
        return [(k, self.n[k], self.avg(k)) for k in sorted(self.m)]
