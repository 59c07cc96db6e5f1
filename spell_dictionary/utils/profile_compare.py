# utils/profile_compare.py
"""
Build-time and lookup-time comparison of the word set backends.
Used by `spell-dictionary compare` and tools/compare_methods.py.
"""
import time
import statistics
from typing import Dict, Iterable, List, Sequence

from ..core.dictionary_service import BACKENDS

DEFAULT_PROBES = [
    "apple", "zebra", "cat", "dog", "elephant",
    "notfound", "xyz", "test", "hello", "world",
]


def summarize(times: Sequence[float]) -> Dict[str, float]:
    times_sorted = sorted(times)
    if not times_sorted:
        return {"count": 0, "mean_ms": 0.0, "median_ms": 0.0, "max_ms": 0.0}
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "max_ms": times_sorted[-1],
    }


def compare_methods(
    words: List[str],
    probes: Iterable[str] = DEFAULT_PROBES,
    repeat: int = 100,
    methods: Iterable[str] = tuple(BACKENDS),
    collation: str = "unicode",
) -> Dict[str, Dict[str, float]]:
    """
    For each method: build a fresh word set from `words` (timed), then time
    contains() and suggest() over `probes` `repeat` times.
    Returns {method: {"size", "build_ms", "contains_avg_ms", "suggest_avg_ms", ["height"]}}.
    """
    probes = list(probes)
    report: Dict[str, Dict[str, float]] = {}
    for method in methods:
        ws = BACKENDS[method](collation=collation)

        t0 = time.perf_counter()
        ws.bulk_load(words)
        build_ms = (time.perf_counter() - t0) * 1000.0

        contains_times = []
        suggest_times = []
        for _ in range(max(1, repeat)):
            for p in probes:
                t0 = time.perf_counter()
                ws.contains(p)
                contains_times.append((time.perf_counter() - t0) * 1000.0)

                t0 = time.perf_counter()
                ws.suggest(p)
                suggest_times.append((time.perf_counter() - t0) * 1000.0)

        row = {
            "size": len(ws),
            "build_ms": build_ms,
            "contains_avg_ms": summarize(contains_times)["mean_ms"],
            "suggest_avg_ms": summarize(suggest_times)["mean_ms"],
        }
        if hasattr(ws, "height"):
            row["height"] = ws.height()
        report[method] = row
    return report
