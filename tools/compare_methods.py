# tools/compare_methods.py
"""
Benchmark the BST against the hash-backed word set on a word list.
Usage:
  python tools/compare_methods.py --dictionary data/dictionary.txt --repeat 200

Prints build time, average contains()/suggest() latency and tree height per method,
and saves the report to tools/last_compare.json.
"""
import argparse
import json
from pathlib import Path

from spell_dictionary.cli.cli import show_compare
from spell_dictionary.utils.profile_compare import DEFAULT_PROBES, compare_methods
from spell_dictionary.utils.word_store import WordStore


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--dictionary", default="data/dictionary.txt", help="word list, one word per line")
    parser.add_argument("--repeat", type=int, default=100, help="passes over the probe words")
    parser.add_argument("--sorted", action="store_true", help="load words in sorted order (worst-case BST depth)")
    parser.add_argument("--probe", action="append", help="probe word (repeatable)")
    args = parser.parse_args()

    words = WordStore(args.dictionary).load()
    if args.sorted:
        words = sorted(set(words))
    print(f"Loaded {len(words)} words from {args.dictionary}")

    report = compare_methods(words, probes=args.probe or DEFAULT_PROBES, repeat=args.repeat)
    show_compare(report)

    out = Path(__file__).with_name("last_compare.json")
    out.write_text(json.dumps(report, indent=2))
    print(f"Saved report to {out}")


if __name__ == "__main__":
    main()
