# tests/test_ordered_word_set.py
# behaviour of the BST core: ordering, dedup, normalization, suggestions

import itertools

import pytest

from spell_dictionary.core.ordered_word_set import OrderedWordSet


def test_all_words_sorted():
    ws = OrderedWordSet()
    ws.bulk_load(["banana", "apple", "cherry"])
    assert ws.all_words() == ["apple", "banana", "cherry"]


def test_case_and_whitespace_variants_collapse():
    ws = OrderedWordSet()
    ws.bulk_load(["Apple", " apple ", "APPLE"])
    assert ws.all_words() == ["apple"]
    assert len(ws) == 1


def test_contains_normalizes_query(fruit_set):
    assert fruit_set.contains("banana")
    assert fruit_set.contains("  BaNaNa\t")
    assert "Cherry" in fruit_set
    assert not fruit_set.contains("bananas")
    assert not fruit_set.contains("")
    assert 42 not in fruit_set


def test_empty_and_blank_words_are_ignored():
    ws = OrderedWordSet()
    ws.insert("")
    ws.insert("   \n")
    assert len(ws) == 0
    assert ws.all_words() == []


def test_insert_is_idempotent():
    once = OrderedWordSet()
    once.bulk_load(["kiwi", "fig"])
    many = OrderedWordSet()
    many.bulk_load(["kiwi", "fig"] + ["kiwi"] * 5 + [" FIG "] * 3)
    assert many.all_words() == once.all_words()
    assert len(many) == len(once) == 2
    assert many.height() == once.height()


def test_membership_independent_of_insert_order():
    words = ["pear", "plum", "peach", "lime", "date"]
    expected = sorted(words)
    for perm in itertools.permutations(words):
        ws = OrderedWordSet()
        ws.bulk_load(perm)
        assert ws.all_words() == expected
        assert all(ws.contains(w) for w in words)
        assert not ws.contains("grape")


def test_suggest_prefix_matches(fruit_set):
    assert fruit_set.suggest("app", 10) == ["apple", "application", "apply"]
    assert fruit_set.suggest("  APP ", 10) == ["apple", "application", "apply"]


def test_suggest_respects_limit_and_keeps_smallest(fruit_set):
    assert fruit_set.suggest("app", 2) == ["apple", "application"]
    assert fruit_set.suggest("app", 1) == ["apple"]


def test_suggest_falls_back_to_first_words():
    ws = OrderedWordSet()
    ws.bulk_load(["cherry", "banana"])
    assert ws.suggest("xyz", 2) == ["banana", "cherry"]
    assert ws.suggest("xyz", 1) == ["banana"]


def test_suggest_empty_prefix_uses_first_words(fruit_set):
    assert fruit_set.suggest("", 3) == fruit_set.all_words()[:3]
    assert fruit_set.suggest("   ", 3) == fruit_set.all_words()[:3]


def test_suggest_default_limit_is_ten():
    ws = OrderedWordSet()
    ws.bulk_load(f"a{i:02d}" for i in range(25))
    assert len(ws.suggest("a")) == 10


@pytest.mark.parametrize("limit", [0, -1, -10])
def test_suggest_non_positive_limit(fruit_set, limit):
    assert fruit_set.suggest("app", limit) == []
    assert fruit_set.suggest("zzz", limit) == []


def test_empty_tree():
    ws = OrderedWordSet()
    assert ws.contains("anything") is False
    assert ws.all_words() == []
    assert ws.suggest("a", 5) == []
    assert ws.height() == 0
    assert list(ws) == []


def test_suggest_does_not_mutate(fruit_set):
    before = fruit_set.all_words()
    fruit_set.suggest("app")
    fruit_set.suggest("nothing")
    fruit_set.contains("pear")
    assert fruit_set.all_words() == before
    assert len(fruit_set) == len(before)


def test_sorted_input_gives_linear_depth_but_correct_results():
    words = [f"word{i:04d}" for i in range(1000)]
    ws = OrderedWordSet()
    ws.bulk_load(words)
    assert ws.height() == 1000
    assert ws.all_words() == words
    assert all(ws.contains(w) for w in words[::37])
    assert not ws.contains("word1000")
    assert ws.suggest("word09", 3) == ["word0900", "word0901", "word0902"]


def test_balanced_insert_order_is_shallow():
    ws = OrderedWordSet()
    ws.bulk_load(["m", "f", "t", "c", "h", "p", "w"])
    assert ws.height() == 3


def test_accented_words_use_dictionary_order():
    ws = OrderedWordSet()
    ws.bulk_load(["cafeteria", "café", "cab", "cafe", "éclair", "zebra"])
    assert ws.all_words() == ["cab", "cafe", "café", "cafeteria", "éclair", "zebra"]
    assert ws.suggest("caf") == ["cafe", "café", "cafeteria"]
    assert ws.contains("CAFÉ")


def test_iter_matches_all_words(fruit_set):
    assert list(fruit_set) == fruit_set.all_words()


def test_clear(fruit_set):
    fruit_set.clear()
    assert len(fruit_set) == 0
    assert fruit_set.all_words() == []


def test_unknown_collation_rejected():
    with pytest.raises(ValueError):
        OrderedWordSet(collation="klingon")
