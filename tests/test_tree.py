import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import random
import pytest

from tree import StringTree


def build(words):
    tree = StringTree()
    for w in words:
        tree.add(w)
    return tree


def prefixes(words):
    return {w[:i] for w in words for i in range(len(w) + 1)}


def test_empty_tree_has_only_root():
    tree = StringTree()
    assert tree.count() == 1
    assert tree.root_id() == 0
    assert tree.state(0).prefix == ""
    assert tree.alphabet() == ()
    assert tree.derive_table() == [[]]
    assert tree.word_list() == []


def test_worked_example():
    tree = build(["ab", "bc"])
    assert [tree.state(i).prefix for i in range(tree.count())] == ["", "a", "ab", "b", "bc"]
    assert tree.alphabet() == ("a", "b", "c")
    assert tree.alphabet_size() == 3
    assert tree.completion_states() == {"ab": 2, "bc": 4}
    assert tree.word_list() == ["ab", "bc"]
    assert tree.derive_table() == [
        [1, 3, 0],
        [1, 2, 0],
        [1, 3, 4],
        [1, 3, 4],
        [1, 3, 0],
    ]


def test_resolve_fallback():
    tree = build(["ab", "bc"])
    # "ab" + "c" -> "bc"
    assert tree.resolve_fallback(2, "c") == 4
    # "a" + "a" -> "a"
    assert tree.resolve_fallback(1, "a") == 1
    # "bc" + "c" -> nothing
    assert tree.resolve_fallback(4, "c") == 0


def test_row_count_matches_distinct_prefixes():
    words = ["she", "he", "his", "hers", "her"]
    tree = build(words)
    assert tree.count() == len(prefixes(words))
    assert len(tree) == tree.count()
    assert len(tree.derive_table()) == len(prefixes(words))


def test_every_prefix_registered_once():
    words = ["abc", "abd", "b", "cab"]
    tree = build(words)
    ids = [tree.lookup(p) for p in prefixes(words)]
    assert None not in ids
    assert sorted(ids) == list(range(tree.count()))
    assert tree.lookup("zz") is None


def test_readding_word_changes_nothing():
    tree = build(["ab", "bc", "abc"])
    table = tree.derive_table()
    words = tree.word_list()
    finals = tree.completion_states()
    count = tree.count()
    tree.add("ab")
    tree.add("abc")
    assert tree.count() == count
    assert tree.word_list() == words
    assert tree.completion_states() == finals
    assert tree.derive_table() == table


def test_word_that_is_prefix_of_another():
    tree = build(["abc", "ab"])
    assert tree.count() == 4
    assert tree.completion_states() == {"ab": 2, "abc": 3}


def test_empty_word_completes_at_root():
    tree = build(["", "a"])
    assert tree.completion_states() == {"": 0, "a": 1}
    assert tree.alphabet() == ("a",)


def test_table_is_a_snapshot():
    tree = build(["ab"])
    table = tree.derive_table()
    tree.add("cd")
    assert len(table) == 3
    assert len(table[0]) == 2
    assert len(tree.derive_table()) == 5


def test_completion_states_is_a_copy():
    tree = build(["ab"])
    tree.completion_states()["zz"] = 9
    assert tree.completion_states() == {"ab": 2}


def test_constructor_accepts_words():
    assert StringTree(["ab", "bc"]).derive_table() == build(["ab", "bc"]).derive_table()


def longest_known_suffix(tree, s):
    for i in range(len(s)):
        hit = tree.lookup(s[i:])
        if hit is not None:
            return hit
    return tree.root_id()


@pytest.mark.parametrize("seed", range(10))
def test_table_is_total_and_follows_longest_suffix(seed):
    rng = random.Random(seed)
    words = ["".join(rng.choice("abc") for _ in range(rng.randint(1, 5))) for _ in range(rng.randint(1, 6))]
    tree = build(words)
    table = tree.derive_table()
    letters = tree.alphabet()
    assert len(table) == tree.count()
    for state_id, row in enumerate(table):
        assert len(row) == len(letters)
        node = tree.state(state_id)
        for col, ch in enumerate(letters):
            assert 0 <= row[col] < tree.count()
            child = node.child(ch)
            if child is not None:
                assert row[col] == child
            else:
                assert row[col] == longest_known_suffix(tree, node.prefix + ch)


def test_insertion_order_only_renumbers_states():
    a = build(["ab", "bc"])
    b = build(["bc", "ab"])
    # map b's ids onto a's by prefix
    rename = {b.lookup(a.state(i).prefix): i for i in range(a.count())}
    table_a = a.derive_table()
    table_b = b.derive_table()
    for j, row in enumerate(table_b):
        assert [rename[to] for to in row] == table_a[rename[j]]
    assert {w: rename[s] for w, s in b.completion_states().items()} == a.completion_states()
