import pytest

from kl_hyphenate.errors import BuildError
from kl_hyphenate.patterns import MAX_TALLIES, Patterns, uniques


def test_identical_tallies_are_stored_once():
    patterns = Patterns.from_pairs([
        ("ab", (0, 1, 0)),
        ("cd", (0, 1, 0)),
        ("ef", (0, 0, 2)),
    ])
    assert len(patterns.tallies) == 2
    assert patterns.tally_id("ab") == patterns.tally_id("cd") == 0
    assert patterns.tally_id("ef") == 1
    assert patterns.tally("ab") is patterns.tally("cd")


def test_uniques_sorts_keys_and_keeps_earliest_duplicate():
    kvs, tallies = uniques([
        ("b", (1, 0)),
        ("a", (0, 1)),
        ("b", (2, 0)),
    ])
    assert tallies == [(1, 0), (0, 1), (2, 0)]
    assert kvs == [("a", 1), ("b", 0)]


def test_tally_ids_are_dense():
    pairs = [(f"k{i}", (i % 3, 0)) for i in range(30)]
    _, tallies = uniques(pairs)
    patterns = Patterns.from_pairs(pairs)
    ids = {patterns.tally_id(f"k{i}") for i in range(30)}
    assert ids == set(range(len(tallies))) == {0, 1, 2}


def test_exact_and_prefix_lookup():
    patterns = Patterns.from_pairs([
        ("hy", (0, 1, 0)),
        ("hyph", (0, 0, 3, 0, 0)),
        ("phen", (1, 0, 0, 0, 0)),
    ])
    assert "hyph" in patterns
    assert "hyp" not in patterns
    assert patterns.tally("hyp") is None
    assert len(patterns) == 3
    assert patterns.keys() == ["hy", "hyph", "phen"]
    assert sorted(patterns.prefix_tallies("hyphen")) == [(0, 0, 3, 0, 0), (0, 1, 0)]
    assert list(patterns.prefix_tallies("xyz")) == []


def test_bytes_round_trip():
    patterns = Patterns.from_pairs([("ab", (0, 1, 0)), ("über", (0, 1, 0, 0, 0))])
    restored = Patterns.from_bytes(patterns.tallies, patterns.tobytes())
    assert restored.tally("über") == (0, 1, 0, 0, 0)
    assert restored.keys() == patterns.keys()


def test_too_many_tallies():
    pairs = [(f"k{i}", (i % 256, i // 256)) for i in range(MAX_TALLIES + 1)]
    with pytest.raises(BuildError):
        Patterns.from_pairs(pairs)
