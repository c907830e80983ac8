"""Tests for the Union-Find structure."""

from graph_core import UnionFind


def test_union_joins_sets() -> None:
    """After union(a, b), a and b share a root."""
    sets = UnionFind(["a", "b", "c"])
    assert sets.union("a", "b")
    assert sets.find("a") == sets.find("b")
    assert not sets.connected("a", "c")


def test_find_is_idempotent() -> None:
    sets = UnionFind(range(5))
    sets.union(0, 1)
    sets.union(2, 3)
    sets.union(1, 3)
    for item in range(5):
        root = sets.find(item)
        assert sets.find(root) == root
        assert sets.find(item) == root


def test_union_of_same_set_is_rejected() -> None:
    sets = UnionFind(["a", "b"])
    sets.union("a", "b")
    assert not sets.union("b", "a")
    assert sets.count_sets() == 1


def test_equal_rank_puts_second_root_under_first() -> None:
    """Ties keep the first argument's root and bump its rank."""
    sets = UnionFind(["a", "b"])
    sets.union("a", "b")
    assert sets.find("b") == "a"
    assert sets.rank("a") == 1
    assert sets.rank("b") == 0


def test_higher_rank_root_stays_root() -> None:
    sets = UnionFind(["a", "b", "c"])
    sets.union("a", "b")
    sets.union("c", "a")
    assert sets.find("c") == "a"
    assert sets.rank("a") == 1


def test_add_and_membership() -> None:
    sets = UnionFind()
    sets.add("x")
    sets.add("x")
    assert "x" in sets
    assert "y" not in sets
    assert len(sets) == 1
