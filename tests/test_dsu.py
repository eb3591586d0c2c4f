"""Tests for dsu.py"""

import pytest

from dsu import DisjointSetForest
from mst_errors import AlreadyPresentError, NotPresentError, NullElementError


@pytest.fixture
def forest():
    ds = DisjointSetForest()
    for e in range(6):
        ds.make_set(e)
    return ds


class TestMakeSet:
    def test_new_element_is_its_own_representative(self):
        ds = DisjointSetForest()
        ds.make_set("a")
        assert ds.is_present("a")
        assert ds.find_set("a") == "a"
        assert ds.rank_of("a") == 0

    def test_duplicate_rejected(self, forest):
        with pytest.raises(AlreadyPresentError):
            forest.make_set(3)

    def test_equal_values_are_the_same_element(self):
        ds = DisjointSetForest()
        ds.make_set((1, 2))
        assert ds.is_present((1, 2))
        with pytest.raises(AlreadyPresentError):
            ds.make_set((1, 2))

    def test_none_rejected(self):
        ds = DisjointSetForest()
        with pytest.raises(NullElementError):
            ds.make_set(None)
        with pytest.raises(NullElementError):
            ds.is_present(None)
        with pytest.raises(TypeError):
            ds.find_set(None)


class TestFindSet:
    def test_absent_element_returns_none(self, forest):
        assert forest.find_set(42) is None

    def test_path_compression_flattens_long_chain(self):
        """A hand-built chain deeper than the recursion limit is flattened in one find."""
        ds = DisjointSetForest()
        n = 5000
        for i in range(n):
            ds.make_set(i)
        for i in range(n - 1):
            ds.parent[i] = i + 1
        assert ds.find_set(0) == n - 1
        assert all(ds.parent[i] == n - 1 for i in range(n))

    def test_same_representative_regardless_of_order(self, forest):
        forest.union(0, 1)
        forest.union(2, 3)
        forest.union(1, 3)
        forest.union(4, 5)
        reps = {forest.find_set(e) for e in (3, 0, 2, 1)}
        assert len(reps) == 1
        assert forest.find_set(4) == forest.find_set(5)
        assert forest.find_set(4) not in reps


class TestUnion:
    def test_union_joins_sets(self, forest):
        assert forest.union(0, 1) is True
        assert forest.find_set(0) == forest.find_set(1)

    def test_equal_ranks_second_root_wins(self, forest):
        forest.union(0, 1)
        assert forest.find_set(0) == 1
        assert forest.rank_of(1) == 1
        assert forest.rank_of(0) == 0

    def test_lower_rank_goes_under_higher_rank(self, forest):
        forest.union(0, 1)  # root 1, rank 1
        forest.union(1, 2)  # 2 has rank 0, so 1 stays root
        assert forest.find_set(2) == 1
        assert forest.rank_of(1) == 1
        forest.union(3, 0)
        assert forest.find_set(3) == 1
        assert forest.rank_of(1) == 1

    def test_union_is_idempotent(self, forest):
        forest.union(0, 1)
        parent = dict(forest.parent)
        rank = dict(forest.rank)
        assert forest.union(0, 1) is False
        assert forest.union(1, 0) is False
        assert forest.parent == parent
        assert forest.rank == rank

    def test_missing_element_rejected(self, forest):
        with pytest.raises(NotPresentError):
            forest.union(0, 99)
        with pytest.raises(NotPresentError):
            forest.union(99, 0)

    def test_none_rejected(self, forest):
        with pytest.raises(NullElementError):
            forest.union(None, 1)
        with pytest.raises(NullElementError):
            forest.union(1, None)


class TestQueries:
    def test_representatives_without_unions(self, forest):
        assert forest.get_current_representatives() == set(range(6))

    def test_representatives_after_k_unions(self, forest):
        merges = 0
        for a, b in [(0, 1), (1, 2), (0, 2), (3, 4), (4, 3)]:
            if forest.union(a, b):
                merges += 1
        assert merges == 3
        assert len(forest.get_current_representatives()) == 6 - merges
        assert forest.num_components() == 3

    def test_elements_of_set_containing(self, forest):
        forest.union(0, 1)
        forest.union(1, 2)
        assert forest.get_current_elements_of_set_containing(2) == {0, 1, 2}
        assert forest.get_current_elements_of_set_containing(5) == {5}

    def test_elements_of_set_containing_errors(self, forest):
        with pytest.raises(NotPresentError):
            forest.get_current_elements_of_set_containing(7)
        with pytest.raises(NullElementError):
            forest.get_current_elements_of_set_containing(None)

    def test_components(self, forest):
        forest.union(0, 1)
        comps = forest.components()
        assert sorted(sorted(members) for members in comps.values()) == [[0, 1], [2], [3], [4], [5]]

    def test_container_protocol(self, forest):
        assert len(forest) == 6
        assert 3 in forest
        assert None not in forest
        assert sorted(forest) == list(range(6))

    def test_clear(self, forest):
        forest.union(0, 1)
        forest.clear()
        assert len(forest) == 0
        assert not forest.is_present(0)
        assert forest.get_current_representatives() == set()
        forest.make_set(0)
        assert forest.find_set(0) == 0
