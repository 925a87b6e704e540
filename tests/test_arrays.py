import random
from collections import Counter

import pytest

from underbar.core.arrays import difference, flatten, intersection, shuffle, zip


class TestZip:
    def test_pads_shorter_inputs_with_none(self):
        assert zip(["a", "b", "c", "d"], [1, 2, 3]) == [
            ("a", 1),
            ("b", 2),
            ("c", 3),
            ("d", None),
        ]

    def test_three_inputs(self):
        assert zip([1, 2], ["a"], [True, False, None]) == [
            (1, "a", True),
            (2, None, False),
            (None, None, None),
        ]

    def test_no_inputs(self):
        assert zip() == []


class TestFlatten:
    def test_nested(self):
        assert flatten([1, [2, 3, [4]], 5]) == [1, 2, 3, 4, 5]

    def test_deep_and_empty(self):
        assert flatten([[[[]]], [], [[1], [[2, [3]]]], []]) == [1, 2, 3]

    def test_strings_and_mappings_are_leaves(self):
        assert flatten(["ab", [{"k": [1]}], ("c", ["d"])]) == ["ab", {"k": [1]}, "c", "d"]

    def test_does_not_mutate(self):
        nested = [1, [2]]
        flatten(nested)
        assert nested == [1, [2]]


class TestIntersection:
    def test_shared_elements(self):
        assert intersection([1, 2, 3], [2, 3, 4]) == [2, 3]

    def test_keeps_order_and_multiplicity_of_first(self):
        assert intersection([3, 2, 3, 1], [3, 1]) == [3, 3, 1]

    def test_many_sequences(self):
        assert intersection(["moe", "curly", "larry"], ["moe", "groucho"], ["moe"]) == [
            "moe"
        ]

    def test_strict_equality(self):
        assert intersection([1, "2", True], ["1", 2, 1]) == [1]


class TestDifference:
    def test_mutates_and_returns_first(self):
        array = [1, 2, 3, 4]
        result = difference(array, [2, 4])
        assert result is array
        assert array == [1, 3]

    def test_many_sequences(self):
        assert difference([1, 2, 3, 4], [2, 30, 40], [1, 11, 111]) == [3, 4]

    def test_removes_every_occurrence(self):
        assert difference([1, 2, 1, 3, 1], [1]) == [2, 3]

    def test_no_others(self):
        array = [1, 2]
        assert difference(array) is array
        assert array == [1, 2]


class TestShuffle:
    @pytest.mark.parametrize("trial", range(20))
    def test_is_permutation(self, trial):
        original = [1, 2, 2, 3, "a", None, 5, 8]
        result = shuffle(list(original))
        assert len(result) == len(original)
        assert Counter(map(repr, result)) == Counter(map(repr, original))

    def test_drains_input(self):
        array = [1, 2, 3]
        result = shuffle(array)
        assert array == []
        assert sorted(result) == [1, 2, 3]

    def test_seeded_rng_is_reproducible(self):
        first = shuffle(list(range(20)), rng=random.Random(7))
        second = shuffle(list(range(20)), rng=random.Random(7))
        assert first == second

    def test_seed_from_settings(self, monkeypatch):
        monkeypatch.setenv("UNDERBAR_SHUFFLE_SEED", "42")
        assert shuffle(list(range(20))) == shuffle(list(range(20)))

    def test_eventually_reorders(self):
        rng = random.Random(1)
        results = {tuple(shuffle(list(range(6)), rng=rng)) for _ in range(20)}
        assert len(results) > 1

    def test_empty(self):
        assert shuffle([]) == []
