"""Tests for permutations, selections and pair enumerations."""

import math

import pytest

import seqchain as sc


def _sorted_pairs(pairs: sc.Iter[sc.Pair[int]]) -> list[tuple[int, int]]:
    return sorted(tuple(sorted(pair)) for pair in pairs)


class TestPermutations:
    def test_head_fixing_order(self) -> None:
        result = sc.Seq((1, 2, 3)).permutations().collect()
        assert result.eq(
            ((1, 2, 3), (1, 3, 2), (2, 1, 3), (2, 3, 1), (3, 1, 2), (3, 2, 1))
        )

    def test_count_is_factorial_even_with_duplicates(self) -> None:
        assert sc.Seq((1, 1, 2, 2)).permutations().length() == math.factorial(4)

    def test_duplicates_give_repeated_permutations(self) -> None:
        result = sc.Seq.from_("ABA").permutations().map("".join).collect()
        assert result.eq(("ABA", "AAB", "BAA", "BAA", "AAB", "ABA"))

    def test_empty(self) -> None:
        assert sc.Seq(()).permutations().collect().eq(())

    def test_single(self) -> None:
        assert sc.Iter(["x"]).permutations().collect().eq((("x",),))

    def test_is_lazy(self) -> None:
        pulled: list[int] = []

        def _source():  # noqa: ANN202
            for item in (1, 2):
                pulled.append(item)
                yield item

        perms = sc.Iter(_source()).permutations()
        assert pulled == []
        assert perms.next() == sc.Some((1, 2))

    def test_distinct_permutations_unsupported(self) -> None:
        with pytest.raises(sc.UnsupportedOperationError):
            sc.Seq((1, 1)).distinct_permutations()


class TestChoose:
    def test_zero(self) -> None:
        assert sc.Seq((1, 2)).choose(0).collect().eq(())

    def test_one(self) -> None:
        assert sc.Seq((1, 2)).choose(1).collect().eq(((1,), (2,)))

    def test_negative(self) -> None:
        with pytest.raises(sc.InvalidArgumentError):
            sc.Seq((1, 2)).choose(-1)

    def test_larger_selections_unsupported(self) -> None:
        with pytest.raises(NotImplementedError):
            sc.Seq((1, 2, 3)).choose(2)


class TestUniquePairs:
    def test_index_order(self) -> None:
        pairs = sc.Seq.from_("ABCD").unique_pairs().map(tuple).collect()
        assert pairs.eq(
            (
                ("A", "B"),
                ("A", "C"),
                ("A", "D"),
                ("B", "C"),
                ("B", "D"),
                ("C", "D"),
            )
        )

    def test_count(self) -> None:
        assert sc.Iter(range(10)).unique_pairs().length() == 45

    def test_too_short(self) -> None:
        assert sc.Seq((1,)).unique_pairs().length() == 0
        assert sc.Seq(()).unique_pairs().length() == 0

    def test_selector_receives_value_and_index(self) -> None:
        pairs = (
            sc.Seq.from_("ab")
            .select_unique_pairs(lambda value, idx: f"{value}{idx}")
            .collect()
        )
        assert pairs.eq((sc.Pair("a0", "b1"),))

    def test_missing_selector(self) -> None:
        with pytest.raises(sc.InvalidArgumentError):
            sc.Seq((1, 2)).select_unique_pairs(None)  # type: ignore[arg-type]


class TestTargetPairs:
    def test_two_sum(self) -> None:
        pairs = sc.Seq((5, 3, -1, 2, 0)).target_pairs(2, sc.INT32_ADDITION)
        assert _sorted_pairs(pairs) == [(-1, 3), (0, 2)]

    def test_no_match(self) -> None:
        pairs = sc.Seq((5, 3, -1, 2, 0)).target_pairs(6, sc.INT32_ADDITION)
        assert pairs.collect().eq(())

    def test_duplicates_pair_with_every_partner(self) -> None:
        pairs = sc.Seq((-1, 5, 3, -1, 2, 0)).target_pairs(2, sc.INT32_ADDITION)
        assert _sorted_pairs(pairs) == [(-1, 3), (-1, 3), (0, 2)]

    def test_self_pair_needs_two_occurrences(self) -> None:
        data = sc.Seq((-1, 5, 3, -1, 2, 0))
        assert _sorted_pairs(data.target_pairs(-2, sc.INT32_ADDITION)) == [(-1, -1)]
        assert data.target_pairs(10, sc.INT32_ADDITION).collect().eq(())

    def test_indices(self) -> None:
        pairs = sc.Iter((1, 1, 1)).select_target_pairs(
            2, sc.INT32_ADDITION, lambda _, idx: idx
        )
        assert _sorted_pairs(pairs) == [(0, 1), (0, 2), (1, 2)]

    def test_each_value_is_consumed_once(self) -> None:
        pairs = sc.Seq((1, 3, 3, 1)).target_pairs(4, sc.INT32_ADDITION)
        assert _sorted_pairs(pairs) == [(1, 3), (1, 3), (1, 3), (1, 3)]

    def test_other_groups(self) -> None:
        pairs = sc.Seq((1, 6, 3, 4)).target_pairs(0, sc.ModularAddition(7))
        assert _sorted_pairs(pairs) == [(1, 6), (3, 4)]

    def test_no_inverse_is_surfaced_on_consumption(self) -> None:
        pairs = sc.Seq((1, -(2**31))).target_pairs(0, sc.INT32_ADDITION)
        with pytest.raises(sc.NoInverseError):
            pairs.collect()

    def test_missing_group(self) -> None:
        with pytest.raises(sc.InvalidArgumentError):
            sc.Seq((1, 2)).target_pairs(3, None)  # type: ignore[arg-type]
