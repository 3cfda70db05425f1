"""Tests for majority vote and counting operators."""

import pytest

import seqchain as sc


class TestMajorityElement:
    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("ABACA", sc.Some("A")),
            ("ABAC", sc.NONE),
            ("ABBB", sc.Some("B")),
            ("A", sc.Some("A")),
            ("AB", sc.NONE),
            ("", sc.NONE),
        ],
    )
    def test_strict_majority(self, data: str, expected: sc.Option[str]) -> None:
        assert sc.Seq.from_(data).majority_element() == expected

    def test_single_pass_input(self) -> None:
        assert sc.Iter(iter([2, 1, 2, 3, 2])).majority_element() == sc.Some(2)

    def test_none_can_be_the_majority(self) -> None:
        assert sc.Seq((None, 1, None)).majority_element() == sc.Some(None)

    def test_custom_equality(self) -> None:
        result = sc.Seq.from_("aAb").majority_element(
            eq=lambda a, b: a.lower() == b.lower()
        )
        assert result == sc.Some("a")

    def test_absent_is_not_a_default_value(self) -> None:
        assert sc.Seq((0, 1)).majority_element().is_none()
        assert sc.Seq((0, 0, 1)).majority_element().unwrap() == 0


def test_counts() -> None:
    assert sc.Seq.from_("mississippi").counts() == {"m": 1, "i": 4, "s": 4, "p": 2}


class TestAdjacentCounts:
    def test_run_length(self) -> None:
        counts = sc.Seq.from_("aaabccddd").adjacent_counts().collect()
        assert counts.eq(
            (sc.Count("a", 3), sc.Count("b", 1), sc.Count("c", 2), sc.Count("d", 3))
        )

    def test_empty(self) -> None:
        assert sc.Seq(()).adjacent_counts().collect().eq(())

    def test_totals_match_length(self) -> None:
        data = (1, 1, 2, 1, 1, 1, 3)
        counts = sc.Iter(data).adjacent_counts().collect()
        assert sum(count.count for count in counts) == len(data)


class TestHasAtLeast:
    def test_sized(self) -> None:
        assert sc.Seq((1, 2, 3)).has_at_least(3)
        assert not sc.Seq((1, 2, 3)).has_at_least(4)
        assert sc.Seq(()).has_at_least(0)

    def test_pulls_at_most_k(self) -> None:
        it = sc.Iter(range(10))
        assert it.has_at_least(4)
        assert it.next() == sc.Some(4)

    def test_negative(self) -> None:
        with pytest.raises(sc.InvalidArgumentError):
            sc.Seq((1,)).has_at_least(-1)


def test_has_single_element() -> None:
    assert sc.Iter([5]).has_single_element() == sc.Some(5)
    assert sc.Iter([]).has_single_element() == sc.NONE
    assert sc.Iter([5, 6]).has_single_element() == sc.NONE


def test_is_unique() -> None:
    assert sc.Seq.from_("abc").is_unique()
    assert not sc.Iter("abca").is_unique()
    assert sc.Seq(()).is_unique()
    assert sc.Iter(iter("abc")).is_unique()
    assert not sc.Vec([1, 2, 1]).is_unique()


class TestIsPermutationOf:
    def test_same_multiset(self) -> None:
        assert sc.Seq((1, 2, 2, 3)).is_permutation_of((2, 3, 1, 2))

    def test_different_multiplicities(self) -> None:
        assert not sc.Seq((1, 2, 2)).is_permutation_of((1, 1, 2))

    def test_different_lengths(self) -> None:
        assert not sc.Seq((1, 2)).is_permutation_of(sc.Seq((1, 2, 2)))
        assert not sc.Iter((1, 2)).is_permutation_of(iter((1, 2, 2)))

    def test_missing_other(self) -> None:
        with pytest.raises(sc.InvalidArgumentError):
            sc.Seq((1,)).is_permutation_of(None)  # type: ignore[arg-type]
