"""Tests for shift, trim, positional edits, increasing runs and rotation checks."""

from collections.abc import Iterable

import pytest

import seqchain as sc


class TestShift:
    @pytest.mark.parametrize(
        ("shifts", "expected"),
        [(0, "ABCD"), (1, "DABC"), (2, "CDAB"), (-1, "BCDA"), (5, "DABC"), (-8, "ABCD")],
    )
    def test_shift(self, shifts: int, expected: str) -> None:
        assert "".join(sc.Seq.from_("ABCD").shift(shifts)) == expected

    def test_empty(self) -> None:
        assert sc.Seq(()).shift(3).collect().eq(())

    def test_shift_back_is_identity(self) -> None:
        data = tuple(range(7))
        for k in range(-10, 10):
            shifted = sc.Seq(data).shift(k).collect()
            assert shifted.shift(-k).collect().eq(data)

    def test_single_pass_input(self) -> None:
        assert sc.Iter(iter("ABC")).shift(1).collect().eq(("C", "A", "B"))

    def test_does_not_mutate_input(self) -> None:
        data = sc.Vec([1, 2, 3])
        data.shift(1).collect()
        assert data.inner() == [1, 2, 3]


class TestTrim:
    def test_trim_both_ends(self) -> None:
        result = sc.Seq.from_("  a b  ").trim(" ")
        assert "".join(result) == "a b"

    def test_several_items(self) -> None:
        result = sc.Seq((0, None, 1, 0, 2, None, 0)).trim(0, None)
        assert result.collect().eq((1, 0, 2))

    def test_nothing_to_trim(self) -> None:
        assert sc.Seq((1, 2)).trim().collect().eq((1, 2))
        assert sc.Seq((1, 2)).trim(3).collect().eq((1, 2))

    def test_everything_trimmed(self) -> None:
        assert sc.Seq((0, 0)).trim(0).collect().eq(())

    def test_single_pass_input(self) -> None:
        result = sc.Iter(iter((9, 1, 9, 9, 2, 9))).trim(9)
        assert result.collect().eq((1, 9, 9, 2))


class TestSkipAt:
    def test_skip(self) -> None:
        assert sc.Seq.from_("ABC").skip_at(0).collect().eq(("B", "C"))
        assert sc.Seq.from_("ABC").skip_at(2).collect().eq(("A", "B"))

    def test_negative_index(self) -> None:
        with pytest.raises(sc.InvalidArgumentError):
            sc.Seq((1,)).skip_at(-1)

    def test_out_of_range_is_eager_for_countable_data(self) -> None:
        with pytest.raises(sc.OutOfRangeError):
            sc.Seq((1, 2)).skip_at(2)

    def test_out_of_range_is_lazy_for_single_pass_data(self) -> None:
        result = sc.Iter(iter((1, 2))).skip_at(5)
        with pytest.raises(IndexError):
            result.collect()


class TestReplaceAt:
    def test_replace(self) -> None:
        assert sc.Seq((1, 2, 3)).replace_at(0, 1).collect().eq((1, 0, 3))

    def test_out_of_range(self) -> None:
        with pytest.raises(sc.OutOfRangeError):
            sc.Vec([1]).replace_at(0, 1)
        result = sc.Iter(iter(())).replace_at(0, 0)
        with pytest.raises(sc.OutOfRangeError):
            result.collect()


def test_find_and_replace_is_unsupported() -> None:
    with pytest.raises(sc.UnsupportedOperationError):
        sc.Seq((1, 2)).find_and_replace((1,), (3,))
    with pytest.raises(sc.InvalidArgumentError):
        sc.Seq((1, 2)).find_and_replace(None, (3,))  # type: ignore[arg-type]


class TestIncreasingRuns:
    def test_maximal_runs(self) -> None:
        runs = sc.Seq((1, 0, 1, 5, 5, 3, 3, 6, -3, 1, 0)).increasing_runs()
        assert runs.map(tuple).collect().eq(((0, 1, 5), (3, 6), (-3, 1)))

    def test_no_run(self) -> None:
        assert sc.Seq((3, 2, 1)).increasing_runs().collect().eq(())
        assert sc.Seq((1,)).increasing_runs().collect().eq(())
        assert sc.Seq(()).increasing_runs().collect().eq(())

    def test_whole_input(self) -> None:
        runs = sc.Iter(range(4)).increasing_runs().map(tuple).collect()
        assert runs.eq(((0, 1, 2, 3),))

    def test_key(self) -> None:
        runs = sc.Seq.from_("aBcA").increasing_runs(key=str.lower).map("".join)
        assert runs.collect().eq(("aBc",))


class TestIsRotationOf:
    def test_rotations(self) -> None:
        data = sc.Seq.from_("ABCD")
        assert data.is_rotation_of("ABCD")
        assert data.is_rotation_of("CDAB")
        assert data.is_rotation_of(sc.Seq.from_("DABC"))

    def test_not_rotations(self) -> None:
        data = sc.Seq.from_("ABCD")
        assert not data.is_rotation_of("DCBA")
        assert not data.is_rotation_of("ABC")
        assert not data.is_rotation_of("ABCE")

    def test_reflexive(self) -> None:
        data = sc.Seq((1, 2, 1))
        assert data.is_rotation_of(data)
        it = sc.Iter(iter((1, 2)))
        assert it.is_rotation_of(it)

    @pytest.mark.parametrize("empty", [(), [], iter(()), sc.Iter(())])
    def test_empty_sequences(self, empty: Iterable[int]) -> None:
        assert sc.Seq(()).is_rotation_of(empty)
        assert sc.Iter(iter(())).is_rotation_of(empty)

    def test_empty_against_non_empty(self) -> None:
        assert not sc.Seq(()).is_rotation_of([1])
        assert not sc.Seq((1,)).is_rotation_of(iter(()))

    def test_unordered_inputs_are_materialized(self) -> None:
        data = sc.Seq.from_("ab")
        assert data.is_rotation_of({"b": 1, "a": 2}.keys())
        assert not data.is_rotation_of({"a": 1, "c": 2}.keys())

    def test_single_pass_inputs(self) -> None:
        assert sc.Iter(iter((1, 2, 3))).is_rotation_of(iter((3, 1, 2)))

    def test_parallel(self) -> None:
        data = tuple(range(50))
        rotated = data[17:] + data[:17]
        assert sc.Seq(data).is_rotation_of(rotated, parallel=True)
        assert not sc.Seq(data).is_rotation_of(rotated[::-1], parallel=True)

    def test_custom_equality(self) -> None:
        data = sc.Seq.from_("abc")
        assert data.is_rotation_of("CAB", eq=lambda a, b: a.lower() == b.lower())

    def test_missing_other(self) -> None:
        with pytest.raises(sc.InvalidArgumentError):
            sc.Seq((1,)).is_rotation_of(None)  # type: ignore[arg-type]
