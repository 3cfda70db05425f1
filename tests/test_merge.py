"""Tests for sorted merges."""

import pytest

import seqchain as sc


def test_merge_two() -> None:
    merged = sc.Seq((1, 3, 5)).merge_sorted((2, 4, 6)).collect()
    assert merged.eq((1, 2, 3, 4, 5, 6))


def test_merge_many() -> None:
    merged = sc.Iter.merge_sorted_all((1, 9), (2, 3, 10), (), (0, 4, 4)).collect()
    assert merged.eq((0, 1, 2, 3, 4, 4, 9, 10))


def test_merge_nothing() -> None:
    assert sc.Iter.merge_sorted_all().collect().eq(())


def test_merge_with_empty_sides() -> None:
    assert sc.Seq(()).merge_sorted((1, 2)).collect().eq((1, 2))
    assert sc.Seq((1, 2)).merge_sorted(()).collect().eq((1, 2))


def test_ties_yield_right_hand_element_first() -> None:
    merged = (
        sc.Seq((("k", "left"),))
        .merge_sorted([("k", "right")], key=lambda item: item[0])
        .map(lambda item: item[1])
        .collect()
    )
    assert merged.eq(("right", "left"))


def test_result_is_sorted_multiset_union() -> None:
    sources = ((1, 5, 5, 8), (2, 5, 7), (0, 9), (3,))
    merged = sc.Iter.merge_sorted_all(*sources).collect()
    expected = sorted(item for source in sources for item in source)
    assert list(merged) == expected


def test_single_pass_inputs() -> None:
    merged = sc.Iter(iter((1, 4))).merge_sorted(iter((2, 3)), sc.Iter((0, 5)))
    assert merged.collect().eq((0, 1, 2, 3, 4, 5))


def test_merge_is_lazy() -> None:
    pulled: list[int] = []

    def _source(*items: int):  # noqa: ANN202
        for item in items:
            pulled.append(item)
            yield item

    merged = sc.Iter(_source(1, 3)).merge_sorted(_source(2, 4))
    assert pulled == []
    assert merged.take(1).collect().eq((1,))
    assert pulled == [1, 2]


def test_missing_source() -> None:
    with pytest.raises(sc.InvalidArgumentError):
        sc.Seq((1,)).merge_sorted(None)  # type: ignore[arg-type]
    with pytest.raises(sc.InvalidArgumentError):
        sc.Iter.merge_sorted_all((1,), None)  # type: ignore[arg-type]
