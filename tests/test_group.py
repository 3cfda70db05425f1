"""Tests for the bundled groups."""

from fractions import Fraction

import pytest

import seqchain as sc


class TestIntegerAddition:
    def test_identity(self) -> None:
        assert sc.INT32_ADDITION.identity == 0

    def test_operate_wraps_around(self) -> None:
        group = sc.INT32_ADDITION
        assert group.operate(2**31 - 1, 1) == -(2**31)
        assert group.operate(-(2**31), -1) == 2**31 - 1
        assert group.operate(20, 22) == 42

    def test_invert(self) -> None:
        assert sc.INT32_ADDITION.invert(5) == -5
        assert sc.INT32_ADDITION.invert(-(2**31) + 1) == 2**31 - 1
        assert sc.INT32_ADDITION.invert(0) == 0

    def test_most_negative_value_has_no_inverse(self) -> None:
        with pytest.raises(sc.NoInverseError):
            sc.INT32_ADDITION.invert(-(2**31))

    def test_no_inverse_is_an_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError):
            sc.IntegerAddition(bits=8).invert(-128)

    def test_try_invert(self) -> None:
        assert sc.INT32_ADDITION.try_invert(3) == sc.Ok(-3)
        failed = sc.INT32_ADDITION.try_invert(-(2**31))
        assert failed.is_err()
        assert isinstance(failed.unwrap_err(), sc.NoInverseError)

    def test_out_of_range_operand(self) -> None:
        with pytest.raises(sc.InvalidArgumentError):
            sc.INT32_ADDITION.operate(2**31, 0)

    def test_invalid_width(self) -> None:
        with pytest.raises(sc.InvalidArgumentError):
            sc.IntegerAddition(bits=0)

    def test_bounds(self) -> None:
        assert sc.INT64_ADDITION.min_value == -(2**63)
        assert sc.INT64_ADDITION.max_value == 2**63 - 1

    def test_bundled_groups_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            sc.INT32_ADDITION.bits = 16  # type: ignore[misc]


def test_complement() -> None:
    assert sc.INT32_ADDITION.complement(10, 3) == 7
    assert sc.INT32_ADDITION.complement(-2, -1) == -1


def test_modular_addition() -> None:
    z5 = sc.ModularAddition(5)
    assert z5.identity == 0
    assert z5.operate(3, 4) == 2
    assert z5.invert(2) == 3
    assert z5.operate(2, z5.invert(2)) == z5.identity


def test_modular_addition_rejects_bad_modulus() -> None:
    with pytest.raises(sc.InvalidArgumentError):
        sc.ModularAddition(0)


def test_fn_group() -> None:
    product = sc.FnGroup(Fraction(1), lambda a, b: a * b, lambda a: 1 / a)
    assert product.identity == 1
    assert product.complement(Fraction(12), Fraction(4)) == 3


def test_group_cannot_be_instantiated_without_operations() -> None:
    with pytest.raises(TypeError):
        sc.Group()  # type: ignore[abstract]
