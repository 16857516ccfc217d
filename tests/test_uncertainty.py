"""Tests for the Uncertainty variants: construction, conversion and combination."""

import pytest

from measure_system import (
    Absolute,
    Certain,
    Relative,
    Uncertainty,
    UncertaintyKindError,
    UndefinedRelativeError,
)
from measure_system.config import DEFAULT_PRECISION


class TestConstruction:
    """Tests for the variant constructors."""

    def test_certain_has_zero_magnitude(self):
        u = Uncertainty.certain()
        assert isinstance(u, Certain)
        assert u.magnitude == 0.0
        assert u.precision == DEFAULT_PRECISION

    def test_magnitudes_are_made_non_negative(self):
        assert Uncertainty.absolute(-0.5).magnitude == 0.5
        assert Uncertainty.relative(-12.0).magnitude == 12.0
        bounds = Uncertainty.absolute_bounds(-1.0, -3.0)
        assert (bounds.low, bounds.high) == (1.0, 3.0)

    def test_symmetric_constructors_have_equal_bounds(self):
        assert Uncertainty.absolute(0.3).is_symmetric
        assert Uncertainty.relative(4.0).is_symmetric
        assert not Uncertainty.relative_bounds(1.0, 2.0).is_symmetric

    def test_kinds(self):
        assert Uncertainty.certain().kind == "certain"
        assert Uncertainty.absolute(1.0).kind == "absolute"
        assert Uncertainty.relative(1.0).kind == "relative"

    def test_base_type_is_not_instantiable(self):
        with pytest.raises(TypeError):
            Uncertainty(1.0, 1.0)

    @pytest.mark.parametrize("precision", [-1, 1.5, "2"])
    def test_rejects_invalid_precision(self, precision):
        with pytest.raises(ValueError):
            Uncertainty.absolute(1.0, precision=precision)


class TestWithPrecision:
    """Precision override keeps kind and magnitude."""

    def test_keeps_kind_and_magnitude(self):
        u = Uncertainty.relative(3.0, precision=4).with_precision(1)
        assert u == Relative(3.0, 3.0, 1)

    def test_certain_stays_certain(self):
        u = Uncertainty.certain().with_precision(2)
        assert u == Certain(precision=2)

    def test_returns_new_instance(self):
        u = Uncertainty.absolute(1.0)
        u.with_precision(0)
        assert u.precision == DEFAULT_PRECISION


class TestConversion:
    """Tests for to_absolute / to_relative."""

    def test_relative_to_absolute_uses_magnitude_of_value(self):
        u = Uncertainty.relative(10.0, precision=2).to_absolute(-50.0)
        assert u == Absolute(5.0, 5.0, 2)

    def test_absolute_to_absolute_is_identity(self):
        u = Uncertainty.absolute(0.2)
        assert u.to_absolute(123.0) is u

    def test_absolute_to_relative(self):
        u = Uncertainty.absolute(0.1).to_relative(2.91)
        assert isinstance(u, Relative)
        assert u.magnitude == pytest.approx(0.1 / 2.91 * 100)

    def test_relative_to_relative_is_identity(self):
        u = Uncertainty.relative(7.0)
        assert u.to_relative(0.0) is u

    def test_certain_converts_to_zero_keeping_precision(self):
        u = Uncertainty.certain(precision=1)
        assert u.to_absolute(3.0) == Absolute(0.0, 0.0, 1)
        assert u.to_relative(0.0) == Relative(0.0, 0.0, 1)

    def test_absolute_to_relative_of_zero_value_raises(self):
        with pytest.raises(UndefinedRelativeError):
            Uncertainty.absolute(0.1).to_relative(0.0)

    def test_zero_value_error_is_a_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            Uncertainty.absolute(0.0).to_relative(0.0)

    @pytest.mark.parametrize("value", [2.91, -4.0, 1e-3, 250.0])
    def test_relative_round_trip(self, value):
        u = Uncertainty.relative(7.5, precision=3)
        back = u.to_absolute(value).to_relative(value)
        assert isinstance(back, Relative)
        assert back.magnitude == pytest.approx(7.5)
        assert back.precision == 3

    @pytest.mark.parametrize("value", [2.91, -4.0, 1e-3, 250.0])
    def test_absolute_round_trip(self, value):
        u = Uncertainty.absolute_bounds(0.1, 0.4)
        back = u.to_relative(value).to_absolute(value)
        assert isinstance(back, Absolute)
        assert back.low == pytest.approx(0.1)
        assert back.high == pytest.approx(0.4)

    def test_asymmetric_sides_convert_independently(self):
        u = Uncertainty.relative_bounds(10.0, 20.0).to_absolute(5.0)
        assert u.low == pytest.approx(0.5)
        assert u.high == pytest.approx(1.0)


class TestCombination:
    """Direct combination of uncertainties."""

    def test_absolute_sum(self):
        u = Uncertainty.absolute(0.1, precision=3) + Uncertainty.absolute(0.2, precision=1)
        assert isinstance(u, Absolute)
        assert u.magnitude == pytest.approx(0.3)
        assert u.precision == 1

    def test_certain_counts_as_zero_absolute(self):
        u = Uncertainty.certain(precision=2) + Uncertainty.absolute(0.5)
        assert u == Absolute(0.5, 0.5, 2)

    def test_relative_product(self):
        u = Uncertainty.relative(2.0, precision=4) * Uncertainty.relative(3.0, precision=2)
        assert u == Relative(5.0, 5.0, 2)

    def test_certain_counts_as_zero_relative(self):
        u = Uncertainty.relative(2.0) * Uncertainty.certain()
        assert u == Relative(2.0, 2.0, DEFAULT_PRECISION)

    def test_adding_absolute_and_relative_fails(self):
        with pytest.raises(UncertaintyKindError) as exc_info:
            Uncertainty.absolute(0.1) + Uncertainty.relative(5.0)
        message = str(exc_info.value)
        assert "absolute" in message
        assert "relative" in message

    def test_multiplying_absolute_and_relative_fails(self):
        with pytest.raises(UncertaintyKindError):
            Uncertainty.relative(5.0) * Uncertainty.absolute(0.1)

    def test_multiplying_two_absolutes_fails(self):
        with pytest.raises(TypeError):
            Uncertainty.absolute(1.0) * Uncertainty.absolute(2.0)

    def test_kind_error_keeps_operands(self):
        left, right = Uncertainty.relative(1.0), Uncertainty.absolute(2.0)
        with pytest.raises(UncertaintyKindError) as exc_info:
            left + right
        assert exc_info.value.left is left
        assert exc_info.value.right is right
        assert exc_info.value.required == "absolute"

    def test_flipped_swaps_sides(self):
        u = Uncertainty.absolute_bounds(1.0, 2.0).flipped()
        assert (u.low, u.high) == (2.0, 1.0)


class TestFormat:
    """Rendering of the uncertainty alone."""

    def test_absolute(self):
        assert str(Uncertainty.absolute(0.1, precision=2)) == "0.10"

    def test_relative_has_percent_suffix(self):
        assert str(Uncertainty.relative(3.456, precision=1)) == "3.5 %"

    def test_certain(self):
        assert str(Uncertainty.certain(precision=0)) == "0"

    def test_asymmetric(self):
        assert str(Uncertainty.absolute_bounds(0.1, 0.2, precision=1)) == "+0.2 / -0.1"
        assert str(Uncertainty.relative_bounds(1.0, 2.0, precision=0)) == "+2 % / -1 %"

    def test_explicit_precision(self):
        assert Uncertainty.absolute(0.123456).format(3) == "0.123"

    def test_precision_is_display_only(self):
        u = Uncertainty.absolute(0.123456, precision=1)
        assert u.magnitude == 0.123456
