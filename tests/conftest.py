"""Shared fixtures for the measure_system test suite."""

import sys
import os
import pytest

# Ensure project root is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from measure_system import Measure, Uncertainty


@pytest.fixture
def ten_plus_minus_two():
    """10.0 ± 2.0 in the value's own units."""
    return Measure.with_abs_err(10.0, 2.0)


@pytest.fixture
def asymmetric_measure():
    """10.0 with -1.0 / +2.0 absolute bounds, shown at 1 digit."""
    return Measure(10.0, Uncertainty.absolute_bounds(1.0, 2.0, precision=1))


@pytest.fixture
def divisor():
    """2.91 ± 0.1 shown at 2 digits."""
    return Measure.with_abs_err(2.91, 0.1).with_precision(2)
