"""
Measure: a real value paired with the Uncertainty of its error bar.

Arithmetic follows first-order error propagation for uncorrelated inputs
taken at worst case (magnitudes add, no quadrature):

    a ± b   absolute uncertainties are summed
    a × ÷ b relative uncertainties (percent) are summed

Each operand's uncertainty is converted with its own value before combining,
so callers never convert by hand.
"""

import re
from dataclasses import dataclass
from numbers import Real
from typing import Optional, Tuple

from .config import INTERVAL_SEPARATOR, PLUS_MINUS
from .uncertainty import Absolute, Relative, Uncertainty

_FORMAT_SPEC = re.compile(r"^\.(\d+)f?$")


@dataclass(frozen=True)
class Measure:
    """An immutable value ± uncertainty. Every operation returns a new Measure."""
    value: float
    uncertainty: Uncertainty = Uncertainty.certain()

    def __post_init__(self):
        if not isinstance(self.uncertainty, Uncertainty):
            raise TypeError(
                f"uncertainty must be an Uncertainty, got {type(self.uncertainty).__name__}"
            )
        object.__setattr__(self, "value", float(self.value))

    # ── Constructors ──

    @classmethod
    def with_no_err(cls, value: float) -> "Measure":
        return cls(value, Uncertainty.certain())

    @classmethod
    def with_rel_err(cls, value: float, percent: float) -> "Measure":
        """value ± percent % of value."""
        return cls(value, Uncertainty.relative(percent))

    @classmethod
    def with_abs_err(cls, value: float, magnitude: float) -> "Measure":
        """value ± magnitude, in the units of value."""
        return cls(value, Uncertainty.absolute(magnitude))

    # ── Accessors ──

    @property
    def precision(self) -> int:
        return self.uncertainty.precision

    def with_precision(self, precision: int) -> "Measure":
        return Measure(self.value, self.uncertainty.with_precision(precision))

    def to_absolute(self) -> Absolute:
        return self.uncertainty.to_absolute(self.value)

    def to_relative(self) -> Relative:
        """Raises UndefinedRelativeError for a zero value with absolute error."""
        return self.uncertainty.to_relative(self.value)

    def resolve_interval(self) -> Tuple[float, float]:
        """(value - low, value + high), with the error bar in absolute units."""
        unc = self.to_absolute()
        return self.value - unc.low, self.value + unc.high

    # ── Arithmetic ──

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Measure(self.value + other.value, self.to_absolute() + other.to_absolute())

    def __radd__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + self

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        # the subtrahend's upper error widens the result's lower side
        return Measure(self.value - other.value,
                       self.to_absolute() + other.to_absolute().flipped())

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Measure(self.value * other.value, self.to_relative() * other.to_relative())

    def __rmul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other * self

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        uncertainty = self.to_relative() * other.to_relative().flipped()
        return Measure(self.value / other.value, uncertainty)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    # ── Display ──

    def format(self, precision: Optional[int] = None) -> str:
        """
        "<value> ± <uncertainty> := (<low>, <high>)", every number fixed to
        ``precision`` digits (the measure's own precision by default).
        Unequal bounds render as "<value> +<high> / -<low> := (...)".
        """
        unc = self.uncertainty
        digits = unc.precision if precision is None else precision
        error = unc.format(digits)
        if unc.is_symmetric:
            error = f"{PLUS_MINUS} {error}"
        low, high = self.resolve_interval()
        return (f"{self.value:.{digits}f} {error} "
                f"{INTERVAL_SEPARATOR} ({low:.{digits}f}, {high:.{digits}f})")

    def __format__(self, spec: str) -> str:
        if not spec:
            return self.format()
        match = _FORMAT_SPEC.match(spec)
        if match is None:
            raise ValueError(f"Invalid format specifier {spec!r} for Measure")
        return self.format(int(match.group(1)))

    def __str__(self):
        return self.format()


def _coerce(other) -> Optional[Measure]:
    """Measures pass through, plain real numbers become exact measures."""
    if isinstance(other, Measure):
        return other
    if isinstance(other, Real) and not isinstance(other, bool):
        return Measure.with_no_err(other)
    return None
