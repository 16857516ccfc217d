"""
╔══════════════════════════════════════════════════════════════════════╗
║  Uncertainty — error-bar descriptors for a measured value            ║
║                                                                      ║
║  Variants:                                                           ║
║    • Certain  — no uncertainty at all                                ║
║    • Absolute — ± magnitude in the units of the value                ║
║    • Relative — ± magnitude as a percentage of the value             ║
║                                                                      ║
║  An Uncertainty never knows the value it describes; converting       ║
║  between Absolute and Relative therefore takes that value as an      ║
║  argument.                                                           ║
╚══════════════════════════════════════════════════════════════════════╝
"""

import logging
from dataclasses import dataclass, field, replace
from typing import ClassVar, Optional

from .config import DEFAULT_PRECISION, RELATIVE_SYMBOL
from .errors import UncertaintyKindError, UndefinedRelativeError

LOGGER = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════
# §1  BASE TYPE
# ═══════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Uncertainty:
    """
    Lower/upper error magnitudes plus the number of digits used to display them.

    Only the three concrete variants below are instantiated. ``low`` and
    ``high`` are stored as absolute values; ``precision`` affects rendering
    only and never rounds the stored magnitudes.
    """
    low: float = 0.0
    high: float = 0.0
    precision: int = DEFAULT_PRECISION

    kind: ClassVar[str] = ""
    suffix: ClassVar[str] = ""

    def __post_init__(self):
        if type(self) is Uncertainty:
            raise TypeError(
                "Uncertainty is abstract; use Uncertainty.certain(), "
                ".absolute() or .relative()"
            )
        _check_precision(self.precision)
        object.__setattr__(self, "low", abs(float(self.low)))
        object.__setattr__(self, "high", abs(float(self.high)))

    # ── Constructors ──

    @classmethod
    def certain(cls, precision: int = DEFAULT_PRECISION) -> "Certain":
        return Certain(precision=precision)

    @classmethod
    def absolute(cls, magnitude: float, precision: int = DEFAULT_PRECISION) -> "Absolute":
        """Symmetric ± magnitude in the units of the value."""
        return Absolute(magnitude, magnitude, precision)

    @classmethod
    def relative(cls, magnitude: float, precision: int = DEFAULT_PRECISION) -> "Relative":
        """Symmetric ± magnitude percent of the value."""
        return Relative(magnitude, magnitude, precision)

    @classmethod
    def absolute_bounds(cls, low: float, high: float,
                        precision: int = DEFAULT_PRECISION) -> "Absolute":
        return Absolute(low, high, precision)

    @classmethod
    def relative_bounds(cls, low: float, high: float,
                        precision: int = DEFAULT_PRECISION) -> "Relative":
        return Relative(low, high, precision)

    # ── Accessors ──

    @property
    def magnitude(self) -> float:
        """The ± magnitude; the wider side when the bounds differ."""
        return max(self.low, self.high)

    @property
    def is_symmetric(self) -> bool:
        return self.low == self.high

    def with_precision(self, precision: int) -> "Uncertainty":
        return replace(self, precision=precision)

    def flipped(self) -> "Uncertainty":
        """Same uncertainty with the lower and upper sides swapped."""
        if self.is_symmetric:
            return self
        return replace(self, low=self.high, high=self.low)

    # ── Conversion ──

    def to_absolute(self, value: float) -> "Absolute":
        raise NotImplementedError

    def to_relative(self, value: float) -> "Relative":
        raise NotImplementedError

    # ── Propagation ──

    def __add__(self, other):
        """
        Additive propagation: absolute magnitudes are summed side by side.
        Certain counts as Absolute(0). Relative operands are rejected.
        """
        if not isinstance(other, Uncertainty):
            return NotImplemented
        if isinstance(self, Relative) or isinstance(other, Relative):
            raise UncertaintyKindError(self, other, Absolute.kind)
        result = Absolute(self.low + other.low, self.high + other.high,
                          min(self.precision, other.precision))
        LOGGER.debug("additive propagation: %r + %r -> %r", self, other, result)
        return result

    def __mul__(self, other):
        """
        Multiplicative propagation: relative magnitudes (percent) are summed.
        Certain counts as Relative(0). Absolute operands are rejected.
        """
        if not isinstance(other, Uncertainty):
            return NotImplemented
        if isinstance(self, Absolute) or isinstance(other, Absolute):
            raise UncertaintyKindError(self, other, Relative.kind)
        result = Relative(self.low + other.low, self.high + other.high,
                          min(self.precision, other.precision))
        LOGGER.debug("multiplicative propagation: %r * %r -> %r", self, other, result)
        return result

    # ── Display ──

    def format(self, precision: Optional[int] = None) -> str:
        """
        "<m>" for Absolute/Certain, "<m> %" for Relative, or
        "+<high> / -<low>" when the bounds differ.
        """
        digits = self.precision if precision is None else _check_precision(precision)
        if self.is_symmetric:
            return self._number(self.high, digits)
        return f"+{self._number(self.high, digits)} / -{self._number(self.low, digits)}"

    def _number(self, magnitude: float, digits: int) -> str:
        text = f"{magnitude:.{digits}f}"
        return f"{text} {self.suffix}" if self.suffix else text

    def __str__(self):
        return self.format()


# ═══════════════════════════════════════════════════════════════════════
# §2  VARIANTS
# ═══════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Certain(Uncertainty):
    """Exactly known value: both magnitudes are 0."""
    low: float = field(default=0.0, init=False)
    high: float = field(default=0.0, init=False)

    kind: ClassVar[str] = "certain"

    def to_absolute(self, value: float) -> "Absolute":
        return Absolute(0.0, 0.0, self.precision)

    def to_relative(self, value: float) -> "Relative":
        return Relative(0.0, 0.0, self.precision)


@dataclass(frozen=True)
class Absolute(Uncertainty):
    """Magnitudes in the same units as the associated value."""
    kind: ClassVar[str] = "absolute"

    def to_absolute(self, value: float) -> "Absolute":
        return self

    def to_relative(self, value: float) -> "Relative":
        """
        Express the magnitudes as percent of |value|.

        Raises UndefinedRelativeError when value == 0: a zero-valued
        measurement has no meaningful relative error.
        """
        if value == 0:
            raise UndefinedRelativeError(self)
        scale = 100.0 / abs(value)
        return Relative(self.low * scale, self.high * scale, self.precision)


@dataclass(frozen=True)
class Relative(Uncertainty):
    """Magnitudes in percent of the associated value."""
    kind: ClassVar[str] = "relative"
    suffix: ClassVar[str] = RELATIVE_SYMBOL

    def to_absolute(self, value: float) -> "Absolute":
        scale = abs(value) / 100.0
        return Absolute(self.low * scale, self.high * scale, self.precision)

    def to_relative(self, value: float) -> "Relative":
        return self


def _check_precision(precision) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ValueError(f"precision must be a non-negative integer, got {precision!r}")
    return precision
