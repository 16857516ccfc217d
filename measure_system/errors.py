"""Exceptions raised by uncertainty conversion and propagation."""


class MeasureError(Exception):
    """Base class for all measure_system errors."""


class UncertaintyKindError(MeasureError, TypeError):
    """Two uncertainties of incompatible kinds were combined directly.

    Additive propagation needs both sides absolute, multiplicative propagation
    needs both sides relative. Converting requires the associated value, which
    an Uncertainty does not carry, so the caller has to convert first.
    """

    def __init__(self, left, right, required: str):
        self.left = left
        self.right = right
        self.required = required
        super().__init__(
            f"Cannot combine {left.kind} and {right.kind} uncertainty; "
            f"convert both to {required} first ({left!r}, {right!r})"
        )


class UndefinedRelativeError(MeasureError, ZeroDivisionError):
    """An absolute uncertainty has no relative form for a zero-valued measure."""

    def __init__(self, uncertainty):
        self.uncertainty = uncertainty
        super().__init__(
            f"Relative uncertainty is undefined for an associated value of 0 ({uncertainty!r})"
        )
