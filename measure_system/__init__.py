"""Values with absolute or relative uncertainty and error-propagating arithmetic."""

from .errors import MeasureError, UncertaintyKindError, UndefinedRelativeError
from .measure import Measure
from .report import MeasureReport
from .uncertainty import Absolute, Certain, Relative, Uncertainty

__version__ = "0.1.0"

__all__ = [
    "Absolute",
    "Certain",
    "Measure",
    "MeasureError",
    "MeasureReport",
    "Relative",
    "Uncertainty",
    "UncertaintyKindError",
    "UndefinedRelativeError",
]
