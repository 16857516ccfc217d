"""
╔══════════════════════════════════════════════════════════════════════╗
║  MeasureReport — text summaries for a set of labelled measures       ║
║                                                                      ║
║    • one-line "label = value ± u := (low, high)" rendering           ║
║    • ruled summary table with interval and relative uncertainty      ║
╚══════════════════════════════════════════════════════════════════════╝
"""

from collections import OrderedDict
from typing import Iterable, Mapping, Tuple, Union

import numpy as np

from .config import REPORT_WIDTH, UNDEFINED_LABEL
from .measure import Measure

Rows = Union[Mapping[str, Measure], Iterable[Tuple[str, Measure]]]


class MeasureReport:
    """Generates formatted summaries of labelled measures."""

    @staticmethod
    def _hline(width=REPORT_WIDTH):
        return "─" * width

    @staticmethod
    def _dline(width=REPORT_WIDTH):
        return "═" * width

    @staticmethod
    def _rows(rows: Rows) -> "OrderedDict[str, Measure]":
        items = rows.items() if isinstance(rows, Mapping) else rows
        return OrderedDict((str(label), measure) for label, measure in items)

    @staticmethod
    def relative_uncertainties(measures) -> np.ndarray:
        """
        Widest side of each error bar as percent of |value|.
        NaN where the value is 0 and the figure has no meaning.
        """
        values = np.abs(np.array([m.value for m in measures], dtype=float))
        widths = np.array([m.to_absolute().magnitude for m in measures], dtype=float)
        out = np.full(values.shape, np.nan)
        np.divide(widths, values, out=out, where=values != 0)
        return out * 100.0

    @classmethod
    def line(cls, label: str, measure: Measure, pad: int = 0) -> str:
        """'label = <measure>' with the label left-aligned to ``pad`` columns."""
        return f"{label:<{pad}} = {measure}"

    @classmethod
    def lines(cls, rows: Rows) -> str:
        """One ``line`` per measure, labels aligned."""
        table = cls._rows(rows)
        pad = max((len(label) for label in table), default=0)
        return "\n".join(cls.line(label, m, pad) for label, m in table.items())

    @classmethod
    def generate(cls, rows: Rows, title: str = "") -> str:
        """
        Full summary table: value, uncertainty, resolved interval and
        relative uncertainty for every measure, each at its own precision.
        """
        table = cls._rows(rows)
        measures = list(table.values())
        relative = cls.relative_uncertainties(measures)

        w = REPORT_WIDTH
        lines = []
        lines.append(cls._dline(w))
        lines.append(f"  {title or 'MEASURE SUMMARY'}")
        lines.append(cls._dline(w))

        header = (
            f"  {'Label':<8} {'Value':<12} {'Uncertainty':<18} "
            f"{'Low':<10} {'High':<10} {'Rel.'}"
        )
        lines.append(header)
        lines.append("  " + "-" * (w - 4))

        for (label, m), rel in zip(table.items(), relative):
            p = m.precision
            low, high = m.resolve_interval()
            rel_text = UNDEFINED_LABEL if np.isnan(rel) else f"{rel:.2f}%"
            lines.append(
                f"  {label:<8} {m.value:<12.{p}f} {m.uncertainty.format():<18} "
                f"{low:<10.{p}f} {high:<10.{p}f} {rel_text}"
            )

        lines.append(cls._hline(w))
        lines.append(f"  {len(table)} measure(s)")
        lines.append(cls._dline(w))
        return "\n".join(lines)
