"""Command-line demonstration of measure_system."""

import argparse
import logging
from collections import OrderedDict

from .errors import MeasureError
from .measure import Measure
from .report import MeasureReport

LOGGER = logging.getLogger(__name__)


def example_measures() -> "OrderedDict[str, Measure]":
    """The four example measures and two combinations of them."""
    a = Measure.with_no_err(1.23).with_precision(1) + Measure.with_rel_err(2.0, 50.0)
    b = Measure.with_no_err(1.25) - Measure.with_rel_err(2.0, 50.0).with_precision(3)
    c = Measure.with_no_err(1.28).with_precision(1) * Measure.with_abs_err(2.0, 0.1)
    d = Measure.with_no_err(12.0) / Measure.with_abs_err(2.91, 0.1).with_precision(2)
    return OrderedDict([
        ("a", a),
        ("b", b),
        ("c", c),
        ("d", d),
        ("a + d", a + d),
        ("b * c", b * c),
    ])


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="measure_system",
        description="Print example measures with propagated uncertainty",
    )
    parser.add_argument("--report", action="store_true", help="Print a summary table instead of lines")
    parser.add_argument("--verbose", action="store_true", help="Log each propagation step")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        rows = example_measures()
    except MeasureError:
        LOGGER.exception("Failed to build example measures")
        return 1

    if args.report:
        print(MeasureReport.generate(rows, title="EXAMPLE MEASURES"))
    else:
        print(MeasureReport.lines(rows))
    return 0
