from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP

HullCoverage = namedtuple('HullCoverage', ('hull_size', 'total', 'percentage'))


def to_precision(value, digits=3):
    """Formats value in fixed notation with `digits` significant digits."""
    d = Decimal(value)
    if d == 0:
        return format(d.quantize(Decimal(1).scaleb(1 - digits)), 'f')
    exponent = d.adjusted()
    rounded = d.quantize(Decimal(1).scaleb(exponent - digits + 1), rounding=ROUND_HALF_UP)
    if rounded.adjusted() > exponent:
        # rounding carried into a new leading digit, e.g. 99.96 -> 100
        rounded = rounded.quantize(Decimal(1).scaleb(exponent - digits + 2), rounding=ROUND_HALF_UP)
    return format(rounded, 'f')


def hull_coverage(points, hull):
    total = len(points)
    percentage = 100 * len(hull) / total if total else None
    return HullCoverage(len(hull), total, percentage)


def coverage_message(coverage):
    message = f"Included in the convex hull: {coverage.hull_size} / {coverage.total}"
    if coverage.percentage is not None:
        message += f" ({to_precision(coverage.percentage)}%)"
    return message
