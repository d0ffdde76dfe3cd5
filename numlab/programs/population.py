r"""@package numlab.programs.population

Extrapolation of the US population to 2010 from the census data of
1910 to 2000.

The interpolating polynomial of degree nine is wildly off when evaluated
just one decade beyond the data, while the linear spline, which continues
the trend of the last decade, stays within a few percent.
"""

from ..interp import LinearSpline, NewtonPolynomial
from ..sink import FIXED6, INTEGER


__all__ = [
    "US_CENSUS",
    "ACTUAL_2010",
    "run",
]


## US census results as `(year, population)` pairs.
US_CENSUS = (
    (1910, 92228496),
    (1920, 106021537),
    (1930, 123202624),
    (1940, 132164569),
    (1950, 151325798),
    (1960, 179323175),
    (1970, 203211926),
    (1980, 226545805),
    (1990, 248709873),
    (2000, 281421906),
)

## Census result of 2010.
ACTUAL_2010 = 308745538


def run(sink, verbose=False, config=None, year=2010, actual=ACTUAL_2010):
    r"""Extrapolate with both methods and write the report to `sink`.

    @return Dictionary with the extrapolated values ``newton`` and
        ``spline``, their absolute errors ``newton_error`` and
        ``spline_error``, the relative errors and the name of the more
        accurate method under ``better``.
    """
    if config is not None:
        config.validate()
    poly = NewtonPolynomial(US_CENSUS)
    spline = LinearSpline(US_CENSUS)
    newton_value = poly(year)
    spline_value = spline(year)
    newton_error = abs(newton_value - actual)
    spline_error = abs(spline_value - actual)
    better = "newton" if newton_error < spline_error else "spline"
    sink.header("US POPULATION EXTRAPOLATION TO %d" % year)
    sink.record("actual", actual, fmt=INTEGER)
    sink.section("INPUT DATA")
    sink.columns(["year", "population"])
    for sample in US_CENSUS:
        sink.row(sample, fmt=INTEGER)
    sink.section("RESULTS")
    for name, value, error in (("newton", newton_value, newton_error),
                               ("spline", spline_value, spline_error)):
        sink.record("%s_%d" % (name, year), value, fmt=INTEGER)
        sink.record("%s_error" % name, error, fmt=INTEGER)
        sink.record("%s_relative_error" % name, error / actual, fmt=FIXED6)
    sink.record("more accurate", better)
    first_year = US_CENSUS[0][0]
    sink.section("PLOT DATA NEWTON")
    sink.columns(["year", "population"])
    for y in range(first_year, year+1):
        sink.row(y, poly(y), fmt=INTEGER)
    sink.section("PLOT DATA SPLINE")
    sink.columns(["year", "population"])
    for y in range(first_year, year+1, 5):
        sink.row(y, spline(y), fmt=INTEGER)
    if verbose:
        print("Newton: %.0f (error %.2f%%)" % (newton_value,
                                              100 * newton_error / actual))
        print("Spline: %.0f (error %.2f%%)" % (spline_value,
                                              100 * spline_error / actual))
    return dict(
        newton=newton_value,
        spline=spline_value,
        actual=actual,
        newton_error=newton_error,
        spline_error=spline_error,
        newton_relative_error=newton_error / actual,
        spline_relative_error=spline_error / actual,
        better=better,
    )
