r"""@package numlab.programs.oscillatory

Comparison of quadrature rules on the highly oscillatory integral
\f[
    I = \int_0^3 \sin(100x)\, e^{-x^2} \cos(2x)\, dx.
\f]

The composite rules use `n = 100000` subintervals by default, which
resolves the oscillation well. The fixed Gauss rules with at most four
nodes cannot resolve it at all. A convergence study of Simpson's rule and a
reference value computed by SciPy's QAWO algorithm complete the report.
"""

import math

from ..quadrature import RULES, convergence_table, integrate
from ..quadrature import reference_integral
from ..sink import FIXED10, INTEGER, SCIENTIFIC
from ..utils import step_grid


__all__ = [
    "LIMITS",
    "envelope",
    "integrand",
    "run",
]


## Integration limits.
LIMITS = (0.0, 3.0)

## Angular frequency of the oscillating factor.
FREQUENCY = 100.0


def envelope(x):
    r"""Slowly varying factor \f$ e^{-x^2} \cos(2x) \f$."""
    return math.exp(-x**2) * math.cos(2*x)


def integrand(x):
    return math.sin(FREQUENCY*x) * envelope(x)


def run(sink, verbose=False, config=None, n=100000, n_start=1000,
        n_stop=100000, plot_points=1000):
    r"""Apply all rules and write the comparison to `sink`.

    @param n
        Subintervals of the composite rules.
    @param n_start,n_stop
        Range of the Simpson convergence study (`n` is doubled each step).
    @param plot_points
        Number of intervals of the plot table.

    @return Dictionary with the ``estimates`` (rule name to value),
        ``reference`` value, its error estimate ``reference_error`` and the
        Simpson convergence ``table`` as `(n, value, error)` tuples.
    """
    if config is not None:
        config.validate()
    a, b = LIMITS
    sink.header("OSCILLATORY INTEGRAL")
    sink.text("I = int_%g^%g sin(100x) * exp(-x^2) * cos(2x) dx" % (a, b))
    ref = reference_integral(envelope, a, b, weight='sin', wvar=FREQUENCY,
                             verbose=verbose)
    sink.section("COMPARISON OF QUADRATURE RULES")
    estimates = {}
    for name in RULES:
        est = integrate(name, integrand, a, b, n)
        estimates[name] = est.value
        sink.record("%-15s" % name, est.value, fmt=SCIENTIFIC)
        if verbose:
            print("%-15s: %.6e (n = %d)" % (name, est.value, est.n))
    sink.record("%-15s" % "reference", ref.value, fmt=SCIENTIFIC)
    sink.record("%-15s" % "reference_error", ref.error, fmt=SCIENTIFIC)
    sink.section("SIMPSON CONVERGENCE (RUNGE ESTIMATE)")
    sink.columns(["n", "I_h", "error"])
    rows = convergence_table("simpson", integrand, a, b, n_start, n_stop,
                             verbose=verbose)
    for row in rows:
        sink.row(row.n, row.value, row.error,
                 fmt=(INTEGER, FIXED10, SCIENTIFIC))
    sink.section("PLOT DATA")
    sink.columns(["x", "f(x)"])
    for x in step_grid(a, b, (b - a) / plot_points):
        sink.row(x, integrand(x), fmt=FIXED10)
    return dict(
        estimates=estimates,
        reference=ref.value,
        reference_error=ref.error,
        table=[tuple(row) for row in rows],
    )
