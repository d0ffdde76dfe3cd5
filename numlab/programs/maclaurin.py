r"""@package numlab.programs.maclaurin

Optimal truncation of the sine and exponential Maclaurin series.

For the intervals `[0, 1]` and `[10, 11]`, the smallest term count reaching
the target accuracy at the interval midpoint is determined. The truncated
series with these term counts is then tabulated together with the library
values and the range reduced evaluations (see numlab.series.reduction).
"""

import math

from ..config import default_settings
from ..series import SeriesKind, evaluate, find_optimal_term_count
from ..series import reduced_exp, reduced_sin
from ..sink import FIXED10, INTEGER, SCIENTIFIC
from ..utils import step_grid


__all__ = [
    "INTERVALS",
    "run",
]


## Intervals as `(start, stop, step)`; the term counts are optimized at the
## midpoints.
INTERVALS = ((0.0, 1.0, 0.02), (10.0, 11.0, 0.05))

_COLUMNS = ["t", "sin_exact", "sin_approx", "exp_exact", "exp_approx",
            "sin_reduced", "exp_reduced"]


def _table(sink, start, stop, step, n_sin, n_exp):
    sink.section("VALUES ON [%g, %g]" % (start, stop))
    sink.columns(_COLUMNS)
    max_error = 0.0
    for t in step_grid(start, stop, step):
        t = float(t)
        s_red, e_red = reduced_sin(t), reduced_exp(t)
        max_error = max(max_error, abs(s_red - math.sin(t)),
                        abs(e_red - math.exp(t)) / math.exp(t))
        sink.row(t, math.sin(t), evaluate(SeriesKind.SIN, t, n_sin),
                 math.exp(t), evaluate(SeriesKind.EXP, t, n_exp),
                 s_red, e_red, fmt=FIXED10)
    return max_error


def run(sink, verbose=False, config=None):
    r"""Compute the term counts and write all tables to `sink`.

    @return Dictionary with the keys ``n_sin`` and ``n_exp`` (lists with one
        term count per interval), ``intervals`` and ``max_reduced_error``,
        the largest (absolute for the sine, relative for the exponential)
        deviation of the reduced evaluations from the library values.
    """
    cfg = default_settings() if config is None else config.validate()
    target = cfg.target_error
    sink.header("MACLAURIN SERIES OF sin(t) AND exp(t)")
    sink.record("target_error", target, fmt=SCIENTIFIC)
    n_sin, n_exp = [], []
    for start, stop, _ in INTERVALS:
        mid = (start + stop) / 2.0
        n_sin.append(find_optimal_term_count(SeriesKind.SIN, mid, target,
                                             config=cfg, verbose=verbose))
        n_exp.append(find_optimal_term_count(SeriesKind.EXP, mid, target,
                                             config=cfg, verbose=verbose))
    sink.section("OPTIMAL TERM COUNTS")
    for (start, stop, _), ns, ne in zip(INTERVALS, n_sin, n_exp):
        sink.record("sin(t) on [%g, %g]: n" % (start, stop), ns, fmt=INTEGER)
        sink.record("exp(t) on [%g, %g]: n" % (start, stop), ne, fmt=INTEGER)
        if verbose:
            print("[%g, %g]: n_sin = %d, n_exp = %d" % (start, stop, ns, ne))
    max_error = 0.0
    for (start, stop, step), ns, ne in zip(INTERVALS, n_sin, n_exp):
        max_error = max(max_error, _table(sink, start, stop, step, ns, ne))
    sink.section("ACCURACY CHECK")
    for t, ns, ne in ((1.0, n_sin[0], n_exp[0]), (10.5, n_sin[1], n_exp[1])):
        for kind, n in ((SeriesKind.SIN, ns), (SeriesKind.EXP, ne)):
            error = abs(kind.exact(t) - evaluate(kind, t, n))
            sink.record("%s(%g) error (n=%d)" % (kind.value, t, n), error,
                        fmt=SCIENTIFIC)
            if verbose:
                print("%s(%g): error = %g with n = %d"
                      % (kind.value, t, error, n))
    return dict(
        intervals=[(start, stop) for start, stop, _ in INTERVALS],
        n_sin=n_sin,
        n_exp=n_exp,
        max_reduced_error=max_error,
    )
