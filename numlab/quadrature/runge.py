r"""@package numlab.quadrature.runge

Runge error estimates and convergence studies.

If a rule of order `p` gives \f$ I_h \f$ with step `h` and \f$ I_{h/2} \f$
with step `h/2`, then for smooth integrands the error of the finer result
is approximately
\f[
    |I - I_{h/2}| \approx \frac{|I_h - I_{h/2}|}{2^p - 1}.
\f]
"""

from ..numutils import InvalidInputError, check_positive_int
from .suite import get_rule


__all__ = [
    "runge_error_estimate",
    "ConvergenceRow",
    "convergence_table",
]


def runge_error_estimate(i_h, i_h2, order):
    r"""Estimate the error of `i_h2` from results with step `h` and `h/2`.

    @param i_h
        Result computed with step `h`.
    @param i_h2
        Result computed with step `h/2`.
    @param order
        Convergence order `p` of the rule (positive integer).
    """
    order = check_positive_int(order, "order")
    return abs(float(i_h) - float(i_h2)) / (2.0**order - 1.0)


class ConvergenceRow():
    r"""One line of a convergence study."""

    __slots__ = ("n", "value", "error")

    def __init__(self, n, value, error):
        ## Number of subintervals actually used.
        self.n = n
        ## Value of the integral.
        self.value = value
        ## Runge error estimate w.r.t. the previous row (`None` for the first).
        self.error = error

    def __iter__(self):
        return iter((self.n, self.value, self.error))

    def __repr__(self):
        return "ConvergenceRow(n=%d, value=%r, error=%r)" % (
            self.n, self.value, self.error
        )


def convergence_table(rule, f, a, b, n_start, n_stop, factor=2,
                      verbose=False):
    r"""Apply a composite rule for a growing number of subintervals.

    Starting with `n_start`, `n` is multiplied by `factor` as long as it
    does not exceed `n_stop`. Each row after the first carries the Runge
    error estimate computed from its predecessor. For `factor != 2`, the
    estimate uses \f$ factor^p - 1 \f$ in the denominator.

    @param rule
        Name of a composite rule (see suite.RULES) or the rule itself.
    @param f,a,b
        Integrand and limits.
    @param n_start,n_stop
        First and largest number of subintervals.
    @param factor
        Growth factor of `n`. Default is `2`.
    @param verbose
        Print each row.

    @return List of ConvergenceRow objects.
    """
    rule = get_rule(rule) if isinstance(rule, str) else rule
    n = check_positive_int(n_start, "n_start")
    n_stop = check_positive_int(n_stop, "n_stop")
    factor = check_positive_int(factor, "factor")
    if factor < 2:
        raise InvalidInputError("factor must be at least 2")
    rows = []
    previous = None
    while n <= n_stop:
        est = rule(f, a, b, n)
        error = None
        if previous is not None:
            error = (abs(previous.value - est.value)
                     / (float(factor)**est.rule_order - 1.0))
        row = ConvergenceRow(est.n, est.value, error)
        if verbose:
            print(row)
        rows.append(row)
        previous = est
        n *= factor
    return rows
