r"""@package numlab.quadrature.rules

Composite Newton-Cotes rules on equidistant grids.

All rules split `[a, b]` into `n` subintervals of width `h = (b-a)/n` and
return a QuadratureEstimate. The rules and their convergence orders `p`
(the error decreases like \f$ h^p \f$ for smooth integrands) are:

| rule            | weights                      | p |
|-----------------|------------------------------|---|
| midpoint()      | `h` at each midpoint         | 2 |
| trapezoid()     | `h/2, h, ..., h, h/2`        | 2 |
| simpson()       | `h/3 * (1, 4, 2, ..., 4, 1)` | 4 |
| three_eighths() | `3h/8 * (1, 3, 3, 2, ..., 3, 3, 1)` | 4 |

Simpson's rule needs an even number of subintervals and the 3/8 rule a
multiple of three. Other values of `n` are increased to the next valid one.
The number actually used is available as QuadratureEstimate.n.

@b Notes

On highly oscillatory integrands like \f$ \sin(100x) e^{-x^2} \cos(2x) \f$,
grids that do not resolve the oscillation produce essentially random values.
The asymptotic error estimates only apply once `h` is small compared to the
wavelength.
"""

from math import fsum

from ..numutils import InvalidInputError, check_positive_int, isfinite


__all__ = [
    "QuadratureEstimate",
    "midpoint",
    "trapezoid",
    "simpson",
    "three_eighths",
]


class QuadratureEstimate():
    r"""Result of a quadrature rule."""

    __slots__ = ("_value", "_rule_order", "_n")

    def __init__(self, value, rule_order, n):
        r"""Create an estimate.

        @param value
            Approximate value of the integral.
        @param rule_order
            Theoretical convergence order of the rule used.
        @param n
            Number of subintervals actually used (composite rules) or number
            of nodes (Gauss rules).
        """
        self._value = value
        self._rule_order = rule_order
        self._n = n

    @property
    def value(self):
        r"""Approximate value of the integral."""
        return self._value

    @property
    def rule_order(self):
        r"""Theoretical convergence order `p` of the rule."""
        return self._rule_order

    @property
    def n(self):
        r"""Subintervals (or nodes) actually used."""
        return self._n

    def __float__(self):
        return float(self._value)

    def __eq__(self, other):
        if not isinstance(other, QuadratureEstimate):
            return NotImplemented
        return ((self.value, self.rule_order, self.n)
                == (other.value, other.rule_order, other.n))

    def __hash__(self):
        return hash((self.value, self.rule_order, self.n))

    def __repr__(self):
        return "QuadratureEstimate(value=%r, rule_order=%d, n=%d)" % (
            self.value, self.rule_order, self.n
        )


def check_interval(a, b):
    r"""Return the limits as floats, making sure they are finite."""
    a, b = float(a), float(b)
    if not (isfinite(a) and isfinite(b)):
        raise InvalidInputError("Integration limits must be finite, got "
                                "[%r, %r]" % (a, b))
    return a, b


def round_up_to_multiple(n, k):
    r"""Smallest multiple of `k` that is `>= n`."""
    rest = n % k
    return n if rest == 0 else n + (k - rest)


def midpoint(f, a, b, n):
    r"""Composite midpoint rule with `n` subintervals."""
    a, b = check_interval(a, b)
    n = check_positive_int(n, "n")
    h = (b - a) / n
    total = fsum(f(a + (i + 0.5) * h) for i in range(n))
    return QuadratureEstimate(h * total, 2, n)


def trapezoid(f, a, b, n):
    r"""Composite trapezoidal rule with `n` subintervals."""
    a, b = check_interval(a, b)
    n = check_positive_int(n, "n")
    h = (b - a) / n
    inner = fsum(f(a + i * h) for i in range(1, n))
    total = 0.5 * f(a) + 0.5 * f(b) + inner
    return QuadratureEstimate(h * total, 2, n)


def simpson(f, a, b, n):
    r"""Composite Simpson rule.

    @param n
        Number of subintervals. Odd values are increased by one.
    """
    a, b = check_interval(a, b)
    n = round_up_to_multiple(check_positive_int(n, "n"), 2)
    h = (b - a) / n
    odd = fsum(f(a + i * h) for i in range(1, n, 2))
    even = fsum(f(a + i * h) for i in range(2, n, 2))
    total = f(a) + f(b) + 4.0 * odd + 2.0 * even
    return QuadratureEstimate(total * h / 3.0, 4, n)


def three_eighths(f, a, b, n):
    r"""Composite Simpson 3/8 rule.

    @param n
        Number of subintervals. Values not divisible by three are rounded up
        to the next multiple of three.
    """
    a, b = check_interval(a, b)
    n = round_up_to_multiple(check_positive_int(n, "n"), 3)
    h = (b - a) / n
    inner = fsum(f(a + i * h) for i in range(1, n) if i % 3 != 0)
    joints = fsum(f(a + i * h) for i in range(3, n, 3))
    total = f(a) + f(b) + 3.0 * inner + 2.0 * joints
    return QuadratureEstimate(total * h * 3.0 / 8.0, 4, n)
