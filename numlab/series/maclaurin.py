r"""@package numlab.series.maclaurin

Truncated Maclaurin series of the sine and exponential functions.

The partial sums are computed with the term recurrences
\f[
    s_{k+2} = -s_k \frac{t^2}{(k+2)(k+1)}, \quad s_1 = t
\f]
for the sine and
\f[
    e_{k+1} = e_k \frac{t}{k+1}, \quad e_0 = 1
\f]
for the exponential. The term count `n_terms` is the largest power of `t`
included in the sum, i.e. `evaluate(SeriesKind.SIN, t, 5)` returns
\f$ t - t^3/3! + t^5/5! \f$ and `evaluate(SeriesKind.EXP, t, 2)` returns
\f$ 1 + t + t^2/2 \f$.

@b Examples

```
    >>> evaluate(SeriesKind.EXP, 1.0, 2)
    2.5
    >>> find_optimal_term_count(SeriesKind.SIN, 0.5, 1e-3)
    3
```
"""

from enum import Enum
import math

from ..config import default_settings
from ..numutils import InvalidInputError, check_positive_int


__all__ = [
    "SeriesKind",
    "SeriesResult",
    "evaluate",
    "evaluate_series",
    "find_optimal_term_count",
]


class SeriesKind(Enum):
    r"""The functions a truncated series can be computed for."""

    SIN = "sin"
    EXP = "exp"

    @classmethod
    def parse(cls, kind):
        r"""Convert a SeriesKind or its name (e.g. ``"sin"``) to a SeriesKind.

        @raise InvalidInputError for unknown kinds.
        """
        if isinstance(kind, cls):
            return kind
        try:
            return cls(str(kind).lower())
        except ValueError:
            raise InvalidInputError(
                "Unknown series kind %r. Valid kinds: %s"
                % (kind, ", ".join(k.value for k in cls))
            )

    @property
    def first_term_count(self):
        r"""Smallest term count tried by find_optimal_term_count()."""
        return 3 if self is SeriesKind.SIN else 1

    @property
    def term_count_step(self):
        r"""Step between term counts with an additional nonzero term."""
        return 2 if self is SeriesKind.SIN else 1

    def exact(self, t):
        r"""Library value of the function at `t`."""
        if self is SeriesKind.SIN:
            return math.sin(t)
        return math.exp(t)


class SeriesResult():
    r"""Value of a truncated series and the term count used."""

    __slots__ = ("_value", "_terms_used")

    def __init__(self, value, terms_used):
        self._value = value
        self._terms_used = terms_used

    @property
    def value(self):
        r"""Value of the partial sum."""
        return self._value

    @property
    def terms_used(self):
        r"""Term count (highest power of the argument), at least `1`."""
        return self._terms_used

    def __eq__(self, other):
        if not isinstance(other, SeriesResult):
            return NotImplemented
        return (self.value, self.terms_used) == (other.value, other.terms_used)

    def __hash__(self):
        return hash((self.value, self.terms_used))

    def __repr__(self):
        return "SeriesResult(value=%r, terms_used=%d)" % (self.value,
                                                           self.terms_used)


def _sin_sum(t, n_terms):
    term = t
    result = term
    t2 = t * t
    for k in range(3, n_terms+1, 2):
        term = -term * t2 / (k * (k-1))
        result += term
    return result


def _exp_sum(t, n_terms):
    term = 1.0
    result = term
    for k in range(1, n_terms+1):
        term = term * t / k
        result += term
    return result


def evaluate(kind, t, n_terms):
    r"""Evaluate a truncated Maclaurin series.

    @param kind
        SeriesKind (or its name) of the function to approximate.
    @param t
        Argument of the function. No range reduction is done here, see
        numlab.series.reduction for that.
    @param n_terms
        Highest power of `t` to include. Must be an integer `>= 1`. For the
        sine series, an even count adds nothing to the next lower odd count.

    @return The partial sum as `float`.

    @raise InvalidInputError if `n_terms < 1`.
    """
    kind = SeriesKind.parse(kind)
    n_terms = check_positive_int(n_terms, "n_terms")
    t = float(t)
    if kind is SeriesKind.SIN:
        return _sin_sum(t, n_terms)
    return _exp_sum(t, n_terms)


def evaluate_series(kind, t, n_terms):
    r"""Same as evaluate(), but return a SeriesResult."""
    n_terms = check_positive_int(n_terms, "n_terms")
    return SeriesResult(evaluate(kind, t, n_terms), n_terms)


def find_optimal_term_count(kind, t, target_error=None, cap=None,
                            config=None, verbose=False):
    r"""Find the smallest term count reaching a target accuracy.

    Term counts are tried in increasing order (``3, 5, 7, ...`` for the sine
    and ``1, 2, 3, ...`` for the exponential) and the first one whose partial
    sum differs from the library value by at most `target_error` is returned.

    This is a tuning utility. There is no guarantee that the target is
    reached at all, e.g. for large `t` where cancellation in the sine series
    destroys all significant digits. In that case, the largest term count
    tried (bounded by `cap`) is returned.

    @param kind
        SeriesKind (or its name).
    @param t
        Argument at which to compare.
    @param target_error
        Maximum allowed absolute error. Default is taken from `config`
        (`1e-3`).
    @param cap
        Largest term count to try. Default is taken from `config` (`50` for
        the sine and `40` for the exponential series).
    @param config
        config.Settings object supplying defaults.
    @param verbose
        Print each tried term count and its error.
    """
    kind = SeriesKind.parse(kind)
    if config is None:
        config = default_settings()
    if target_error is None:
        target_error = config.target_error
    if cap is None:
        cap = config.term_cap(kind)
    cap = check_positive_int(cap, "cap")
    exact = kind.exact(t)
    n = kind.first_term_count
    if n > cap:
        raise InvalidInputError("cap must be at least %d for the %s series"
                                % (n, kind.value))
    while True:
        error = abs(exact - evaluate(kind, t, n))
        if verbose:
            print("%s(%s): n = %d, error = %s" % (kind.value, t, n, error))
        if error <= target_error or n + kind.term_count_step > cap:
            return n
        n += kind.term_count_step
