r"""@package numlab.interp.newton

Newton form of the interpolating polynomial.

Given `n` distinct nodes \f$ x_0 < \ldots < x_{n-1} \f$ and values
\f$ y_i \f$, the divided differences are defined recursively by
\f[
    f[x_i] = y_i, \qquad
    f[x_i, \ldots, x_{i+j}] =
        \frac{f[x_{i+1}, \ldots, x_{i+j}] - f[x_i, \ldots, x_{i+j-1}]}
             {x_{i+j} - x_i}.
\f]
The unique polynomial of degree `n-1` through all points is then
\f[
    p(x) = \sum_{i=0}^{n-1} f[x_0, \ldots, x_i] \prod_{k<i} (x - x_k).
\f]

The polynomial may be evaluated anywhere, but outside the data range the
products grow rapidly and extrapolated values quickly become meaningless
(see the population example in numlab.programs.population). This is a
property of high degree polynomial extrapolation, not a numerical problem.

@b Examples

```
    table = build_divided_differences([0, 1, 2], [1, 3, 7])
    evaluate_newton(1.5, [0, 1, 2], table)   # 4.75

    p = NewtonPolynomial([(0, 1), (1, 3), (2, 7)])
    p(1.5)                                   # 4.75
```
"""

import numpy as np

from ..numutils import InvalidInputError
from .samples import check_samples, split_samples


__all__ = [
    "DividedDifferenceTable",
    "build_divided_differences",
    "evaluate_newton",
    "NewtonPolynomial",
]


class DividedDifferenceTable():
    r"""Triangular table of divided differences.

    Element ``table[i, j]`` is the divided difference
    \f$ f[x_i, \ldots, x_{i+j}] \f$ for \f$ 0 \le j < n \f$ and
    \f$ 0 \le i < n-j \f$. The table is read-only after construction.
    """

    __slots__ = ("_nodes", "_diff")

    def __init__(self, nodes, diff):
        r"""Wrap already computed data.

        Use build_divided_differences() instead of calling this directly.

        @param nodes
            Read-only array of the `n` nodes.
        @param diff
            `n` by `n` array, where only the upper left triangle
            ``i + j < n`` is used.
        """
        self._nodes = nodes
        diff = np.array(diff, dtype=float)
        diff.setflags(write=False)
        self._diff = diff

    @property
    def n(self):
        r"""Number of nodes."""
        return len(self._nodes)

    @property
    def nodes(self):
        r"""Read-only array of the nodes the table was built for."""
        return self._nodes

    @property
    def coefficients(self):
        r"""Read-only array of the Newton coefficients \f$ f[x_0..x_i] \f$."""
        return self._diff[0]

    def __len__(self):
        return self.n

    def __getitem__(self, key):
        r"""Access ``table[i, j]`` with the triangle bounds checked."""
        i, j = key
        n = self.n
        if not (0 <= j < n and 0 <= i < n - j):
            raise IndexError("(%s, %s) lies outside the triangular table of "
                             "size %d" % (i, j, n))
        return float(self._diff[i, j])

    def __repr__(self):
        return "DividedDifferenceTable(n=%d, coefficients=%s)" % (
            self.n, list(self.coefficients)
        )


def build_divided_differences(xs, ys):
    r"""Compute the table of divided differences for the given data.

    @param xs
        Strictly increasing nodes.
    @param ys
        Values at the nodes.

    @raise InvalidInputError for empty data, mismatched lengths and
        duplicate or decreasing nodes (which would lead to division by zero).
    """
    xs, ys = check_samples(xs, ys)
    n = len(xs)
    diff = np.zeros((n, n))
    diff[:, 0] = ys
    for j in range(1, n):
        for i in range(n - j):
            diff[i, j] = (diff[i+1, j-1] - diff[i, j-1]) / (xs[i+j] - xs[i])
    return DividedDifferenceTable(xs, diff)


def evaluate_newton(x_point, xs, table):
    r"""Evaluate the interpolating polynomial at `x_point`.

    The nested (Horner) form
    \f[
        p(x) = c_0 + (x - x_0)\big(c_1 + (x - x_1)(c_2 + \ldots)\big)
    \f]
    is used. At a node \f$ x_j \f$, all terms beyond \f$ c_j \f$ are
    multiplied by an exact zero, so the nodes are reproduced up to roundoff
    in the sum of the first `j+1` terms.

    @param x_point
        Where to evaluate. Any finite value is allowed, but accuracy degrades
        rapidly outside ``[min(xs), max(xs)]``.
    @param xs
        The nodes used to build `table`. May be `None` to use the nodes
        stored in the table.
    @param table
        DividedDifferenceTable as returned by build_divided_differences().
    """
    if xs is None:
        xs = table.nodes
    else:
        xs = np.asarray(xs, dtype=float)
        if xs.shape != table.nodes.shape or not np.array_equal(xs, table.nodes):
            raise InvalidInputError("Nodes do not match the divided "
                                    "difference table.")
    x = float(x_point)
    coeffs = table.coefficients
    result = coeffs[-1]
    for i in range(table.n - 2, -1, -1):
        result = coeffs[i] + (x - xs[i]) * result
    return float(result)


class NewtonPolynomial():
    r"""Callable interpolating polynomial through a set of samples.

    The divided differences are computed once upon construction and owned
    by this object.
    """

    __slots__ = ("_table",)

    def __init__(self, samples):
        r"""Build the polynomial through `samples`.

        @param samples
            Iterable of samples.Sample objects or `(x, y)` pairs with
            strictly increasing `x`.
        """
        xs, ys = split_samples(samples)
        self._table = build_divided_differences(xs, ys)

    @property
    def table(self):
        r"""The DividedDifferenceTable of this polynomial."""
        return self._table

    @property
    def degree(self):
        r"""Maximum degree of the polynomial (number of nodes minus one)."""
        return self._table.n - 1

    def __call__(self, x):
        return evaluate_newton(x, None, self._table)

    def evaluate_many(self, points):
        r"""Evaluate at each of the given points, returning a NumPy array."""
        return np.array([self(x) for x in points])
