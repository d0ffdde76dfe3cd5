r"""@package numlab.interp.spline

Piecewise-linear interpolation with linear extrapolation.

Between two neighboring nodes, the data is connected by a straight line.
Outside the data range, the line through the outermost two nodes is
continued. Unlike high degree polynomials, this never "overshoots", which
makes it the more robust choice for extrapolation over short distances.
"""

import numpy as np

from .samples import check_samples, split_samples


__all__ = [
    "find_interval",
    "evaluate_linear_spline",
    "LinearSpline",
]


def find_interval(x_point, xs):
    r"""Index `i` of the interval ``[xs[i], xs[i+1]]`` to use for `x_point`.

    The intervals are scanned from the left and the first one containing
    `x_point` wins. Hence, an inner node is assigned to the interval on its
    left. Points right of the data use the last interval, points left of it
    the first one. Requires at least two nodes.
    """
    n = len(xs)
    for i in range(n - 1):
        if xs[i] <= x_point <= xs[i+1]:
            return i
    if x_point > xs[n-1]:
        return n - 2
    return 0


def _interpolate(x, xs, ys, i):
    # Weighted form, exact at both ends of the interval.
    t = (x - xs[i]) / (xs[i+1] - xs[i])
    return float((1.0 - t) * ys[i] + t * ys[i+1])


def evaluate_linear_spline(x_point, xs, ys):
    r"""Evaluate the linear spline through `(xs, ys)` at `x_point`.

    The value at a node reproduces the data value exactly. A dataset
    consisting of a single sample is treated as a constant function.

    @param x_point
        Where to evaluate.
    @param xs
        Strictly increasing nodes.
    @param ys
        Values at the nodes.

    @raise numutils.InvalidInputError for invalid data (see
        samples.check_samples()).
    """
    xs, ys = check_samples(xs, ys)
    if len(xs) == 1:
        return float(ys[0])
    x = float(x_point)
    return _interpolate(x, xs, ys, find_interval(x, xs))


class LinearSpline():
    r"""Callable linear spline through a set of samples."""

    __slots__ = ("_xs", "_ys")

    def __init__(self, samples):
        r"""Create the spline from samples.Sample objects or `(x, y)` pairs."""
        self._xs, self._ys = split_samples(samples)

    @property
    def nodes(self):
        r"""Read-only array of the nodes."""
        return self._xs

    @property
    def values(self):
        r"""Read-only array of the values at the nodes."""
        return self._ys

    def __call__(self, x):
        if len(self._xs) == 1:
            return float(self._ys[0])
        x = float(x)
        return _interpolate(x, self._xs, self._ys, find_interval(x, self._xs))

    def evaluate_many(self, points):
        r"""Evaluate at each of the given points, returning a NumPy array."""
        return np.array([self(x) for x in points])
