r"""@package numlab.interp.samples

Tabulated data points and their validation.
"""

import numpy as np

from ..numutils import InvalidInputError


__all__ = [
    "Sample",
    "check_samples",
    "split_samples",
]


class Sample():
    r"""An observed or tabulated data point `(x, y)`."""

    __slots__ = ("_x", "_y")

    def __init__(self, x, y):
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self):
        r"""Abscissa of the data point."""
        return self._x

    @property
    def y(self):
        r"""Value at `x`."""
        return self._y

    def __iter__(self):
        return iter((self._x, self._y))

    def __eq__(self, other):
        if not isinstance(other, Sample):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return "Sample(%r, %r)" % (self.x, self.y)


def check_samples(xs, ys=None):
    r"""Validate a dataset and return it as two float arrays.

    @param xs
        Sequence of nodes. They must be finite and strictly increasing.
    @param ys
        Values at the nodes. Same length as `xs`. If not given, only the
        nodes are checked and `None` is returned in place of the values.

    @return Pair ``(xs, ys)`` of read-only NumPy float arrays (copies).

    @raise InvalidInputError for empty datasets, mismatched lengths,
        non-finite values, duplicate or decreasing nodes.
    """
    xs = np.array(xs, dtype=float)
    if xs.ndim != 1:
        raise InvalidInputError("Nodes must be a one-dimensional sequence.")
    if xs.size == 0:
        raise InvalidInputError("Dataset is empty.")
    if not np.all(np.isfinite(xs)):
        raise InvalidInputError("Nodes must be finite.")
    steps = np.diff(xs)
    if np.any(steps == 0):
        i = int(np.flatnonzero(steps == 0)[0])
        raise InvalidInputError("Duplicate node x=%r at index %d and %d."
                                % (xs[i], i, i+1))
    if np.any(steps < 0):
        i = int(np.flatnonzero(steps < 0)[0])
        raise InvalidInputError("Nodes must be strictly increasing "
                                "(x[%d]=%r > x[%d]=%r)."
                                % (i, xs[i], i+1, xs[i+1]))
    xs.setflags(write=False)
    if ys is None:
        return xs, None
    ys = np.array(ys, dtype=float)
    if ys.shape != xs.shape:
        raise InvalidInputError("Got %d nodes but %d values."
                                % (xs.size, ys.size))
    if not np.all(np.isfinite(ys)):
        raise InvalidInputError("Values must be finite.")
    ys.setflags(write=False)
    return xs, ys


def split_samples(samples):
    r"""Convert an iterable of Sample objects or `(x, y)` pairs to arrays.

    The data is validated using check_samples().
    """
    pairs = [tuple(s) for s in samples]
    if not pairs:
        raise InvalidInputError("Dataset is empty.")
    if any(len(p) != 2 for p in pairs):
        raise InvalidInputError("Samples must be (x, y) pairs.")
    xs, ys = zip(*pairs)
    return check_samples(xs, ys)
