r"""@package numlab.roots.result

Result type shared by all root finders.
"""

from enum import Enum


__all__ = [
    "RootStatus",
    "Root",
]


class RootStatus(Enum):
    r"""Outcome of a root search.

    Only `CONVERGED` means the tolerance was met. All other states are
    regular, expected outcomes of an iterative search and are reported
    instead of raised.
    """

    ## The step size dropped below the tolerance.
    CONVERGED = "converged"
    ## The iteration cap was reached without meeting the tolerance.
    NO_CONVERGENCE = "no convergence"
    ## Newton's method encountered a (nearly) vanishing derivative.
    SINGULAR_DERIVATIVE = "singular derivative"
    ## The update could not be evaluated (e.g. log of a non-positive value).
    DOMAIN_ERROR = "domain error"


class Root():
    r"""Approximate root together with information about the search.

    @b Examples

    ```
        root = newton_raphson(f, df, x0=0.6)
        if not root.converged:
            print("Search stopped: %s" % root.status.value)
        print("x = %s after %d iterations" % (root.x, root.iterations))
    ```
    """

    __slots__ = ("_x", "_iterations", "_status")

    def __init__(self, x, iterations, status=RootStatus.CONVERGED):
        r"""Create a root result.

        @param x
            The best (i.e. last valid) iterate.
        @param iterations
            Number of update steps performed.
        @param status
            RootStatus describing why the search stopped.
        """
        self._x = x
        self._iterations = iterations
        self._status = RootStatus(status)

    @property
    def x(self):
        r"""Location of the (approximate) root."""
        return self._x

    @property
    def iterations(self):
        r"""Number of update steps performed."""
        return self._iterations

    @property
    def status(self):
        r"""The RootStatus of the search."""
        return self._status

    @property
    def converged(self):
        r"""Whether the search met its tolerance."""
        return self._status is RootStatus.CONVERGED

    def __iter__(self):
        r"""Allow unpacking as ``x, iterations, converged = root``."""
        return iter((self.x, self.iterations, self.converged))

    def __eq__(self, other):
        if not isinstance(other, Root):
            return NotImplemented
        return ((self.x, self.iterations, self.status)
                == (other.x, other.iterations, other.status))

    def __hash__(self):
        return hash((self.x, self.iterations, self.status))

    def __repr__(self):
        return "Root(x=%r, iterations=%d, status=%s)" % (
            self.x, self.iterations, self.status.name
        )
