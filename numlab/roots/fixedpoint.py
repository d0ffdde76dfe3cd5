r"""@package numlab.roots.fixedpoint

Fixed-point iteration and its use for finding half-height points.

A fixed-point iteration solves \f$ x = g(x) \f$ by iterating
\f$ x_{n+1} = g(x_n) \f$ until two successive iterates differ by less than a
tolerance. It converges locally if \f$ |g'| < 1 \f$ near the fixed point.

The equation \f$ x e^{-x^2} = c \f$ with \f$ 0 < c < f_{max} \f$ has two
solutions, one on each side of the maximum at \f$ x = 1/\sqrt{2} \f$. Each
needs its own update rule to obtain a contraction:

    * left branch: \f$ x \leftarrow c\, e^{x^2} \f$
    * right branch: \f$ x \leftarrow \sqrt{\ln(x/c)} \f$

@b Examples

```
    res = full_width_half_maximum()
    print("FWHM = %s (%d + %d iterations)"
          % (res.width, res.left.iterations, res.right.iterations))
```
"""

import math

from ..config import default_settings
from ..numutils import InvalidInputError, isfinite
from .result import Root, RootStatus


__all__ = [
    "fixed_point",
    "fixed_point_left",
    "fixed_point_right",
    "left_branch_update",
    "right_branch_update",
    "peak_profile",
    "PEAK_LOCATION",
    "HalfHeightWidth",
    "half_height_width",
    "full_width_half_maximum",
]


## Location of the maximum of peak_profile().
PEAK_LOCATION = 1.0 / math.sqrt(2.0)


def peak_profile(x):
    r"""The function \f$ f(x) = x e^{-x^2} \f$."""
    return x * math.exp(-x * x)


def fixed_point(g, x0, eps=1e-3, max_iter=None, config=None, verbose=False):
    r"""Iterate `x = g(x)` until successive iterates differ by less than `eps`.

    @param g
        Update function. If it raises a `ValueError` or `OverflowError` (e.g.
        a math domain error) or returns a non-finite value, the search stops
        with RootStatus.DOMAIN_ERROR and the last valid iterate. The
        failed update is not counted as an iteration.
    @param x0
        Initial guess.
    @param eps
        Absolute tolerance for the step size. Default is `1e-3`.
    @param max_iter
        Iteration cap. Default is taken from `config` (`1000`).
    @param config
        config.Settings object supplying defaults.
    @param verbose
        Print each iterate.

    @return A root.Root. Reaching the iteration cap is reported as
        RootStatus.NO_CONVERGENCE together with the last iterate.
    """
    if config is None:
        config = default_settings()
    if max_iter is None:
        max_iter = config.max_iterations
    if not eps > 0:
        raise InvalidInputError("eps must be positive, got %r" % (eps,))
    x = float(x0)
    for i in range(1, max_iter+1):
        try:
            x_new = g(x)
        except (ValueError, OverflowError):
            return Root(x, i-1, RootStatus.DOMAIN_ERROR)
        if not isfinite(x_new):
            return Root(x, i-1, RootStatus.DOMAIN_ERROR)
        if verbose:
            print("  iteration %d: x = %s" % (i, x_new))
        if abs(x_new - x) < eps:
            return Root(x_new, i, RootStatus.CONVERGED)
        x = x_new
    return Root(x, max_iter, RootStatus.NO_CONVERGENCE)


def _check_target(target):
    if not isfinite(target) or target <= 0:
        raise InvalidInputError("target must be positive and finite, got %r"
                                % (target,))


def left_branch_update(x, target):
    r"""Update \f$ x \leftarrow c\, e^{x^2} \f$ of the left branch."""
    return target * math.exp(x * x)


def right_branch_update(x, target):
    r"""Update \f$ x \leftarrow \sqrt{\ln(x/c)} \f$ of the right branch.

    Raises a `ValueError` for \f$ x < c \f$.
    """
    return math.sqrt(math.log(x / target))


def fixed_point_left(target, x0, eps=1e-3, max_iter=None, config=None,
                     verbose=False):
    r"""Solve \f$ x e^{-x^2} = c \f$ left of the maximum.

    Uses left_branch_update(). Diverging iterates end with
    RootStatus.DOMAIN_ERROR once the exponential overflows.
    """
    _check_target(target)
    return fixed_point(lambda x: left_branch_update(x, target), x0, eps=eps,
                       max_iter=max_iter, config=config, verbose=verbose)


def fixed_point_right(target, x0, eps=1e-3, max_iter=None, config=None,
                      verbose=False):
    r"""Solve \f$ x e^{-x^2} = c \f$ right of the maximum.

    Uses right_branch_update(), which is only defined for \f$ x \ge c \f$.
    Iterates leaving this domain end the search with RootStatus.DOMAIN_ERROR
    instead of producing NaN values.
    """
    _check_target(target)
    return fixed_point(lambda x: right_branch_update(x, target), x0, eps=eps,
                       max_iter=max_iter, config=config, verbose=verbose)


class HalfHeightWidth():
    r"""The two half-height points of a peak and the resulting width."""

    __slots__ = ("_left", "_right", "_peak", "_target")

    def __init__(self, left, right, peak, target):
        self._left = left
        self._right = right
        self._peak = peak
        self._target = target

    @property
    def left(self):
        r"""root.Root of the left half-height point."""
        return self._left

    @property
    def right(self):
        r"""root.Root of the right half-height point."""
        return self._right

    @property
    def peak(self):
        r"""Location of the maximum."""
        return self._peak

    @property
    def target(self):
        r"""Function value the roots were searched for (half the maximum)."""
        return self._target

    @property
    def width(self):
        r"""Distance between the two half-height points."""
        return self._right.x - self._left.x

    @property
    def converged(self):
        r"""Whether both searches converged."""
        return self._left.converged and self._right.converged

    def __repr__(self):
        return "HalfHeightWidth(width=%r, left=%r, right=%r)" % (
            self.width, self.left, self.right
        )


def half_height_width(f, x_peak, target, left_guess, right_guess,
                      left_update, right_update, eps=1e-3, max_iter=None,
                      config=None, verbose=False):
    r"""Find the points where a peaked profile attains `target` on both sides.

    Each side is solved by its own fixed_point() iteration, since in general
    no single update rule is a contraction on both branches.

    @param f
        The profile, having its maximum at `x_peak`.
    @param x_peak
        Location of the maximum.
    @param target
        Function value to search for. Must satisfy
        ``0 < target < f(x_peak)``. If `None`, half the maximum is used.
    @param left_guess,right_guess
        Initial guesses, left and right of `x_peak`, respectively.
    @param left_update,right_update
        Update functions called as ``update(x, target)`` for the left and
        right branch, e.g. left_branch_update() and right_branch_update().
    @param eps,max_iter,config
        Passed to fixed_point().
    @param verbose
        Print the iterates of both searches.

    @return HalfHeightWidth

    @raise InvalidInputError if the guesses are on the wrong side of the
        peak or `target` is not below the maximum.
    """
    f_max = f(x_peak)
    if target is None:
        target = f_max / 2.0
    if not (isfinite(target) and 0 < target < f_max):
        raise InvalidInputError("target must lie in (0, %r), got %r"
                                % (f_max, target))
    if not left_guess < x_peak < right_guess:
        raise InvalidInputError("Guesses %r and %r do not enclose the peak "
                                "at %r." % (left_guess, right_guess, x_peak))
    if verbose:
        print("Left branch:")
    left = fixed_point(lambda x: left_update(x, target), left_guess, eps=eps,
                       max_iter=max_iter, config=config, verbose=verbose)
    if verbose:
        print("Right branch:")
    right = fixed_point(lambda x: right_update(x, target), right_guess,
                        eps=eps, max_iter=max_iter, config=config,
                        verbose=verbose)
    return HalfHeightWidth(left, right, x_peak, target)


def full_width_half_maximum(eps=1e-3, left_offset=0.2, right_offset=0.4,
                            max_iter=None, config=None, verbose=False):
    r"""Compute the full width at half maximum of peak_profile().

    @param eps
        Tolerance of both fixed-point iterations. Default is `1e-3`.
    @param left_offset,right_offset
        The initial guesses are placed this far left and right of the peak.
        Defaults are `0.2` and `0.4`.
    @param max_iter
        Iteration cap of each search.
    @param config
        config.Settings object supplying defaults.
    @param verbose
        Print the iterates of both searches.
    """
    return half_height_width(
        peak_profile, PEAK_LOCATION, None,
        PEAK_LOCATION - left_offset, PEAK_LOCATION + right_offset,
        left_branch_update, right_branch_update,
        eps=eps, max_iter=max_iter, config=config, verbose=verbose,
    )
