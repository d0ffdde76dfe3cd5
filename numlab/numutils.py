r"""@package numlab.numutils

Miscellaneous numerical utilities, helpers and the common exceptions.
"""

from contextlib import contextmanager
import math
import warnings

from scipy.integrate import IntegrationWarning
import numpy as np


__all__ = [
    "NumericalError",
    "InvalidInputError",
    "isfinite",
    "check_positive_int",
    "raise_all_warnings",
    "try_quad_tolerances",
    "IntegrationResult",
]


class NumericalError(Exception):
    r"""Base class of the exceptions raised by this package.

    Note that expected outcomes of iterative methods (e.g. reaching the
    iteration limit) are *not* signaled via exceptions. These are part of the
    returned result objects.
    """
    pass


class InvalidInputError(NumericalError, ValueError):
    r"""Raised for input that none of the algorithms can work with.

    Examples are duplicate or decreasing nodes of interpolation data, empty
    datasets or non-positive term and subinterval counts.
    """
    pass


def isfinite(x):
    r"""Return whether `x` is a finite real number (no NaN or inf)."""
    try:
        return math.isfinite(x)
    except TypeError:
        return False


def check_positive_int(value, name):
    r"""Validate that `value` is an integer `>= 1` and return it as `int`.

    Booleans and floats with a fractional part are rejected.

    @raise InvalidInputError if the value is not a positive integer.
    """
    if isinstance(value, bool):
        raise InvalidInputError("%s must be an integer, got %r" % (name, value))
    if isinstance(value, (float, np.floating)):
        if not value.is_integer():
            raise InvalidInputError("%s must be an integer, got %r"
                                    % (name, value))
    try:
        ivalue = int(value)
    except (TypeError, ValueError):
        raise InvalidInputError("%s must be an integer, got %r" % (name, value))
    if ivalue < 1:
        raise InvalidInputError("%s must be at least 1, got %s" % (name, ivalue))
    return ivalue


def try_quad_tolerances(func, args=(), kwargs=None, tol_min=1e-11,
                        tol_max=1e-2, tol_steps=None, verbose=False):
    r"""Try to run a given function with increasing tolerance until integration succeeds.

    @param func
        Callable performing the integration. This should issue or raise an
        `IntegrationWarning` for too low tolerances. It is called as
        ``func(tol, *args, **kwargs)``.
    @param args
        Optional additional positional arguments for `func`.
    @param kwargs
        Optional additional keyword arguments for `func`.
    @param tol_min
        Minimal tolerance to try first. Default is `1e-11`.
    @param tol_max
        Maximum tolerance to allow. If `func` fails for this tolerance, no
        more trials are done and the `IntegrationWarning` warning is raised.
        Default is `1e-2`.
    @param tol_steps
        How many steps to try when going from `tol_min` to `tol_max`. Should
        be at least two. Default is to go roughly through each order of
        magnitude.
    @param verbose
        If `True`, print the tolerances as they are tried out. Default is
        `False`.
    """
    if tol_min > tol_max:
        raise ValueError("minimal tolerance greater than maximum tolerance")
    tol_min = np.log10(tol_min)
    tol_max = np.log10(tol_max)
    if tol_steps is None:
        tol_steps = max(2, int(round(tol_max-tol_min) + 1))
    tols = np.logspace(tol_min, tol_max, tol_steps)
    with raise_all_warnings():
        for tol in tols:
            if verbose:
                print("Trying with tol=%s" % tol)
            try:
                return func(tol, *args, **(kwargs or dict()))
            except IntegrationWarning:
                if verbose:
                    print("... failed with tol=%s" % tol)
                if tol == tols[-1]:
                    raise


class IntegrationResult():
    r"""Value and error estimate of a reference integration."""

    __slots__ = ("value", "error", "tol")

    def __init__(self, value, error, tol=None):
        r"""Create a result object.

        @param value
            Main result, i.e. the computed value.
        @param error
            The estimate of the absolute error of the value.
        @param tol
            Tolerance with which the integration finally succeeded.
        """
        ## Computed value.
        self.value = value
        ## Estimated absolute error.
        self.error = error
        ## Requested tolerance of the successful integration (may be `None`).
        self.tol = tol

    def __repr__(self):
        txt = "%s +- %s" % (self.value, self.error)
        if self.tol is not None:
            txt += " (tol=%s)" % self.tol
        return txt


@contextmanager
def raise_all_warnings():
    r"""Context manager for turning numpy and native warnings into exceptions.

    For example:
    ```
        with raise_all_warnings():
            np.pi / np.linspace(0, 1, 10)
    ```
    Without the `raise_all_warnings()` context, the above code would just
    issue a warning but otherwise run fine. This allows catching the exception
    to act upon it, e.g.
    ```
        with raise_all_warnings():
            try:
                np.pi / np.linspace(0, 1, 10)
            except FloatingPointError:
                print("Could not compute.")
    ```
    """
    old_settings = np.seterr(divide='raise', over='raise', invalid='raise')
    try:
        with warnings.catch_warnings():
            warnings.filterwarnings('error', category=IntegrationWarning)
            yield
    finally:
        np.seterr(**old_settings)
