r"""@package numlab.utils

General utilities for simplifying certain tasks in Python.
"""

import datetime
from contextlib import contextmanager
import time
from timeit import default_timer

import numpy as np


__all__ = [
    "isiterable",
    "step_grid",
    "print_indented",
    "timethis",
]


def isiterable(obj):
    """Check whether an object is iterable.

    Note that this returns `True` for strings, which you may or may not intend
    to check for.
    """
    try:
        iter(obj)
    except TypeError:
        return False
    return True


def step_grid(start, stop, step):
    r"""Equidistant points from `start` to `stop` (inclusive) with given step.

    Unlike repeatedly adding `step`, the points do not accumulate roundoff
    errors and `stop` is always the last point. The step is adjusted slightly
    if `stop - start` is not a multiple of it.

    @b Examples

    \code
        >>> step_grid(0.0, 1.0, 0.25)
        array([0.  , 0.25, 0.5 , 0.75, 1.  ])
    \endcode
    """
    if not step > 0:
        raise ValueError("step must be positive")
    num = int(round((stop - start) / step)) + 1
    return np.linspace(start, stop, max(num, 1))


def print_indented(prefix, obj):
    r"""Print a prefix followed by an object with correct indenting of multiple lines.

    Printing an object that has a multi-line string representation looks ugly
    when prefixed by another string.

    @b Examples

    \code
        >>> print_indented("roots = ", "a\nb")
        roots = a
                b

    \endcode
    """
    if isinstance(prefix, int):
        prefix = " " * prefix
    m = len(prefix)
    lines = (prefix + str(obj)).splitlines()
    result = [lines[0]]
    result += [(" "*m)+l for l in lines[1:]]
    print("\n".join(result))


@contextmanager
def timethis(start_msg=None, end_msg="Elapsed time: {}", silent=False, eol=True):
    r"""Context manager for timing code execution.

    @param start_msg
        String to print at the beginning. May contain the placeholder
        ``'{now}'``, which will be replaced by the current date and time. A
        value of `True` will be taken to mean ``"Started: {now}``.
    @param end_msg
        String to print after execution. Default is ``"Elapsed time: {}"``.
    @param silent
        Whether to print anything at all. May be useful when a function has a
        verbosity setting to conditionally time its results.
    @param eol
        Whether to print a newline after each message. May be useful to print
        execution time in line with the starting message.
    """
    if silent:
        yield
        return
    if start_msg is True:
        start_msg = "Started: {now}"
    if start_msg is not None:
        print(start_msg.format(now=time.strftime('%Y-%m-%d %H:%M:%S')),
              end='\n' if eol else '', flush=not eol)
    start = default_timer()
    try:
        yield
    finally:
        if end_msg is not None:
            time_str = datetime.timedelta(seconds=default_timer()-start)
            print(end_msg.format(time_str))
