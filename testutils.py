r"""@package testutils

Common base class and decorators for the unit tests of the numlab package.

The class NumTestCase adds assertions for comparing floating point results
and obeys the global settings in TestSettings, which are configured by the
script invoking the test run (see tests.py).

Tests decorated with slowtest are skipped on normal runs. The script
starting the test must set `TestSettings.skipslow` to `False` for them to
be run.
"""

import sys
import functools
import math
import unittest
import time


__all__ = [
    "NumTestCase",
    "TestSettings",
    "slowtest",
]


def slowtest(func):
    """Decorator for skipping a test if TestSettings.skipslow is true."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if TestSettings.skipslow:
            raise unittest.SkipTest("skipping slow tests")
        return func(*args, **kwargs)
    return wrapper


class NumTestCase(unittest.TestCase):
    """Base class for numerical unit tests.

    If TestSettings.timing is true, the duration of each successful test is
    printed (needs `verbosity=2`).
    """

    def run(self, result=None):
        if not TestSettings.timing:
            return unittest.TestCase.run(self, result)
        self.__result = result
        self.__prevProblems = self.__countProblems()
        start = time.time()
        unittest.TestCase.run(self, result)
        if self.__shouldPrintTiming():
            print("(%.4f seconds) ... " % (time.time() - start),
                  file=sys.stderr, end='')

    def __countProblems(self):
        r = self.__result
        if r is None:
            return 0
        return len(r.errors) + len(r.failures) + len(r.skipped)

    def __shouldPrintTiming(self):
        r"""Return whether timing information should be printed."""
        if self.__result is None:
            return False
        if self.__countProblems() > self.__prevProblems:
            return False
        return not self.__result.dots and self.__result.showAll

    def assertIsType(self, obj, cls):
        r"""Assert that an object is exactly of a certain type."""
        self.assertIs(type(obj), cls)

    def assertRelativelyClose(self, value, expected, rtol, msg=None):
        r"""Assert ``|value - expected| <= rtol * |expected|``.

        For `expected == 0`, the comparison is done with the absolute error.
        """
        scale = abs(expected) or 1.0
        err = abs(value - expected)
        if not err <= rtol * scale:
            std = "%r != %r within relative tolerance %g (error: %g)" % (
                value, expected, rtol, err / scale
            )
            raise self.failureException(self._formatMessage(msg, std))

    def assertListAlmostEqual(self, a, b, places=None, delta=None):
        r"""Assert that two iterables contain (almost) the same values."""
        if places is not None and delta is not None:
            raise TypeError("Cannot use delta and places at the same time")
        if places is None and delta is None:
            places = 7
        a, b = list(a), list(b)
        if len(a) != len(b):
            raise self.failureException("Lists have different lengths (%d != %d)" % (len(a), len(b)))
        fails = []
        for i, (x, y) in enumerate(zip(a, b)):
            if x == y:
                continue
            if delta is not None:
                if not abs(x-y) <= delta:
                    fails.append(i)
            elif math.isnan(x - y) or round(abs(x-y), places) != 0:
                fails.append(i)
        if fails:
            msg = "%d elements differ.\n" % len(fails)
            maxN = 9
            if len(fails) <= maxN:
                msg += "Differing elements:\n"
            else:
                msg += "First few differing elements:\n"
            msg += "\n".join(["  [{i}] {a} != {b}    (difference: {d})".format(i=i, a=a[i], b=b[i], d=(b[i]-a[i]))
                              for i in fails[:maxN]])
            raise self.failureException(msg)


class TestSettings():
    """Global settings for tests."""
    ## Stop test run on first fail/error.
    failfast = False
    ## Whether output is buffered.\ Just information, cannot be used to toggle output buffering.
    buffering = False
    ## Whether the timing for each test case should be printed.
    timing = False
    ## Control whether tests marked as slowtest should be skipped.
    skipslow = True
