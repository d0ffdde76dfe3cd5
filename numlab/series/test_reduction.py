#!/usr/bin/env python3

import unittest
import sys
import math

import numpy as np
from mpmath import mp

from testutils import NumTestCase, slowtest
from ..numutils import InvalidInputError
from .maclaurin import SeriesKind, evaluate
from .reduction import reduce_angle, halve_argument, reduced_sin, reduced_exp
from .reduction import REDUCED_SIN_TERMS


class TestReduceAngle(NumTestCase):
    def test_interval(self):
        pi = math.pi
        for t in np.linspace(-50, 50, 1001):
            r = reduce_angle(t)
            self.assertGreater(r, -pi)
            self.assertLessEqual(r, pi)
            self.assertAlmostEqual(math.sin(r), math.sin(t), delta=1e-13)

    def test_boundaries(self):
        pi = math.pi
        self.assertEqual(reduce_angle(0.0), 0.0)
        self.assertEqual(reduce_angle(pi), pi)
        self.assertEqual(reduce_angle(-pi), pi)
        self.assertAlmostEqual(reduce_angle(3*pi/2), -pi/2, delta=1e-15)

    def test_non_finite(self):
        for t in (float('nan'), float('inf'), -float('inf')):
            with self.assertRaises(InvalidInputError):
                reduce_angle(t)


class TestHalveArgument(NumTestCase):
    def test_halving(self):
        self.assertEqual(halve_argument(0.5), (0.5, 0))
        self.assertEqual(halve_argument(1.0), (1.0, 0))
        self.assertEqual(halve_argument(50.0), (50.0/64, 6))
        for t in (1.5, 3.0, 17.25, 200.0):
            reduced, k = halve_argument(t)
            self.assertLessEqual(reduced, 1.0)
            self.assertGreater(reduced, 0.5)
            self.assertEqual(reduced * 2**k, t)

    def test_negative(self):
        with self.assertRaises(InvalidInputError):
            halve_argument(-1.0)


class TestReducedSin(NumTestCase):
    def test_accuracy(self):
        for t in np.linspace(-50, 50, 2001):
            self.assertAlmostEqual(reduced_sin(t), math.sin(t), delta=1e-9)

    def test_accuracy_mpmath(self):
        with mp.workdps(30):
            for t in (-49.5, -10.5, -1.0, 0.5, 3.0, 10.5, 33.3, 50.0):
                ref = float(mp.sin(mp.mpf(t)))
                self.assertAlmostEqual(reduced_sin(t), ref, delta=1e-10)

    def test_term_count_matters(self):
        # Fifteen terms are not enough close to |t| = pi.
        t = math.pi - 1e-3
        err15 = abs(reduced_sin(t, n_terms=15) - math.sin(t))
        err = abs(reduced_sin(t) - math.sin(t))
        self.assertGreater(err15, 1e-9)
        self.assertLess(err, 1e-10)
        self.assertEqual(REDUCED_SIN_TERMS, 21)

    def test_improves_on_plain_series(self):
        t = 10.5
        plain = evaluate(SeriesKind.SIN, t, 15)
        self.assertGreater(abs(plain - math.sin(t)), 1.0)
        self.assertLess(abs(reduced_sin(t) - math.sin(t)), 1e-10)


class TestReducedExp(NumTestCase):
    def test_relative_accuracy(self):
        for t in np.linspace(0, 50, 2001):
            ref = math.exp(t)
            self.assertRelativelyClose(reduced_exp(t), ref, 1e-9)

    def test_accuracy_mpmath(self):
        with mp.workdps(30):
            for t in (0.0, 0.5, 1.0, 10.5, 25.0, 50.0):
                ref = mp.exp(mp.mpf(t))
                rel = abs((mp.mpf(reduced_exp(t)) - ref) / ref)
                self.assertLess(float(rel), 1e-11)

    def test_negative(self):
        for t in (-0.5, -3.0, -20.0):
            ref = math.exp(t)
            self.assertRelativelyClose(reduced_exp(t), ref, 1e-9)
            self.assertEqual(reduced_exp(t), 1.0 / reduced_exp(-t))

    def test_zero(self):
        self.assertEqual(reduced_exp(0.0), 1.0)

    def test_non_finite(self):
        with self.assertRaises(InvalidInputError):
            reduced_exp(float('nan'))

    @slowtest
    def test_dense_sampling(self):
        for t in np.linspace(-50, 50, 100001):
            self.assertAlmostEqual(reduced_sin(t), math.sin(t), delta=1e-9)
            if t >= 0:
                ref = math.exp(t)
                self.assertRelativelyClose(reduced_exp(t), ref, 1e-9)


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
