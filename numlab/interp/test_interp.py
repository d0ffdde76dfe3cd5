#!/usr/bin/env python3

import unittest
import sys
import math
from fractions import Fraction

import numpy as np
import sympy as sp

from testutils import NumTestCase
from ..numutils import InvalidInputError
from .samples import Sample, check_samples, split_samples
from .newton import build_divided_differences, evaluate_newton
from .newton import NewtonPolynomial, DividedDifferenceTable
from .spline import evaluate_linear_spline, find_interval, LinearSpline


CENSUS = [
    (1910, 92228496), (1920, 106021537), (1930, 123202624),
    (1940, 132164569), (1950, 151325798), (1960, 179323175),
    (1970, 203211926), (1980, 226545805), (1990, 248709873),
    (2000, 281421906),
]


class TestSamples(NumTestCase):
    def test_check(self):
        xs, ys = check_samples([1, 2, 4], [0.5, 1, -2])
        self.assertIsType(xs, np.ndarray)
        self.assertEqual(xs.dtype, np.float64)
        self.assertListAlmostEqual(list(ys), [0.5, 1.0, -2.0], delta=0)
        with self.assertRaises(ValueError):
            xs[0] = 5.0

    def test_invalid(self):
        with self.assertRaises(InvalidInputError):
            check_samples([], [])
        with self.assertRaises(InvalidInputError):
            check_samples([1, 2, 2, 3], [0, 0, 0, 0])
        with self.assertRaises(InvalidInputError):
            check_samples([1, 3, 2], [0, 0, 0])
        with self.assertRaises(InvalidInputError):
            check_samples([1, 2, 3], [0, 0])
        with self.assertRaises(InvalidInputError):
            check_samples([1, float('nan')], [0, 0])
        with self.assertRaises(InvalidInputError):
            check_samples([1, 2], [0, float('inf')])

    def test_sample(self):
        s = Sample(1910, 92228496)
        self.assertEqual(s.x, 1910.0)
        self.assertEqual(tuple(s), (1910.0, 92228496.0))
        self.assertEqual(s, Sample(1910.0, 92228496.0))
        xs, ys = split_samples([Sample(0, 1), (1, 2)])
        self.assertListAlmostEqual(list(xs), [0, 1], delta=0)
        with self.assertRaises(InvalidInputError):
            split_samples([])


class TestDividedDifferences(NumTestCase):
    def test_small_table(self):
        table = build_divided_differences([0, 1, 2], [1, 3, 7])
        self.assertIsType(table, DividedDifferenceTable)
        self.assertEqual(table.n, 3)
        self.assertEqual(table[0, 0], 1.0)
        self.assertEqual(table[1, 0], 3.0)
        self.assertEqual(table[0, 1], 2.0)
        self.assertEqual(table[1, 1], 4.0)
        self.assertEqual(table[0, 2], 1.0)
        self.assertListAlmostEqual(list(table.coefficients), [1, 2, 1], delta=0)
        with self.assertRaises(IndexError):
            table[1, 2]
        with self.assertRaises(IndexError):
            table[0, 3]
        self.assertEqual(evaluate_newton(1.5, [0, 1, 2], table), 4.75)

    def test_immutable(self):
        table = build_divided_differences([0, 1, 2], [1, 3, 7])
        with self.assertRaises(ValueError):
            table.coefficients[0] = 2.0
        with self.assertRaises(ValueError):
            table.nodes[0] = 2.0

    def test_exact_rationals(self):
        xs = [0, 1, 3, 4, 7]
        ys = [2, -1, 5, 0, 3]
        table = build_divided_differences(xs, ys)
        # Compare with exact rational arithmetic.
        diff = [[Fraction(y)] for y in ys]
        for j in range(1, len(xs)):
            for i in range(len(xs) - j):
                diff[i].append((diff[i+1][j-1] - diff[i][j-1])
                               / (xs[i+j] - xs[i]))
        for j in range(len(xs)):
            for i in range(len(xs) - j):
                self.assertAlmostEqual(table[i, j], float(diff[i][j]),
                                       delta=1e-14)

    def test_duplicate_nodes(self):
        with self.assertRaises(InvalidInputError):
            build_divided_differences([0, 1, 1], [0, 1, 2])

    def test_mismatched_nodes(self):
        table = build_divided_differences([0, 1, 2], [1, 3, 7])
        with self.assertRaises(InvalidInputError):
            evaluate_newton(0.5, [0, 1, 3], table)
        with self.assertRaises(InvalidInputError):
            evaluate_newton(0.5, [0, 1], table)
        self.assertEqual(evaluate_newton(1.5, None, table), 4.75)


class TestNewtonInterpolation(NumTestCase):
    def test_reproduces_nodes(self):
        xs = [-2.0, -0.5, 0.0, 1.25, 3.0, 4.5]
        ys = [math.sin(x) + x**2 for x in xs]
        table = build_divided_differences(xs, ys)
        for x, y in zip(xs, ys):
            self.assertAlmostEqual(evaluate_newton(x, xs, table), y,
                                   delta=1e-12)

    def test_reproduces_census(self):
        xs, ys = zip(*CENSUS)
        table = build_divided_differences(xs, ys)
        for x, y in zip(xs, ys):
            self.assertRelativelyClose(evaluate_newton(x, xs, table), y, 1e-9)

    def test_polynomial_exact(self):
        x = sp.Symbol('x')
        poly = 3*x**3 - 2*x**2 + x - 5
        f = sp.lambdify(x, poly)
        xs = [-1, 0.5, 2, 3]
        p = NewtonPolynomial([(xi, f(xi)) for xi in xs])
        self.assertEqual(p.degree, 3)
        for xi in np.linspace(-3, 5, 17):
            expected = float(poly.subs(x, sp.Rational(str(xi))))
            self.assertAlmostEqual(p(xi), expected, delta=1e-10)

    def test_single_point(self):
        p = NewtonPolynomial([(2.0, 5.0)])
        self.assertEqual(p.degree, 0)
        self.assertEqual(p(-10), 5.0)
        self.assertListAlmostEqual(list(p.evaluate_many([0, 1])), [5.0, 5.0],
                                   delta=0)


class TestLinearSpline(NumTestCase):
    def test_breakpoints_exact(self):
        xs = [0.0, 0.1, 0.35, 0.7, 1.0]
        ys = [0.1, 0.3, -0.2, 1.0/3.0, 0.7]
        for x, y in zip(xs, ys):
            self.assertEqual(evaluate_linear_spline(x, xs, ys), y)
        xs, ys = zip(*CENSUS)
        for x, y in zip(xs, ys):
            self.assertEqual(evaluate_linear_spline(x, xs, ys), y)

    def test_interpolation(self):
        xs = [0, 1, 3]
        ys = [0, 2, 3]
        self.assertAlmostEqual(evaluate_linear_spline(0.5, xs, ys), 1.0,
                               delta=1e-15)
        self.assertAlmostEqual(evaluate_linear_spline(2.0, xs, ys), 2.5,
                               delta=1e-15)

    def test_extrapolation(self):
        xs = [0, 1, 3]
        ys = [0, 2, 3]
        # slope of the last interval is 1/2
        self.assertAlmostEqual(evaluate_linear_spline(5.0, xs, ys), 4.0,
                               delta=1e-15)
        # slope of the first interval is 2
        self.assertAlmostEqual(evaluate_linear_spline(-1.0, xs, ys), -2.0,
                               delta=1e-15)

    def test_find_interval(self):
        xs = [0.0, 1.0, 2.0, 3.0]
        self.assertEqual(find_interval(0.0, xs), 0)
        self.assertEqual(find_interval(1.0, xs), 0)
        self.assertEqual(find_interval(1.5, xs), 1)
        self.assertEqual(find_interval(3.0, xs), 2)
        self.assertEqual(find_interval(7.0, xs), 2)
        self.assertEqual(find_interval(-7.0, xs), 0)

    def test_invalid(self):
        with self.assertRaises(InvalidInputError):
            evaluate_linear_spline(0.5, [0, 0], [1, 2])
        with self.assertRaises(InvalidInputError):
            evaluate_linear_spline(0.5, [], [])
        self.assertEqual(evaluate_linear_spline(0.5, [1.0], [4.0]), 4.0)

    def test_callable(self):
        spline = LinearSpline([Sample(0, 0), Sample(1, 2), Sample(3, 3)])
        self.assertAlmostEqual(spline(2.0), 2.5, delta=1e-15)
        self.assertListAlmostEqual(list(spline.evaluate_many([0, 1, 3])),
                                   [0.0, 2.0, 3.0], delta=0)


class TestCensusExtrapolation(NumTestCase):
    def test_2010(self):
        actual = 308745538
        xs, ys = zip(*CENSUS)
        table = build_divided_differences(xs, ys)
        newton = evaluate_newton(2010, xs, table)
        spline = evaluate_linear_spline(2010, xs, ys)
        self.assertTrue(math.isfinite(newton))
        self.assertTrue(math.isfinite(spline))
        self.assertNotEqual(newton, spline)
        # spline continues the 1990-2000 trend
        self.assertAlmostEqual(spline, 2*281421906 - 248709873, delta=1e-6)
        self.assertEqual(newton, evaluate_newton(2010, xs, table))
        self.assertLess(abs(spline - actual), abs(newton - actual))


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
