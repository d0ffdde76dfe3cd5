#!/usr/bin/env python3

import unittest
import sys
import math

from testutils import NumTestCase
from ..config import Settings
from .result import RootStatus
from .newton import newton_raphson, find_distinct_roots


def circle_tan(x):
    return x**2 + math.tan(x)**2 - 1


def circle_tan_deriv(x):
    return 2*x + 2*math.tan(x)/math.cos(x)**2


class TestNewtonRaphson(NumTestCase):
    def test_circle_tan(self):
        root = newton_raphson(circle_tan, circle_tan_deriv, 0.6, eps=1e-6)
        self.assertTrue(root.converged)
        self.assertLess(abs(circle_tan(root.x)), 1e-6)
        self.assertLess(root.iterations, 10)

    def test_sqrt2(self):
        root = newton_raphson(lambda x: x*x - 2, lambda x: 2*x, 1.0, eps=1e-14)
        self.assertTrue(root.converged)
        self.assertAlmostEqual(root.x, math.sqrt(2), delta=1e-15)

    def test_singular_derivative(self):
        root = newton_raphson(lambda x: x*x - 1, lambda x: 2*x, 0.0)
        self.assertFalse(root.converged)
        self.assertIs(root.status, RootStatus.SINGULAR_DERIVATIVE)
        self.assertEqual(root.x, 0.0)
        self.assertEqual(root.iterations, 0)
        root = newton_raphson(lambda x: x*x - 1, lambda x: 2*x, 1e-13)
        self.assertIs(root.status, RootStatus.SINGULAR_DERIVATIVE)
        root = newton_raphson(lambda x: x*x - 1, lambda x: 2*x, 1e-13,
                              singular_threshold=1e-15)
        self.assertTrue(root.converged)

    def test_no_convergence(self):
        # x^2 + 1 has no real roots, every step has length >= 1
        root = newton_raphson(lambda x: x*x + 1, lambda x: 2*x, 0.5,
                              max_iter=20)
        self.assertIs(root.status, RootStatus.NO_CONVERGENCE)
        self.assertEqual(root.iterations, 20)
        x, iterations, converged = root
        self.assertFalse(converged)
        self.assertEqual(iterations, 20)
        root = newton_raphson(lambda x: x*x + 1, lambda x: 2*x, 0.5,
                              config=Settings(max_iterations=5))
        self.assertEqual(root.iterations, 5)

    def test_domain_error(self):
        root = newton_raphson(lambda x: float('nan'), lambda x: 1.0, 0.5)
        self.assertIs(root.status, RootStatus.DOMAIN_ERROR)
        self.assertEqual(root.x, 0.5)


class TestDistinctRoots(NumTestCase):
    def test_circle_tan(self):
        guesses = [-1.2, -0.6, 0.0, 0.6, 1.2]
        accept = lambda x: abs(circle_tan(x)) < 1e-6
        roots = find_distinct_roots(circle_tan, circle_tan_deriv, guesses,
                                    eps=1e-6, max_iter=100, accept=accept)
        self.assertEqual(len(roots), 2)
        xs = sorted(r.x for r in roots)
        self.assertLess(xs[0], 0)
        self.assertGreater(xs[1], 0)
        self.assertAlmostEqual(xs[0], -xs[1], delta=1e-8)
        for x in xs:
            self.assertLess(abs(x**2 + math.tan(x)**2 - 1), 1e-6)

    def test_first_found_wins(self):
        f = lambda x: x*x - 1
        df = lambda x: 2*x
        roots = find_distinct_roots(f, df, [3.0, 2.0, -0.5], eps=1e-12)
        self.assertEqual(len(roots), 2)
        self.assertAlmostEqual(roots[0].x, 1.0, delta=1e-12)
        self.assertAlmostEqual(roots[1].x, -1.0, delta=1e-12)
        # found from 3.0, so the iteration count is that of the first search
        self.assertEqual(roots[0].iterations,
                         newton_raphson(f, df, 3.0, eps=1e-12).iterations)

    def test_separation(self):
        f = lambda x: (x - 0.5) * (x - 0.55)
        df = lambda x: 2*x - 1.05
        roots = find_distinct_roots(f, df, [0.0, 1.0], eps=1e-12)
        self.assertEqual(len(roots), 1)
        roots = find_distinct_roots(f, df, [0.0, 1.0], eps=1e-12,
                                    min_separation=0.01)
        self.assertEqual(len(roots), 2)

    def test_skips_failures(self):
        roots = find_distinct_roots(lambda x: x*x - 1, lambda x: 2*x, [0.0])
        self.assertEqual(roots, [])


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
