#!/usr/bin/env python3

import unittest
import sys
import warnings

import numpy as np
from scipy.integrate import IntegrationWarning

from testutils import NumTestCase
from .numutils import NumericalError, InvalidInputError
from .numutils import isfinite, check_positive_int
from .numutils import raise_all_warnings, try_quad_tolerances
from .numutils import IntegrationResult
from .config import Settings, default_settings
from .series import SeriesKind


class TestNumutils(NumTestCase):
    def test_exceptions(self):
        self.assertTrue(issubclass(InvalidInputError, NumericalError))
        self.assertTrue(issubclass(InvalidInputError, ValueError))

    def test_isfinite(self):
        self.assertTrue(isfinite(1.5))
        self.assertTrue(isfinite(np.float64(-3)))
        self.assertFalse(isfinite(float('nan')))
        self.assertFalse(isfinite(float('-inf')))
        self.assertFalse(isfinite(None))
        self.assertFalse(isfinite("1.0"))

    def test_check_positive_int(self):
        self.assertEqual(check_positive_int(3, "n"), 3)
        self.assertEqual(check_positive_int(4.0, "n"), 4)
        self.assertIsType(check_positive_int(np.int64(5), "n"), int)
        for value in (0, -2, 2.5, True, None, "x"):
            with self.assertRaises(InvalidInputError):
                check_positive_int(value, "n")

    def test_raise_all_warnings(self):
        with raise_all_warnings():
            with self.assertRaises(FloatingPointError):
                np.array([1.0]) / np.array([0.0])
            with self.assertRaises(IntegrationWarning):
                warnings.warn("fail", IntegrationWarning)

    def test_try_quad_tolerances(self):
        tried = []
        def func(tol):
            tried.append(tol)
            if tol < 5e-7:
                warnings.warn("tolerance too small", IntegrationWarning)
            return IntegrationResult(1.0, tol, tol=tol)
        res = try_quad_tolerances(func, tol_min=1e-8, tol_max=1e-4)
        self.assertListAlmostEqual(tried, [1e-8, 1e-7, 1e-6], delta=1e-20)
        self.assertAlmostEqual(res.tol, 1e-6, delta=1e-20)
        self.assertIn("tol=", repr(res))
        tried.clear()
        with self.assertRaises(IntegrationWarning):
            try_quad_tolerances(func, tol_min=1e-10, tol_max=1e-8)
        self.assertEqual(len(tried), 3)
        with self.assertRaises(ValueError):
            try_quad_tolerances(func, tol_min=1e-2, tol_max=1e-4)


class TestConfig(NumTestCase):
    def test_defaults(self):
        cfg = default_settings()
        self.assertEqual(cfg.target_error, 1e-3)
        self.assertEqual(cfg.max_iterations, 1000)
        self.assertEqual(cfg.term_cap(SeriesKind.SIN), 50)
        self.assertEqual(cfg.term_cap("exp"), 40)
        self.assertEqual(cfg.singular_threshold, 1e-12)
        self.assertEqual(cfg.root_separation, 0.1)
        self.assertIsNot(cfg, default_settings())
        self.assertIs(cfg.validate(), cfg)
        self.assertIn("max_iterations=1000", repr(cfg))

    def test_slots(self):
        cfg = Settings()
        with self.assertRaises(AttributeError):
            cfg.max_iteration = 5

    def test_validate(self):
        with self.assertRaises(InvalidInputError):
            Settings(max_iterations=0).validate()
        with self.assertRaises(InvalidInputError):
            Settings(target_error=-1e-3).validate()
        with self.assertRaises(InvalidInputError):
            Settings(sin_term_cap=2.5).validate()


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
