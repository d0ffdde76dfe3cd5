r"""@package numlab.quadrature.reference

High accuracy reference values computed with SciPy's adaptive QUADPACK
wrappers.

These are used to judge the results of the simple rules. The tolerance is
increased step by step until SciPy stops complaining (see
numutils.try_quad_tolerances()).
"""

from scipy.integrate import quad

from ..numutils import IntegrationResult, try_quad_tolerances
from .rules import check_interval


__all__ = [
    "reference_integral",
]


def reference_integral(f, a, b, weight=None, wvar=None, limit=200,
                       tol_min=1e-13, tol_max=1e-6, verbose=False):
    r"""Integrate `f` over `[a, b]` using `scipy.integrate.quad()`.

    @param f
        Integrand. If `weight` is given, the integral of `f(x)*w(x)` is
        computed, where `w` is the QUADPACK weight function.
    @param a,b
        Finite integration limits.
    @param weight,wvar
        Optional weight specification passed to `quad()`. For example,
        ``weight='sin', wvar=100`` uses \f$ w(x) = \sin(100 x) \f$ and an
        algorithm designed for oscillatory weights.
    @param limit
        Upper bound on the number of subintervals of the adaptive algorithm.
    @param tol_min,tol_max
        Range of absolute and relative tolerances to try.
    @param verbose
        Print the tolerances as they are tried.

    @return numutils.IntegrationResult
    """
    a, b = check_interval(a, b)
    def _integrate(tol):
        kw = dict(epsabs=tol, epsrel=tol, limit=limit)
        if weight is not None:
            kw.update(weight=weight, wvar=wvar)
        value, error = quad(f, a, b, **kw)
        return IntegrationResult(value, error, tol=tol)
    return try_quad_tolerances(_integrate, tol_min=tol_min, tol_max=tol_max,
                               verbose=verbose)
