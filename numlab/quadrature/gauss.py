r"""@package numlab.quadrature.gauss

Gauss-Legendre quadrature with a fixed number of nodes.

An `m`-point rule integrates polynomials up to degree `2m-1` exactly. The
nodes are the roots of the Legendre polynomial \f$ P_m \f$ on `[-1, 1]`.
For an interval `[a, b]` they are mapped affinely,
\f[
    \int_a^b f(x)\,dx \approx \frac{b-a}{2} \sum_{i=1}^m w_i\,
        f\Big(\frac{a+b}{2} + \frac{b-a}{2} \xi_i\Big).
\f]
"""

from math import fsum, sqrt
from types import MappingProxyType

import numpy as np

from ..numutils import InvalidInputError
from .rules import QuadratureEstimate, check_interval


__all__ = [
    "GAUSS_LEGENDRE",
    "gauss_legendre",
    "gauss2",
    "gauss3",
    "gauss4",
]


def _table(nodes, weights):
    nodes = np.array(nodes, dtype=float)
    weights = np.array(weights, dtype=float)
    nodes.setflags(write=False)
    weights.setflags(write=False)
    return nodes, weights


_S = sqrt(6.0 / 5.0)

## Read-only mapping from node count to `(nodes, weights)` on `[-1, 1]`.
GAUSS_LEGENDRE = MappingProxyType({
    2: _table([-1.0 / sqrt(3.0), 1.0 / sqrt(3.0)],
              [1.0, 1.0]),
    3: _table([-sqrt(3.0 / 5.0), 0.0, sqrt(3.0 / 5.0)],
              [5.0 / 9.0, 8.0 / 9.0, 5.0 / 9.0]),
    4: _table([-sqrt(3.0 / 7.0 + 2.0 / 7.0 * _S),
               -sqrt(3.0 / 7.0 - 2.0 / 7.0 * _S),
               sqrt(3.0 / 7.0 - 2.0 / 7.0 * _S),
               sqrt(3.0 / 7.0 + 2.0 / 7.0 * _S)],
              [(18.0 - sqrt(30.0)) / 36.0,
               (18.0 + sqrt(30.0)) / 36.0,
               (18.0 + sqrt(30.0)) / 36.0,
               (18.0 - sqrt(30.0)) / 36.0]),
})


def gauss_legendre(f, a, b, nodes=2):
    r"""Integrate `f` over `[a, b]` using an `nodes`-point Gauss rule.

    @param nodes
        Number of nodes, one of the keys of GAUSS_LEGENDRE (2, 3 or 4).

    @return QuadratureEstimate with `rule_order = 2*nodes` and `n = nodes`.
    """
    try:
        xi, w = GAUSS_LEGENDRE[nodes]
    except (KeyError, TypeError):
        raise InvalidInputError("No Gauss-Legendre table for %r nodes. "
                                "Available: %s"
                                % (nodes, sorted(GAUSS_LEGENDRE)))
    a, b = check_interval(a, b)
    scale = (b - a) / 2.0
    shift = (a + b) / 2.0
    total = fsum(float(wi) * f(shift + scale * float(x)) for x, wi in zip(xi, w))
    return QuadratureEstimate(total * scale, 2 * nodes, nodes)


def gauss2(f, a, b):
    r"""Two-point Gauss-Legendre rule (exact up to degree 3)."""
    return gauss_legendre(f, a, b, 2)


def gauss3(f, a, b):
    r"""Three-point Gauss-Legendre rule (exact up to degree 5)."""
    return gauss_legendre(f, a, b, 3)


def gauss4(f, a, b):
    r"""Four-point Gauss-Legendre rule (exact up to degree 7)."""
    return gauss_legendre(f, a, b, 4)
