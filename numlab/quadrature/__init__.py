r"""@package numlab.quadrature

Numerical integration: composite Newton-Cotes rules, Gauss-Legendre rules,
Runge error estimates and SciPy based reference values.
"""

from .rules import (QuadratureEstimate, midpoint, trapezoid, simpson,
                    three_eighths)
from .gauss import GAUSS_LEGENDRE, gauss_legendre, gauss2, gauss3, gauss4
from .suite import RULES, COMPOSITE_RULES, get_rule, integrate
from .runge import runge_error_estimate, ConvergenceRow, convergence_table
from .reference import reference_integral
