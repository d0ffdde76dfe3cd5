r"""@package numlab.interp

Interpolation and extrapolation of tabulated data.

Two independent methods are available: the Newton form of the interpolating
polynomial (newton) and linear splines (spline). Both require strictly
increasing nodes, which is checked by samples.check_samples().
"""

from .samples import Sample, check_samples
from .newton import DividedDifferenceTable, NewtonPolynomial
from .newton import build_divided_differences, evaluate_newton
from .spline import LinearSpline, evaluate_linear_spline
