r"""@package numlab

Small numerical-analysis toolkit.

The package collects a few self-contained classical algorithms:
    * truncated Maclaurin series for \f$ \sin \f$ and \f$ \exp \f$ together
      with argument reduction (numlab.series)
    * fixed-point and Newton-Raphson root finding (numlab.roots)
    * Newton divided-difference and linear-spline interpolation
      (numlab.interp)
    * composite Newton-Cotes and Gauss-Legendre quadrature with Runge-rule
      error estimates (numlab.quadrature)

The driver programs in numlab.programs combine these with the flat text
output of numlab.sink to reproduce the individual numerical experiments.
"""

__version__ = "0.1.0"
