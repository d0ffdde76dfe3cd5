r"""@package numlab.programs.circle_tan

Intersections of the unit circle with the graph of the tangent.

A point `(x, tan(x))` lies on the unit circle iff
\f$ F(x) = x^2 + \tan^2 x - 1 = 0 \f$. The roots of `F` are searched with
Newton's method from several initial guesses.
"""

import math

from ..config import default_settings
from ..roots import find_distinct_roots
from ..sink import FIXED8
from ..utils import step_grid


__all__ = [
    "GUESSES",
    "circle_tan",
    "circle_tan_derivative",
    "run",
]


## Initial guesses of the root search.
GUESSES = (-1.2, -0.6, 0.0, 0.6, 1.2)


def circle_tan(x):
    r"""The function \f$ F(x) = x^2 + \tan^2 x - 1 \f$."""
    return x**2 + math.tan(x)**2 - 1


def circle_tan_derivative(x):
    return 2*x + 2*math.tan(x)/math.cos(x)**2


def _plot_row(x):
    circle = math.sqrt(1 - x*x) if abs(x) <= 1.0 else None
    tan = math.tan(x) if abs(math.cos(x)) >= 1e-10 else None
    return (x, circle, None if circle is None else -circle, tan)


def run(sink, verbose=False, config=None, eps=1e-6, max_iter=100,
        plot_points=1000):
    r"""Find the intersections and write the report to `sink`.

    A root is only accepted if its residual is below `eps`, i.e. if the point
    actually lies on the circle.

    @return Dictionary with the list of ``roots`` (`x` values) and
        ``points`` (`(x, y)` pairs), both ordered as found.
    """
    cfg = default_settings() if config is None else config.validate()
    sink.header("INTERSECTIONS OF x^2 + y^2 = 1 AND y = tan(x)")
    sink.section("PLOT DATA")
    sink.columns(["x", "circle_upper", "circle_lower", "tan"])
    for x in step_grid(-2.0, 2.0, 4.0 / plot_points):
        sink.row(_plot_row(float(x)), fmt=FIXED8)
    roots = find_distinct_roots(
        circle_tan, circle_tan_derivative, GUESSES, eps=eps,
        max_iter=max_iter, accept=lambda x: abs(circle_tan(x)) < eps,
        min_separation=cfg.root_separation, config=cfg, verbose=verbose,
    )
    points = [(r.x, math.tan(r.x)) for r in roots]
    sink.section("ROOTS")
    for i, (root, (x, y)) in enumerate(zip(roots, points)):
        sink.record("root %d" % (i+1), "(%s, %s)" % (FIXED8 % x, FIXED8 % y))
        sink.record("x^2 + y^2", x*x + y*y, fmt=FIXED8)
        sink.record("iterations", root.iterations, fmt="%d")
        if verbose:
            print("root %d: x = %.8f, y = %.8f" % (i+1, x, y))
    return dict(roots=[r.x for r in roots], points=points)
