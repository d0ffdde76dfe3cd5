r"""@package numlab.programs.fwhm

Full width at half maximum of \f$ f(x) = x e^{-x^2} \f$ via fixed-point
iteration.
"""

from ..roots import full_width_half_maximum, peak_profile
from ..sink import FIXED6, INTEGER
from ..utils import step_grid


__all__ = [
    "run",
]


def run(sink, verbose=False, config=None, eps=1e-3, plot_step=0.01):
    r"""Compute the half-height points and write the report to `sink`.

    @return Dictionary with the peak data, both half-height points, their
        iteration counts, the width and whether both searches converged.
    """
    if config is not None:
        config.validate()
    res = full_width_half_maximum(eps=eps, config=config, verbose=verbose)
    left, right = res.left, res.right
    f_max = peak_profile(res.peak)
    sink.header("FULL WIDTH AT HALF MAXIMUM")
    sink.text("f(x) = x * exp(-x^2), x >= 0")
    sink.section("PEAK")
    sink.record("x_max", res.peak, fmt=FIXED6)
    sink.record("f_max", f_max, fmt=FIXED6)
    sink.record("half height", res.target, fmt=FIXED6)
    sink.section("HALF HEIGHT POINTS")
    for name, root in (("left", left), ("right", right)):
        sink.record("x_%s" % name, root.x, fmt=FIXED6)
        sink.record("f(x_%s)" % name, peak_profile(root.x), fmt=FIXED6)
        sink.record("iterations", root.iterations, fmt=INTEGER)
        sink.record("status", root.status.value)
    sink.section("RESULT")
    sink.record("FWHM", res.width, fmt=FIXED6)
    sink.section("PLOT DATA")
    sink.columns(["x", "f(x)"])
    for x in step_grid(0.0, 2.0, plot_step):
        sink.row(x, peak_profile(x), fmt=FIXED6)
    if verbose:
        print("FWHM = %.6f (left: %d, right: %d iterations)"
              % (res.width, left.iterations, right.iterations))
    return dict(
        x_peak=res.peak,
        f_max=f_max,
        target=res.target,
        x_left=left.x,
        x_right=right.x,
        left_iterations=left.iterations,
        right_iterations=right.iterations,
        width=res.width,
        converged=res.converged,
    )
