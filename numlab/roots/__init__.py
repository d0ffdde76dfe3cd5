r"""@package numlab.roots

Root finders for scalar nonlinear equations.

All finders return a result.Root carrying the approximate root, the number of
iterations and a result.RootStatus. Failure to converge is therefore never
hidden behind a plausible looking number.
"""

from .result import Root, RootStatus
from .fixedpoint import fixed_point, fixed_point_left, fixed_point_right
from .fixedpoint import left_branch_update, right_branch_update
from .fixedpoint import half_height_width, full_width_half_maximum, peak_profile
from .newton import newton_raphson, find_distinct_roots
