r"""@package numlab.series

Truncated Maclaurin series with argument reduction.

The maclaurin module evaluates the partial sums for a given number of terms
and searches for the smallest number of terms reaching a target accuracy.
The reduction module maps large arguments into a small interval first so that
a fixed, small number of terms suffices for near machine precision results.
"""

from .maclaurin import SeriesKind, SeriesResult
from .maclaurin import evaluate, evaluate_series, find_optimal_term_count
from .reduction import reduced_sin, reduced_exp, reduce_angle
