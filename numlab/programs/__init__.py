r"""@package numlab.programs

Driver programs producing the plain text reports.

Each module exposes a function `run(sink, verbose=False, config=None)`
writing its report to a sink.ResultsSink and returning the computed numbers
as a dictionary. Use `python -m numlab.programs <name> [output-file] [-v]`
to run one of them from the command line.
"""

from . import circle_tan, fwhm, maclaurin, oscillatory, population


__all__ = [
    "PROGRAMS",
]


## Available programs by name.
PROGRAMS = {
    "maclaurin": maclaurin.run,
    "fwhm": fwhm.run,
    "circle_tan": circle_tan.run,
    "population": population.run,
    "oscillatory": oscillatory.run,
}
