r"""Command line entry point.

Usage:

    python -m numlab.programs <name> [output-file] [-v|--verbose]

Without output file, the report is written to `data/<name>.txt`. Use `-` to
write it to standard output.
"""

import logging
import os.path as op
import sys

from ..sink import ResultsSink
from ..utils import print_indented, timethis
from . import PROGRAMS


class Main():
    def __init__(self, *args):
        self.args = list(args)

    def pop_flag(self, *flags):
        found = False
        for flag in flags:
            while flag in self.args:
                self.args.remove(flag)
                found = True
        return found

    def usage(self):
        return "Usage: python -m numlab.programs {%s} [output-file] [-v]" % (
            "|".join(PROGRAMS)
        )

    def main(self):
        logging.basicConfig(format="%(levelname)s: %(message)s")
        verbose = self.pop_flag('-v', '--verbose')
        if verbose:
            logging.getLogger().setLevel(logging.INFO)
        if not self.args or self.args[0] in ('-h', '--help'):
            print(self.usage())
            return 0 if self.args else 2
        name = self.args.pop(0)
        if name not in PROGRAMS:
            logging.error("Unknown program %r.", name)
            print(self.usage(), file=sys.stderr)
            return 2
        if len(self.args) > 1:
            logging.error("Unexpected arguments: %s", " ".join(self.args[1:]))
            return 2
        target = self.args[0] if self.args else op.join("data", name + ".txt")
        if target == '-':
            target = sys.stdout
        logging.info("Running %s, writing to %s", name,
                     "stdout" if target is sys.stdout else target)
        with timethis(silent=not verbose):
            with ResultsSink(target) as sink:
                result = PROGRAMS[name](sink, verbose=verbose)
        if verbose:
            print_indented("result = ", "\n".join(
                "%s: %s" % (k, v) for k, v in result.items()
            ))
        return 0


if __name__ == '__main__':
    sys.exit(Main(*sys.argv[1:]).main())
