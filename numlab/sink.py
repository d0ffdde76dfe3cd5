r"""@package numlab.sink

Plain text output of computed results.

A ResultsSink writes a human readable report consisting of headers, labeled
values and tab separated tables, which can also be read by plotting tools.
Numbers are formatted with printf-style format strings. The common ones are
available as module constants.

@b Examples

```
    with ResultsSink("results/series.txt") as sink:
        sink.header("MACLAURIN SERIES")
        sink.record("n_optimal", 3, fmt=INTEGER)
        sink.columns(["t", "sin(t)"])
        sink.row(0.5, math.sin(0.5))
```
"""

import io
import os
import os.path as op

from .utils import isiterable


__all__ = [
    "FIXED6",
    "FIXED8",
    "FIXED10",
    "SCIENTIFIC",
    "INTEGER",
    "ResultsSink",
]


## Six decimal places.
FIXED6 = "%.6f"
## Eight decimal places.
FIXED8 = "%.8f"
## Ten decimal places, used for series values.
FIXED10 = "%.10f"
## Scientific notation, used for integration comparisons.
SCIENTIFIC = "%.6e"
## Integer notation (values are rounded).
INTEGER = "%.0f"


class ResultsSink():
    r"""Append-only writer of a plain text results report.

    The sink may either write to a file given by its path or to an already
    open text stream (e.g. `sys.stdout` or an `io.StringIO`). Only streams
    opened by the sink itself are closed by close().
    """

    def __init__(self, target, fmt=FIXED10, sep="\t", append=False):
        r"""Create a sink.

        @param target
            File name or text stream. Missing parent directories of a file
            name are created.
        @param fmt
            Default format for numbers. Default is FIXED10.
        @param sep
            Column separator of tables. Default is a tab.
        @param append
            Whether to append to an existing file instead of truncating it.
        """
        if isinstance(target, (str, os.PathLike)):
            path = os.fspath(target)
            parent = op.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self._stream = open(path, "a" if append else "w", encoding="utf-8")
            self._owned = True
            self.path = path
        else:
            self._stream = target
            self._owned = False
            self.path = None
        self.fmt = fmt
        self.sep = sep

    @classmethod
    def in_memory(cls, **kw):
        r"""Create a sink writing into a string buffer (see getvalue())."""
        return cls(io.StringIO(), **kw)

    def getvalue(self):
        r"""Return the text written so far (in-memory sinks only)."""
        return self._stream.getvalue()

    @property
    def closed(self):
        r"""Whether the underlying stream is closed."""
        return self._stream.closed

    def close(self):
        r"""Close the underlying file if it was opened by this sink."""
        if self._owned and not self._stream.closed:
            self._stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _write(self, text):
        self._stream.write(text)

    def format_value(self, value, fmt=None):
        r"""Format a single value.

        Numbers use `fmt` (or the default format of the sink), `None` is
        written as ``-`` and everything else is converted using `str()`.
        """
        if value is None:
            return "-"
        if isinstance(value, str):
            return value
        if fmt is None:
            fmt = self.fmt
        try:
            return fmt % value
        except TypeError:
            return str(value)

    def header(self, title, underline="="):
        r"""Write a title followed by an underline of the same length."""
        self._write("%s\n%s\n" % (title, underline * len(title)))

    def section(self, title):
        r"""Write a section title preceded by an empty line."""
        self._write("\n%s:\n" % title)

    def text(self, line):
        r"""Write a line of text as is."""
        self._write("%s\n" % line)

    def record(self, label, value, fmt=None, unit=None):
        r"""Write a line ``label = value [unit]``."""
        line = "%s = %s" % (label, self.format_value(value, fmt))
        if unit:
            line += " " + unit
        self._write(line + "\n")

    def columns(self, names):
        r"""Write the column names of a table."""
        if isinstance(names, str):
            names = [names]
        self._write(self.sep.join(names) + "\n")

    def row(self, *values, fmt=None):
        r"""Write one row of a table.

        The values may also be given as a single iterable. The `fmt` argument
        may be a single format or a sequence with one format per column.
        """
        if (len(values) == 1 and not isinstance(values[0], str)
                and isiterable(values[0])):
            values = tuple(values[0])
        if fmt is None or isinstance(fmt, str):
            fmts = [fmt] * len(values)
        else:
            fmts = list(fmt)
            if len(fmts) != len(values):
                raise ValueError("Got %d formats for %d values"
                                 % (len(fmts), len(values)))
        self._write(self.sep.join(self.format_value(v, f)
                                  for v, f in zip(values, fmts)) + "\n")

    def blank(self):
        r"""Write an empty line."""
        self._write("\n")
