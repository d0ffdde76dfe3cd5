r"""@package numlab.config

Tunable parameters shared by the algorithms and driver programs.

All algorithms take their parameters as explicit arguments. The values in
Settings merely supply the defaults used when an argument is omitted, so
that a driver can change e.g. the iteration cap in one place.

@b Examples

```
    cfg = default_settings()
    cfg.max_iterations = 200
    root = newton_raphson(f, df, 0.6, config=cfg)
```
"""

from .numutils import InvalidInputError, check_positive_int


__all__ = [
    "Settings",
    "default_settings",
]


class Settings():
    r"""Collection of default numerical parameters.

    Since the class uses ``__slots__``, misspelled attributes raise an
    `AttributeError` instead of being silently ignored.
    """

    __slots__ = ("target_error", "max_iterations", "sin_term_cap",
                 "exp_term_cap", "singular_threshold", "root_separation")

    def __init__(self, target_error=1e-3, max_iterations=1000,
                 sin_term_cap=50, exp_term_cap=40, singular_threshold=1e-12,
                 root_separation=0.1):
        r"""Create a settings object.

        @param target_error
            Absolute error targeted when searching for an optimal number of
            series terms. Default is `1e-3`.
        @param max_iterations
            Iteration cap of the root finders. Default is `1000`.
        @param sin_term_cap,exp_term_cap
            Largest term count tried by the term count search for the sine
            and exponential series, respectively. Defaults are `50` and `40`.
        @param singular_threshold
            Newton's method stops when the absolute derivative drops below
            this value. Default is `1e-12`.
        @param root_separation
            Two roots closer than this are considered identical when scanning
            multiple initial guesses. Default is `0.1`.
        """
        ## Target absolute error for the series term count search.
        self.target_error = target_error
        ## Maximum number of root finding iterations.
        self.max_iterations = max_iterations
        ## Maximum term count for the sine series search.
        self.sin_term_cap = sin_term_cap
        ## Maximum term count for the exponential series search.
        self.exp_term_cap = exp_term_cap
        ## Threshold below which a derivative is considered singular.
        self.singular_threshold = singular_threshold
        ## Minimal distance between two distinct roots.
        self.root_separation = root_separation

    def term_cap(self, kind):
        r"""Term count cap of the given series.SeriesKind."""
        from .series.maclaurin import SeriesKind
        kind = SeriesKind.parse(kind)
        if kind is SeriesKind.SIN:
            return self.sin_term_cap
        return self.exp_term_cap

    def validate(self):
        r"""Check all values for consistency and return `self`.

        @raise InvalidInputError for invalid values.
        """
        for name in ("target_error", "singular_threshold", "root_separation"):
            if not getattr(self, name) > 0:
                raise InvalidInputError("%s must be positive" % name)
        for name in ("max_iterations", "sin_term_cap", "exp_term_cap"):
            check_positive_int(getattr(self, name), name)
        return self

    def __repr__(self):
        return "Settings(%s)" % ", ".join(
            "%s=%r" % (name, getattr(self, name)) for name in self.__slots__
        )


def default_settings():
    r"""Return a fresh Settings object with the documented defaults."""
    return Settings()
