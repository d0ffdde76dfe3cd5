r"""@package numlab.roots.newton

Newton-Raphson root finding for scalar equations.

The iteration
\f[
    x_{n+1} = x_n - \frac{f(x_n)}{f'(x_n)}
\f]
converges quadratically close to a simple root. When the derivative
(nearly) vanishes, the step is undefined and the search stops with
RootStatus.SINGULAR_DERIVATIVE.

find_distinct_roots() runs the method from several initial guesses and
collects the distinct roots found.

@b Examples

```
    f = lambda x: x**2 + math.tan(x)**2 - 1
    df = lambda x: 2*x + 2*math.tan(x)/math.cos(x)**2
    root = newton_raphson(f, df, 0.6, eps=1e-6)
    roots = find_distinct_roots(f, df, [-1.2, -0.6, 0.0, 0.6, 1.2])
```
"""

from ..config import default_settings
from ..numutils import InvalidInputError, isfinite
from .result import Root, RootStatus


__all__ = [
    "newton_raphson",
    "find_distinct_roots",
]


def newton_raphson(f, df, x0, eps=1e-6, max_iter=None,
                   singular_threshold=None, config=None, verbose=False):
    r"""Find a root of `f` using Newton's method.

    @param f
        Function to find a root of.
    @param df
        Its first derivative.
    @param x0
        Initial guess.
    @param eps
        The search stops successfully when a step is smaller than this.
        Default is `1e-6`.
    @param max_iter
        Maximum number of steps. Default is taken from `config` (`1000`).
    @param singular_threshold
        If \f$ |f'(x)| \f$ drops below this, the search is aborted with
        RootStatus.SINGULAR_DERIVATIVE. Default is taken from `config`
        (`1e-12`).
    @param config
        config.Settings object supplying defaults.
    @param verbose
        Print each iterate.

    @return A root.Root. The `x` of unsuccessful searches is the last
        iterate for which `f` and `df` could be evaluated.
    """
    if config is None:
        config = default_settings()
    if max_iter is None:
        max_iter = config.max_iterations
    if singular_threshold is None:
        singular_threshold = config.singular_threshold
    if not eps > 0:
        raise InvalidInputError("eps must be positive, got %r" % (eps,))
    x = float(x0)
    for i in range(max_iter):
        fx = f(x)
        dfx = df(x)
        if not (isfinite(fx) and isfinite(dfx)):
            return Root(x, i, RootStatus.DOMAIN_ERROR)
        if abs(dfx) < singular_threshold:
            if verbose:
                print("  singular derivative f'(%s) = %s" % (x, dfx))
            return Root(x, i, RootStatus.SINGULAR_DERIVATIVE)
        x_new = x - fx / dfx
        if verbose:
            print("  iteration %d: x = %s" % (i+1, x_new))
        if not isfinite(x_new):
            return Root(x, i+1, RootStatus.DOMAIN_ERROR)
        if abs(x_new - x) < eps:
            return Root(x_new, i+1, RootStatus.CONVERGED)
        x = x_new
    return Root(x, max_iter, RootStatus.NO_CONVERGENCE)


def find_distinct_roots(f, df, guesses, eps=1e-6, max_iter=None,
                        accept=None, min_separation=None, config=None,
                        verbose=False):
    r"""Search roots starting from several initial guesses.

    Each guess is used for a newton_raphson() search. Only converged results
    are kept. Two roots closer than `min_separation` are considered the same
    root, in which case the one found first is kept.

    @param f,df
        Function and its derivative.
    @param guesses
        Iterable of initial guesses, processed in order.
    @param eps,max_iter
        Passed to newton_raphson().
    @param accept
        Optional callable taking a root location and returning whether it
        should be kept (e.g. a residual check of a system of equations).
    @param min_separation
        Roots closer than this are duplicates. Default is taken from `config`
        (`0.1`).
    @param config
        config.Settings object supplying defaults.
    @param verbose
        Print the outcome for each guess.

    @return List of converged root.Root objects in the order found.
    """
    if config is None:
        config = default_settings()
    if min_separation is None:
        min_separation = config.root_separation
    roots = []
    for guess in guesses:
        root = newton_raphson(f, df, guess, eps=eps, max_iter=max_iter,
                              config=config)
        if verbose:
            print("x0 = %s: %r" % (guess, root))
        if not root.converged:
            continue
        if accept is not None and not accept(root.x):
            continue
        if any(abs(root.x - r.x) < min_separation for r in roots):
            continue
        roots.append(root)
    return roots
