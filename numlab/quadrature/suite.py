r"""@package numlab.quadrature.suite

Registry of all quadrature rules for dispatching by name.
"""

from types import MappingProxyType

from ..numutils import InvalidInputError
from .gauss import gauss2, gauss3, gauss4
from .rules import midpoint, simpson, three_eighths, trapezoid


__all__ = [
    "RULES",
    "COMPOSITE_RULES",
    "get_rule",
    "integrate",
]


## Composite rules taking the number of subintervals `n`.
COMPOSITE_RULES = MappingProxyType({
    "midpoint": midpoint,
    "trapezoid": trapezoid,
    "simpson": simpson,
    "three_eighths": three_eighths,
})

## All rules by name, in the order they are usually reported.
RULES = MappingProxyType(dict(
    list(COMPOSITE_RULES.items())
    + [("gauss2", gauss2), ("gauss3", gauss3), ("gauss4", gauss4)]
))


def get_rule(name):
    r"""Return the rule registered under `name`.

    @raise InvalidInputError for unknown names.
    """
    try:
        return RULES[name]
    except KeyError:
        raise InvalidInputError("Unknown quadrature rule %r. Valid rules: %s"
                                % (name, ", ".join(RULES)))


def integrate(rule, f, a, b, n=None):
    r"""Integrate `f` over `[a, b]` with the rule called `rule`.

    @param rule
        Name of the rule, one of the keys of RULES.
    @param f,a,b
        Integrand and limits.
    @param n
        Number of subintervals. Required for composite rules and ignored
        by the Gauss rules, which have a fixed number of nodes.

    @return rules.QuadratureEstimate
    """
    func = get_rule(rule)
    if rule in COMPOSITE_RULES:
        if n is None:
            raise InvalidInputError("Rule %r needs the number of "
                                    "subintervals n." % rule)
        return func(f, a, b, n)
    return func(f, a, b)
