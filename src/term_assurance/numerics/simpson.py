"""
Composite Simpson quadrature.

Theory
------
[T1] ∫₀ᵁ f(t) dt ≈ (h/3) × Σ wₖ f(tₖ),  h = U/N,  tₖ = k·h

with weights 1 at both endpoints, 4 at odd k and 2 at even interior k.
The rule is exact for polynomials of degree <= 3.

Caller obligation: N (subdivisions) must be even and >= 2. An odd N would
misweight the last interval, so it is rejected with InvalidArgumentError
rather than rounded.
"""

import math
from typing import Callable

import numpy as np

from term_assurance.errors import (
    InvalidArgumentError,
    UndefinedQuantityError,
    require_finite,
)

#: Integrand signature: f(t, x) -> float, t = duration, x = age
Integrand = Callable[[float, float], float]

DEFAULT_SUBDIVISIONS = 100


def validate_subdivisions(subdivisions: int) -> int:
    """
    Check that a subdivision count is usable by the composite rule.

    Raises
    ------
    InvalidArgumentError
        If subdivisions is not an int, is odd, or is below 2
    """
    if isinstance(subdivisions, bool) or not isinstance(subdivisions, (int, np.integer)):
        raise InvalidArgumentError(
            f"CRITICAL: subdivisions must be an int, got {subdivisions!r}"
        )
    if subdivisions < 2 or subdivisions % 2:
        raise InvalidArgumentError(
            f"CRITICAL: subdivisions must be even and >= 2, got {subdivisions}"
        )
    return int(subdivisions)


def simpson_weights(subdivisions: int) -> np.ndarray:
    """
    Weight vector [1, 4, 2, 4, ..., 2, 4, 1] of length subdivisions + 1.

    Examples
    --------
    >>> simpson_weights(4)
    array([1., 4., 2., 4., 1.])
    """
    n = validate_subdivisions(subdivisions)
    weights = np.ones(n + 1)
    weights[1:-1:2] = 4.0
    weights[2:-1:2] = 2.0
    return weights


def simpson_integrate(
    func: Integrand,
    x: float,
    upper_bound: float,
    subdivisions: int = DEFAULT_SUBDIVISIONS,
) -> float:
    """
    Integrate func(t, x) over t in [0, upper_bound].

    Parameters
    ----------
    func : Integrand
        Called as func(t, x); may close over any further parameters
    x : float
        Passed through unchanged to func (typically the attained age)
    upper_bound : float
        Upper limit of integration (typically the remaining term)
    subdivisions : int, default 100
        Number of subintervals; must be even and >= 2

    Returns
    -------
    float
        Composite Simpson approximation. 0.0 when upper_bound <= 0
        (matured/expired), in which case func is never called.

    Raises
    ------
    InvalidArgumentError
        If upper_bound is not finite, or subdivisions is odd or < 2
    UndefinedQuantityError
        If the integrand evaluates to NaN somewhere on the grid

    Examples
    --------
    >>> simpson_integrate(lambda t, x: t ** 3, 0.0, 2.0, subdivisions=2)
    4.0
    """
    upper = require_finite("upper_bound", upper_bound)
    if upper <= 0:
        return 0.0

    weights = simpson_weights(subdivisions)
    n = len(weights) - 1
    nodes = np.linspace(0.0, upper, n + 1)
    values = np.fromiter((func(float(t), x) for t in nodes), dtype=float, count=n + 1)

    h = upper / n
    result = float(h / 3.0 * np.dot(weights, values))
    if math.isnan(result):
        raise UndefinedQuantityError(
            f"CRITICAL: integrand produced NaN on [0, {upper}] at x={x}"
        )
    return result
