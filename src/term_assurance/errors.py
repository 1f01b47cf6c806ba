"""
Error taxonomy for the valuation engine.

Two failure kinds are surfaced to callers:

- InvalidArgumentError: an input violates a documented precondition
  (negative age, non-positive coverage or term, odd subdivision count, ...)
- UndefinedQuantityError: a quantity the calculation must divide by
  (the annuity factor) is zero or numerically negligible

Matured policies and over-age quotes are NOT errors: they resolve to a zero
reserve and a declined quote respectively.
"""

import math


class InvalidArgumentError(ValueError):
    """Raised when an input violates a documented precondition."""

    pass


class UndefinedQuantityError(ZeroDivisionError):
    """Raised when a required divisor is zero or numerically negligible."""

    pass


def require_finite(name: str, value: float) -> float:
    """
    Return ``value`` as float, raising if it is NaN or infinite.

    Raises
    ------
    InvalidArgumentError
        If value is not a finite real number
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(
            f"CRITICAL: {name} must be a real number, got {value!r}"
        ) from e
    if not math.isfinite(number):
        raise InvalidArgumentError(f"CRITICAL: {name} must be finite, got {value}")
    return number


def validate_policy_terms(age: float, coverage: float, term: float) -> None:
    """
    Validate the attributes every premium and reserve calculation relies on.

    Parameters
    ----------
    age : float
        Age at issue (years), must be >= 0
    coverage : float
        Sum insured, must be > 0
    term : float
        Policy term (years), must be > 0

    Raises
    ------
    InvalidArgumentError
        If any attribute is non-finite or out of range
    """
    if require_finite("age", age) < 0:
        raise InvalidArgumentError(f"CRITICAL: age must be >= 0, got {age}")
    if require_finite("coverage", coverage) <= 0:
        raise InvalidArgumentError(f"CRITICAL: coverage must be > 0, got {coverage}")
    if require_finite("term", term) <= 0:
        raise InvalidArgumentError(f"CRITICAL: term must be > 0, got {term}")
