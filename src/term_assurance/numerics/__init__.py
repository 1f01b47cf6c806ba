"""
Numerical quadrature used by the cash-flow integrals.
"""

from .simpson import (
    DEFAULT_SUBDIVISIONS,
    Integrand,
    simpson_integrate,
    simpson_weights,
    validate_subdivisions,
)

__all__ = [
    "DEFAULT_SUBDIVISIONS",
    "Integrand",
    "simpson_integrate",
    "simpson_weights",
    "validate_subdivisions",
]
