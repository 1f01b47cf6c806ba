"""
Cash-flow integrands and actuarial factors.

- assurance_integrand / annuity_integrand: closures fed to the integrator
- assurance_factor / annuity_factor / annuity_in_factor: the integrals
"""

from .integrands import (
    CashflowFactors,
    annuity_factor,
    annuity_in_factor,
    annuity_integrand,
    assurance_factor,
    assurance_integrand,
    cashflow_factors,
)

__all__ = [
    "CashflowFactors",
    "assurance_integrand",
    "annuity_integrand",
    "assurance_factor",
    "annuity_factor",
    "annuity_in_factor",
    "cashflow_factors",
]
