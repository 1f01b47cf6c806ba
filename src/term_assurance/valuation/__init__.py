"""
Valuation module for term assurance.

[T2] Prospective net-premium reserves, year-by-year projections and
portfolio snapshots.
"""

from .portfolio import (
    PolicyProjection,
    PortfolioValuation,
    PortfolioValuationEntry,
    ValuationService,
    elapsed_policy_years,
)
from .reserve import ProjectionRow, ReserveEngine

__all__ = [
    # Reserve
    "ReserveEngine",
    "ProjectionRow",
    # Service
    "ValuationService",
    "PolicyProjection",
    "PortfolioValuation",
    "PortfolioValuationEntry",
    "elapsed_policy_years",
]
