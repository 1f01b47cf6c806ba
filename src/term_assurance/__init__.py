"""
term-assurance-valuation: Premiums and reserves for level-premium term assurance.

Gompertz-Makeham mortality, composite-Simpson cash-flow integrals,
equivalence-principle premiums and prospective reserves.

Quick Start
-----------
>>> from datetime import date
>>> from term_assurance import PremiumCalculator, Policy, ValuationService
>>> quote = PremiumCalculator().quote(age=45, coverage=500_000, smoker=False)
>>> policy = Policy("POL-8821", issue_age=45, sum_insured=500_000,
...                 inception_date=date(2020, 5, 15))
>>> projection = ValuationService().project(policy)

Version: 0.1.0
"""

__version__ = "0.1.0"

# =============================================================================
# Configuration
# =============================================================================
from term_assurance.config.settings import (
    SETTINGS,
    ActuarialAssumptions,
    ExpenseLoadings,
    NumericsConfig,
    RiskLoadings,
    Settings,
)

# =============================================================================
# Errors
# =============================================================================
from term_assurance.errors import InvalidArgumentError, UndefinedQuantityError

# =============================================================================
# Engine
# =============================================================================
from term_assurance.mortality.makeham import MakehamMortality
from term_assurance.numerics.simpson import simpson_integrate
from term_assurance.cashflows.integrands import (
    annuity_factor,
    annuity_in_factor,
    assurance_factor,
)

# =============================================================================
# Products
# =============================================================================
from term_assurance.data.schemas import Policy, PolicyStatus
from term_assurance.products.premium import (
    HistoryCategory,
    PremiumCalculator,
    Quote,
    RiskCategory,
    gross_quote,
    net_premium,
)

# =============================================================================
# Valuation
# =============================================================================
from term_assurance.valuation.reserve import ProjectionRow, ReserveEngine
from term_assurance.valuation.portfolio import (
    PolicyProjection,
    PortfolioValuation,
    PortfolioValuationEntry,
    ValuationService,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "SETTINGS",
    "Settings",
    "ActuarialAssumptions",
    "ExpenseLoadings",
    "RiskLoadings",
    "NumericsConfig",
    # Errors
    "InvalidArgumentError",
    "UndefinedQuantityError",
    # Engine
    "MakehamMortality",
    "simpson_integrate",
    "assurance_factor",
    "annuity_factor",
    "annuity_in_factor",
    # Products
    "Policy",
    "PolicyStatus",
    "HistoryCategory",
    "RiskCategory",
    "Quote",
    "PremiumCalculator",
    "net_premium",
    "gross_quote",
    # Valuation
    "ReserveEngine",
    "ProjectionRow",
    "ValuationService",
    "PolicyProjection",
    "PortfolioValuation",
    "PortfolioValuationEntry",
]
