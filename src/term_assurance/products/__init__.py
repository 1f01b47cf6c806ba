"""
Product pricing for level-premium term assurance.

Provides:
- net_premium: equivalence-principle premium used for reserving
- gross_quote / PremiumCalculator: underwriting quote with loadings
"""

from term_assurance.products.premium import (
    HistoryCategory,
    PremiumCalculator,
    Quote,
    RiskCategory,
    gross_quote,
    is_insurable,
    loading_multiplier,
    net_premium,
    risk_category,
)

__all__ = [
    "HistoryCategory",
    "RiskCategory",
    "Quote",
    "PremiumCalculator",
    "net_premium",
    "gross_quote",
    "loading_multiplier",
    "risk_category",
    "is_insurable",
]
