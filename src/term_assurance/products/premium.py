"""
Term-assurance premium calculator.

Applies the equivalence principle to the cash-flow factors:

[T1] Net premium:    P' = S·Ā / ā
[T1] Gross premium:  P  = (S·Ā + ā_in·E_rate + E_fixed) / ā × loading

The two are deliberately separate functions: reserves are always computed
with the net premium, loadings and expenses apply to new-business pricing
only.

See: Dickson, Hardy & Waters (2019) Ch. 6 (premium calculation)
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from term_assurance.cashflows.integrands import cashflow_factors
from term_assurance.config.settings import (
    SETTINGS,
    ActuarialAssumptions,
    RiskLoadings,
    Settings,
)
from term_assurance.config.tolerances import ANNUITY_FACTOR_FLOOR
from term_assurance.errors import (
    InvalidArgumentError,
    UndefinedQuantityError,
    validate_policy_terms,
)

logger = logging.getLogger(__name__)


class HistoryCategory(Enum):
    """Medical history disclosed at underwriting."""

    CLEAN = "clean"
    MINOR = "minor"
    MAJOR = "major"


class RiskCategory(Enum):
    """Underwriting risk class reported on the quote."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class Quote:
    """
    Immutable underwriting quote.

    Attributes
    ----------
    age : float
        Age at issue
    coverage : float
        Sum insured
    term : float
        Policy term in years
    assurance_factor : float
        EPV of a unit death benefit
    annuity_factor : float
        EPV of a unit continuous premium stream
    annuity_in_factor : float
        Annuity factor at the expense rate
    base_annual_premium : float
        Gross premium before risk loadings
    loading_multiplier : float
        Additive risk multiplier (1.0 = standard)
    annual_premium : float
        base_annual_premium × loading_multiplier
    monthly_premium : float
        annual_premium / 12
    risk_category : RiskCategory
        Low, Medium or High
    approved : bool
        age + term < omega; the issuing workflow gates on this
    """

    age: float
    coverage: float
    term: float
    assurance_factor: float
    annuity_factor: float
    annuity_in_factor: float
    base_annual_premium: float
    loading_multiplier: float
    annual_premium: float
    monthly_premium: float
    risk_category: RiskCategory
    approved: bool

    def to_dict(self) -> dict[str, Any]:
        """Display form: premiums to 2 d.p., factors to 5 d.p."""
        data = asdict(self)
        for key in ("base_annual_premium", "annual_premium", "monthly_premium"):
            data[key] = round(data[key], 2)
        for key in ("assurance_factor", "annuity_factor", "annuity_in_factor"):
            data[key] = round(data[key], 5)
        data["risk_category"] = self.risk_category.value
        return data


def _coerce_history(history: HistoryCategory | str) -> HistoryCategory:
    if isinstance(history, HistoryCategory):
        return history
    try:
        return HistoryCategory(str(history).lower())
    except ValueError as e:
        valid = ", ".join(h.value for h in HistoryCategory)
        raise InvalidArgumentError(
            f"CRITICAL: history must be one of {valid}, got {history!r}"
        ) from e


def loading_multiplier(
    smoker: bool,
    history: HistoryCategory | str = HistoryCategory.CLEAN,
    loadings: RiskLoadings = SETTINGS.loadings,
) -> float:
    """
    Additive risk loading multiplier.

    [T1] multiplier = 1.0 + smoker + minor + major (each flag's loading)

    Examples
    --------
    >>> loading_multiplier(True, "major")
    5.0
    >>> loading_multiplier(False, "minor")
    1.5
    """
    category = _coerce_history(history)
    multiplier = 1.0
    if smoker:
        multiplier += loadings.smoker
    if category is HistoryCategory.MINOR:
        multiplier += loadings.minor_history
    if category is HistoryCategory.MAJOR:
        multiplier += loadings.major_history
    return multiplier


def risk_category(
    smoker: bool,
    history: HistoryCategory | str = HistoryCategory.CLEAN,
) -> RiskCategory:
    """High for major history; Medium for smokers or minor history; else Low."""
    category = _coerce_history(history)
    if category is HistoryCategory.MAJOR:
        return RiskCategory.HIGH
    if smoker or category is HistoryCategory.MINOR:
        return RiskCategory.MEDIUM
    return RiskCategory.LOW


def is_insurable(
    age: float,
    term: float,
    assumptions: ActuarialAssumptions = SETTINGS.assumptions,
) -> bool:
    """Approval rule: cover must end before the limiting age."""
    return age + term < assumptions.omega


def _require_annuity(annuity: float, age: float, term: float) -> None:
    if not annuity > ANNUITY_FACTOR_FLOOR:
        raise UndefinedQuantityError(
            f"CRITICAL: annuity factor must be > {ANNUITY_FACTOR_FLOOR} to solve "
            f"for a premium, got {annuity} (age={age}, term={term})"
        )


def net_premium(
    age: float,
    coverage: float,
    term: float | None = None,
    settings: Settings = SETTINGS,
) -> float:
    """
    Annual net premium under the equivalence principle.

    [T1] P' = S·Ā¹_x:n / ā_x:n   (no expenses, no loadings)

    Parameters
    ----------
    age : float
        Age at issue
    coverage : float
        Sum insured
    term : float, optional
        Policy term; defaults to settings.assumptions.n
    settings : Settings
        Assumption set

    Returns
    -------
    float
        Net annual premium (continuous)

    Raises
    ------
    InvalidArgumentError
        If age < 0, coverage <= 0 or term <= 0
    UndefinedQuantityError
        If the annuity factor is numerically zero
    """
    term = settings.assumptions.n if term is None else term
    validate_policy_terms(age, coverage, term)

    factors = cashflow_factors(age, term, settings, include_expense_annuity=False)
    _require_annuity(factors.annuity, age, term)
    return coverage * factors.assurance / factors.annuity


def gross_quote(
    age: float,
    coverage: float,
    term: float | None = None,
    smoker: bool = False,
    history: HistoryCategory | str = HistoryCategory.CLEAN,
    settings: Settings = SETTINGS,
) -> Quote:
    """
    Full underwriting quote including expense and risk loadings.

    The quote is computed in full even when the risk is declined, so the
    caller can show why; issuance is gated on ``Quote.approved``.

    Parameters
    ----------
    age : float
        Age at issue
    coverage : float
        Sum insured
    term : float, optional
        Policy term; defaults to settings.assumptions.n
    smoker : bool
        Smoker status
    history : HistoryCategory or str
        "clean", "minor" or "major"
    settings : Settings
        Assumption set

    Returns
    -------
    Quote
        Factors, premiums, risk category and approval flag

    Raises
    ------
    InvalidArgumentError
        If age < 0, coverage <= 0, term <= 0 or history is unknown
    UndefinedQuantityError
        If the annuity factor is numerically zero

    Examples
    --------
    >>> quote = gross_quote(age=45, coverage=500_000, smoker=True)
    >>> quote.loading_multiplier
    2.5
    >>> quote.approved
    True
    """
    term = settings.assumptions.n if term is None else term
    validate_policy_terms(age, coverage, term)
    category = _coerce_history(history)

    factors = cashflow_factors(age, term, settings)
    _require_annuity(factors.annuity, age, term)

    expenses = settings.expenses
    outgo = (
        coverage * factors.assurance
        + factors.annuity_in * expenses.fixed_expense_rate
        + expenses.fixed_expense_amount
    )
    base_annual = outgo / factors.annuity
    multiplier = loading_multiplier(smoker, category, settings.loadings)
    annual = base_annual * multiplier

    return Quote(
        age=age,
        coverage=coverage,
        term=term,
        assurance_factor=factors.assurance,
        annuity_factor=factors.annuity,
        annuity_in_factor=factors.annuity_in,
        base_annual_premium=base_annual,
        loading_multiplier=multiplier,
        annual_premium=annual,
        monthly_premium=annual / 12,
        risk_category=risk_category(smoker, category),
        approved=is_insurable(age, term, settings.assumptions),
    )


class PremiumCalculator:
    """
    Underwriting entry point bound to one assumption set.

    Examples
    --------
    >>> calculator = PremiumCalculator()
    >>> quote = calculator.quote(age=45, coverage=500_000, history="minor")
    >>> quote.risk_category
    <RiskCategory.MEDIUM: 'Medium'>
    """

    def __init__(self, settings: Settings = SETTINGS):
        """
        Initialize calculator.

        Parameters
        ----------
        settings : Settings
            Assumption set used for every quote
        """
        self.settings = settings

    def net_premium(self, age: float, coverage: float, term: float | None = None) -> float:
        """Net premium; see :func:`net_premium`."""
        return net_premium(age, coverage, term, self.settings)

    def quote(
        self,
        age: float,
        coverage: float,
        term: float | None = None,
        smoker: bool = False,
        history: HistoryCategory | str = HistoryCategory.CLEAN,
    ) -> Quote:
        """Gross quote; see :func:`gross_quote`."""
        quote = gross_quote(age, coverage, term, smoker, history, self.settings)
        if quote.approved:
            logger.debug(
                f"Quoted age={age} term={quote.term} coverage={coverage:,.0f}: "
                f"annual={quote.annual_premium:,.2f} ({quote.risk_category.value})"
            )
        else:
            logger.warning(
                f"Declined: age {age} + term {quote.term} >= omega "
                f"{self.settings.assumptions.omega}"
            )
        return quote
