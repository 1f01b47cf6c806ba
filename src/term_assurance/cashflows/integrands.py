"""
Cash-flow integrands and the actuarial factors built from them.

Theory
------
[T1] Ā¹_x:n = ∫₀ⁿ e^(-δt) · tpx · mu(x+t) dt    (term assurance factor)
[T1] ā_x:n  = ∫₀ⁿ e^(-δ't) · tpx dt             (continuous annuity factor)

The annuity integrand takes its own force of interest δ' so the same shape
serves the benefit side (δ = ln(1+i)) and the expense annuity
(δ_in = ln(1+i_in)).
"""

import math
from dataclasses import dataclass

from term_assurance.config.settings import SETTINGS, Settings
from term_assurance.mortality.makeham import MakehamMortality
from term_assurance.numerics.simpson import Integrand, simpson_integrate


@dataclass(frozen=True)
class CashflowFactors:
    """
    Expected present values per unit, for one (age, term) pair.

    Attributes
    ----------
    assurance : float
        EPV of a unit death benefit payable within the term
    annuity : float
        EPV of a unit continuous income while alive, at δ
    annuity_in : float
        Same annuity valued at the expense rate δ_in (0.0 if not computed)
    """

    assurance: float
    annuity: float
    annuity_in: float = 0.0


def assurance_integrand(mortality: MakehamMortality, delta: float) -> Integrand:
    """
    Discounted density of death at duration t: e^(-δt) · tpx · mu(x+t).

    Returns 0.0 wherever tpx is 0, so an overflowed mu never yields NaN.
    """

    def integrand(t: float, x: float) -> float:
        survival = mortality.tpx(x, t)
        if survival == 0:
            return 0.0
        return math.exp(-delta * t) * survival * mortality.force_of_mortality(x + t)

    return integrand


def annuity_integrand(mortality: MakehamMortality, delta: float) -> Integrand:
    """Discounted survival-weighted unit income at duration t: e^(-δ't) · tpx."""

    def integrand(t: float, x: float) -> float:
        return math.exp(-delta * t) * mortality.tpx(x, t)

    return integrand


def assurance_factor(age: float, term: float, settings: Settings = SETTINGS) -> float:
    """
    Term assurance factor over [0, term] at the base force of interest.

    Returns 0.0 for term <= 0.
    """
    mortality = MakehamMortality(settings.assumptions)
    return simpson_integrate(
        assurance_integrand(mortality, settings.assumptions.delta),
        age,
        term,
        settings.numerics.subdivisions,
    )


def annuity_factor(
    age: float,
    term: float,
    settings: Settings = SETTINGS,
    delta: float | None = None,
) -> float:
    """
    Continuous temporary annuity factor over [0, term].

    Parameters
    ----------
    age : float
        Attained age
    term : float
        Remaining term; 0.0 is returned for term <= 0
    settings : Settings
        Assumption set
    delta : float, optional
        Force of interest. Defaults to the base rate settings.assumptions.delta

    Returns
    -------
    float
        Annuity factor
    """
    mortality = MakehamMortality(settings.assumptions)
    rate = settings.assumptions.delta if delta is None else delta
    return simpson_integrate(
        annuity_integrand(mortality, rate),
        age,
        term,
        settings.numerics.subdivisions,
    )


def annuity_in_factor(age: float, term: float, settings: Settings = SETTINGS) -> float:
    """Expense annuity factor: the annuity valued at δ_in = ln(1 + i_in)."""
    return annuity_factor(age, term, settings, delta=settings.assumptions.delta_in)


def cashflow_factors(
    age: float,
    term: float,
    settings: Settings = SETTINGS,
    include_expense_annuity: bool = True,
) -> CashflowFactors:
    """
    Compute all factors needed to price or reserve one (age, term) pair.

    Parameters
    ----------
    age : float
        Attained age
    term : float
        Remaining term
    settings : Settings
        Assumption set
    include_expense_annuity : bool, default True
        Skip the annuity-in integral when only net quantities are needed

    Returns
    -------
    CashflowFactors
        Assurance, annuity and (optionally) annuity-in factors
    """
    return CashflowFactors(
        assurance=assurance_factor(age, term, settings),
        annuity=annuity_factor(age, term, settings),
        annuity_in=annuity_in_factor(age, term, settings) if include_expense_annuity else 0.0,
    )
