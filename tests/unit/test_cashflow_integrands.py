"""
Unit tests for cash-flow integrands and factors - cashflows/integrands.py.

[T1] Ā¹ = ∫ e^(-δt)·tpx·mu dt,  ā = ∫ e^(-δ't)·tpx dt
"""

import math
from dataclasses import replace

import pytest

from term_assurance.cashflows.integrands import (
    CashflowFactors,
    annuity_factor,
    annuity_in_factor,
    annuity_integrand,
    assurance_factor,
    assurance_integrand,
    cashflow_factors,
)
from term_assurance.config.settings import NumericsConfig, Settings
from term_assurance.mortality.makeham import MakehamMortality


class TestIntegrands:
    """Pointwise integrand values."""

    def test_assurance_integrand_at_zero(self, mortality: MakehamMortality) -> None:
        """At t = 0: tpx = 1, discount = 1, so the value is mu(x)."""
        f = assurance_integrand(mortality, 0.05)
        assert f(0.0, 45.0) == pytest.approx(mortality.force_of_mortality(45.0), rel=1e-15)

    def test_assurance_integrand_formula(self, mortality: MakehamMortality) -> None:
        delta = math.log(1.05)
        f = assurance_integrand(mortality, delta)
        expected = math.exp(-delta * 7) * mortality.tpx(45, 7) * mortality.force_of_mortality(52)
        assert f(7.0, 45.0) == pytest.approx(expected, rel=1e-15)

    def test_assurance_integrand_zero_when_no_survivors(self, mortality: MakehamMortality) -> None:
        """mu may overflow where tpx has underflowed; the product is 0, not NaN."""
        f = assurance_integrand(mortality, 0.05)
        assert f(5.0, 10_000.0) == 0.0

    def test_annuity_integrand_at_zero(self, mortality: MakehamMortality) -> None:
        assert annuity_integrand(mortality, 0.05)(0.0, 45.0) == 1.0

    def test_annuity_integrand_uses_given_delta(self, mortality: MakehamMortality) -> None:
        slow = annuity_integrand(mortality, 0.02)(10.0, 45.0)
        fast = annuity_integrand(mortality, 0.08)(10.0, 45.0)
        assert slow > fast


class TestFactors:
    """Integrated factors on the default basis."""

    def test_assurance_factor_small_positive(self, settings: Settings) -> None:
        value = assurance_factor(45, 15, settings)
        assert 0 < value < 0.05

    def test_annuity_below_certain_annuity(self, settings: Settings) -> None:
        """Mortality can only reduce the annuity below ā_n certain."""
        delta = settings.assumptions.delta
        certain = (1 - math.exp(-delta * 15)) / delta
        assert 0 < annuity_factor(45, 15, settings) < certain

    def test_annuity_in_exceeds_annuity(self, settings: Settings) -> None:
        """Lower expense interest rate means a larger annuity factor."""
        assert annuity_in_factor(45, 15, settings) > annuity_factor(45, 15, settings)

    def test_explicit_delta_matches_annuity_in(self, settings: Settings) -> None:
        explicit = annuity_factor(45, 15, settings, delta=settings.assumptions.delta_in)
        assert explicit == annuity_in_factor(45, 15, settings)

    @pytest.mark.parametrize("term", [0, -3])
    def test_factors_vanish_without_term(self, settings: Settings, term: float) -> None:
        assert assurance_factor(45, term, settings) == 0.0
        assert annuity_factor(45, term, settings) == 0.0

    def test_assurance_increases_with_age(self, settings: Settings) -> None:
        assert assurance_factor(60, 15, settings) > assurance_factor(30, 15, settings)

    def test_subdivisions_come_from_settings(self, settings: Settings) -> None:
        coarse = replace(settings, numerics=NumericsConfig(subdivisions=2))
        assert assurance_factor(45, 15, coarse) != assurance_factor(45, 15, settings)
        assert assurance_factor(45, 15, coarse) == pytest.approx(
            assurance_factor(45, 15, settings), rel=5e-2
        )


class TestCashflowFactors:
    """Bundled factors."""

    def test_bundle_matches_individual_factors(self, settings: Settings) -> None:
        factors = cashflow_factors(45, 15, settings)
        assert isinstance(factors, CashflowFactors)
        assert factors.assurance == assurance_factor(45, 15, settings)
        assert factors.annuity == annuity_factor(45, 15, settings)
        assert factors.annuity_in == annuity_in_factor(45, 15, settings)

    def test_expense_annuity_skipped(self, settings: Settings) -> None:
        factors = cashflow_factors(45, 15, settings, include_expense_annuity=False)
        assert factors.annuity_in == 0.0
        assert factors.annuity > 0
