"""
End-to-end workflow: quote → issue → project → portfolio snapshot.

Mirrors how the engine is driven in production: underwriting produces a
quote, approved quotes become policies, and the in-force book is valued
at a reporting date.
"""

from dataclasses import replace
from datetime import date

import pytest

from term_assurance import (
    SETTINGS,
    ActuarialAssumptions,
    Policy,
    PolicyStatus,
    PremiumCalculator,
    Quote,
    ValuationService,
)

pytestmark = pytest.mark.integration

APPLICATIONS = [
    # (policy_id, age, coverage, smoker, history, inception)
    ("POL-8821", 45, 500_000, False, "clean", date(2020, 5, 15)),
    ("POL-9932", 32, 250_000, True, "minor", date(2022, 1, 10)),
    ("POL-7310", 58, 150_000, False, "major", date(2019, 9, 1)),
    ("POL-6645", 110, 100_000, False, "clean", date(2021, 2, 2)),
]


def _issue(policy_id: str, quote: Quote, inception: date) -> Policy:
    return Policy(
        policy_id=policy_id,
        issue_age=quote.age,
        sum_insured=quote.coverage,
        inception_date=inception,
        term=quote.term,
    )


class TestUnderwritingWorkflow:
    """Quotes gate issuance."""

    def test_only_approved_quotes_issued(self, calculator: PremiumCalculator) -> None:
        issued = []
        for policy_id, age, coverage, smoker, history, inception in APPLICATIONS:
            quote = calculator.quote(age, coverage, smoker=smoker, history=history)
            if quote.approved:
                issued.append(_issue(policy_id, quote, inception))

        assert [p.policy_id for p in issued] == ["POL-8821", "POL-9932", "POL-7310"]

    def test_loaded_quote_keeps_net_basis(self, calculator: PremiumCalculator) -> None:
        """Loadings change the charged premium, never the reserving premium."""
        standard = calculator.quote(45, 500_000)
        loaded = calculator.quote(45, 500_000, smoker=True, history="major")
        assert loaded.annual_premium > standard.annual_premium
        assert calculator.net_premium(45, 500_000) < standard.base_annual_premium


class TestValuationWorkflow:
    """Issued book through projection and snapshot."""

    @pytest.fixture
    def book(self, calculator: PremiumCalculator) -> list[Policy]:
        policies = []
        for policy_id, age, coverage, smoker, history, inception in APPLICATIONS:
            quote = calculator.quote(age, coverage, smoker=smoker, history=history)
            if quote.approved:
                policies.append(_issue(policy_id, quote, inception))
        return policies

    def test_every_projection_runs_off(self, service: ValuationService, book: list[Policy]) -> None:
        for policy in book:
            reserves = service.project(policy).reserves
            assert abs(reserves[0]) <= 1e-3 * policy.sum_insured
            assert reserves[-1] == 0.0
            assert max(reserves) > 0

    def test_snapshot_matches_projections(
        self, service: ValuationService, book: list[Policy], valuation_date: date
    ) -> None:
        snapshot = service.value_portfolio(book, valuation_date)
        for entry, policy in zip(snapshot.entries, book):
            row = service.project(policy).rows[entry.elapsed_years]
            assert entry.reserve == pytest.approx(row.reserve, rel=1e-12, abs=1e-9)

    def test_lapse_removes_reserve(
        self, service: ValuationService, book: list[Policy], valuation_date: date
    ) -> None:
        before = service.value_portfolio(book, valuation_date)
        lapsed_book = [replace(book[0], status=PolicyStatus.LAPSED), *book[1:]]
        after = service.value_portfolio(lapsed_book, valuation_date)
        assert after.n_policies == before.n_policies - 1
        assert after.total_reserve == pytest.approx(
            before.total_reserve - before.entries[0].reserve, rel=1e-12
        )

    def test_valuation_is_repeatable(
        self, service: ValuationService, book: list[Policy], valuation_date: date
    ) -> None:
        first = service.value_portfolio(book, valuation_date)
        second = ValuationService().value_portfolio(book, valuation_date)
        assert first == second


class TestAlternativeBasis:
    """Two assumption sets side by side in one process."""

    def test_higher_interest_lowers_premium(self, standard_policy: Policy) -> None:
        high_rates = replace(SETTINGS, assumptions=ActuarialAssumptions(i=0.08))
        base = PremiumCalculator().quote(45, 500_000)
        alternative = PremiumCalculator(high_rates).quote(45, 500_000)
        assert alternative.assurance_factor < base.assurance_factor
        assert SETTINGS.assumptions.i == 0.05

    def test_services_do_not_share_state(self, standard_policy: Policy) -> None:
        heavier = replace(SETTINGS, assumptions=ActuarialAssumptions(A=0.002))
        base_service = ValuationService()
        heavy_service = ValuationService(heavier)
        assert heavy_service.project(standard_policy).net_premium > base_service.project(
            standard_policy
        ).net_premium
        assert base_service.engine._premium_cache != heavy_service.engine._premium_cache


@pytest.mark.slow
class TestParallelBook:
    """Parallel snapshot on a larger generated book."""

    def test_parallel_large_book(self, service: ValuationService, valuation_date: date) -> None:
        book = [
            Policy(f"POL-{k:04d}", 25 + k % 40, 50_000 + 1_000 * k, date(2015 + k % 10, 1, 1))
            for k in range(24)
        ]
        sequential = service.value_portfolio(book, valuation_date)
        parallel = ValuationService().value_portfolio(book, valuation_date, parallel=True, n_workers=4)
        assert [e.policy_id for e in parallel.entries] == [p.policy_id for p in book]
        assert parallel.total_reserve == pytest.approx(sequential.total_reserve, rel=1e-12)
