"""
Centralized pytest fixtures for the term-assurance test suite.

Fixture Categories:
1. Assumption sets - default, zero mortality, constant force
2. Policies - the sample book used across unit and integration tests
3. Engines - calculator, reserve engine, valuation service
"""

from dataclasses import dataclass, replace
from datetime import date

import pytest

from term_assurance.config.settings import SETTINGS, ActuarialAssumptions, Settings
from term_assurance.data.schemas import Policy, PolicyStatus
from term_assurance.mortality.makeham import MakehamMortality
from term_assurance.products.premium import PremiumCalculator
from term_assurance.valuation.portfolio import ValuationService
from term_assurance.valuation.reserve import ReserveEngine

# =============================================================================
# TOLERANCE TIERS
# =============================================================================

@dataclass(frozen=True)
class ToleranceTiers:
    """
    Tiered tolerance framework for different test types.

    See: term_assurance.config.tolerances
    """

    # Deterministic identities (exact up to float64 accumulation)
    analytical: float = 1e-9

    # Simpson vs adaptive quadrature
    cross_library: float = 1e-6

    # Reserve at issue relative to sum insured
    equivalence: float = 1e-3


TOLERANCES = ToleranceTiers()


@pytest.fixture(scope="session")
def tolerances() -> ToleranceTiers:
    """Provide tiered tolerance settings for all tests."""
    return TOLERANCES


# =============================================================================
# ASSUMPTION SETS
# =============================================================================

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Default assumption set (A=0.00022, B=2.7e-6, c=1.124, i=5%)."""
    return SETTINGS


@pytest.fixture(scope="session")
def mortality() -> MakehamMortality:
    """Mortality model on the default assumptions."""
    return MakehamMortality(SETTINGS.assumptions)


@pytest.fixture(scope="session")
def zero_mortality_settings() -> Settings:
    """A = B = 0: nobody dies, tpx = 1 everywhere."""
    return replace(SETTINGS, assumptions=ActuarialAssumptions(A=0.0, B=0.0))


@pytest.fixture(scope="session")
def constant_force_settings() -> Settings:
    """B = 0: constant force of mortality mu = A = 1%."""
    return replace(SETTINGS, assumptions=ActuarialAssumptions(A=0.01, B=0.0))


# =============================================================================
# POLICY FIXTURES
# =============================================================================

@pytest.fixture
def standard_policy() -> Policy:
    """Age 45, R500,000, 15-year term."""
    return Policy(
        policy_id="POL-8821",
        issue_age=45,
        sum_insured=500_000,
        inception_date=date(2020, 5, 15),
        holder_name="John Doe",
    )


@pytest.fixture
def young_policy() -> Policy:
    """Age 32, R250,000, 15-year term."""
    return Policy(
        policy_id="POL-9932",
        issue_age=32,
        sum_insured=250_000,
        inception_date=date(2022, 1, 10),
        holder_name="Sarah Smith",
    )


@pytest.fixture
def sample_portfolio(standard_policy: Policy, young_policy: Policy) -> list[Policy]:
    """Two active policies, one awaiting documents, one lapsed."""
    return [
        standard_policy,
        young_policy,
        Policy(
            policy_id="POL-4410",
            issue_age=50,
            sum_insured=100_000,
            inception_date=date(2024, 3, 1),
            status=PolicyStatus.PENDING_DOC,
        ),
        Policy(
            policy_id="POL-1207",
            issue_age=38,
            sum_insured=300_000,
            inception_date=date(2015, 7, 1),
            status="Lapsed",
        ),
    ]


@pytest.fixture(scope="session")
def valuation_date() -> date:
    """Fixed valuation date so durations are reproducible."""
    return date(2025, 6, 30)


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def calculator() -> PremiumCalculator:
    """Premium calculator on the default assumptions."""
    return PremiumCalculator()


@pytest.fixture
def engine() -> ReserveEngine:
    """Reserve engine with net-premium caching."""
    return ReserveEngine()


@pytest.fixture
def service(engine: ReserveEngine) -> ValuationService:
    """Valuation service sharing the engine fixture."""
    return ValuationService(engine=engine)
