"""
Prospective reserve (policy value) for term assurance.

Theory
------
[T1] tV = S·Ā¹_{x+t:n-t} − P'·ā_{x+t:n-t}

where P' is the net premium fixed at issue from the ORIGINAL age x and
term n. At t = 0 the equivalence principle gives 0V = 0; at t >= n the
cover has ended and tV = 0 exactly.

See: Dickson, Hardy & Waters (2019) Ch. 7 (policy values)
"""

import logging
from dataclasses import dataclass

from term_assurance.cashflows.integrands import cashflow_factors
from term_assurance.config.settings import SETTINGS, Settings
from term_assurance.data.schemas import Policy
from term_assurance.errors import require_finite
from term_assurance.products.premium import net_premium

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionRow:
    """
    Policy value at one duration.

    Attributes
    ----------
    year : float
        Elapsed duration t
    age : float
        Attained age x + t
    term_remaining : float
        n − t (<= 0 once matured)
    assurance_factor : float
        Ā¹ at the attained age over the remaining term (0.0 once matured)
    annuity_factor : float
        ā at the attained age over the remaining term (0.0 once matured)
    reserve : float
        Expected present value of future loss, E[L]
    """

    year: float
    age: float
    term_remaining: float
    assurance_factor: float
    annuity_factor: float
    reserve: float


class ReserveEngine:
    """
    Prospective net-premium reserve calculator.

    The net premium is recomputed from the issue age and term only; with
    caching enabled it is memoised per (issue_age, term, sum_insured), which
    yields exactly the same value as recomputing.

    Examples
    --------
    >>> engine = ReserveEngine()
    >>> policy = Policy("POL-1", issue_age=45, sum_insured=500_000,
    ...                 inception_date=date(2020, 5, 15))
    >>> abs(engine.reserve_at(policy, 0)) < 1.0
    True
    >>> engine.reserve_at(policy, policy.term)
    0.0
    """

    def __init__(self, settings: Settings = SETTINGS, cache_net_premium: bool = True):
        """
        Initialize engine.

        Parameters
        ----------
        settings : Settings
            Assumption set
        cache_net_premium : bool, default True
            Memoise the issue-date net premium per policy terms
        """
        self.settings = settings
        self.cache_net_premium = cache_net_premium
        self._premium_cache: dict[tuple[float, float, float], float] = {}

    def net_premium(self, policy: Policy) -> float:
        """
        Net annual premium P' fixed at issue.

        Raises
        ------
        UndefinedQuantityError
            If the issue-date annuity factor is numerically zero
        """
        key = (policy.issue_age, policy.term, policy.sum_insured)
        if self.cache_net_premium and key in self._premium_cache:
            return self._premium_cache[key]

        premium = net_premium(
            policy.issue_age, policy.sum_insured, policy.term, self.settings
        )
        if self.cache_net_premium:
            self._premium_cache[key] = premium
        return premium

    def row_at(self, policy: Policy, elapsed_years: float) -> ProjectionRow:
        """
        Factors and reserve at an elapsed duration.

        Parameters
        ----------
        policy : Policy
            Policy to value (never modified)
        elapsed_years : float
            Duration since inception; negative values are treated as 0

        Returns
        -------
        ProjectionRow
            Row with zero factors and zero reserve once the term has run out

        Raises
        ------
        InvalidArgumentError
            If elapsed_years is not finite
        """
        require_finite("elapsed_years", elapsed_years)
        t = elapsed_years if elapsed_years > 0 else 0
        age = policy.issue_age + t
        remaining = policy.term - t

        if remaining <= 0:
            return ProjectionRow(
                year=t,
                age=age,
                term_remaining=remaining,
                assurance_factor=0.0,
                annuity_factor=0.0,
                reserve=0.0,
            )

        premium = self.net_premium(policy)
        factors = cashflow_factors(age, remaining, self.settings, include_expense_annuity=False)
        reserve = policy.sum_insured * factors.assurance - premium * factors.annuity

        logger.debug(f"{policy.policy_id} t={t}: reserve={reserve:,.2f}")
        return ProjectionRow(
            year=t,
            age=age,
            term_remaining=remaining,
            assurance_factor=factors.assurance,
            annuity_factor=factors.annuity,
            reserve=reserve,
        )

    def reserve_at(self, policy: Policy, elapsed_years: float) -> float:
        """
        Prospective reserve E[L] at an elapsed duration.

        [T1] tV = S·Ā¹_{x+t:n-t} − P'·ā_{x+t:n-t},  0 once t >= n
        """
        return self.row_at(policy, elapsed_years).reserve
