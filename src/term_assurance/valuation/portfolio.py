"""
Valuation Service - policy projections and portfolio snapshots.

[T2] Orchestrates the ReserveEngine:
- Individual projection: one row per policy year t = 0..n
- Portfolio snapshot: one reserve per in-force policy at a valuation date

Each policy is valued independently, so the snapshot may run in a process
pool. Entries are always reported in input order and totals are summed with
math.fsum, so the result does not depend on execution order.
"""

import logging
import math
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import asdict, dataclass
from datetime import date
from typing import Iterable, Optional

import pandas as pd

from term_assurance.config.settings import SETTINGS, Settings
from term_assurance.data.schemas import Policy
from term_assurance.valuation.reserve import ProjectionRow, ReserveEngine

logger = logging.getLogger(__name__)


def elapsed_policy_years(inception_date: date, valuation_date: date) -> int:
    """
    Whole policy years between inception and valuation.

    Calendar-year basis: valuation year minus inception year, clamped to 0
    for policies incepting after the valuation date.

    Examples
    --------
    >>> elapsed_policy_years(date(2020, 5, 15), date(2025, 1, 1))
    5
    >>> elapsed_policy_years(date(2026, 1, 1), date(2025, 1, 1))
    0
    """
    return max(0, valuation_date.year - inception_date.year)


@dataclass(frozen=True)
class PolicyProjection:
    """
    Year-by-year policy values for one policy.

    Attributes
    ----------
    policy : Policy
        Projected policy
    net_premium : float
        Net annual premium P' fixed at issue
    rows : tuple[ProjectionRow, ...]
        Ordered by year ascending; the last row has reserve 0
    """

    policy: Policy
    net_premium: float
    rows: tuple[ProjectionRow, ...]

    @property
    def reserves(self) -> list[float]:
        """Reserve column in year order."""
        return [row.reserve for row in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        """One row per projection year."""
        return pd.DataFrame([asdict(row) for row in self.rows])


@dataclass(frozen=True)
class PortfolioValuationEntry:
    """Point-in-time reserve for one in-force policy."""

    policy_id: str
    issue_age: float
    sum_insured: float
    elapsed_years: int
    reserve: float


@dataclass(frozen=True)
class PortfolioValuation:
    """
    Portfolio snapshot at a valuation date.

    Attributes
    ----------
    valuation_date : date
        Date the durations were measured to
    entries : tuple[PortfolioValuationEntry, ...]
        One entry per in-force policy, in input order
    n_excluded : int
        Policies skipped because they are not in force
    """

    valuation_date: date
    entries: tuple[PortfolioValuationEntry, ...]
    n_excluded: int = 0

    @property
    def n_policies(self) -> int:
        """Number of policies valued."""
        return len(self.entries)

    @property
    def total_reserve(self) -> float:
        """Sum of reserves across valued policies."""
        return math.fsum(entry.reserve for entry in self.entries)

    @property
    def mean_reserve(self) -> float:
        """Average reserve per valued policy (0.0 for an empty snapshot)."""
        if not self.entries:
            return 0.0
        return self.total_reserve / self.n_policies

    @property
    def total_sum_insured(self) -> float:
        """Sum insured across valued policies."""
        return math.fsum(entry.sum_insured for entry in self.entries)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per valued policy."""
        columns = ["policy_id", "issue_age", "sum_insured", "elapsed_years", "reserve"]
        return pd.DataFrame([asdict(entry) for entry in self.entries], columns=columns)


class ValuationService:
    """
    Projection and portfolio valuation on top of a ReserveEngine.

    Examples
    --------
    >>> service = ValuationService()
    >>> projection = service.project(policy)
    >>> projection.rows[-1].reserve
    0.0
    >>> snapshot = service.value_portfolio(policies, valuation_date=date(2025, 6, 30))
    >>> print(f"Total reserve: {snapshot.total_reserve:,.2f}")
    """

    def __init__(self, settings: Settings = SETTINGS, engine: Optional[ReserveEngine] = None):
        """
        Initialize service.

        Parameters
        ----------
        settings : Settings
            Assumption set (ignored if engine is given)
        engine : ReserveEngine, optional
            Engine to delegate to; built from settings if None
        """
        self.engine = engine if engine is not None else ReserveEngine(settings)

    @property
    def settings(self) -> Settings:
        """Assumption set in use."""
        return self.engine.settings

    def project(self, policy: Policy) -> PolicyProjection:
        """
        Project the reserve at every whole policy year from 0 to term.

        A fractional term gets a final row at the exact term so the
        projection always ends at maturity with a zero reserve.

        Parameters
        ----------
        policy : Policy
            Policy to project

        Returns
        -------
        PolicyProjection
            Net premium and ordered projection rows
        """
        years: list[float] = list(range(0, math.floor(policy.term) + 1))
        if years[-1] < policy.term:
            years.append(policy.term)

        rows = tuple(self.engine.row_at(policy, t) for t in years)
        logger.debug(f"Projected {policy.policy_id} over {len(rows)} durations")
        return PolicyProjection(
            policy=policy,
            net_premium=self.engine.net_premium(policy),
            rows=rows,
        )

    def value_policy(self, policy: Policy, valuation_date: date) -> PortfolioValuationEntry:
        """Reserve for one policy at the valuation date."""
        elapsed = elapsed_policy_years(policy.inception_date, valuation_date)
        return PortfolioValuationEntry(
            policy_id=policy.policy_id,
            issue_age=policy.issue_age,
            sum_insured=policy.sum_insured,
            elapsed_years=elapsed,
            reserve=self.engine.reserve_at(policy, elapsed),
        )

    def value_portfolio(
        self,
        policies: Iterable[Policy],
        valuation_date: date | None = None,
        parallel: bool = False,
        n_workers: int | None = None,
    ) -> PortfolioValuation:
        """
        Value every in-force policy at the valuation date.

        Parameters
        ----------
        policies : Iterable[Policy]
            Portfolio; policies not in force are skipped
        valuation_date : date, optional
            Defaults to today
        parallel : bool, default False
            Value policies in a ProcessPoolExecutor
        n_workers : int, optional
            Worker processes (None = auto)

        Returns
        -------
        PortfolioValuation
            Entries in input order with aggregate figures

        Raises
        ------
        InvalidArgumentError, UndefinedQuantityError
            Propagated from the first policy that fails; no partial result
        """
        start_time = time.time()
        if valuation_date is None:
            valuation_date = date.today()

        all_policies = list(policies)
        in_force = [p for p in all_policies if p.is_in_force]
        n_excluded = len(all_policies) - len(in_force)

        if parallel and len(in_force) > 1:
            entries = self._value_parallel(in_force, valuation_date, n_workers)
        else:
            entries = [self.value_policy(p, valuation_date) for p in in_force]

        valuation = PortfolioValuation(
            valuation_date=valuation_date,
            entries=tuple(entries),
            n_excluded=n_excluded,
        )
        logger.info(
            f"Valued {valuation.n_policies} policies at {valuation_date.isoformat()} "
            f"({n_excluded} not in force): total reserve {valuation.total_reserve:,.2f} "
            f"in {time.time() - start_time:.2f}s"
        )
        return valuation

    def _value_parallel(
        self,
        policies: list[Policy],
        valuation_date: date,
        n_workers: int | None,
    ) -> list[PortfolioValuationEntry]:
        """Value policies in parallel using ProcessPoolExecutor."""
        results: list[Optional[PortfolioValuationEntry]] = [None] * len(policies)

        with ProcessPoolExecutor(max_workers=n_workers) as executor:
            future_to_index = {
                executor.submit(self.value_policy, policy, valuation_date): index
                for index, policy in enumerate(policies)
            }

            for future in as_completed(future_to_index):
                index = future_to_index[future]
                try:
                    results[index] = future.result()
                except Exception:
                    logger.error(f"  FAILED: {policies[index].policy_id}")
                    raise

        return [entry for entry in results if entry is not None]
