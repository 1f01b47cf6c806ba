"""
Gompertz-Makeham mortality law.

Theory
------
[T1] mu(x) = A + B·c^x                       (force of mortality)
[T1] S(x) = s^x · g^(c^x),  s = e^-A,  g = e^(-B/ln c)
[T1] tpx = S(x+t) / S(x)                     (t-year survival from age x)
[T1] e°_x = ∫₀^(ω-x) tpx dt                  (complete life expectancy)

S(x) is an unnormalised survival index: only ratios are meaningful.

Validators: Dickson, Hardy & Waters (2019) Example 2.3 (Makeham law)
"""

import math
from dataclasses import dataclass

from term_assurance.config.settings import SETTINGS, ActuarialAssumptions
from term_assurance.errors import InvalidArgumentError
from term_assurance.numerics.simpson import DEFAULT_SUBDIVISIONS, simpson_integrate


@dataclass(frozen=True)
class MakehamMortality:
    """
    Continuous mortality under the Gompertz-Makeham law.

    Stateless apart from the (immutable) assumptions it wraps.

    Examples
    --------
    >>> mortality = MakehamMortality(ActuarialAssumptions())
    >>> mortality.tpx(45, 0)
    1.0
    >>> 0 < mortality.tpx(45, 15) < 1
    True
    """

    assumptions: ActuarialAssumptions = SETTINGS.assumptions

    def survival(self, x: float) -> float:
        """
        Survival index S(x) = s^x · g^(c^x).

        Strictly decreasing in x. Returns 0.0 once c^x overflows, which only
        happens at ages far beyond any limiting age.

        Parameters
        ----------
        x : float
            Age

        Returns
        -------
        float
            Relative survival index
        """
        a = self.assumptions
        try:
            growth = a.c ** x
        except OverflowError:
            return 0.0
        return a.s ** x * a.g ** growth

    def tpx(self, x: float, t: float) -> float:
        """
        Probability that a life aged x survives t further years.

        [T1] tpx = S(x+t) / S(x)

        Parameters
        ----------
        x : float
            Current age
        t : float
            Further years, must be >= 0

        Returns
        -------
        float
            Survival probability in [0, 1]; 0.0 when S(x) has underflowed

        Raises
        ------
        InvalidArgumentError
            If t < 0
        """
        if t < 0:
            raise InvalidArgumentError(f"CRITICAL: t must be >= 0, got {t}")
        sx = self.survival(x)
        if sx == 0:
            return 0.0
        return min(1.0, max(0.0, self.survival(x + t) / sx))

    def tqx(self, x: float, t: float) -> float:
        """Probability that a life aged x dies within t years."""
        return 1.0 - self.tpx(x, t)

    def force_of_mortality(self, x: float) -> float:
        """
        Instantaneous death rate mu(x) = A + B·c^x.

        Always >= A; math.inf if c^x overflows.
        """
        a = self.assumptions
        try:
            return a.A + a.B * a.c ** x
        except OverflowError:
            return math.inf

    def complete_life_expectancy(
        self,
        x: float,
        subdivisions: int = DEFAULT_SUBDIVISIONS,
    ) -> float:
        """
        Complete expectation of life, truncated at the limiting age.

        [T1] e°_x = ∫₀^(ω-x) tpx dt

        Parameters
        ----------
        x : float
            Age
        subdivisions : int
            Simpson subdivisions

        Returns
        -------
        float
            Expected future lifetime in years; 0.0 at or beyond omega
        """
        return simpson_integrate(
            lambda t, age: self.tpx(age, t),
            x,
            self.assumptions.omega - x,
            subdivisions,
        )
