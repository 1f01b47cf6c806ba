"""
Frozen configuration settings for term-assurance valuation.

All configuration is immutable (frozen dataclasses) so that several assumption
sets (e.g. product variants) can coexist in one process. Engine entry points
take a Settings instance explicitly and default to the SETTINGS singleton.
"""

import math
from dataclasses import dataclass, field

from term_assurance.errors import InvalidArgumentError

# =============================================================================
# Actuarial Assumptions
# =============================================================================

@dataclass(frozen=True)
class ActuarialAssumptions:
    """
    Immutable mortality and interest basis. [T1: Gompertz-Makeham]

    mu(x) = A + B * c^x, S(x) = s^x * g^(c^x)

    Attributes
    ----------
    A : float
        Makeham age-independent hazard (>= 0)
    B : float
        Gompertz scale parameter (>= 0)
    c : float
        Gompertz growth parameter (> 1)
    omega : float
        Limiting age; a risk is insurable only if age + term < omega
    i : float
        Base annual interest rate used for benefit discounting (> -1)
    i_in : float
        Annual interest rate used for the expense annuity (> -1)
    n : int
        Standard term length in policy years (> 0)

    Derived (set in __post_init__, excluded from equality)
    -------------------------------------------------------
    delta : float
        Force of interest ln(1 + i)
    delta_in : float
        Force of interest ln(1 + i_in)
    s : float
        e^(-A)
    g : float
        e^(-B / ln c)
    """

    A: float = 0.00022
    B: float = 2.7e-6
    c: float = 1.124
    omega: float = 120.0
    i: float = 0.05
    i_in: float = 0.02439
    n: int = 15

    delta: float = field(init=False, repr=False, compare=False)
    delta_in: float = field(init=False, repr=False, compare=False)
    s: float = field(init=False, repr=False, compare=False)
    g: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate parameters and cache derived constants."""
        for name in ("A", "B", "c", "omega", "i", "i_in", "n"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise InvalidArgumentError(
                    f"CRITICAL: {name} must be a finite number, got {value!r}"
                )
        if self.A < 0:
            raise InvalidArgumentError(f"CRITICAL: A must be >= 0, got {self.A}")
        if self.B < 0:
            raise InvalidArgumentError(f"CRITICAL: B must be >= 0, got {self.B}")
        if self.c <= 1:
            raise InvalidArgumentError(f"CRITICAL: c must be > 1, got {self.c}")
        if self.omega <= 0:
            raise InvalidArgumentError(f"CRITICAL: omega must be > 0, got {self.omega}")
        if self.i <= -1:
            raise InvalidArgumentError(f"CRITICAL: i must be > -1, got {self.i}")
        if self.i_in <= -1:
            raise InvalidArgumentError(f"CRITICAL: i_in must be > -1, got {self.i_in}")
        if self.n <= 0:
            raise InvalidArgumentError(f"CRITICAL: n must be > 0, got {self.n}")

        # Frozen dataclass workaround: use object.__setattr__
        object.__setattr__(self, "delta", math.log1p(self.i))
        object.__setattr__(self, "delta_in", math.log1p(self.i_in))
        object.__setattr__(self, "s", math.exp(-self.A))
        object.__setattr__(self, "g", math.exp(-self.B / math.log(self.c)))


# =============================================================================
# Expense Loadings
# =============================================================================

@dataclass(frozen=True)
class ExpenseLoadings:
    """
    Expense loading structure for gross premiums. [T3: Assumption]

    Attributes
    ----------
    fixed_expense_rate : float
        Amount per unit of the expense annuity factor (annuity-in)
    fixed_expense_amount : float
        One-off amount added to the expected present value of outgo
    """

    fixed_expense_rate: float = 8000.0
    fixed_expense_amount: float = 2000.0

    def __post_init__(self) -> None:
        """Validate loadings."""
        if self.fixed_expense_rate < 0:
            raise InvalidArgumentError(
                f"CRITICAL: fixed_expense_rate must be >= 0, got {self.fixed_expense_rate}"
            )
        if self.fixed_expense_amount < 0:
            raise InvalidArgumentError(
                f"CRITICAL: fixed_expense_amount must be >= 0, got {self.fixed_expense_amount}"
            )


# =============================================================================
# Risk Loadings
# =============================================================================

@dataclass(frozen=True)
class RiskLoadings:
    """
    Additive underwriting loadings on top of a base multiplier of 1.0.

    Attributes
    ----------
    smoker : float
        Added for smokers
    minor_history : float
        Added for minor medical history issues
    major_history : float
        Added for major medical history issues
    """

    smoker: float = 1.5
    minor_history: float = 0.5
    major_history: float = 2.5

    def __post_init__(self) -> None:
        """Validate loadings."""
        for name in ("smoker", "minor_history", "major_history"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidArgumentError(f"CRITICAL: {name} loading must be >= 0, got {value}")


# =============================================================================
# Numerics
# =============================================================================

@dataclass(frozen=True)
class NumericsConfig:
    """
    Quadrature configuration.

    Attributes
    ----------
    subdivisions : int
        Composite Simpson subdivisions per integral (even, >= 2)
    """

    subdivisions: int = 100

    def __post_init__(self) -> None:
        """Validate subdivisions."""
        if isinstance(self.subdivisions, bool) or not isinstance(self.subdivisions, int):
            raise InvalidArgumentError(
                f"CRITICAL: subdivisions must be an int, got {self.subdivisions!r}"
            )
        if self.subdivisions < 2 or self.subdivisions % 2:
            raise InvalidArgumentError(
                f"CRITICAL: subdivisions must be even and >= 2, got {self.subdivisions}"
            )


# =============================================================================
# Master Configuration
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Master frozen configuration combining all sub-configs.

    Usage
    -----
    >>> from term_assurance.config.settings import SETTINGS
    >>> SETTINGS.assumptions.omega
    120.0
    >>> from dataclasses import replace
    >>> high_rates = replace(SETTINGS, assumptions=ActuarialAssumptions(i=0.08))
    """

    assumptions: ActuarialAssumptions = ActuarialAssumptions()
    expenses: ExpenseLoadings = ExpenseLoadings()
    loadings: RiskLoadings = RiskLoadings()
    numerics: NumericsConfig = NumericsConfig()


# Singleton instance - import this
SETTINGS = Settings()
