"""
Centralized tolerance framework for valuation numerics.

Tolerances are derived from precision requirements, not ad hoc tuning.

Tolerance Tiers:
    Tier 1 (Analytical): Machine-precision achievable, deterministic results
    Tier 2 (Cross-Library): External oracle precision bounds
    Tier 3 (Closed Form): Published/hand-derived reference values
    Tier 4 (Integration): Portfolio-level aggregation

References:
    [T1] Higham (2002) "Accuracy and Stability of Numerical Algorithms"
    [T1] Dickson, Hardy & Waters (2019) "Actuarial Mathematics for Life
         Contingent Risks", Ch. 4-7
"""

from typing import Final

# =============================================================================
# Tier 1: Analytical Tolerances (Deterministic)
# =============================================================================

#: An annuity factor at or below this is treated as numerically zero.
#: Dividing by it would turn a premium into inf/NaN.
ANNUITY_FACTOR_FLOOR: Final[float] = 1e-12

#: Composite Simpson is exact for cubics; allow float64 accumulation only.
QUADRATURE_EXACTNESS_TOLERANCE: Final[float] = 1e-9


# =============================================================================
# Tier 2: Cross-Library Tolerances (External Oracle)
# =============================================================================

#: Simpson (100 subdivisions) vs adaptive quadrature (scipy.integrate.quad)
CROSS_LIBRARY_TOLERANCE: Final[float] = 1e-6


# =============================================================================
# Tier 3: Closed-Form Tolerances
# =============================================================================

#: Hand-derived closed forms quoted to two decimal places
CLOSED_FORM_TOLERANCE: Final[float] = 1e-2

#: Reserve at issue relative to sum insured (equivalence principle)
EQUIVALENCE_RELATIVE_TOLERANCE: Final[float] = 1e-3


# =============================================================================
# Tier 4: Integration Tolerances
# =============================================================================

#: Portfolio total vs sum of individually computed reserves
PORTFOLIO_TOLERANCE: Final[float] = 1e-6


# =============================================================================
# Tolerance Registry (For Dynamic Access)
# =============================================================================

TOLERANCE_REGISTRY: dict[str, float] = {
    # Tier 1: Analytical
    "annuity_factor_floor": ANNUITY_FACTOR_FLOOR,
    "quadrature_exactness": QUADRATURE_EXACTNESS_TOLERANCE,
    # Tier 2: Cross-Library
    "cross_library": CROSS_LIBRARY_TOLERANCE,
    # Tier 3: Closed Form
    "closed_form": CLOSED_FORM_TOLERANCE,
    "equivalence_relative": EQUIVALENCE_RELATIVE_TOLERANCE,
    # Tier 4: Integration
    "portfolio": PORTFOLIO_TOLERANCE,
}


def get_tolerance(name: str) -> float:
    """
    Get tolerance by name from registry.

    Parameters
    ----------
    name : str
        Tolerance name (see TOLERANCE_REGISTRY keys)

    Returns
    -------
    float
        Tolerance value

    Raises
    ------
    KeyError
        If tolerance name not found
    """
    if name not in TOLERANCE_REGISTRY:
        available = ", ".join(sorted(TOLERANCE_REGISTRY.keys()))
        raise KeyError(f"Unknown tolerance '{name}'. Available: {available}")
    return TOLERANCE_REGISTRY[name]
