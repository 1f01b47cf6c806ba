"""
Configuration: frozen assumption sets and centralized tolerances.
"""

from .settings import (
    SETTINGS,
    ActuarialAssumptions,
    ExpenseLoadings,
    NumericsConfig,
    RiskLoadings,
    Settings,
)
from .tolerances import TOLERANCE_REGISTRY, get_tolerance

__all__ = [
    "SETTINGS",
    "Settings",
    "ActuarialAssumptions",
    "ExpenseLoadings",
    "RiskLoadings",
    "NumericsConfig",
    "TOLERANCE_REGISTRY",
    "get_tolerance",
]
