"""
Data schemas consumed by the valuation engine.
"""

from .schemas import Policy, PolicyStatus

__all__ = ["Policy", "PolicyStatus"]
