"""
Mortality models.

- MakehamMortality: survival index, tpx, force of mortality, life expectancy
"""

from .makeham import MakehamMortality

__all__ = ["MakehamMortality"]
