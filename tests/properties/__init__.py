"""
Property-based testing using Hypothesis.

This package contains property tests that verify mathematical invariants
hold across randomly generated inputs.

Modules:
    test_quadrature_properties: Simpson exactness and empty-interval rule
    test_mortality_properties: survival probability bounds and monotonicity
    test_premium_properties: loadings, homogeneity and reserve boundaries
"""
