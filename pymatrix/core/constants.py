"""
Library-wide constants for PyMatrix.

This module is the SINGLE SOURCE OF TRUTH for tunable numbers.
Import from here, never repeat the literals.

Usage:
    from pymatrix.core.constants import RANDOM_LOW, RANDOM_HIGH

    values = rng.uniform(RANDOM_LOW, RANDOM_HIGH, size=(m, n))
"""

# Matrix.random() draws uniformly from [RANDOM_LOW, RANDOM_HIGH)
RANDOM_LOW = 1.0
RANDOM_HIGH = 51.0

# Decimal places used by Matrix.format() / Matrix.print() and the demo
PRINT_PRECISION = 2

# Cofactor expansion is O(n!); det() warns above this size.
# 10! is already ~3.6 million minors.
COFACTOR_WARN_SIZE = 10
