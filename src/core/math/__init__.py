"""
Core math modules

Decimal-примитивы для quadrature engine.
"""

# Decimal Ops
from src.core.math.decimal_ops import (
    FOUR,
    ONE,
    SIX,
    TWO,
    ZERO,
    exp_d,
    pi_d,
    power_d,
    round_to_precision,
    sqrt_d,
    to_decimal,
)

# Function
from src.core.math.function import DecimalFunction, Function, as_function

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    diff,
    exact_add,
    validate_finite,
)

__all__ = [
    # Decimal Ops — Constants
    "ZERO",
    "ONE",
    "TWO",
    "FOUR",
    "SIX",
    # Decimal Ops — Functions
    "to_decimal",
    "round_to_precision",
    "exp_d",
    "sqrt_d",
    "power_d",
    "pi_d",
    # Function
    "Function",
    "DecimalFunction",
    "as_function",
    # Numerical Safeguards
    "diff",
    "exact_add",
    "validate_finite",
]
