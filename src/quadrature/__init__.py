"""Quadrature — составная формула Симпсона с адаптивной точностью.

- simpson_integral: фиксированное разбиение
- refine_integral / adaptive_integral: удвоение разбиения до |a - b| < 10^-P
- approx_upper_border: конечная замена +inf для несобственных интегралов
"""

from .adaptive import adaptive_integral, integral, refine_integral
from .errors import (
    ConvergenceError,
    InvalidIntervalError,
    InvalidPartsError,
    QuadratureError,
)
from .simpson import simpson_integral, validate_interval, validate_parts
from .upper_border import approx_upper_border, rec_upper_border

__all__ = [
    "simpson_integral",
    "validate_interval",
    "validate_parts",
    "refine_integral",
    "adaptive_integral",
    "integral",
    "approx_upper_border",
    "rec_upper_border",
    "QuadratureError",
    "InvalidIntervalError",
    "InvalidPartsError",
    "ConvergenceError",
]
