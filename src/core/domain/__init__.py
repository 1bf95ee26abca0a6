"""
Domain models and value objects.

Contains the precision context and the integration result model.
"""

from src.core.domain.integration_result import IntegrationResult
from src.core.domain.precision import (
    DEFAULT_DIGITS,
    DEFAULT_GUARD_DIGITS,
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    PrecisionContext,
)

__all__ = [
    "DEFAULT_DIGITS",
    "DEFAULT_GUARD_DIGITS",
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    "PrecisionContext",
    "IntegrationResult",
]
