"""
Contract Validation Module

Модуль для валидации JSON отчётов quadrature engine.
"""

from .validators import (
    ContractValidator,
    IntegrationReportValidator,
    SchemaLoader,
    validate_integration_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntegrationReportValidator",
    # Functions
    "validate_integration_report",
]
