"""
PrecisionContext — Контекст точности вычислений

Immutable Pydantic модель, задающая число значащих цифр P для всех
decimal-операций и порог сходимости 10^-P.

Используется:
- Для округления результатов (decimal_context, P цифр)
- Для промежуточных сумм и вычисления подынтегральной функции
  (working_context, P + guard_digits цифр)
- Как порог сходимости для adaptive integration и поиска upper border

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits >= 1
2. Контекст не мутируется во время вычисления (frozen=True)
3. max_iterations=None означает отсутствие лимита итераций
"""

import decimal
from decimal import Decimal
from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ ПО УМОЛЧАНИЮ
# =============================================================================

# Число значащих цифр по умолчанию
DEFAULT_DIGITS: Final[int] = 8

# Дополнительные цифры для промежуточных сумм
# Сумма 2*parts+1 значений не должна терять точность относительно 10^-P
DEFAULT_GUARD_DIGITS: Final[int] = 10

DEFAULT_ROUNDING: Final[str] = decimal.ROUND_HALF_EVEN

_ROUNDING_MODES: Final[frozenset[str]] = frozenset(
    {
        decimal.ROUND_CEILING,
        decimal.ROUND_DOWN,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_UP,
        decimal.ROUND_05UP,
    }
)


class PrecisionContext(BaseModel):
    """
    Контекст точности: P значащих цифр и порог сходимости 10^-P.

    Examples:
        >>> PrecisionContext(digits=8).threshold
        Decimal('1E-8')
        >>> PrecisionContext(digits=8).working_context().prec
        18
    """

    digits: int = Field(DEFAULT_DIGITS, ge=1, description="Значащие цифры P")
    guard_digits: int = Field(
        DEFAULT_GUARD_DIGITS, ge=0, description="Доп. цифры для промежуточных сумм"
    )
    rounding: str = Field(DEFAULT_ROUNDING, description="Режим округления decimal")
    max_iterations: Optional[int] = Field(
        None, ge=1, description="Лимит итераций (None = без лимита)"
    )

    model_config = {"frozen": True}

    @field_validator("rounding")
    @classmethod
    def check_rounding(cls, value: str) -> str:
        if value not in _ROUNDING_MODES:
            raise ValueError(f"rounding must be a decimal rounding mode, got {value!r}")
        return value

    @property
    def threshold(self) -> Decimal:
        """Порог сходимости 10^-P."""
        return Decimal(1).scaleb(-self.digits)

    @property
    def working_digits(self) -> int:
        return self.digits + self.guard_digits

    def decimal_context(self) -> decimal.Context:
        """decimal.Context с точностью P (для итоговых результатов)."""
        return decimal.Context(prec=self.digits, rounding=self.rounding)

    def working_context(self) -> decimal.Context:
        """decimal.Context с точностью P + guard_digits (для сумм и f(x))."""
        return decimal.Context(prec=self.working_digits, rounding=self.rounding)

    def with_digits(self, digits: int) -> "PrecisionContext":
        """Копия контекста с другим числом значащих цифр."""
        # model_copy не валидирует поля, поэтому пересоздаём модель
        return PrecisionContext(**{**self.model_dump(), "digits": digits})


DEFAULT_PRECISION: Final[PrecisionContext] = PrecisionContext()
