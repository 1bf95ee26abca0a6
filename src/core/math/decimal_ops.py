"""
Decimal Ops — Arbitrary-Precision Decimal Primitives

Адаптер над стандартным модулем decimal и mpmath:
- Константы ZERO, ONE, TWO, FOUR, SIX
- Конвертация входных значений в Decimal (float через str)
- exp, sqrt, power, pi с явным контекстом точности
- Округление до P значащих цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая трансцендентная операция получает PrecisionContext явно
2. Глобальный decimal-контекст потока не изменяется
3. NaN/Inf на входе отклоняются (ValueError)
"""

from decimal import Decimal
from typing import Final, Union

import mpmath

from src.core.domain.precision import PrecisionContext
from src.core.math.numerical_safeguards import validate_finite

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Decimal] = Decimal(0)
ONE: Final[Decimal] = Decimal(1)
TWO: Final[Decimal] = Decimal(2)
FOUR: Final[Decimal] = Decimal(4)
SIX: Final[Decimal] = Decimal(6)

DecimalLike = Union[Decimal, int, float, str]


# =============================================================================
# КОНВЕРТАЦИЯ
# =============================================================================


def to_decimal(value: DecimalLike) -> Decimal:
    """
    Конвертация значения в Decimal.

    float конвертируется через str(), чтобы 0.1 стал Decimal("0.1"),
    а не двоичным приближением.

    Raises:
        ValueError: Если значение NaN/Inf или не является числом
        TypeError: Если тип не поддерживается (bool тоже отклоняется)

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("2.5")
        Decimal('2.5')
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric value")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except ArithmeticError:
            raise ValueError(f"Not a decimal number: {value!r}")
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to Decimal")

    validate_finite(result, "value")
    return result


def round_to_precision(value: Decimal, precision: PrecisionContext) -> Decimal:
    """Округление до P значащих цифр (unary plus в контексте P)."""
    return precision.decimal_context().plus(value)


# =============================================================================
# ТРАНСЦЕНДЕНТНЫЕ ОПЕРАЦИИ
# =============================================================================


def exp_d(x: Decimal, precision: PrecisionContext) -> Decimal:
    """e^x, округлённое до P значащих цифр."""
    return precision.decimal_context().exp(x)


def sqrt_d(x: Decimal, precision: PrecisionContext) -> Decimal:
    """
    Квадратный корень, округлённый до P значащих цифр.

    Raises:
        ValueError: Если x < 0
    """
    if x < 0:
        raise ValueError(f"sqrt of negative value: {x}")
    return precision.decimal_context().sqrt(x)


def power_d(x: Decimal, y: DecimalLike, precision: PrecisionContext) -> Decimal:
    """x^y, округлённое до P значащих цифр."""
    return precision.decimal_context().power(x, to_decimal(y))


def pi_d(precision: PrecisionContext) -> Decimal:
    """
    Число pi с P значащими цифрами.

    Модуль decimal не содержит pi, поэтому значение берётся из mpmath
    с guard-цифрами и округляется в decimal-контексте P.

    Examples:
        >>> pi_d(PrecisionContext(digits=8))
        Decimal('3.1415927')
    """
    with mpmath.workdps(precision.working_digits):
        text = mpmath.nstr(+mpmath.pi, precision.working_digits)
    return round_to_precision(Decimal(text), precision)
