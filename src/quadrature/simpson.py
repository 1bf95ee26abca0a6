"""
Composite Simpson Quadrature — Fixed Subdivision

Интеграл f на [start, end] по составной формуле Симпсона с parts
частями разбиения:

    h    = (end - start) / parts
    x(i) = start + i * h
    S1   = f(x(0)) + f(x(parts))
    S2   = Σ_{i=1}^{parts-1} f(x(i))
    S3   = Σ_{i=1}^{parts}   f((x(i-1) + x(i)) / 2)
    I    ≈ h/6 * (S1 + 2*S2 + 4*S3)

f вычисляется в 2*parts + 1 точках. Промежуточные суммы считаются в
working_context (P + guard_digits цифр), результат округляется до P.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. start > end → InvalidIntervalError
2. parts <= 0 → InvalidPartsError
3. start == end → 0
4. Детерминизм: одинаковые входы дают одинаковый результат
"""

from decimal import Decimal, localcontext

from src.core.domain.precision import DEFAULT_PRECISION, PrecisionContext
from src.core.math.decimal_ops import FOUR, SIX, TWO, ZERO, DecimalLike, to_decimal
from src.core.math.function import FunctionLike, as_function
from src.quadrature.errors import InvalidIntervalError, InvalidPartsError


def validate_interval(start: Decimal, end: Decimal) -> None:
    """
    Raises:
        InvalidIntervalError: Если start > end
    """
    if start > end:
        raise InvalidIntervalError(
            f"Start cannot be bigger than end: start={start}, end={end}"
        )


def validate_parts(parts: int) -> None:
    """
    Raises:
        InvalidPartsError: Если parts не int или parts <= 0
    """
    if isinstance(parts, bool) or not isinstance(parts, int):
        raise InvalidPartsError(f"parts must be an int, got {type(parts).__name__}")
    if parts <= 0:
        raise InvalidPartsError(f"parts must be positive, got {parts}")


def simpson_integral(
    f: FunctionLike,
    start: DecimalLike,
    end: DecimalLike,
    parts: int,
    precision: PrecisionContext = DEFAULT_PRECISION,
) -> Decimal:
    """
    Интеграл f на [start, end] по составной формуле Симпсона.

    Args:
        f: Function или callable Decimal -> Decimal
        start: Нижняя граница
        end: Верхняя граница (end >= start)
        parts: Число частей разбиения (>= 1)
        precision: Контекст точности (default: 8 цифр)

    Returns:
        Оценка интеграла, округлённая до precision.digits цифр

    Raises:
        InvalidIntervalError: Если start > end
        InvalidPartsError: Если parts <= 0

    Examples:
        >>> simpson_integral(lambda x: x * x, 0, 3, 1) == 9
        True
    """
    fn = as_function(f)
    a = to_decimal(start)
    b = to_decimal(end)
    validate_interval(a, b)
    validate_parts(parts)

    with localcontext(precision.working_context()):
        n = Decimal(parts)
        h = (b - a) / n

        def x(i: int) -> Decimal:
            return a + i * h

        # f(x(0)) + f(x(N))
        s1 = fn.at(x(0)) + fn.at(x(parts))

        # 1 -> N-1: f(x(i))
        s2 = ZERO
        for i in range(1, parts):
            s2 += fn.at(x(i))

        # 1 -> N: f((x(i-1) + x(i)) / 2)
        s3 = ZERO
        for i in range(1, parts + 1):
            s3 += fn.at((x(i - 1) + x(i)) / TWO)

        area = s1 + TWO * s2 + FOUR * s3
        result = h * area / SIX

    return precision.decimal_context().plus(result)
