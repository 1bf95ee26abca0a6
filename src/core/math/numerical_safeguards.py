"""
Numerical Safeguards — Decimal Comparison Primitives

Модуль содержит метрики и проверки, на которых построены все
критерии остановки:
- diff: абсолютная разница двух Decimal (метрика сходимости)
- exact_add: точная сумма (шаги поиска upper border)
- validate_finite: отклонение NaN/Inf

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. diff симметричен: diff(a, b) == diff(b, a), diff(a, a) == 0
2. diff и exact_add вычисляются точно (без округления контекстом)
3. Входные значения не изменяются (Decimal immutable)
"""

from decimal import Context, Decimal


def diff(a: Decimal, b: Decimal) -> Decimal:
    """
    Абсолютная разница |a - b|.

    Вычитается меньшее из большего, поэтому результат не зависит
    от порядка аргументов. Вычитание выполняется в контексте с
    точностью, достаточной для точного результата.

    Examples:
        >>> diff(Decimal("1.5"), Decimal("0.25"))
        Decimal('1.25')
        >>> diff(Decimal("0.25"), Decimal("1.5"))
        Decimal('1.25')
    """
    hi, lo = (b, a) if a < b else (a, b)
    return _exact_context(hi, lo).subtract(hi, lo).copy_abs()


def _exact_context(a: Decimal, b: Decimal) -> Context:
    # Точность покрывает обе мантиссы целиком плюс разряд переноса
    a_t, b_t = a.as_tuple(), b.as_tuple()
    top = max(len(a_t.digits) + a_t.exponent, len(b_t.digits) + b_t.exponent)
    bottom = min(a_t.exponent, b_t.exponent)
    return Context(prec=max(top - bottom + 1, 1))


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    """
    Точная сумма a + b без округления контекстом потока.

    Examples:
        >>> exact_add(Decimal(2) ** 77, Decimal("0.5"))
        Decimal('151115727451828646838272.5')
    """
    return _exact_context(a, b).add(a, b)


def validate_finite(value: Decimal, name: str) -> None:
    """
    Валидация, что Decimal конечен.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not value.is_finite():
        raise ValueError(f"{name} must be finite (not NaN/Inf), got {value}")
