"""
Precision-Adaptive Integration

Удвоение числа частей разбиения до сходимости двух последовательных
оценок Симпсона:

    a = simpson(parts=1)
    for i = 1, 2, 4, ...:
        b = simpson(parts=2i)
        |a - b| < 10^-P → return b
        a = b

Без PrecisionContext.max_iterations цикл не ограничен: для расходящихся
или сильно осциллирующих функций вызов не завершается. При заданном
лимите выбрасывается ConvergenceError.
"""

import logging
from decimal import Decimal
from typing import Callable, Optional, Union

from src.core.domain.integration_result import IntegrationResult
from src.core.domain.precision import DEFAULT_PRECISION, PrecisionContext
from src.core.math.decimal_ops import DecimalLike, to_decimal
from src.core.math.function import FunctionLike, as_function
from src.core.math.numerical_safeguards import diff
from src.quadrature.errors import ConvergenceError
from src.quadrature.simpson import simpson_integral

logger = logging.getLogger(__name__)

# (parts, estimate, delta) для каждого шага уточнения
RefineCallback = Callable[[int, Decimal, Decimal], None]


def refine_integral(
    f: FunctionLike,
    start: DecimalLike,
    end: DecimalLike,
    precision: PrecisionContext = DEFAULT_PRECISION,
    on_refine: Optional[RefineCallback] = None,
) -> IntegrationResult:
    """
    Адаптивное интегрирование с диагностикой сходимости.

    Args:
        f: Function или callable Decimal -> Decimal
        start: Нижняя граница
        end: Верхняя граница
        precision: Контекст точности; threshold = 10^-digits
        on_refine: Вызывается на каждом шаге с (parts, estimate, delta)

    Returns:
        IntegrationResult с оценкой при parts частях разбиения

    Raises:
        InvalidIntervalError: Если start > end
        ConvergenceError: Если задан max_iterations и порог не достигнут
    """
    fn = as_function(f)
    a_start = to_decimal(start)
    a_end = to_decimal(end)
    threshold = precision.threshold

    a = simpson_integral(fn, a_start, a_end, 1, precision)
    i = 1
    iterations = 0
    while True:
        parts = 2 * i
        b = simpson_integral(fn, a_start, a_end, parts, precision)
        delta = diff(a, b)
        iterations += 1
        logger.debug("parts=%d estimate=%s delta=%s", parts, b, delta)
        if on_refine is not None:
            on_refine(parts, b, delta)

        if delta < threshold:
            logger.info("Estimated parts: %d (iterations=%d)", parts, iterations)
            return IntegrationResult(
                value=b,
                start=a_start,
                end=a_end,
                parts=parts,
                iterations=iterations,
                delta=delta,
                digits=precision.digits,
            )

        if precision.max_iterations is not None and iterations >= precision.max_iterations:
            raise ConvergenceError(
                f"Integral did not converge within {iterations} iterations: "
                f"parts={parts}, delta={delta}, threshold={threshold}",
                iterations=iterations,
                delta=delta,
            )

        a = b
        i *= 2


def adaptive_integral(
    f: FunctionLike,
    start: DecimalLike,
    end: DecimalLike,
    precision: PrecisionContext = DEFAULT_PRECISION,
) -> Decimal:
    """Оценка интеграла с точностью порядка 10^-P (только значение)."""
    return refine_integral(f, start, end, precision).value


def integral(
    f: FunctionLike,
    start: DecimalLike,
    end: DecimalLike,
    parts_or_precision: Union[int, PrecisionContext],
    precision: Optional[PrecisionContext] = None,
) -> Decimal:
    """
    Единая точка входа.

    int → фиксированное разбиение (simpson_integral), precision задаёт
    округление (default: DEFAULT_PRECISION).
    PrecisionContext → adaptive_integral с этим контекстом.

    Raises:
        TypeError: Если parts_or_precision не int и не PrecisionContext
    """
    if isinstance(parts_or_precision, PrecisionContext):
        if precision is not None:
            raise TypeError("precision given twice")
        return adaptive_integral(f, start, end, parts_or_precision)

    if isinstance(parts_or_precision, int) and not isinstance(parts_or_precision, bool):
        return simpson_integral(
            f, start, end, parts_or_precision, precision or DEFAULT_PRECISION
        )

    raise TypeError(
        "parts_or_precision must be int or PrecisionContext, "
        f"got {type(parts_or_precision).__name__}"
    )
