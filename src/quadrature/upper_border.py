"""
Upper-Bound Approximator — "Effective Infinity"

Поиск конечной точки x, после которой f меняется меньше порога.
Используется вместо +inf как верхняя граница интегрирования
(например, для хвоста плотности вероятности).

Алгоритм (x=0, range=1):
    пока |f(x) - f(x + range)| > threshold:
        x = x + range
        range = range * 2
    return x

Шаг растёт геометрически (1, 2, 4, 8, ...), поэтому поиск логарифмичен
по расстоянию до асимптоты, но граница грубая: это последняя проверенная
точка перед шагом, на котором изменение упало ниже порога.

Для функций, вариация которых не падает ниже порога (например,
неограниченно растущих), поиск не завершается без max_iterations.
"""

import logging
from decimal import Decimal, localcontext
from typing import Optional

from src.core.domain.precision import DEFAULT_PRECISION, PrecisionContext
from src.core.math.decimal_ops import ONE, ZERO, DecimalLike, to_decimal
from src.core.math.function import FunctionLike, as_function
from src.core.math.numerical_safeguards import diff, exact_add
from src.quadrature.errors import ConvergenceError

logger = logging.getLogger(__name__)


def rec_upper_border(
    f: FunctionLike,
    x: DecimalLike,
    range_: DecimalLike,
    threshold: DecimalLike,
    precision: PrecisionContext = DEFAULT_PRECISION,
    max_steps: Optional[int] = None,
) -> Decimal:
    """
    Поиск upper border начиная с x с шагом range_.

    Итеративная форма хвостовой рекурсии: последовательность (x, range_)
    совпадает с рекурсивной версией, глубина стека не растёт.

    Args:
        f: Function или callable Decimal -> Decimal
        x: Начальная точка
        range_: Начальный шаг (удваивается на каждом шаге)
        threshold: Порог изменения f
        precision: Контекст вычисления f
        max_steps: Лимит шагов (None = без лимита)

    Returns:
        x, на котором |f(x) - f(x + range_)| <= threshold

    Raises:
        ConvergenceError: Если задан max_steps и порог не достигнут
    """
    fn = as_function(f)
    x = to_decimal(x)
    step = to_decimal(range_)
    eps = to_decimal(threshold)
    working = precision.working_context()

    # x и range считаются точно, в working_context вычисляется только f
    steps = 0
    while True:
        x_next = exact_add(x, step)
        with localcontext(working):
            delta = diff(fn.at(x), fn.at(x_next))
        logger.debug("x=%s range=%s delta=%s", x, step, delta)
        if delta <= eps:
            break
        if max_steps is not None and steps >= max_steps:
            raise ConvergenceError(
                f"Upper border not found within {steps} steps: "
                f"x={x}, range={step}, delta={delta}, threshold={eps}",
                iterations=steps,
                delta=delta,
            )
        x = x_next
        step = exact_add(step, step)
        steps += 1

    logger.info("Upper border: x=%s (steps=%d)", x, steps)
    return x


def approx_upper_border(
    f: FunctionLike,
    precision: PrecisionContext = DEFAULT_PRECISION,
) -> Decimal:
    """
    Upper border для интегрирования до +inf с порогом 10^-P.

    Лимит шагов берётся из precision.max_iterations.

    Examples:
        >>> approx_upper_border(lambda x: 1 / (1 + x), PrecisionContext(digits=3))
        Decimal('511')
    """
    return rec_upper_border(
        f,
        ZERO,
        ONE,
        precision.threshold,
        precision,
        max_steps=precision.max_iterations,
    )
