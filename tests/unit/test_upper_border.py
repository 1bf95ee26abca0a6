"""
Тесты для Upper-Bound Approximator

Проверяемые инварианты:
1. Последовательность (x, range) = (0,1), (1,2), (3,4), (7,8), ...
2. Возвращается x, на котором |f(x) - f(x + range)| <= 10^-P
3. Монотонность по точности для убывающих f
4. Итеративная реализация: нет ограничения глубины рекурсии
5. ConvergenceError при исчерпании max_iterations
"""

import logging
from decimal import Decimal

import pytest

from src.core.domain import PrecisionContext
from src.quadrature import ConvergenceError, approx_upper_border, rec_upper_border


def reciprocal(x: Decimal) -> Decimal:
    """1 / (1 + x): на шаге k разница равна 2^-(k+1)."""
    return 1 / (1 + x)


def gaussian(x: Decimal) -> Decimal:
    return (-(x * x) / 2).exp()


# =============================================================================
# ТЕСТЫ: approx_upper_border
# =============================================================================


class TestApproxUpperBorder:

    def test_reciprocal_three_digits(self) -> None:
        """2^-10 <= 10^-3 < 2^-9 → x = 2^9 - 1"""
        assert approx_upper_border(reciprocal, PrecisionContext(digits=3)) == Decimal(511)

    def test_reciprocal_six_digits(self) -> None:
        """2^-20 <= 10^-6 < 2^-19 → x = 2^19 - 1"""
        assert approx_upper_border(reciprocal, PrecisionContext(digits=6)) == Decimal(524287)

    def test_gaussian(self) -> None:
        assert approx_upper_border(gaussian, PrecisionContext(digits=8)) == Decimal(7)

    def test_constant_function_returns_zero(self) -> None:
        assert approx_upper_border(lambda x: Decimal(5), PrecisionContext()) == 0

    @pytest.mark.parametrize("f", [reciprocal, gaussian])
    def test_monotonic_in_precision(self, f) -> None:
        """Более точный контекст не уменьшает границу."""
        borders = [approx_upper_border(f, PrecisionContext(digits=p)) for p in (2, 4, 6, 8)]
        assert borders == sorted(borders)

    def test_deep_search_without_recursion(self) -> None:
        """~200 шагов: итеративная реализация не упирается в стек."""
        border = approx_upper_border(reciprocal, PrecisionContext(digits=60))
        assert border == Decimal(2 ** 199 - 1)

    def test_iteration_cap(self) -> None:
        """Растущая функция: без лимита поиск не завершается."""
        capped = PrecisionContext(digits=8, max_iterations=5)
        with pytest.raises(ConvergenceError, match="Upper border not found within 5 steps") as exc:
            approx_upper_border(lambda x: x, capped)
        assert exc.value.iterations == 5


# =============================================================================
# ТЕСТЫ: rec_upper_border
# =============================================================================


class TestRecUpperBorder:

    def test_step_sequence(self) -> None:
        """Точки проверки: (x, x + range) с x = 2^k - 1, range = 2^k."""
        calls = []

        def f(x: Decimal) -> Decimal:
            calls.append(x)
            return reciprocal(x)

        rec_upper_border(f, 0, 1, Decimal("1e-3"), PrecisionContext(digits=3))
        pairs = list(zip(calls[::2], calls[1::2]))
        assert pairs[:4] == [(0, 1), (1, 3), (3, 7), (7, 15)]
        assert pairs[-1] == (511, 1023)

    def test_steps_exact_beyond_working_precision(self) -> None:
        """x и range не округляются до P + guard_digits цифр.

        1/sqrt(1+x) убывает медленно: при P=12 граница 2^77 - 1 имеет
        24 цифры, больше чем 22 цифры working_context.
        """
        precision = PrecisionContext(digits=12)
        calls = []

        def f(x: Decimal) -> Decimal:
            calls.append(x)
            return 1 / (1 + x).sqrt()

        border = approx_upper_border(f, precision)
        assert border == Decimal(2 ** 77 - 1)
        assert border.as_tuple().exponent == 0
        assert calls[-1] == Decimal(2 ** 78 - 1)

        pairs = list(zip(calls[::2], calls[1::2]))
        assert pairs == [(Decimal(2 ** k - 1), Decimal(2 ** (k + 1) - 1)) for k in range(78)]

    def test_custom_start(self) -> None:
        border = rec_upper_border(reciprocal, 511, 512, Decimal("1e-3"))
        assert border == Decimal(511)

    def test_threshold_is_strict_upper(self) -> None:
        """Разница, равная порогу, останавливает поиск."""
        # |f(0) - f(1)| = 1/2
        assert rec_upper_border(reciprocal, 0, 1, Decimal("0.5")) == 0
        assert rec_upper_border(reciprocal, 0, 1, Decimal("0.49")) == 1

    def test_max_steps(self) -> None:
        with pytest.raises(ConvergenceError) as exc:
            rec_upper_border(lambda x: x * x, 0, 1, Decimal("1e-8"), max_steps=3)
        assert exc.value.iterations == 3

    def test_border_logged(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="src.quadrature.upper_border"):
            rec_upper_border(reciprocal, 0, 1, Decimal("1e-3"))
        assert "Upper border: x=511 (steps=9)" in [r.getMessage() for r in caplog.records]
