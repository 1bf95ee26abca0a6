"""Исключения quadrature engine."""

from decimal import Decimal
from typing import Optional


class QuadratureError(Exception):
    """Базовое исключение численного интегрирования."""


class InvalidIntervalError(QuadratureError, ValueError):
    """Нижняя граница больше верхней: start > end."""


class InvalidPartsError(QuadratureError, ValueError):
    """Число частей разбиения не является положительным целым."""


class ConvergenceError(QuadratureError):
    """
    Порог 10^-P не достигнут за max_iterations итераций.

    Возникает только при заданном PrecisionContext.max_iterations.
    Без лимита adaptive integration и поиск upper border не завершаются
    для расходящихся функций.
    """

    def __init__(self, message: str, iterations: int, delta: Optional[Decimal] = None):
        super().__init__(message)
        self.iterations = iterations
        self.delta = delta
