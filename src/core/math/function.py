"""
Function — Унарная функция над Decimal

Любой объект с методом at(x) -> Decimal является Function.
Обычные callable оборачиваются в DecimalFunction через as_function.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Protocol, Union, runtime_checkable


@runtime_checkable
class Function(Protocol):
    """f(x) -> y над Decimal. Чистая функция без побочных эффектов."""

    def at(self, x: Decimal) -> Decimal:
        ...


@dataclass(frozen=True)
class DecimalFunction:
    """Обёртка callable в интерфейс Function."""

    fn: Callable[[Decimal], Decimal]

    def at(self, x: Decimal) -> Decimal:
        return self.fn(x)

    def __call__(self, x: Decimal) -> Decimal:
        return self.fn(x)


FunctionLike = Union[Function, Callable[[Decimal], Decimal]]


def as_function(f: FunctionLike) -> Function:
    """
    Приведение к Function.

    Raises:
        TypeError: Если f не Function и не callable
    """
    if isinstance(f, Function):
        return f
    if callable(f):
        return DecimalFunction(f)
    raise TypeError(f"Expected a Function or callable, got {type(f).__name__}")
