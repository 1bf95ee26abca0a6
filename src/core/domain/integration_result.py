"""
IntegrationResult — Результат адаптивного интегрирования

Immutable Pydantic модель с итоговой оценкой интеграла и диагностикой
сходимости (число частей разбиения, число итераций, последняя разница).
Совместима с JSON Schema (src/core/contracts/schema/integration_report.json).
"""

from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, Field


class IntegrationResult(BaseModel):
    """
    Результат precision-adaptive интегрирования.

    value — оценка при parts частях разбиения, округлённая до digits цифр.
    delta — |a - b| для последней пары оценок (меньше 10^-digits при сходимости).
    """

    value: Decimal = Field(..., description="Оценка интеграла")
    start: Decimal = Field(..., description="Нижняя граница интервала")
    end: Decimal = Field(..., description="Верхняя граница интервала")
    parts: int = Field(..., ge=1, description="Число частей разбиения при сходимости")
    iterations: int = Field(..., ge=0, description="Число удвоений разбиения")
    delta: Decimal = Field(..., ge=0, description="Разница последних двух оценок")
    digits: int = Field(..., ge=1, description="Значащие цифры P")

    model_config = {"frozen": True}

    def to_report(self) -> Dict[str, Any]:
        """JSON-совместимый отчёт (Decimal сериализуется строкой)."""
        return self.model_dump(mode="json")
