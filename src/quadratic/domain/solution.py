"""
QuadraticSolution — Модель решения квадратного уравнения

Immutable Pydantic модель, представляющая результат решения:
- исходные коэффициенты
- дискриминант D = b**2 - 4*a*c и его знак с учётом epsilon
- упорядоченный список вещественных корней (0, 1 или 2)
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.quadratic.domain.coefficients import Coefficients


# =============================================================================
# ENUMS
# =============================================================================


class DiscriminantSign(str, Enum):
    """
    Знак дискриминанта с учётом epsilon.

    NEGATIVE → пара комплексно-сопряжённых корней (не возвращается)
    ZERO → один (кратный) корень
    POSITIVE → два различных корня
    """

    NEGATIVE = "NEGATIVE"
    ZERO = "ZERO"
    POSITIVE = "POSITIVE"


# Количество вещественных корней для каждого знака дискриминанта
ROOT_COUNT: Final[dict[DiscriminantSign, int]] = {
    DiscriminantSign.NEGATIVE: 0,
    DiscriminantSign.ZERO: 1,
    DiscriminantSign.POSITIVE: 2,
}


# =============================================================================
# SOLUTION MODEL
# =============================================================================


class QuadraticSolution(BaseModel):
    """
    Решение квадратного уравнения.

    Immutable модель (frozen=True). Количество корней всегда согласовано
    со знаком дискриминанта (см. ROOT_COUNT).
    """

    coefficients: Coefficients = Field(..., description="Коэффициенты уравнения")
    discriminant: float = Field(..., description="Дискриминант b**2 - 4*a*c")
    discriminant_sign: DiscriminantSign = Field(
        ..., description="Знак дискриминанта с учётом epsilon"
    )
    roots: list[float] = Field(
        ..., max_length=2, description="Вещественные корни в порядке вычисления"
    )

    model_config = {"frozen": True}

    @field_validator("roots")
    @classmethod
    def validate_root_count(cls, v: list[float], info) -> list[float]:
        """Проверка, что количество корней соответствует знаку дискриминанта"""
        if "discriminant_sign" in info.data:
            sign = info.data["discriminant_sign"]
            expected = ROOT_COUNT[sign]
            if len(v) != expected:
                raise ValueError(
                    f"discriminant_sign {sign.value} requires {expected} roots, got {len(v)}"
                )
        return v

    @property
    def root_count(self) -> int:
        """Количество вещественных корней."""
        return len(self.roots)

    @property
    def has_real_roots(self) -> bool:
        """True если уравнение имеет хотя бы один вещественный корень."""
        return bool(self.roots)
