"""
Coefficients — Модель коэффициентов квадратного уравнения

Immutable Pydantic модель для a*x**2 + b*x + c = 0.
NaN/Inf допускаются моделью: их классификация выполняется решателем.
"""

from pydantic import BaseModel, Field


class Coefficients(BaseModel):
    """
    Коэффициенты квадратного уравнения a*x**2 + b*x + c = 0.

    Immutable модель (frozen=True). Значения не проверяются на конечность,
    чтобы решатель мог вернуть типизированную ошибку.
    """

    a: float = Field(..., description="Коэффициент при x**2")
    b: float = Field(..., description="Коэффициент при x")
    c: float = Field(..., description="Свободный член")

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[float, float, float]:
        """Коэффициенты в порядке (a, b, c)."""
        return (self.a, self.b, self.c)
