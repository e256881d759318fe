"""
Ошибки валидации коэффициентов квадратного уравнения

Закрытая таксономия ошибок:
- COEFFICIENT_A_EQUAL_TO_ZERO: a неотличим от нуля (уравнение вырождается)
- COEFFICIENT_EQUAL_TO_INFINITY: любой коэффициент равен ±Inf
- COEFFICIENT_EQUAL_TO_NAN: любой коэффициент равен NaN

Каждая ошибка создаётся в точке обнаружения и сразу пробрасывается вызывающему.
"""

from enum import Enum
from typing import Final, Optional


# =============================================================================
# ENUMS
# =============================================================================


class QuadraticErrorKind(str, Enum):
    """Вид ошибки валидации коэффициентов."""

    COEFFICIENT_A_EQUAL_TO_ZERO = "COEFFICIENT_A_EQUAL_TO_ZERO"
    COEFFICIENT_EQUAL_TO_INFINITY = "COEFFICIENT_EQUAL_TO_INFINITY"
    COEFFICIENT_EQUAL_TO_NAN = "COEFFICIENT_EQUAL_TO_NAN"


ERROR_MESSAGES: Final[dict[QuadraticErrorKind, str]] = {
    QuadraticErrorKind.COEFFICIENT_A_EQUAL_TO_ZERO: "коэффициент a не может быть равен 0",
    QuadraticErrorKind.COEFFICIENT_EQUAL_TO_INFINITY: "коэффициент не может быть равен бесконечности",
    QuadraticErrorKind.COEFFICIENT_EQUAL_TO_NAN: "коэффициент не может быть не числом",
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class QuadraticEquationError(ValueError):
    """
    Базовая ошибка решателя квадратного уравнения.

    Ошибки сравниваются по виду (kind): два экземпляра одного класса равны
    независимо от контекста, в котором они были созданы.

    Сам базовый класс не создаётся: используются подклассы с заданным kind.
    """

    kind: Optional[QuadraticErrorKind] = None

    def __init__(self, details: str = ""):
        if self.kind is None:
            raise TypeError(
                f"{type(self).__name__} is abstract, raise one of its subclasses"
            )
        self.details = details
        message = ERROR_MESSAGES[self.kind]
        if details:
            message = f"{message} ({details})"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadraticEquationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class CoefficientAEqualToZero(QuadraticEquationError):
    """abs(a) < eps: уравнение вырождается в линейное или константу."""

    kind = QuadraticErrorKind.COEFFICIENT_A_EQUAL_TO_ZERO


class CoefficientEqualToInfinity(QuadraticEquationError):
    """Один из коэффициентов равен ±Inf."""

    kind = QuadraticErrorKind.COEFFICIENT_EQUAL_TO_INFINITY


class CoefficientEqualToNan(QuadraticEquationError):
    """Один из коэффициентов равен NaN."""

    kind = QuadraticErrorKind.COEFFICIENT_EQUAL_TO_NAN


_ERROR_CLASSES: Final[dict[QuadraticErrorKind, type[QuadraticEquationError]]] = {
    QuadraticErrorKind.COEFFICIENT_A_EQUAL_TO_ZERO: CoefficientAEqualToZero,
    QuadraticErrorKind.COEFFICIENT_EQUAL_TO_INFINITY: CoefficientEqualToInfinity,
    QuadraticErrorKind.COEFFICIENT_EQUAL_TO_NAN: CoefficientEqualToNan,
}


def error_for_kind(kind: QuadraticErrorKind, details: str = "") -> QuadraticEquationError:
    """
    Создание исключения по виду ошибки.

    Examples:
        >>> error_for_kind(QuadraticErrorKind.COEFFICIENT_EQUAL_TO_NAN)
        CoefficientEqualToNan('коэффициент не может быть не числом')
    """
    return _ERROR_CLASSES[QuadraticErrorKind(kind)](details)
