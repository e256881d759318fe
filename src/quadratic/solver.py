"""
Solver — решение квадратного уравнения a*x**2 + b*x + c = 0

Модуль находит вещественные корни уравнения:
- Валидация коэффициентов в фиксированном порядке: Inf → NaN → a ≈ 0
- Дискриминант D = b**2 - 4*a*c
- |D| < eps → один корень -b / (2a)
- D >= eps → два корня (-b + sqrt(D)) / (2a), (-b - sqrt(D)) / (2a)
- иначе → пустой список (комплексно-сопряжённая пара не возвращается)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок проверок фиксирован: первая сработавшая проверка определяет ошибку
2. Арифметика выполняется только после успешной валидации
3. Решатель не имеет состояния: одинаковые входы → одинаковые выходы
"""

import math
from dataclasses import dataclass, field
from typing import Optional

from src.quadratic.domain import (
    Coefficients,
    DiscriminantSign,
    QuadraticSolution,
)
from src.quadratic.errors import (
    CoefficientAEqualToZero,
    CoefficientEqualToInfinity,
    CoefficientEqualToNan,
    QuadraticEquationError,
    QuadraticErrorKind,
)
from src.quadratic.math.numerical_safeguards import (
    EPS_MACHINE,
    any_infinite,
    any_nan,
    compare_with_tolerance,
    is_zero,
    validate_tolerance,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SolverTolerances:
    """Толерантности решателя.

    - a_eps: abs(a) < a_eps → CoefficientAEqualToZero
    - discriminant_eps: abs(D) < discriminant_eps → один корень
    """
    a_eps: float = EPS_MACHINE
    discriminant_eps: float = EPS_MACHINE

    def __post_init__(self):
        validate_tolerance(self.a_eps, "a_eps")
        validate_tolerance(self.discriminant_eps, "discriminant_eps")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SolveResult:
    """Результат решения без исключений."""

    ok: bool
    roots: list[float] = field(default_factory=list)
    error_kind: Optional[QuadraticErrorKind] = None

    # Детали
    details: str = ""


# =============================================================================
# PRIMITIVES
# =============================================================================


def validate_coefficients(
    a: float,
    b: float,
    c: float,
    a_eps: float = EPS_MACHINE,
) -> None:
    """
    Валидация коэффициентов в фиксированном порядке.

    Args:
        a: Коэффициент при x**2
        b: Коэффициент при x
        c: Свободный член
        a_eps: Порог, ниже которого abs(a) считается нулём

    Raises:
        CoefficientEqualToInfinity: если любой коэффициент равен ±Inf
        CoefficientEqualToNan: если любой коэффициент равен NaN
        CoefficientAEqualToZero: если abs(a) < a_eps
    """
    coefficients = (a, b, c)

    if any_infinite(coefficients):
        raise CoefficientEqualToInfinity(f"a={a}, b={b}, c={c}")

    if any_nan(coefficients):
        raise CoefficientEqualToNan(f"a={a}, b={b}, c={c}")

    if is_zero(a, a_eps):
        raise CoefficientAEqualToZero(f"a={a}")


def discriminant(a: float, b: float, c: float) -> float:
    """
    Дискриминант квадратного уравнения.

    Examples:
        >>> discriminant(1.0, 0.0, -1.0)
        4.0
        >>> discriminant(1.0, 2.0, 1.0)
        0.0
    """
    return b * b - 4.0 * a * c


def classify_discriminant(d: float, eps: float = EPS_MACHINE) -> DiscriminantSign:
    """
    Классификация дискриминанта с учётом epsilon.

    Examples:
        >>> classify_discriminant(-4.0)
        <DiscriminantSign.NEGATIVE: 'NEGATIVE'>
        >>> classify_discriminant(1e-17)
        <DiscriminantSign.ZERO: 'ZERO'>
    """
    sign = compare_with_tolerance(d, eps)
    if sign == 0:
        return DiscriminantSign.ZERO
    elif sign > 0:
        return DiscriminantSign.POSITIVE
    else:
        return DiscriminantSign.NEGATIVE


def _compute_roots(a: float, b: float, d: float, sign: DiscriminantSign) -> list[float]:
    if sign is DiscriminantSign.ZERO:
        return [-b / (2.0 * a)]

    if sign is DiscriminantSign.POSITIVE:
        sqrt_d = math.sqrt(d)
        return [(-b + sqrt_d) / (2.0 * a), (-b - sqrt_d) / (2.0 * a)]

    return []


# =============================================================================
# SOLVER
# =============================================================================


class QuadraticSolver:
    """Решатель квадратного уравнения.

    Stateless: экземпляр хранит только неизменяемые толерантности.
    """

    def __init__(self, tolerances: Optional[SolverTolerances] = None):
        self.tolerances = tolerances if tolerances is not None else SolverTolerances()

    def evaluate(self, a: float, b: float, c: float) -> QuadraticSolution:
        """Полное решение уравнения.

        Args:
            a: Коэффициент при x**2
            b: Коэффициент при x
            c: Свободный член

        Returns:
            QuadraticSolution с дискриминантом, его знаком и корнями

        Raises:
            QuadraticEquationError: при невалидных коэффициентах
        """
        validate_coefficients(a, b, c, self.tolerances.a_eps)

        d = discriminant(a, b, c)
        sign = classify_discriminant(d, self.tolerances.discriminant_eps)

        return QuadraticSolution(
            coefficients=Coefficients(a=a, b=b, c=c),
            discriminant=d,
            discriminant_sign=sign,
            roots=_compute_roots(a, b, d, sign),
        )

    def solve(self, a: float, b: float, c: float) -> list[float]:
        """Вещественные корни уравнения (0, 1 или 2).

        Raises:
            QuadraticEquationError: при невалидных коэффициентах
        """
        validate_coefficients(a, b, c, self.tolerances.a_eps)

        d = discriminant(a, b, c)
        sign = classify_discriminant(d, self.tolerances.discriminant_eps)
        return _compute_roots(a, b, d, sign)

    def try_solve(self, a: float, b: float, c: float) -> SolveResult:
        """Решение без исключений для ошибок валидации коэффициентов."""
        try:
            roots = self.solve(a, b, c)
        except QuadraticEquationError as e:
            return SolveResult(
                ok=False,
                error_kind=e.kind,
                details=str(e),
            )

        return SolveResult(
            ok=True,
            roots=roots,
            details=f"вещественных корней: {len(roots)}",
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


_DEFAULT_SOLVER = QuadraticSolver()


def solve(a: float, b: float, c: float) -> list[float]:
    """
    Решение a*x**2 + b*x + c = 0 с толерантностями по умолчанию.

    Args:
        a: Коэффициент при x**2
        b: Коэффициент при x
        c: Свободный член

    Returns:
        Список вещественных корней (0, 1 или 2 элемента)

    Raises:
        CoefficientEqualToInfinity: если любой коэффициент равен ±Inf
        CoefficientEqualToNan: если любой коэффициент равен NaN
        CoefficientAEqualToZero: если abs(a) < EPS_MACHINE

    Examples:
        >>> solve(1.0, 0.0, 1.0)
        []
        >>> solve(1.0, 0.0, -1.0)
        [1.0, -1.0]
        >>> solve(1.0, 2.0, 1.0)
        [-1.0]
    """
    return _DEFAULT_SOLVER.solve(a, b, c)


def evaluate(a: float, b: float, c: float) -> QuadraticSolution:
    """Полное решение с толерантностями по умолчанию."""
    return _DEFAULT_SOLVER.evaluate(a, b, c)


def try_solve(a: float, b: float, c: float) -> SolveResult:
    """Решение без исключений с толерантностями по умолчанию."""
    return _DEFAULT_SOLVER.try_solve(a, b, c)
