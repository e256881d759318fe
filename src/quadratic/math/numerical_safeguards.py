"""
Numerical Safeguards — примитивы для работы с коэффициентами

Модуль обеспечивает численную устойчивость решения квадратного уравнения:
- Epsilon-параметры на основе машинной точности float64
- Проверки NaN/Inf для коэффициентов
- Epsilon-сравнения float с учётом машинной точности
- Вычисление значения многочлена (схема Горнера) для проверки корней

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение с нулём всегда строгое: abs(x) < eps
2. NaN/Inf распознаются до любых арифметических операций
3. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from typing import Final, Iterable, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon для float64 (2.220446049250313e-16)
# Порог, ниже которого коэффициент a и дискриминант считаются нулём
EPS_MACHINE: Final[float] = sys.float_info.epsilon

# Относительная толерантность для проверки невязки корня
EPS_RESIDUAL_REL: Final[float] = 1e-9

# Абсолютная толерантность для проверки невязки корня
EPS_RESIDUAL_ABS: Final[float] = 1e-9


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_infinite(value: float) -> bool:
    """True если value равно +Inf или -Inf."""
    return math.isinf(value)


def is_nan(value: float) -> bool:
    """True если value не является числом."""
    return math.isnan(value)


def any_infinite(values: Iterable[float]) -> bool:
    """
    Проверка, есть ли среди значений бесконечность.

    Examples:
        >>> any_infinite([1.0, float('inf'), 2.0])
        True
        >>> any_infinite([1.0, float('nan')])
        False
    """
    return any(is_infinite(v) for v in values)


def any_nan(values: Iterable[float]) -> bool:
    """
    Проверка, есть ли среди значений NaN.

    Examples:
        >>> any_nan([1.0, float('nan')])
        True
        >>> any_nan([1.0, float('inf')])
        False
    """
    return any(is_nan(v) for v in values)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_zero(value: float, eps: float = EPS_MACHINE) -> bool:
    """
    Проверка, неотличимо ли значение от нуля.

    Сравнение строгое: значение, равное eps, нулём не считается.

    Args:
        value: Проверяемое значение
        eps: Абсолютная толерантность (default: EPS_MACHINE)

    Returns:
        True если abs(value) < eps

    Examples:
        >>> is_zero(0.0)
        True
        >>> is_zero(2.21e-16)
        True
        >>> is_zero(1e-15)
        False
    """
    return abs(value) < eps


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_RESIDUAL_REL,
    abs_tol: float = EPS_RESIDUAL_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare_with_tolerance(value: float, eps: float = EPS_MACHINE) -> int:
    """
    Знак значения с учётом толерантности.

    Args:
        value: Проверяемое значение
        eps: Абсолютная толерантность (default: EPS_MACHINE)

    Returns:
        -1 если value <= -eps
         0 если abs(value) < eps
        +1 если value >= eps

    Examples:
        >>> compare_with_tolerance(4.0)
        1
        >>> compare_with_tolerance(-4.0)
        -1
        >>> compare_with_tolerance(1e-17)
        0
    """
    if is_zero(value, eps):
        return 0
    elif value >= eps:
        return 1
    else:
        return -1


# =============================================================================
# МНОГОЧЛЕНЫ
# =============================================================================


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    """
    Значение многочлена в точке x по схеме Горнера.

    Коэффициенты передаются от старшей степени к младшей:
    [a, b, c] → a*x**2 + b*x + c

    Args:
        coefficients: Коэффициенты многочлена (старшая степень первой)
        x: Точка вычисления

    Returns:
        Значение многочлена

    Examples:
        >>> evaluate_polynomial([1.0, 0.0, -1.0], 1.0)
        0.0
        >>> evaluate_polynomial([2.0, 3.0, 4.0], 2.0)
        18.0
    """
    result = 0.0
    for coefficient in coefficients:
        result = result * x + coefficient
    return result


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_tolerance(eps: float, name: str = "eps") -> None:
    """
    Валидация параметра толерантности.

    Args:
        eps: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если eps не положительный или NaN/Inf
    """
    if not is_valid_float(eps):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {eps}")

    if eps <= 0:
        raise ValueError(f"{name} must be positive, got {eps}")
