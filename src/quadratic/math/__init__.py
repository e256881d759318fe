"""
Math primitives для решателя квадратных уравнений

Численные примитивы с гарантией стабильности сравнений float.
"""

from src.quadratic.math.numerical_safeguards import (
    # Epsilon constants
    EPS_MACHINE,
    EPS_RESIDUAL_ABS,
    EPS_RESIDUAL_REL,
    # NaN/Inf checks
    any_infinite,
    any_nan,
    is_infinite,
    is_nan,
    is_valid_float,
    # Epsilon comparisons
    compare_with_tolerance,
    is_close,
    is_zero,
    # Polynomials
    evaluate_polynomial,
    # Validation
    validate_tolerance,
)

__all__ = [
    # Epsilon constants
    "EPS_MACHINE",
    "EPS_RESIDUAL_ABS",
    "EPS_RESIDUAL_REL",
    # NaN/Inf checks
    "any_infinite",
    "any_nan",
    "is_infinite",
    "is_nan",
    "is_valid_float",
    # Epsilon comparisons
    "compare_with_tolerance",
    "is_close",
    "is_zero",
    # Polynomials
    "evaluate_polynomial",
    # Validation
    "validate_tolerance",
]
