"""
Решатель квадратного уравнения a*x**2 + b*x + c = 0.

Возвращает 0, 1 или 2 вещественных корня либо типизированную ошибку валидации.
"""

from src.quadratic.errors import (
    CoefficientAEqualToZero,
    CoefficientEqualToInfinity,
    CoefficientEqualToNan,
    QuadraticEquationError,
    QuadraticErrorKind,
)
from src.quadratic.solver import (
    QuadraticSolver,
    SolveResult,
    SolverTolerances,
    classify_discriminant,
    discriminant,
    evaluate,
    solve,
    try_solve,
    validate_coefficients,
)

__all__ = [
    # Errors
    "CoefficientAEqualToZero",
    "CoefficientEqualToInfinity",
    "CoefficientEqualToNan",
    "QuadraticEquationError",
    "QuadraticErrorKind",
    # Solver
    "QuadraticSolver",
    "SolveResult",
    "SolverTolerances",
    "classify_discriminant",
    "discriminant",
    "evaluate",
    "solve",
    "try_solve",
    "validate_coefficients",
]
