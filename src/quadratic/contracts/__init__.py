"""
Contract Validation Module

Модуль для валидации JSON контрактов решателя квадратных уравнений.
"""

from .validators import (
    ContractValidator,
    QuadraticRequestValidator,
    QuadraticSolutionValidator,
    SchemaLoader,
    solve_payload,
    validate_quadratic_request,
    validate_quadratic_solution,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "QuadraticRequestValidator",
    "QuadraticSolutionValidator",
    # Functions
    "solve_payload",
    "validate_quadratic_request",
    "validate_quadratic_solution",
]
