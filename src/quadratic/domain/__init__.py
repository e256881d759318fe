"""
Domain models.

Contains immutable value objects of the solver: Coefficients, QuadraticSolution.
"""

from src.quadratic.domain.coefficients import Coefficients
from src.quadratic.domain.solution import (
    ROOT_COUNT,
    DiscriminantSign,
    QuadraticSolution,
)

__all__ = [
    "Coefficients",
    "DiscriminantSign",
    "QuadraticSolution",
    "ROOT_COUNT",
]
