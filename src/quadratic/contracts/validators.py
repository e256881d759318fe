"""
JSON Schema Contract Validators

Модуль для валидации JSON данных решателя согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- quadratic_request.json (коэффициенты a, b, c)
- quadratic_solution.json (дискриминант, его знак и корни)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.quadratic.domain import Coefficients
from src.quadratic.solver import QuadraticSolver


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self):
        # Схемы поставляются вместе с пакетом
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'quadratic_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class QuadraticRequestValidator(ContractValidator):
    """Валидатор для quadratic_request контракта."""

    def __init__(self):
        super().__init__("quadratic_request")


class QuadraticSolutionValidator(ContractValidator):
    """Валидатор для quadratic_solution контракта."""

    def __init__(self):
        super().__init__("quadratic_solution")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_quadratic_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса на решение.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    QuadraticRequestValidator().validate(data)


def validate_quadratic_solution(data: Dict[str, Any]) -> None:
    """
    Валидация решения.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    QuadraticSolutionValidator().validate(data)


def solve_payload(
    data: Dict[str, Any],
    solver: QuadraticSolver | None = None,
) -> Dict[str, Any]:
    """
    Решение уравнения по контракту: request dict → solution dict.

    Args:
        data: Запрос вида {"a": ..., "b": ..., "c": ...}
        solver: Решатель (default: толерантности по умолчанию)

    Returns:
        Решение, прошедшее валидацию quadratic_solution.
        discriminant_sign — обычная строка; float-значения не
        преобразуются, поэтому NaN/Inf сохраняются.

    Raises:
        ValidationError: Если запрос не соответствует схеме
        QuadraticEquationError: Если коэффициенты невалидны
    """
    validate_quadratic_request(data)

    coefficients = Coefficients.model_validate(data)
    solver = solver if solver is not None else QuadraticSolver()
    solution = solver.evaluate(*coefficients.as_tuple())

    # Python-режим сохраняет NaN/Inf; enum приводится к строке вручную
    payload = solution.model_dump()
    payload["discriminant_sign"] = solution.discriminant_sign.value
    validate_quadratic_solution(payload)
    return payload
