"""
Тесты для Solver — решение квадратного уравнения

Проверяемые инварианты:
1. Порядок проверок: Inf → NaN → a ≈ 0
2. Количество корней определяется знаком дискриминанта с учётом epsilon
3. Порядок корней: (-b + sqrt(D)) / (2a), затем (-b - sqrt(D)) / (2a)
4. Корни удовлетворяют уравнению с учётом толерантности
5. Детерминизм: одинаковые входы → одинаковые выходы
"""

import math

import pytest

from src.quadratic import (
    CoefficientAEqualToZero,
    CoefficientEqualToInfinity,
    CoefficientEqualToNan,
    QuadraticEquationError,
    QuadraticErrorKind,
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
from src.quadratic.domain import DiscriminantSign, QuadraticSolution
from src.quadratic.math import EPS_MACHINE, evaluate_polynomial, is_close

INF = float("inf")
NAN = float("nan")


# =============================================================================
# ТЕСТЫ: Корни
# =============================================================================


class TestSolveRoots:
    """Тесты solve: количество и значения корней."""

    def test_roots_are_imaginary(self):
        """D < 0 → пустой список."""
        assert solve(1.0, 0.0, 1.0) == []

    def test_roots_are_real(self):
        """D > 0 → два корня в фиксированном порядке."""
        assert solve(1.0, 0.0, -1.0) == [1.0, -1.0]

    def test_roots_are_equal(self):
        """D = 0 → один кратный корень."""
        assert solve(1.0, 2.0, 1.0) == [-1.0]

    def test_integer_coefficients_accepted(self):
        """Целые коэффициенты обрабатываются как float."""
        assert solve(1, -3, 2) == [2.0, 1.0]

    def test_root_order_with_negative_a(self):
        """При a < 0 первым идёт (-b + sqrt(D)) / (2a), а не больший корень."""
        roots = solve(-1.0, 0.0, 4.0)
        assert roots == [-2.0, 2.0]

    def test_returns_fresh_list(self):
        """Каждый вызов возвращает новый список."""
        first = solve(1.0, 0.0, -1.0)
        first.append(42.0)
        assert solve(1.0, 0.0, -1.0) == [1.0, -1.0]

    def test_tiny_positive_discriminant_treated_as_zero(self):
        """|D| < eps → один корень, даже если D формально > 0."""
        # b**2 - 4ac = 1e-16 < EPS_MACHINE
        a, b = 1.0, 0.0
        c = -0.25e-16
        assert abs(discriminant(a, b, c)) < EPS_MACHINE
        assert solve(a, b, c) == [-0.0]

    def test_tiny_negative_discriminant_treated_as_zero(self):
        """-eps < D < 0 → один корень."""
        a, b = 1.0, 0.0
        c = 0.25e-16
        assert discriminant(a, b, c) < 0
        assert solve(a, b, c) == [-0.0]

    @pytest.mark.parametrize(
        "a,b,c",
        [
            (1.0, -3.0, 2.0),
            (2.0, 5.0, -3.0),
            (0.5, -0.25, -1.5),
            (-3.0, 1.0, 10.0),
            (1e-3, 1.0, 1.0),
            (1e6, -1e3, -7.0),
            (1.0, 2.0, 1.0),
        ],
    )
    def test_roots_satisfy_equation(self, a, b, c):
        """Подстановка корня в a*x**2 + b*x + c даёт 0 с учётом толерантности."""
        roots = solve(a, b, c)
        assert roots

        for root in roots:
            value = evaluate_polynomial([a, b, c], root)
            scale = max(abs(a * root * root), abs(b * root), abs(c), 1.0)
            assert is_close(value / scale, 0.0)

    def test_idempotence(self):
        """Повторный вызов с теми же входами даёт тот же результат."""
        for a, b, c in [(1.0, 0.0, 1.0), (1.0, 0.0, -1.0), (1.0, 2.0, 1.0), (3.0, -7.0, 2.0)]:
            assert solve(a, b, c) == solve(a, b, c)


# =============================================================================
# ТЕСТЫ: Валидация коэффициентов
# =============================================================================


class TestSolveValidation:
    """Тесты solve: ошибки валидации и их порядок."""

    def test_coefficient_a_equal_to_zero(self):
        """a = 0 → CoefficientAEqualToZero."""
        with pytest.raises(CoefficientAEqualToZero):
            solve(0.0, 2.0, 1.0)

    def test_coefficient_a_less_than_epsilon(self):
        """abs(a) < EPS_MACHINE → CoefficientAEqualToZero."""
        with pytest.raises(CoefficientAEqualToZero):
            solve(2.21e-16, 2.0, 1.0)

        with pytest.raises(CoefficientAEqualToZero):
            solve(-2.21e-16, 2.0, 1.0)

    def test_coefficient_a_at_epsilon_is_valid(self):
        """a = EPS_MACHINE уже не считается нулём."""
        roots = solve(EPS_MACHINE, 2.0, 1.0)
        assert len(roots) == 2

    @pytest.mark.parametrize(
        "a,b,c",
        [
            (INF, 2.0, 1.0),
            (1.0, INF, 1.0),
            (1.0, 2.0, INF),
            (-INF, 2.0, 1.0),
        ],
    )
    def test_coefficient_equal_to_infinity(self, a, b, c):
        """Любой бесконечный коэффициент → CoefficientEqualToInfinity."""
        with pytest.raises(CoefficientEqualToInfinity) as exc_info:
            solve(a, b, c)

        assert exc_info.value.kind is QuadraticErrorKind.COEFFICIENT_EQUAL_TO_INFINITY

    @pytest.mark.parametrize(
        "a,b,c",
        [
            (NAN, 2.0, 1.0),
            (1.0, NAN, 1.0),
            (1.0, 2.0, NAN),
        ],
    )
    def test_coefficient_equal_to_nan(self, a, b, c):
        """Любой NaN коэффициент → CoefficientEqualToNan."""
        with pytest.raises(CoefficientEqualToNan) as exc_info:
            solve(a, b, c)

        assert exc_info.value.kind is QuadraticErrorKind.COEFFICIENT_EQUAL_TO_NAN

    def test_infinity_checked_before_nan(self):
        """Inf и NaN одновременно → CoefficientEqualToInfinity."""
        with pytest.raises(CoefficientEqualToInfinity):
            solve(NAN, INF, 1.0)

    def test_nan_checked_before_zero_a(self):
        """NaN и a = 0 одновременно → CoefficientEqualToNan."""
        with pytest.raises(CoefficientEqualToNan):
            solve(0.0, NAN, 1.0)

    def test_infinity_checked_before_zero_a(self):
        """Inf и a = 0 одновременно → CoefficientEqualToInfinity."""
        with pytest.raises(CoefficientEqualToInfinity):
            solve(0.0, 1.0, INF)

    def test_errors_are_value_errors(self):
        """Ошибки решателя перехватываются как ValueError."""
        with pytest.raises(ValueError):
            solve(0.0, 1.0, 1.0)

    def test_validate_coefficients_passes_valid_input(self):
        """Валидные коэффициенты не вызывают ошибок."""
        assert validate_coefficients(1.0, 2.0, 3.0) is None

    def test_validate_coefficients_custom_a_eps(self):
        """a_eps задаёт порог вырождения."""
        with pytest.raises(CoefficientAEqualToZero):
            validate_coefficients(1e-6, 1.0, 1.0, a_eps=1e-3)


# =============================================================================
# ТЕСТЫ: Дискриминант
# =============================================================================


class TestDiscriminant:
    """Тесты discriminant и classify_discriminant."""

    def test_discriminant_values(self):
        """D = b**2 - 4ac."""
        assert discriminant(1.0, 0.0, 1.0) == -4.0
        assert discriminant(1.0, 0.0, -1.0) == 4.0
        assert discriminant(1.0, 2.0, 1.0) == 0.0

    def test_classify(self):
        """Классификация с учётом машинного epsilon."""
        assert classify_discriminant(-4.0) is DiscriminantSign.NEGATIVE
        assert classify_discriminant(4.0) is DiscriminantSign.POSITIVE
        assert classify_discriminant(0.0) is DiscriminantSign.ZERO
        assert classify_discriminant(1e-17) is DiscriminantSign.ZERO
        assert classify_discriminant(-1e-17) is DiscriminantSign.ZERO

    def test_classify_boundary_at_eps(self):
        """D = eps → POSITIVE, D = -eps → NEGATIVE."""
        assert classify_discriminant(EPS_MACHINE) is DiscriminantSign.POSITIVE
        assert classify_discriminant(-EPS_MACHINE) is DiscriminantSign.NEGATIVE

    def test_classify_custom_eps(self):
        """Пользовательский eps расширяет зону нуля."""
        assert classify_discriminant(0.5, eps=1.0) is DiscriminantSign.ZERO


# =============================================================================
# ТЕСТЫ: QuadraticSolver
# =============================================================================


class TestQuadraticSolver:
    """Тесты QuadraticSolver: толерантности, evaluate, try_solve."""

    def test_default_tolerances(self):
        """По умолчанию используются машинные epsilon."""
        solver = QuadraticSolver()
        assert solver.tolerances.a_eps == EPS_MACHINE
        assert solver.tolerances.discriminant_eps == EPS_MACHINE

    def test_invalid_tolerances_raise(self):
        """Неположительные и нечисловые толерантности отклоняются."""
        with pytest.raises(ValueError, match="a_eps must be positive"):
            SolverTolerances(a_eps=0.0)

        with pytest.raises(ValueError, match="discriminant_eps must be positive"):
            SolverTolerances(discriminant_eps=-1e-9)

        with pytest.raises(ValueError, match="not NaN/Inf"):
            SolverTolerances(a_eps=NAN)

    def test_custom_a_eps(self):
        """Увеличенный a_eps отклоняет малые a."""
        solver = QuadraticSolver(SolverTolerances(a_eps=1e-3))
        with pytest.raises(CoefficientAEqualToZero):
            solver.solve(1e-4, 1.0, 1.0)

        assert solve(1e-4, 1.0, 1.0) != []

    def test_custom_discriminant_eps(self):
        """Увеличенный discriminant_eps сливает близкие корни в один."""
        solver = QuadraticSolver(SolverTolerances(discriminant_eps=1e-3))
        # D = 1e-4
        roots = solver.solve(1.0, 0.0, -0.25e-4)
        assert roots == [-0.0]

    def test_evaluate_returns_solution(self):
        """evaluate возвращает полную модель решения."""
        solution = evaluate(1.0, 0.0, -1.0)

        assert isinstance(solution, QuadraticSolution)
        assert solution.coefficients.as_tuple() == (1.0, 0.0, -1.0)
        assert solution.discriminant == 4.0
        assert solution.discriminant_sign is DiscriminantSign.POSITIVE
        assert solution.roots == [1.0, -1.0]
        assert solution.root_count == 2

    def test_evaluate_matches_solve(self):
        """evaluate и solve дают одинаковые корни."""
        for a, b, c in [(1.0, 0.0, 1.0), (1.0, 2.0, 1.0), (2.0, -3.0, -5.0)]:
            assert evaluate(a, b, c).roots == solve(a, b, c)

    def test_evaluate_no_real_roots(self):
        """D < 0 → решение без корней."""
        solution = evaluate(1.0, 0.0, 1.0)
        assert solution.discriminant_sign is DiscriminantSign.NEGATIVE
        assert not solution.has_real_roots

    def test_evaluate_raises_on_invalid(self):
        """evaluate применяет ту же валидацию."""
        with pytest.raises(QuadraticEquationError):
            evaluate(0.0, 1.0, 1.0)

    def test_try_solve_success(self):
        """try_solve возвращает корни в SolveResult."""
        result = try_solve(1.0, 2.0, 1.0)

        assert isinstance(result, SolveResult)
        assert result.ok
        assert result.roots == [-1.0]
        assert result.error_kind is None

    def test_try_solve_success_without_roots(self):
        """D < 0 — это успех с пустым списком корней."""
        result = try_solve(1.0, 0.0, 1.0)
        assert result.ok
        assert result.roots == []

    @pytest.mark.parametrize(
        "a,b,c,kind",
        [
            (0.0, 2.0, 1.0, QuadraticErrorKind.COEFFICIENT_A_EQUAL_TO_ZERO),
            (INF, 2.0, 1.0, QuadraticErrorKind.COEFFICIENT_EQUAL_TO_INFINITY),
            (1.0, NAN, 1.0, QuadraticErrorKind.COEFFICIENT_EQUAL_TO_NAN),
        ],
    )
    def test_try_solve_failure(self, a, b, c, kind):
        """try_solve не бросает исключений для ошибок валидации."""
        result = try_solve(a, b, c)

        assert not result.ok
        assert result.roots == []
        assert result.error_kind is kind
        assert result.details

    def test_solver_is_reusable(self):
        """Один экземпляр решателя используется многократно без состояния."""
        solver = QuadraticSolver()
        first = solver.solve(1.0, -3.0, 2.0)
        solver.try_solve(0.0, 1.0, 1.0)
        second = solver.solve(1.0, -3.0, 2.0)
        assert first == second == [2.0, 1.0]

    def test_huge_coefficients_do_not_raise(self):
        """Переполнение дискриминанта не считается ошибкой валидации."""
        roots = solve(1.0, 1e200, 1.0)
        assert roots == [math.inf, -math.inf]

    def test_nan_discriminant_from_overflow(self):
        """inf - inf в дискриминанте → NaN → NEGATIVE, корней нет."""
        assert math.isnan(discriminant(1e200, 1e200, 1e200))
        assert solve(1e200, 1e200, 1e200) == []

        solution = evaluate(1e200, 1e200, 1e200)
        assert solution.discriminant_sign is DiscriminantSign.NEGATIVE
        assert solution.roots == []

    def test_try_solve_success_details(self):
        """Детали успешного решения на том же языке, что и ошибки."""
        assert try_solve(1.0, 0.0, -1.0).details == "вещественных корней: 2"
        assert try_solve(1.0, 2.0, 1.0).details == "вещественных корней: 1"
        assert try_solve(1.0, 0.0, 1.0).details == "вещественных корней: 0"
