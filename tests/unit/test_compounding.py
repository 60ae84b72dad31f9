"""
Тесты для Compounding — сложные проценты

Проверяемые инварианты:
1. C(n) = C(0) × (1 + taux/100) ^ n
2. taux == 0 → капитал не меняется
3. Область определения: capital >= 0, taux ∈ [0, 100], années >= 0
4. Порядок проверок: capital → taux → années
5. Траектория: длина n + 1, последний элемент = calculate_interets_composes
"""

import math

import pytest

from src.core.math.compounding import (
    TAUX_ANNUEL_MAX,
    TAUX_ANNUEL_MIN,
    InvalidArgumentError,
    calculate_interets_composes,
    compound_interest_trajectory,
)


# =============================================================================
# ТЕСТЫ: calculate_interets_composes
# =============================================================================


class TestCalculateInteretsComposes:
    """Тесты calculate_interets_composes: формула и область определения."""

    def test_compound_interest(self):
        """1000 при 5% на 2 года = 1102.50; при 10% на 3 года = 1331."""
        assert calculate_interets_composes(1000, 5, 2) == pytest.approx(1102.5)
        assert calculate_interets_composes(1000, 10, 3) == pytest.approx(1331.0)

    def test_zero_rate(self):
        assert calculate_interets_composes(1000, 0, 5) == 1000

    def test_zero_years(self):
        assert calculate_interets_composes(1000, 7.5, 0) == 1000

    def test_zero_capital(self):
        assert calculate_interets_composes(0, 5, 10) == 0

    def test_fractional_years(self):
        """Дробное количество лет — стандартное возведение в степень."""
        assert calculate_interets_composes(100, 21, 0.5) == pytest.approx(110.0)

    def test_rate_bounds_inclusive(self):
        assert calculate_interets_composes(100, TAUX_ANNUEL_MIN, 3) == 100
        assert calculate_interets_composes(100, TAUX_ANNUEL_MAX, 3) == pytest.approx(800.0)

    def test_negative_capital(self):
        with pytest.raises(InvalidArgumentError, match="Capital cannot be negative"):
            calculate_interets_composes(-1000, 5, 2)

    def test_invalid_rate(self):
        with pytest.raises(InvalidArgumentError, match="Interest rate must be between 0 and 100"):
            calculate_interets_composes(1000, -5, 2)

        with pytest.raises(InvalidArgumentError, match="Interest rate must be between 0 and 100"):
            calculate_interets_composes(1000, 150, 2)

    def test_negative_years(self):
        with pytest.raises(InvalidArgumentError, match="Number of years cannot be negative"):
            calculate_interets_composes(1000, 5, -2)

    def test_validation_order(self):
        """Все аргументы невалидны → сообщается ошибка capital."""
        with pytest.raises(InvalidArgumentError, match="Capital"):
            calculate_interets_composes(-1, 150, -2)

        with pytest.raises(InvalidArgumentError, match="Interest rate"):
            calculate_interets_composes(1, 150, -2)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_interets_composes(-1, 5, 1)


# =============================================================================
# ТЕСТЫ: compound_interest_trajectory
# =============================================================================


class TestCompoundInterestTrajectory:
    """Тесты compound_interest_trajectory."""

    def test_basic_trajectory(self):
        assert compound_interest_trajectory(1000, 50, 2) == [1000, 1500.0, 2250.0]

    def test_zero_years(self):
        assert compound_interest_trajectory(1000, 5, 0) == [1000]

    def test_length(self):
        assert len(compound_interest_trajectory(100, 3, 10)) == 11

    def test_last_matches_closed_form(self):
        trajectory = compound_interest_trajectory(2500, 4.2, 15)
        assert trajectory[-1] == pytest.approx(calculate_interets_composes(2500, 4.2, 15))

    def test_monotonic_non_decreasing(self):
        trajectory = compound_interest_trajectory(100, 3, 20)
        assert all(b >= a for a, b in zip(trajectory, trajectory[1:]))

    def test_domain_checks_shared(self):
        with pytest.raises(InvalidArgumentError, match="Capital cannot be negative"):
            compound_interest_trajectory(-1, 5, 2)

        with pytest.raises(InvalidArgumentError, match="Interest rate"):
            compound_interest_trajectory(100, 101, 2)

        with pytest.raises(InvalidArgumentError, match="Number of years cannot be negative"):
            compound_interest_trajectory(100, 5, -1)

    def test_fractional_years_rejected(self):
        with pytest.raises(InvalidArgumentError, match="integer"):
            compound_interest_trajectory(100, 5, 2.5)


# =============================================================================
# ТЕСТЫ: Переполнение float
# =============================================================================


class TestCompoundingOverflow:
    """Переполнение float внутри области определения → inf, без OverflowError."""

    def test_closed_form_overflow_returns_inf(self):
        assert calculate_interets_composes(1, 100, 2000) == math.inf

    def test_trajectory_overflow_matches_closed_form(self):
        trajectory = compound_interest_trajectory(1, 100, 2000)
        assert trajectory[-1] == math.inf
        assert trajectory[-1] == calculate_interets_composes(1, 100, 2000)

    def test_zero_capital_stays_zero(self):
        """0 × inf не превращается в NaN."""
        assert calculate_interets_composes(0, 100, 2000) == 0
        assert compound_interest_trajectory(0, 100, 2000)[-1] == 0
