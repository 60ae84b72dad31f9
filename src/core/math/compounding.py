"""
Compounding — Сложные проценты

Модуль вычисляет рост капитала по сложной процентной ставке:
- Итоговый капитал через N лет
- Траектория капитала по годам

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. capital < 0 → InvalidArgumentError
2. taux_annuel вне [0, 100] → InvalidArgumentError
3. nombre_annees < 0 → InvalidArgumentError
4. Порядок проверок: capital → taux → années (первая ошибка побеждает)
5. При taux_annuel == 0 капитал не меняется
6. Переполнение float → math.inf (без OverflowError)

ФОРМУЛА:
    C(n) = C(0) × (1 + taux_annuel / 100) ^ n
"""

import math
from typing import Final

from src.core.math.arithmetic import PERCENT_BASE

# =============================================================================
# DOMAIN-ПАРАМЕТРЫ
# =============================================================================

# Допустимый диапазон годовой ставки (в процентах, границы включены)
TAUX_ANNUEL_MIN: Final[float] = 0.0
TAUX_ANNUEL_MAX: Final[float] = 100.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """
    Аргумент вне допустимой области определения формулы.

    Наследуется от ValueError.
    """
    pass


# =============================================================================
# DOMAIN CHECK
# =============================================================================


def _check_compounding_domain(
    capital: float,
    taux_annuel: float,
    nombre_annees: float
) -> None:
    # Порядок важен: сообщается первая нарушенная проверка
    if capital < 0:
        raise InvalidArgumentError("Capital cannot be negative")

    if taux_annuel < TAUX_ANNUEL_MIN or taux_annuel > TAUX_ANNUEL_MAX:
        raise InvalidArgumentError("Interest rate must be between 0 and 100")

    if nombre_annees < 0:
        raise InvalidArgumentError("Number of years cannot be negative")


# =============================================================================
# COMPOUND INTEREST
# =============================================================================


def calculate_interets_composes(
    capital: float,
    taux_annuel: float,
    nombre_annees: float
) -> float:
    """
    Капитал после nombre_annees лет при годовой ставке taux_annuel.

    Формула: capital × (1 + taux_annuel / 100) ^ nombre_annees

    Args:
        capital: Начальный капитал (>= 0)
        taux_annuel: Годовая ставка в процентах, [0, 100]
        nombre_annees: Количество лет (>= 0, может быть дробным)

    Returns:
        Итоговый капитал

    Raises:
        InvalidArgumentError: если любой аргумент вне области определения

    Examples:
        >>> round(calculate_interets_composes(1000, 5, 2), 2)
        1102.5
        >>> calculate_interets_composes(1000, 0, 5)
        1000.0
    """
    _check_compounding_domain(capital, taux_annuel, nombre_annees)

    taux = taux_annuel / PERCENT_BASE

    try:
        growth = (1.0 + taux) ** nombre_annees
    except OverflowError:
        # Переполнение float → inf
        growth = math.inf

    # 0 × inf = NaN; нулевой капитал остаётся нулевым
    if capital == 0:
        return capital * 1.0

    return capital * growth


def compound_interest_trajectory(
    capital: float,
    taux_annuel: float,
    nombre_annees: int
) -> list[float]:
    """
    Траектория капитала на конец каждого года.

    Args:
        capital: Начальный капитал (>= 0)
        taux_annuel: Годовая ставка в процентах, [0, 100]
        nombre_annees: Целое количество лет (>= 0)

    Returns:
        trajectory: [C_0, C_1, ..., C_n], длина nombre_annees + 1

    Raises:
        InvalidArgumentError: если аргумент вне области определения
            или nombre_annees не целое

    Examples:
        >>> compound_interest_trajectory(1000, 50, 2)
        [1000, 1500.0, 2250.0]
        >>> compound_interest_trajectory(1000, 50, 0)
        [1000]
    """
    _check_compounding_domain(capital, taux_annuel, nombre_annees)

    if isinstance(nombre_annees, bool) or not isinstance(nombre_annees, int):
        raise InvalidArgumentError(
            f"Number of years must be an integer, got {nombre_annees!r}"
        )

    growth = 1.0 + taux_annuel / PERCENT_BASE

    trajectory = [capital]
    for _ in range(nombre_annees):
        trajectory.append(trajectory[-1] * growth)

    return trajectory
