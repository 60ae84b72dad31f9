"""
Arithmetic — Базовые операции и финансовые формулы

Модуль содержит чистые функции без состояния:
- Базовые операции (add/subtract/multiply/divide)
- Процент от значения
- TVA (налог) и цена TTC (с налогом) от цены HT

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции детерминированы и не имеют побочных эффектов
2. Деление на ноль (b == 0, точное равенство) → DivisionByZeroError
3. Используется стандартная float-семантика (округление НЕ гарантируется)
4. Валидация входов НЕ выполняется (см. src.validation)
"""

from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# База для процентных вычислений: 20% → 20 / PERCENT_BASE
PERCENT_BASE: Final[float] = 100.0

DIVISION_BY_ZERO_MESSAGE: Final[str] = "Division by zero is not allowed"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZeroError(ZeroDivisionError):
    """
    Деление на ноль в divide() или Calculator.divide().

    Наследуется от ZeroDivisionError, поэтому вызывающий код может
    перехватывать и стандартное исключение.
    """
    pass


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add(a: float, b: float) -> float:
    """
    Сложение.

    Examples:
        >>> add(2, 3)
        5
        >>> add(-5, -3)
        -8
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Вычитание.

    Examples:
        >>> subtract(5, 3)
        2
        >>> subtract(3, 5)
        -2
    """
    return a - b


def multiply(a: float, b: float) -> float:
    """
    Умножение.

    Examples:
        >>> multiply(3, 4)
        12
        >>> multiply(0.5, 0.5)
        0.25
    """
    return a * b


def divide(a: float, b: float) -> float:
    """
    Деление с явной ошибкой при нулевом делителе.

    В отличие от epsilon-защищённого деления, близкие к нулю делители
    НЕ заменяются: проверяется только точное равенство b == 0.

    Args:
        a: Числитель
        b: Знаменатель

    Returns:
        a / b

    Raises:
        DivisionByZeroError: если b == 0 (включая -0.0)

    Examples:
        >>> divide(10, 4)
        2.5
        >>> divide(10, 0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DivisionByZeroError: Division by zero is not allowed
    """
    if b == 0:
        raise DivisionByZeroError(DIVISION_BY_ZERO_MESSAGE)

    return a / b


# =============================================================================
# ПРОЦЕНТЫ И НАЛОГИ
# =============================================================================


def calculate_percentage(value: float, percentage: float) -> float:
    """
    Процент от значения.

    Формула: value * percentage / 100

    Args:
        value: Базовое значение
        percentage: Процент (20 означает 20%, НЕ 0.20)

    Returns:
        Доля value, соответствующая percentage

    Examples:
        >>> calculate_percentage(200, 25)
        50.0
        >>> calculate_percentage(100, 0)
        0.0
    """
    return (value * percentage) / PERCENT_BASE


def calculate_tva(prix_ht: float, taux_tva: float) -> float:
    """
    Сумма налога TVA для цены HT (без налога).

    Алиас calculate_percentage: TVA = prix_ht * taux_tva / 100

    Examples:
        >>> calculate_tva(100, 20)
        20.0
        >>> calculate_tva(100, 5.5)
        5.5
    """
    return calculate_percentage(prix_ht, taux_tva)


def calculate_prix_ttc(prix_ht: float, taux_tva: float) -> float:
    """
    Цена TTC (с налогом) из цены HT и ставки TVA.

    Формула: TTC = HT + TVA(HT, taux)

    Examples:
        >>> calculate_prix_ttc(100, 20)
        120.0
        >>> calculate_prix_ttc(50, 10)
        55.0
    """
    return prix_ht + calculate_tva(prix_ht, taux_tva)
