"""Input Validators — проверка пользовательских входов.

Все валидаторы — чистые предикаты:
- Возвращают ValidationResult, НИКОГДА не бросают исключений
- Проверки упорядочены, первая неуспешная проверка побеждает
- Составные валидаторы строятся композицией validate_number + своя проверка

Порядок проверок validate_number:
1. Тип (int/float и т.п., bool НЕ считается числом)
2. NaN
3. Inf
"""

import math
import numbers
from typing import Any, Callable, Final

from src.core.domain.validation_result import ValidationResult


# =============================================================================
# CONSTANTS
# =============================================================================

PERCENTAGE_MIN: Final[float] = 0.0
PERCENTAGE_MAX: Final[float] = 100.0

ERROR_NOT_A_NUMBER: Final[str] = "Value must be a number"
ERROR_NAN: Final[str] = "Value cannot be NaN"
ERROR_NOT_FINITE: Final[str] = "Value must be finite"
ERROR_NEGATIVE: Final[str] = "Value must be positive"
ERROR_PERCENTAGE_RANGE: Final[str] = "Percentage must be between 0 and 100"
ERROR_DIVISION_BY_ZERO: Final[str] = "Division by zero is not allowed"


# =============================================================================
# COMPOSITION
# =============================================================================


def first_failure(*checks: Callable[[], ValidationResult]) -> ValidationResult:
    """Выполняет проверки по порядку и возвращает первую неуспешную.

    Проверки передаются как callables, чтобы следующая проверка
    не выполнялась после первой ошибки.

    Returns:
        Первый ValidationResult с is_valid=False, иначе ValidationResult.ok()
    """
    for check in checks:
        result = check()
        if not result.is_valid:
            return result
    return ValidationResult.ok()


# =============================================================================
# VALIDATORS
# =============================================================================


def validate_number(value: Any) -> ValidationResult:
    """Проверка, что value — конечное число.

    Examples:
        >>> validate_number(3.14).is_valid
        True
        >>> validate_number("5").error
        'Value must be a number'
        >>> validate_number(float("nan")).error
        'Value cannot be NaN'
        >>> validate_number(float("-inf")).error
        'Value must be finite'
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return ValidationResult.fail(ERROR_NOT_A_NUMBER)

    # Целые не бывают NaN, но могут не помещаться во float
    if isinstance(value, numbers.Integral):
        try:
            float(value)
        except OverflowError:
            return ValidationResult.fail(ERROR_NOT_FINITE)
        return ValidationResult.ok()

    if math.isnan(value):
        return ValidationResult.fail(ERROR_NAN)

    if math.isinf(value):
        return ValidationResult.fail(ERROR_NOT_FINITE)

    return ValidationResult.ok()


def validate_positive_number(value: Any) -> ValidationResult:
    """Конечное число >= 0 (ноль допускается)."""

    def _check_sign() -> ValidationResult:
        if value < 0:
            return ValidationResult.fail(ERROR_NEGATIVE)
        return ValidationResult.ok()

    return first_failure(lambda: validate_number(value), _check_sign)


def validate_percentage(value: Any) -> ValidationResult:
    """Конечное число в [0, 100] (границы включены)."""

    def _check_range() -> ValidationResult:
        if value < PERCENTAGE_MIN or value > PERCENTAGE_MAX:
            return ValidationResult.fail(ERROR_PERCENTAGE_RANGE)
        return ValidationResult.ok()

    return first_failure(lambda: validate_number(value), _check_range)


def validate_division(numerator: Any, denominator: Any) -> ValidationResult:
    """Проверка операндов деления.

    Порядок: numerator → denominator → denominator != 0
    """

    def _check_non_zero() -> ValidationResult:
        if denominator == 0:
            return ValidationResult.fail(ERROR_DIVISION_BY_ZERO)
        return ValidationResult.ok()

    return first_failure(
        lambda: validate_number(numerator),
        lambda: validate_number(denominator),
        _check_non_zero,
    )
