"""Validation — проверка входов перед вычислениями.

Валидаторы не зависят от арифметики и наоборот:
вызывающий код сам решает, проверять ли входы.
"""

from .input_validators import (
    ERROR_DIVISION_BY_ZERO,
    ERROR_NAN,
    ERROR_NEGATIVE,
    ERROR_NOT_A_NUMBER,
    ERROR_NOT_FINITE,
    ERROR_PERCENTAGE_RANGE,
    first_failure,
    validate_division,
    validate_number,
    validate_percentage,
    validate_positive_number,
)

__all__ = [
    # Error messages
    "ERROR_DIVISION_BY_ZERO",
    "ERROR_NAN",
    "ERROR_NEGATIVE",
    "ERROR_NOT_A_NUMBER",
    "ERROR_NOT_FINITE",
    "ERROR_PERCENTAGE_RANGE",
    # Functions
    "first_failure",
    "validate_division",
    "validate_number",
    "validate_percentage",
    "validate_positive_number",
]
