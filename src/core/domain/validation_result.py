"""
ValidationResult — Результат проверки входных данных

Value-объект: создаётся заново при каждом вызове валидатора.
Валидаторы НЕ бросают исключений, ошибка возвращается как данные.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationResult:
    """Результат валидации."""

    is_valid: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Успешная проверка (error=None)."""
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        """Неуспешная проверка с человекочитаемой причиной."""
        return cls(is_valid=False, error=error)

    def __bool__(self) -> bool:
        return self.is_valid
