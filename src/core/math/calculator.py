"""
Calculator — Калькулятор с аккумулятором

Единственный изменяемый регистр (float), начальное значение 0.
Операции применяют чистые функции из arithmetic к (регистр, value)
и записывают результат обратно в регистр. Каждая операция возвращает
self для цепочек вызовов:

    Calculator().add(10).multiply(2).subtract(5).divide(3).get_value()

ИНВАРИАНТ: ошибка в divide() НЕ изменяет регистр.
"""

from src.core.math.arithmetic import add, divide, multiply, subtract


class Calculator:
    """Калькулятор с одним аккумулятором и fluent-интерфейсом."""

    def __init__(self, initial_value: float = 0.0):
        """
        Args:
            initial_value: начальное значение регистра (default 0.0)
        """
        self._current_value = initial_value

    def get_value(self) -> float:
        """Текущее значение регистра."""
        return self._current_value

    def reset(self) -> "Calculator":
        """Сброс регистра в 0 (независимо от initial_value)."""
        self._current_value = 0.0
        return self

    def add(self, value: float) -> "Calculator":
        self._current_value = add(self._current_value, value)
        return self

    def subtract(self, value: float) -> "Calculator":
        self._current_value = subtract(self._current_value, value)
        return self

    def multiply(self, value: float) -> "Calculator":
        self._current_value = multiply(self._current_value, value)
        return self

    def divide(self, value: float) -> "Calculator":
        """
        Деление регистра на value.

        Raises:
            DivisionByZeroError: если value == 0 (регистр не изменяется)
        """
        # divide() бросает исключение до присваивания
        self._current_value = divide(self._current_value, value)
        return self

    def __repr__(self) -> str:
        return f"Calculator(value={self._current_value!r})"
