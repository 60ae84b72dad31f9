"""
HistoryEntry — Запись журнала вычислений

Immutable Pydantic модель одной записи истории.
Создаётся журналом (src.history) при каждом save() и при импорте;
никогда не изменяется после создания.

JSON-представление (см. contracts/schema/history_export.json):
    {"operation": str, "inputs": [number, ...], "result": number,
     "timestamp": ISO-8601 string}
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class HistoryEntry(BaseModel):
    """
    Запись о выполненном вычислении.

    Immutable модель (frozen=True). inputs хранится как tuple,
    чтобы запись нельзя было изменить через ссылку на список.
    """

    operation: str = Field(..., description="Имя/тег операции (например, 'add')")
    inputs: tuple[float, ...] = Field(..., description="Входные значения в исходном порядке")
    result: float = Field(..., description="Результат вычисления (может быть NaN)")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Момент сохранения записи (UTC)",
    )

    model_config = {"frozen": True}  # Immutable

    def to_json_dict(self) -> dict:
        """
        JSON-совместимый dict (timestamp → ISO-8601 строка).

        Returns:
            dict с ключами operation, inputs, result, timestamp
        """
        return {
            "operation": self.operation,
            "inputs": list(self.inputs),
            "result": self.result,
            "timestamp": self.timestamp.isoformat(),
        }
