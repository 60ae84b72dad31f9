"""History Log — ограниченный журнал вычислений.

- Упорядоченная последовательность HistoryEntry (порядок вставки)
- Фиксированная ёмкость max_entries (default 100)
- FIFO-вытеснение: при переполнении удаляется ровно одна самая старая запись
- Export/import в JSON (контракт contracts/schema/history_export.json)

Инварианты:
- len(history) <= max_entries всегда (включая после import_json при
  truncate_on_import=True)
- get_all() возвращает копию, изменение копии не влияет на журнал
- Неуспешный import_json не изменяет журнал
"""

import json
import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Final, Iterator, List, Optional, Sequence

import jsonschema
import pydantic

from src.core.contracts import validate_history_export
from src.core.domain.history_entry import HistoryEntry

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

HISTORY_MAX_ENTRIES_DEFAULT: Final[int] = 100

IMPORT_ERROR_PREFIX: Final[str] = "Failed to import history: "


# =============================================================================
# EXCEPTIONS
# =============================================================================


class HistoryImportError(ValueError):
    """Невалидные данные для import_json (журнал не изменён)."""
    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class HistoryConfig:
    """Конфигурация журнала.

    truncate_on_import — после импорта оставить только последние
    max_entries записей (самые старые отбрасываются).
    export_indent — отступ JSON в export_json().
    """
    truncate_on_import: bool = True
    export_indent: int = 2


# =============================================================================
# HISTORY
# =============================================================================


class History:
    """Журнал вычислений с ограниченной ёмкостью.

    Владелец журнала — один вызывающий код; синхронизация не выполняется.
    """

    def __init__(
        self,
        max_entries: int = HISTORY_MAX_ENTRIES_DEFAULT,
        config: Optional[HistoryConfig] = None
    ):
        """
        Args:
            max_entries: максимальное количество записей (>= 1)
            config: конфигурация журнала (default HistoryConfig())

        Raises:
            ValueError: если max_entries не целое >= 1
        """
        if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries < 1:
            raise ValueError(f"max_entries must be an integer >= 1, got {max_entries!r}")

        self.max_entries = max_entries
        self.config = config or HistoryConfig()

        self._entries: deque[HistoryEntry] = deque()

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def save(self, operation: str, inputs: Sequence[float], result: float) -> HistoryEntry:
        """Добавление записи с текущим временем (UTC).

        Если после вставки длина превышает max_entries, удаляется
        ровно одна самая старая запись.

        Returns:
            Созданная запись
        """
        entry = HistoryEntry(
            operation=operation,
            inputs=tuple(inputs),
            result=result,
            timestamp=datetime.now(timezone.utc),
        )

        self._entries.append(entry)

        if len(self._entries) > self.max_entries:
            evicted = self._entries.popleft()
            logger.debug(
                "History capacity %d exceeded, evicted oldest entry %r",
                self.max_entries, evicted.operation,
            )

        return entry

    def clear(self) -> None:
        """Удаление всех записей."""
        logger.info("Clearing history (%d entries)", len(self._entries))
        self._entries.clear()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_all(self) -> List[HistoryEntry]:
        """Копия всех записей, от самой старой к самой новой."""
        return list(self._entries)

    def get_last(self) -> Optional[HistoryEntry]:
        """Последняя сохранённая запись или None для пустого журнала."""
        return self._entries[-1] if self._entries else None

    def get_by_operation(self, operation: str) -> List[HistoryEntry]:
        """Записи с точным (регистрозависимым) совпадением operation."""
        return [entry for entry in self._entries if entry.operation == operation]

    def get_size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        # Итерация по снимку: журнал можно менять во время обхода
        return iter(self.get_all())

    # -------------------------------------------------------------------------
    # Export / Import
    # -------------------------------------------------------------------------

    def export_json(self) -> str:
        """Сериализация журнала в JSON-массив (timestamp в ISO-8601)."""
        return json.dumps(
            [entry.to_json_dict() for entry in self._entries],
            indent=self.config.export_indent,
        )

    def import_json(self, json_data: str) -> None:
        """Замена журнала записями из JSON (без слияния).

        Args:
            json_data: строка в формате export_json()

        Raises:
            HistoryImportError: невалидный JSON, верхний уровень не массив,
                или запись не соответствует контракту history_export.
                Журнал при этом не изменяется.
        """
        try:
            data = json.loads(json_data)
        except (json.JSONDecodeError, TypeError) as e:
            raise HistoryImportError(f"{IMPORT_ERROR_PREFIX}{e}") from e

        if not isinstance(data, list):
            raise HistoryImportError(f"{IMPORT_ERROR_PREFIX}Invalid data format")

        try:
            validate_history_export(data)
            entries = [HistoryEntry.model_validate(item) for item in data]
        except jsonschema.ValidationError as e:
            raise HistoryImportError(f"{IMPORT_ERROR_PREFIX}{e.message}") from e
        except pydantic.ValidationError as e:
            raise HistoryImportError(f"{IMPORT_ERROR_PREFIX}{e}") from e

        if self.config.truncate_on_import and len(entries) > self.max_entries:
            logger.warning(
                "Imported %d entries exceed capacity %d, keeping the most recent",
                len(entries), self.max_entries,
            )
            entries = entries[-self.max_entries:]

        self._entries = deque(entries)
        logger.info("Imported %d history entries", len(entries))

    def __repr__(self) -> str:
        return f"History(size={len(self._entries)}, max_entries={self.max_entries})"
