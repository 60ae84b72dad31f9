"""History — журнал вычислений с ограниченной ёмкостью и JSON export/import."""

from .history_log import (
    HISTORY_MAX_ENTRIES_DEFAULT,
    History,
    HistoryConfig,
    HistoryImportError,
)

__all__ = [
    "HISTORY_MAX_ENTRIES_DEFAULT",
    "History",
    "HistoryConfig",
    "HistoryImportError",
]
