"""
Contract Validation Module

Модуль для валидации JSON контрактов fincalc (формат экспорта истории).
"""

from .validators import (
    ContractValidator,
    HistoryExportValidator,
    SchemaLoader,
    validate_history_export,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "HistoryExportValidator",
    # Functions
    "validate_history_export",
]
