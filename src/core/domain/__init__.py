"""
Domain models and value objects.

Contains HistoryEntry (calculation log record) and ValidationResult.
"""

from src.core.domain.history_entry import HistoryEntry
from src.core.domain.validation_result import ValidationResult

__all__ = [
    "HistoryEntry",
    "ValidationResult",
]
