"""Side-effect-free building blocks: the record type and its comparator."""
from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "CREDITS_TO_GRADUATE",
    "StudentRecord",
    "RecordComparator",
    "RecordComparisonError",
    "compare_records",
    "records_equal",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effects
    if name in {"CREDITS_TO_GRADUATE", "StudentRecord"}:
        module = import_module(".models", __name__)
        return getattr(module, name)
    if name in {
        "RecordComparator",
        "RecordComparisonError",
        "compare_records",
        "records_equal",
    }:
        module = import_module(".comparer", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
