"""Student record comparison and roster reporting toolkit."""
from __future__ import annotations

from importlib import import_module
from typing import Any

from . import utils
from .config import ComparisonConfig, LoaderConfig, ReportConfig

__all__ = [
    "ComparisonConfig",
    "LoaderConfig",
    "ReportConfig",
    "StudentRecord",
    "RecordComparator",
    "RosterLoader",
    "ReportBuilder",
    "utils",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - import side effect
    if name in {"StudentRecord", "RecordComparator"}:
        module = import_module(".core", __name__)
        return getattr(module, name)
    if name == "RosterLoader":
        module = import_module(".loader", __name__)
        return getattr(module, name)
    if name == "ReportBuilder":
        module = import_module(".report", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
