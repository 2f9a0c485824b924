"""Utility helpers for roster parsing."""
from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Any, Optional
from urllib.parse import urlparse

_WHITESPACE_RE = re.compile(r"\s+")
_NON_ALNUM_RE = re.compile(r"[^0-9a-z]+")
_TRUE_VALUES = {"1", "true", "yes", "y", "t"}
_FALSE_VALUES = {"0", "false", "no", "n", "f", ""}
_FORMATS = {".json": "json", ".csv": "csv"}


def clean_text(value: str) -> str:
    return _WHITESPACE_RE.sub(" ", value).strip()


def column_key(key: str) -> str:
    """Fold ``lastName``, ``last_name`` and ``Last Name`` to ``lastname``."""
    return _NON_ALNUM_RE.sub("", key.lower())


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return bool(value)
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def parse_int(value: Any, default: Optional[int] = None) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        if default is None:
            raise ValueError("missing integer value")
        return default
    if isinstance(value, bool):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"not an integer: {value!r}")
        return int(value)
    return int(str(value).strip())


def parse_float(value: Any, default: float = 0.0) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    return float(value)


def is_remote(source: str) -> bool:
    return urlparse(source).scheme.lower() in {"http", "https"}


def detect_format(source: str, content_type: str | None = None) -> Optional[str]:
    """Return ``"json"`` or ``"csv"`` for a roster path or URL, if known."""
    path = urlparse(source).path if is_remote(source) else source
    suffix = PurePosixPath(path.replace("\\", "/")).suffix.lower()
    if suffix in _FORMATS:
        return _FORMATS[suffix]
    if content_type:
        media_type = content_type.split(";")[0].strip().lower()
        if "json" in media_type:
            return "json"
        if media_type in {"text/csv", "application/csv", "text/plain"}:
            return "csv"
    return None
