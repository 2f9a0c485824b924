"""Equality and natural ordering for student records."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ..config import ComparisonConfig
from .models import StudentRecord

logger = logging.getLogger(__name__)


class RecordComparisonError(TypeError):
    """Raised when a record is ordered against a missing or foreign value."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"cannot order a StudentRecord against {type(value).__name__}: {value!r}"
        )
        self.value = value


def _sign(a: str, b: str) -> int:
    return (a > b) - (a < b)


class RecordComparator:
    """Decides equality and relative order of two student records."""

    def __init__(self, config: Optional[ComparisonConfig] = None) -> None:
        self.config = config or ComparisonConfig()

    def equals(self, a: Optional[StudentRecord], b: Any) -> bool:
        """True when both are records sharing last name, first name and ID.

        Never raises: a missing or non-record value on either side compares
        unequal.
        """
        if not isinstance(a, StudentRecord) or not isinstance(b, StudentRecord):
            return False
        return (
            a.last_name == b.last_name
            and a.first_name == b.first_name
            and a.student_id == b.student_id
        )

    def compare(self, a: StudentRecord, b: Any) -> int:
        """Return -1, 0 or 1 as ``a`` sorts before, with, or after ``b``.

        Only the last and first names take part. Comparing against a missing
        or non-record value raises :class:`RecordComparisonError` unless the
        comparator is lenient, in which case the pair is treated as tied.
        """
        for value in (a, b):
            if not isinstance(value, StudentRecord):
                if self.config.strict:
                    raise RecordComparisonError(value)
                logger.warning("Treating comparison against %r as a tie", value)
                return 0
        result = _sign(a.last_name, b.last_name)
        if result == 0:
            result = _sign(a.first_name, b.first_name)
        return result

    @staticmethod
    def sort_key(record: StudentRecord) -> tuple[str, str]:
        return record.sort_key()

    def sort(
        self, records: Iterable[StudentRecord], reverse: bool = False
    ) -> list[StudentRecord]:
        items = list(records)
        for item in items:
            if not isinstance(item, StudentRecord):
                raise RecordComparisonError(item)
        return sorted(items, key=self.sort_key, reverse=reverse)


_DEFAULT = RecordComparator()


def records_equal(a: Optional[StudentRecord], b: Any) -> bool:
    return _DEFAULT.equals(a, b)


def compare_records(a: StudentRecord, b: Any) -> int:
    return _DEFAULT.compare(a, b)


__all__ = [
    "RecordComparator",
    "RecordComparisonError",
    "compare_records",
    "records_equal",
]
