"""Core dataclass representing a single student record."""
from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from typing import Any

CREDITS_TO_GRADUATE = 32.0

_IDENTITY_FIELDS = frozenset({"last_name", "first_name", "student_id"})


@dataclass(slots=True, eq=False)
class StudentRecord:
    """A student's name, ID, credits, billing status and graduation metadata.

    Equality and hashing use the last name, first name and ID only. Ordering
    uses the last name, then the first name, so two records with the same
    names but different IDs sort together without being equal.
    """

    last_name: str
    first_name: str
    student_id: int
    graduation_year: int = 0
    cs_major: bool = False
    credits_earned: float = 0.0
    paid_up: bool = False

    def __post_init__(self) -> None:
        if self.last_name is None or self.first_name is None:
            raise TypeError("StudentRecord requires both a last and a first name")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IDENTITY_FIELDS and hasattr(self, name):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        object.__setattr__(self, name, value)

    def __str__(self) -> str:
        return (
            f"{self.first_name} {self.last_name} (#{self.student_id}), "
            f"class of: {self.graduation_year}"
        )

    def identity_key(self) -> tuple[str, str, int]:
        return (self.last_name, self.first_name, self.student_id)

    def sort_key(self) -> tuple[str, str]:
        return (self.last_name, self.first_name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self.identity_key() == other.identity_key()

    def __hash__(self) -> int:
        return hash(self.identity_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def has_graduation_credits(self) -> bool:
        return self.credits_earned >= CREDITS_TO_GRADUATE

    def to_dict(self) -> dict[str, Any]:
        return {
            "last_name": self.last_name,
            "first_name": self.first_name,
            "student_id": self.student_id,
            "graduation_year": self.graduation_year,
            "cs_major": self.cs_major,
            "credits_earned": self.credits_earned,
            "paid_up": self.paid_up,
        }


__all__ = ["CREDITS_TO_GRADUATE", "StudentRecord"]
