"""Configuration dataclasses for the student records toolkit."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


DEFAULT_USER_AGENT = "student-records/1.0"


@dataclass(slots=True)
class ComparisonConfig:
    # strict: ordering against a missing or foreign value raises instead of
    # returning 0
    strict: bool = True


@dataclass(slots=True)
class LoaderConfig:
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    encoding: str = "utf-8"
    skip_invalid: bool = False


@dataclass(slots=True)
class ReportConfig:
    output_path: Optional[str] = None
    json_output_path: Optional[str] = None
    title: str = "Student Roster"
    include_summary: bool = True
    reverse: bool = False
