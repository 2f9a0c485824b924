"""Report generation for student rosters."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .config import ReportConfig
from .core.comparer import RecordComparator
from .core.models import CREDITS_TO_GRADUATE, StudentRecord


class ReportBuilder:
    def __init__(
        self, config: ReportConfig, comparator: Optional[RecordComparator] = None
    ) -> None:
        self.config = config
        self.comparator = comparator or RecordComparator()

    def build_markdown(self, records: Iterable[StudentRecord]) -> str:
        ordered = self._ordered(records)
        lines: List[str] = []
        lines.append(f"# {self.config.title}")
        lines.append("")
        if self.config.include_summary:
            summary = self._summarise(ordered)
            lines.append("## Summary")
            lines.append(f"- Students: {summary['total']}")
            lines.append(f"- CS majors: {summary['cs_majors']}")
            lines.append(f"- Paid up: {summary['paid_up']}")
            lines.append(
                f"- At or above {CREDITS_TO_GRADUATE:g} credits: {summary['graduation_ready']}"
            )
            lines.append("")
        lines.append("## Students")
        if not ordered:
            lines.append("- No students found.")
        for record in ordered:
            lines.append(f"- {self._render_record(record)}")
        return "\n".join(lines).strip() + "\n"

    def build_json(self, records: Iterable[StudentRecord]) -> Dict[str, Any]:
        ordered = self._ordered(records)
        return {
            "summary": self._summarise(ordered),
            "students": [
                dict(record.to_dict(), display=str(record)) for record in ordered
            ],
        }

    def build_comparison(self, a: StudentRecord, b: StudentRecord) -> str:
        equal = self.comparator.equals(a, b)
        order = self.comparator.compare(a, b)
        if order < 0:
            relation = "sorts before"
        elif order > 0:
            relation = "sorts after"
        else:
            relation = "sorts with"
        lines = [
            "# Record Comparison",
            "",
            f"- First: {a}",
            f"- Second: {b}",
            f"- Equal: {'yes' if equal else 'no'}",
            f"- Order: {a.first_name} {a.last_name} {relation} {b.first_name} {b.last_name}",
        ]
        return "\n".join(lines) + "\n"

    def _ordered(self, records: Iterable[StudentRecord]) -> List[StudentRecord]:
        return self.comparator.sort(records, reverse=self.config.reverse)

    @staticmethod
    def _render_record(record: StudentRecord) -> str:
        flags: List[str] = [f"{record.credits_earned:g} credits"]
        if record.paid_up:
            flags.append("paid up")
        if record.cs_major:
            flags.append("CS major")
        return f"{record} [{', '.join(flags)}]"

    @staticmethod
    def _summarise(records: List[StudentRecord]) -> Dict[str, int]:
        return {
            "total": len(records),
            "cs_majors": sum(1 for record in records if record.cs_major),
            "paid_up": sum(1 for record in records if record.paid_up),
            "graduation_ready": sum(1 for record in records if record.has_graduation_credits()),
        }


__all__ = ["ReportBuilder"]
