"""Roster loading from local files or HTTP(S) URLs."""
from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

import requests

from .config import LoaderConfig
from .core.models import StudentRecord
from .utils import (
    clean_text,
    column_key,
    detect_format,
    is_remote,
    parse_bool,
    parse_float,
    parse_int,
)

logger = logging.getLogger(__name__)

_COLUMN_ALIASES = {
    "lastname": "last_name",
    "studentlastname": "last_name",
    "firstname": "first_name",
    "studentfirstname": "first_name",
    "id": "student_id",
    "studentid": "student_id",
    "graduationyear": "graduation_year",
    "csmajor": "cs_major",
    "creditsearned": "credits_earned",
    "credits": "credits_earned",
    "paidup": "paid_up",
}


class RosterLoadError(Exception):
    """Raised when a roster cannot be fetched or parsed."""


class RosterLoader:
    """Read student records from JSON or CSV rosters."""

    def __init__(self, config: Optional[LoaderConfig] = None) -> None:
        self.config = config or LoaderConfig()

    def load(self, source: str) -> list[StudentRecord]:
        if is_remote(source):
            text, content_type = self._fetch(source)
            fmt = detect_format(source, content_type) or "csv"
        else:
            fmt = detect_format(source)
            if fmt is None:
                raise RosterLoadError(f"Unrecognised roster format: {source}")
            text = self._read(source)
        rows = self._parse_json(text, source) if fmt == "json" else self._parse_csv(text)
        records = self._build_records(rows, source)
        logger.info("Loaded %s student records from %s", len(records), source)
        return records

    def parse_record(self, row: Mapping[str, Any]) -> StudentRecord:
        fields: dict[str, Any] = {}
        for key, value in row.items():
            if key is None:
                continue
            name = _COLUMN_ALIASES.get(column_key(str(key)))
            if name:
                fields[name] = value
        try:
            last_name = fields.get("last_name")
            first_name = fields.get("first_name")
            if not last_name or not first_name:
                raise ValueError("last and first name are required")
            record = StudentRecord(
                last_name=clean_text(str(last_name)),
                first_name=clean_text(str(first_name)),
                student_id=parse_int(fields.get("student_id")),
                graduation_year=parse_int(fields.get("graduation_year"), default=0),
                cs_major=parse_bool(fields.get("cs_major")),
            )
            record.credits_earned = parse_float(fields.get("credits_earned"))
            record.paid_up = parse_bool(fields.get("paid_up"))
        except (TypeError, ValueError) as exc:
            raise RosterLoadError(f"Invalid student row {dict(row)!r}: {exc}") from exc
        return record

    def _build_records(
        self, rows: Iterable[Mapping[str, Any]], source: str
    ) -> list[StudentRecord]:
        records: list[StudentRecord] = []
        for index, row in enumerate(rows, start=1):
            if not isinstance(row, Mapping):
                error = RosterLoadError(f"Row {index} in {source} is not an object")
            else:
                try:
                    records.append(self.parse_record(row))
                    continue
                except RosterLoadError as exc:
                    error = exc
            if not self.config.skip_invalid:
                raise error
            logger.warning("Skipping row %s in %s: %s", index, source, error)
        return records

    def _fetch(self, url: str) -> tuple[str, Optional[str]]:
        headers = {"User-Agent": self.config.user_agent, "Accept": "application/json, text/csv"}
        try:
            response = requests.get(url, timeout=self.config.timeout, headers=headers)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RosterLoadError(f"Failed to fetch roster {url}: {exc}") from exc
        return response.text, response.headers.get("Content-Type")

    def _read(self, path: str) -> str:
        try:
            return Path(path).read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise RosterLoadError(f"Failed to read roster {path}: {exc}") from exc

    @staticmethod
    def _parse_json(text: str, source: str) -> list[Any]:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RosterLoadError(f"Invalid JSON in {source}: {exc}") from exc
        if isinstance(payload, dict):
            payload = payload.get("students")
        if not isinstance(payload, list):
            raise RosterLoadError(f"Expected a list of students in {source}")
        return payload

    @staticmethod
    def _parse_csv(text: str) -> list[dict[str, Any]]:
        reader = csv.DictReader(io.StringIO(text))
        rows: list[dict[str, Any]] = []
        for row in reader:
            # blank lines with stray delimiters
            if not any(isinstance(value, str) and value.strip() for value in row.values()):
                continue
            rows.append(row)
        return rows


__all__ = ["RosterLoadError", "RosterLoader"]
