import json
from pathlib import Path

import pytest

from student_records import cli


def write_roster(tmp_path: Path) -> str:
    path = tmp_path / "roster.csv"
    path.write_text("lastName,firstName,id\nZed,Ann,1\nAdams,Bob,2\n", encoding="utf-8")
    return str(path)


def test_list_prints_markdown(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = cli.main(["list", write_roster(tmp_path)])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.index("Bob Adams") < out.index("Ann Zed")


def test_list_writes_reports(tmp_path: Path):
    output = tmp_path / "out" / "roster.md"
    json_output = tmp_path / "out" / "roster.json"
    exit_code = cli.main(
        ["list", write_roster(tmp_path), "--output", str(output), "--json-output", str(json_output), "--reverse"]
    )
    assert exit_code == 0
    assert "Ann Zed" in output.read_text(encoding="utf-8")
    payload = json.loads(json_output.read_text(encoding="utf-8"))
    assert [student["first_name"] for student in payload["students"]] == ["Ann", "Bob"]


def test_list_missing_roster_returns_error(tmp_path: Path):
    assert cli.main(["list", str(tmp_path / "missing.csv")]) == 1


def test_compare_reports_equality_and_order(capsys: pytest.CaptureFixture[str]):
    exit_code = cli.main(["compare", "Doe", "Ann", "1", "Doe", "Bob", "1"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "- Equal: no" in out
    assert "Ann Doe sorts before Bob Doe" in out


def test_compare_rejects_non_integer_id():
    with pytest.raises(SystemExit):
        cli.main(["compare", "Doe", "Ann", "x", "Doe", "Bob", "1"])
