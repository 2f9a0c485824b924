from student_records.config import ReportConfig
from student_records.core.models import StudentRecord
from student_records.report import ReportBuilder


def build_roster():
    jane = StudentRecord("Doe", "Jane", 42, 2026, True)
    jane.credits_earned = 32.0
    jane.paid_up = True
    return [StudentRecord("Zed", "Ann", 3, 2027), jane, StudentRecord("Adams", "Bob", 7, 2025)]


def test_markdown_lists_students_in_natural_order():
    markdown = ReportBuilder(ReportConfig()).build_markdown(build_roster())
    assert markdown.startswith("# Student Roster")
    assert "- Students: 3" in markdown
    assert "- CS majors: 1" in markdown
    assert "- At or above 32 credits: 1" in markdown
    assert markdown.index("Bob Adams") < markdown.index("Jane Doe") < markdown.index("Ann Zed")
    assert "- Jane Doe (#42), class of: 2026 [32 credits, paid up, CS major]" in markdown


def test_markdown_reverse_without_summary():
    config = ReportConfig(title="Seniors", include_summary=False, reverse=True)
    markdown = ReportBuilder(config).build_markdown(build_roster())
    assert markdown.startswith("# Seniors")
    assert "## Summary" not in markdown
    assert markdown.index("Ann Zed") < markdown.index("Bob Adams")


def test_markdown_empty_roster():
    markdown = ReportBuilder(ReportConfig()).build_markdown([])
    assert "No students found." in markdown


def test_json_payload():
    payload = ReportBuilder(ReportConfig()).build_json(build_roster())
    assert payload["summary"]["total"] == 3
    assert payload["summary"]["paid_up"] == 1
    assert [student["last_name"] for student in payload["students"]] == ["Adams", "Doe", "Zed"]
    assert payload["students"][1]["display"] == "Jane Doe (#42), class of: 2026"


def test_comparison_summary():
    builder = ReportBuilder(ReportConfig())
    text = builder.build_comparison(StudentRecord("Doe", "Jane", 1), StudentRecord("Doe", "Jane", 2))
    assert "- Equal: no" in text
    assert "Jane Doe sorts with Jane Doe" in text
    text = builder.build_comparison(StudentRecord("Zed", "Ann", 1), StudentRecord("Adams", "Bob", 1))
    assert "Ann Zed sorts after Bob Adams" in text
