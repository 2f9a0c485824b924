import pytest

from student_records import utils


def test_column_key_folds_naming_styles():
    assert utils.column_key("lastName") == "lastname"
    assert utils.column_key("last_name") == "lastname"
    assert utils.column_key(" Last Name ") == "lastname"


def test_parse_bool_accepts_common_spellings():
    assert utils.parse_bool("Yes") is True
    assert utils.parse_bool("false") is False
    assert utils.parse_bool("") is False
    assert utils.parse_bool(None) is False
    with pytest.raises(ValueError):
        utils.parse_bool("maybe")


def test_parse_int_defaults_and_rejects_fractions():
    assert utils.parse_int(" 42 ") == 42
    assert utils.parse_int("", default=0) == 0
    assert utils.parse_int(2026.0) == 2026
    with pytest.raises(ValueError):
        utils.parse_int(None)
    with pytest.raises(ValueError):
        utils.parse_int(1.5)


def test_detect_format_from_extension_and_content_type():
    assert utils.detect_format("roster.JSON") == "json"
    assert utils.detect_format("https://example.test/export.csv?x=1") == "csv"
    assert utils.detect_format("https://example.test/export", "application/json; charset=utf-8") == "json"
    assert utils.detect_format("roster.txt") is None


def test_is_remote():
    assert utils.is_remote("https://example.test/roster.json")
    assert not utils.is_remote("/tmp/roster.json")
