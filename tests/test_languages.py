import pytest

from rubyglot.languages import (
    LANGUAGES,
    UNDETERMINED,
    find_by_code,
    find_by_name,
    is_undetermined,
)


def test_find_by_code_returns_catalog_record() -> None:
    english = find_by_code("en")

    assert english.code == "en"
    assert english.name == "English"
    assert english.native_name == "English"
    assert english.direction == "LTR"


def test_find_by_code_unassigned_returns_undetermined() -> None:
    record = find_by_code("sh")

    assert record is UNDETERMINED
    assert record.code == "xx"
    assert is_undetermined(record)


def test_find_by_code_accepts_tags_and_case() -> None:
    assert find_by_code("zh-cn").code == "zh"
    assert find_by_code("EN").code == "en"
    assert find_by_code("iw").code == "he"


def test_find_by_name() -> None:
    assert find_by_name("English").code == "en"
    assert find_by_name("Nothing") is UNDETERMINED


def test_rtl_languages() -> None:
    assert find_by_code("ar").direction == "RTL"
    assert find_by_code("he").direction == "RTL"


def test_catalog_codes_are_unique_two_letter() -> None:
    codes = [record.code for record in LANGUAGES]

    assert len(codes) == len(set(codes))
    assert all(len(code) == 2 for code in codes)
    assert "xx" not in codes


def test_record_serializes_native_name_alias() -> None:
    payload = find_by_code("ja").model_dump()

    assert payload == {
        "code": "ja",
        "name": "Japanese",
        "nativeName": "日本語",
        "direction": "LTR",
    }


def test_records_are_immutable() -> None:
    with pytest.raises(Exception):
        find_by_code("en").code = "fr"  # type: ignore[misc]
