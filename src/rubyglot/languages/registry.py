"""Language catalog lookups."""

from __future__ import annotations

from rubyglot.languages.base import LanguageRecord
from rubyglot.languages.catalog import LANGUAGE_ROWS

UNDETERMINED = LanguageRecord(
    code="xx",
    name="Undetermined",
    native_name="Undetermined",
    direction="LTR",
)

LANGUAGES: tuple[LanguageRecord, ...] = tuple(
    LanguageRecord(code=code, name=name, native_name=native_name, direction=direction)
    for code, name, native_name, direction in LANGUAGE_ROWS
)

_BY_CODE: dict[str, LanguageRecord] = {record.code: record for record in LANGUAGES}
_BY_NAME: dict[str, LanguageRecord] = {record.name: record for record in LANGUAGES}

_ALIASES = {
    "en-us": "en",
    "en-gb": "en",
    "pt-br": "pt",
    "pt-pt": "pt",
    "zh-cn": "zh",
    "zh-tw": "zh",
    "zh-hans": "zh",
    "zh-hant": "zh",
    "iw": "he",
    "in": "id",
    "ji": "yi",
    "jw": "jv",
}


def find_by_code(code: str) -> LanguageRecord:
    """Return the catalog record for a language code, or `UNDETERMINED`."""
    canonical = code.strip().casefold()
    canonical = _ALIASES.get(canonical, canonical)
    return _BY_CODE.get(canonical, UNDETERMINED)


def find_by_name(name: str) -> LanguageRecord:
    """Return the catalog record for an English language name, or `UNDETERMINED`."""
    return _BY_NAME.get(name, UNDETERMINED)


def is_undetermined(record: LanguageRecord) -> bool:
    return record.code == UNDETERMINED.code
