from __future__ import annotations

import pytest

from rubyglot import helper as helper_module
from rubyglot.concurrency import AsyncOnce
from rubyglot.detection import JapaneseScriptStage, LanguageDetector, StatisticalStage
from rubyglot.helper import LanguageHelper
from rubyglot.languages import LanguageRecord, find_by_code
from rubyglot.transliteration import JapaneseReader, build_cyrillic_presets


class StaticStage:
    """Detection stage returning a fixed result and recording its calls."""

    def __init__(self, name: str, code: str | None) -> None:
        self.name = name
        self.code = code
        self.calls: list[str] = []

    async def identify(self, text: str) -> LanguageRecord | None:
        self.calls.append(text)
        if self.code is None:
            return None
        return find_by_code(self.code)


class FailingStage:
    def __init__(self, name: str, error: Exception) -> None:
        self.name = name
        self.error = error
        self.calls = 0

    async def identify(self, text: str) -> LanguageRecord | None:
        self.calls += 1
        raise self.error


@pytest.fixture(scope="session")
def japanese_reader() -> JapaneseReader:
    reader = JapaneseReader()
    reader.warm_up()
    return reader


@pytest.fixture
def local_helper(japanese_reader: JapaneseReader) -> LanguageHelper:
    """Helper wired with the local detection stages only (no fallback model)."""
    return LanguageHelper(
        japanese=japanese_reader,
        cyrillic_presets=build_cyrillic_presets(),
        detector=LanguageDetector([JapaneseScriptStage(), StatisticalStage()]),
    )


@pytest.fixture
def installed_helper(monkeypatch, local_helper: LanguageHelper) -> LanguageHelper:
    """Install `local_helper` as the process-wide instance."""

    async def _factory() -> LanguageHelper:
        return local_helper

    monkeypatch.setattr(helper_module, "_INSTANCE", AsyncOnce(_factory))
    return local_helper
