"""Detection cascade stages: script heuristic, statistical model, fallback model."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import regex
from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException
from lingua import LanguageDetectorBuilder

from rubyglot.concurrency import AsyncOnce
from rubyglot.errors import DetectionStageFailure
from rubyglot.languages import LanguageRecord, find_by_code, is_undetermined

logger = logging.getLogger(__name__)

# langdetect samples n-grams randomly; a fixed seed keeps results reproducible.
DetectorFactory.seed = 0

_KANA_RE = regex.compile(r"[\p{Hiragana}\p{Katakana}]")
_KANJI_RE = regex.compile(r"\p{Han}")
_NON_JAPANESE_LETTER_RE = regex.compile(r"[\p{L}--[\p{Hiragana}\p{Katakana}\p{Han}ー]]", regex.V1)


def is_japanese(text: str) -> bool:
    """Return True when text mixes kana with kanji and has no letters from other scripts."""
    if not _KANA_RE.search(text) or not _KANJI_RE.search(text):
        return False
    return _NON_JAPANESE_LETTER_RE.search(text) is None


def _catalog_record(code: str) -> LanguageRecord | None:
    record = find_by_code(code)
    if is_undetermined(record):
        logger.debug("Detected code %r has no catalog entry.", code)
        return None
    return record


class JapaneseScriptStage:
    """Resolve kana + kanji text to Japanese without running a model."""

    name = "script"

    async def identify(self, text: str) -> LanguageRecord | None:
        if not is_japanese(text):
            return None
        return _catalog_record("ja")


class StatisticalStage:
    """Fast local n-gram classifier (langdetect)."""

    name = "statistical"

    def __init__(self, *, min_probability: float = 0.5) -> None:
        self.min_probability = min_probability

    async def identify(self, text: str) -> LanguageRecord | None:
        try:
            candidates = detect_langs(text)
        except LangDetectException:
            return None
        if not candidates:
            return None

        top = candidates[0]
        if top.prob < self.min_probability:
            logger.debug(
                "Statistical candidate %r below threshold (%.3f < %.3f).",
                top.lang,
                top.prob,
                self.min_probability,
            )
            return None
        return _catalog_record(top.lang)


def _build_lingua_detector() -> Any:
    return LanguageDetectorBuilder.from_all_languages().build()


class FallbackModelStage:
    """Heavier all-languages model (lingua), loaded on first use and run off the event loop."""

    name = "fallback"

    def __init__(self, *, build_detector: Callable[[], Any] = _build_lingua_detector) -> None:
        self._detector = AsyncOnce(lambda: asyncio.to_thread(build_detector))

    async def identify(self, text: str) -> LanguageRecord | None:
        try:
            detector = await self._detector.get()
            values = await asyncio.to_thread(detector.compute_language_confidence_values, text)
        except Exception as exc:
            raise DetectionStageFailure(self.name, repr(exc)) from exc

        if not values or values[0].value <= 0.0:
            return None
        return _catalog_record(values[0].language.iso_code_639_1.name)
