"""Localization orchestrator: language detection followed by transliteration."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import pydantic

from rubyglot.concurrency import AsyncOnce
from rubyglot.config import AppConfig, load_config
from rubyglot.detection import LanguageDetector, default_stages
from rubyglot.errors import ValidationError
from rubyglot.models import TextValue, TranslatableText
from rubyglot.segmentation import WordSegmenter
from rubyglot.transliteration import (
    CyrillicPreset,
    JapaneseReader,
    Transliterator,
    build_cyrillic_presets,
)

logger = logging.getLogger(__name__)

TextValueInput = TextValue | Mapping[str, Any] | str

_INVALID_TEXT_MESSAGE = "The value received is not a valid text object."


class LanguageHelper:
    """Owns the shared language resources and applies pipeline stages to text values."""

    def __init__(
        self,
        *,
        japanese: JapaneseReader,
        cyrillic_presets: Mapping[str, CyrillicPreset],
        segmenter: WordSegmenter | None = None,
        detector: LanguageDetector | None = None,
    ) -> None:
        self.japanese = japanese
        self.cyrillic_presets = dict(cyrillic_presets)
        self.word_segmenter = segmenter or WordSegmenter()
        self.detector = detector or LanguageDetector()
        self.transliterator = Transliterator(
            japanese=japanese,
            cyrillic_presets=self.cyrillic_presets,
            segmenter=self.word_segmenter,
        )

    @classmethod
    async def create(cls, config: AppConfig | None = None) -> LanguageHelper:
        """Build a helper with warmed-up resources."""
        japanese = await asyncio.to_thread(_load_japanese_reader)
        presets = build_cyrillic_presets()
        detector = LanguageDetector(default_stages(config))
        logger.info(
            "Language helper ready (transliteration: %s).",
            ", ".join(sorted(["ja", *presets])),
        )
        return cls(japanese=japanese, cyrillic_presets=presets, detector=detector)

    async def set_language(self, value: TextValueInput) -> TextValue:
        """Detect the language of `plain_text` and store it on the value."""
        text_value = validate_text_value(value)
        language = await self.detector.detect(text_value.plain_text)
        text_value.language = language
        return text_value

    async def set_rich_text(self, value: TextValueInput) -> TextValue:
        """Transliterate `plain_text` according to the value's current language."""
        text_value = validate_text_value(value)
        rich_text = await self.transliterator.transliterate(
            text_value.plain_text, text_value.language.code
        )
        text_value.rich_text = rich_text
        return text_value

    async def localize(self, value: TextValueInput) -> TextValue:
        """Run language detection, then transliteration."""
        text_value = await self.set_language(value)
        return await self.set_rich_text(text_value)


def _load_japanese_reader() -> JapaneseReader:
    reader = JapaneseReader()
    reader.warm_up()
    return reader


def validate_text_value(value: TextValueInput) -> TextValue:
    """Validate input against the text value shape.

    Model instances are checked and returned as-is so callers observe the
    updates; mappings and bare strings produce a new `TextValue`.
    """
    if isinstance(value, str):
        value = {"plain_text": value}

    try:
        if isinstance(value, TextValue):
            type(value).model_validate(value.model_dump(by_alias=True))
            return value
        if isinstance(value, Mapping) and "translations" in value:
            return TranslatableText.model_validate(value)
        return TextValue.model_validate(value)
    except pydantic.ValidationError as exc:
        raise ValidationError(_INVALID_TEXT_MESSAGE, exc.errors(include_url=False)) from exc


_INSTANCE: AsyncOnce[LanguageHelper] = AsyncOnce(lambda: LanguageHelper.create(load_config()))


async def get_instance() -> LanguageHelper:
    """Return the process-wide helper, initializing it once."""
    return await _INSTANCE.get()


def reset_instance() -> None:
    """Drop the process-wide helper so the next `get_instance` rebuilds it."""
    _INSTANCE.reset()
