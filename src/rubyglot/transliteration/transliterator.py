"""Language-code dispatch for ruby-annotated transliteration."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType

from rubyglot.segmentation import WordSegmenter
from rubyglot.transliteration.cyrillic import CyrillicPreset, annotate_cyrillic
from rubyglot.transliteration.japanese import JapaneseReader

Routine = Callable[[str], str | Awaitable[str]]


class Transliterator:
    """Overlay pronunciation guides on text for the languages it knows.

    Languages without a routine produce an empty string.
    """

    def __init__(
        self,
        *,
        japanese: JapaneseReader,
        cyrillic_presets: Mapping[str, CyrillicPreset],
        segmenter: WordSegmenter,
    ) -> None:
        self.japanese_reader = japanese
        self.segmenter = segmenter

        routines: dict[str, Routine] = {"ja": self.japanese}
        for code, preset in cyrillic_presets.items():
            routines[code] = self._cyrillic_routine(preset)
        self.routines: Mapping[str, Routine] = MappingProxyType(routines)

    @property
    def supported_codes(self) -> frozenset[str]:
        return frozenset(self.routines)

    async def japanese(self, text: str) -> str:
        """Render Japanese text with hiragana furigana."""
        return await asyncio.to_thread(self.japanese_reader.furigana, text)

    def _cyrillic_routine(self, preset: CyrillicPreset) -> Routine:
        def routine(text: str) -> str:
            return annotate_cyrillic(text, preset=preset, segmenter=self.segmenter)

        return routine

    async def transliterate(self, text: str, language_code: str) -> str:
        routine = self.routines.get(language_code)
        if routine is None:
            return ""

        result = routine(text)
        if inspect.isawaitable(result):
            return await result
        return result
