"""Cyrillic-script transliteration presets."""

from __future__ import annotations

from dataclasses import dataclass

import cyrtranslit

from rubyglot.segmentation import WordSegmenter
from rubyglot.transliteration.ruby import render_ruby

# ISO 639-1 code -> cyrtranslit language scheme
CYRILLIC_SCHEMES = {
    "mn": "mn",
    "ru": "ru",
    "uk": "ua",
}


@dataclass(frozen=True)
class CyrillicPreset:
    """Latin transliteration rules for one Cyrillic-script language."""

    code: str
    scheme: str

    def transform(self, text: str) -> str:
        return cyrtranslit.to_latin(text, self.scheme)


def build_cyrillic_presets() -> dict[str, CyrillicPreset]:
    return {
        code: CyrillicPreset(code=code, scheme=scheme) for code, scheme in CYRILLIC_SCHEMES.items()
    }


def annotate_cyrillic(text: str, *, preset: CyrillicPreset, segmenter: WordSegmenter) -> str:
    """Annotate every word of `text` with its Latin transliteration.

    Rewriting is anchored on segment offsets, so a word that also occurs inside
    a longer word (or inside markup already emitted) is never re-matched.
    """
    segments = list(segmenter.iter_words(text, preset.code))
    unique_words = dict.fromkeys(item.segment for item in segments)
    readings = {word: preset.transform(word) for word in unique_words}

    parts: list[str] = []
    cursor = 0
    for item in segments:
        parts.append(text[cursor : item.index])
        parts.append(render_ruby(item.segment, readings[item.segment]))
        cursor = item.end
    parts.append(text[cursor:])
    return "".join(parts)
