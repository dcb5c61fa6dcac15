"""Japanese furigana rendering."""

from __future__ import annotations

from dataclasses import dataclass

import pykakasi
import regex

from rubyglot.transliteration.ruby import render_ruby

_KANJI_RE = regex.compile(r"\p{Han}")
_WARM_UP_TEXT = "日本語の文章を読みます。"


@dataclass(frozen=True)
class Reading:
    """Surface form of a token and its hiragana reading."""

    original: str
    hiragana: str


class JapaneseReader:
    """Morphological reader producing hiragana readings per token (pykakasi)."""

    def __init__(self) -> None:
        self._kakasi = pykakasi.kakasi()

    def warm_up(self) -> None:
        """Load the reader dictionaries before the first real request."""
        self.readings(_WARM_UP_TEXT)

    def readings(self, text: str) -> list[Reading]:
        return [
            Reading(original=item["orig"], hiragana=item["hira"])
            for item in self._kakasi.convert(text)
        ]

    def furigana(self, text: str) -> str:
        """Render text with a ruby reading over every kanji-bearing token."""
        return "".join(_annotate(reading) for reading in self.readings(text))


def _annotate(reading: Reading) -> str:
    original, hiragana = reading.original, reading.hiragana
    if not _KANJI_RE.search(original) or not hiragana or hiragana == original:
        return original

    # Okurigana shared by both forms stays outside the annotation.
    head = 0
    while (
        head < len(original) - 1
        and head < len(hiragana) - 1
        and original[head] == hiragana[head]
    ):
        head += 1
    tail = 0
    while (
        tail < len(original) - head - 1
        and tail < len(hiragana) - head - 1
        and original[-1 - tail] == hiragana[-1 - tail]
    ):
        tail += 1

    core_end = len(original) - tail
    reading_end = len(hiragana) - tail
    return (
        original[:head]
        + render_ruby(original[head:core_end], hiragana[head:reading_end])
        + original[core_end:]
    )
