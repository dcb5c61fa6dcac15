"""Locale-aware word segmentation."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from dataclasses import dataclass

import regex

from rubyglot.errors import InvalidLanguageCode

# Languages written without spaces between words; words break at script changes.
_SCRIPTIO_CONTINUA_CODES = {"ja", "zh", "th", "lo", "km", "my"}

_SPACED_WORD_RE = regex.compile(r"[\p{L}\p{M}\p{N}]+(?:['’][\p{L}\p{M}\p{N}]+)*")
_RUN_CLASSES = (
    r"\p{Han}",
    r"[\p{Katakana}ー]",
    r"\p{Hiragana}",
    r"\p{Thai}",
    r"\p{Lao}",
    r"\p{Khmer}",
    r"\p{Myanmar}",
    r"\p{Hangul}",
)
# Letters and digits outside the run scripts above (Latin, Cyrillic, ...).
_OTHER_WORD_CHAR = (
    r"[[\p{L}\p{M}\p{N}]--[\p{Han}\p{Katakana}\p{Hiragana}\p{Thai}"
    r"\p{Lao}\p{Khmer}\p{Myanmar}\p{Hangul}ー]]"
)
_SCRIPT_RUN_RE = regex.compile(
    "|".join(f"{run}+" for run in _RUN_CLASSES)
    + f"|{_OTHER_WORD_CHAR}+(?:['’]{_OTHER_WORD_CHAR}+)*",
    regex.V1,
)


@dataclass(frozen=True)
class Segment:
    """Word-granularity segment of a text."""

    segment: str
    index: int
    is_word_like: bool = True

    @property
    def end(self) -> int:
        return self.index + len(self.segment)


class LocaleSegmenter:
    """Word segmenter bound to a single language code."""

    def __init__(self, code: str) -> None:
        self.code = code
        self.pattern = _SCRIPT_RUN_RE if code in _SCRIPTIO_CONTINUA_CODES else _SPACED_WORD_RE

    def segment(self, text: str) -> Iterator[Segment]:
        for match in self.pattern.finditer(text):
            yield Segment(segment=match.group(0), index=match.start())


class WordSegmenter:
    """Splits text into words, keeping one `LocaleSegmenter` per language code."""

    def __init__(self) -> None:
        self.segmenters: dict[str, LocaleSegmenter] = {}
        self._lock = threading.Lock()

    def get_segmenter_by_language_code(self, code: str) -> LocaleSegmenter:
        if len(code) != 2:
            raise InvalidLanguageCode(code)

        segmenter = self.segmenters.get(code)
        if segmenter is not None:
            return segmenter

        with self._lock:
            segmenter = self.segmenters.get(code)
            if segmenter is None:
                segmenter = LocaleSegmenter(code)
                self.segmenters[code] = segmenter
        return segmenter

    def iter_words(self, text: str, language_code: str) -> Iterator[Segment]:
        """Yield word segments with their offsets in `text`."""
        return self.get_segmenter_by_language_code(language_code).segment(text)

    def get_words(self, text: str, language_code: str) -> list[str]:
        return [item.segment for item in self.iter_words(text, language_code)]

    def get_unique_words(self, text: str, language_code: str) -> list[str]:
        """Return each distinct word once, in first-seen order."""
        return list(dict.fromkeys(self.get_words(text, language_code)))
