"""Ruby-annotated transliteration."""

from rubyglot.transliteration.cyrillic import (
    CYRILLIC_SCHEMES,
    CyrillicPreset,
    annotate_cyrillic,
    build_cyrillic_presets,
)
from rubyglot.transliteration.japanese import JapaneseReader, Reading
from rubyglot.transliteration.ruby import RUBY_TEMPLATE, render_ruby
from rubyglot.transliteration.transliterator import Transliterator

__all__ = [
    "CYRILLIC_SCHEMES",
    "RUBY_TEMPLATE",
    "CyrillicPreset",
    "JapaneseReader",
    "Reading",
    "Transliterator",
    "annotate_cyrillic",
    "build_cyrillic_presets",
    "render_ruby",
]
