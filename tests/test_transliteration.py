import re

import pytest

from rubyglot.segmentation import WordSegmenter
from rubyglot.transliteration import (
    CyrillicPreset,
    JapaneseReader,
    Reading,
    Transliterator,
    annotate_cyrillic,
    build_cyrillic_presets,
    render_ruby,
)
from rubyglot.transliteration.japanese import _annotate

_RUBY_RE = re.compile(
    r'<ruby>(?P<original>[^<]+)<rp>\(</rp><rt role="presentation" aria-hidden="true">'
    r"(?P<reading>[^<]+)</rt><rp>\)</rp></ruby>"
)


def _strip_ruby(markup: str) -> str:
    return _RUBY_RE.sub(lambda match: match.group("original"), markup)


class _UpperPreset(CyrillicPreset):
    """Preset with a visible, predictable transformation."""

    def transform(self, text: str) -> str:
        return f"[{text.upper()}]"


def test_ruby_template_is_bit_exact() -> None:
    assert render_ruby("мир", "mir") == (
        "<ruby>мир<rp>(</rp>"
        '<rt role="presentation" aria-hidden="true">mir</rt>'
        "<rp>)</rp></ruby>"
    )


def test_presets_cover_cyrillic_languages() -> None:
    presets = build_cyrillic_presets()

    assert sorted(presets) == ["mn", "ru", "uk"]
    assert presets["uk"].scheme == "ua"


def test_russian_transliteration_words() -> None:
    preset = build_cyrillic_presets()["ru"]

    assert preset.transform("Привет") == "Privet"
    assert preset.transform("мир") == "mir"


def test_cyrillic_annotates_each_unique_word() -> None:
    segmenter = WordSegmenter()
    text = "Привет мир"

    result = annotate_cyrillic(text, preset=build_cyrillic_presets()["ru"], segmenter=segmenter)

    matches = _RUBY_RE.findall(result)
    assert [original for original, _ in matches] == ["Привет", "мир"]
    assert all(reading for _, reading in matches)
    assert _strip_ruby(result) == text


def test_cyrillic_replacement_is_anchored_on_word_boundaries() -> None:
    segmenter = WordSegmenter()
    preset = _UpperPreset(code="ru", scheme="ru")
    text = "по полю полет по"

    result = annotate_cyrillic(text, preset=preset, segmenter=segmenter)

    assert [original for original, _ in _RUBY_RE.findall(result)] == ["по", "полю", "полет", "по"]
    assert "[ПОЛЕТ]" in result
    assert "[ПО]ЛЕТ" not in result
    assert _strip_ruby(result) == text


@pytest.mark.parametrize("code", ["ru", "uk", "mn"])
def test_cyrillic_wraps_every_segmenter_word(code: str) -> None:
    segmenter = WordSegmenter()
    text = "Привет 2024, мир OK! Привет"

    result = annotate_cyrillic(text, preset=build_cyrillic_presets()[code], segmenter=segmenter)

    wrapped = [original for original, _ in _RUBY_RE.findall(result)]
    assert set(wrapped) == set(segmenter.get_unique_words(text, code))
    assert wrapped == segmenter.get_words(text, code)
    assert all(reading for _, reading in _RUBY_RE.findall(result))
    assert _strip_ruby(result) == text


def test_cyrillic_leaves_punctuation_outside_markup() -> None:
    segmenter = WordSegmenter()
    text = "Hello, мир! 2024"

    result = annotate_cyrillic(text, preset=build_cyrillic_presets()["ru"], segmenter=segmenter)

    assert result.startswith("<ruby>Hello<rp>(</rp>")
    assert "</ruby>, <ruby>мир<rp>(</rp>" in result
    assert "</ruby>! <ruby>2024<rp>(</rp>" in result
    assert [original for original, _ in _RUBY_RE.findall(result)] == ["Hello", "мир", "2024"]


def test_annotate_splits_okurigana() -> None:
    assert _annotate(Reading(original="食べる", hiragana="たべる")) == render_ruby("食", "た") + "べる"
    assert _annotate(Reading(original="お茶", hiragana="おちゃ")) == "お" + render_ruby("茶", "ちゃ")
    assert _annotate(Reading(original="日本語", hiragana="にほんご")) == render_ruby("日本語", "にほんご")


def test_annotate_leaves_kana_and_unknown_readings() -> None:
    assert _annotate(Reading(original="ひらがな", hiragana="ひらがな")) == "ひらがな"
    assert _annotate(Reading(original="カタカナ", hiragana="かたかな")) == "カタカナ"
    assert _annotate(Reading(original="𠮷", hiragana="𠮷")) == "𠮷"


def test_japanese_reader_furigana(japanese_reader: JapaneseReader) -> None:
    text = "日本語の文章を読みます。"

    result = japanese_reader.furigana(text)

    assert _RUBY_RE.search(result) is not None
    assert 'aria-hidden="true"' in result
    assert _strip_ruby(result) == text


def _transliterator(japanese_reader: JapaneseReader) -> Transliterator:
    return Transliterator(
        japanese=japanese_reader,
        cyrillic_presets=build_cyrillic_presets(),
        segmenter=WordSegmenter(),
    )


def test_dispatch_table_is_fixed(japanese_reader: JapaneseReader) -> None:
    transliterator = _transliterator(japanese_reader)

    assert transliterator.supported_codes == frozenset({"ja", "mn", "ru", "uk"})
    with pytest.raises(TypeError):
        transliterator.routines["en"] = lambda text: text  # type: ignore[index]


@pytest.mark.asyncio
@pytest.mark.parametrize("code", ["en", "xx", "zh"])
async def test_unsupported_language_yields_empty_string(
    japanese_reader: JapaneseReader, code: str
) -> None:
    transliterator = _transliterator(japanese_reader)

    assert await transliterator.transliterate("Some text", code) == ""


@pytest.mark.asyncio
async def test_transliterate_dispatches_sync_and_async_routines(
    japanese_reader: JapaneseReader,
) -> None:
    transliterator = _transliterator(japanese_reader)

    russian = await transliterator.transliterate("Привет мир", "ru")
    ukrainian = await transliterator.transliterate("Добрий день", "uk")
    japanese = await transliterator.transliterate("日本語の文章", "ja")

    assert len(_RUBY_RE.findall(russian)) == 2
    assert len(_RUBY_RE.findall(ukrainian)) == 2
    assert _RUBY_RE.search(japanese) is not None
