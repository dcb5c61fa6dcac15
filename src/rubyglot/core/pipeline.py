"""Entry points shared by the CLI and the HTTP API."""

from __future__ import annotations

from rubyglot.helper import LanguageHelper, TextValueInput, get_instance, validate_text_value
from rubyglot.languages import find_by_code, is_undetermined
from rubyglot.models import DetectionResponse, TextValue


async def detect_language(
    value: TextValueInput,
    *,
    helper: LanguageHelper | None = None,
) -> DetectionResponse:
    """Detect the language of a text value and report the resolving stage."""
    resolved_helper = helper or await get_instance()
    text_value = validate_text_value(value)
    result = await resolved_helper.detector.identify(text_value.plain_text)
    return DetectionResponse(language=result.language, stage=result.stage)


async def run_localization(
    value: TextValueInput,
    *,
    language_code: str | None = None,
    helper: LanguageHelper | None = None,
) -> TextValue:
    """Fill `language` and `rich_text` of a text value.

    When `language_code` is given, detection is skipped and the catalog
    record for that code is used instead.
    """
    resolved_helper = helper or await get_instance()
    if language_code is None:
        return await resolved_helper.localize(value)

    language = find_by_code(language_code)
    if is_undetermined(language):
        raise ValueError(f"unknown language code: {language_code!r}")
    text_value = validate_text_value(value)
    text_value.language = language
    return await resolved_helper.set_rich_text(text_value)
