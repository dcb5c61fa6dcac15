"""Shared data models."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from rubyglot.languages import UNDETERMINED, LanguageRecord, find_by_code, find_by_name

PlainText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class TextValue(BaseModel):
    """Text content with its detected language and ruby-annotated rendering."""

    model_config = ConfigDict(validate_assignment=True)

    plain_text: PlainText
    rich_text: str = ""
    language: LanguageRecord = Field(default_factory=lambda: UNDETERMINED)

    @field_validator("language", mode="before")
    @classmethod
    def _resolve_language(cls, value: Any) -> Any:
        # Codes and English names are accepted in place of a full record.
        if isinstance(value, str):
            if len(value) == 2:
                return find_by_code(value)
            if len(value) >= 3:
                return find_by_name(value)
        return value


class TranslatableText(TextValue):
    """Text value carrying localized versions of itself."""

    translations: list[TextValue] = Field(default_factory=list)


class DetectionResponse(BaseModel):
    """Detected language with the cascade stage that resolved it."""

    language: LanguageRecord
    stage: str | None
