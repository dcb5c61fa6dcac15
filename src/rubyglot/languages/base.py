"""Language record type."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TextDirection = Literal["LTR", "RTL"]


class LanguageRecord(BaseModel):
    """Details about a human language, keyed by its ISO 639-1 code."""

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    code: str = Field(min_length=2, max_length=2)
    name: str = Field(min_length=3)
    native_name: str = Field(alias="nativeName")
    direction: TextDirection
