"""Language detection interfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from rubyglot.languages import LanguageRecord


@dataclass(frozen=True)
class DetectionResult:
    """Detected language and the stage that resolved it (None when undetermined)."""

    language: LanguageRecord
    stage: str | None


class DetectionStage(Protocol):
    """Protocol implemented by cascade stages."""

    name: str

    async def identify(self, text: str) -> LanguageRecord | None:
        """Return a catalog record, or None to defer to the next stage."""
