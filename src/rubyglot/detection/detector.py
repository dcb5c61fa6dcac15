"""Prioritized language detection cascade."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rubyglot.config import AppConfig
from rubyglot.detection.base import DetectionResult, DetectionStage
from rubyglot.detection.stages import FallbackModelStage, JapaneseScriptStage, StatisticalStage
from rubyglot.errors import DetectionStageFailure
from rubyglot.languages import UNDETERMINED, LanguageRecord

logger = logging.getLogger(__name__)


def default_stages(config: AppConfig | None = None) -> list[DetectionStage]:
    """Build the standard cascade: script heuristic, statistical, fallback model."""
    min_probability = config.statistical_min_probability if config is not None else 0.5
    stages: list[DetectionStage] = [
        JapaneseScriptStage(),
        StatisticalStage(min_probability=min_probability),
    ]
    if config is None or config.fallback_detector_enabled:
        stages.append(FallbackModelStage())
    return stages


class LanguageDetector:
    """Classify text into a catalog language; the first stage with a result wins.

    Stage failures are logged and treated as "no result", so detection always
    returns a record: a catalog entry or `UNDETERMINED`.
    """

    def __init__(self, stages: Sequence[DetectionStage] | None = None) -> None:
        self.stages: tuple[DetectionStage, ...] = tuple(
            stages if stages is not None else default_stages()
        )

    async def identify(self, text: str) -> DetectionResult:
        for stage in self.stages:
            try:
                record = await stage.identify(text)
            except DetectionStageFailure:
                logger.warning("Detection stage %r failed.", stage.name, exc_info=True)
                continue
            except Exception:
                logger.exception("Detection stage %r raised an unexpected error.", stage.name)
                continue
            if record is not None:
                logger.debug("Language detected with %s stage: %s.", stage.name, record.code)
                return DetectionResult(language=record, stage=stage.name)

        logger.warning("Unable to determine language. text=%r", text[:80])
        return DetectionResult(language=UNDETERMINED, stage=None)

    async def detect(self, text: str) -> LanguageRecord:
        result = await self.identify(text)
        return result.language
