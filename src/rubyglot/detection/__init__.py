"""Language detection cascade."""

from rubyglot.detection.base import DetectionResult, DetectionStage
from rubyglot.detection.detector import LanguageDetector, default_stages
from rubyglot.detection.stages import (
    FallbackModelStage,
    JapaneseScriptStage,
    StatisticalStage,
    is_japanese,
)

__all__ = [
    "DetectionResult",
    "DetectionStage",
    "FallbackModelStage",
    "JapaneseScriptStage",
    "LanguageDetector",
    "StatisticalStage",
    "default_stages",
    "is_japanese",
]
