"""Core localization pipeline."""

from rubyglot.core.pipeline import detect_language, run_localization

__all__ = ["detect_language", "run_localization"]
