"""Evaluation utilities."""

from rubyglot.eval.metrics import DetectionSample, summarize_detection

__all__ = ["DetectionSample", "summarize_detection"]
