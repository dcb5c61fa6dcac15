"""Benchmark metric helpers for language detection quality and runtime."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class DetectionSample:
    """One detection outcome compared with its reference language."""

    expected: str
    detected: str
    stage: str | None
    runtime_sec: float = 0.0

    @property
    def correct(self) -> bool:
        return self.expected == self.detected


def summarize_detection(samples: list[DetectionSample]) -> dict[str, float]:
    """Summarize detection accuracy, stage attribution and runtime."""
    total = len(samples)
    if total == 0:
        return {"sample_count": 0.0, "accuracy": 0.0, "undetermined_rate": 0.0}

    correct = sum(1 for sample in samples if sample.correct)
    undetermined = sum(1 for sample in samples if sample.stage is None)
    runtime = sum(sample.runtime_sec for sample in samples)

    summary: dict[str, float] = {
        "sample_count": float(total),
        "accuracy": round(correct / total, 4),
        "undetermined_rate": round(undetermined / total, 4),
        "total_runtime_sec": round(runtime, 4),
        "mean_runtime_ms": round(runtime / total * 1000.0, 3),
    }

    stage_counts = Counter(sample.stage or "undetermined" for sample in samples)
    for stage, count in sorted(stage_counts.items()):
        summary[f"stage_share_{stage}"] = round(count / total, 4)

    per_language: dict[str, list[DetectionSample]] = {}
    for sample in samples:
        per_language.setdefault(sample.expected, []).append(sample)
    for code, group in sorted(per_language.items()):
        hits = sum(1 for sample in group if sample.correct)
        summary[f"accuracy_{code}"] = round(hits / len(group), 4)

    return summary
