"""Exception types raised by the localization pipeline."""

from __future__ import annotations

from typing import Any


class RubyglotError(Exception):
    """Base class for rubyglot errors."""


class ValidationError(RubyglotError):
    """Input does not satisfy the text value shape."""

    def __init__(self, message: str, issues: list[dict[str, Any]]) -> None:
        super().__init__(message)
        self.issues = issues

    def __str__(self) -> str:
        details = "; ".join(_format_issue(issue) for issue in self.issues)
        if not details:
            return self.args[0]
        return f"{self.args[0]} {details}"


class InvalidLanguageCode(RubyglotError, ValueError):
    """A segmenter was requested with a code that is not exactly two characters."""

    def __init__(self, code: str) -> None:
        super().__init__(f"language code must be exactly 2 characters, got {code!r}")
        self.code = code


class DetectionStageFailure(RubyglotError):
    """A detection stage failed internally and produced no result."""

    def __init__(self, stage: str, reason: str) -> None:
        super().__init__(f"detection stage {stage!r} failed: {reason}")
        self.stage = stage


def _format_issue(issue: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in issue.get("loc", ())) or "value"
    return f"[{location}] {issue.get('msg', 'invalid')}"
