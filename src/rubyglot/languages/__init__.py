"""Language catalog."""

from rubyglot.languages.base import LanguageRecord, TextDirection
from rubyglot.languages.registry import (
    LANGUAGES,
    UNDETERMINED,
    find_by_code,
    find_by_name,
    is_undetermined,
)

__all__ = [
    "LANGUAGES",
    "UNDETERMINED",
    "LanguageRecord",
    "TextDirection",
    "find_by_code",
    "find_by_name",
    "is_undetermined",
]
