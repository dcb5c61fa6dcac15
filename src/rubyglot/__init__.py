"""Language identification and ruby-annotated transliteration."""

__version__ = "0.1.0"
