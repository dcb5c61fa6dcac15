"""Text value serializers."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


def to_json(value: BaseModel) -> str:
    """Serialize a text value (or any pipeline model) to formatted JSON."""
    return value.model_dump_json(indent=2, by_alias=True)


def write_json(value: BaseModel, output_path: str | Path) -> None:
    """Write model JSON to disk."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(value) + "\n", encoding="utf-8")
