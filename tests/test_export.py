import json
from pathlib import Path

from rubyglot.io import to_json, write_json
from rubyglot.models import TextValue


def test_to_json_and_write_json(tmp_path: Path) -> None:
    value = TextValue(plain_text="Привет мир", language="ru", rich_text="<ruby>мир</ruby>")

    payload = json.loads(to_json(value))
    assert payload["plain_text"] == "Привет мир"
    assert payload["language"]["nativeName"] == "Русский"

    output_path = tmp_path / "out" / "text.json"
    write_json(value, output_path)
    written = json.loads(output_path.read_text(encoding="utf-8"))
    assert written["rich_text"] == "<ruby>мир</ruby>"
    assert "Привет" in output_path.read_text(encoding="utf-8")
