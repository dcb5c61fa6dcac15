import pytest
from fastapi.testclient import TestClient

from rubyglot.api import create_app


@pytest.fixture
def client(installed_helper) -> TestClient:
    return TestClient(create_app())


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200

    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["version"] == "0.1.0"
    assert payload["env"] == "dev"


def test_language_endpoint(client: TestClient) -> None:
    response = client.post(
        "/v1/language",
        json={"plain_text": "In every generation there is a chosen one."},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["language"]["code"] == "en"
    assert payload["rich_text"] == ""


def test_rich_text_endpoint(client: TestClient) -> None:
    response = client.post(
        "/v1/rich-text",
        json={"plain_text": "Привет мир", "language": "ru"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["rich_text"].count("<ruby>") == 2
    assert 'aria-hidden="true"' in payload["rich_text"]


def test_localize_endpoint(client: TestClient) -> None:
    response = client.post(
        "/v1/localize",
        json={"plain_text": "すべての世代に選ばれた者がいます。"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["language"]["code"] == "ja"
    assert payload["language"]["nativeName"] == "日本語"
    assert "<ruby>" in payload["rich_text"]


def test_detect_endpoint_reports_stage(client: TestClient) -> None:
    response = client.post("/v1/detect", json={"plain_text": "彼女はスレイヤーです。"})

    assert response.status_code == 200
    assert response.json()["stage"] == "script"


def test_invalid_payload_is_rejected(client: TestClient) -> None:
    response = client.post("/v1/language", json={"plain_text": "   "})

    assert response.status_code == 422
