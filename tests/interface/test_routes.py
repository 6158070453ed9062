"""Tests for the FastAPI surface."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from session_handoff.domain.exceptions import (
    UpstreamRateLimitError,
    UpstreamUnauthorizedError,
    UpstreamUnavailableError,
)
from session_handoff.interface.app import create_app
from session_handoff.interface.dependencies import get_use_case
from session_handoff.services.generate_handoff import GenerateHandoffUseCase

BODY = {"chatText": "User: build X", "codeText": "const y = 1;"}


@pytest.fixture
def gateway(stub_gateway):
    return stub_gateway("Built X using Y.")


@pytest.fixture
def client(gateway):
    app = create_app()
    app.dependency_overrides[get_use_case] = lambda: GenerateHandoffUseCase(gateway)
    with TestClient(app) as test_client:
        yield test_client


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_summary_is_the_default_mode(client: TestClient, gateway) -> None:
    response = client.post("/generate", json=BODY)
    assert response.status_code == 200
    assert response.json() == {"summary": "Built X using Y."}
    assert gateway.calls[0][1].max_tokens == 512


@pytest.mark.parametrize(
    ("mode", "field"),
    [
        ("continuation-context", "continuationContext"),
        ("cursor", "continuationContext"),
        ("readme", "readme"),
    ],
)
def test_mode_selects_response_field(client: TestClient, mode: str, field: str) -> None:
    response = client.post("/generate", json={**BODY, "mode": mode})
    assert response.status_code == 200
    assert response.json() == {field: "Built X using Y."}


def test_legacy_field_names_and_path(client: TestClient) -> None:
    response = client.post(
        "/api/summary",
        json={"markdown": "chat", "code": "code", "type": "readme"},
    )
    assert response.status_code == 200
    assert response.json() == {"readme": "Built X using Y."}


def test_missing_text_is_bad_input(client: TestClient, gateway) -> None:
    response = client.post("/generate", json={"chatText": "only chat"})
    assert response.status_code == 400
    assert response.json()["category"] == "bad_input"
    assert gateway.calls == []


def test_unknown_mode_is_bad_input(client: TestClient, gateway) -> None:
    response = client.post("/generate", json={**BODY, "mode": "poem"})
    assert response.status_code == 400
    assert "poem" in response.json()["error"]
    assert gateway.calls == []


def test_malformed_json_is_bad_input(client: TestClient) -> None:
    response = client.post(
        "/generate",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["category"] == "bad_input"


@pytest.mark.parametrize(
    ("error", "status", "category"),
    [
        (UpstreamUnauthorizedError(), 401, "unauthorized"),
        (UpstreamRateLimitError(), 429, "rate_limited"),
        (UpstreamUnavailableError(), 500, "upstream_unavailable"),
    ],
)
def test_upstream_errors_map_to_status(
    client: TestClient, gateway, error, status: int, category: str
) -> None:
    gateway.reply = error
    response = client.post("/generate", json=BODY)
    assert response.status_code == status
    payload = response.json()
    assert payload == {"error": error.user_message, "category": category}
    assert "summary" not in payload


def test_empty_completion_is_500(client: TestClient, gateway) -> None:
    gateway.reply = ""
    response = client.post("/generate", json=BODY)
    assert response.status_code == 500
    assert response.json() == {
        "error": "No content generated from AI",
        "category": "upstream_empty",
    }


def test_missing_credential_without_override() -> None:
    app = create_app()
    with TestClient(app) as test_client:
        response = test_client.post("/generate", json=BODY)
    assert response.status_code == 500
    assert response.json() == {
        "error": "Server configuration error: API key not found",
        "category": "config_missing",
    }


def test_unexpected_exception_is_internal(stub_gateway) -> None:
    gateway = stub_gateway(RuntimeError("boom"))
    app = create_app()
    app.dependency_overrides[get_use_case] = lambda: GenerateHandoffUseCase(gateway)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.post("/generate", json=BODY)
    assert response.status_code == 500
    assert response.json()["category"] == "internal"
    assert "boom" not in response.json()["error"]


# ── File uploads ────────────────────────────────────────────────────────────


def test_upload_picks_first_chat_and_code(client: TestClient, gateway) -> None:
    files = [
        ("files", ("a.py", b"print()", "text/x-python")),
        ("files", ("b.md", b"first chat", "text/markdown")),
        ("files", ("c.txt", b"second chat", "text/plain")),
        ("files", ("d.js", b"first code", "application/javascript")),
    ]
    response = client.post("/generate/files", files=files, data={"mode": "readme"})
    assert response.status_code == 200
    assert response.json() == {"readme": "Built X using Y."}
    prompt = gateway.calls[0][0]
    assert "first chat" in prompt
    assert "first code" in prompt
    assert "second chat" not in prompt


def test_upload_without_code_file_is_bad_input(client: TestClient, gateway) -> None:
    files = [("files", ("chat.md", b"hello", "text/markdown"))]
    response = client.post("/generate/files", files=files)
    assert response.status_code == 400
    assert "one code file" in response.json()["error"]
    assert gateway.calls == []


def test_blank_credential_keeps_service_up(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NVIDIA_API_KEY", "")
    app = create_app()
    with TestClient(app) as test_client:
        assert test_client.get("/health").status_code == 200
        response = test_client.post("/generate", json=BODY)
    assert response.status_code == 500
    assert response.json()["category"] == "config_missing"
