from __future__ import annotations

from typing import Callable

import pytest

from session_handoff.domain.entities import CandidateFile
from session_handoff.domain.ports.completion_gateway import SamplingParameters
from session_handoff.infrastructure.config import get_settings


class StubGateway:
    """Records every call and answers with a canned reply (or raises it)."""

    def __init__(self, reply: str | None | Exception = "generated text") -> None:
        self.reply = reply
        self.calls: list[tuple[str, SamplingParameters]] = []

    async def complete(self, prompt: str, params: SamplingParameters) -> str | None:
        self.calls.append((prompt, params))
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def stub_gateway() -> Callable[..., StubGateway]:
    return StubGateway


@pytest.fixture
def make_file() -> Callable[..., CandidateFile]:
    def _make(
        name: str, content: str = "content", content_type: str | None = None
    ) -> CandidateFile:
        return CandidateFile(
            name=name, content=content.encode("utf-8"), content_type=content_type
        )

    return _make


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("NVIDIA_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
