"""Tests for the startup / shutdown wiring."""

from __future__ import annotations

import pytest

from session_handoff.infrastructure.openai_adapter import OpenAICompletionAdapter
from session_handoff.interface import dependencies
from session_handoff.services.token_count import count_tokens


@pytest.mark.anyio
async def test_startup_without_key_leaves_gateway_unset() -> None:
    await dependencies.startup()
    try:
        use_case = dependencies.get_use_case()
        assert use_case._gateway is None
        assert use_case._count_tokens is count_tokens
    finally:
        await dependencies.shutdown()


@pytest.mark.anyio
async def test_startup_with_key_builds_adapter(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NVIDIA_API_KEY", "nvapi-test")
    monkeypatch.setenv("COUNT_PROMPT_TOKENS", "false")
    await dependencies.startup()
    try:
        use_case = dependencies.get_use_case()
        assert isinstance(use_case._gateway, OpenAICompletionAdapter)
        assert use_case._count_tokens is None
    finally:
        await dependencies.shutdown()
    assert dependencies._completion_adapter is None


def test_get_use_case_requires_startup() -> None:
    with pytest.raises(AssertionError):
        dependencies.get_use_case()


@pytest.mark.anyio
@pytest.mark.parametrize("raw_key", ["", "   "])
async def test_blank_key_is_treated_as_missing(
    monkeypatch: pytest.MonkeyPatch, raw_key: str
) -> None:
    monkeypatch.setenv("NVIDIA_API_KEY", raw_key)
    await dependencies.startup()
    try:
        assert dependencies.get_use_case()._gateway is None
    finally:
        await dependencies.shutdown()
