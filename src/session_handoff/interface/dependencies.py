"""FastAPI dependency injection wiring."""

from __future__ import annotations

import logging

from session_handoff.infrastructure.config import get_settings
from session_handoff.infrastructure.openai_adapter import OpenAICompletionAdapter
from session_handoff.services.generate_handoff import GenerateHandoffUseCase
from session_handoff.services.token_count import count_tokens

logger = logging.getLogger(__name__)

_completion_adapter: OpenAICompletionAdapter | None = None
_started = False


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _completion_adapter, _started  # noqa: PLW0603

    settings = get_settings()
    api_key = (
        settings.nvidia_api_key.get_secret_value().strip()
        if settings.nvidia_api_key is not None
        else ""
    )
    if not api_key:
        logger.error(
            "NVIDIA_API_KEY is not set; generation requests will fail until it is configured"
        )
    else:
        _completion_adapter = OpenAICompletionAdapter(
            api_key=api_key,
            model=settings.completion_model,
            base_url=settings.completion_base_url,
            timeout=settings.request_timeout_seconds,
        )
    _started = True


async def shutdown() -> None:
    """Release shared resources."""
    global _completion_adapter, _started  # noqa: PLW0603

    if _completion_adapter:
        await _completion_adapter.close()
        _completion_adapter = None
    _started = False


def get_use_case() -> GenerateHandoffUseCase:
    """Build the use case with the shared adapter injected."""
    assert _started, "startup() was not called"

    settings = get_settings()
    return GenerateHandoffUseCase(
        gateway=_completion_adapter,
        token_counter=count_tokens if settings.count_prompt_tokens else None,
    )
