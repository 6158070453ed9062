"""OpenAI-compatible adapter; implements the CompletionGateway port.

The NVIDIA NIM endpoint speaks the OpenAI chat-completions protocol, so the
official ``openai`` client is pointed at it through ``base_url``.
"""

from __future__ import annotations

import logging

import httpx
from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AsyncOpenAI,
    OpenAIError,
)

from session_handoff.domain.exceptions import InternalGenerationError
from session_handoff.domain.ports.completion_gateway import SamplingParameters
from session_handoff.services.upstream_errors import (
    error_for_status,
    error_for_transport_failure,
)

logger = logging.getLogger(__name__)


class OpenAICompletionAdapter:
    """Concrete ``CompletionGateway`` backed by a chat-completions API."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        # max_retries=0: every upstream failure goes straight back to the caller.
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )
        self._model = model

    async def complete(self, prompt: str, params: SamplingParameters) -> str | None:
        """Send *prompt* as a single user turn and return the first choice's text."""
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=params.temperature,
                top_p=params.top_p,
                max_tokens=params.max_tokens,
                stream=False,
            )

        except APIStatusError as exc:
            logger.error(
                "Completion API error: %s %s", exc.status_code, exc.response.text
            )
            raise error_for_status(exc.status_code) from exc

        except APITimeoutError as exc:
            logger.error("Completion API timed out: %s", exc)
            raise error_for_transport_failure(timed_out=True) from exc

        except APIConnectionError as exc:
            logger.error("Completion API unreachable: %s", exc)
            raise error_for_transport_failure() from exc

        except OpenAIError as exc:
            logger.exception("Completion API call failed")
            raise InternalGenerationError() from exc

        # Bodies are not validated by the client; a missing key is "no content".
        choices = getattr(response, "choices", None)
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None)

    async def close(self) -> None:
        """Release underlying HTTP resources."""
        await self._client.close()
