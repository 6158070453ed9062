"""Generate-handoff use case — the main orchestration pipeline.

This is the single entry point for the business logic.  It depends only on
the :class:`CompletionGateway` port and the pure service modules.  The
interface layer injects the concrete adapter at runtime.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from anyio import to_thread

from session_handoff.domain.entities import (
    CandidateFile,
    GenerationMode,
    GenerationRequest,
    GenerationResult,
)
from session_handoff.domain.exceptions import (
    BadInputError,
    ConfigMissingError,
    UpstreamEmptyError,
)
from session_handoff.domain.ports.completion_gateway import (
    CompletionGateway,
    SamplingParameters,
)
from session_handoff.services.input_classifier import (
    MISSING_FILES_MESSAGE,
    classify,
    rejected_files,
)
from session_handoff.services.prompt_composer import compose

logger = logging.getLogger(__name__)

SUMMARY_MAX_TOKENS = 512
DEFAULT_MAX_TOKENS = 2048


def sampling_for(mode: GenerationMode) -> SamplingParameters:
    """Summaries are capped short; every other mode gets the long cap."""
    if mode is GenerationMode.SUMMARY:
        return SamplingParameters(max_tokens=SUMMARY_MAX_TOKENS)
    return SamplingParameters(max_tokens=DEFAULT_MAX_TOKENS)


def wrap_result(mode: GenerationMode, text: str) -> GenerationResult:
    """Place *text* into the result field that matches *mode*."""
    if mode is GenerationMode.SUMMARY:
        return GenerationResult(summary=text)
    if mode is GenerationMode.CONTINUATION_CONTEXT:
        return GenerationResult(continuation_context=text)
    if mode is GenerationMode.README:
        return GenerationResult(readme=text)
    raise BadInputError(f"Mode '{mode.value}' has no result field.")


class GenerateHandoffUseCase:
    """Orchestrates the (chat, code, mode) → derived artifact pipeline.

    Parameters
    ----------
    gateway:
        Adapter that can send a prompt to the completion service, or
        ``None`` when the service credential is not configured.
    token_counter:
        Optional callable used to log the prompt size.
    """

    def __init__(
        self,
        gateway: CompletionGateway | None,
        token_counter: Callable[[str], int] | None = None,
    ) -> None:
        self._gateway = gateway
        self._count_tokens = token_counter

    # ── Public entry points ─────────────────────────────────────────────

    async def execute(self, request: GenerationRequest) -> GenerationResult:
        """Run the full pipeline and return exactly one populated field."""
        # 1. Validate input before touching configuration or the network
        if not request.chat_text.strip() or not request.code_text.strip():
            raise BadInputError()
        if request.mode is GenerationMode.COMBINED:
            raise BadInputError(
                f"Mode '{request.mode.value}' has no result field."
            )

        # 2. Credential
        if self._gateway is None:
            logger.error("NVIDIA_API_KEY is not set; refusing generation request")
            raise ConfigMissingError()

        # 3. Compose and submit
        prompt = compose(request.mode, request.chat_text, request.code_text)
        params = sampling_for(request.mode)
        prompt_tokens = await self._prompt_tokens(prompt)
        if prompt_tokens is not None:
            logger.info(
                "Generating %s: prompt %d tokens, max_tokens=%d",
                request.mode.value,
                prompt_tokens,
                params.max_tokens,
            )
        else:
            logger.info(
                "Generating %s: max_tokens=%d", request.mode.value, params.max_tokens
            )

        text = await self._gateway.complete(prompt, params)

        # 4. A 2xx with nothing usable is still a failure
        if not text:
            logger.warning("Completion service returned no content for %s", request.mode.value)
            raise UpstreamEmptyError()

        return wrap_result(request.mode, text)

    async def execute_files(
        self, files: Sequence[CandidateFile], mode: GenerationMode
    ) -> GenerationResult:
        """Classify uploaded files, then run :meth:`execute` on the chosen pair."""
        rejected = rejected_files(files)
        if rejected:
            logger.warning(
                "Ignoring %d unsupported upload(s): %s",
                len(rejected),
                ", ".join(f.name for f in rejected),
            )

        selected = classify(files)
        chat, code = selected.chat, selected.code
        if chat is None or code is None:
            raise BadInputError(MISSING_FILES_MESSAGE)

        logger.info("Selected chat=%s code=%s", chat.name, code.name)

        return await self.execute(
            GenerationRequest(chat_text=chat.text(), code_text=code.text(), mode=mode)
        )

    # ── Prompt accounting ───────────────────────────────────────────────

    async def _prompt_tokens(self, prompt: str) -> int | None:
        """Count prompt tokens for the log line; never fails the request."""
        if self._count_tokens is None:
            return None
        try:
            return await to_thread.run_sync(self._count_tokens, prompt)
        except Exception:
            logger.warning("Prompt token counting failed — skipping", exc_info=True)
            return None
