"""Prompt token accounting.

Uses ``tiktoken`` for counting only; prompts are never cut to fit.
"""

from __future__ import annotations

import tiktoken

_ENCODING_NAME = "cl100k_base"

_encoder: tiktoken.Encoding | None = None


def _get_encoder() -> tiktoken.Encoding:
    global _encoder  # noqa: PLW0603
    if _encoder is None:
        _encoder = tiktoken.get_encoding(_ENCODING_NAME)
    return _encoder


def count_tokens(text: str) -> int:
    """Return the token count for *text* under cl100k_base."""
    return len(_get_encoder().encode(text, disallowed_special=()))
