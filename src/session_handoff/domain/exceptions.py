"""Domain exception hierarchy.

Every failure a caller can see is a :class:`ClassifiedError`: a short,
user-safe message plus an :class:`ErrorCategory`.  Inner layers raise these;
the interface layer translates the category to an HTTP status code.
Server-side detail (upstream bodies, missing settings) goes to the log,
never into ``user_message``.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """User-facing failure buckets."""

    BAD_INPUT = "bad_input"
    CONFIG_MISSING = "config_missing"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_EMPTY = "upstream_empty"
    INTERNAL = "internal"


class ClassifiedError(Exception):
    """Base exception for the entire application."""

    category: ErrorCategory = ErrorCategory.INTERNAL
    default_message: str = "Failed to generate content"

    def __init__(self, user_message: str | None = None) -> None:
        self.user_message = user_message or self.default_message
        super().__init__(self.user_message)


# ── Caller errors ───────────────────────────────────────────────────────────


class BadInputError(ClassifiedError):
    """The caller supplied insufficient or invalid input."""

    category = ErrorCategory.BAD_INPUT
    default_message = "Both chat and code text are required"


# ── Deployment errors ───────────────────────────────────────────────────────


class ConfigMissingError(ClassifiedError):
    """A required setting (the completion-service credential) is absent."""

    category = ErrorCategory.CONFIG_MISSING
    default_message = "Server configuration error: API key not found"


# ── Completion-service errors ───────────────────────────────────────────────


class UpstreamUnauthorizedError(ClassifiedError):
    """The completion service rejected the credential (401)."""

    category = ErrorCategory.UNAUTHORIZED
    default_message = "Invalid API key"


class UpstreamRateLimitError(ClassifiedError):
    """The completion service is throttling us (429)."""

    category = ErrorCategory.RATE_LIMITED
    default_message = "Rate limit exceeded. Please try again later."


class UpstreamUnavailableError(ClassifiedError):
    """The completion service failed (5xx) or could not be reached."""

    category = ErrorCategory.UPSTREAM_UNAVAILABLE
    default_message = "Completion service unavailable"


class UpstreamEmptyError(ClassifiedError):
    """The completion service answered 2xx but produced no text."""

    category = ErrorCategory.UPSTREAM_EMPTY
    default_message = "No content generated from AI"


# ── Everything else ─────────────────────────────────────────────────────────


class InternalGenerationError(ClassifiedError):
    """Any failure that fits no other category."""

    category = ErrorCategory.INTERNAL
