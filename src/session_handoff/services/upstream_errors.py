"""Map completion-service failures to user-facing errors."""

from __future__ import annotations

from session_handoff.domain.exceptions import (
    ClassifiedError,
    InternalGenerationError,
    UpstreamRateLimitError,
    UpstreamUnauthorizedError,
    UpstreamUnavailableError,
)

_STATUS_ERRORS: dict[int, type[ClassifiedError]] = {
    401: UpstreamUnauthorizedError,
    429: UpstreamRateLimitError,
}


def error_for_status(status_code: int) -> ClassifiedError:
    """Map a non-2xx upstream status to the exception the caller should see.

    401 is Unauthorized, 429 is RateLimited, anything >= 500 is
    UpstreamUnavailable, and every other status is a generic Internal failure.
    """
    exc_type = _STATUS_ERRORS.get(status_code)
    if exc_type is not None:
        return exc_type()
    if status_code >= 500:
        return UpstreamUnavailableError()
    return InternalGenerationError()


def error_for_transport_failure(*, timed_out: bool = False) -> ClassifiedError:
    """The request never produced an HTTP response."""
    if timed_out:
        return UpstreamUnavailableError("Completion service timed out")
    return UpstreamUnavailableError()
