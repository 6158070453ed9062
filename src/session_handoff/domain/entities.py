"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from session_handoff.domain.exceptions import BadInputError


class FileCategory(str, Enum):
    """Classification bucket for an uploaded file."""

    CHAT = "chat"
    CODE = "code"
    UNRECOGNIZED = "unrecognized"


class GenerationMode(str, Enum):
    """Which derived artifact is being requested."""

    SUMMARY = "summary"
    CONTINUATION_CONTEXT = "continuation-context"
    README = "readme"
    # Default template only; never produced by ``GenerationMode.parse``.
    COMBINED = "combined"

    @classmethod
    def parse(cls, value: str | None) -> GenerationMode:
        """Parse an inbound mode string.

        ``None`` or an empty string means :attr:`SUMMARY`.  The legacy name
        ``cursor`` is accepted for :attr:`CONTINUATION_CONTEXT`.  Anything
        else, ``combined`` included, raises :class:`BadInputError`.
        """
        normalized = (value or "").strip().lower()
        if not normalized:
            return cls.SUMMARY
        if normalized in _MODE_ALIASES:
            return _MODE_ALIASES[normalized]
        raise BadInputError(
            f"Unsupported mode '{value}'. "
            "Expected one of: summary, continuation-context, readme."
        )


_MODE_ALIASES: dict[str, GenerationMode] = {
    "summary": GenerationMode.SUMMARY,
    "continuation-context": GenerationMode.CONTINUATION_CONTEXT,
    "continuation_context": GenerationMode.CONTINUATION_CONTEXT,
    "cursor": GenerationMode.CONTINUATION_CONTEXT,
    "readme": GenerationMode.README,
}


@dataclass(frozen=True, slots=True)
class CandidateFile:
    """An uploaded file, alive only for the duration of one request."""

    name: str
    content: bytes
    content_type: str | None = None

    @property
    def extension(self) -> str:
        """Lower-cased suffix after the last ``.``, or ``""`` when there is none."""
        _, dot, suffix = self.name.rpartition(".")
        return suffix.lower() if dot else ""

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    def text(self) -> str:
        """Decode the payload as UTF-8, replacing undecodable bytes."""
        return self.content.decode("utf-8", errors="replace")


@dataclass(frozen=True, slots=True)
class ClassifiedFiles:
    """The chat / code pair picked out of a candidate list."""

    chat: CandidateFile | None = None
    code: CandidateFile | None = None

    @property
    def has_required_files(self) -> bool:
        return self.chat is not None and self.code is not None


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """One generation call: two text bodies plus the requested mode."""

    chat_text: str
    code_text: str
    mode: GenerationMode = GenerationMode.SUMMARY


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """The final output; at most one field is populated, keyed by mode."""

    summary: str | None = None
    continuation_context: str | None = None
    readme: str | None = None
