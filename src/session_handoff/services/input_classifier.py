"""Input classification: decide which uploaded files are chat logs and which are code."""

from __future__ import annotations

from typing import Sequence

from session_handoff.domain.entities import CandidateFile, ClassifiedFiles, FileCategory

CHAT_EXTENSIONS: frozenset[str] = frozenset({"md", "txt"})

CODE_EXTENSIONS: frozenset[str] = frozenset({"js", "ts"})

ACCEPTED_MIME_TYPES: frozenset[str] = frozenset(
    {
        "text/markdown",
        "text/plain",
        "text/javascript",
        "application/javascript",
    }
)

MISSING_FILES_MESSAGE = (
    "Please upload at least one chat file (.md or .txt) "
    "and one code file (.js or .ts)."
)


def category_for(file: CandidateFile) -> FileCategory:
    """Assign a :class:`FileCategory` from the file extension alone."""
    ext = file.extension
    if ext in CHAT_EXTENSIONS:
        return FileCategory.CHAT
    if ext in CODE_EXTENSIONS:
        return FileCategory.CODE
    return FileCategory.UNRECOGNIZED


def is_accepted(file: CandidateFile) -> bool:
    """Return *True* if the upload passes the extension or MIME allow-list.

    The MIME check can accept a file whose category is still
    ``UNRECOGNIZED``; such a file is kept but never selected.
    """
    if category_for(file) is not FileCategory.UNRECOGNIZED:
        return True
    mime = (file.content_type or "").split(";", maxsplit=1)[0].strip().lower()
    return mime in ACCEPTED_MIME_TYPES


def rejected_files(files: Sequence[CandidateFile]) -> list[CandidateFile]:
    """Return the files that fail :func:`is_accepted`, in input order."""
    return [f for f in files if not is_accepted(f)]


def classify(files: Sequence[CandidateFile]) -> ClassifiedFiles:
    """Pick the first chat file and the first code file, in caller order."""
    chat: CandidateFile | None = None
    code: CandidateFile | None = None
    for file in files:
        category = category_for(file)
        if category is FileCategory.CHAT and chat is None:
            chat = file
        elif category is FileCategory.CODE and code is None:
            code = file
        if chat is not None and code is not None:
            break
    return ClassifiedFiles(chat=chat, code=code)
