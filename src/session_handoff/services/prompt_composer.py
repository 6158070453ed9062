"""Prompt composition — pick a template by mode and render it."""

from __future__ import annotations

from session_handoff.domain.entities import GenerationMode
from session_handoff.services.prompts import (
    COMBINED_TEMPLATE,
    CONTINUATION_CONTEXT_TEMPLATE,
    README_TEMPLATE,
    SUMMARY_TEMPLATE,
    PromptTemplate,
)

_TEMPLATES: dict[GenerationMode, PromptTemplate] = {
    GenerationMode.SUMMARY: SUMMARY_TEMPLATE,
    GenerationMode.CONTINUATION_CONTEXT: CONTINUATION_CONTEXT_TEMPLATE,
    GenerationMode.README: README_TEMPLATE,
}


def template_for(mode: GenerationMode | str) -> PromptTemplate:
    """Return the template for *mode*; anything unrecognised gets the combined one."""
    try:
        return _TEMPLATES[GenerationMode(mode)]
    except (KeyError, ValueError):
        return COMBINED_TEMPLATE


def compose(mode: GenerationMode | str, chat_text: str, code_text: str) -> str:
    """Render the prompt for *mode* with both bodies interpolated verbatim."""
    return template_for(mode).render(chat_text, code_text)
