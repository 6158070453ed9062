"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from session_handoff.domain.entities import GenerationResult


class GenerateRequest(BaseModel):
    """Request body for ``POST /generate``.

    ``markdown`` / ``code`` / ``type`` are accepted as older spellings of
    ``chatText`` / ``codeText`` / ``mode``.  Empty texts are let through
    here and rejected by the use case.
    """

    chat_text: str = Field(
        default="", validation_alias=AliasChoices("chatText", "chat_text", "markdown")
    )
    code_text: str = Field(
        default="", validation_alias=AliasChoices("codeText", "code_text", "code")
    )
    mode: str | None = Field(
        default="summary", validation_alias=AliasChoices("mode", "type")
    )


class GenerateResponse(BaseModel):
    """Successful response; exactly one field is present."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str | None = None
    continuation_context: str | None = Field(default=None, alias="continuationContext")
    readme: str | None = None

    @classmethod
    def from_result(cls, result: GenerationResult) -> GenerateResponse:
        return cls(
            summary=result.summary,
            continuation_context=result.continuation_context,
            readme=result.readme,
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    error: str
    category: str
